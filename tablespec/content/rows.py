"""
Row Model

Table content arrives either as positional rows (lists, spreadsheet-like) or
keyed rows (mappings, record-like). Both are wrapped once at ingestion into a
small closed variant so the rest of the package never branches on raw shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Union

# Reserved field tagging markup-sourced rows/cells with their source element
ELEMENT_KEY = '_element'

RowKey = Union[int, str]


def cell_span(cell: Any) -> int:
    """
    Number of column slots a cell occupies.

    Only cell descriptors (mappings) carry a span; scalars and missing or
    non-positive ``colSpan`` values count as 1.
    """
    if isinstance(cell, Mapping):
        span = cell.get('colSpan') or 1
        try:
            span = int(span)
        except (TypeError, ValueError):
            return 1
        return max(span, 1)
    return 1


@dataclass
class PositionalRow:
    """
    A row whose cells are projected by zero-based position.
    """
    cells: List[Any] = field(default_factory=list)
    element: Any = None

    def slots(self) -> List[int]:
        """Projection keys, in order."""
        return list(range(len(self.cells)))

    def get(self, key: int, default: Any = None) -> Any:
        """Get cell by position."""
        if isinstance(key, int) and 0 <= key < len(self.cells):
            return self.cells[key]
        return default

    def span(self, key: int) -> int:
        """Column span of the cell at ``key``."""
        return cell_span(self.get(key))

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.cells)

    def to_raw(self, include_element: bool = False) -> Any:
        """Convert back to the plain list shape."""
        return [_raw_cell(c, include_element) for c in self.cells]


@dataclass
class KeyedRow:
    """
    A row whose cells are projected by field name.

    The reserved ``_element`` field is split off into ``element`` at
    ingestion and never appears among the slots.
    """
    fields: Dict[str, Any] = field(default_factory=dict)
    element: Any = None

    def slots(self) -> List[str]:
        """Field names in first-seen order."""
        return list(self.fields.keys())

    def get(self, key: str, default: Any = None) -> Any:
        """Get cell by field name."""
        return self.fields.get(key, default)

    def span(self, key: str) -> int:
        """Column span of the cell under ``key``."""
        return cell_span(self.get(key))

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.fields.values())

    def to_raw(self, include_element: bool = False) -> Any:
        """Convert back to the plain mapping shape."""
        raw = {k: _raw_cell(v, include_element) for k, v in self.fields.items()}
        if include_element and self.element is not None:
            raw[ELEMENT_KEY] = self.element
        return raw


Row = Union[PositionalRow, KeyedRow]


def _raw_cell(cell: Any, include_element: bool) -> Any:
    if include_element or not isinstance(cell, Mapping) or ELEMENT_KEY not in cell:
        return cell
    return {k: v for k, v in cell.items() if k != ELEMENT_KEY}


def as_row(raw: Any) -> Row:
    """
    Wrap a raw row in the row variant.

    Args:
        raw: A list/tuple of cells, a mapping of field name to cell, or an
            already wrapped row

    Returns:
        PositionalRow or KeyedRow

    Raises:
        TypeError: If ``raw`` is neither shape
    """
    if isinstance(raw, (PositionalRow, KeyedRow)):
        return raw
    if isinstance(raw, Mapping):
        fields = {k: v for k, v in raw.items() if k != ELEMENT_KEY}
        return KeyedRow(fields=fields, element=raw.get(ELEMENT_KEY))
    if isinstance(raw, (list, tuple)):
        return PositionalRow(cells=list(raw), element=getattr(raw, 'element', None))
    raise TypeError(f"Row must be a list or a mapping, got {type(raw).__name__}")


def as_rows(raw_rows: Optional[Sequence[Any]]) -> List[Row]:
    """Wrap every row of a section; ``None`` becomes an empty section."""
    if not raw_rows:
        return []
    return [as_row(r) for r in raw_rows]
