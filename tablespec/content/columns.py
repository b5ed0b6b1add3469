"""
Column Inference

Derives the column list of a table. Explicit column declarations are
normalized as given; otherwise the columns are inferred from the shape of
the first available content row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from loguru import logger

from .rows import ELEMENT_KEY, KeyedRow, Row, as_row

DataKey = Union[int, str]


@dataclass(frozen=True)
class ColumnDefinition:
    """
    A column of the resolved table.

    ``data_key`` projects the column's value out of every row: a position
    for list rows, a field name for mapping rows.
    """
    data_key: DataKey
    header: Any = None
    footer: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result: Dict[str, Any] = {'dataKey': self.data_key}
        if self.header is not None:
            result['header'] = self.header
        if self.footer is not None:
            result['footer'] = self.footer
        return result


def _column_key(raw: Any, index: int) -> DataKey:
    if isinstance(raw, ColumnDefinition):
        return raw.data_key
    if isinstance(raw, Mapping):
        for key in ('dataKey', 'key'):
            if raw.get(key) is not None:
                return raw[key]
    return index


def column_data_keys(raw_columns: Sequence[Any]) -> List[DataKey]:
    """dataKeys an explicit ``columns`` declaration resolves to."""
    return [_column_key(raw, i) for i, raw in enumerate(raw_columns)]


def normalize_columns(raw_columns: Sequence[Any]) -> List[ColumnDefinition]:
    """
    Normalize an explicit ``columns`` declaration.

    Mapping entries read ``dataKey`` (or ``key``), ``header`` (or ``title``)
    and ``footer``. Any other entry is taken as the header of a column keyed
    by its position.
    """
    columns = []
    for index, raw in enumerate(raw_columns):
        if isinstance(raw, ColumnDefinition):
            columns.append(raw)
        elif isinstance(raw, Mapping):
            header = raw.get('header')
            if header is None:
                header = raw.get('title')
            columns.append(ColumnDefinition(
                data_key=_column_key(raw, index),
                header=header,
                footer=raw.get('footer'),
            ))
        else:
            columns.append(ColumnDefinition(data_key=index, header=raw))
    return columns


def _template_row(*sections: Sequence[Any]) -> Optional[Row]:
    for section in sections:
        if section:
            return as_row(section[0])
    return None


def infer_columns(
    head: Sequence[Any],
    body: Sequence[Any],
    foot: Sequence[Any],
) -> List[ColumnDefinition]:
    """
    Infer columns from the first row of head, body or foot (in that order).

    Positional rows yield integer dataKeys, one per column slot, so a cell
    with ``colSpan = n`` contributes ``n`` consecutive keys. Keyed rows yield
    the field names; a field spanning ``n`` slots yields ``name``,
    ``name_1`` ... ``name_{n-1}``.

    Returns:
        Column list, empty when there is no content at all
    """
    template = _template_row(head, body, foot)
    if template is None:
        return []

    columns: List[ColumnDefinition] = []
    for slot in template.slots():
        if slot == ELEMENT_KEY:
            continue
        for i in range(template.span(slot)):
            if isinstance(template, KeyedRow):
                data_key: DataKey = f"{slot}_{i}" if i > 0 else slot
            else:
                data_key = len(columns)
            columns.append(ColumnDefinition(data_key=data_key))

    logger.debug(f"Inferred {len(columns)} columns from first row")
    return columns
