"""
Document Session

State a table call reads from its surroundings: the process-wide option
defaults, the per-document defaults, where rendering currently is and how
the previous table in the same document ended.

The renderer owns the mutations (recording a finished table, moving to a new
page). Table resolution only ever reads a frozen snapshot.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .content.markup import MarkupSurface

_global_defaults: Dict[str, Any] = {}


def set_global_defaults(options: Optional[Mapping[str, Any]]) -> None:
    """Set the process-wide default options (lowest precedence layer)."""
    global _global_defaults
    _global_defaults = dict(options or {})


def get_global_defaults() -> Dict[str, Any]:
    """Get a copy of the process-wide default options."""
    return dict(_global_defaults)


def reset_global_defaults() -> None:
    """Clear the process-wide default options."""
    set_global_defaults(None)


@dataclass(frozen=True)
class PreviousTable:
    """
    How the last table drawn in this document ended.
    """
    start_page_number: int
    page_number: int        # Pages the table spanned
    final_y: float          # Vertical offset below the table's last row

    @property
    def ending_page(self) -> int:
        """Page the table finished on."""
        return self.start_page_number + self.page_number - 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'startPageNumber': self.start_page_number,
            'pageNumber': self.page_number,
            'finalY': self.final_y,
        }


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the session taken at the start of a table call."""
    page_number: int
    scale_factor: float
    previous_table: Optional[PreviousTable] = None


class DocumentSession:
    """
    Accessor for one document-generation session.

    Usage:
        session = DocumentSession(page_number=1, scale_factor=72 / 25.4)
        session.set_document_defaults({'theme': 'grid'})
        table = parse_input(session, {'body': rows})
        ...
        session.record_table(PreviousTable(1, 1, final_y=142.0))
    """

    def __init__(
        self,
        page_number: int = 1,
        scale_factor: float = 1.0,
        document_options: Optional[Mapping[str, Any]] = None,
        previous_table: Optional[PreviousTable] = None,
        surface: Optional[MarkupSurface] = None,
    ):
        """
        Initialize session.

        Args:
            page_number: Page rendering is currently positioned on (1-indexed)
            scale_factor: Device units per document unit
            document_options: Per-document default options
            previous_table: Snapshot of the last finished table
            surface: Markup surface for scraping HTML tables, if any
        """
        if scale_factor <= 0:
            raise ValueError(f"scale_factor must be positive, got {scale_factor}")

        self.page_number = page_number
        self.scale_factor = scale_factor
        self.surface = surface
        self._document_options: Dict[str, Any] = dict(document_options or {})
        self._previous_table = previous_table
        self._lock = threading.Lock()

    @property
    def previous_table(self) -> Optional[PreviousTable]:
        """Last finished table, if any."""
        return self._previous_table

    def get_global_options(self) -> Dict[str, Any]:
        """Process-wide default options."""
        return get_global_defaults()

    def get_document_options(self) -> Dict[str, Any]:
        """Per-document default options."""
        return dict(self._document_options)

    def set_document_defaults(self, options: Optional[Mapping[str, Any]]) -> None:
        """Replace the per-document default options."""
        self._document_options = dict(options or {})

    def record_table(self, table: PreviousTable) -> None:
        """Record a finished table so the next one can continue below it."""
        with self._lock:
            self._previous_table = table
            self.page_number = table.ending_page

    def add_page(self) -> int:
        """Move rendering to a new page and return its number."""
        with self._lock:
            self.page_number += 1
            return self.page_number

    def snapshot(self) -> SessionSnapshot:
        """Consistent view of page, scale factor and previous table."""
        with self._lock:
            return SessionSnapshot(
                page_number=self.page_number,
                scale_factor=self.scale_factor,
                previous_table=self._previous_table,
            )
