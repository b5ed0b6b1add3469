"""
Display Enums

Tagged values for the table's display knobs, plus the decoders that turn the
raw option values (booleans, strings) into them. Raw values never travel
past these decoders.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Union


class ShowHead(Enum):
    """When the head rows are drawn."""
    EVERY_PAGE = "everyPage"
    FIRST_PAGE = "firstPage"
    NEVER = "never"


class ShowFoot(Enum):
    """When the foot rows are drawn."""
    EVERY_PAGE = "everyPage"
    LAST_PAGE = "lastPage"
    NEVER = "never"


class Theme(Enum):
    """Built-in table theme."""
    STRIPED = "striped"
    GRID = "grid"
    PLAIN = "plain"


class PageBreak(Enum):
    """Whether the table may start on the current page."""
    AUTO = "auto"       # Start here, break where needed
    AVOID = "avoid"     # Move to a new page if the table would be split
    ALWAYS = "always"   # Always start on a new page


class RowPageBreak(Enum):
    """Whether a single row may be split across pages."""
    AUTO = "auto"
    AVOID = "avoid"


class TableWidth(Enum):
    """Symbolic table widths; a number is used as-is."""
    AUTO = "auto"
    WRAP = "wrap"


def decode_show_head(value: Any) -> ShowHead:
    """
    Decode showHead: True is everyPage, False is never, unset is everyPage.
    """
    if value is True:
        return ShowHead.EVERY_PAGE
    if value is False:
        return ShowHead.NEVER
    if value is None:
        return ShowHead.EVERY_PAGE
    return ShowHead(value)


def decode_show_foot(value: Any) -> ShowFoot:
    """
    Decode showFoot: True is everyPage, False is never, unset is everyPage.
    """
    if value is True:
        return ShowFoot.EVERY_PAGE
    if value is False:
        return ShowFoot.NEVER
    if value is None:
        return ShowFoot.EVERY_PAGE
    return ShowFoot(value)


def decode_theme(value: Any, use_css: bool) -> Theme:
    """Explicit theme, else plain for CSS-styled tables, else striped."""
    if value:
        return Theme(value)
    return Theme.PLAIN if use_css else Theme.STRIPED


def decode_table_width(value: Any) -> Union[TableWidth, float]:
    """'auto'/'wrap' become TableWidth, numbers pass through."""
    if value is None:
        return TableWidth.AUTO
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return TableWidth(value)
