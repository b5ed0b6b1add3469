"""
Settings Resolution

Turns the merged option bag into concrete table settings: display enums,
theme, page-break behavior, margins and the vertical start position.

Start position rules:
1. An explicit ``startY`` wins
2. If the previous table in the session ended on the current page, the new
   table starts just below it, so consecutive unpositioned tables do not
   overlap
3. Otherwise the table starts at the top margin
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from loguru import logger

from ..options.margins import MarginPadding, margin_or_padding
from ..session import PreviousTable, SessionSnapshot
from .display import (
    PageBreak,
    RowPageBreak,
    ShowFoot,
    ShowHead,
    TableWidth,
    Theme,
    decode_show_foot,
    decode_show_head,
    decode_table_width,
    decode_theme,
)

# Both in points; divided by the scale factor to get document units
DEFAULT_MARGIN = 40
CONTINUATION_GAP = 20

DEFAULT_TABLE_LINE_WIDTH = 0
DEFAULT_TABLE_LINE_COLOR = 200


@dataclass(frozen=True)
class Settings:
    """Fully resolved table settings."""
    include_hidden_html: bool
    use_css: bool
    theme: Theme
    start_y: float
    margin: MarginPadding
    page_break: PageBreak
    row_page_break: RowPageBreak
    table_width: Union[TableWidth, float]
    show_head: ShowHead
    show_foot: ShowFoot
    table_line_width: float
    table_line_color: Any

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the renderer's camelCase shape."""
        table_width = self.table_width
        if isinstance(table_width, TableWidth):
            table_width = table_width.value
        return {
            'includeHiddenHtml': self.include_hidden_html,
            'useCss': self.use_css,
            'theme': self.theme.value,
            'startY': self.start_y,
            'margin': self.margin.to_dict(),
            'pageBreak': self.page_break.value,
            'rowPageBreak': self.row_page_break.value,
            'tableWidth': table_width,
            'showHead': self.show_head.value,
            'showFoot': self.show_foot.value,
            'tableLineWidth': self.table_line_width,
            'tableLineColor': self.table_line_color,
        }


def _option(options: Mapping[str, Any], key: str, default: Any) -> Any:
    value = options.get(key)
    return default if value is None else value


def resolve_start_y(
    previous: Optional[PreviousTable],
    scale_factor: float,
    current_page: int,
    start_y: Any,
    margin_top: float,
) -> float:
    """
    Vertical position the table starts at.

    Args:
        previous: Last finished table of the session, if any
        scale_factor: Device units per document unit
        current_page: Page rendering is positioned on
        start_y: Caller's ``startY`` (None or False when unset)
        margin_top: Resolved top margin

    Returns:
        Start position in document units
    """
    if start_y is None or start_y is False:
        if previous is not None and previous.ending_page == current_page:
            start_y = previous.final_y + CONTINUATION_GAP / scale_factor
            logger.debug(
                f"Continuing below previous table on page {current_page} at y={start_y}"
            )
    return start_y or margin_top


def resolve_settings(options: Mapping[str, Any], snapshot: SessionSnapshot) -> Settings:
    """
    Resolve all settings from merged options and a session snapshot.

    Args:
        options: Merged option bag
        snapshot: Session state read at the start of the call

    Returns:
        Settings with no unset fields
    """
    sf = snapshot.scale_factor
    margin = margin_or_padding(options.get('margin'), DEFAULT_MARGIN / sf)
    start_y = resolve_start_y(
        snapshot.previous_table,
        sf,
        snapshot.page_number,
        options.get('startY'),
        margin.top,
    )

    use_css = bool(_option(options, 'useCss', False))

    return Settings(
        include_hidden_html=bool(_option(options, 'includeHiddenHtml', False)),
        use_css=use_css,
        theme=decode_theme(options.get('theme'), use_css),
        start_y=start_y,
        margin=margin,
        page_break=PageBreak(_option(options, 'pageBreak', 'auto')),
        row_page_break=RowPageBreak(_option(options, 'rowPageBreak', 'auto')),
        table_width=decode_table_width(options.get('tableWidth')),
        show_head=decode_show_head(options.get('showHead')),
        show_foot=decode_show_foot(options.get('showFoot')),
        table_line_width=_option(options, 'tableLineWidth', DEFAULT_TABLE_LINE_WIDTH),
        table_line_color=_option(options, 'tableLineColor', DEFAULT_TABLE_LINE_COLOR),
    )
