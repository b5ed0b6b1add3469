"""
Settings Package

Display enums and the resolver producing concrete table settings.
"""

from .display import (
    ShowHead,
    ShowFoot,
    Theme,
    PageBreak,
    RowPageBreak,
    TableWidth,
    decode_show_head,
    decode_show_foot,
    decode_theme,
    decode_table_width,
)
from .resolver import (
    Settings,
    resolve_settings,
    resolve_start_y,
    DEFAULT_MARGIN,
    CONTINUATION_GAP,
)

__all__ = [
    'ShowHead',
    'ShowFoot',
    'Theme',
    'PageBreak',
    'RowPageBreak',
    'TableWidth',
    'decode_show_head',
    'decode_show_foot',
    'decode_theme',
    'decode_table_width',
    'Settings',
    'resolve_settings',
    'resolve_start_y',
    'DEFAULT_MARGIN',
    'CONTINUATION_GAP',
]
