"""
Tests for display enums and settings resolution.

Run with: pytest tests/ -v
"""

import pytest
from pathlib import Path
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tablespec.options.margins import MarginPadding
from tablespec.session import PreviousTable, SessionSnapshot
from tablespec.settings.display import (
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
from tablespec.settings.resolver import (
    CONTINUATION_GAP,
    DEFAULT_MARGIN,
    resolve_settings,
    resolve_start_y,
)


class TestDisplayDecoders:
    """Tests for tri-state display flags."""

    def test_show_head_true(self):
        assert decode_show_head(True) is ShowHead.EVERY_PAGE

    def test_show_head_false(self):
        assert decode_show_head(False) is ShowHead.NEVER

    def test_show_head_unset(self):
        assert decode_show_head(None) is ShowHead.EVERY_PAGE

    def test_show_head_enum_value(self):
        assert decode_show_head('firstPage') is ShowHead.FIRST_PAGE

    def test_show_foot(self):
        assert decode_show_foot(True) is ShowFoot.EVERY_PAGE
        assert decode_show_foot(False) is ShowFoot.NEVER
        assert decode_show_foot(None) is ShowFoot.EVERY_PAGE
        assert decode_show_foot('lastPage') is ShowFoot.LAST_PAGE

    def test_show_foot_rejects_head_value(self):
        with pytest.raises(ValueError):
            decode_show_foot('firstPage')

    def test_theme(self):
        assert decode_theme('grid', use_css=True) is Theme.GRID
        assert decode_theme(None, use_css=True) is Theme.PLAIN
        assert decode_theme(None, use_css=False) is Theme.STRIPED

    def test_table_width(self):
        assert decode_table_width(None) is TableWidth.AUTO
        assert decode_table_width('wrap') is TableWidth.WRAP
        assert decode_table_width(250) == 250


class TestResolveStartY:
    """Tests for vertical start position and continuation."""

    def test_continues_below_previous_table(self):
        previous = PreviousTable(start_page_number=1, page_number=1, final_y=300)
        start_y = resolve_start_y(previous, 2.0, 1, None, 15)
        assert start_y == 300 + 20 / 2.0

    def test_scale_factor_applied(self):
        previous = PreviousTable(1, 1, 300)
        sf = 72 / 25.4
        assert resolve_start_y(previous, sf, 1, None, 15) == pytest.approx(300 + CONTINUATION_GAP / sf)

    def test_different_page_uses_margin(self):
        previous = PreviousTable(start_page_number=1, page_number=1, final_y=300)
        assert resolve_start_y(previous, 1.0, 2, None, 40) == 40

    def test_multi_page_previous_table(self):
        previous = PreviousTable(start_page_number=2, page_number=3, final_y=120)
        assert previous.ending_page == 4
        assert resolve_start_y(previous, 1.0, 4, None, 40) == 140
        assert resolve_start_y(previous, 1.0, 2, None, 40) == 40

    def test_explicit_start_y_wins(self):
        previous = PreviousTable(1, 1, 300)
        assert resolve_start_y(previous, 1.0, 1, 50, 40) == 50

    def test_false_start_y_is_unset(self):
        previous = PreviousTable(1, 1, 300)
        assert resolve_start_y(previous, 1.0, 1, False, 40) == 320

    def test_zero_start_y_uses_margin(self):
        previous = PreviousTable(1, 1, 300)
        assert resolve_start_y(previous, 1.0, 1, 0, 40) == 40

    def test_no_previous_table(self):
        assert resolve_start_y(None, 1.0, 1, None, 40) == 40


class TestResolveSettings:
    """Tests for the full settings record."""

    def setup_method(self):
        self.snapshot = SessionSnapshot(page_number=1, scale_factor=2.0)

    def test_defaults(self):
        settings = resolve_settings({}, self.snapshot)
        default_margin = DEFAULT_MARGIN / 2.0
        assert settings.margin == MarginPadding(
            default_margin, default_margin, default_margin, default_margin
        )
        assert settings.start_y == default_margin
        assert settings.theme is Theme.STRIPED
        assert settings.page_break is PageBreak.AUTO
        assert settings.row_page_break is RowPageBreak.AUTO
        assert settings.table_width is TableWidth.AUTO
        assert settings.show_head is ShowHead.EVERY_PAGE
        assert settings.show_foot is ShowFoot.EVERY_PAGE
        assert settings.table_line_width == 0
        assert settings.table_line_color == 200
        assert settings.include_hidden_html is False
        assert settings.use_css is False

    def test_caller_values(self):
        settings = resolve_settings(
            {
                'pageBreak': 'avoid',
                'rowPageBreak': 'avoid',
                'tableWidth': 'wrap',
                'tableLineWidth': 0.5,
                'tableLineColor': [0, 0, 0],
                'includeHiddenHtml': True,
                'useCss': True,
                'showHead': 'firstPage',
                'showFoot': False,
                'margin': {'top': 10},
            },
            self.snapshot,
        )
        assert settings.page_break is PageBreak.AVOID
        assert settings.row_page_break is RowPageBreak.AVOID
        assert settings.table_width is TableWidth.WRAP
        assert settings.table_line_width == 0.5
        assert settings.table_line_color == [0, 0, 0]
        assert settings.include_hidden_html is True
        assert settings.theme is Theme.PLAIN
        assert settings.show_head is ShowHead.FIRST_PAGE
        assert settings.show_foot is ShowFoot.NEVER
        assert settings.margin.top == 10
        assert settings.start_y == 10

    def test_continuation_from_snapshot(self):
        snapshot = SessionSnapshot(
            page_number=1,
            scale_factor=2.0,
            previous_table=PreviousTable(1, 1, 300),
        )
        settings = resolve_settings({}, snapshot)
        assert settings.start_y == 310

    def test_to_dict(self):
        settings = resolve_settings({'showHead': False, 'tableWidth': 100}, self.snapshot)
        data = settings.to_dict()
        assert data['showHead'] == 'never'
        assert data['showFoot'] == 'everyPage'
        assert data['theme'] == 'striped'
        assert data['tableWidth'] == 100
        assert data['margin'] == {'top': 20, 'right': 20, 'bottom': 20, 'left': 20}
