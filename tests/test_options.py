"""
Tests for option layers: merging, margins, validation and YAML loading.

Run with: pytest tests/ -v
"""

import pytest
from pathlib import Path
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tablespec.options.merger import merge_options, merge_mappings, layer_value
from tablespec.options.margins import MarginPadding, margin_or_padding
from tablespec.options.validators import (
    OptionsValidationError,
    validate_layer,
    validate_options,
)
from tablespec.options.loader import OptionsLoader, OptionsLoadError
from tablespec.content.columns import ColumnDefinition


class TestMergeOptions:
    """Tests for three-way option precedence."""

    def test_call_layer_wins(self):
        merged = merge_options(
            {'theme': 'grid'},
            {'theme': 'plain'},
            {'theme': 'striped'},
        )
        assert merged['theme'] == 'striped'

    def test_document_beats_global(self):
        merged = merge_options({'pageBreak': 'auto'}, {'pageBreak': 'avoid'}, {})
        assert merged['pageBreak'] == 'avoid'

    def test_absent_does_not_override(self):
        merged = merge_options({'startY': 100}, {}, {'startY': None})
        assert merged['startY'] == 100

    def test_falsy_values_override(self):
        merged = merge_options({'showHead': True}, {}, {'showHead': False})
        assert merged['showHead'] is False

    def test_zero_overrides(self):
        merged = merge_options({'tableLineWidth': 2}, {}, {'tableLineWidth': 0})
        assert merged['tableLineWidth'] == 0

    def test_missing_layers_skipped(self):
        merged = merge_options(None, {'theme': 'grid'}, None)
        assert merged == {'theme': 'grid'}

    def test_inputs_not_mutated(self):
        global_layer = {'theme': 'grid'}
        call_layer = {'theme': 'plain', 'startY': None}
        merge_options(global_layer, {}, call_layer)
        assert global_layer == {'theme': 'grid'}
        assert call_layer == {'theme': 'plain', 'startY': None}

    def test_merge_mappings_is_shallow(self):
        merged = merge_mappings(
            {0: {'fontSize': 8, 'halign': 'left'}},
            {0: {'fontSize': 10}},
        )
        assert merged == {0: {'fontSize': 10}}

    def test_layer_value(self):
        assert layer_value(None, 'styles', {}) == {}
        assert layer_value({'styles': None}, 'styles', {}) == {}
        assert layer_value({'styles': {'a': 1}}, 'styles', {}) == {'a': 1}


class TestMarginOrPadding:
    """Tests for margin/padding normalization."""

    def test_none_uses_default(self):
        assert margin_or_padding(None, 10) == MarginPadding(10, 10, 10, 10)

    def test_number(self):
        assert margin_or_padding(5, 10) == MarginPadding(5, 5, 5, 5)

    def test_four_values(self):
        result = margin_or_padding([1, 2, 3, 4], 10)
        assert (result.top, result.right, result.bottom, result.left) == (1, 2, 3, 4)

    def test_three_values_mirror_right(self):
        result = margin_or_padding([1, 2, 3], 10)
        assert result.left == 2
        assert result.bottom == 3

    def test_two_values(self):
        result = margin_or_padding([1, 2], 10)
        assert result == MarginPadding(top=1, right=2, bottom=1, left=2)

    def test_single_value_list(self):
        assert margin_or_padding([7], 10) == MarginPadding(7, 7, 7, 7)

    def test_empty_list(self):
        assert margin_or_padding([], 10) == MarginPadding(10, 10, 10, 10)

    def test_partial_mapping(self):
        result = margin_or_padding({'top': 30}, 10)
        assert result == MarginPadding(top=30, right=10, bottom=10, left=10)

    def test_vertical_horizontal_shorthand(self):
        result = margin_or_padding({'vertical': 4, 'horizontal': 6}, 10)
        assert result == MarginPadding(top=4, right=6, bottom=4, left=6)

    def test_totals(self):
        result = margin_or_padding([1, 2, 3, 4], 0)
        assert result.horizontal == 6
        assert result.vertical == 4

    def test_to_dict(self):
        assert margin_or_padding(1, 0).to_dict() == {
            'top': 1, 'right': 1, 'bottom': 1, 'left': 1,
        }


class TestValidators:
    """Tests for option layer validation."""

    def test_valid_layers(self):
        validate_options(
            {'theme': 'grid', 'margin': [10, 20]},
            {'showHead': 'firstPage', 'startY': False},
            {
                'showFoot': True,
                'tableWidth': 300,
                'columns': [{'dataKey': 'name'}, {'dataKey': 'qty'}],
                'body': [['a', 1], {'name': 'b'}],
                'didDrawCell': lambda data: None,
                'columnStyles': {0: {'fontSize': 8}},
                'someRendererOption': object(),
            },
        )

    def test_none_layers_allowed(self):
        validate_options(None, None, None)

    def test_invalid_show_head(self):
        with pytest.raises(OptionsValidationError) as exc_info:
            validate_options({}, {'showHead': 'sometimes'}, {})
        assert exc_info.value.layer == 'document'
        assert any('showHead' in e for e in exc_info.value.errors)

    def test_show_foot_rejects_first_page(self):
        with pytest.raises(OptionsValidationError):
            validate_layer({'showFoot': 'firstPage'}, 'call')

    def test_invalid_start_y(self):
        with pytest.raises(OptionsValidationError) as exc_info:
            validate_options({}, {}, {'startY': 'top'})
        assert exc_info.value.layer == 'call'

    def test_start_y_true_rejected(self):
        with pytest.raises(OptionsValidationError):
            validate_layer({'startY': True}, 'call')

    def test_invalid_theme(self):
        with pytest.raises(OptionsValidationError) as exc_info:
            validate_options({'theme': 'fancy'}, {}, {})
        assert exc_info.value.layer == 'global'

    def test_duplicate_column_keys(self):
        with pytest.raises(OptionsValidationError) as exc_info:
            validate_layer({'columns': [{'dataKey': 'a'}, {'dataKey': 'a'}]}, 'call')
        assert 'Duplicate' in str(exc_info.value)

    def test_duplicate_column_definitions(self):
        with pytest.raises(OptionsValidationError) as exc_info:
            validate_layer({'columns': [ColumnDefinition('a'), ColumnDefinition('a')]}, 'call')
        assert 'Duplicate' in str(exc_info.value)

    def test_column_definitions_keep_their_keys(self):
        validate_layer({'columns': [ColumnDefinition('b'), {'dataKey': 0}]}, 'call')

    def test_columns_default_to_position(self):
        validate_layer({'columns': ['Name', {'dataKey': 1}]}, 'call')
        with pytest.raises(OptionsValidationError):
            validate_layer({'columns': ['Name', {'dataKey': 0}]}, 'call')

    def test_non_callable_hook(self):
        with pytest.raises(OptionsValidationError):
            validate_layer({'didParseCell': 'not a function'}, 'call')

    def test_non_mapping_layer(self):
        with pytest.raises(OptionsValidationError) as exc_info:
            validate_layer(['theme', 'grid'], 'document')
        assert 'mapping' in str(exc_info.value)

    def test_bad_margin(self):
        with pytest.raises(OptionsValidationError):
            validate_layer({'margin': {'middle': 3}}, 'call')
        with pytest.raises(OptionsValidationError):
            validate_layer({'margin': [1, 2, 3, 4, 5]}, 'call')

    def test_bad_rows(self):
        with pytest.raises(OptionsValidationError):
            validate_layer({'body': ['not a row']}, 'call')

    def test_column_styles_must_be_mappings(self):
        with pytest.raises(OptionsValidationError):
            validate_layer({'columnStyles': {0: 12}}, 'call')

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_layer({'pageBreak': 'never'}, 'call')


class TestOptionsLoader:
    """Tests for YAML option layers."""

    def setup_method(self):
        self.loader = OptionsLoader()

    def test_load_wrapped(self, tmp_path):
        path = tmp_path / 'defaults.yaml'
        path.write_text(
            "options:\n"
            "  theme: grid\n"
            "  margin: [20, 15]\n"
            "  headStyles:\n"
            "    fontSize: 9\n",
            encoding='utf-8',
        )
        options = self.loader.load(path)
        assert options == {
            'theme': 'grid',
            'margin': [20, 15],
            'headStyles': {'fontSize': 9},
        }

    def test_load_unwrapped(self, tmp_path):
        path = tmp_path / 'table.yaml'
        path.write_text("showHead: false\nbody:\n  - [a, 1]\n", encoding='utf-8')
        options = self.loader.load(path)
        assert options['showHead'] is False
        assert options['body'] == [['a', 1]]

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text("", encoding='utf-8')
        assert self.loader.load(path) == {}

    def test_not_a_mapping(self):
        with pytest.raises(OptionsLoadError):
            self.loader.loads("- a\n- b\n")

    def test_invalid_yaml(self):
        with pytest.raises(OptionsLoadError):
            self.loader.loads("theme: [grid\n")

    def test_missing_file(self, tmp_path):
        with pytest.raises(OptionsLoadError):
            self.loader.load(tmp_path / 'missing.yaml')

    def test_load_optional(self):
        assert self.loader.load_optional(None) == {}
