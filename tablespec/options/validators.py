"""
Option Validators

This module validates each option layer before it is merged, using Pydantic
for the per-key rules.

Why validate before merging:
- A bad value in the global layer would otherwise surface as a confusing
  failure far away in the renderer
- The layer name in the error tells the caller which scope to fix
- Merged output is assumed clean by every resolver downstream

Validation failures are fatal. The pipeline never catches
OptionsValidationError; no table definition is produced.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from bs4 import Tag
from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..content.columns import column_data_keys

SHOW_HEAD_VALUES = ('everyPage', 'firstPage', 'never')
SHOW_FOOT_VALUES = ('everyPage', 'lastPage', 'never')
THEME_VALUES = ('striped', 'grid', 'plain')
PAGE_BREAK_VALUES = ('auto', 'avoid', 'always')
ROW_PAGE_BREAK_VALUES = ('auto', 'avoid')
TABLE_WIDTH_VALUES = ('auto', 'wrap')
MARGIN_KEYS = ('top', 'right', 'bottom', 'left', 'vertical', 'horizontal')


class OptionsValidationError(ValueError):
    """
    Raised when an option layer fails validation.

    Attributes:
        layer: Which layer failed ('global', 'document' or 'call')
        errors: Human readable error messages
    """

    def __init__(self, layer: str, errors: list[str]):
        self.layer = layer
        self.errors = errors
        super().__init__(f"Invalid {layer} options: {'; '.join(errors)}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class TableOptionsModel(BaseModel):
    """
    Pydantic model for a single option layer.

    Only keys with rules are declared; unknown keys pass through untouched
    so renderer specific options are never rejected here.
    """
    model_config = ConfigDict(extra='allow', arbitrary_types_allowed=True)

    startY: Any = None
    showHead: Any = None
    showFoot: Any = None
    theme: Any = None
    pageBreak: Any = None
    rowPageBreak: Any = None
    tableWidth: Any = None
    tableLineWidth: Any = None
    margin: Any = None
    columns: Any = None
    head: Any = None
    body: Any = None
    foot: Any = None
    html: Any = None
    styles: Any = None
    headStyles: Any = None
    bodyStyles: Any = None
    footStyles: Any = None
    alternateRowStyles: Any = None
    columnStyles: Any = None
    didParseCell: Any = None
    willDrawCell: Any = None
    didDrawCell: Any = None
    didDrawPage: Any = None

    @field_validator('startY')
    @classmethod
    def validate_start_y(cls, v):
        """startY is a position or False (explicitly "continue/auto")."""
        if v is None or v is False or _is_number(v):
            return v
        raise ValueError(f'startY must be a number or false, got {v!r}')

    @field_validator('showHead')
    @classmethod
    def validate_show_head(cls, v):
        if v is None or isinstance(v, bool) or v in SHOW_HEAD_VALUES:
            return v
        raise ValueError(f'showHead must be a boolean or one of {SHOW_HEAD_VALUES}, got {v!r}')

    @field_validator('showFoot')
    @classmethod
    def validate_show_foot(cls, v):
        if v is None or isinstance(v, bool) or v in SHOW_FOOT_VALUES:
            return v
        raise ValueError(f'showFoot must be a boolean or one of {SHOW_FOOT_VALUES}, got {v!r}')

    @field_validator('theme')
    @classmethod
    def validate_theme(cls, v):
        if v is None or v in THEME_VALUES:
            return v
        raise ValueError(f'theme must be one of {THEME_VALUES}, got {v!r}')

    @field_validator('pageBreak')
    @classmethod
    def validate_page_break(cls, v):
        if v is None or v in PAGE_BREAK_VALUES:
            return v
        raise ValueError(f'pageBreak must be one of {PAGE_BREAK_VALUES}, got {v!r}')

    @field_validator('rowPageBreak')
    @classmethod
    def validate_row_page_break(cls, v):
        if v is None or v in ROW_PAGE_BREAK_VALUES:
            return v
        raise ValueError(f'rowPageBreak must be one of {ROW_PAGE_BREAK_VALUES}, got {v!r}')

    @field_validator('tableWidth')
    @classmethod
    def validate_table_width(cls, v):
        if v is None or v in TABLE_WIDTH_VALUES:
            return v
        if _is_number(v) and v >= 0:
            return v
        raise ValueError(f"tableWidth must be 'auto', 'wrap' or a non-negative number, got {v!r}")

    @field_validator('tableLineWidth')
    @classmethod
    def validate_line_width(cls, v):
        if v is None or (_is_number(v) and v >= 0):
            return v
        raise ValueError(f'tableLineWidth must be a non-negative number, got {v!r}')

    @field_validator('margin')
    @classmethod
    def validate_margin(cls, v):
        """Number, list of 1-4 numbers, or a per-side mapping."""
        if v is None or _is_number(v):
            return v
        if isinstance(v, (list, tuple)):
            if len(v) > 4 or not all(_is_number(x) for x in v):
                raise ValueError(f'margin list must hold at most 4 numbers, got {v!r}')
            return v
        if isinstance(v, Mapping):
            for key, value in v.items():
                if key not in MARGIN_KEYS:
                    raise ValueError(f'Unknown margin side: {key!r}')
                if value is not None and not _is_number(value):
                    raise ValueError(f'margin.{key} must be a number, got {value!r}')
            return v
        raise ValueError(f'margin must be a number, list or mapping, got {type(v).__name__}')

    @field_validator('columns')
    @classmethod
    def validate_columns(cls, v):
        """Column dataKeys must be unique."""
        if v is None:
            return v
        if not isinstance(v, (list, tuple)):
            raise ValueError('columns must be a list')
        seen = set()
        for key in column_data_keys(v):
            if key in seen:
                raise ValueError(f'Duplicate column dataKey: {key!r}')
            seen.add(key)
        return v

    @field_validator('head', 'body', 'foot')
    @classmethod
    def validate_rows(cls, v):
        if v is None:
            return v
        if not isinstance(v, (list, tuple)):
            raise ValueError('row sections must be lists of rows')
        for index, row in enumerate(v):
            if not isinstance(row, (list, tuple, Mapping)):
                raise ValueError(f'Row {index} must be a list or a mapping, got {type(row).__name__}')
        return v

    @field_validator('html')
    @classmethod
    def validate_html(cls, v):
        if v is None or isinstance(v, (str, Tag)):
            return v
        raise ValueError('html must be a CSS selector or a table element')

    @field_validator('styles', 'headStyles', 'bodyStyles', 'footStyles', 'alternateRowStyles')
    @classmethod
    def validate_style_category(cls, v):
        if v is None or isinstance(v, Mapping):
            return v
        raise ValueError(f'style categories must be mappings, got {type(v).__name__}')

    @field_validator('columnStyles')
    @classmethod
    def validate_column_styles(cls, v):
        if v is None:
            return v
        if not isinstance(v, Mapping):
            raise ValueError('columnStyles must be a mapping of column key to styles')
        for key, styles in v.items():
            if not isinstance(styles, Mapping):
                raise ValueError(f'columnStyles[{key!r}] must be a mapping')
        return v

    @field_validator('didParseCell', 'willDrawCell', 'didDrawCell', 'didDrawPage')
    @classmethod
    def validate_hook(cls, v):
        if v is None or callable(v):
            return v
        raise ValueError(f'hooks must be callable, got {type(v).__name__}')


def _format_errors(error: ValidationError) -> list[str]:
    messages = []
    for detail in error.errors():
        location = '.'.join(str(part) for part in detail.get('loc', ()))
        message = detail.get('msg', 'invalid value')
        messages.append(f"{location}: {message}" if location else message)
    return messages


def validate_layer(layer: Optional[Mapping[str, Any]], layer_name: str) -> None:
    """
    Validate a single option layer.

    Args:
        layer: Option mapping, or None for an unset layer
        layer_name: Name used in error messages

    Raises:
        OptionsValidationError: If any rule fails
    """
    if layer is None:
        return
    if not isinstance(layer, Mapping):
        raise OptionsValidationError(
            layer_name,
            [f"options must be a mapping, got {type(layer).__name__}"],
        )

    try:
        TableOptionsModel.model_validate(dict(layer))
    except ValidationError as e:
        errors = _format_errors(e)
        logger.error(f"{layer_name} options failed validation: {errors}")
        raise OptionsValidationError(layer_name, errors) from e


def validate_options(
    global_options: Optional[Mapping[str, Any]],
    document_options: Optional[Mapping[str, Any]],
    current_options: Optional[Mapping[str, Any]],
) -> None:
    """
    Validate all three option layers, lowest precedence first.

    Raises:
        OptionsValidationError: On the first layer that fails
    """
    validate_layer(global_options, 'global')
    validate_layer(document_options, 'document')
    validate_layer(current_options, 'call')
