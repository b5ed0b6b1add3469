"""
Options Package

This package handles the three option layers of a table call:
- Merging with "last non-absent value wins" precedence
- Validation of each layer before merging
- Margin/padding normalization
- Loading layers from YAML files

Usage:
    from tablespec.options import merge_options, validate_options

    validate_options(global_defaults, document_defaults, call_options)
    options = merge_options(global_defaults, document_defaults, call_options)
"""

from .merger import (
    merge_options,
    merge_mappings,
    layer_value,
)

from .margins import (
    MarginPadding,
    margin_or_padding,
)

from .validators import (
    OptionsValidationError,
    TableOptionsModel,
    validate_layer,
    validate_options,
)

from .loader import (
    OptionsLoader,
    OptionsLoadError,
)

__all__ = [
    # Merger
    'merge_options',
    'merge_mappings',
    'layer_value',

    # Margins
    'MarginPadding',
    'margin_or_padding',

    # Validators
    'OptionsValidationError',
    'TableOptionsModel',
    'validate_layer',
    'validate_options',

    # Loader
    'OptionsLoader',
    'OptionsLoadError',
]
