"""
Style Merging

Merges the six style categories across the three option layers. Each
category is a shallow mapping: a higher layer's value for a style key (or,
for ``columnStyles``, for a column key) replaces the lower one wholesale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..options.merger import layer_value, merge_mappings

UNIFORM_STYLE_CATEGORIES = (
    'styles',
    'headStyles',
    'bodyStyles',
    'footStyles',
    'alternateRowStyles',
)


@dataclass(frozen=True)
class StyleSet:
    """Merged styles of a table."""
    styles: Dict[str, Any] = field(default_factory=dict)
    head_styles: Dict[str, Any] = field(default_factory=dict)
    body_styles: Dict[str, Any] = field(default_factory=dict)
    foot_styles: Dict[str, Any] = field(default_factory=dict)
    alternate_row_styles: Dict[str, Any] = field(default_factory=dict)
    column_styles: Dict[Any, Dict[str, Any]] = field(default_factory=dict)

    def category(self, name: str) -> Dict[Any, Any]:
        """Get a category by its option name, e.g. 'headStyles'."""
        return {
            'styles': self.styles,
            'headStyles': self.head_styles,
            'bodyStyles': self.body_styles,
            'footStyles': self.foot_styles,
            'alternateRowStyles': self.alternate_row_styles,
            'columnStyles': self.column_styles,
        }[name]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the renderer's camelCase shape."""
        return {
            'styles': dict(self.styles),
            'headStyles': dict(self.head_styles),
            'bodyStyles': dict(self.body_styles),
            'footStyles': dict(self.foot_styles),
            'alternateRowStyles': dict(self.alternate_row_styles),
            'columnStyles': {k: dict(v) for k, v in self.column_styles.items()},
        }


def merge_styles(
    global_options: Optional[Mapping[str, Any]],
    document_options: Optional[Mapping[str, Any]],
    current_options: Optional[Mapping[str, Any]],
) -> StyleSet:
    """
    Merge every style category, global < document < call.

    Returns:
        StyleSet where every category is a concrete (possibly empty) dict
    """
    layers = (global_options, document_options, current_options)

    merged = {}
    for category in UNIFORM_STYLE_CATEGORIES:
        merged[category] = merge_mappings(*(layer_value(layer, category, {}) for layer in layers))

    column_styles = merge_mappings(*(layer_value(layer, 'columnStyles', {}) for layer in layers))

    return StyleSet(
        styles=merged['styles'],
        head_styles=merged['headStyles'],
        body_styles=merged['bodyStyles'],
        foot_styles=merged['footStyles'],
        alternate_row_styles=merged['alternateRowStyles'],
        column_styles={k: dict(v) for k, v in column_styles.items()},
    )
