"""
Styling Package

Style category merging and lifecycle hook collection.
"""

from .styles import (
    StyleSet,
    merge_styles,
    UNIFORM_STYLE_CATEGORIES,
)
from .hooks import (
    HookSet,
    collect_hooks,
    HOOK_NAMES,
)

__all__ = [
    'StyleSet',
    'merge_styles',
    'UNIFORM_STYLE_CATEGORIES',
    'HookSet',
    'collect_hooks',
    'HOOK_NAMES',
]
