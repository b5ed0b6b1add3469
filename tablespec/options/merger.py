"""
Option Merging

Layered configuration reducers. Three option layers exist per table call:

    global (process-wide defaults) < document defaults < call options

A higher layer wins for every key it actually sets. ``None`` means "not set"
and never shadows a value from a lower layer, so callers can forward optional
arguments without clobbering defaults.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


def merge_options(*layers: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Merge option layers, last non-absent value wins.

    Args:
        *layers: Option mappings in increasing precedence. ``None`` layers
            are skipped.

    Returns:
        A new flat dict; the input layers are not modified.
    """
    merged: Dict[str, Any] = {}
    for layer in layers:
        if not layer:
            continue
        for key, value in layer.items():
            if value is not None:
                merged[key] = value
    return merged


def merge_mappings(*mappings: Optional[Mapping[Any, Any]]) -> Dict[Any, Any]:
    """
    Shallow merge of mapping values taken from each layer.

    Used for style categories. Each entry is replaced wholesale by a higher
    layer, never deep-merged.
    """
    return merge_options(*mappings)


def layer_value(layer: Optional[Mapping[str, Any]], key: str, default: Any = None) -> Any:
    """Read ``key`` from a possibly missing layer, treating ``None`` as unset."""
    if not layer:
        return default
    value = layer.get(key)
    return default if value is None else value
