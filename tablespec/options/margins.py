"""
Margin and Padding Normalization

Turns the loose margin/padding shorthands callers use into a concrete
four-sided inset.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Union

MarginInput = Union[None, int, float, Sequence[float], Mapping[str, float]]


@dataclass(frozen=True)
class MarginPadding:
    """Resolved inset, in document units."""
    top: float
    right: float
    bottom: float
    left: float

    @property
    def horizontal(self) -> float:
        """Total left + right inset."""
        return self.left + self.right

    @property
    def vertical(self) -> float:
        """Total top + bottom inset."""
        return self.top + self.bottom

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary."""
        return {
            'top': self.top,
            'right': self.right,
            'bottom': self.bottom,
            'left': self.left,
        }


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def margin_or_padding(value: MarginInput, default_value: float) -> MarginPadding:
    """
    Normalize a margin or padding specification.

    Accepted shapes:
        - a number: same inset on every side
        - a list of 4 (top, right, bottom, left), 3 (left mirrors right),
          2 (bottom mirrors top, left mirrors right) or 1 numbers
        - a mapping with any of ``top``/``right``/``bottom``/``left`` and the
          ``vertical``/``horizontal`` shorthands

    Args:
        value: Caller supplied specification, or None
        default_value: Inset used for every side that is not specified

    Returns:
        MarginPadding with all four sides resolved
    """
    sides: Dict[str, Optional[float]] = {}

    if isinstance(value, (list, tuple)):
        if len(value) >= 4:
            sides = {'top': value[0], 'right': value[1], 'bottom': value[2], 'left': value[3]}
        elif len(value) == 3:
            sides = {'top': value[0], 'right': value[1], 'bottom': value[2], 'left': value[1]}
        elif len(value) == 2:
            sides = {'top': value[0], 'right': value[1], 'bottom': value[0], 'left': value[1]}
        elif len(value) == 1:
            value = value[0]
        else:
            value = default_value

    if isinstance(value, Mapping):
        spec = dict(value)
        if _is_number(spec.get('vertical')):
            spec['top'] = spec['vertical']
            spec['bottom'] = spec['vertical']
        if _is_number(spec.get('horizontal')):
            spec['right'] = spec['horizontal']
            spec['left'] = spec['horizontal']
        sides = {side: spec.get(side) for side in ('top', 'right', 'bottom', 'left')}

    fallback = value if _is_number(value) else default_value

    def pick(side: str) -> float:
        side_value = sides.get(side)
        return fallback if side_value is None else side_value

    return MarginPadding(
        top=pick('top'),
        right=pick('right'),
        bottom=pick('bottom'),
        left=pick('left'),
    )
