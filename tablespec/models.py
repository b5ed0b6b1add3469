"""
Table Definition

The single resolved record handed to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .content.unifier import ContentInput
from .settings.resolver import Settings
from .styling.hooks import HookSet
from .styling.styles import StyleSet

TableId = Optional[Union[str, int, float]]


@dataclass(frozen=True)
class TableDefinition:
    """
    Fully resolved table input.

    Every settings field is concrete, every style category is a dict and
    every hook list is a list, so the renderer never deals with defaults.
    """
    id: TableId
    settings: Settings
    styles: StyleSet
    hooks: HookSet
    content: ContentInput

    @property
    def column_count(self) -> int:
        """Number of columns."""
        return len(self.content.columns)

    @property
    def row_count(self) -> int:
        """Total rows across head, body and foot."""
        return len(self.content.head) + len(self.content.body) + len(self.content.foot)

    def to_dict(self, serializable: bool = False) -> Dict[str, Any]:
        """
        Convert to dictionary.

        Args:
            serializable: Replace callbacks by hook counts and drop markup
                elements, so the result can be written as JSON
        """
        if serializable:
            hooks: Dict[str, Any] = self.hooks.counts()
        else:
            hooks = {
                'didParseCell': list(self.hooks.did_parse_cell),
                'willDrawCell': list(self.hooks.will_draw_cell),
                'didDrawCell': list(self.hooks.did_draw_cell),
                'didDrawPage': list(self.hooks.did_draw_page),
            }
        return {
            'id': self.id,
            'settings': self.settings.to_dict(),
            'styles': self.styles.to_dict(),
            'hooks': hooks,
            'content': self.content.to_dict(include_elements=not serializable),
        }
