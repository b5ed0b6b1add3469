"""
Hook Collection

Gathers lifecycle callbacks from the three option layers into ordered lists.
Callbacks are only collected here; the renderer invokes them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

HOOK_NAMES = ('didParseCell', 'willDrawCell', 'didDrawCell', 'didDrawPage')

Hook = Callable[..., Any]


@dataclass(frozen=True)
class HookSet:
    """Callbacks per lifecycle event, global layer first."""
    did_parse_cell: List[Hook] = field(default_factory=list)
    will_draw_cell: List[Hook] = field(default_factory=list)
    did_draw_cell: List[Hook] = field(default_factory=list)
    did_draw_page: List[Hook] = field(default_factory=list)

    def get(self, name: str) -> List[Hook]:
        """Get the callbacks of a hook by its option name."""
        return {
            'didParseCell': self.did_parse_cell,
            'willDrawCell': self.will_draw_cell,
            'didDrawCell': self.did_draw_cell,
            'didDrawPage': self.did_draw_page,
        }[name]

    def counts(self) -> Dict[str, int]:
        """Number of callbacks per hook."""
        return {name: len(self.get(name)) for name in HOOK_NAMES}


def collect_hooks(
    global_options: Optional[Mapping[str, Any]],
    document_options: Optional[Mapping[str, Any]],
    current_options: Optional[Mapping[str, Any]],
) -> HookSet:
    """
    Collect hooks in precedence order: global, document, call.

    Layers that do not declare a hook are skipped.
    """
    collected: Dict[str, List[Hook]] = {name: [] for name in HOOK_NAMES}
    for options in (global_options, document_options, current_options):
        if not options:
            continue
        for name in HOOK_NAMES:
            hook = options.get(name)
            if hook is not None:
                collected[name].append(hook)

    return HookSet(
        did_parse_cell=collected['didParseCell'],
        will_draw_cell=collected['willDrawCell'],
        did_draw_cell=collected['didDrawCell'],
        did_draw_page=collected['didDrawPage'],
    )
