"""
Content Unification

Resolves the final head, body and foot rows and the column list, from
explicit row options or from a markup table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

from .columns import ColumnDefinition, infer_columns, normalize_columns
from .markup import MarkupSurface, parse_html
from .rows import Row, as_rows


@dataclass(frozen=True)
class ContentInput:
    """Resolved table content."""
    head: List[Row] = field(default_factory=list)
    body: List[Row] = field(default_factory=list)
    foot: List[Row] = field(default_factory=list)
    columns: List[ColumnDefinition] = field(default_factory=list)

    def to_dict(self, include_elements: bool = False) -> Dict[str, Any]:
        """Convert to dictionary of plain rows."""
        return {
            'head': [r.to_raw(include_elements) for r in self.head],
            'body': [r.to_raw(include_elements) for r in self.body],
            'foot': [r.to_raw(include_elements) for r in self.foot],
            'columns': [c.to_dict() for c in self.columns],
        }


def unify_content(
    options: Mapping[str, Any],
    surface: Optional[MarkupSurface] = None,
    scale_factor: float = 1.0,
) -> ContentInput:
    """
    Resolve content from merged options.

    When ``html`` is set and a surface is available, scraped sections
    replace the explicit ones. A section the markup did not produce falls
    back to the resolved head rows. Without a surface the explicit rows are
    kept and an error is logged.

    Args:
        options: Merged option bag
        surface: Markup surface of the session, if any
        scale_factor: Document units per point

    Returns:
        ContentInput with rows and columns
    """
    head = options.get('head') or []
    body = options.get('body') or []
    foot = options.get('foot') or []

    html = options.get('html')
    if html:
        if surface is not None:
            markup = parse_html(
                surface,
                html,
                include_hidden=bool(options.get('includeHiddenHtml')),
                use_css=bool(options.get('useCss')),
                scale_factor=scale_factor,
            )
            if markup is not None:
                head = markup.head if markup.head is not None else head
                body = markup.body if markup.body is not None else head
                foot = markup.foot if markup.foot is not None else head
            else:
                body = head
                foot = head
        else:
            logger.error("Cannot parse html without a markup surface")

    head_rows = as_rows(head)
    body_rows = as_rows(body)
    foot_rows = as_rows(foot)

    raw_columns = options.get('columns')
    if raw_columns is not None:
        columns = normalize_columns(raw_columns)
    else:
        columns = infer_columns(head_rows, body_rows, foot_rows)

    return ContentInput(
        head=head_rows,
        body=body_rows,
        foot=foot_rows,
        columns=columns,
    )
