"""
Table Input Pipeline

Main orchestration module that turns the three option layers of a table call
into one TableDefinition.

Steps:
1. Snapshot the session (page, scale factor, previous table)
2. Validate global, document and call options (fatal on failure)
3. Merge the layers into one option bag
4. Resolve settings, content, styles and hooks
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from loguru import logger

from .content.unifier import unify_content
from .models import TableDefinition
from .options.merger import merge_options
from .options.validators import validate_options
from .session import DocumentSession
from .settings.resolver import resolve_settings
from .styling.hooks import collect_hooks
from .styling.styles import merge_styles


class TableInputParser:
    """
    Resolves table calls against a document session.

    Usage:
        session = DocumentSession(scale_factor=72 / 25.4)
        parser = TableInputParser(session)
        table = parser.parse({'head': [['Name', 'Qty']], 'body': rows})
    """

    def __init__(self, session: Optional[DocumentSession] = None):
        self.session = session or DocumentSession()

    def parse(self, options: Optional[Mapping[str, Any]] = None) -> TableDefinition:
        """
        Resolve one table call.

        Args:
            options: Call-specific options (highest precedence)

        Returns:
            TableDefinition for the renderer

        Raises:
            OptionsValidationError: If any option layer is invalid
        """
        current = dict(options or {})
        snapshot = self.session.snapshot()
        global_options = self.session.get_global_options()
        document_options = self.session.get_document_options()

        validate_options(global_options, document_options, current)
        merged = merge_options(global_options, document_options, current)

        settings = resolve_settings(merged, snapshot)
        content = unify_content(merged, self.session.surface, snapshot.scale_factor)
        styles = merge_styles(global_options, document_options, current)
        hooks = collect_hooks(global_options, document_options, current)

        table = TableDefinition(
            id=current.get('tableId'),
            settings=settings,
            styles=styles,
            hooks=hooks,
            content=content,
        )

        logger.debug(
            f"Resolved table {table.id!r}: {table.column_count} columns, "
            f"{table.row_count} rows, startY={settings.start_y}"
        )
        return table


def parse_input(
    session: DocumentSession,
    options: Optional[Mapping[str, Any]] = None,
) -> TableDefinition:
    """
    Quick function to resolve a single table call.

    Args:
        session: Document session the table belongs to
        options: Call-specific options

    Returns:
        TableDefinition for the renderer
    """
    return TableInputParser(session).parse(options)
