"""
tablespec - Table Input Resolution

Normalizes layered table options into one fully resolved table definition
for a document renderer.

Features:
- Three-scope option precedence (global < document < call)
- Column inference from list rows or mapping rows, colSpan aware
- HTML table scraping through a markup surface
- Continuation below the previous table on the same page
- Per-category style merging and ordered lifecycle hooks
- YAML option layers and a small CLI

Quick Start:
    from tablespec import DocumentSession, parse_input

    session = DocumentSession(page_number=1, scale_factor=72 / 25.4)
    table = parse_input(session, {
        'head': [['Name', 'Qty']],
        'body': [['Widget', 3], ['Gadget', 5]],
        'showFoot': False,
    })
    print(table.settings.show_foot)      # ShowFoot.NEVER
    print([c.data_key for c in table.content.columns])  # [0, 1]

CLI Usage:
    tablespec resolve table.yaml --document document.yaml
    tablespec show table.yaml --html page.html
"""

__version__ = '1.0.0'

# Main pipeline
from .pipeline import (
    TableInputParser,
    parse_input,
)
from .models import TableDefinition

# Session
from .session import (
    DocumentSession,
    PreviousTable,
    SessionSnapshot,
    set_global_defaults,
    get_global_defaults,
    reset_global_defaults,
)

# Options
from .options.merger import merge_options
from .options.margins import MarginPadding, margin_or_padding
from .options.validators import OptionsValidationError, validate_options
from .options.loader import OptionsLoader, OptionsLoadError

# Content
from .content.rows import PositionalRow, KeyedRow, as_row
from .content.columns import ColumnDefinition, infer_columns
from .content.markup import MarkupSurface, parse_html
from .content.unifier import ContentInput, unify_content

# Settings
from .settings.display import ShowHead, ShowFoot, Theme, PageBreak, RowPageBreak, TableWidth
from .settings.resolver import Settings, resolve_settings, resolve_start_y

# Styling
from .styling.styles import StyleSet, merge_styles
from .styling.hooks import HookSet, collect_hooks

__all__ = [
    # Version
    '__version__',

    # Main pipeline
    'TableInputParser',
    'parse_input',
    'TableDefinition',

    # Session
    'DocumentSession',
    'PreviousTable',
    'SessionSnapshot',
    'set_global_defaults',
    'get_global_defaults',
    'reset_global_defaults',

    # Options
    'merge_options',
    'MarginPadding',
    'margin_or_padding',
    'OptionsValidationError',
    'validate_options',
    'OptionsLoader',
    'OptionsLoadError',

    # Content
    'PositionalRow',
    'KeyedRow',
    'as_row',
    'ColumnDefinition',
    'infer_columns',
    'MarkupSurface',
    'parse_html',
    'ContentInput',
    'unify_content',

    # Settings
    'ShowHead',
    'ShowFoot',
    'Theme',
    'PageBreak',
    'RowPageBreak',
    'TableWidth',
    'Settings',
    'resolve_settings',
    'resolve_start_y',

    # Styling
    'StyleSet',
    'merge_styles',
    'HookSet',
    'collect_hooks',
]
