"""
Content Package

Row ingestion, column inference, markup scraping and content unification.
"""

from .rows import (
    ELEMENT_KEY,
    PositionalRow,
    KeyedRow,
    Row,
    as_row,
    as_rows,
    cell_span,
)
from .columns import (
    ColumnDefinition,
    infer_columns,
    normalize_columns,
)
from .markup import (
    MarkupSurface,
    MarkupContent,
    parse_html,
    parse_css,
)
from .unifier import (
    ContentInput,
    unify_content,
)

__all__ = [
    'ELEMENT_KEY',
    'PositionalRow',
    'KeyedRow',
    'Row',
    'as_row',
    'as_rows',
    'cell_span',
    'ColumnDefinition',
    'infer_columns',
    'normalize_columns',
    'MarkupSurface',
    'MarkupContent',
    'parse_html',
    'parse_css',
    'ContentInput',
    'unify_content',
]
