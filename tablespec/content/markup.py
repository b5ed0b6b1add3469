"""
Markup Table Scraping

Reads the head, body and foot rows of an HTML ``<table>`` into positional
rows that the rest of the pipeline treats like any other content.

A MarkupSurface stands in for the live page: it owns the parsed document,
answers selector queries and decides visibility. Scraping is only possible
when the caller's session provides one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from loguru import logger
from soupsieve import SelectorSyntaxError

from .rows import ELEMENT_KEY, PositionalRow

# CSS px per pt
PX_SCALE_FACTOR = 96 / 72

NAMED_COLORS = {
    'black': (0, 0, 0),
    'white': (255, 255, 255),
    'red': (255, 0, 0),
    'green': (0, 128, 0),
    'blue': (0, 0, 255),
    'gray': (128, 128, 128),
    'grey': (128, 128, 128),
    'silver': (192, 192, 192),
    'yellow': (255, 255, 0),
}


@dataclass
class MarkupContent:
    """
    Rows scraped from a markup table.

    A section is None when the markup did not produce it.
    """
    head: Optional[List[PositionalRow]] = None
    body: Optional[List[PositionalRow]] = None
    foot: Optional[List[PositionalRow]] = None


class MarkupSurface:
    """
    A parsed HTML document tables can be scraped from.

    Usage:
        surface = MarkupSurface.from_html(html)
        table = surface.query('#invoice-lines')
    """

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def from_html(cls, html: str, parser: str = 'html.parser') -> 'MarkupSurface':
        """Parse an HTML string."""
        return cls(BeautifulSoup(html, parser))

    @classmethod
    def from_file(cls, path: Union[str, Path], parser: str = 'html.parser') -> 'MarkupSurface':
        """Parse an HTML file."""
        with open(path, 'r', encoding='utf-8') as f:
            return cls.from_html(f.read(), parser)

    def query(self, selector: str) -> Optional[Tag]:
        """First element matching a CSS selector, or None (also for invalid selectors)."""
        try:
            return self.soup.select_one(selector)
        except SelectorSyntaxError as e:
            logger.warning(f"Invalid selector {selector!r}: {e}")
            return None

    @staticmethod
    def inline_style(tag: Tag) -> Dict[str, str]:
        """Declarations of the element's ``style`` attribute, lowercased names."""
        style = tag.get('style') or ''
        declarations = {}
        for declaration in style.split(';'):
            if ':' not in declaration:
                continue
            name, value = declaration.split(':', 1)
            name = name.strip().lower()
            if name:
                declarations[name] = value.strip()
        return declarations

    def is_hidden(self, tag: Tag) -> bool:
        """Whether the element is hidden via ``hidden`` or ``display: none``."""
        if tag.has_attr('hidden'):
            return True
        display = self.inline_style(tag).get('display', '')
        return display.lower() == 'none'


def parse_color(value: str) -> Optional[Tuple[int, int, int]]:
    """
    Parse a CSS color into an RGB tuple.

    Supports ``#rgb``, ``#rrggbb``, ``rgb()``/``rgba()`` and a few named
    colors. Fully transparent colors return None.
    """
    value = value.strip().lower()
    if value in NAMED_COLORS:
        return NAMED_COLORS[value]

    if value.startswith('#'):
        hex_value = value[1:]
        if len(hex_value) == 3:
            hex_value = ''.join(c * 2 for c in hex_value)
        if len(hex_value) == 6 and re.fullmatch(r'[0-9a-f]{6}', hex_value):
            return tuple(int(hex_value[i:i + 2], 16) for i in (0, 2, 4))
        return None

    match = re.fullmatch(r'rgba?\(([^)]*)\)', value)
    if match:
        parts = [p.strip() for p in match.group(1).replace('/', ',').split(',') if p.strip()]
        try:
            if len(parts) == 4 and float(parts[3]) == 0:
                return None
            return tuple(int(float(p)) for p in parts[:3])
        except ValueError:
            return None
    return None


def _parse_length_pt(value: str) -> Optional[float]:
    """CSS length to points; px are converted, pt kept, anything else dropped."""
    match = re.match(r'^\s*(-?[\d.]+)\s*(px|pt)?\s*$', value)
    if not match:
        return None
    number = float(match.group(1))
    if match.group(2) == 'pt':
        return number
    return number / PX_SCALE_FACTOR


def parse_css(declarations: Dict[str, str], scale_factor: float) -> Dict[str, Any]:
    """
    Map inline CSS declarations to renderer style keys.

    Args:
        declarations: Output of MarkupSurface.inline_style
        scale_factor: Document units per point, for paddings

    Returns:
        Style dict with only the keys that were present in the CSS
    """
    styles: Dict[str, Any] = {}

    weight = declarations.get('font-weight', '')
    bold = weight == 'bold' or (weight.isdigit() and int(weight) >= 600)
    italic = declarations.get('font-style', '') in ('italic', 'oblique')
    if bold and italic:
        styles['fontStyle'] = 'bolditalic'
    elif bold:
        styles['fontStyle'] = 'bold'
    elif italic:
        styles['fontStyle'] = 'italic'

    align = declarations.get('text-align')
    if align in ('left', 'center', 'right', 'justify'):
        styles['halign'] = align

    valign = declarations.get('vertical-align')
    if valign in ('top', 'middle', 'bottom'):
        styles['valign'] = valign

    if 'color' in declarations:
        color = parse_color(declarations['color'])
        if color:
            styles['textColor'] = list(color)

    background = declarations.get('background-color') or declarations.get('background')
    if background:
        color = parse_color(background)
        if color:
            styles['fillColor'] = list(color)

    if 'font-size' in declarations:
        size = _parse_length_pt(declarations['font-size'])
        if size is not None:
            styles['fontSize'] = size

    if 'padding' in declarations:
        padding = _parse_length_pt(declarations['padding'])
        if padding is not None:
            styles['cellPadding'] = padding / scale_factor

    return styles


def _span_attr(tag: Tag, name: str) -> int:
    try:
        return max(int(tag.get(name) or 1), 1)
    except (TypeError, ValueError):
        return 1


def _cell_content(cell: Tag) -> str:
    """Cell text with whitespace collapsed and ``<br>`` as line breaks."""
    parts = []
    for node in cell.descendants:
        if isinstance(node, Tag):
            if node.name == 'br':
                parts.append('\n')
        elif isinstance(node, NavigableString) and not isinstance(node, Comment):
            parts.append(re.sub(r'\s+', ' ', str(node)))
    lines = [line.strip() for line in ''.join(parts).split('\n')]
    return '\n'.join(lines)


def _table_rows(table: Tag) -> List[Tuple[str, Tag]]:
    """(section, row) pairs for the table's own rows, nested tables excluded."""
    rows = []
    for child in table.find_all(recursive=False):
        if child.name in ('thead', 'tbody', 'tfoot'):
            for tr in child.find_all('tr', recursive=False):
                rows.append((child.name, tr))
        elif child.name == 'tr':
            rows.append(('tbody', child))
    return rows


def _parse_row(
    surface: MarkupSurface,
    row: Tag,
    include_hidden: bool,
    use_css: bool,
    scale_factor: float,
) -> Optional[PositionalRow]:
    if not include_hidden and surface.is_hidden(row):
        return None

    cells = []
    for cell in row.find_all(['td', 'th'], recursive=False):
        if not include_hidden and surface.is_hidden(cell):
            continue
        parsed: Dict[str, Any] = {
            'content': _cell_content(cell),
            'colSpan': _span_attr(cell, 'colspan'),
            'rowSpan': _span_attr(cell, 'rowspan'),
            ELEMENT_KEY: cell,
        }
        if use_css:
            parsed['styles'] = parse_css(surface.inline_style(cell), scale_factor)
        cells.append(parsed)

    if not cells:
        return None
    return PositionalRow(cells=cells, element=row)


def _resolve_table(surface: MarkupSurface, source: Union[str, Tag]) -> Optional[Tag]:
    element = surface.query(source) if isinstance(source, str) else source
    if element is None:
        return None
    if element.name != 'table':
        element = element.find('table')
    return element


def parse_html(
    surface: MarkupSurface,
    source: Union[str, Tag],
    include_hidden: bool = False,
    use_css: bool = False,
    scale_factor: float = 1.0,
) -> Optional[MarkupContent]:
    """
    Scrape a table into head, body and foot rows.

    Args:
        surface: Document to scrape from
        source: CSS selector or table element
        include_hidden: Keep hidden rows and cells
        use_css: Translate inline CSS into cell styles
        scale_factor: Document units per point

    Returns:
        MarkupContent with all three sections, or None if no table was found
    """
    table = _resolve_table(surface, source)
    if table is None:
        logger.error(f"Html table could not be found with input: {source}")
        return None

    sections: Dict[str, List[PositionalRow]] = {'thead': [], 'tbody': [], 'tfoot': []}
    for section, tr in _table_rows(table):
        row = _parse_row(surface, tr, include_hidden, use_css, scale_factor)
        if row is not None:
            sections[section].append(row)

    logger.debug(
        f"Scraped table: {len(sections['thead'])} head, "
        f"{len(sections['tbody'])} body, {len(sections['tfoot'])} foot rows"
    )
    return MarkupContent(
        head=sections['thead'],
        body=sections['tbody'],
        foot=sections['tfoot'],
    )
