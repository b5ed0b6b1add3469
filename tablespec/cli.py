"""
tablespec CLI

Resolves option layers stored as YAML into the table definition a renderer
would receive.

Examples:

    # Resolve call options against document defaults
    tablespec resolve table.yaml --document document.yaml

    # Scrape an HTML table and continue below a previous table
    tablespec resolve table.yaml --html page.html --previous 1,1,300

    # Human readable summary
    tablespec show table.yaml --global defaults.yaml
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger
from rich.console import Console
from rich.table import Table

from .content.markup import MarkupSurface
from .models import TableDefinition
from .options.loader import OptionsLoader, OptionsLoadError
from .options.validators import OptionsValidationError
from .pipeline import TableInputParser
from .session import DocumentSession, PreviousTable, set_global_defaults


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Route tablespec diagnostics to stderr and, optionally, a log file.

    stdout carries the resolved JSON, so the console sink stays at WARNING
    unless verbose output was asked for.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | <cyan>{name}</cyan> | {message}",
        level="DEBUG" if verbose else "WARNING",
        filter="tablespec",
        colorize=True
    )

    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
            level="DEBUG",
            filter="tablespec",
            rotation="1 MB",
            retention=3
        )


def parse_previous(value: Optional[str]) -> Optional[PreviousTable]:
    """Parse 'START_PAGE,PAGE_COUNT,FINAL_Y' into a PreviousTable."""
    if not value:
        return None
    parts = [p.strip() for p in value.split(',')]
    if len(parts) != 3:
        raise click.BadParameter("expected START_PAGE,PAGE_COUNT,FINAL_Y")
    try:
        return PreviousTable(
            start_page_number=int(parts[0]),
            page_number=int(parts[1]),
            final_y=float(parts[2]),
        )
    except ValueError as e:
        raise click.BadParameter(str(e))


def resolve_table(
    options_path: Path,
    document_path: Optional[Path],
    global_path: Optional[Path],
    html_path: Optional[Path],
    page: int,
    scale_factor: float,
    previous: Optional[PreviousTable],
) -> TableDefinition:
    """Load the YAML layers and resolve them against a fresh session."""
    loader = OptionsLoader()
    set_global_defaults(loader.load_optional(global_path))

    surface = MarkupSurface.from_file(html_path) if html_path else None
    session = DocumentSession(
        page_number=page,
        scale_factor=scale_factor,
        document_options=loader.load_optional(document_path),
        previous_table=previous,
        surface=surface,
    )
    return TableInputParser(session).parse(loader.load(options_path))


TABLE_OPTIONS = [
    click.argument('options_path', type=click.Path(exists=True, dir_okay=False, path_type=Path)),
    click.option(
        '--document', '-d',
        'document_path',
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help='YAML file with per-document default options'
    ),
    click.option(
        '--global', '-g',
        'global_path',
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help='YAML file with process-wide default options'
    ),
    click.option(
        '--html',
        'html_path',
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help='HTML file used as markup surface for the html option'
    ),
    click.option('--page', type=int, default=1, show_default=True, help='Current page number'),
    click.option(
        '--scale-factor',
        type=float,
        default=1.0,
        show_default=True,
        help='Device units per document unit'
    ),
    click.option(
        '--previous',
        default=None,
        help='Previous table as START_PAGE,PAGE_COUNT,FINAL_Y'
    ),
    click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging'),
    click.option(
        '--log-file',
        type=click.Path(path_type=Path),
        default=None,
        help='Write logs to file'
    ),
]


def table_options(func):
    """Options shared by every command."""
    for decorator in reversed(TABLE_OPTIONS):
        func = decorator(func)
    return func


def _run(console: Console, verbose: bool, **kwargs) -> TableDefinition:
    try:
        return resolve_table(**kwargs)
    except (OptionsLoadError, OptionsValidationError) as e:
        console.print(f"[bold red]Error: {e}[/]")
        if verbose:
            logger.exception("Full traceback:")
        raise SystemExit(1)


@click.group()
@click.version_option(package_name='tablespec')
def main():
    """tablespec - resolve layered table options for document renderers."""


@main.command()
@table_options
@click.option(
    '--output', '-o',
    'output_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Write JSON to file instead of stdout'
)
def resolve(
    options_path: Path,
    document_path: Optional[Path],
    global_path: Optional[Path],
    html_path: Optional[Path],
    page: int,
    scale_factor: float,
    previous: Optional[str],
    verbose: bool,
    log_file: Optional[Path],
    output_path: Optional[Path],
):
    """Resolve OPTIONS_PATH and print the table definition as JSON."""
    setup_logging(verbose=verbose, log_file=log_file)
    console = Console(stderr=True)

    table = _run(
        console,
        verbose,
        options_path=options_path,
        document_path=document_path,
        global_path=global_path,
        html_path=html_path,
        page=page,
        scale_factor=scale_factor,
        previous=parse_previous(previous),
    )

    data = json.dumps(table.to_dict(serializable=True), indent=2, default=str)
    if output_path:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(data)
        console.print(f"[green]✓ Table definition written to: {output_path}[/]")
    else:
        click.echo(data)


@main.command()
@table_options
def show(
    options_path: Path,
    document_path: Optional[Path],
    global_path: Optional[Path],
    html_path: Optional[Path],
    page: int,
    scale_factor: float,
    previous: Optional[str],
    verbose: bool,
    log_file: Optional[Path],
):
    """Print a summary of the resolved settings and columns."""
    setup_logging(verbose=verbose, log_file=log_file)
    console = Console()

    table = _run(
        console,
        verbose,
        options_path=options_path,
        document_path=document_path,
        global_path=global_path,
        html_path=html_path,
        page=page,
        scale_factor=scale_factor,
        previous=parse_previous(previous),
    )

    settings_table = Table(title=f"Table {table.id!r}" if table.id is not None else "Table")
    settings_table.add_column("Setting", style="cyan")
    settings_table.add_column("Value")
    for key, value in table.settings.to_dict().items():
        settings_table.add_row(key, str(value))
    console.print(settings_table)

    content = table.content
    console.print(
        f"[bold]Rows:[/] {len(content.head)} head, {len(content.body)} body, "
        f"{len(content.foot)} foot"
    )
    keys = ', '.join(str(c.data_key) for c in content.columns) or '(none)'
    console.print(f"[bold]Columns ({table.column_count}):[/] {keys}")


if __name__ == "__main__":
    main()
