"""
CLI Interface
=============
Command-line interface for the content importer.

Usage:
    python -m content_importer parse <document> [options]
    python -m content_importer suggest <catalog_json>
    python -m content_importer plan <document> [--catalog <catalog_json>] [--style k1=ID]
"""

from __future__ import annotations

import json
import os
import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .engine import ImportEngine, ImporterConfig
from .exceptions import ImporterError
from .models import (
    CatalogEntry,
    Classification,
    ParseResult,
    PlannedBlock,
    SuggestionSet,
)
from .suggestions import to_catalog

console = Console()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="content-importer")
def cli():
    """Content Importer: Markdown to classified content sections."""
    pass


@cli.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output", "-o",
    default="output",
    help="Output directory for the sections JSON",
)
@click.option(
    "--save",
    is_flag=True,
    default=False,
    help="Write <name>_sections.json into the output directory",
)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(LOG_LEVELS),
    help="Logging level",
)
@click.option(
    "--log-file",
    default=None,
    help="Path to log file",
)
@click.option(
    "--json-output",
    is_flag=True,
    default=False,
    help="Output only JSON result to stdout (for programmatic use)",
)
def parse(
    document: str,
    output: str,
    save: bool,
    log_level: str,
    log_file: str,
    json_output: bool,
):
    """Parse a Markdown document into classified sections."""

    if json_output:
        log_level = "ERROR"

    config = ImporterConfig(
        output_dir=output,
        save_output=save,
        log_level=log_level,
        log_file=log_file,
    )

    result = _run(lambda: ImportEngine(config).parse_file(document), log_level)

    if json_output:
        _print_json(result.to_json_dict())
        return

    console.print()
    console.print(
        Panel.fit(
            f"[bold cyan]Content Importer v{__version__}[/]\n"
            f"[dim]Parsed: {os.path.basename(document)}[/]",
            border_style="cyan",
        )
    )
    _display_results(result)


@cli.command()
@click.argument("catalog_json", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--json-output",
    is_flag=True,
    default=False,
    help="Output only JSON result to stdout",
)
def suggest(catalog_json: str, json_output: bool):
    """Suggest a style per classification from a block catalog."""

    engine = ImportEngine(ImporterConfig(log_level="WARNING"))
    catalog = _run(lambda: _load_catalog(catalog_json))
    report = _run(lambda: engine.style_mappings(catalog))

    if json_output:
        _print_json(report.model_dump(mode="json"))
        return

    console.print()
    _display_suggestions(report.suggestions)


@cli.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--catalog", "-c",
    "catalog_json",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Catalog JSON used for suggested styles",
)
@click.option(
    "--style", "-s",
    "styles",
    multiple=True,
    help="Explicit mapping, e.g. k1=infotext_k1 (repeatable)",
)
@click.option(
    "--json-output",
    is_flag=True,
    default=False,
    help="Output only JSON result to stdout",
)
def plan(document: str, catalog_json: str, styles: tuple, json_output: bool):
    """Bind parsed sections to styles and show the import plan."""

    engine = ImportEngine(ImporterConfig(log_level="WARNING"))

    mappings: dict[Classification, str] = {}
    if catalog_json:
        catalog = _run(lambda: _load_catalog(catalog_json))
        suggestions = _run(lambda: engine.suggest(catalog))
        mappings.update(
            {c: s for c, s in suggestions.as_mapping().items() if s}
        )
    for option in styles:
        key, style = _parse_style_option(option)
        mappings[key] = style

    result = _run(lambda: engine.parse_file(document))
    blocks = _run(lambda: engine.plan(result, mappings))

    if json_output:
        _print_json([b.model_dump(mode="json") for b in blocks])
        return

    console.print()
    _display_plan(blocks)


# ─── Helpers ──────────────────────────────────────────────────────────────────


def _run(action, log_level: str = "WARNING"):
    """Run an action, turning known failures into an error line + exit 1."""
    try:
        return action()
    except (FileNotFoundError, ImporterError, ValueError) as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error:[/] {e}")
        if log_level == "DEBUG":
            console.print_exception()
        sys.exit(1)


def _load_catalog(path: str) -> list[CatalogEntry]:
    """
    Read a JSON array of {identifier, label} objects or pairs.

    Raises:
        ValueError: If the file is not a JSON array or holds a malformed entry.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Catalog must be a JSON array: {path}")
    return to_catalog(data, strict=True)


def _parse_style_option(option: str) -> tuple[Classification, str]:
    key, sep, style = option.partition("=")
    try:
        classification = Classification(key.strip().lower())
    except ValueError:
        classification = None
    if not sep or classification is None or not style.strip():
        raise click.BadParameter(
            f"expected <{'|'.join(c.value for c in Classification)}>=<style>, "
            f"got '{option}'",
            param_hint="--style",
        )
    return classification, style.strip()


def _print_json(data):
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


# ─── Display Helpers ──────────────────────────────────────────────────────────


def _display_results(result: ParseResult):
    """Display parse results in formatted tables."""
    console.print()

    stats = result.stats
    table = Table(title="Import Summary", border_style="green")
    table.add_column("Classification", style="bold")
    table.add_column("Sections", justify="right")
    for classification in Classification:
        table.add_row(classification.value, str(stats.count(classification)))
    table.add_row("[bold]total[/]", f"[bold]{stats.total}[/]")
    console.print(table)
    console.print()

    if not result.sections:
        console.print("[yellow]No sections found (missing headings?)[/]")
        console.print()
        return

    sections = Table(title="Sections", border_style="cyan")
    sections.add_column("#", justify="right")
    sections.add_column("Class", style="bold")
    sections.add_column("Topic")
    sections.add_column("Title")
    sections.add_column("Markup", justify="right")
    for index, section in enumerate(result.sections, start=1):
        sections.add_row(
            str(index),
            section.classification.value,
            section.topic,
            section.title,
            f"{len(section.markup)} chars",
        )
    console.print(sections)
    console.print()


def _display_suggestions(suggestions: SuggestionSet):
    table = Table(title="Suggested Styles", border_style="cyan")
    table.add_column("Classification", style="bold")
    table.add_column("Style")
    for classification, style in suggestions.as_mapping().items():
        table.add_row(
            classification.value,
            style if style else "[dim](none)[/]",
        )
    console.print(table)
    console.print()


def _display_plan(blocks: list[PlannedBlock]):
    table = Table(title="Import Plan", border_style="cyan")
    table.add_column("#", justify="right")
    table.add_column("Style", style="bold")
    table.add_column("Title")
    table.add_column("Class")
    for index, block in enumerate(blocks, start=1):
        table.add_row(
            str(index), block.style, block.title, block.classification.value
        )
    console.print(table)
    console.print()
    console.print(f"[bold]Total:[/] {len(blocks)} block(s)")
    console.print()


# ─── Entry point (for python -m content_importer.cli) ────────────────────────


if __name__ == "__main__":
    cli()
