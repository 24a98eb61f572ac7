"""CLI interface for fmbconv using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fmb_parser import FmbParserError, Module, parse_fmb_file
from fmbconv import __description__, __version__
from fmbconv.config import FmbconvConfig, load_config
from fmbconv.converter import FieldClassifier
from fmbconv.triggers import TriggerAnalyzer

app = typer.Typer(
    name="fmbconv",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

FileArgument = Annotated[
    Path,
    typer.Argument(help="Path to a frmf2xml export (*_fmb.xml)", exists=True, dir_okay=False)
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Configuration file path (default: search for .fmbconv.json)")
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Enable debug logging")
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Print JSON instead of a table")
]


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"fmbconv version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """fmbconv - Oracle Forms FMB export analysis."""


def configure_logging(config: FmbconvConfig, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.logging.level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def _prepare(config_path: Optional[Path], verbose: bool) -> FmbconvConfig:
    try:
        config = load_config(config_path)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging(config, verbose)
    return config


def _parse(path: Path) -> Module:
    try:
        return parse_fmb_file(path)
    except FmbParserError as e:
        console.print(f"[red]Error:[/red] Failed to parse {path}: {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def parse(
    path: FileArgument,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Show the block structure of an FMB export."""
    _prepare(config, verbose)
    module = _parse(path)

    console.print(f"[green]Module:[/green] {module.name}" + (f" ({module.title})" if module.title else ""))

    table = Table(title=f"Blocks ({len(module.blocks)} found)")
    table.add_column("Block", style="cyan", no_wrap=True)
    table.add_column("Data source", style="white")
    table.add_column("Items", justify="right")
    table.add_column("Triggers", justify="right")
    for block in module.blocks:
        table.add_row(block.name, block.query_data_source or "-", str(len(block.items)), str(len(block.triggers)))
    console.print(table)

    console.print(
        f"[dim]{module.total_items} items, {len(module.canvases)} canvases, {len(module.lovs)} LOVs, "
        f"{len(module.record_groups)} record groups, {module.total_triggers} triggers[/dim]"
    )


@app.command()
def convert(
    path: FileArgument,
    json: JsonOption = False,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Classify form items into header, detail and list fields."""
    settings = _prepare(config, verbose)
    result = FieldClassifier(settings.converter).convert(_parse(path))

    if json:
        print(jsonlib.dumps(result.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
        return

    table = Table(title=f"Fields of {result.metadata.app_name} ({len(result.fields)} found)")
    table.add_column("Area", style="magenta")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Label", style="white")
    table.add_column("Kind")
    table.add_column("Input")
    table.add_column("Type", style="dim")
    table.add_column("Length", justify="right", style="dim")
    table.add_column("Relationship / Tab", style="green")
    for field in result.fields:
        table.add_row(
            field.area.value,
            field.field_name,
            field.label,
            field.kind.value,
            field.input_mode.value,
            field.max_type.value,
            str(field.length),
            field.relationship or field.tab_name or field.sub_tab_name,
        )
    console.print(table)


@app.command()
def triggers(
    path: FileArgument,
    json: JsonOption = False,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Analyze form and block triggers."""
    settings = _prepare(config, verbose)
    report = TriggerAnalyzer(settings.analyzer).analyze(_parse(path))

    if json:
        print(jsonlib.dumps(report.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
        return

    table = Table(title=f"Triggers ({report.statistics.total_count} found)")
    table.add_column("No", justify="right", style="dim")
    table.add_column("Level", style="magenta")
    table.add_column("Block", style="cyan")
    table.add_column("Trigger", style="white", no_wrap=True)
    table.add_column("Summary", style="green")
    for trigger in report.all_triggers:
        table.add_row(str(trigger.no), trigger.level.value, trigger.block_name or "-", trigger.name, trigger.summary)
    console.print(table)

    stats = report.statistics
    console.print(
        f"[dim]{stats.form_level_count} form-level, {stats.block_level_count} block-level triggers[/dim]"
    )


if __name__ == "__main__":
    app()
