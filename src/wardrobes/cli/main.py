"""Typer CLI for wardrobe production layouts."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from wardrobes.application import BuildProductionLayoutCommand, ProductionLayoutOutput
from wardrobes.application.config import (
    ConfigError,
    QuotationConfiguration,
    config_to_overrides,
    config_to_rooms,
    config_to_settings,
    load_config,
)
from wardrobes.domain.services import extract_panels
from wardrobes.infrastructure import (
    CutListFormatter,
    ExporterRegistry,
    LayoutGroupFormatter,
    ProductionStatsFormatter,
)

app = typer.Typer(
    name="wardrobes",
    help="Build production cut lists and panel layouts from wardrobe quotations.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Build production cut lists and panel layouts from wardrobe quotations."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _load(config_file: Path) -> QuotationConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _build(config: QuotationConfiguration) -> ProductionLayoutOutput:
    command = BuildProductionLayoutCommand()
    result = command.execute(
        config_to_rooms(config),
        settings=config_to_settings(config),
        overrides_by_key=config_to_overrides(config),
        deleted_panel_ids=config.deleted_panels,
    )
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return result


@app.command()
def cutlist(
    config_file: Annotated[Path, typer.Argument(help="Path to the quotation JSON file")],
    sort: Annotated[
        bool, typer.Option("--sort", help="List the largest panels first")
    ] = False,
) -> None:
    """Show the production cut list for a quotation."""
    result = _build(_load(config_file))
    typer.echo(CutListFormatter(sort_by_size=sort).format(result))
    typer.echo()
    typer.echo(ProductionStatsFormatter().format(result.stats))


@app.command()
def layout(
    config_file: Annotated[Path, typer.Argument(help="Path to the quotation JSON file")],
    raw: Annotated[
        bool, typer.Option("--raw", help="Show derived grids without overrides")
    ] = False,
) -> None:
    """Show each unit's panel grid with overrides applied."""
    result = _build(_load(config_file))
    groups = result.groups if raw else result.adjusted_groups
    typer.echo(LayoutGroupFormatter(result.settings.rounding_mm).format(groups))


@app.command()
def export(
    config_file: Annotated[Path, typer.Argument(help="Path to the quotation JSON file")],
    format_name: Annotated[
        str, typer.Option("--format", "-f", help="Export format (csv, json)")
    ] = "csv",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (default: stdout)"),
    ] = None,
) -> None:
    """Export the cut list or full layout to a file."""
    try:
        exporter = ExporterRegistry.get(format_name.lower())()
    except KeyError as e:
        typer.echo(f"Error: {e.args[0]}", err=True)
        raise typer.Exit(code=1)

    result = _build(_load(config_file))
    if output is None:
        typer.echo(exporter.export_string(result))
        return
    exporter.export(result, output)
    typer.echo(f"Exported {format_name} to {output}")


@app.command()
def validate(
    config_file: Annotated[
        Path, typer.Argument(help="Path to the quotation JSON file to validate")
    ],
) -> None:
    """Validate a quotation file.

    Exit codes:
        0 - Quotation is valid
        1 - Quotation has errors
        2 - Quotation is valid but has warnings
    """
    typer.echo(f"Validating {config_file}...")
    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo("Errors:", err=True)
        typer.echo(f"  {e}", err=True)
        raise typer.Exit(code=1)

    rooms = config_to_rooms(config)
    panels = extract_panels(rooms, config_to_settings(config))
    group_keys = {panel.group_key for panel in panels}
    panel_ids = {panel.qualified_id for panel in panels}

    warnings: list[str] = []
    for room in rooms:
        for unit in room.units:
            if not unit.is_drawn:
                warnings.append(
                    f"Unit '{unit.id}' in '{room.name}' has no size and is skipped"
                )
    for key in sorted(set(config.overrides) - group_keys):
        warnings.append(f"Overrides for unknown unit '{key}'")
    for panel_id in sorted(set(config.deleted_panels) - panel_ids):
        warnings.append(f"Deleted panel '{panel_id}' does not exist")

    unit_count = sum(len(room.units) for room in rooms)
    typer.echo(f"Rooms: {len(rooms)}, units: {unit_count}, panels: {len(panels)}")
    if warnings:
        typer.echo("Warnings:")
        for warning in warnings:
            typer.echo(f"  - {warning}")
        raise typer.Exit(code=2)
    typer.echo("Configuration is valid.")


if __name__ == "__main__":
    app()
