"""Typer CLI for pool coping and paving layouts."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from poolpave.application import LayoutCommand, LayoutOutput
from poolpave.application.config import (
    ConfigError,
    ConfigValidationResult,
    LayoutConfiguration,
    config_to_outline,
    config_to_points,
    load_config,
    validate_config,
)
from poolpave.domain.services import bounding_box, polygon_area
from poolpave.domain.services.statistics import MM2_PER_M2
from poolpave.infrastructure import ExporterRegistry, LayoutReportFormatter

app = typer.Typer(
    name="poolpave",
    help="Lay out pool coping and paving tiles from outline polygons.",
)

ConfigArgument = Annotated[Path, typer.Argument(help="Path to JSON configuration file")]
FormatOption = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: text, json, csv"),
]
OutputOption = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Write the export to this file"),
]
TilesOption = Annotated[
    bool,
    typer.Option("--tiles", help="List every tile in text output"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log solver details to stderr"),
]


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _report_load_error(error: ConfigError) -> None:
    """Explain why a layout file could not be loaded."""
    if error.error_type == "file_not_found":
        typer.echo(f"Error: File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo(f"Error: Invalid JSON in {error.path}", err=True)
        for detail in error.details:
            typer.echo(
                f"  line {detail.get('line', '?')}, column {detail.get('column', '?')}: "
                f"{detail.get('message', 'unknown error')}",
                err=True,
            )
    elif error.error_type == "validation":
        typer.echo(f"Error: {error.path or 'layout'} does not match the layout schema", err=True)
        for detail in error.details:
            line = f"  {detail.get('path') or '(root)'}: {detail.get('message', 'unknown error')}"
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                line += f" (got {value!r})"
            typer.echo(line, err=True)
    else:
        typer.echo(f"Error: {error.message}", err=True)


def _load(config_file: Path) -> LayoutConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        _report_load_error(e)
        raise typer.Exit(code=1)


def _section_summaries(config: LayoutConfiguration) -> list[str]:
    """One line per layout section describing what would be laid."""
    lines = []
    if config.coping is None:
        lines.append("coping:     not configured")
    else:
        box = bounding_box(config_to_outline(config.coping))
        lines.append(
            f"coping:     {len(config.coping.outline)}-point outline, "
            f"{box.width:g} x {box.height:g} mm, "
            f"{config.coping.tile_width:g} x {config.coping.tile_depth:g} mm tiles"
        )
    if config.paving is None:
        lines.append("paving:     not configured")
    else:
        area = polygon_area(config_to_points(config.paving.boundary)) / MM2_PER_M2
        lines.append(
            f"paving:     {area:.2f} m² boundary, "
            f"{config.paving.paver_width:g} x {config.paving.paver_height:g} mm pavers, "
            f"{len(config.paving.exclude_zones)} exclude zone(s)"
        )
    if config.extension is None:
        lines.append("extension:  not configured")
    else:
        lines.append(f"extension:  {len(config.extension.boundary)}-point boundary")
    return lines


def _report_validation(result: ConfigValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Layout cannot run: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Layout can run with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Layout is ready to run.")


@app.command()
def validate(config_file: ConfigArgument) -> None:
    """Check a layout file without laying any tiles.

    The schema is checked first, then each configured section's geometry:
    the pool outline, the paving boundary against the paver size, and
    whether the extension boundary has been edited at all.

    Exit codes:
        0 - Layout is ready to run
        1 - Layout has errors and cannot run
        2 - Layout can run but has warnings
    """
    typer.echo(f"Checking {config_file}")
    try:
        config = load_config(config_file)
    except ConfigError as e:
        _report_load_error(e)
        typer.echo("Layout cannot run.", err=True)
        raise typer.Exit(code=1)

    for line in _section_summaries(config):
        typer.echo(f"  {line}")
    typer.echo()

    result = validate_config(config)
    _report_validation(result)
    raise typer.Exit(code=result.exit_code)


def _emit(output: LayoutOutput, output_format: str, output_file: Path | None, show_tiles: bool) -> None:
    """Print or write one layout output, then exit with its status code."""
    fmt = output_format.lower()
    if fmt == "text":
        report = LayoutReportFormatter(show_tiles=show_tiles).format(output)
        if output_file is not None:
            output_file.write_text(report + "\n", encoding="utf-8")
            typer.echo(f"Report written to {output_file}")
        else:
            typer.echo(report)
    elif ExporterRegistry.is_registered(fmt):
        exporter = ExporterRegistry.get(fmt)()
        if output_file is not None:
            exporter.export(output, output_file)
            typer.echo(f"{fmt.upper()} written to {output_file}")
        else:
            typer.echo(exporter.export_string(output))
    else:
        available = ", ".join(["text", *ExporterRegistry.available_formats()])
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {available}", err=True)
        raise typer.Exit(code=1)

    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    if output.has_warnings:
        raise typer.Exit(code=2)


@app.command()
def coping(
    config_file: ConfigArgument,
    output_format: FormatOption = "text",
    output_file: OutputOption = None,
    tiles: TilesOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Lay coping around the configured pool outline."""
    _configure_logging(verbose)
    config = _load(config_file)
    if config.coping is None:
        typer.echo("Error: configuration has no coping section", err=True)
        raise typer.Exit(code=1)
    _emit(LayoutCommand().execute_coping(config), output_format, output_file, tiles)


@app.command()
def fill(
    config_file: ConfigArgument,
    output_format: FormatOption = "text",
    output_file: OutputOption = None,
    tiles: TilesOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Fill the configured paving boundary with pavers.

    Exit codes:
        0 - Pavers laid
        1 - Configuration or boundary invalid
        2 - Boundary valid but no pavers fit
    """
    _configure_logging(verbose)
    config = _load(config_file)
    if config.paving is None:
        typer.echo("Error: configuration has no paving section", err=True)
        raise typer.Exit(code=1)
    _emit(LayoutCommand().execute_paving(config), output_format, output_file, tiles)


@app.command()
def extend(
    config_file: ConfigArgument,
    output_format: FormatOption = "text",
    output_file: OutputOption = None,
    tiles: TilesOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Grow the coping toward the edited extension boundary.

    Only the added tiles are reported. Exits with code 2 when the boundary
    still matches the default coping edge.
    """
    _configure_logging(verbose)
    config = _load(config_file)
    if config.extension is None:
        typer.echo("Error: configuration has no extension section", err=True)
        raise typer.Exit(code=1)
    _emit(LayoutCommand().execute_extension(config), output_format, output_file, tiles)


if __name__ == "__main__":
    app()
