"""Command-line interface for inspecting and exporting DXF files.

This module provides the CLI using Click for parsing DXF files, printing
statistics of the parsed document and exporting it to JSON.
"""

import json
import logging
import traceback
from pathlib import Path
from typing import NoReturn

import click

from .config import ConfigurationHandler, ReaderConfig
from .io import DXFReader, JsonExporter
from .models import Document
from .protocols import IExporter


def _load_config(config: Path | None, verbose: bool) -> ReaderConfig:
    if config is None:
        reader_config = ReaderConfig()
    else:
        if verbose:
            click.echo(f"Loading configuration from: {config.resolve().as_posix()}")
        reader_config = ConfigurationHandler(config).load_config()

    level = logging.DEBUG if verbose else reader_config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return reader_config


def _read_document(dxf_file: Path, config: Path | None, verbose: bool) -> Document:
    reader = DXFReader(dxf_file, config=_load_config(config, verbose))
    click.echo(f"Parsing DXF: {dxf_file.name}")
    reader.load_file()
    return reader.document


def _raise_click_exception(error: Exception, verbose: bool) -> NoReturn:
    message = f"Processing failed: {error}"
    if verbose:
        message += "\n" + traceback.format_exc()
    raise click.ClickException(message) from error


def _print_entity_statistic(document: Document) -> None:
    header_line = f"{'Entity type':<25} {'Count':>12}"
    header_length = len(header_line)
    click.echo("\n" + "=" * header_length)
    click.echo("ENTITY STATISTICS")
    click.echo("=" * header_length)
    click.echo(header_line)
    click.echo("-" * header_length)

    statistics = document.get_statistics()
    for entity_type, count in sorted(statistics["entities"].items()):
        click.echo(f"{entity_type:<25} {count:>12}")
    click.echo("-" * header_length)
    click.echo(f"{'Total':<25} {len(document.entities):>12}")


def _print_document_statistic(document: Document) -> None:
    header_line = f"{'Content':<25} {'Count':>12}"
    header_length = len(header_line)
    click.echo("\n" + "=" * header_length)
    click.echo("DOCUMENT STATISTICS")
    click.echo("=" * header_length)
    click.echo(header_line)
    click.echo("-" * header_length)

    statistics = document.get_statistics()
    for name in ("header_variables", "view_ports", "line_types", "layers", "blocks", "block_entities"):
        label = name.replace("_", " ").capitalize()
        click.echo(f"{label:<25} {statistics[name]:>12}")
    click.echo("-" * header_length)


def _print_diagnostic_statistic(document: Document) -> None:
    header_line = f"{'Diagnostic':<25} {'Count':>12}"
    header_length = len(header_line)
    click.echo("\n" + "=" * header_length)
    click.echo("DIAGNOSTIC STATISTICS")
    click.echo("=" * header_length)
    click.echo(header_line)
    click.echo("-" * header_length)

    counts: dict[str, int] = {}
    for diagnostic in document.diagnostics:
        counts[diagnostic.kind.value] = counts.get(diagnostic.kind.value, 0) + 1
    if not counts:
        click.echo(f"{'None':<25} {0:>12}")
    for kind, count in sorted(counts.items()):
        click.echo(f"{kind:<25} {count:>12}")
    click.echo("-" * header_length)


def _print_export_statistic(exporter: IExporter) -> None:
    header_line = f"{'Exported':<25} {'Count':>12}"
    header_length = len(header_line)
    click.echo("\n" + "=" * header_length)
    click.echo("EXPORT STATISTICS")
    click.echo("=" * header_length)
    click.echo(header_line)
    click.echo("-" * header_length)

    for name, count in exporter.get_exported_statistics().items():
        label = name.replace("_", " ").capitalize()
        click.echo(f"{label:<25} {count:>12}")
    click.echo("-" * header_length)


@click.group()
@click.version_option(package_name="dxfparse")
def main() -> None:
    """DXF parser.

    This tool parses DXF files into header variables, tables, blocks and
    entities, prints statistics about them and exports them to JSON.
    """
    pass


@main.command()
@click.argument(
    "dxf_file",
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="JSON reader configuration",
)
@click.option(
    "--verbose",
    "-v",
    type=bool,
    is_flag=True,
    flag_value=True,
    help="Log debug messages and print tracebacks. (Default False)",
)
def inspect(dxf_file: Path, config: Path | None, verbose: bool) -> None:
    """Print statistics about the content of a DXF file.

    Arguments:
        DXF_FILE: Path to the DXF file to inspect
    """
    try:
        document = _read_document(dxf_file, config, verbose)
    except Exception as e:
        _raise_click_exception(e, verbose)

    _print_entity_statistic(document)
    _print_document_statistic(document)
    _print_diagnostic_statistic(document)
    if not verbose:
        return
    for diagnostic in document.diagnostics:
        click.echo(str(diagnostic))


@main.command(name="export-json")
@click.argument(
    "dxf_file",
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output JSON file path",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="JSON reader configuration",
)
@click.option(
    "--verbose",
    "-v",
    type=bool,
    is_flag=True,
    flag_value=True,
    help="Log debug messages and print tracebacks. (Default False)",
)
def export_json(dxf_file: Path, output: Path | None, config: Path | None, verbose: bool) -> None:
    """Parse a DXF file and export the document to JSON.

    Arguments:
        DXF_FILE: Path to the DXF file to export
    """
    if output is None:
        output = dxf_file.with_suffix(".json")

    try:
        document = _read_document(dxf_file, config, verbose)
        exporter = JsonExporter(output)
        exporter.export_document(document)
    except Exception as e:
        _raise_click_exception(e, verbose)

    click.echo(f"Exported document to: {output}")
    _print_export_statistic(exporter)


@main.command(name="create-config")
@click.argument("config_file", type=click.Path(path_type=Path))
def create_config(config_file: Path) -> None:
    """Create a sample reader configuration file.

    Arguments:
        CONFIG_FILE: Path of the JSON configuration file to write
    """
    config = ReaderConfig().to_dict()
    config["IgnoredDiagnostics"] = ["UNHANDLED_GROUP"]

    try:
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise click.ClickException(f"Cannot create configuration file: {e}") from e

    click.echo(f"Sample configuration created: {config_file}")
    click.echo("Edit this file to change encoding, log level or ignored diagnostics.")
