"""CLI entry point for api-doc-report."""

import logging
import sys
from pathlib import Path

import click

from api_doc_report.config import resolve_config
from api_doc_report.errors import ReportError
from api_doc_report.extractor import extract, extract_records
from api_doc_report.parser.swagger import parse_openapi
from api_doc_report.report.renderer import ReportRenderer

_spec_argument = click.argument("spec_path", required=False, type=click.Path(path_type=Path))
_strict_option = click.option(
    "--strict/--lenient",
    default=None,
    help="Fail on document diagnostics instead of rendering what could be parsed.",
)
_config_option = click.option(
    "--config", "config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML/JSON file with input, output and strict settings.",
)


def _fail(exc: ReportError):
    click.echo(f"Error: {exc}", err=True)
    sys.exit(exc.exit_code)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def main(verbose: bool):
    """API Doc Report: render Swagger/OpenAPI documents as Word reports."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@_spec_argument
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), help="Output .docx path.")
@_strict_option
@_config_option
def render(spec_path: Path | None, output: Path | None, strict: bool | None, config_path: Path | None):
    """Generate a .docx report from an API specification."""
    try:
        config = resolve_config(spec_path, output, strict, config_path)

        click.echo(f"Parsing {config.input_path}...")
        document = parse_openapi(config.input_path)
        records = extract_records(document, strict=config.strict, source=config.input_path)
        click.echo(f"Found {len(records)} endpoints.")

        ReportRenderer(api_title=document.title).render(records, config.output_path)
    except ReportError as exc:
        _fail(exc)

    click.echo(f"Documentation generated at: {config.output_path.resolve()}")


@main.command()
@_spec_argument
@_strict_option
@_config_option
def endpoints(spec_path: Path | None, strict: bool | None, config_path: Path | None):
    """List the endpoints a specification declares, in document order."""
    try:
        config = resolve_config(spec_path, strict=strict, config_path=config_path)
        records = extract(config.input_path, strict=config.strict)
    except ReportError as exc:
        _fail(exc)

    for record in records:
        click.echo(f"{record.method} {record.path}")
