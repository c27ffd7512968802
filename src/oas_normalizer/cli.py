"""CLI entry point for oas-normalizer."""

import json
import logging
from pathlib import Path

import click
import yaml

from oas_normalizer.errors import NormalizerError
from oas_normalizer.loader import load_document
from oas_normalizer.model import HttpOperation
from oas_normalizer.normalize import normalize_document


def _normalize(doc_path: Path) -> list[HttpOperation]:
    """Load and normalize a document, reporting failures as CLI errors."""
    try:
        return normalize_document(load_document(doc_path))
    except NormalizerError as e:
        raise click.ClickException(str(e)) from e


def _render(operations: list[HttpOperation], fmt: str, indent: int) -> str:
    data = [op.to_dict() for op in operations]
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, indent=indent)
    return json.dumps(data, indent=indent, ensure_ascii=False, default=str) + "\n"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log skipped and degraded objects.")
def main(verbose: bool):
    """OAS Normalizer: turn Swagger 2.0 and OpenAPI 3.x into one HTTP operation model."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write to this file instead of stdout.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("--indent", default=2, show_default=True, type=click.IntRange(min=1), help="Indentation width.")
def normalize(doc_path: Path, output: Path | None, fmt: str, indent: int):
    """Normalize every operation in DOC_PATH."""
    operations = _normalize(doc_path)
    result = _render(operations, fmt, indent)

    if output is None:
        click.echo(result, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result, encoding="utf-8")
    click.echo(f"Normalized {len(operations)} operations into {output}", err=True)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def operations(doc_path: Path):
    """List the operations found in DOC_PATH."""
    for op in _normalize(doc_path):
        click.echo(f"{op.method.upper()} {op.path}")
