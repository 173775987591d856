"""CLI entry point for hopp2postman."""

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from hopp2postman.generator.collection import convert_collection
from hopp2postman.parser.base import HoppCollection
from hopp2postman.parser.detect import detect_format
from hopp2postman.parser.hoppscotch import count_requests, parse_hoppscotch


def _load_collections(doc_path: Path) -> list[HoppCollection]:
    """Load a Hoppscotch export, turning bad input into a CLI error."""
    try:
        return parse_hoppscotch(doc_path)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{doc_path} is not valid JSON: {e}")
    except ValidationError as e:
        raise click.ClickException(f"{doc_path} is not a Hoppscotch collection:\n{e}")
    except ValueError as e:
        raise click.ClickException(f"{doc_path} is not a Hoppscotch export: {e}")


@click.group()
def main():
    """Convert Hoppscotch collections to Postman v2.1."""
    pass


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file path for the Postman collection.")
@click.option("--index", default=0, show_default=True, help="Collection to convert when the export holds several.")
@click.option("--indent", default=None, type=int, help="Pretty-print with this indent.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def convert(doc_path: Path, output: Path, index: int, indent: int | None, verbose: bool):
    """Convert a Hoppscotch collection export to a Postman collection."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    fmt = detect_format(doc_path)
    if fmt != "hoppscotch":
        raise click.ClickException(f"{doc_path} does not look like a Hoppscotch export (detected: {fmt}).")

    collections = _load_collections(doc_path)
    if not 0 <= index < len(collections):
        raise click.BadParameter(f"export holds {len(collections)} collection(s)", param_hint="--index")
    collection = collections[index]

    click.echo(f"Converting '{collection.name}' ({count_requests(collection)} requests)...")
    try:
        result = convert_collection(collection).to_json(indent=indent)
    except ValueError as e:
        raise click.ClickException(f"Conversion failed: {e}")

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result, encoding="utf-8")
    click.echo(f"Postman collection saved to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
def detect(doc_path: Path):
    """Print the detected format of a collection file."""
    click.echo(detect_format(doc_path))


@main.command(name="list")
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
def list_collections(doc_path: Path):
    """List the collections in a Hoppscotch export."""
    for i, collection in enumerate(_load_collections(doc_path)):
        click.echo(
            f"[{i}] {collection.name}: {len(collection.folders)} folders, "
            f"{count_requests(collection)} requests"
        )
