"""CLI interface for the Listing Sprint Assistant."""
import json
import logging
import uuid
from pathlib import Path
from typing import Optional

import typer

from ..listing import (
    ListingValidationError,
    build_export_text,
    build_listing_pack,
    parse_brief,
    parse_keyword_csv,
    parse_materials_csv,
)

app = typer.Typer(help="Listing Sprint Assistant - Etsy listing packs from a product brief")

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def _load_brief(brief_file: str) -> dict:
    """Load a camelCase JSON brief (same shape the API accepts)."""
    with open(brief_file, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except ValueError:
            raise ListingValidationError("json")
    if not isinstance(data, dict):
        raise ListingValidationError("json")
    return data


@app.command()
def generate(
    brief_file: str = typer.Argument(..., help="Path to a JSON brief"),
    output_format: str = typer.Option("json", "--format", help="Output format: json or text"),
    out: Optional[str] = typer.Option(None, "--out", help="Write to this file instead of stdout"),
):
    """Generate a listing pack from a brief file."""
    if output_format not in ("json", "text"):
        typer.echo(f"Unknown format: {output_format}", err=True)
        raise typer.Exit(code=2)

    try:
        listing = parse_brief(_load_brief(brief_file))
    except OSError as e:
        typer.echo(f"Cannot read {brief_file}: {e.strerror or e}", err=True)
        raise typer.Exit(code=1)
    except ListingValidationError as e:
        typer.echo(e.code, err=True)
        raise typer.Exit(code=1)

    pack = build_listing_pack(listing)
    logger.info("Generated pack: %d tags, score %d", len(pack.tags), pack.score)

    if output_format == "text":
        rendered = build_export_text(f"cli-{uuid.uuid4().hex[:8]}", listing, pack)
    else:
        rendered = json.dumps(
            {
                "input": listing.model_dump(by_alias=True),
                "pack": pack.model_dump(by_alias=True),
            },
            ensure_ascii=False,
            indent=2,
        )

    if out:
        Path(out).write_text(rendered + "\n", encoding="utf-8")
        typer.echo(f"✓ Pack written to {out}")
    else:
        typer.echo(rendered)


@app.command()
def keywords(
    text: str = typer.Argument(..., help="Comma or newline separated phrases"),
    materials: bool = typer.Option(False, "--materials", help="Parse as a materials list"),
):
    """Normalize a keyword (or materials) list, one phrase per line."""
    try:
        values = parse_materials_csv(text) if materials else parse_keyword_csv(text)
    except ListingValidationError as e:
        typer.echo(e.code, err=True)
        raise typer.Exit(code=1)

    for value in values:
        typer.echo(value)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
