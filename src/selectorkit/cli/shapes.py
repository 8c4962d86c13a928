"""CLI commands: selectorkit area / shape -- rectangle and JSON helpers."""

from __future__ import annotations

import sys

import click

from selectorkit.errors import ParseError
from selectorkit.model import Circle, Rectangle
from selectorkit.serialization import from_json, get_json

_SHAPES = {"rectangle": Rectangle, "circle": Circle}


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    click.echo(f"{Rectangle(width, height).get_area():g}")


@click.command()
@click.argument("json_text")
@click.option(
    "--kind",
    type=click.Choice(sorted(_SHAPES)),
    default="rectangle",
    show_default=True,
    help="Shape type to build from the JSON object",
)
@click.option("--indent", type=int, default=None, help="Indent the echoed JSON")
def shape(json_text: str, kind: str, indent: int | None) -> None:
    """Build a shape from JSON_TEXT and print it with its area."""
    try:
        value = from_json(_SHAPES[kind], json_text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except (KeyError, TypeError) as exc:
        click.echo(f"Invalid {kind}: missing or bad field {exc}", err=True)
        sys.exit(1)
    try:
        area_text = f"{value.get_area():g}"
    except (TypeError, ValueError) as exc:
        click.echo(f"Invalid {kind}: non-numeric field ({exc})", err=True)
        sys.exit(1)
    click.echo(get_json(value, indent=indent))
    click.echo(f"Area: {area_text}")
