"""CLI commands: selectorkit area / load-rect -- rectangle helpers."""

from __future__ import annotations

import dataclasses
import sys

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.serialization import ParseError, deserialize, serialize
from selectorkit.shapes import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON too")
@click.option("--indent", type=int, default=None, help="JSON indentation (requires --json)")
@click.option("--sort-keys", is_flag=True, help="Sort JSON keys (requires --json)")
@click.pass_context
def area(
    ctx: click.Context,
    width: float,
    height: float,
    as_json: bool,
    indent: int | None,
    sort_keys: bool,
) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    if not as_json and (indent is not None or sort_keys):
        raise click.UsageError("--indent and --sort-keys require --json", ctx=ctx)

    config = ctx.find_object(SelectorKitConfig) or SelectorKitConfig()
    config = dataclasses.replace(config, json_indent=indent, json_sort_keys=sort_keys)

    rect = Rectangle(width, height)
    if as_json:
        click.echo(
            serialize(rect, indent=config.json_indent, sort_keys=config.json_sort_keys)
        )
    click.echo(f"Area: {rect.get_area():g}")


@click.command("load-rect")
@click.argument("json_text")
def load_rect(json_text: str) -> None:
    """Load a rectangle from JSON_TEXT and print its area."""
    try:
        rect = deserialize(Rectangle, json_text)
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Parse error: {exc}{location}", err=True)
        sys.exit(1)

    width = getattr(rect, "width", None)
    height = getattr(rect, "height", None)
    # bool is an int subclass, JSON true/false are not sizes
    if not all(
        isinstance(v, (int, float)) and not isinstance(v, bool) for v in (width, height)
    ):
        click.echo("Not a rectangle: numeric 'width' and 'height' are required", err=True)
        sys.exit(1)
    click.echo(f"Area: {rect.get_area():g}")
