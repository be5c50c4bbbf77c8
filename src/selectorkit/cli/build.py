"""CLI command: selectorkit build -- assemble a selector from PART=VALUE pairs."""

from __future__ import annotations

import sys
from typing import Callable

import click

from selectorkit.selector import SelectorBuilder, SelectorError, css_selector_builder

# Accepted part names and the builder method each one calls.
_PART_METHODS: dict[str, Callable[[SelectorBuilder, str], SelectorBuilder]] = {
    "element": SelectorBuilder.element,
    "id": SelectorBuilder.id,
    "class": SelectorBuilder.class_,
    "attr": SelectorBuilder.attr,
    "attribute": SelectorBuilder.attr,
    "pseudo-class": SelectorBuilder.pseudo_class,
    "pseudo-element": SelectorBuilder.pseudo_element,
}


def _split_part(raw: str) -> tuple[str, str]:
    """Split ``name=value`` on the first ``=``; attribute values may contain more."""
    name, sep, value = raw.partition("=")
    if not sep or not value:
        raise click.BadParameter(f"expected PART=VALUE, got {raw!r}", param_hint="PARTS")
    name = name.strip().lower()
    if name not in _PART_METHODS:
        choices = ", ".join(sorted(_PART_METHODS))
        raise click.BadParameter(
            f"unknown part {name!r} (choose from {choices})", param_hint="PARTS"
        )
    return name, value


@click.command()
@click.argument("parts", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Build a selector from PART=VALUE pairs applied in the given order.

    Example: selectorkit build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    pairs = [_split_part(raw) for raw in parts]

    selector = css_selector_builder
    try:
        for name, value in pairs:
            selector = _PART_METHODS[name](selector, value)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.render())
