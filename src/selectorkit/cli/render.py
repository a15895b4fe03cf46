"""CLI command: selectorkit render -- build a selector and print its text."""

from __future__ import annotations

import sys

import click

from selectorkit.recipe import RecipeError, build_selector
from selectorkit.selector.errors import SelectorError


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def render(tokens: tuple[str, ...]) -> None:
    """Build a selector from TOKENS and print its canonical text.

    Tokens are kind=value parts (element, id, class, attr, pseudo-class,
    pseudo-element) and combinators (+, ~, >, descendant, child, adjacent,
    sibling).
    """
    try:
        selector = build_selector(tokens)
    except (RecipeError, SelectorError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.render())
