"""CLI command: selectorkit inspect -- display the parts of a selector chain."""

from __future__ import annotations

import json
import sys

import click

from selectorkit.recipe import RecipeError, build_selector
from selectorkit.selector.errors import SelectorError


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print the chain as JSON")
@click.argument("tokens", nargs=-1, required=True)
def inspect(as_json: bool, tokens: tuple[str, ...]) -> None:
    """Build a selector from TOKENS and show each compound's parts.

    Compounds are listed in chain order together with the combinator that
    joins each one to the next.
    """
    try:
        selector = build_selector(tokens)
    except (RecipeError, SelectorError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    chain = list(selector.chain())

    if as_json:
        payload = {
            "selector": selector.render(),
            "compounds": [
                {**compound.to_dict(), "combinator": combinator}
                for compound, combinator in chain
            ],
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"Selector:  {selector.render()}")
    click.echo(f"Compounds: {len(chain)}")
    click.echo()

    for index, (compound, combinator) in enumerate(chain, start=1):
        click.echo(f"  [{index}] {compound.render()}")
        if compound.element is not None:
            click.echo(f"      element={compound.element}")
        if compound.id is not None:
            click.echo(f"      id={compound.id}")
        for name in compound.classes:
            click.echo(f"      class={name}")
        for attr in compound.attributes:
            click.echo(f"      attr={attr}")
        for pseudo in compound.pseudo_classes:
            click.echo(f"      pseudo-class={pseudo}")
        if compound.pseudo_element is not None:
            click.echo(f"      pseudo-element={compound.pseudo_element}")
        if combinator is not None:
            click.echo(f"  combinator {combinator!r}")
