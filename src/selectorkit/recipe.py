"""Build selector chains from flat lists of builder instructions.

A recipe is a sequence of tokens, each either a part or a combinator:

    element=div id=main class=container + element=table id=data

Parts are ``kind=value`` pairs; only the first ``=`` separates the kind, so
``attr=href$=".png"`` keeps the whole attribute body. Combinators are the
literal tokens ``+``, ``~``, ``>`` and a single space, or the names
``descendant``, ``child``, ``adjacent`` and ``sibling``.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable

from selectorkit.builder import builder, combine
from selectorkit.selector.model import Combinator, PartKind, Selector

__all__ = ["RecipeError", "build_selector"]

logger = logging.getLogger(__name__)

_PART_RE = re.compile(r"(?P<kind>[a-z][a-z-]*)=(?P<value>.+)", re.DOTALL)

_KINDS: dict[str, PartKind] = {
    "element": PartKind.ELEMENT,
    "id": PartKind.ID,
    "class": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "attribute": PartKind.ATTRIBUTE,
    "pseudo-class": PartKind.PSEUDO_CLASS,
    "pseudo-element": PartKind.PSEUDO_ELEMENT,
}

_COMBINATORS: dict[str, Combinator] = {
    " ": Combinator.DESCENDANT,
    "descendant": Combinator.DESCENDANT,
    ">": Combinator.CHILD,
    "child": Combinator.CHILD,
    "+": Combinator.ADJACENT_SIBLING,
    "adjacent": Combinator.ADJACENT_SIBLING,
    "~": Combinator.GENERAL_SIBLING,
    "sibling": Combinator.GENERAL_SIBLING,
}

_ENTRY_POINTS: dict[PartKind, Callable[[str], Selector]] = {
    PartKind.ELEMENT: builder.element,
    PartKind.ID: builder.id,
    PartKind.CLASS: builder.class_,
    PartKind.ATTRIBUTE: builder.attr,
    PartKind.PSEUDO_CLASS: builder.pseudo_class,
    PartKind.PSEUDO_ELEMENT: builder.pseudo_element,
}


class RecipeError(ValueError):
    """Raised when a recipe token list cannot be turned into builder calls."""


def _parse_part(token: str) -> tuple[PartKind, str]:
    match = _PART_RE.fullmatch(token)
    if match is None:
        raise RecipeError(f"Invalid part {token!r}: expected kind=value")
    name = match.group("kind")
    if name not in _KINDS:
        raise RecipeError(f"Unknown part kind {name!r} in {token!r}")
    return _KINDS[name], match.group("value")


def build_selector(tokens: Iterable[str]) -> Selector:
    """Build a selector chain from recipe tokens.

    Compounds are built left to right, then linked from the right so that
    each combinator joins a compound to the rest of the chain.
    """
    compounds: list[Selector] = []
    joins: list[Combinator] = []
    current: Selector | None = None

    for token in tokens:
        if token in _COMBINATORS:
            if current is None:
                raise RecipeError(f"Combinator {token!r} must follow a selector part")
            compounds.append(current)
            joins.append(_COMBINATORS[token])
            current = None
            continue
        kind, value = _parse_part(token)
        if current is None:
            current = _ENTRY_POINTS[kind](value)
        else:
            current.set_part(kind, value)

    if current is None:
        if joins:
            raise RecipeError("Recipe must not end with a combinator")
        raise RecipeError("Recipe is empty")
    compounds.append(current)

    head = compounds[-1]
    for left, join in zip(reversed(compounds[:-1]), reversed(joins)):
        head = combine(left, join, head)
    logger.debug("Built %d compound(s) from recipe", len(compounds))
    return head
