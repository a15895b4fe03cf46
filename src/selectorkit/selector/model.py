"""Selector model: part kinds, combinators, and the fluent Selector builder.

A Selector accumulates the parts of one compound selector in a fixed order:

    element < id < class < attribute < pseudo-class < pseudo-element < combinator

Each accepted part moves an integer cursor to its rank; a part ranked below
the cursor is rejected. Element, id, pseudo-element and combinator may be set
at most once. A combinator is always set together with the selector it links
to, which turns the left selector into the head of a chain.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from selectorkit.selector.errors import (
    DuplicateSingletonPart,
    OutOfOrderPart,
    SelectorAlreadyLinked,
)

logger = logging.getLogger(__name__)


class PartKind(Enum):
    """Kind of a selector part, declared in rank order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    COMBINATOR = "combinator"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def is_singleton(self) -> bool:
        return self in _SINGLETON_KINDS


_ORDER: tuple[PartKind, ...] = tuple(PartKind)
_RANKS: dict[PartKind, int] = {kind: rank for rank, kind in enumerate(_ORDER)}
_SINGLETON_KINDS = frozenset(
    {PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT, PartKind.COMBINATOR}
)


class Combinator(Enum):
    """Standard combinator tokens."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


@dataclass(frozen=True)
class Compound:
    """Read-only snapshot of the parts of a single compound selector."""

    element: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element: str | None = None

    def render(self) -> str:
        """Concatenate the parts in canonical order without separators."""
        return "".join(
            [
                self.element or "",
                f"#{self.id}" if self.id is not None else "",
                "".join(f".{name}" for name in self.classes),
                "".join(f"[{attr}]" for attr in self.attributes),
                "".join(f":{pseudo}" for pseudo in self.pseudo_classes),
                f"::{self.pseudo_element}" if self.pseudo_element is not None else "",
            ]
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "element": self.element,
            "id": self.id,
            "classes": list(self.classes),
            "attributes": list(self.attributes),
            "pseudo_classes": list(self.pseudo_classes),
            "pseudo_element": self.pseudo_element,
        }


class Selector:
    """Fluent accumulator for one compound selector and its linked successor.

    Every setter returns the selector itself so calls can be chained::

        Selector().element("a").attr('href$=".png"').pseudo_class("focus")

    Once a selector has been passed as the right-hand side of ``combine`` it
    belongs to the left selector's chain and rejects further changes.
    """

    def __init__(self) -> None:
        self._element: str | None = None
        self._id: str | None = None
        self._classes: list[str] = []
        self._attributes: list[str] = []
        self._pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None
        self._combinator: str | None = None
        self._linked: Selector | None = None
        self._cursor = 0
        self._consumed = False

    # --- inspection -----------------------------------------------------------

    @property
    def parts(self) -> Compound:
        """Snapshot of this selector's own parts, excluding the linked chain."""
        return Compound(
            element=self._element,
            id=self._id,
            classes=tuple(self._classes),
            attributes=tuple(self._attributes),
            pseudo_classes=tuple(self._pseudo_classes),
            pseudo_element=self._pseudo_element,
        )

    @property
    def combinator(self) -> str | None:
        return self._combinator

    @property
    def linked(self) -> Selector | None:
        return self._linked

    @property
    def is_consumed(self) -> bool:
        """True once this selector is the right-hand side of a combine."""
        return self._consumed

    def chain(self) -> Iterator[tuple[Compound, str | None]]:
        """Yield each compound of the chain with the combinator that follows it."""
        node: Selector | None = self
        while node is not None:
            yield node.parts, node._combinator
            node = node._linked

    # --- building -------------------------------------------------------------

    def _is_set(self, kind: PartKind) -> bool:
        if kind is PartKind.ELEMENT:
            return self._element is not None
        if kind is PartKind.ID:
            return self._id is not None
        if kind is PartKind.PSEUDO_ELEMENT:
            return self._pseudo_element is not None
        if kind is PartKind.COMBINATOR:
            return self._combinator is not None
        return False

    def set_part(self, kind: PartKind, value: Any) -> Selector:
        """Add one part after checking cardinality and ordering.

        ``value`` is a string for every kind except ``PartKind.COMBINATOR``,
        which takes a ``(combinator, other_selector)`` pair. Nothing is
        changed when a check fails.
        """
        if self._consumed:
            logger.debug("Rejected %s: selector already linked", kind.value)
            raise SelectorAlreadyLinked(
                f"Cannot add {kind.value} to a selector that is already "
                "linked into another selector",
                kind,
            )
        if kind.is_singleton and self._is_set(kind):
            logger.debug("Rejected %s: already set", kind.value)
            raise DuplicateSingletonPart(kind)
        if kind.rank < self._cursor:
            after = _ORDER[self._cursor]
            logger.debug("Rejected %s: out of order after %s", kind.value, after.value)
            raise OutOfOrderPart(kind, after)

        if kind is PartKind.COMBINATOR:
            combinator, other = value
            if isinstance(combinator, Combinator):
                combinator = combinator.value
            if other is self:
                raise SelectorAlreadyLinked("Cannot link a selector to itself", kind)
            if other.is_consumed:
                raise SelectorAlreadyLinked(
                    "Cannot link a selector that is already linked into "
                    "another selector",
                    kind,
                )
            self._combinator = combinator
            self._linked = other
            other._consumed = True
        elif kind is PartKind.ELEMENT:
            self._element = value
        elif kind is PartKind.ID:
            self._id = value
        elif kind is PartKind.CLASS:
            self._classes.append(value)
        elif kind is PartKind.ATTRIBUTE:
            self._attributes.append(value)
        elif kind is PartKind.PSEUDO_CLASS:
            self._pseudo_classes.append(value)
        else:
            self._pseudo_element = value

        self._cursor = kind.rank
        logger.debug("Accepted %s: %r", kind.value, value)
        return self

    def element(self, value: str) -> Selector:
        return self.set_part(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.set_part(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.set_part(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.set_part(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.set_part(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.set_part(PartKind.PSEUDO_ELEMENT, value)

    def combine(self, combinator: Combinator | str, other: Selector) -> Selector:
        """Link ``other`` after this selector; returns this selector."""
        return self.set_part(PartKind.COMBINATOR, (combinator, other))

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the canonical selector text, including the linked chain."""
        text = self.parts.render()
        if self._linked is not None:
            text += f" {self._combinator} {self._linked.render()}"
        return text

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Selector({self.render()!r})"
