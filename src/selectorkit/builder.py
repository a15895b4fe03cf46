"""Facade for creating selectors without referencing the Selector type."""

from __future__ import annotations

from selectorkit.selector.model import Combinator, PartKind, Selector

__all__ = ["SelectorBuilder", "builder", "combine"]


def _seed(kind: PartKind, value: str) -> Selector:
    return Selector().set_part(kind, value)


def combine(left: Selector, combinator: Combinator | str, right: Selector) -> Selector:
    """Link ``right`` after ``left`` and return ``left`` as the chain head."""
    return left.combine(combinator, right)


class SelectorBuilder:
    """Stateless entry points, each returning a new selector seeded with one part.

    Example::

        builder.combine(
            builder.element("div").id("main").class_("container"),
            "+",
            builder.element("table").id("data"),
        ).render()
        # 'div#main.container + table#data'
    """

    def element(self, value: str) -> Selector:
        return _seed(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return _seed(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return _seed(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return _seed(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return _seed(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return _seed(PartKind.PSEUDO_ELEMENT, value)

    def combine(
        self, left: Selector, combinator: Combinator | str, right: Selector
    ) -> Selector:
        return combine(left, combinator, right)


builder = SelectorBuilder()
