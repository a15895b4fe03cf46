"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import PartKind


class SelectorError(Exception):
    """Base class for contract violations raised while building a selector."""

    def __init__(self, message: str, kind: PartKind | None = None):
        self.kind = kind
        super().__init__(message)


class DuplicateSingletonPart(SelectorError):
    """Raised when element, id, pseudo-element or combinator is set twice."""

    def __init__(self, kind: PartKind):
        super().__init__(
            "Element, id, pseudo-element and combinator should not occur more "
            f"than one time inside the selector (got a second {kind.value})",
            kind,
        )


class OutOfOrderPart(SelectorError):
    """Raised when a part ranks below a part already accepted."""

    def __init__(self, kind: PartKind, after: PartKind):
        self.after = after
        super().__init__(
            "Selector parts should be arranged in the following order: element, "
            "id, class, attribute, pseudo-class, pseudo-element, combinator "
            f"(got {kind.value} after {after.value})",
            kind,
        )


class SelectorAlreadyLinked(SelectorError):
    """Raised when a selector consumed by combine is mutated or linked again."""
