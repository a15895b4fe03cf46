from selectorkit.selector.errors import (
    DuplicateSingletonPart,
    OutOfOrderPart,
    SelectorAlreadyLinked,
    SelectorError,
)
from selectorkit.selector.model import Combinator, Compound, PartKind, Selector

__all__ = [
    "Selector",
    "Compound",
    "PartKind",
    "Combinator",
    "SelectorError",
    "DuplicateSingletonPart",
    "OutOfOrderPart",
    "SelectorAlreadyLinked",
]
