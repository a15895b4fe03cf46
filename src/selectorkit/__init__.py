"""selectorkit - fluent builder for CSS-like compound and complex selectors."""

from selectorkit.builder import SelectorBuilder, builder, combine
from selectorkit.recipe import RecipeError, build_selector
from selectorkit.selector import (
    Combinator,
    Compound,
    DuplicateSingletonPart,
    OutOfOrderPart,
    PartKind,
    Selector,
    SelectorAlreadyLinked,
    SelectorError,
)

__version__ = "0.1.0"

__all__ = [
    "builder",
    "combine",
    "SelectorBuilder",
    "Selector",
    "Compound",
    "PartKind",
    "Combinator",
    "build_selector",
    "RecipeError",
    "SelectorError",
    "DuplicateSingletonPart",
    "OutOfOrderPart",
    "SelectorAlreadyLinked",
]
