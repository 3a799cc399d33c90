"""
selectorkit: a validating CSS selector builder, plus a Rectangle value object
and JSON helpers.
"""

from .builder import (
    DuplicateSingularPartError,
    OutOfOrderPartError,
    SelectorBuilder,
    SelectorError,
    SelectorState,
    build,
    css_selector_builder,
)
from .grammar import Combinator, GrammarRegistry, PartKind, PartKindEntry, get_registry
from .objects import Rectangle, from_json, to_json

__all__ = [
    # Builder
    "css_selector_builder",
    "SelectorBuilder",
    "SelectorState",
    "build",
    "SelectorError",
    "DuplicateSingularPartError",
    "OutOfOrderPartError",
    # Grammar
    "PartKind",
    "PartKindEntry",
    "Combinator",
    "GrammarRegistry",
    "get_registry",
    # Objects
    "Rectangle",
    "to_json",
    "from_json",
]
