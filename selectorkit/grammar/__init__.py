from .registry import GrammarRegistry, get_registry
from .types import Combinator, PartKind, PartKindEntry

__all__ = [
    # Enums
    "PartKind",
    "Combinator",
    # Registry entry types (frozen, loaded from YAML)
    "PartKindEntry",
    # Registry
    "GrammarRegistry",
    "get_registry",
]
