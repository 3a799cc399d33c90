"""
Core type definitions for the selector grammar layer.

Enums are the canonical vocabulary; PartKindEntry is the runtime view of one
row of the part-kind table. Entries are loaded from YAML by the registry and
are frozen after startup — never written to at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# ── Enums ──────────────────────────────────────────────────────────────────────


class PartKind(str, Enum):
    """Kinds of simple selector that make up one compound selector."""

    ELEMENT = "ELEMENT"
    ID = "ID"
    CLASS = "CLASS"
    ATTRIBUTE = "ATTRIBUTE"
    PSEUDO_CLASS = "PSEUDO_CLASS"
    PSEUDO_ELEMENT = "PSEUDO_ELEMENT"


class Combinator(str, Enum):
    """CSS combinators joining two selectors. Values are the literal symbols."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


# ── Registry entry types (frozen, loaded from YAML) ───────────────────────────


@dataclass(frozen=True)
class PartKindEntry:
    """
    One row of the part-kind table.

    Attributes:
        id: The part kind this entry describes.
        rank: Position in the element < id < class < attribute <
            pseudo-class < pseudo-element order.
        prefix: Text placed before the raw value when rendering.
        suffix: Text placed after the raw value when rendering.
        singular: True if the kind may occur at most once per selector.
        follows: Kinds allowed immediately before this one. An empty
            chain accepts any kind.
        description: Human-readable summary.
        notes: Free-form notes from the data file.
    """

    id: PartKind
    rank: int
    prefix: str
    suffix: str
    singular: bool
    follows: frozenset[PartKind] = field(default_factory=frozenset)
    description: str = ""
    notes: str = ""

    def __post_init__(self) -> None:
        # Accept plain iterables at construction sites and promote to frozenset.
        if not isinstance(self.follows, frozenset):
            object.__setattr__(self, "follows", frozenset(self.follows))

    def render(self, value: str) -> str:
        """Return *value* wrapped in this kind's prefix and suffix."""
        return f"{self.prefix}{value}{self.suffix}"
