"""
Selector state for the builder.

SelectorState holds the text accumulated so far and the kinds of every part
appended, in call order. SelectorState is frozen — the builder derives new
instances rather than mutating state in place, so a partially built selector
can be reused as the prefix of several others.
"""

from __future__ import annotations

from dataclasses import dataclass

from selectorkit.grammar.types import PartKind


@dataclass(frozen=True)
class SelectorState:
    """
    Accumulated state of one selector chain.

    Attributes:
        text: Selector text built so far.
        parts: Kind of every part appended, in call order.
        combined: True for the result of combine(); such a state is terminal
            and carries no parts of its own.
    """

    text: str = ""
    parts: tuple[PartKind, ...] = ()
    combined: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.parts, tuple):
            object.__setattr__(self, "parts", tuple(self.parts))
        if self.combined and self.parts:
            raise ValueError(
                f"a combined selector cannot carry compound parts, got {len(self.parts)}"
            )

    @property
    def last_part(self) -> PartKind | None:
        return self.parts[-1] if self.parts else None

    @property
    def is_empty(self) -> bool:
        return not self.parts and not self.combined

    def occurrences(self, kind: PartKind) -> int:
        """Number of times *kind* has been appended in this chain."""
        return self.parts.count(kind)

    def append(self, kind: PartKind, token: str) -> SelectorState:
        """Return a new state with *token* appended as a part of *kind*."""
        return SelectorState(text=self.text + token, parts=self.parts + (kind,))
