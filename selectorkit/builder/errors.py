"""Errors raised while building a compound selector."""

from __future__ import annotations

from selectorkit.grammar.types import PartKind

DUPLICATE_SINGULAR_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
OUT_OF_ORDER_PART_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base class for selector construction errors."""


class DuplicateSingularPartError(SelectorError):
    """Raised when element, id or pseudo-element is added a second time.

    Attributes:
        kind: The singular part kind that was repeated.
    """

    def __init__(self, kind: PartKind) -> None:
        super().__init__(DUPLICATE_SINGULAR_PART_MESSAGE)
        self.kind = kind


class OutOfOrderPartError(SelectorError):
    """Raised when a part is added after a kind it may not follow.

    Attributes:
        kind: The part kind that was rejected.
        after: The last part already in the selector, or None when the
            selector is the result of combine().
    """

    def __init__(self, kind: PartKind, after: PartKind | None) -> None:
        super().__init__(OUT_OF_ORDER_PART_MESSAGE)
        self.kind = kind
        self.after = after
