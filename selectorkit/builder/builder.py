"""
CSS selector builder.

A compound selector is built part by part from the shared entry point::

    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'

Every part method returns a new SelectorBuilder; the receiver is never
modified, so one partially built selector can be continued in several
directions. Two built selectors are joined with combine(), whose result is
terminal: it can only be stringified or used as an operand of another
combine().

Rules checked on every append, in this order:
  1. element, id and pseudo-element may occur at most once
     (DuplicateSingularPartError);
  2. the new part must be allowed to follow the last part already present,
     per the grammar registry (OutOfOrderPartError).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from selectorkit.grammar.registry import GrammarRegistry, get_registry
from selectorkit.grammar.types import Combinator, PartKind

from .errors import DuplicateSingularPartError, OutOfOrderPartError
from .state import SelectorState

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Immutable builder for one CSS selector."""

    def __init__(
        self,
        state: SelectorState | None = None,
        registry: GrammarRegistry | None = None,
    ) -> None:
        self._state = state if state is not None else SelectorState()
        self._registry = registry if registry is not None else get_registry()

    @property
    def state(self) -> SelectorState:
        return self._state

    @property
    def registry(self) -> GrammarRegistry:
        return self._registry

    # ── Parts ──────────────────────────────────────────────────────────────────

    def element(self, value: str) -> SelectorBuilder:
        """Append a type selector, e.g. ``div``."""
        return self._append(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        """Append an ID selector, e.g. ``#main``."""
        return self._append(PartKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        """Append a class selector, e.g. ``.container``."""
        return self._append(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append an attribute selector; *value* goes between the brackets."""
        return self._append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Append a pseudo-class, e.g. ``:focus``."""
        return self._append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Append a pseudo-element, e.g. ``::before``."""
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    # ── Combination ────────────────────────────────────────────────────────────

    def combine(
        self,
        selector1: SelectorBuilder,
        combinator: Combinator | str,
        selector2: SelectorBuilder,
    ) -> SelectorBuilder:
        """
        Join two built selectors with *combinator*.

        The result's text is ``selector1 + " " + combinator + " " + selector2``.
        The combinator is not validated; plain strings are spliced verbatim
        and Combinator members by their symbol. The receiver's own parts do
        not contribute to the result.
        """
        symbol = combinator.value if isinstance(combinator, Combinator) else combinator
        text = f"{selector1.stringify()} {symbol} {selector2.stringify()}"
        logger.debug("Combined selector %r", text)
        return SelectorBuilder(SelectorState(text=text, combined=True), self._registry)

    # ── Output ─────────────────────────────────────────────────────────────────

    def stringify(self) -> str:
        """Return the selector text built so far."""
        return self._state.text

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._state.text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorBuilder):
            return NotImplemented
        return self._state == other._state

    def __hash__(self) -> int:
        return hash(self._state)

    # ── Internals ──────────────────────────────────────────────────────────────

    def _append(self, kind: PartKind, value: str) -> SelectorBuilder:
        state = self._state
        if state.combined:
            logger.debug("Rejected %s: selector is already combined", kind.value)
            raise OutOfOrderPartError(kind, None)

        if self._registry.is_singular(kind) and state.occurrences(kind) >= 1:
            logger.debug("Rejected %s: already present in %r", kind.value, state.text)
            raise DuplicateSingularPartError(kind)

        previous = state.last_part
        if not self._registry.may_follow(kind, previous):
            logger.debug("Rejected %s after %s in %r", kind.value, previous, state.text)
            raise OutOfOrderPartError(kind, previous)

        token = self._registry.get_entry(kind).render(value)
        return SelectorBuilder(state.append(kind, token), self._registry)


# Shared entry point. It is an empty builder, so every chain started from it
# is independent of every other.
css_selector_builder = SelectorBuilder()

_PartMethod = Callable[[SelectorBuilder, str], SelectorBuilder]

PART_METHODS: dict[PartKind, _PartMethod] = {
    PartKind.ELEMENT: SelectorBuilder.element,
    PartKind.ID: SelectorBuilder.id,
    PartKind.CLASS: SelectorBuilder.class_,
    PartKind.ATTRIBUTE: SelectorBuilder.attr,
    PartKind.PSEUDO_CLASS: SelectorBuilder.pseudo_class,
    PartKind.PSEUDO_ELEMENT: SelectorBuilder.pseudo_element,
}


def build(parts: list[tuple[PartKind, str]]) -> SelectorBuilder:
    """Build a selector from ``(kind, value)`` pairs, applying each in order."""
    builder = css_selector_builder
    for kind, value in parts:
        builder = PART_METHODS[kind](builder, value)
    return builder
