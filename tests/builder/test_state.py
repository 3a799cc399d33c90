"""Tests for builder.state — SelectorState dataclass."""

import pytest

from selectorkit.builder import SelectorState
from selectorkit.grammar import PartKind


class TestSelectorStateConstruction:
    def test_default_values(self):
        state = SelectorState()
        assert state.text == ""
        assert state.parts == ()
        assert state.combined is False
        assert state.is_empty
        assert state.last_part is None

    def test_parts_list_promoted_to_tuple(self):
        state = SelectorState(text="div.a", parts=[PartKind.ELEMENT, PartKind.CLASS])  # type: ignore[arg-type]
        assert state.parts == (PartKind.ELEMENT, PartKind.CLASS)

    def test_rejects_combined_with_parts(self):
        with pytest.raises(ValueError, match="combined selector cannot carry compound parts"):
            SelectorState(text="a + b", parts=(PartKind.ELEMENT,), combined=True)

    def test_combined_is_not_empty(self):
        assert not SelectorState(text="a > b", combined=True).is_empty

    def test_state_is_frozen(self):
        state = SelectorState()
        with pytest.raises(AttributeError):
            state.text = "div"  # type: ignore[misc]


class TestSelectorStateAppend:
    def test_append_returns_new_state(self):
        state = SelectorState()
        updated = state.append(PartKind.ELEMENT, "div")
        assert updated is not state
        assert state.text == ""
        assert state.parts == ()
        assert updated.text == "div"
        assert updated.parts == (PartKind.ELEMENT,)

    def test_occurrences_and_last_part(self):
        state = (
            SelectorState()
            .append(PartKind.ELEMENT, "div")
            .append(PartKind.CLASS, ".a")
            .append(PartKind.CLASS, ".b")
        )
        assert state.occurrences(PartKind.CLASS) == 2
        assert state.occurrences(PartKind.ELEMENT) == 1
        assert state.occurrences(PartKind.ID) == 0
        assert state.last_part == PartKind.CLASS

    def test_equal_states_compare_equal(self):
        a = SelectorState().append(PartKind.ID, "#main")
        b = SelectorState().append(PartKind.ID, "#main")
        assert a == b
        assert hash(a) == hash(b)
