"""Tests for the selector state machine and part categories."""

from __future__ import annotations

import logging

import pytest

from selectorkit.selector.errors import DuplicateError, OrderError
from selectorkit.selector.model import (
    TRANSITIONS,
    Combinator,
    Part,
    Rejection,
    State,
    next_state,
)


class TestPart:
    def test_canonical_order(self) -> None:
        assert [p.rank for p in Part] == [0, 1, 2, 3, 4, 5]
        assert Part.ELEMENT.rank < Part.ID.rank < Part.PSEUDO_ELEMENT.rank

    def test_repeatable(self) -> None:
        assert {p for p in Part if p.repeatable} == {
            Part.CLASS,
            Part.ATTRIBUTE,
            Part.PSEUDO_CLASS,
        }

    @pytest.mark.parametrize(
        "part, expected",
        [
            (Part.ELEMENT, "div"),
            (Part.ID, "#div"),
            (Part.CLASS, ".div"),
            (Part.ATTRIBUTE, "[div]"),
            (Part.PSEUDO_CLASS, ":div"),
            (Part.PSEUDO_ELEMENT, "::div"),
        ],
    )
    def test_render(self, part: Part, expected: str) -> None:
        assert part.render("div") == expected


class TestState:
    def test_after_maps_each_part(self) -> None:
        for part in Part:
            assert State.after(part).value == part.value


class TestTransitionTable:
    def test_every_state_has_a_row_for_every_part(self) -> None:
        assert set(TRANSITIONS) == set(State)
        for row in TRANSITIONS.values():
            assert set(row) == set(Part)

    def test_start_accepts_everything(self) -> None:
        for part in Part:
            assert TRANSITIONS[State.START][part] is State.after(part)

    def test_combined_rejects_everything(self) -> None:
        assert set(TRANSITIONS[State.COMBINED].values()) == {Rejection.COMBINED}

    def test_single_occurrence_parts_reject_themselves(self) -> None:
        assert TRANSITIONS[State.ELEMENT][Part.ELEMENT] is Rejection.DUPLICATE
        assert TRANSITIONS[State.ID][Part.ID] is Rejection.DUPLICATE
        assert TRANSITIONS[State.PSEUDO_ELEMENT][Part.PSEUDO_ELEMENT] is Rejection.DUPLICATE

    def test_repeatable_parts_loop(self) -> None:
        assert TRANSITIONS[State.CLASS][Part.CLASS] is State.CLASS
        assert TRANSITIONS[State.ATTRIBUTE][Part.ATTRIBUTE] is State.ATTRIBUTE
        assert TRANSITIONS[State.PSEUDO_CLASS][Part.PSEUDO_CLASS] is State.PSEUDO_CLASS

    def test_backwards_moves_are_order_rejections(self) -> None:
        assert TRANSITIONS[State.ATTRIBUTE][Part.CLASS] is Rejection.ORDER
        assert TRANSITIONS[State.ID][Part.ELEMENT] is Rejection.ORDER
        assert TRANSITIONS[State.PSEUDO_ELEMENT][Part.ELEMENT] is Rejection.ORDER

    def test_forward_moves_are_allowed(self) -> None:
        parts = list(Part)
        for i, current in enumerate(parts):
            for later in parts[i + 1:]:
                assert TRANSITIONS[State.after(current)][later] is State.after(later)


class TestNextState:
    def test_returns_next_state(self) -> None:
        assert next_state(State.ELEMENT, Part.ID) is State.ID

    def test_raises_duplicate(self) -> None:
        with pytest.raises(DuplicateError):
            next_state(State.ID, Part.ID)

    def test_raises_order(self) -> None:
        with pytest.raises(OrderError):
            next_state(State.PSEUDO_CLASS, Part.CLASS)

    def test_raises_order_for_combined(self) -> None:
        with pytest.raises(OrderError):
            next_state(State.COMBINED, Part.ELEMENT)

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="selectorkit.selector.model"):
            with pytest.raises(DuplicateError):
                next_state(State.ELEMENT, Part.ELEMENT)
        assert "Rejected element in state element" in caplog.text


class TestCombinator:
    def test_values(self) -> None:
        assert [c.value for c in Combinator] == [" ", "+", "~", ">"]

    def test_compares_equal_to_token(self) -> None:
        assert Combinator.CHILD == ">"
