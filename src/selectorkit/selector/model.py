"""Selector model: part categories, builder states, and the transition table.

A compound selector is made of simple parts that must appear in a fixed
order::

    element#id.class[attr]:pseudo-class::pseudo-element

The builder tracks the most recently applied category as its state. Because
parts can only ever move forward in the canonical order, that single value is
enough to decide whether the next part is legal, a repeat of a
single-occurrence part, or out of order.
"""

from __future__ import annotations

import logging
from enum import Enum

from selectorkit.selector.errors import (
    COMBINED_MESSAGE,
    DUPLICATE_MESSAGE,
    ORDER_MESSAGE,
    DuplicateError,
    OrderError,
)

logger = logging.getLogger(__name__)


class Part(Enum):
    """Simple selector categories, in canonical order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this category in the canonical order (0-based)."""
        return _CANONICAL_ORDER.index(self)

    @property
    def repeatable(self) -> bool:
        """True for categories that may occur several times in a row."""
        return self in _REPEATABLE

    def render(self, value: str) -> str:
        """Render *value* with this category's punctuation."""
        return _TEMPLATES[self].format(value)


_CANONICAL_ORDER: tuple[Part, ...] = tuple(Part)

_REPEATABLE = frozenset({Part.CLASS, Part.ATTRIBUTE, Part.PSEUDO_CLASS})

_TEMPLATES: dict[Part, str] = {
    Part.ELEMENT: "{}",
    Part.ID: "#{}",
    Part.CLASS: ".{}",
    Part.ATTRIBUTE: "[{}]",
    Part.PSEUDO_CLASS: ":{}",
    Part.PSEUDO_ELEMENT: "::{}",
}


class State(Enum):
    """Builder state: the last applied category, or START / COMBINED."""

    START = "start"
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    COMBINED = "combined"

    @classmethod
    def after(cls, part: Part) -> State:
        """The state reached by applying *part*."""
        return cls[part.name]


class Rejection(Enum):
    """Reasons a transition can be refused."""

    ORDER = "order"
    DUPLICATE = "duplicate"
    COMBINED = "combined"


class Combinator(str, Enum):
    """CSS combinators joining two selectors."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


def _decide(state: State, part: Part) -> State | Rejection:
    if state is State.COMBINED:
        return Rejection.COMBINED
    if state is State.START:
        return State.after(part)
    current = Part[state.name]
    if current is part:
        return State.after(part) if part.repeatable else Rejection.DUPLICATE
    if current.rank > part.rank:
        return Rejection.ORDER
    return State.after(part)


TRANSITIONS: dict[State, dict[Part, State | Rejection]] = {
    state: {part: _decide(state, part) for part in Part} for state in State
}


def next_state(state: State, part: Part) -> State:
    """Look up the transition for *part* from *state*.

    Raises:
        DuplicateError: *part* may occur only once and is already present.
        OrderError: *part* must come before the current state, or the
            builder holds a combined selector.
    """
    outcome = TRANSITIONS[state][part]
    if isinstance(outcome, State):
        return outcome

    logger.debug("Rejected %s in state %s: %s", part.value, state.value, outcome.value)
    if outcome is Rejection.DUPLICATE:
        raise DuplicateError(DUPLICATE_MESSAGE, part=part, state=state)
    if outcome is Rejection.COMBINED:
        raise OrderError(COMBINED_MESSAGE, part=part, state=state)
    raise OrderError(ORDER_MESSAGE, part=part, state=state)
