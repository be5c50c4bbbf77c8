"""Error hierarchy for the selector builder."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import Part, State

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)

COMBINED_MESSAGE = "Combined selectors cannot take further simple selector parts"


class SelectorError(ValueError):
    """Base error for rejected selector parts."""

    def __init__(
        self,
        message: str,
        *,
        part: Part | None = None,
        state: State | None = None,
    ) -> None:
        super().__init__(message)
        self.part = part
        self.state = state


class OrderError(SelectorError):
    """A part was added after a category that must follow it."""


class DuplicateError(SelectorError):
    """A single-occurrence part (element, id, pseudo-element) was added twice."""
