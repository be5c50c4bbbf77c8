"""Fluent, immutable CSS selector builder.

Example::

    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").render()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).render()
    # 'div#main + table#data'
"""

from __future__ import annotations

from dataclasses import dataclass

from selectorkit.selector.model import Combinator, Part, State, next_state

__all__ = ["SelectorBuilder", "css_selector_builder", "combine"]


@dataclass(frozen=True)
class SelectorBuilder:
    """A (partial) CSS selector and the part categories applied so far.

    Every part-adding method returns a new builder; instances are never
    mutated, so any builder can be shared, extended along several branches
    and rendered any number of times.
    """

    text: str = ""
    used_parts: tuple[Part, ...] = ()
    state: State = State.START

    def _append(self, part: Part, value: str) -> SelectorBuilder:
        state = next_state(self.state, part)
        return SelectorBuilder(
            text=self.text + part.render(value),
            used_parts=self.used_parts + (part,),
            state=state,
        )

    # --- simple selector parts ------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        """Append a type selector verbatim, e.g. ``div``."""
        return self._append(Part.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        """Append ``#value``."""
        return self._append(Part.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        """Append ``.value``. May be repeated."""
        return self._append(Part.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append ``[value]``; *value* is a raw expression such as ``href$=".png"``."""
        return self._append(Part.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Append ``:value``. May be repeated."""
        return self._append(Part.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Append ``::value``."""
        return self._append(Part.PSEUDO_ELEMENT, value)

    # --- combination and output -----------------------------------------------

    def combine(
        self,
        left: SelectorBuilder,
        combinator: Combinator | str,
        right: SelectorBuilder,
    ) -> SelectorBuilder:
        """Join two selectors with a combinator; see :func:`combine`."""
        return combine(left, combinator, right)

    def render(self) -> str:
        """Return the selector text built so far."""
        return self.text

    stringify = render

    def __str__(self) -> str:
        return self.text


def combine(
    left: SelectorBuilder,
    combinator: Combinator | str,
    right: SelectorBuilder,
) -> SelectorBuilder:
    """Return a builder for ``left <combinator> right``.

    The combinator is padded with a single space on each side and is not
    validated, so the descendant combinator renders as three spaces. The
    result is render-only: adding simple parts to it raises OrderError.
    """
    token = combinator.value if isinstance(combinator, Combinator) else combinator
    return SelectorBuilder(
        text=f"{left.text} {token} {right.text}",
        state=State.COMBINED,
    )


# Shared entry point for new chains. Never decorated itself.
css_selector_builder = SelectorBuilder()
