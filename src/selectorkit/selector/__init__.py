from selectorkit.selector.builder import SelectorBuilder, combine, css_selector_builder
from selectorkit.selector.errors import DuplicateError, OrderError, SelectorError
from selectorkit.selector.model import TRANSITIONS, Combinator, Part, Rejection, State, next_state

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "combine",
    "SelectorError",
    "OrderError",
    "DuplicateError",
    "Part",
    "State",
    "Rejection",
    "Combinator",
    "TRANSITIONS",
    "next_state",
]
