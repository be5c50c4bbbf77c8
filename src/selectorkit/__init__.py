"""selectorkit: fluent CSS selector builder, plus small object and JSON helpers."""

from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.config import SelectorKitConfig  # noqa: E402
from selectorkit.selector import (  # noqa: E402
    Combinator,
    DuplicateError,
    OrderError,
    SelectorBuilder,
    SelectorError,
    combine,
    css_selector_builder,
)
from selectorkit.serialization import ParseError, deserialize, serialize  # noqa: E402
from selectorkit.shapes import Rectangle  # noqa: E402

__all__ = [
    "__version__",
    # config
    "SelectorKitConfig",
    # shapes
    "Rectangle",
    # serialization
    "serialize",
    "deserialize",
    "ParseError",
    # selector
    "SelectorBuilder",
    "css_selector_builder",
    "combine",
    "Combinator",
    "SelectorError",
    "OrderError",
    "DuplicateError",
]
