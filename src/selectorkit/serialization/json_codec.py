"""JSON helpers: serialize object graphs and rebuild typed instances."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.serialization.errors import ParseError

__all__ = ["serialize", "deserialize"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _encode_default(obj: Any) -> Any:
    """Fallback encoder for values json does not handle natively."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize(obj: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Return the JSON representation of *obj*.

    Dataclass instances and plain objects are written as JSON objects of
    their fields.

    Example::

        serialize([1, 2, 3])                     # '[1, 2, 3]'
        serialize({"width": 10, "height": 20})   # '{"width": 10, "height": 20}'
    """
    return json.dumps(obj, indent=indent, sort_keys=sort_keys, default=_encode_default)


def deserialize(proto: type[T], json_text: str) -> T:
    """Parse *json_text* and return it as an instance of *proto*.

    The instance is created without calling ``__init__``; every key of the
    parsed JSON object becomes an attribute, so the result has *proto*'s
    methods and passes ``isinstance`` checks.

    Raises:
        ParseError: *json_text* is not valid JSON, is not a JSON object, or
            holds a key that cannot be set on *proto* (``__class__``, or a
            name outside its ``__slots__``).
    """
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno) from exc

    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a JSON object for {proto.__name__}, got {type(data).__name__}"
        )

    logger.debug("Deserializing %d field(s) into %s", len(data), proto.__name__)
    instance = proto.__new__(proto)
    for key, value in data.items():
        # object.__setattr__ also reaches frozen dataclasses
        try:
            object.__setattr__(instance, key, value)
        except (TypeError, AttributeError) as exc:
            raise ParseError(f"Cannot set field {key!r} on {proto.__name__}") from exc
    return instance
