from selectorkit.serialization.errors import ParseError
from selectorkit.serialization.json_codec import deserialize, serialize

__all__ = ["serialize", "deserialize", "ParseError"]
