"""Runtime kind inspection for Waldo.

Every value reachable in an object graph is classified into one of a small,
closed set of kinds. The kind is what a match summary shows, e.g. ``(number)``,
and what ``by_kind`` compares against.
"""

import numbers
from enum import Enum
from typing import Any, Dict, Optional


class _Undefined:
    """Marker for a slot that exists but holds no value.

    Python has no separate "undefined" value, so graphs that need to model
    one (decoded documents with absent fields, placeholders in fixtures)
    use this singleton. It is falsy and compares equal only to itself.
    """

    _instance: Optional["_Undefined"] = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


class Kind(Enum):
    """Closed set of value kinds, rendered lowercase in summaries."""
    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    BYTES = "bytes"
    FUNCTION = "function"
    ARRAY = "array"
    OBJECT = "object"


# Python spellings accepted by by_kind in addition to the kind names
KIND_ALIASES: Dict[str, Kind] = {
    "none": Kind.NULL,
    "nonetype": Kind.NULL,
    "bool": Kind.BOOLEAN,
    "int": Kind.NUMBER,
    "float": Kind.NUMBER,
    "complex": Kind.NUMBER,
    "str": Kind.STRING,
    "bytearray": Kind.BYTES,
    "callable": Kind.FUNCTION,
    "list": Kind.ARRAY,
    "tuple": Kind.ARRAY,
    "dict": Kind.OBJECT,
}


def classify(value: Any) -> Kind:
    """Return the kind of a value.

    Order matters: ``bool`` is checked before numbers because it subclasses
    ``int``, and ``str``/``bytes`` before anything sequence-like.

    Args:
        value: Any Python value

    Returns:
        The value's Kind
    """
    if value is UNDEFINED:
        return Kind.UNDEFINED
    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, numbers.Number):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (bytes, bytearray)):
        return Kind.BYTES
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    if callable(value):
        return Kind.FUNCTION
    return Kind.OBJECT


def resolve_kind_name(name: str) -> Optional[Kind]:
    """Map a user-supplied kind name to a Kind, case-insensitively.

    Returns None for names that are not kinds or aliases; callers may still
    match those against class names.
    """
    lowered = name.lower()
    try:
        return Kind(lowered)
    except ValueError:
        return KIND_ALIASES.get(lowered)
