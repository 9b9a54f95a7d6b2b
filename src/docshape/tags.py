"""
Type tags for JSON-compatible values.

Every value found in a document classifies to exactly one of seven tags.
``ABSENT`` is reserved for keys that do not exist on the containing object,
which is different from a key that is present with a ``null`` value.
"""

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Sequence

from .exceptions import UnsupportedTypeError

# Prefix of the reserved keys used when a tree is exported as a nested mapping
RESERVED_PREFIX = "___"


class TypeTag(Enum):
    NULL = "null"
    ABSENT = "undefined"
    ARRAY = "array"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def key(self) -> str:
        """Reserved key of this tag in the nested-mapping export."""
        return f"{RESERVED_PREFIX}{self.value}"

    @classmethod
    def from_key(cls, key: str) -> "TypeTag":
        if not key.startswith(RESERVED_PREFIX):
            raise KeyError(key)
        return cls(key[len(RESERVED_PREFIX):])


# Tags that say nothing about the datatype of a field
EMPTY_TAGS = frozenset({TypeTag.NULL, TypeTag.ABSENT})
VALUE_TAGS = tuple(tag for tag in TypeTag if tag not in EMPTY_TAGS)


def classify(value: Any, present: bool = True, path: Optional[Sequence[str]] = None) -> TypeTag:
    """
    Returns the type tag of a value.

    Args:
        value: The value to classify. Ignored when ``present`` is False.
        present: Whether the key holding the value exists at all.
        path: Field path of the value, only used for error messages.

    Raises:
        UnsupportedTypeError: If the value is not JSON-compatible.
    """
    if not present:
        return TypeTag.ABSENT
    if value is None:
        return TypeTag.NULL
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, (list, tuple)):
        return TypeTag.ARRAY
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    raise UnsupportedTypeError(value, path)


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)
