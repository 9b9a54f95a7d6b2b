"""
Tests for value classification.
"""

from collections import OrderedDict
from decimal import Decimal

import pytest

from docshape.exceptions import UnsupportedTypeError
from docshape.tags import RESERVED_PREFIX, TypeTag, classify


@pytest.mark.parametrize("value, expected", [
    (None, TypeTag.NULL),
    (True, TypeTag.BOOLEAN),
    (False, TypeTag.BOOLEAN),
    (0, TypeTag.NUMBER),
    (3.25, TypeTag.NUMBER),
    (Decimal("1.5"), TypeTag.NUMBER),
    ("", TypeTag.STRING),
    ([], TypeTag.ARRAY),
    ((1, 2), TypeTag.ARRAY),
    ({}, TypeTag.OBJECT),
    (OrderedDict(a=1), TypeTag.OBJECT),
])
def test_classify_json_values(value, expected):
    assert classify(value) is expected


def test_absent_is_distinct_from_null():
    assert classify(None, present=False) is TypeTag.ABSENT
    assert classify("anything", present=False) is TypeTag.ABSENT
    assert classify(None) is TypeTag.NULL


def test_unsupported_value_fails_fast():
    with pytest.raises(UnsupportedTypeError) as exc:
        classify({1, 2}, path=("tags", "names"))
    assert exc.value.path == ("tags", "names")
    assert "tags.names" in str(exc.value)
    assert "set" in str(exc.value)


def test_exactly_seven_tags_with_reserved_keys():
    assert len(TypeTag) == 7
    keys = {tag.key for tag in TypeTag}
    assert len(keys) == 7
    assert all(key.startswith(RESERVED_PREFIX) for key in keys)
    assert TypeTag.ABSENT.key == "___undefined"
    assert TypeTag.from_key("___number") is TypeTag.NUMBER
    assert TypeTag.ABSENT.label == "Undefined"


def test_from_key_rejects_field_names():
    with pytest.raises(KeyError):
        TypeTag.from_key("number")
