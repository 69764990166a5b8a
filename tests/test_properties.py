"""Tests for the numeric ladder and property value freezing."""

from types import MappingProxyType

import pytest

from geojson_types import NumberKind, classify_number
from geojson_types.models.properties import freeze_properties, narrow_number


@pytest.mark.parametrize(
    "value, kind",
    [
        (0, NumberKind.INT32),
        (1, NumberKind.INT32),
        (-(2**31), NumberKind.INT32),
        (2**31 - 1, NumberKind.INT32),
        (2**31, NumberKind.UINT32),
        (2**32 - 1, NumberKind.UINT32),
        (2**32, NumberKind.INT64),
        (-(2**31) - 1, NumberKind.INT64),
        (-(2**63), NumberKind.INT64),
        (2**63, NumberKind.UINT64),
        (9999999999999999999, NumberKind.UINT64),
        (2**64 - 1, NumberKind.UINT64),
        (2**64, NumberKind.FLOAT64),
        (-(2**63) - 1, NumberKind.FLOAT64),
        (2.2, NumberKind.FLOAT64),
        (1.0, NumberKind.FLOAT64),
    ],
)
def test_classify_number(value, kind):
    assert classify_number(value) is kind


def test_classify_number_rejects_non_numbers():
    with pytest.raises(TypeError):
        classify_number(True)
    with pytest.raises(TypeError):
        classify_number("1")


def test_narrow_number():
    assert narrow_number(1) == 1 and isinstance(narrow_number(1), int)
    assert isinstance(narrow_number(2**64 - 1), int)
    assert isinstance(narrow_number(2**64), float)
    assert narrow_number(2**64) == 1.8446744073709552e19


def test_freeze_properties():
    assert freeze_properties(None) == {}
    frozen = freeze_properties({"a": [1, {"b": [2]}]})
    assert isinstance(frozen, MappingProxyType)
    assert frozen["a"][0] == 1
    assert isinstance(frozen["a"], tuple)
    assert isinstance(frozen["a"][1], MappingProxyType)
    assert frozen["a"][1]["b"] == (2,)


def test_freeze_properties_keeps_key_order():
    frozen = freeze_properties({"z": 1, "a": 2, "m": 3})
    assert list(frozen) == ["z", "a", "m"]


def test_freeze_properties_rejects_non_mappings():
    with pytest.raises(ValueError):
        freeze_properties([("a", 1)])
