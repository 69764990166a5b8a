"""Dynamic property values: the closed value set and the numeric ladder.

A property value is one of ``None``, ``bool``, ``int`` (Int64/UInt64 range),
``float``, ``str``, a tuple of property values, or a read-only string-keyed
mapping of property values. Decoded numbers keep the narrowest exact
representation the ladder finds, so re-encoding prints the same digits.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Union

from pydantic import AfterValidator

from geojson_types import config

PropertyValue = Union[
    None,
    bool,
    int,
    float,
    str,
    tuple["PropertyValue", ...],
    Mapping[str, "PropertyValue"],
]

EMPTY_PROPERTIES: Mapping[str, PropertyValue] = MappingProxyType({})


class NumberKind(str, Enum):
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT64 = "float64"


def classify_number(value: int | float) -> NumberKind:
    """Return the first ladder rung that holds ``value`` exactly.

    Only ``int`` values can land on an integral rung; a JSON literal such as
    ``1.0`` or ``1e3`` is parsed as ``float`` and stays FLOAT64.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"not a JSON number: {value!r}")
    if isinstance(value, float):
        return NumberKind.FLOAT64
    if config.INT32_MIN <= value <= config.INT32_MAX:
        return NumberKind.INT32
    if 0 <= value <= config.UINT32_MAX:
        return NumberKind.UINT32
    if config.INT64_MIN <= value <= config.INT64_MAX:
        return NumberKind.INT64
    if 0 <= value <= config.UINT64_MAX:
        return NumberKind.UINT64
    return NumberKind.FLOAT64


def narrow_number(value: int | float) -> int | float:
    """Apply the ladder: integers outside every integral rung become floats."""
    if classify_number(value) is NumberKind.FLOAT64:
        return float(value)
    return value


def freeze_value(value: Any) -> Any:
    """Copy ``value`` into its read-only form (tuples and mapping proxies)."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_value(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_value(item) for item in value)
    return value


def freeze_properties(value: Any) -> Mapping[str, PropertyValue]:
    if value is None:
        return EMPTY_PROPERTIES
    if not isinstance(value, Mapping):
        raise ValueError(f"expected a mapping of properties, got {type(value).__name__}")
    if not value:
        return EMPTY_PROPERTIES
    return freeze_value(value)


PropertyMap = Annotated[Any, AfterValidator(freeze_properties)]
