from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Union

from jsondelta.constants import ROOT_POINTER
from jsondelta.core.pointer import append_token
from jsondelta.errors import InvalidDocumentError

JsonValue = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]


class JsonKind(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_container(self) -> bool:
        return self in (JsonKind.ARRAY, JsonKind.OBJECT)


def kind_of(value: JsonValue) -> JsonKind:
    """Return the kind tag of an already normalized value."""
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise InvalidDocumentError(f"Value of type {type(value).__name__} is not a normalized JSON value")


def normalize_document(value: Any, path: str = ROOT_POINTER) -> JsonValue:
    """Copy ``value`` into a plain dict/list/scalar tree.

    Mappings need string keys, dataclass instances become objects of their fields
    and any non-text sequence becomes an array. Raises InvalidDocumentError for
    anything that has no JSON representation.
    """
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidDocumentError(f"Non-finite number at {_describe(path)}: {value!r}")
        return value
    if isinstance(value, Mapping):
        normalized: dict[str, JsonValue] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise InvalidDocumentError(
                    f"Object keys must be strings, got {type(key).__name__} at {_describe(path)}"
                )
            normalized[key] = normalize_document(item, append_token(path, key))
        return normalized
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: normalize_document(getattr(value, field.name), append_token(path, field.name))
            for field in dataclasses.fields(value)
        }
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return [normalize_document(item, append_token(path, index)) for index, item in enumerate(value)]
    raise InvalidDocumentError(f"Unsupported JSON value of type {type(value).__name__} at {_describe(path)}")


def json_equal(left: JsonValue, right: JsonValue) -> bool:
    """Deep equality over normalized values.

    Object keys are compared regardless of order, array elements in order, and
    booleans never equal numbers.
    """
    left_kind = kind_of(left)
    if left_kind is not kind_of(right):
        return False
    if left_kind is JsonKind.ARRAY:
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))
    if left_kind is JsonKind.OBJECT:
        if left.keys() != right.keys():
            return False
        return all(json_equal(left[key], right[key]) for key in left)
    return left == right


def _describe(path: str) -> str:
    return path if path != ROOT_POINTER else "document root"


__all__ = [
    "JsonKind",
    "JsonValue",
    "json_equal",
    "kind_of",
    "normalize_document",
]
