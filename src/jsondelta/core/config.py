from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any

from jsondelta.constants import (
    CONFIG_OPTIONS,
    OPTION_ARRAY,
    OPTION_IGNORE_MOVE,
    OPTION_MAX_DEPTH,
    OPTION_OBJECT_HASH,
    OPTION_PROPERTY_FILTER,
)
from jsondelta.core.models import HashContext, PropertyContext
from jsondelta.core.values import JsonValue
from jsondelta.errors import ConfigValidationError

ObjectHash = Callable[[JsonValue, HashContext], Any]
PropertyFilter = Callable[[str, PropertyContext], bool]


def default_object_hash(value: JsonValue, context: HashContext) -> Any:
    return context.index


@dataclass(slots=True, frozen=True)
class PatchConfig:
    object_hash: ObjectHash | None = None
    property_filter: PropertyFilter | None = None
    ignore_move: bool = False
    max_depth: float | None = None

    def __post_init__(self) -> None:
        if self.object_hash is not None and not callable(self.object_hash):
            raise ConfigValidationError("object_hash must be callable")
        if self.property_filter is not None and not callable(self.property_filter):
            raise ConfigValidationError("property_filter must be callable")
        if not isinstance(self.ignore_move, bool):
            raise ConfigValidationError("ignore_move must be a boolean")
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, Real):
                raise ConfigValidationError("max_depth must be a number")
            if math.isnan(self.max_depth):
                raise ConfigValidationError("max_depth must be a number, got NaN")
            if self.max_depth < 0:
                raise ConfigValidationError("max_depth must be >= 0")

    @property
    def hasher(self) -> ObjectHash:
        return self.object_hash if self.object_hash is not None else default_object_hash


def parse_config(raw: Mapping[str, Any] | None) -> PatchConfig:
    """Build a PatchConfig from its mapping form.

    ``ignore_move`` may be given flat or nested as ``{"array": {"ignore_move": ...}}``.
    """
    if raw is None:
        return PatchConfig()
    if not isinstance(raw, Mapping):
        raise ConfigValidationError("config must be a mapping")

    unknown = sorted(set(raw.keys()) - CONFIG_OPTIONS, key=str)
    if unknown:
        joined = ", ".join(str(key) for key in unknown)
        raise ConfigValidationError(f"Unknown config option(s): {joined}")

    ignore_move = raw.get(OPTION_IGNORE_MOVE, False)
    array_raw = raw.get(OPTION_ARRAY)
    if array_raw is not None:
        if not isinstance(array_raw, Mapping):
            raise ConfigValidationError("array must be a mapping")
        unknown_array = sorted(set(array_raw.keys()) - {OPTION_IGNORE_MOVE}, key=str)
        if unknown_array:
            joined = ", ".join(str(key) for key in unknown_array)
            raise ConfigValidationError(f"Unknown array option(s): {joined}")
        if OPTION_IGNORE_MOVE in array_raw:
            if OPTION_IGNORE_MOVE in raw:
                raise ConfigValidationError("ignore_move given both flat and under array")
            ignore_move = array_raw[OPTION_IGNORE_MOVE]

    return PatchConfig(
        object_hash=raw.get(OPTION_OBJECT_HASH),
        property_filter=raw.get(OPTION_PROPERTY_FILTER),
        ignore_move=ignore_move,
        max_depth=raw.get(OPTION_MAX_DEPTH),
    )


def resolve_config(config: PatchConfig | Mapping[str, Any] | None) -> PatchConfig:
    if isinstance(config, PatchConfig):
        return config
    return parse_config(config)


__all__ = [
    "ObjectHash",
    "PatchConfig",
    "PropertyFilter",
    "default_object_hash",
    "parse_config",
    "resolve_config",
]
