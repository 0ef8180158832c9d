from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from jsondelta.constants import OPTION_IGNORE_MOVE, OPTION_MAX_DEPTH
from jsondelta.core.config import ObjectHash, PatchConfig, PropertyFilter
from jsondelta.core.models import HashContext, PropertyContext
from jsondelta.core.values import JsonValue
from jsondelta.errors import ConfigValidationError

logger = logging.getLogger(__name__)

_FILE_OPTIONS = {OPTION_MAX_DEPTH, "array", "ignore_properties"}
_ARRAY_FILE_OPTIONS = {OPTION_IGNORE_MOVE, "hash_key"}


def _load_yaml(path: Path) -> dict[str, Any]:
    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigValidationError(f"Config file must be a mapping: {path}")
    return loaded


def key_object_hash(hash_key: str) -> ObjectHash:
    """Identity by ``element[hash_key]``, falling back to the index."""

    def _hash(value: JsonValue, context: HashContext) -> Any:
        if isinstance(value, dict) and hash_key in value:
            return ("key", value[hash_key])
        return ("index", context.index)

    return _hash


def ignore_properties_filter(names: list[str]) -> PropertyFilter:
    ignored = frozenset(names)

    def _filter(name: str, context: PropertyContext) -> bool:
        return name not in ignored

    return _filter


def _parse_string_list(raw: Any, *, field_name: str) -> list[str]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigValidationError(f"{field_name} must be a list")
    return [str(item) for item in raw]


def config_from_mapping(data: Mapping[str, Any]) -> PatchConfig:
    unknown = sorted(set(data.keys()) - _FILE_OPTIONS, key=str)
    if unknown:
        joined = ", ".join(str(key) for key in unknown)
        raise ConfigValidationError(f"Unknown config option(s): {joined}")

    array_raw = data.get("array") or {}
    if not isinstance(array_raw, Mapping):
        raise ConfigValidationError("array must be a mapping")
    unknown_array = sorted(set(array_raw.keys()) - _ARRAY_FILE_OPTIONS, key=str)
    if unknown_array:
        joined = ", ".join(str(key) for key in unknown_array)
        raise ConfigValidationError(f"Unknown array option(s): {joined}")

    hash_key = array_raw.get("hash_key")
    if hash_key is not None and (not isinstance(hash_key, str) or not hash_key):
        raise ConfigValidationError("array.hash_key must be a non-empty string")

    ignored = _parse_string_list(data.get("ignore_properties"), field_name="ignore_properties")

    return PatchConfig(
        object_hash=key_object_hash(hash_key) if hash_key is not None else None,
        property_filter=ignore_properties_filter(ignored) if ignored else None,
        ignore_move=array_raw.get(OPTION_IGNORE_MOVE, False),
        max_depth=data.get(OPTION_MAX_DEPTH),
    )


def load_config(path: Path) -> PatchConfig:
    data = _load_yaml(path)
    config = config_from_mapping(data)
    logger.debug("Loaded patch config from %s", path)
    return config


__all__ = [
    "config_from_mapping",
    "ignore_properties_filter",
    "key_object_hash",
    "load_config",
]
