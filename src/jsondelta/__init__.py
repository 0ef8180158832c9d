"""jsondelta: generate RFC 6902 JSON Patch documents from two JSON snapshots."""
from __future__ import annotations

import logging

from jsondelta.core.config import PatchConfig, default_object_hash, parse_config
from jsondelta.core.engine import generate_patch
from jsondelta.core.lcs import CommonRun, longest_common_run
from jsondelta.core.models import (
    AddOperation,
    CopyOperation,
    HashContext,
    MoveOperation,
    Operation,
    Patch,
    PropertyContext,
    RemoveOperation,
    ReplaceOperation,
    TestOperation,
    operation_from_dict,
    patch_to_dicts,
)
from jsondelta.core.moves import plan_moves
from jsondelta.core.pointer import PathInfo, escape_token, path_info, unescape_token
from jsondelta.errors import ConfigValidationError, InvalidDocumentError, JsonDeltaError, PatchFormatError
from jsondelta.io import dumps_patch, loads_patch, read_patch, write_patch
from jsondelta.settings import load_config

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AddOperation",
    "CommonRun",
    "ConfigValidationError",
    "CopyOperation",
    "HashContext",
    "InvalidDocumentError",
    "JsonDeltaError",
    "MoveOperation",
    "Operation",
    "Patch",
    "PatchConfig",
    "PatchFormatError",
    "PathInfo",
    "PropertyContext",
    "RemoveOperation",
    "ReplaceOperation",
    "TestOperation",
    "__version__",
    "default_object_hash",
    "dumps_patch",
    "escape_token",
    "generate_patch",
    "load_config",
    "loads_patch",
    "longest_common_run",
    "operation_from_dict",
    "parse_config",
    "patch_to_dicts",
    "path_info",
    "plan_moves",
    "read_patch",
    "unescape_token",
    "write_patch",
]
