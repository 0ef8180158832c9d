from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal, Union

from jsondelta.constants import (
    OP_ADD,
    OP_COPY,
    OP_MOVE,
    OP_REMOVE,
    OP_REPLACE,
    OP_TEST,
    OPERATION_NAMES,
)
from jsondelta.core.pointer import split_pointer
from jsondelta.errors import PatchFormatError

Side = Literal["left", "right"]


@dataclass(slots=True, frozen=True)
class PropertyContext:
    side: Side
    path: str


@dataclass(slots=True, frozen=True)
class HashContext:
    side: Side
    path: str
    index: int


@dataclass(slots=True, frozen=True)
class AddOperation:
    path: str
    value: Any
    op: Literal["add"] = OP_ADD

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "path": self.path, "value": self.value}


@dataclass(slots=True, frozen=True)
class RemoveOperation:
    path: str
    op: Literal["remove"] = OP_REMOVE

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "path": self.path}


@dataclass(slots=True, frozen=True)
class ReplaceOperation:
    path: str
    value: Any
    op: Literal["replace"] = OP_REPLACE

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "path": self.path, "value": self.value}


@dataclass(slots=True, frozen=True)
class MoveOperation:
    from_path: str
    path: str
    op: Literal["move"] = OP_MOVE

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "from": self.from_path, "path": self.path}


@dataclass(slots=True, frozen=True)
class CopyOperation:
    from_path: str
    path: str
    op: Literal["copy"] = OP_COPY

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "from": self.from_path, "path": self.path}


@dataclass(slots=True, frozen=True)
class TestOperation:
    __test__ = False

    path: str
    value: Any
    op: Literal["test"] = OP_TEST

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "path": self.path, "value": self.value}


Operation = Union[AddOperation, RemoveOperation, ReplaceOperation, MoveOperation, CopyOperation, TestOperation]
Patch = list[Operation]


def _require_pointer(data: Mapping[str, Any], field_name: str) -> str:
    if field_name not in data:
        raise PatchFormatError(f"Operation {data.get('op')!r} requires field `{field_name}`")
    pointer = data[field_name]
    if not isinstance(pointer, str):
        raise PatchFormatError(f"Operation field `{field_name}` must be a string")
    try:
        split_pointer(pointer)
    except ValueError as exc:
        raise PatchFormatError(str(exc)) from exc
    return pointer


def _require_value(data: Mapping[str, Any]) -> Any:
    if "value" not in data:
        raise PatchFormatError(f"Operation {data.get('op')!r} requires field `value`")
    return data["value"]


def operation_from_dict(data: Mapping[str, Any]) -> Operation:
    if not isinstance(data, Mapping):
        raise PatchFormatError("Operation must be an object")
    op = data.get("op")
    if op not in OPERATION_NAMES:
        raise PatchFormatError(f"Unsupported operation: {op!r}")

    path = _require_pointer(data, "path")
    if op == OP_ADD:
        return AddOperation(path=path, value=_require_value(data))
    if op == OP_REMOVE:
        return RemoveOperation(path=path)
    if op == OP_REPLACE:
        return ReplaceOperation(path=path, value=_require_value(data))
    if op == OP_MOVE:
        return MoveOperation(from_path=_require_pointer(data, "from"), path=path)
    if op == OP_COPY:
        return CopyOperation(from_path=_require_pointer(data, "from"), path=path)
    return TestOperation(path=path, value=_require_value(data))


def patch_to_dicts(patch: Patch) -> list[dict[str, Any]]:
    return [operation.to_dict() for operation in patch]


__all__ = [
    "AddOperation",
    "CopyOperation",
    "HashContext",
    "MoveOperation",
    "Operation",
    "Patch",
    "PropertyContext",
    "RemoveOperation",
    "ReplaceOperation",
    "Side",
    "TestOperation",
    "operation_from_dict",
    "patch_to_dicts",
]
