from __future__ import annotations

import json
from pathlib import Path

from jsondelta.core.models import Patch, operation_from_dict
from jsondelta.errors import PatchFormatError


def dumps_patch(patch: Patch, *, indent: int | None = None) -> str:
    return json.dumps([operation.to_dict() for operation in patch], indent=indent, ensure_ascii=False)


def loads_patch(text: str) -> Patch:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PatchFormatError(f"Patch is not valid JSON: {exc}") from exc
    if not isinstance(raw, list):
        raise PatchFormatError("Patch payload must be an array of operations")
    return [operation_from_dict(item) for item in raw]


def write_patch(path: Path, patch: Patch) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_patch(patch, indent=2) + "\n", encoding="utf-8")


def read_patch(path: Path) -> Patch:
    return loads_patch(path.read_text(encoding="utf-8"))


__all__ = [
    "dumps_patch",
    "loads_patch",
    "read_patch",
    "write_patch",
]
