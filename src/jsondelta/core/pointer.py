"""JSON Pointer (RFC 6901) construction helpers.

Reference tokens escape ``~`` as ``~0`` before ``/`` as ``~1``; the reverse order
would turn a literal ``~1`` in a key into ``~01`` and then back into ``/``.
"""
from __future__ import annotations

from dataclasses import dataclass

from jsondelta.constants import POINTER_SEPARATOR, ROOT_POINTER


@dataclass(slots=True, frozen=True)
class PathInfo:
    segments: list[str]
    length: int
    last: str


def escape_token(token: str | int) -> str:
    text = str(token)
    return text.replace("~", "~0").replace("/", "~1")


def unescape_token(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def append_token(path: str, token: str | int) -> str:
    return f"{path}{POINTER_SEPARATOR}{escape_token(token)}"


def join_pointer(tokens: list[str | int]) -> str:
    path = ROOT_POINTER
    for token in tokens:
        path = append_token(path, token)
    return path


def path_info(path: str) -> PathInfo:
    # Segments stay escaped, so a key holding "/" is still a single segment.
    segments = path.split(POINTER_SEPARATOR)
    return PathInfo(segments=segments, length=len(segments), last=segments[-1])


def split_pointer(path: str) -> list[str]:
    if path == ROOT_POINTER:
        return []
    if not path.startswith(POINTER_SEPARATOR):
        raise ValueError(f"JSON pointer must be empty or start with '/': {path!r}")
    return [unescape_token(token) for token in path.split(POINTER_SEPARATOR)[1:]]


__all__ = [
    "PathInfo",
    "append_token",
    "escape_token",
    "join_pointer",
    "path_info",
    "split_pointer",
    "unescape_token",
]
