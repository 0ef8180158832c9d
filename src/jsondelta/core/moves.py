from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from jsondelta.constants import ROOT_POINTER
from jsondelta.core.lcs import longest_common_run
from jsondelta.core.models import MoveOperation
from jsondelta.core.pointer import append_token

logger = logging.getLogger(__name__)


def first_index(items: list[Any], value: Any, start: int = 0) -> int | None:
    try:
        return items.index(value, start)
    except ValueError:
        return None


def _is_permutation(left: list[Any], right: Sequence[Any]) -> bool:
    if len(left) != len(right):
        return False
    return all(left.count(value) == right.count(value) for value in right)


def _move(working: list[Any], source: int, target: int, path: str) -> MoveOperation:
    working.insert(target, working.pop(source))
    return MoveOperation(from_path=append_token(path, source), path=append_token(path, target))


def _anchored_moves(current: Sequence[Any], target: Sequence[Any], path: str) -> tuple[list[MoveOperation], list[Any]]:
    anchor = longest_common_run(current, target).sequence
    working = list(current)
    operations: list[MoveOperation] = []
    anchor_index = 0
    target_index = 0

    while target_index < len(target):
        value = target[target_index]

        if anchor_index < len(anchor) and anchor[anchor_index] == value:
            anchor_index += 1
            target_index += 1
            continue

        source_index = first_index(working, value)
        if source_index is not None and source_index != target_index:
            operations.append(_move(working, source_index, target_index, path))

        target_index += 1

    return operations, working


def _positional_moves(current: Sequence[Any], target: Sequence[Any], path: str) -> list[MoveOperation]:
    working = list(current)
    operations: list[MoveOperation] = []
    for target_index, value in enumerate(target):
        source_index = first_index(working, value, target_index)
        if source_index is not None and source_index != target_index:
            operations.append(_move(working, source_index, target_index, path))
    return operations


def plan_moves(
    current_hashes: Sequence[Any],
    target_hashes: Sequence[Any],
    path: str = ROOT_POINTER,
) -> list[MoveOperation]:
    """Moves that reorder ``current_hashes`` into ``target_hashes``.

    Items of the longest common run are anchors and are skipped. Every other
    target position pulls its hash from wherever it sits in a working copy,
    updated after each move so later source indices refer to the moved document.

    Skipping anchors can leave the working copy out of order when a non-anchor
    has to travel across them. If that happens and the two sides hold the same
    hashes, the plan is rebuilt by placing each target position in turn.
    """
    operations, working = _anchored_moves(current_hashes, target_hashes, path)
    if working == list(target_hashes) or not _is_permutation(working, target_hashes):
        return operations

    logger.debug("Anchored move plan for %r does not reach target order; placing positionally", path)
    return _positional_moves(current_hashes, target_hashes, path)


__all__ = ["first_index", "plan_moves"]
