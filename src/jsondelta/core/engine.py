from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from jsondelta.constants import ROOT_POINTER, SIDE_LEFT, SIDE_RIGHT
from jsondelta.core.config import PatchConfig, resolve_config
from jsondelta.core.models import (
    AddOperation,
    HashContext,
    Operation,
    Patch,
    PropertyContext,
    RemoveOperation,
    ReplaceOperation,
    Side,
)
from jsondelta.core.moves import first_index, plan_moves
from jsondelta.core.pointer import append_token, path_info
from jsondelta.core.values import JsonKind, JsonValue, json_equal, kind_of, normalize_document

logger = logging.getLogger(__name__)


class PatchGenerator:
    """Recursive comparator for one configuration.

    Every compare method returns the operations it produced and callers extend
    their own list with them; no operation list is shared between frames.
    Inputs must already be normalized.
    """

    def __init__(self, config: PatchConfig) -> None:
        self.config = config
        self._hasher = config.hasher

    def compare(self, path: str, left: JsonValue, right: JsonValue) -> list[Operation]:
        left_kind = kind_of(left)
        right_kind = kind_of(right)

        if not left_kind.is_container or not right_kind.is_container:
            if json_equal(left, right):
                return []
            return [ReplaceOperation(path=path, value=right)]

        if left_kind is JsonKind.ARRAY and right_kind is JsonKind.ARRAY:
            return self.compare_arrays(path, left, right)

        # No partial comparison across an array/object boundary.
        if left_kind is not right_kind:
            return [ReplaceOperation(path=path, value=right)]

        return self.compare_objects(path, left, right)

    def compare_objects(
        self,
        path: str,
        left: dict[str, JsonValue],
        right: dict[str, JsonValue],
    ) -> list[Operation]:
        operations: list[Operation] = []

        for key, right_value in right.items():
            if not self._accepts(key, SIDE_RIGHT, path):
                continue
            child_path = append_token(path, key)
            left_present = key in left
            left_value = left.get(key)
            right_kind = kind_of(right_value)
            left_kind = kind_of(left_value) if left_present else None

            if left_kind is JsonKind.ARRAY and right_kind is JsonKind.ARRAY:
                operations.extend(self.compare_arrays(child_path, left_value, right_value))
            elif right_kind is JsonKind.OBJECT:
                if left_kind is JsonKind.OBJECT:
                    operations.extend(self._compare_nested_object(child_path, left_value, right_value))
                elif left_present:
                    operations.append(ReplaceOperation(path=child_path, value=right_value))
                else:
                    operations.append(AddOperation(path=child_path, value=right_value))
            elif not left_present:
                operations.append(AddOperation(path=child_path, value=right_value))
            elif not json_equal(left_value, right_value):
                operations.append(ReplaceOperation(path=child_path, value=right_value))

        for key in left:
            if not self._accepts(key, SIDE_LEFT, path):
                continue
            if key not in right:
                operations.append(RemoveOperation(path=append_token(path, key)))

        return operations

    def compare_arrays(self, path: str, left: list[JsonValue], right: list[JsonValue]) -> list[Operation]:
        if json_equal(left, right):
            return []

        left_hashes = self._hashes(left, SIDE_LEFT, path)
        right_hashes = self._hashes(right, SIDE_RIGHT, path)

        if self._depth_reached(path):
            logger.debug("Depth limit reached for array at %r; comparing identities only", path)
            if left_hashes == right_hashes:
                return []
            return [ReplaceOperation(path=path, value=right)]

        operations: list[Operation] = []
        kept_hashes: list[Any] = []

        # Back to front, so a removal never shifts an index that is still to be visited.
        for index in range(len(left) - 1, -1, -1):
            item_path = append_token(path, index)
            match = first_index(right_hashes, left_hashes[index])
            if match is None:
                operations.append(RemoveOperation(path=item_path))
                continue
            operations.extend(self.compare(item_path, left[index], right[match]))
            kept_hashes.insert(0, left_hashes[index])

        added_hashes = [value for value in right_hashes if value not in kept_hashes]
        working_hashes = list(kept_hashes)
        for value in added_hashes:
            source = right_hashes.index(value)
            operations.append(AddOperation(path=append_token(path, len(working_hashes)), value=right[source]))
            working_hashes.append(value)

        if self.config.ignore_move:
            return operations

        moves = plan_moves(working_hashes, right_hashes, path)
        if moves:
            logger.debug("Planned %d move(s) for array at %r", len(moves), path)
        operations.extend(moves)
        return operations

    def _compare_nested_object(
        self,
        path: str,
        left: dict[str, JsonValue],
        right: dict[str, JsonValue],
    ) -> list[Operation]:
        if not self._depth_reached(path):
            return self.compare_objects(path, left, right)
        if json_equal(left, right):
            return []
        return [ReplaceOperation(path=path, value=right)]

    def _depth_reached(self, path: str) -> bool:
        max_depth = self.config.max_depth
        return max_depth is not None and path_info(path).length >= max_depth

    def _accepts(self, key: str, side: Side, path: str) -> bool:
        property_filter = self.config.property_filter
        if property_filter is None:
            return True
        return bool(property_filter(key, PropertyContext(side=side, path=path)))

    def _hashes(self, values: list[JsonValue], side: Side, path: str) -> list[Any]:
        return [
            self._hasher(value, HashContext(side=side, path=path, index=index))
            for index, value in enumerate(values)
        ]


def generate_patch(
    before: Any,
    after: Any,
    config: PatchConfig | Mapping[str, Any] | None = None,
) -> Patch:
    """Compute the operations that turn ``before`` into ``after``.

    Configuration is validated before either document is read. Exceptions raised
    by the object hash or property filter propagate unchanged.
    """
    resolved = resolve_config(config)
    left = normalize_document(before)
    right = normalize_document(after)

    patch = PatchGenerator(resolved).compare(ROOT_POINTER, left, right)
    logger.debug("Generated patch with %d operation(s)", len(patch))
    return patch


__all__ = ["PatchGenerator", "generate_patch"]
