from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class CommonRun:
    length: int = 0
    sequence: list[Any] = field(default_factory=list)
    offset: int | None = None


def longest_common_run(left: Sequence[Any], right: Sequence[Any]) -> CommonRun:
    """Longest contiguous run of equal items appearing in both sequences.

    ``table[i][j]`` is the length of the common run ending at ``left[i - 1]`` and
    ``right[j - 1]``; it resets to zero on a mismatch, so this is a common
    substring, not a common subsequence. The first maximal run found while
    scanning ``left`` wins ties. ``offset`` is where the run starts in ``left``.
    """
    m = len(left)
    n = len(right)
    table = [[0 for _ in range(n + 1)] for _ in range(m + 1)]
    best = CommonRun()

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if left[i - 1] == right[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
                if table[i][j] > best.length:
                    start = i - table[i][j]
                    best = CommonRun(length=table[i][j], sequence=list(left[start:i]), offset=start)
            else:
                table[i][j] = 0

    return best


__all__ = ["CommonRun", "longest_common_run"]
