from __future__ import annotations

from jsondelta.core.lcs import CommonRun, longest_common_run


def test_empty_sequences_have_no_run() -> None:
    assert longest_common_run([], []) == CommonRun(length=0, sequence=[], offset=None)


def test_identical_sequences_are_one_run() -> None:
    assert longest_common_run(["1", "2", "3"], ["1", "2", "3"]) == CommonRun(
        length=3, sequence=["1", "2", "3"], offset=0
    )


def test_run_at_start_of_left() -> None:
    assert longest_common_run(["1", "2", "3", "4"], ["4", "1", "2", "3"]) == CommonRun(
        length=3, sequence=["1", "2", "3"], offset=0
    )


def test_run_at_end_of_left() -> None:
    assert longest_common_run(["4", "1", "2", "3"], ["1", "2", "3", "4"]) == CommonRun(
        length=3, sequence=["1", "2", "3"], offset=1
    )


def test_run_with_matching_prefix() -> None:
    assert longest_common_run(["0", "1", "2"], ["0", "1", "2", "3"]) == CommonRun(
        length=3, sequence=["0", "1", "2"], offset=0
    )


def test_run_is_contiguous_not_a_subsequence() -> None:
    # "a", "c", "e" is a common subsequence of length 3; the longest contiguous run is 2.
    result = longest_common_run(["a", "b", "c", "d", "e"], ["a", "c", "d", "x", "e"])
    assert result.sequence == ["c", "d"]
    assert result.offset == 2


def test_first_maximal_run_wins_ties() -> None:
    result = longest_common_run(["x", "y", "p", "q"], ["p", "q", "x", "y"])
    assert result.sequence == ["x", "y"]
    assert result.offset == 0


def test_works_with_non_string_hashes() -> None:
    assert longest_common_run([0, 1, 2], [2, 0, 1]).sequence == [0, 1]
