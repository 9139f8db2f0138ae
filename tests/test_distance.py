from __future__ import annotations

import itertools

import pytest

from strmath.distance import (
    TRIVIAL_MATRIX,
    Recurrence,
    TrivialMatrixError,
    as_bytes,
    build,
    distance_levenshtein,
    is_trivial,
    levenshtein,
    matrix_distance,
)

WORDS = ["kitten", "sitting", "saturday", "sunday", "ab", "cd", "a", "flaw", "lawn", "GATTACA"]
PAIRS = [(s, t) for s, t in itertools.permutations(WORDS, 2)]


def test_is_trivial_cases() -> None:
    assert is_trivial("abc", "abc")
    assert is_trivial("", "abc")
    assert is_trivial(b"abc", "")
    assert is_trivial("é", "é".encode("utf-8"))
    assert not is_trivial("abc", "abd")


@pytest.mark.parametrize("s", ["abc", "x", "kitten"])
def test_equal_inputs_are_trivial(s: str) -> None:
    with pytest.raises(TrivialMatrixError):
        build(s, s, Recurrence.LEVENSHTEIN)
    with pytest.raises(TrivialMatrixError):
        build(s, s, Recurrence.SMITH_WATERMAN)
    with pytest.raises(TrivialMatrixError):
        distance_levenshtein(s, s)


@pytest.mark.parametrize("recurrence", list(Recurrence))
@pytest.mark.parametrize("s", ["abc", "q", ""])
def test_empty_inputs_are_trivial(s: str, recurrence: Recurrence) -> None:
    for args in ((s, ""), ("", s)):
        with pytest.raises(TrivialMatrixError):
            build(*args, recurrence)
        with pytest.raises(TrivialMatrixError):
            distance_levenshtein(*args)


def test_trivial_error_is_comparable() -> None:
    with pytest.raises(TrivialMatrixError) as info:
        distance_levenshtein("abc", "abc")
    assert info.value == TRIVIAL_MATRIX
    assert info.value.source == b"abc"
    assert isinstance(info.value, ValueError)


@pytest.mark.parametrize(
    "s, t, expected",
    [("kitten", "sitting", 3), ("saturday", "sunday", 3), ("flaw", "lawn", 2)],
)
def test_known_distances(s: str, t: str, expected: int) -> None:
    assert distance_levenshtein(s, t) == expected
    assert matrix_distance(s, t) == expected


def test_ab_cd_scenarios() -> None:
    assert build("ab", "cd", Recurrence.LEVENSHTEIN)[2][2] == 2
    assert build("ab", "cd", Recurrence.SMITH_WATERMAN)[2][2] == 0


def test_matrix_shape_and_borders() -> None:
    m = build("kitten", "sitting")
    assert len(m) == 7
    assert all(len(row) == 8 for row in m)
    assert [row[0] for row in m] == list(range(7))
    assert m[0] == list(range(8))


def test_smith_waterman_keeps_counting_borders() -> None:
    m = build("ab", "cd", Recurrence.SMITH_WATERMAN)
    assert [row[0] for row in m] == [0, 1, 2]
    assert m[0] == [0, 1, 2]


@pytest.mark.parametrize("s, t", PAIRS)
def test_rolling_agrees_with_matrix(s: str, t: str) -> None:
    assert distance_levenshtein(s, t) == build(s, t, Recurrence.LEVENSHTEIN)[len(s)][len(t)]


@pytest.mark.parametrize("s, t", PAIRS)
def test_symmetry_and_upper_bound(s: str, t: str) -> None:
    d = distance_levenshtein(s, t)
    assert d == distance_levenshtein(t, s)
    assert d <= max(len(s), len(t))


@pytest.mark.parametrize("s, t", PAIRS)
def test_adjacent_cells_differ_by_at_most_one(s: str, t: str) -> None:
    m = build(s, t)
    for i in range(1, len(s) + 1):
        for j in range(1, len(t) + 1):
            assert abs(m[i][j] - m[i - 1][j - 1]) <= 1
            assert abs(m[i][j] - m[i - 1][j]) <= 1
            assert abs(m[i][j] - m[i][j - 1]) <= 1


@pytest.mark.parametrize("s, t", PAIRS)
def test_smith_waterman_bounded_by_levenshtein(s: str, t: str) -> None:
    local = build(s, t, Recurrence.SMITH_WATERMAN)
    global_ = build(s, t, Recurrence.LEVENSHTEIN)
    for local_row, global_row in zip(local, global_):
        for lc, gc in zip(local_row, global_row):
            assert 0 <= lc <= gc


def test_comparison_is_bytewise() -> None:
    # "é" is two UTF-8 bytes, so substituting it for "e" costs two edits.
    assert distance_levenshtein("e", "é") == 2
    assert distance_levenshtein(b"\x00a", b"\x00b") == 1


def test_surrogate_escaped_text_maps_to_raw_bytes() -> None:
    assert as_bytes("\udcff") == b"\xff"
    assert distance_levenshtein("\udcff", "a") == 1
    assert distance_levenshtein("\udcff", b"\xff\xfe") == 1


def test_build_rejects_arbitrary_callables() -> None:
    with pytest.raises(TypeError):
        build("ab", "cd", lambda m, i, j, c: 0)  # type: ignore[arg-type]


def test_build_rejects_non_text() -> None:
    with pytest.raises(TypeError):
        build(["a"], "b")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "a, b, expected",
    [("abc", "abc", 0), ("abc", "", 3), ("", "sunday", 6), ("kitten", "sitting", 3)],
)
def test_levenshtein_resolves_trivial_cases(a: str, b: str, expected: int) -> None:
    assert levenshtein(a, b) == expected
