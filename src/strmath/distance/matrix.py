from __future__ import annotations

"""Backtraceable edit-distance tableau.

The tableau has ``len(s) + 1`` rows and ``len(t) + 1`` columns; cell
``[i][j]`` holds the alignment cost of ``s[:i]`` against ``t[:j]``. Inputs
are compared byte by byte, so ``str`` arguments are UTF-8 encoded first;
surrogate-escaped code points (as found in ``sys.argv``) map back to their raw
bytes.
"""

import logging
from typing import Union

from .costs import Matrix, Recurrence

logger = logging.getLogger(__name__)

Text = Union[str, bytes, bytearray, memoryview]


class TrivialMatrixError(ValueError):
    """Raised when the inputs are equal or either one is empty."""

    def __init__(self, source: bytes = b"", target: bytes = b"") -> None:
        super().__init__("trivial matrix")
        self.source = source
        self.target = target

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TrivialMatrixError)

    def __hash__(self) -> int:
        return hash(TrivialMatrixError)


TRIVIAL_MATRIX = TrivialMatrixError()


def as_bytes(value: Text) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8", "surrogateescape")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Expected str or bytes-like input, got {type(value).__name__}")


def is_trivial(s: Text, t: Text) -> bool:
    """True when *s* and *t* are byte-equal or either is empty."""

    a, b = as_bytes(s), as_bytes(t)
    return a == b or not a or not b


def build(s: Text, t: Text, recurrence: Recurrence = Recurrence.LEVENSHTEIN) -> Matrix:
    """Fill and return the full cost tableau for *s* against *t*.

    The first column and row are always ``0..len(s)`` and ``0..len(t)``,
    whichever recurrence is selected.
    """

    if not isinstance(recurrence, Recurrence):
        raise TypeError(f"recurrence must be a Recurrence member, got {recurrence!r}")
    a, b = as_bytes(s), as_bytes(t)
    if is_trivial(a, b):
        raise TrivialMatrixError(a, b)

    rows = len(a) + 1
    cols = len(b) + 1
    logger.debug("building %dx%d %s tableau", rows, cols, recurrence.value)
    m: Matrix = [[0] * cols for _ in range(rows)]
    for i in range(1, rows):
        m[i][0] = i
    for j in range(1, cols):
        m[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            m[i][j] = recurrence(m, i, j, cost)
    return m


def matrix_distance(s: Text, t: Text) -> int:
    """Levenshtein distance read from the bottom-right cell of the tableau."""

    m = build(s, t, Recurrence.LEVENSHTEIN)
    return m[-1][-1]
