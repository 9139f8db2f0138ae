from __future__ import annotations

"""Two-row Levenshtein distance."""

import logging
from typing import List

from ..numeric import min_int
from .matrix import Text, TrivialMatrixError, as_bytes, is_trivial

logger = logging.getLogger(__name__)


def distance_levenshtein(s: Text, t: Text) -> int:
    """Return the edit distance between *s* and *t*.

    Only the previous row (``v0``) and the row being filled (``v1``) are kept,
    so memory grows with ``len(t)`` rather than ``len(s) * len(t)``. The
    result always equals ``matrix_distance(s, t)``.
    """

    a, b = as_bytes(s), as_bytes(t)
    if is_trivial(a, b):
        raise TrivialMatrixError(a, b)

    width = len(b) + 1
    v0: List[int] = list(range(width))
    v1: List[int] = [0] * width
    logger.debug("rolling distance over %d rows of width %d", len(a), width)

    for i in range(len(a)):
        v1[0] = i + 1
        for j in range(len(b)):
            cost = 0 if a[i] == b[j] else 1
            v1[j + 1] = min_int((v1[j] + 1, v0[j + 1] + 1, v0[j] + cost))
        for j in range(width):
            v0[j] = v1[j]
    return v1[len(b)]
