from __future__ import annotations

"""Cell recurrences for the edit-distance tableau."""

from enum import Enum
from typing import Callable, Dict, List, Sequence

from ..numeric import min_int

Matrix = List[List[int]]


def levenshtein_cost(m: Sequence[Sequence[int]], i: int, j: int, cost: int) -> int:
    """Best global alignment cost for cell ``(i, j)``."""

    return min_int(
        (
            m[i - 1][j] + 1,
            m[i][j - 1] + 1,
            m[i - 1][j - 1] + cost,
        )
    )


def smith_waterman_cost(m: Sequence[Sequence[int]], i: int, j: int, cost: int) -> int:
    """Best local alignment cost for cell ``(i, j)``, floored at zero."""

    return min_int(
        (
            0,
            m[i - 1][j] + 1,
            m[i][j - 1] + 1,
            m[i - 1][j - 1] + cost,
        )
    )


class Recurrence(str, Enum):
    """Closed set of recurrences accepted by :func:`strmath.distance.build`."""

    LEVENSHTEIN = "levenshtein"
    SMITH_WATERMAN = "smith_waterman"

    def __call__(self, m: Sequence[Sequence[int]], i: int, j: int, cost: int) -> int:
        return _FUNCTIONS[self](m, i, j, cost)

    @classmethod
    def parse(cls, name: str) -> "Recurrence":
        key = name.strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError as exc:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown recurrence '{name}' (expected one of: {valid})") from exc


_FUNCTIONS: Dict[Recurrence, Callable[[Sequence[Sequence[int]], int, int, int], int]] = {
    Recurrence.LEVENSHTEIN: levenshtein_cost,
    Recurrence.SMITH_WATERMAN: smith_waterman_cost,
}
