from __future__ import annotations

"""Edit-distance engine: global and local recurrences over byte sequences."""

from .costs import Matrix, Recurrence, levenshtein_cost, smith_waterman_cost
from .matrix import (
    TRIVIAL_MATRIX,
    Text,
    TrivialMatrixError,
    as_bytes,
    build,
    is_trivial,
    matrix_distance,
)
from .rolling import distance_levenshtein


def levenshtein(a: Text, b: Text) -> int:
    """Edit distance that also answers the trivial cases.

    Equal inputs give 0 and an empty input gives the other input's length;
    everything else goes through :func:`distance_levenshtein`.
    """

    try:
        return distance_levenshtein(a, b)
    except TrivialMatrixError as exc:
        return abs(len(exc.source) - len(exc.target))


__all__ = [
    "Matrix",
    "Recurrence",
    "TRIVIAL_MATRIX",
    "Text",
    "TrivialMatrixError",
    "as_bytes",
    "build",
    "distance_levenshtein",
    "is_trivial",
    "levenshtein",
    "levenshtein_cost",
    "matrix_distance",
    "smith_waterman_cost",
]
