from __future__ import annotations

"""Minimum-of-sequence helper."""

from typing import Iterable


def min_int(values: Iterable[int]) -> int:
    """Return the least element of a non-empty sequence of integers."""

    iterator = iter(values)
    try:
        least = next(iterator)
    except StopIteration as exc:
        raise ValueError("min_int() requires at least one value") from exc
    for value in iterator:
        if value < least:
            least = value
    return least
