from __future__ import annotations

"""Integer summation over fixed-width signed integer types."""

from typing import Iterable, Type

import numpy as np


def _wrapping_sum(values: Iterable[int], dtype: Type[np.signedinteger]) -> int:
    info = np.iinfo(dtype)
    items = list(values)
    for value in items:
        if not info.min <= value <= info.max:
            raise OverflowError(f"{value} does not fit in {info.dtype}")
    array = np.asarray(items, dtype=dtype)
    # Accumulating in the same dtype wraps like two's-complement hardware.
    with np.errstate(over="ignore"):
        return int(array.sum(dtype=dtype))


def sum_int(values: Iterable[int]) -> int:
    total = 0
    for value in values:
        total += value
    return total


def sum_int8(values: Iterable[int]) -> int:
    return _wrapping_sum(values, np.int8)


def sum_int16(values: Iterable[int]) -> int:
    return _wrapping_sum(values, np.int16)


def sum_int32(values: Iterable[int]) -> int:
    return _wrapping_sum(values, np.int32)


def sum_int64(values: Iterable[int]) -> int:
    return _wrapping_sum(values, np.int64)
