from __future__ import annotations

"""Prime sieve and primality test."""

import math
from typing import List

import numpy as np


def prime_sieve(limit: int) -> List[int]:
    """Return every prime ``<= limit`` using the sieve of Eratosthenes."""

    if limit < 2:
        return []
    candidates = np.ones(limit + 1, dtype=bool)
    candidates[:2] = False
    for factor in range(2, math.isqrt(limit) + 1):
        if candidates[factor]:
            candidates[factor * factor :: factor] = False
    return [int(n) for n in np.flatnonzero(candidates)]


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    for divisor in range(3, math.isqrt(n) + 1, 2):
        if n % divisor == 0:
            return False
    return True
