from .minimum import min_int
from .primes import is_prime, prime_sieve
from .sums import sum_int, sum_int8, sum_int16, sum_int32, sum_int64

__all__ = [
    "min_int",
    "is_prime",
    "prime_sieve",
    "sum_int",
    "sum_int8",
    "sum_int16",
    "sum_int32",
    "sum_int64",
]
