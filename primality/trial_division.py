"""
Trial Division

Deterministic primality test by exhaustive divisor search.
"""

import math


def is_prime_trial_division(n: int) -> bool:
    """
    Check primality by testing every divisor from 2 to isqrt(n).

    The bound uses the exact integer square root, so divisors at a
    perfect-square boundary (e.g. 10007 ** 2) are never skipped.

    Args:
        n: Integer to test

    Returns:
        bool: True if n is prime, False otherwise (including n <= 1)

    Raises:
        TypeError: If n is not an int
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("n must be an int")
    if n <= 1:
        return False

    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            return False
    return True
