"""
Miller-Rabin Primality Test

Probabilistic primality check with randomly drawn witnesses. A prime is
never rejected; a composite survives k rounds with probability at most
4 ** -k.
"""

import logging
import random
from typing import Optional, Tuple

from .modpow import mod_pow
from .random_range import random_in_range

logger = logging.getLogger(__name__)


def decompose(n: int) -> Tuple[int, int]:
    """
    Factor n - 1 as 2**s * q with q odd.

    Args:
        n: Odd integer > 2 (any n >= 2 is accepted)

    Returns:
        Tuple[int, int]: (s, q)

    Raises:
        ValueError: If n < 2
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    s, q = 0, n - 1
    while q % 2 == 0:
        q //= 2
        s += 1
    return s, q


def _witness_passes(a: int, s: int, q: int, n: int) -> bool:
    """Run one Miller-Rabin round for witness a."""
    x = mod_pow(a, q, n)
    if x == 1 or x == n - 1:
        return True

    for _ in range(s - 1):
        x = (x * x) % n
        if x == 1:
            return False
        if x == n - 1:
            return True
    return False


def is_probable_prime(n: int, k: int, rng: Optional[random.Random] = None) -> bool:
    """
    Miller-Rabin probabilistic primality test.

    Args:
        n: Integer to test
        k: Number of witness rounds. k == 0 performs no rounds and
            reports every n > 3 as probably prime.
        rng: Caller-owned random source for witness selection. When
            omitted, a private random.Random is created for this call.
            Do not share one instance between concurrent calls.

    Returns:
        bool: False if n is composite (or n <= 1), True if n is probably prime

    Raises:
        TypeError: If n or k is not an int
        ValueError: If k is negative
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("n must be an int")
    if not isinstance(k, int) or isinstance(k, bool):
        raise TypeError("k must be an int")
    if k < 0:
        raise ValueError("k must be non-negative")

    if n <= 1:
        return False
    if n <= 3:
        return True
    if k == 0:
        logger.warning(f"Miller-Rabin called with k=0; {n} reported prime without any witness")
        return True
    if n % 2 == 0:
        return False

    if rng is None:
        rng = random.Random()

    s, q = decompose(n)
    logger.debug(f"Decomposed {n} - 1 = 2^{s} * {q}")

    for i in range(k):
        a = random_in_range(2, n - 2, rng)
        if not _witness_passes(a, s, q, n):
            logger.debug(f"Witness {a} proves {n} composite (round {i + 1}/{k})")
            return False

    return True
