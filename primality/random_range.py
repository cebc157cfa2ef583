"""
Bounded Random Integers

Uniform sampling of arbitrary-precision integers from an inclusive range
by rejection sampling over random bytes.
"""

import logging
import random
from typing import Optional

from .errors import SamplingExhaustedError, SamplingRangeError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 10_000


def byte_width(value: int) -> int:
    """Minimum number of bytes needed to represent a non-negative int."""
    return (value.bit_length() + 7) // 8


def random_in_range(
    min_value: int,
    max_value: int,
    rng: Optional[random.Random] = None,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> int:
    """
    Draw a uniformly distributed integer from [min_value, max_value].

    Random bytes are drawn in the byte width of the range, masked down
    to its bit length and rejected when they land above it. Accepted
    draws are offset by min_value, so no modulo bias is introduced.

    Args:
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        rng: Caller-owned random source exposing randbytes(n). A fresh
            random.Random is created when omitted.
        max_attempts: Rejected draws tolerated before giving up

    Returns:
        int: Sample with min_value <= sample <= max_value

    Raises:
        TypeError: If a bound is not an int
        SamplingRangeError: If min_value > max_value
        SamplingExhaustedError: If max_attempts draws were all rejected
        ValueError: If max_attempts is not positive
    """
    for name, value in (("min_value", min_value), ("max_value", max_value)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} must be an int")
    if min_value > max_value:
        raise SamplingRangeError(
            f"min_value ({min_value}) must not exceed max_value ({max_value})"
        )
    if max_attempts <= 0:
        raise ValueError("max_attempts must be positive")

    span = max_value - min_value
    if span == 0:
        return min_value

    if rng is None:
        rng = random.Random()

    width = byte_width(span)
    mask = (1 << span.bit_length()) - 1

    for attempt in range(max_attempts):
        candidate = int.from_bytes(rng.randbytes(width), "big") & mask
        if candidate <= span:
            if attempt:
                logger.debug(f"Sample accepted after {attempt} rejections")
            return min_value + candidate

    raise SamplingExhaustedError(
        f"Could not sample from [{min_value}, {max_value}] within {max_attempts} attempts"
    )
