"""
Primality Testing Package

Deterministic trial division and probabilistic Miller-Rabin primality
tests over arbitrary-precision integers, with timing and reporting for
comparing the two.
"""

from .errors import (
    ExponentError,
    ModulusError,
    PrimalityError,
    SamplingExhaustedError,
    SamplingRangeError,
)
from .miller_rabin import decompose, is_probable_prime
from .modpow import mod_pow
from .random_range import random_in_range
from .timing import measure_execution_time, timed
from .trial_division import is_prime_trial_division

__version__ = "0.1.0"
__all__ = [
    "ExponentError",
    "ModulusError",
    "PrimalityError",
    "SamplingExhaustedError",
    "SamplingRangeError",
    "decompose",
    "is_probable_prime",
    "mod_pow",
    "random_in_range",
    "measure_execution_time",
    "timed",
    "is_prime_trial_division",
]
