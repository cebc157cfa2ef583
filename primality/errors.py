"""
Error types for the primality package.

All domain failures derive from PrimalityError so callers can tell
them apart from programming errors.
"""


class PrimalityError(Exception):
    """Base class for primality package errors."""


class ModulusError(PrimalityError, ValueError):
    """Raised when a modular operation receives a modulus below 1."""


class ExponentError(PrimalityError, ValueError):
    """Raised when modular exponentiation receives a negative exponent."""


class SamplingRangeError(PrimalityError, ValueError):
    """Raised when a sampling range has min greater than max."""


class SamplingExhaustedError(PrimalityError, RuntimeError):
    """Raised when rejection sampling gives up after max_attempts draws."""
