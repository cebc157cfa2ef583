"""
Modular Exponentiation

Binary (square-and-multiply) exponentiation over Python integers.
"""

from .errors import ExponentError, ModulusError


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """
    Compute (base ** exponent) mod modulus.

    Args:
        base: Integer base (any sign, reduced modulo modulus first)
        exponent: Non-negative exponent
        modulus: Modulus, must be >= 1

    Returns:
        int: Result in the range [0, modulus)

    Raises:
        TypeError: If any argument is not an int
        ModulusError: If modulus < 1
        ExponentError: If exponent < 0

    Example:
        >>> mod_pow(4, 13, 497)
        445
    """
    for name, value in (("base", base), ("exponent", exponent), ("modulus", modulus)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} must be an int")
    if modulus < 1:
        raise ModulusError(f"modulus must be >= 1, got {modulus}")
    if exponent < 0:
        raise ExponentError(f"exponent must be non-negative, got {exponent}")

    result = 1 % modulus
    base %= modulus

    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus

    return result
