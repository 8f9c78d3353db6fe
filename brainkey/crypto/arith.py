"""Modular integer arithmetic over the secp256k1 field and group order."""

from ..exceptions import ArithmeticFailure

__all__ = ["mod", "mod_inverse", "mod_pow"]


def mod(a: int, m: int) -> int:
    """Reduce ``a`` into ``[0, m)``, also for negative ``a``."""
    return a % m


def mod_inverse(a: int, m: int) -> int:
    """
    Modular multiplicative inverse using the extended Euclidean algorithm.

    Args:
        a: Value to invert (may be negative)
        m: Modulus

    Returns:
        ``x`` in ``[1, m)`` with ``a * x == 1 (mod m)``

    Raises:
        ArithmeticFailure: If ``a == 0 (mod m)`` or ``gcd(a, m) != 1``
    """
    a = mod(a, m)
    if a == 0:
        raise ArithmeticFailure("No modular inverse for 0")

    old_r, r = a, m
    old_s, s = 1, 0
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s

    if old_r != 1:
        raise ArithmeticFailure(f"{a} is not invertible modulo {m}")

    return mod(old_s, m)


def mod_pow(base: int, exponent: int, m: int) -> int:
    """Square-and-multiply modular exponentiation."""
    if exponent < 0:
        raise ArithmeticFailure("Negative exponent")

    result = 1 % m
    base = mod(base, m)
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % m
        base = (base * base) % m
        exponent >>= 1

    return result
