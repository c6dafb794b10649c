"""Number conversions, fast exponentiation and primality."""

from __future__ import annotations


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as bits and return their value.

    Only digits equal to 1 contribute; any other digit counts as 0.
    """
    if n < 0:
        raise ValueError("binary number must be non-negative")
    result = 0
    weight = 1
    while n:
        n, digit = divmod(n, 10)
        if digit == 1:
            result += weight
        weight *= 2
    return result


def decimal_to_binary(n: int) -> int:
    """Return an integer whose decimal digits spell the binary form of ``n``."""
    if n < 0:
        raise ValueError("decimal number must be non-negative")
    result = 0
    place = 1
    while n:
        result += (n & 1) * place
        n >>= 1
        place *= 10
    return result


def power(base: int, exponent: int) -> int:
    """Return ``base`` raised to ``exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base
    half = power(base, exponent // 2)
    if exponent % 2 == 0:
        return half * half
    return base * half * half


def is_prime(n: int) -> bool:
    """Return True when ``n`` is a prime number."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True