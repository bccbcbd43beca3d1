"""Arithmetic in the prime field GF(257).

257 is the smallest prime above 256, so every byte value is a distinct field
element and ``P - 1 = 256`` is the only residue that is not a byte.
"""
from __future__ import annotations

from primeshare.errors import FieldError

PRIME = 257


def add(a: int, b: int) -> int:
    return (a + b) % PRIME


def neg(a: int) -> int:
    return (PRIME - a % PRIME) % PRIME


def sub(a: int, b: int) -> int:
    return (a + neg(b)) % PRIME


def mul(a: int, b: int) -> int:
    return (a * b) % PRIME


def inverse(a: int) -> int:
    """Return ``a^-1`` using Fermat's little theorem."""

    a %= PRIME
    if a == 0:
        raise FieldError("zero has no inverse in GF(257)", value=0)
    return pow(a, PRIME - 2, PRIME)


def div(a: int, b: int) -> int:
    """Return ``a / b``; dividing by zero raises :class:`FieldError`."""

    return mul(a, inverse(b))


__all__ = ["PRIME", "add", "neg", "sub", "mul", "inverse", "div"]
