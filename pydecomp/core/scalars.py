"""
Scalar helpers.

The scalar capabilities that builtin numbers don't expose as methods:
a zero value of the same type, and comparison against a tolerance.
"""

from typing import TypeVar

N = TypeVar('N')


def zero_of(x: N) -> N:
    """Additive zero of the same type as x."""
    return x - x


def is_zero(x: N) -> bool:
    """Exact comparison against zero."""
    return x == zero_of(x)


def approx_eq(a: N, b: N, eps: N) -> bool:
    """True if |a - b| < eps."""
    return abs(a - b) < eps
