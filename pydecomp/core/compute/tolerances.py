"""
Tolerance tiers for approximate equality.

Defines the default epsilon used when comparing scalars and matrices
approximately, per floating-point precision:
- FP64: the default approximate-equality epsilon for double precision
- FP64_STRICT: for checks on well-conditioned double precision results
- FP32: relaxed for single-precision arithmetic

Used by the dense storage's approx_eq, by eig() when no eps is given,
and by the test suite.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for approximate comparison."""
    eps: float
    name: str
    description: str


FP64 = ToleranceTier(
    eps=1e-6,
    name='fp64',
    description='Double precision, default approximate-equality epsilon',
)

FP64_STRICT = ToleranceTier(
    eps=1e-10,
    name='fp64_strict',
    description='Double precision, well-conditioned problems',
)

FP32 = ToleranceTier(
    eps=1e-4,
    name='fp32',
    description='Single precision, relaxed for float32 rounding',
)


def select_tolerance(dtype: DTypeLike, strict: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a given scalar dtype."""
    dtype = np.dtype(dtype)
    if dtype.itemsize <= 4:
        return FP32
    if strict:
        return FP64_STRICT
    return FP64
