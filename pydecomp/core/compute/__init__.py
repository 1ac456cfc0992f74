"""
Shared compute infrastructure for PyDecomp.

This module provides timing utilities, tolerance tiers, and the generic
linear algebra kernels that the domain entry points (pydecomp.qr,
pydecomp.eigen) dispatch to.

IMPORTANT: This is NOT where domain backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Default approximate-equality epsilons per precision
    linalg: Linear algebra kernels (Householder, QR, eigen)
"""

from pydecomp.core.compute.timing import Timer, timed
from pydecomp.core.compute.tolerances import (
    FP32,
    FP64,
    FP64_STRICT,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "FP64",
    "FP64_STRICT",
    "FP32",
    "select_tolerance",
]
