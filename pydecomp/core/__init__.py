"""
Core infrastructure for PyDecomp.

This module provides the capability contract, shared abstractions, and
utilities used by the kernels and the domain entry points.

Key components:
    protocols: Scalar, Vector, Matrix, Backend protocols
    capabilities: Operation names each kernel requires
    scalars: Zero value and approximate comparison for scalars
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from pydecomp.core.protocols import Scalar, Vector, Matrix, Backend
from pydecomp.core.result import Result
from pydecomp.core.exceptions import (
    PyDecompError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    CapabilityError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Scalar",
    "Vector",
    "Matrix",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyDecompError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "CapabilityError",
    "ConvergenceError",
]
