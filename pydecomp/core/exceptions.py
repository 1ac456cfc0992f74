"""
Exception hierarchy for PyDecomp.

All exceptions inherit from PyDecompError to allow catching any
library-specific error. Contract violations (wrong shapes, missing
capabilities, out-of-range indices) are programmer errors and are
raised immediately; they are never caught inside the package.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDecompError(Exception):
    """Base exception for all PyDecomp errors."""
    pass


class ValidationError(PyDecompError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix or vector dimensions violate an operation's contract.

    Raised when QR is called with more columns than rows, when an
    eigendecomposition is requested for a non-square matrix, when a
    reflector embedding exceeds its ambient dimension, or when operand
    shapes don't match.

    Attributes:
        shape: The offending shape, if known
        expected: Description of the required shape, if known
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, ...] | int | None = None,
        expected: str | None = None,
    ):
        super().__init__(message)
        self.shape = shape
        self.expected = expected


class IndexOutOfBoundsError(DimensionError, IndexError):
    """
    Checked accessor called with an index outside the container's shape.

    Attributes:
        index: The requested index
        shape: Shape of the container
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | int | None = None,
        shape: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message, shape=shape)
        self.index = index


class CapabilityError(ValidationError, TypeError):
    """
    A value does not expose the operations an algorithm requires.

    Attributes:
        missing: Names of the missing operations
    """

    def __init__(self, message: str, missing: frozenset[str] = frozenset()):
        super().__init__(message)
        self.missing = missing


class ConvergenceError(PyDecompError):
    """
    Iterative algorithm failed to converge.

    The eigensolver itself never raises this: running out of iterations
    returns the best current estimate. Callers that need strict
    convergence opt in via EigenSolution.check_converged().

    Attributes:
        iterations: Number of iterations completed
        final_change: Largest remaining off-diagonal magnitude
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
