"""
Eigendecomposition by QR iteration.

Repeatedly factors A = QR and recombines A <- RQ, a similarity
transform, until A is diagonal to within eps. Eigenvalues are read off
the diagonal and eigenvectors are the accumulated product of the Q
factors. No deflation: every step works on the full matrix.

Shift policies:
    'none':      A = QR, A <- RQ. Plain unshifted iteration (the
                 default).
    'trailing':  A - sI = QR, A <- RQ + sI with s = A[n-1, n-1]. The
                 shift matrix is rebuilt from scratch each step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from pydecomp.core.capabilities import EIGEN_MATRIX_OPERATIONS
from pydecomp.core.compute.linalg.qr import qr_decompose
from pydecomp.core.protocols import Matrix, Vector
from pydecomp.core.validation import (
    check_capabilities,
    check_iterations,
    check_positive,
    check_square,
)

M = TypeVar('M', bound=Matrix)

ShiftChoice = Literal['none', 'trailing']
SHIFTS: tuple[str, ...] = ('none', 'trailing')


@dataclass(frozen=True)
class EigenIteration(Generic[M]):
    """
    State after QR iteration stops.

    Attributes:
        eigenvectors: Accumulated product of Q factors; columns
            approximate eigenvectors
        schur: Final iterate; its diagonal approximates the eigenvalues
        iterations: Number of QR steps taken
        converged: Whether every off-diagonal entry of `schur` is below eps
    """
    eigenvectors: M
    schur: M
    iterations: int
    converged: bool


def off_diagonal_converged(m: Matrix, eps: Any) -> bool:
    """
    True if every off-diagonal entry of m is smaller than eps in magnitude.

    Scans column-major and returns on the first entry with |m[i, j]| >= eps.
    """
    rows, cols = m.shape
    for j in range(cols):
        for i in range(rows):
            if i != j and abs(m.unchecked_at(i, j)) >= eps:
                return False
    return True


def off_diagonal_max(m: Matrix) -> Any:
    """Largest off-diagonal magnitude of m (0 when there is none)."""
    rows, cols = m.shape
    largest = 0
    for j in range(cols):
        for i in range(rows):
            if i != j:
                largest = max(largest, abs(m.unchecked_at(i, j)))
    return largest


def _shift_matrix(a: M, shift: Any) -> M:
    # Fresh diagonal matrix with `shift` on every diagonal entry.
    diag: Vector = a.diag()
    for i in range(diag.shape):
        diag.unchecked_set(i, shift)
    return type(a).from_diag(diag)


def qr_iterate(
    m: M,
    eps: Any,
    max_iterations: int,
    *,
    shift: ShiftChoice = 'none',
) -> EigenIteration[M]:
    """
    Run QR iteration on a square matrix.

    Convergence is checked before every step; the loop stops as soon as
    the off-diagonal part is below eps or after max_iterations steps.
    Running out of iterations is not an error: the current estimate is
    returned with converged=False.

    Args:
        m: Square matrix; copied, never mutated
        eps: Off-diagonal magnitude threshold (> 0)
        max_iterations: Maximum number of QR steps (>= 0)
        shift: 'none' or 'trailing' (see module docstring)

    Returns:
        EigenIteration with eigenvectors, final iterate, step count and
        convergence flag

    Raises:
        CapabilityError: If m lacks the operations the solver requires
        DimensionError: If m is not square
        ValidationError: If eps or max_iterations are invalid
        ValueError: If shift is not a known policy
    """
    check_capabilities(m, EIGEN_MATRIX_OPERATIONS, 'm')
    rows, cols = m.shape
    check_square((rows, cols), 'm')
    check_positive(eps, 'eps')
    check_iterations(max_iterations, 'max_iterations')
    if shift not in SHIFTS:
        raise ValueError(f"Unknown shift: {shift!r}. Expected one of {SHIFTS}")

    eigenvectors = type(m).identity(rows)
    eigenvalues = m.copy()

    iterations = 0
    for _ in range(max_iterations):
        if off_diagonal_converged(eigenvalues, eps):
            break

        if shift == 'trailing':
            sigma = eigenvalues.unchecked_at(rows - 1, rows - 1)
            shifter = _shift_matrix(eigenvalues, sigma)
            q, r = qr_decompose(eigenvalues - shifter)
            eigenvalues = r @ q + shifter
        else:
            q, r = qr_decompose(eigenvalues)
            eigenvalues = r @ q

        eigenvectors = eigenvectors @ q
        iterations += 1

    return EigenIteration(
        eigenvectors=eigenvectors,
        schur=eigenvalues,
        iterations=iterations,
        converged=off_diagonal_converged(eigenvalues, eps),
    )


def eigen_decompose(
    m: M,
    eps: Any,
    max_iterations: int,
    *,
    shift: ShiftChoice = 'none',
) -> tuple[M, Vector]:
    """
    Eigendecomposition of a square matrix using the QR algorithm.

    Args:
        m: Square matrix
        eps: Off-diagonal magnitude threshold
        max_iterations: Maximum number of QR steps
        shift: 'none' (default) or 'trailing'

    Returns:
        (eigenvectors, eigenvalues) where eigenvectors is a matrix whose
        columns approximate eigenvectors and eigenvalues is the diagonal
        of the final iterate
    """
    result = qr_iterate(m, eps, max_iterations, shift=shift)
    return result.eigenvectors, result.schur.diag()
