"""
Solver dispatch for eigendecomposition.

This module provides the eig() function (public API) and backend selection.
"""

import warnings
from typing import Any, Literal

from pydecomp.core.compute.linalg.eigen import ShiftChoice
from pydecomp.eigen.backends.qr_iteration import QRIterationBackend
from pydecomp.eigen.design import EigenDesign
from pydecomp.eigen.solution import EigenSolution


BackendChoice = Literal['auto', 'cpu', 'cpu_qr_iteration']


def eig(
    M: Any,
    *,
    eps: float | None = None,
    max_iter: int = 1000,
    shift: ShiftChoice = 'none',
    backend: BackendChoice = 'auto',
) -> EigenSolution:
    """
    Eigendecomposition of a square matrix by QR iteration.

    Iterates A <- RQ until every off-diagonal entry of A is below eps
    in magnitude, or max_iter steps have been taken. Intended for real
    matrices with real, well-separated eigenvalues (symmetric matrices
    in particular).

    Args:
        M: Square matrix. Either a Matrix protocol implementation or any
           numeric array-like (wrapped in a DenseMatrix), or an
           existing EigenDesign.
        eps: Off-diagonal threshold. Defaults to the tolerance tier of
             M's dtype (1e-6 for float64).
        max_iter: Maximum number of QR steps.
        shift: Shift policy:
            - 'none': plain QR iteration (default)
            - 'trailing': subtract the trailing diagonal entry before
              each factorization and add it back afterwards
        backend: Computational backend to use:
            - 'auto' / 'cpu' / 'cpu_qr_iteration'

    Returns:
        EigenSolution with eigenvalues, eigenvectors and diagnostics.
        If max_iter is exhausted the best estimate is returned with
        converged=False and a RuntimeWarning is issued.

    Raises:
        ValidationError: If M is not numeric, contains NaN/Inf, or eps /
            max_iter are invalid
        DimensionError: If M is not square
        CapabilityError: If a Matrix type lacks required operations

    Example:
        >>> from pydecomp.eigen import eig
        >>> solution = eig([[2, 1], [1, 2]])
        >>> solution.eigenvalues
    """
    if isinstance(M, EigenDesign):
        design = M
    else:
        design = EigenDesign.from_matrix(M)

    if eps is None:
        eps = design.default_eps

    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design, eps=eps, max_iter=max_iter, shift=shift)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return EigenSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice) -> QRIterationBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_qr_iteration'):
        return QRIterationBackend()

    raise ValueError(f"Unknown backend: {choice!r}")
