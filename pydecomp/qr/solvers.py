"""
Solver dispatch for QR decomposition.

This module provides the qr() function (public API) and backend selection.
"""

from typing import Any, Literal

from pydecomp.qr.backends.householder import HouseholderQRBackend
from pydecomp.qr.design import QRDesign
from pydecomp.qr.solution import QRSolution


BackendChoice = Literal['auto', 'cpu', 'cpu_householder']


def qr(
    M: Any,
    *,
    backend: BackendChoice = 'auto',
) -> QRSolution:
    """
    QR decomposition of a tall or square matrix.

    Computes M = QR with Q orthogonal (rows x rows) and R upper
    triangular (rows x cols).

    Args:
        M: Matrix to decompose. Either a Matrix protocol implementation
           (factors come back in the same type) or any numeric array-like
           (wrapped in a DenseMatrix), or an existing QRDesign.
        backend: Computational backend to use:
            - 'auto' / 'cpu' / 'cpu_householder': Householder reflections

    Returns:
        QRSolution with Q, R and diagnostics

    Raises:
        ValidationError: If M is not numeric or contains NaN/Inf
        DimensionError: If M is not 2D or has more columns than rows
        CapabilityError: If a Matrix type lacks the operations QR needs

    Example:
        >>> from pydecomp.qr import qr
        >>> solution = qr([[12, -51, 4], [6, 167, -68], [-4, 24, -41]])
        >>> solution.R.diag()
    """
    if isinstance(M, QRDesign):
        design = M
    else:
        design = QRDesign.from_matrix(M)

    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)

    return QRSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice) -> HouseholderQRBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_householder'):
        return HouseholderQRBackend()

    raise ValueError(f"Unknown backend: {choice!r}")
