"""
Linear algebra kernels for PyDecomp.

Every kernel is written against the Matrix/Vector protocols in
pydecomp.core.protocols, never against a concrete storage type.

All functions follow these conventions:
    - Inputs are copied before mutation; nothing is modified in place
    - Shape preconditions are checked up front and raise DimensionError
    - Missing capabilities raise CapabilityError
    - Iterative kernels report non-convergence in their result, they
      don't raise

Submodules:
    householder: Householder reflector construction
    qr: QR decomposition by Householder reflections
    eigen: Eigendecomposition by (optionally shifted) QR iteration
"""

from pydecomp.core.compute.linalg.householder import build_householder_reflector
from pydecomp.core.compute.linalg.qr import QRResult, householder_qr, qr_decompose
from pydecomp.core.compute.linalg.eigen import (
    EigenIteration,
    eigen_decompose,
    off_diagonal_converged,
    off_diagonal_max,
    qr_iterate,
)

__all__ = [
    # Householder
    "build_householder_reflector",
    # QR decomposition
    "QRResult",
    "householder_qr",
    "qr_decompose",
    # Eigendecomposition
    "EigenIteration",
    "eigen_decompose",
    "off_diagonal_converged",
    "off_diagonal_max",
    "qr_iterate",
]
