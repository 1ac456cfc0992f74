"""
PyDecomp: generic dense matrix decompositions for Python.

Householder QR and QR-iteration eigendecomposition written against a
small capability contract (pydecomp.core.protocols) instead of a
concrete storage layout. Any matrix/vector type exposing the required
operations can be decomposed; numpy-backed reference storage is
provided in pydecomp.dense.

Submodules:
    core: Capability protocols, exceptions, validation, kernels
    dense: numpy-backed DenseVector / DenseMatrix
    qr: qr() entry point
    eigen: eig() entry point
"""

__version__ = "0.1.0"

from pydecomp import dense
from pydecomp import qr
from pydecomp import eigen
from pydecomp.core.compute.linalg import (
    build_householder_reflector,
    eigen_decompose,
    qr_decompose,
)

__all__ = [
    "__version__",
    "dense",
    "qr",
    "eigen",
    "build_householder_reflector",
    "qr_decompose",
    "eigen_decompose",
]
