"""
Reference dense storage.

numpy-backed implementations of the Vector and Matrix protocols. The
decomposition kernels accept any type that satisfies the protocols;
these are the ones array-like inputs are wrapped in.
"""

from pydecomp.dense.vector import DenseVector
from pydecomp.dense.matrix import DenseMatrix
from pydecomp.dense.convert import as_matrix, is_matrix_storage

__all__ = [
    "DenseVector",
    "DenseMatrix",
    "as_matrix",
    "is_matrix_storage",
]
