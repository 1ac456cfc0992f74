"""
Conversion of decomposition inputs to protocol-conforming matrices.
"""

from typing import Any

import numpy as np

from pydecomp.core.capabilities import MATRIX_STORAGE_OPERATIONS, missing_operations
from pydecomp.core.protocols import Matrix
from pydecomp.core.validation import check_2d, check_array, check_finite, check_nonempty
from pydecomp.dense.matrix import DenseMatrix


def is_matrix_storage(obj: Any) -> bool:
    """
    True if obj should be handed to the kernels as is.

    numpy arrays, lists and tuples are always array-likes. Anything else
    that exposes indexed access (shape, unchecked_at) is matrix storage,
    even if it implements only part of the Matrix protocol; the kernels
    report whatever else they need via CapabilityError.
    """
    if isinstance(obj, (np.ndarray, list, tuple)):
        return False
    return not missing_operations(obj, MATRIX_STORAGE_OPERATIONS)


def as_matrix(obj: Any, name: str) -> Matrix:
    """
    Return obj itself if it is matrix storage, otherwise validate it as a
    numeric array-like and wrap it in a DenseMatrix.

    This is the boundary: array-likes are validated here (numeric, 2D,
    non-empty, finite) and trusted everywhere downstream.

    Raises:
        ValidationError: If obj can't be converted or has non-finite values
        DimensionError: If obj is not 2D or is empty
    """
    if is_matrix_storage(obj):
        return obj

    arr = check_array(obj, name)
    check_2d(arr, name)
    check_nonempty(arr, name)
    check_finite(arr, name)
    return DenseMatrix(arr)
