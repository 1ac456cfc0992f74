"""
Eigen Design.

Wraps the matrix to be diagonalized and checks that it is square.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from pydecomp.core.compute.tolerances import FP64, select_tolerance
from pydecomp.core.protocols import Matrix
from pydecomp.core.validation import check_square
from pydecomp.dense.convert import as_matrix


@dataclass(frozen=True)
class EigenDesign:
    """
    Validated input for an eigendecomposition.

    Construction:
        EigenDesign.from_matrix([[2, 1], [1, 2]])
        EigenDesign.from_matrix(DenseMatrix.identity(3))
    """
    _matrix: Matrix
    _n: int

    @classmethod
    def from_matrix(cls, M: Any) -> EigenDesign:
        """
        Build a design from a Matrix or a numeric array-like.

        Raises:
            ValidationError: If an array-like is non-numeric or non-finite
            DimensionError: If M is not 2D, is empty, or is not square
        """
        matrix = as_matrix(M, 'M')
        check_square(matrix.shape, 'M')
        return cls(_matrix=matrix, _n=matrix.shape[0])

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def n(self) -> int:
        return self._n

    @property
    def default_eps(self) -> float:
        """Tolerance tier epsilon for the matrix's dtype (FP64 if unknown)."""
        dtype = getattr(self._matrix, 'dtype', None)
        if dtype is None:
            return FP64.eps
        return select_tolerance(np.dtype(dtype)).eps
