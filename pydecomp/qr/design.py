"""
QR Design.

Wraps the matrix to be factored and checks the QR shape contract
(rows >= cols) once, at the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydecomp.core.protocols import Matrix
from pydecomp.core.validation import check_tall
from pydecomp.dense.convert import as_matrix


@dataclass(frozen=True)
class QRDesign:
    """
    Validated input for a QR decomposition.

    Construction:
        QRDesign.from_matrix([[12, -51, 4], [6, 167, -68], [-4, 24, -41]])
        QRDesign.from_matrix(DenseMatrix.identity(3))
    """
    _matrix: Matrix
    _rows: int
    _cols: int

    @classmethod
    def from_matrix(cls, M: Any) -> QRDesign:
        """
        Build a design from a Matrix or a numeric array-like.

        Raises:
            ValidationError: If an array-like is non-numeric or non-finite
            DimensionError: If M is not 2D, is empty, or has cols > rows
        """
        matrix = as_matrix(M, 'M')
        rows, cols = matrix.shape
        check_tall((rows, cols), 'M')
        return cls(_matrix=matrix, _rows=rows, _cols=cols)

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols
