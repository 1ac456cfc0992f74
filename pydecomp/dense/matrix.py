"""
Dense matrix backed by a two-dimensional numpy array.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pydecomp.core.compute.tolerances import select_tolerance
from pydecomp.core.exceptions import DimensionError
from pydecomp.core.protocols import Matrix, Vector
from pydecomp.core.validation import check_2d, check_array, check_index, check_range
from pydecomp.dense.vector import DenseVector


class DenseMatrix:
    """
    Row-major matrix of floats with an immutable shape.

    Implements the Matrix protocol. Construction copies its input;
    arithmetic, transpose and slicing return new objects. Only set,
    unchecked_set, swap and set_diag mutate in place.

    Construction:
        DenseMatrix([[1, 2], [3, 4]])
        DenseMatrix.zeros(3, 2)
        DenseMatrix.identity(3)
        DenseMatrix.from_diag(DenseVector([1, 2, 3]))
    """

    __slots__ = ('_data',)

    def __init__(self, rows: ArrayLike):
        data = check_array(rows, 'rows')
        check_2d(data, 'rows')
        self._data: NDArray[np.floating[Any]] = np.array(data, copy=True)

    @classmethod
    def _from_owned(cls, data: NDArray[np.floating[Any]]) -> DenseMatrix:
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def zeros(cls, rows: int, cols: int, dtype: DTypeLike = np.float64) -> DenseMatrix:
        return cls._from_owned(np.zeros((rows, cols), dtype=dtype))

    @classmethod
    def identity(cls, dim: int, dtype: DTypeLike = np.float64) -> DenseMatrix:
        return cls._from_owned(np.eye(dim, dtype=dtype))

    @classmethod
    def from_diag(cls, diag: Vector) -> DenseMatrix:
        if isinstance(diag, DenseVector):
            values = diag.to_numpy()
        else:
            values = np.asarray(
                [diag.unchecked_at(i) for i in range(diag.shape)], dtype=np.float64
            )
        return cls._from_owned(np.diag(values))

    # --- shape / indexing -------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        rows, cols = self._data.shape
        return rows, cols

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def _check(self, i: int, j: int, op: str) -> None:
        rows, cols = self._data.shape
        check_index(i, rows, f'DenseMatrix.{op} (row)')
        check_index(j, cols, f'DenseMatrix.{op} (col)')

    def at(self, i: int, j: int) -> Any:
        self._check(i, j, 'at')
        return self._data[i, j]

    def set(self, i: int, j: int, value: Any) -> None:
        self._check(i, j, 'set')
        self._data[i, j] = value

    def swap(self, a: tuple[int, int], b: tuple[int, int]) -> None:
        self._check(*a, 'swap')
        self._check(*b, 'swap')
        self._data[a], self._data[b] = self._data[b], self._data[a]

    def unchecked_at(self, i: int, j: int) -> Any:
        return self._data[i, j]

    def unchecked_set(self, i: int, j: int, value: Any) -> None:
        self._data[i, j] = value

    # --- structure --------------------------------------------------------

    def col(self, j: int) -> DenseVector:
        check_index(j, self._data.shape[1], 'DenseMatrix.col')
        return DenseVector._from_owned(self._data[:, j].copy())

    def col_slice(self, j: int, row_start: int, row_end: int) -> DenseVector:
        rows, cols = self._data.shape
        check_index(j, cols, 'DenseMatrix.col_slice')
        check_range(row_start, row_end, rows, 'DenseMatrix.col_slice')
        return DenseVector._from_owned(self._data[row_start:row_end, j].copy())

    def row(self, i: int) -> DenseVector:
        check_index(i, self._data.shape[0], 'DenseMatrix.row')
        return DenseVector._from_owned(self._data[i, :].copy())

    def row_slice(self, i: int, col_start: int, col_end: int) -> DenseVector:
        rows, cols = self._data.shape
        check_index(i, rows, 'DenseMatrix.row_slice')
        check_range(col_start, col_end, cols, 'DenseMatrix.row_slice')
        return DenseVector._from_owned(self._data[i, col_start:col_end].copy())

    def transpose(self) -> DenseMatrix:
        return DenseMatrix._from_owned(self._data.T.copy())

    @property
    def T(self) -> DenseMatrix:
        return self.transpose()

    def diag(self) -> DenseVector:
        return DenseVector._from_owned(np.diagonal(self._data).copy())

    def set_diag(self, diag: Vector) -> None:
        k = min(self._data.shape)
        if diag.shape != k:
            raise DimensionError(
                f"set_diag: expected a vector of length {k}, got {diag.shape}",
                shape=diag.shape,
                expected=f"length {k}",
            )
        for i in range(k):
            self._data[i, i] = diag.unchecked_at(i)

    # --- comparison -------------------------------------------------------

    def approx_eq(self, other: Matrix, eps: float | None = None) -> bool:
        """
        True if shapes match and every entry differs by less than eps.

        `other` may be any Matrix; non-dense storage is read through
        unchecked_at. When eps is None the default tolerance tier for
        this matrix's dtype is used.
        """
        if self.shape != other.shape:
            return False
        if eps is None:
            eps = select_tolerance(self._data.dtype).eps
        if isinstance(other, DenseMatrix):
            values = other._data
        else:
            rows, cols = self._data.shape
            values = np.array(
                [[other.unchecked_at(i, j) for j in range(cols)] for i in range(rows)],
                dtype=np.float64,
            ).reshape(rows, cols)
        return bool(np.all(np.abs(self._data - values) < eps))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    # --- arithmetic -------------------------------------------------------

    def _check_same_shape(self, other: DenseMatrix, op: str) -> None:
        if self.shape != other.shape:
            raise DimensionError(
                f"{op}: shape mismatch {self.shape} vs {other.shape}",
                shape=other.shape,
                expected=f"{self.shape}",
            )

    def __add__(self, other: DenseMatrix) -> DenseMatrix:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        self._check_same_shape(other, 'add')
        return DenseMatrix._from_owned(self._data + other._data)

    def __sub__(self, other: DenseMatrix) -> DenseMatrix:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        self._check_same_shape(other, 'sub')
        return DenseMatrix._from_owned(self._data - other._data)

    def __matmul__(self, other: DenseMatrix | DenseVector) -> DenseMatrix | DenseVector:
        if isinstance(other, DenseVector):
            if self._data.shape[1] != other.shape:
                raise DimensionError(
                    f"matmul: cannot multiply {self.shape} matrix by vector of "
                    f"length {other.shape}",
                    shape=other.shape,
                    expected=f"length {self._data.shape[1]}",
                )
            return DenseVector._from_owned(self._data @ other.to_numpy())
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        if self._data.shape[1] != other._data.shape[0]:
            raise DimensionError(
                f"matmul: inner dimensions differ, {self.shape} @ {other.shape}",
                shape=other.shape,
                expected=f"({self._data.shape[1]}, *)",
            )
        return DenseMatrix._from_owned(self._data @ other._data)

    # --- conversion -------------------------------------------------------

    def copy(self) -> DenseMatrix:
        return DenseMatrix._from_owned(self._data.copy())

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        return self._data.copy()

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __repr__(self) -> str:
        return f"DenseMatrix({self._data.tolist()!r})"
