"""
Dense vector backed by a one-dimensional numpy array.
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pydecomp.core.compute.tolerances import select_tolerance
from pydecomp.core.validation import check_1d, check_array, check_index


class DenseVector:
    """
    Fixed-length vector of floats.

    Implements the Vector protocol. The length is fixed at construction;
    the constructor always copies its input so no two vectors share
    storage.
    """

    __slots__ = ('_data',)

    def __init__(self, values: ArrayLike):
        data = check_array(values, 'values')
        check_1d(data, 'values')
        self._data: NDArray[np.floating[Any]] = np.array(data, copy=True)

    @classmethod
    def _from_owned(cls, data: NDArray[np.floating[Any]]) -> DenseVector:
        # Takes ownership of `data` without copying or validating.
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def zeros(cls, n: int, dtype: DTypeLike = np.float64) -> DenseVector:
        return cls._from_owned(np.zeros(n, dtype=dtype))

    @property
    def shape(self) -> int:
        return self._data.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __len__(self) -> int:
        return self._data.shape[0]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def at(self, i: int) -> Any:
        check_index(i, self.shape, 'DenseVector.at')
        return self._data[i]

    def set(self, i: int, value: Any) -> None:
        check_index(i, self.shape, 'DenseVector.set')
        self._data[i] = value

    def swap(self, i: int, j: int) -> None:
        check_index(i, self.shape, 'DenseVector.swap')
        check_index(j, self.shape, 'DenseVector.swap')
        self._data[[i, j]] = self._data[[j, i]]

    def unchecked_at(self, i: int) -> Any:
        return self._data[i]

    def unchecked_set(self, i: int, value: Any) -> None:
        self._data[i] = value

    def norm(self) -> Any:
        return self._data.dtype.type(np.linalg.norm(self._data))

    def normalize(self) -> Any:
        """Scale to unit norm in place; returns the magnitude beforehand."""
        magnitude = self.norm()
        if magnitude != 0:
            self._data /= magnitude
        return magnitude

    def approx_eq(self, other: Any, eps: float | None = None) -> bool:
        """True if lengths match and every component differs by less than eps."""
        if self.shape != other.shape:
            return False
        if eps is None:
            eps = select_tolerance(self._data.dtype).eps
        if isinstance(other, DenseVector):
            values = other._data
        else:
            values = np.array(
                [other.unchecked_at(i) for i in range(self.shape)], dtype=np.float64
            )
        return bool(np.all(np.abs(self._data - values) < eps))

    def copy(self) -> DenseVector:
        return DenseVector._from_owned(self._data.copy())

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        return self._data.copy()

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseVector):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"DenseVector({self._data.tolist()!r})"
