"""
Input validation utilities for PyDecomp.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pydecomp.core.capabilities import missing_operations
from pydecomp.core.exceptions import (
    CapabilityError,
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    # Ensure floating point for numerical stability
    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            shape=array.shape,
            expected=f"{ndim}D",
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element along every axis.

    Raises:
        DimensionError: If any axis has length zero
    """
    if 0 in array.shape:
        raise DimensionError(
            f"{name}: empty array with shape {array.shape}",
            shape=array.shape,
            expected="non-empty",
        )


def check_capabilities(obj: Any, required: frozenset[str], name: str) -> None:
    """
    Verify obj exposes every operation in `required`.

    Raises:
        CapabilityError: Listing the missing operations
    """
    missing = missing_operations(obj, required)
    if missing:
        raise CapabilityError(
            f"{name}: {type(obj).__name__} is missing required operations "
            f"{sorted(missing)}",
            missing=missing,
        )


def check_tall(shape: tuple[int, int], name: str) -> None:
    """
    Verify a matrix has at least as many rows as columns.

    Raises:
        DimensionError: If cols > rows
    """
    rows, cols = shape
    if rows < cols:
        raise DimensionError(
            f"{name}: QR decomposition requires rows >= cols, got shape {shape}",
            shape=shape,
            expected="rows >= cols",
        )


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise DimensionError(
            f"{name}: the matrix being decomposed must be square, got shape {shape}",
            shape=shape,
            expected="rows == cols",
        )


def check_embedding(dim: int, start: int, subdim: int, name: str) -> None:
    """
    Verify the subspace [start, start + subdim) fits inside dim.

    Raises:
        DimensionError: If start is negative or start + subdim > dim
    """
    if start < 0 or dim < start + subdim:
        raise DimensionError(
            f"{name}: cannot embed a {subdim}-dimensional reflection at offset "
            f"{start} in a {dim}-dimensional space",
            shape=dim,
            expected=f"dim >= {start + subdim}",
        )


def check_index(index: int, size: int, name: str) -> None:
    """
    Verify 0 <= index < size.

    Raises:
        IndexOutOfBoundsError: If index is outside the range
    """
    if not 0 <= index < size:
        raise IndexOutOfBoundsError(
            f"{name}: index {index} out of bounds for size {size}",
            index=index,
            shape=size,
        )


def check_range(start: int, end: int, size: int, name: str) -> None:
    """
    Verify [start, end) is a valid slice of range(size).

    Raises:
        IndexOutOfBoundsError: If not 0 <= start <= end <= size
    """
    if not 0 <= start <= end <= size:
        raise IndexOutOfBoundsError(
            f"{name}: slice [{start}, {end}) out of bounds for size {size}",
            index=(start, end),
            shape=size,
        )


def check_positive(value: Any, name: str) -> None:
    """
    Verify a tolerance is strictly positive.

    Raises:
        ValidationError: If value <= 0 or NaN
    """
    if not value > 0:
        raise ValidationError(f"{name}: must be positive, got {value!r}")


def check_iterations(value: Any, name: str) -> None:
    """
    Verify an iteration budget is a non-negative integer.

    Raises:
        ValidationError: If value is not an int or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
