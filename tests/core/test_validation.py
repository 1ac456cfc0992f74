"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object/complex rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d / check_nonempty
    - check_capabilities: missing-operation reporting
    - check_tall / check_square / check_embedding: shape contracts
    - check_index / check_range: accessor bounds
    - check_positive / check_iterations: solver options
"""

import numpy as np
import pytest

from pydecomp.core.exceptions import (
    CapabilityError,
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)
from pydecomp.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_capabilities,
    check_embedding,
    check_finite,
    check_index,
    check_iterations,
    check_ndim,
    check_nonempty,
    check_positive,
    check_range,
    check_square,
    check_tall,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "M")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_preserved(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "M")
        assert result.dtype == np.float32

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "M")
        assert result.shape == (2, 2)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "M")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"], ["c", "d"]], "M")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex dtype"):
            check_array([[1 + 2j, 0], [0, 1]], "M")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:
    """check_finite rejects NaN and Inf values."""

    def test_finite_passes(self):
        check_finite(np.array([[1.0, 2.0], [3.0, 4.0]]), "M")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan, 3.0]), "M")

    def test_mixed_nan_inf(self):
        with pytest.raises(ValidationError, match="2 NaN.*1 Inf"):
            check_finite(np.array([np.nan, np.inf, np.nan]), "M")


# ═══════════════════════════════════════════════════════════════════════
# Dimensionality
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:
    """check_ndim, check_1d, check_2d, check_nonempty."""

    def test_wrong_ndim_raises(self):
        with pytest.raises(DimensionError, match="expected 1D.*got 2D"):
            check_ndim(np.array([[1.0, 2.0]]), 1, "v")

    def test_check_1d_passes(self):
        check_1d(np.array([1.0, 2.0, 3.0]), "v")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError):
            check_2d(np.array([1.0, 2.0, 3.0]), "M")

    def test_check_2d_rejects_3d(self):
        with pytest.raises(DimensionError):
            check_2d(np.ones((2, 3, 4)), "M")

    def test_nonempty_rejects_zero_rows(self):
        with pytest.raises(DimensionError, match="empty"):
            check_nonempty(np.ones((0, 3)), "M")

    def test_nonempty_passes(self):
        check_nonempty(np.ones((1, 1)), "M")


# ═══════════════════════════════════════════════════════════════════════
# Capabilities
# ═══════════════════════════════════════════════════════════════════════


class TestCheckCapabilities:
    """check_capabilities reports every missing operation."""

    def test_passes_when_all_present(self):
        check_capabilities([1, 2], frozenset({"copy", "__len__"}), "v")

    def test_missing_raises_with_names(self):
        with pytest.raises(CapabilityError, match="normalize") as exc_info:
            check_capabilities([1, 2], frozenset({"copy", "normalize", "norm"}), "v")
        assert exc_info.value.missing == frozenset({"normalize", "norm"})

    def test_message_includes_type_name(self):
        with pytest.raises(CapabilityError, match="list"):
            check_capabilities([], frozenset({"transpose"}), "m")


# ═══════════════════════════════════════════════════════════════════════
# Shape contracts
# ═══════════════════════════════════════════════════════════════════════


class TestShapeContracts:
    """check_tall, check_square, check_embedding."""

    @pytest.mark.parametrize("shape", [(3, 3), (5, 2), (1, 1)])
    def test_tall_passes(self, shape):
        check_tall(shape, "M")

    def test_wide_rejected(self):
        with pytest.raises(DimensionError, match="rows >= cols") as exc_info:
            check_tall((2, 3), "M")
        assert exc_info.value.shape == (2, 3)

    def test_square_passes(self):
        check_square((4, 4), "M")

    def test_non_square_rejected(self):
        with pytest.raises(DimensionError, match="must be square"):
            check_square((4, 3), "M")

    def test_embedding_fits_exactly(self):
        check_embedding(5, 2, 3, "H")

    def test_embedding_overflow_rejected(self):
        with pytest.raises(DimensionError, match="cannot embed"):
            check_embedding(4, 2, 3, "H")

    def test_negative_start_rejected(self):
        with pytest.raises(DimensionError):
            check_embedding(4, -1, 2, "H")


# ═══════════════════════════════════════════════════════════════════════
# Bounds
# ═══════════════════════════════════════════════════════════════════════


class TestBounds:
    """check_index and check_range raise IndexOutOfBoundsError."""

    def test_index_in_range(self):
        check_index(0, 1, "v")

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_index_out_of_range(self, index):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            check_index(index, 3, "v")
        assert exc_info.value.index == index
        assert exc_info.value.shape == 3

    def test_empty_range_allowed(self):
        check_range(2, 2, 2, "col_slice")

    def test_reversed_range_rejected(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_range(2, 1, 3, "col_slice")

    def test_range_past_end_rejected(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_range(0, 4, 3, "col_slice")


# ═══════════════════════════════════════════════════════════════════════
# Solver options
# ═══════════════════════════════════════════════════════════════════════


class TestSolverOptions:
    """check_positive and check_iterations."""

    def test_positive_passes(self):
        check_positive(1e-12, "eps")

    @pytest.mark.parametrize("value", [0.0, -1e-6, float("nan")])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="eps"):
            check_positive(value, "eps")

    def test_zero_iterations_allowed(self):
        check_iterations(0, "max_iter")

    def test_numpy_integer_allowed(self):
        check_iterations(np.int64(5), "max_iter")

    def test_negative_iterations_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_iterations(-1, "max_iter")

    @pytest.mark.parametrize("value", [1.5, "10", True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError, match="integer"):
            check_iterations(value, "max_iter")
