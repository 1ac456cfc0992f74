"""
Tests for the qr() entry point.

Validates:
    - Array-like, Matrix and QRDesign inputs
    - Solution accessors, reconstruct(), summary() and repr
    - Result envelope metadata (backend name, info, timing)
    - Boundary validation and backend selection
"""

import numpy as np
import pytest

from pydecomp.core.exceptions import CapabilityError, DimensionError, ValidationError
from pydecomp.dense import DenseMatrix
from pydecomp.qr import QRDesign, QRSolution, qr


# ═══════════════════════════════════════════════════════════════════════
# Basic decomposition
# ═══════════════════════════════════════════════════════════════════════


class TestQR:

    def test_returns_solution(self, textbook_matrix):
        assert isinstance(qr(textbook_matrix), QRSolution)

    def test_array_like_wrapped_in_dense(self, textbook_matrix):
        solution = qr(textbook_matrix.tolist())
        assert isinstance(solution.Q, DenseMatrix)
        assert isinstance(solution.R, DenseMatrix)

    def test_reconstruct(self, textbook_matrix):
        solution = qr(textbook_matrix)
        np.testing.assert_allclose(
            solution.reconstruct().to_numpy(), textbook_matrix, atol=1e-10
        )

    def test_textbook_factors(self, textbook_matrix):
        solution = qr(textbook_matrix)
        np.testing.assert_allclose(
            np.abs(solution.R.diag().to_numpy()), [14.0, 175.0, 35.0], atol=1e-10
        )
        assert solution.reflections == 2

    def test_integer_input(self):
        solution = qr([[2, 0], [0, 3]])
        np.testing.assert_allclose(solution.reconstruct().to_numpy(), [[2.0, 0.0], [0.0, 3.0]], atol=1e-12)

    def test_tall(self, random_tall):
        solution = qr(random_tall)
        assert solution.Q.shape == (6, 6)
        assert solution.R.shape == (6, 4)
        np.testing.assert_allclose(solution.reconstruct().to_numpy(), random_tall, atol=1e-10)

    def test_matrix_input_keeps_type(self, list_matrix, textbook_matrix):
        solution = qr(list_matrix(textbook_matrix.tolist()))
        assert isinstance(solution.Q, list_matrix)
        assert isinstance(solution.R, list_matrix)

    def test_design_input(self, textbook_matrix):
        design = QRDesign.from_matrix(textbook_matrix)
        assert design.rows == 3
        assert design.cols == 3
        solution = qr(design)
        assert solution.reflections == 2


# ═══════════════════════════════════════════════════════════════════════
# Result metadata
# ═══════════════════════════════════════════════════════════════════════


class TestMetadata:

    def test_backend_name(self, textbook_matrix):
        assert qr(textbook_matrix).backend_name == 'cpu_householder'

    def test_info(self, random_tall):
        info = qr(random_tall).info
        assert info['method'] == 'householder'
        assert info['shape'] == (6, 4)
        assert info['reflections'] == 4

    def test_timing_sections(self, textbook_matrix):
        timing = qr(textbook_matrix).timing
        assert timing['total_seconds'] >= timing['householder_qr'] >= 0.0

    def test_no_warnings(self, textbook_matrix):
        assert qr(textbook_matrix).warnings == ()

    def test_repr(self, textbook_matrix):
        assert repr(qr(textbook_matrix)) == "QRSolution(rows=3, cols=3, reflections=2)"

    def test_summary(self, textbook_matrix):
        text = qr(textbook_matrix).summary()
        assert "QR Decomposition Results" in text
        assert "Reflections applied: 2 of 2" in text
        assert "R[0,0]" in text
        assert "cpu_householder" in text


# ═══════════════════════════════════════════════════════════════════════
# Validation and dispatch
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:

    def test_wide_rejected(self):
        with pytest.raises(DimensionError, match="rows >= cols"):
            qr(np.ones((2, 3)))

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="NaN"):
            qr([[1.0, np.nan], [0.0, 1.0]])

    def test_1d_rejected(self):
        with pytest.raises(DimensionError):
            qr([1.0, 2.0, 3.0])

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            qr([["a", "b"], ["c", "d"]])

    @pytest.mark.parametrize("backend", ['auto', 'cpu', 'cpu_householder'])
    def test_backend_aliases(self, backend, textbook_matrix):
        assert qr(textbook_matrix, backend=backend).backend_name == 'cpu_householder'

    def test_unknown_backend(self, textbook_matrix):
        with pytest.raises(ValueError, match="Unknown backend"):
            qr(textbook_matrix, backend='gpu')


# ═══════════════════════════════════════════════════════════════════════
# Partial Matrix implementations
# ═══════════════════════════════════════════════════════════════════════


class TestPartialStorage:
    """Storage with only the operations QR uses is passed to the kernel as is."""

    ROWLESS = ('row', 'row_slice', 'col', 'set_diag', 'swap')

    def test_runs_without_row_access(self, list_matrix, without_operations, textbook_matrix):
        partial = without_operations(list_matrix, *self.ROWLESS)
        solution = qr(partial(textbook_matrix.tolist()))
        assert solution.reflections == 2
        np.testing.assert_allclose(
            np.array(solution.reconstruct().tolist()), textbook_matrix, atol=1e-10
        )

    def test_missing_kernel_operation_reported(self, list_matrix, without_operations, textbook_matrix):
        partial = without_operations(list_matrix, *self.ROWLESS, 'transpose')
        with pytest.raises(CapabilityError, match="transpose"):
            qr(partial(textbook_matrix.tolist()))

    def test_wide_partial_rejected(self, list_matrix, without_operations):
        partial = without_operations(list_matrix, *self.ROWLESS)
        with pytest.raises(DimensionError, match="rows >= cols"):
            qr(partial([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]))
