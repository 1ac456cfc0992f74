"""
QR decomposition by Householder reflections.

Written against the Matrix/Vector protocols only, so it runs unchanged
on any storage that exposes QR_MATRIX_OPERATIONS. Used directly by the
eigensolver and wrapped by pydecomp.qr for the user-facing API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pydecomp.core.capabilities import QR_MATRIX_OPERATIONS, QR_VECTOR_OPERATIONS
from pydecomp.core.compute.linalg.householder import build_householder_reflector
from pydecomp.core.protocols import Matrix
from pydecomp.core.scalars import is_zero, zero_of
from pydecomp.core.validation import check_capabilities, check_tall

M = TypeVar('M', bound=Matrix)


@dataclass(frozen=True)
class QRResult(Generic[M]):
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (rows x rows)
        R: Upper triangular matrix (rows x cols)
        reflections: Number of Householder reflections actually applied.
            Columns whose sub-column was already reduced are skipped.
    """
    Q: M
    R: M
    reflections: int


def householder_qr(m: M) -> QRResult[M]:
    """
    Full QR decomposition of a tall or square matrix.

    Computes M = QR where Q is orthogonal and R is upper triangular.
    The input is copied before any mutation.

    Algorithm (k = 0 .. min(rows - 1, cols) - 1):
        1. v = R[k:rows, k]
        2. alpha = -||v|| if v[0] >= 0 else ||v||
        3. v[0] -= alpha
        4. normalize v; if it was zero the column is already reduced
        5. Hk = I - 2 v v' embedded at k;  R = Hk R;  Q = Q Hk'

    The sign of alpha opposes v[0] so that v[0] - alpha never cancels.

    Args:
        m: Matrix to decompose (rows x cols, rows >= cols)

    Returns:
        QRResult with Q, R, and the number of applied reflections

    Raises:
        CapabilityError: If m lacks the operations QR requires
        DimensionError: If cols > rows
    """
    check_capabilities(m, QR_MATRIX_OPERATIONS, 'm')
    rows, cols = m.shape
    check_tall((rows, cols), 'm')

    matrix_type = type(m)
    q = matrix_type.identity(rows)
    r = m.copy()
    reflections = 0

    for k in range(min(rows - 1, cols)):
        v = r.col_slice(k, k, rows)
        if k == 0:
            check_capabilities(v, QR_VECTOR_OPERATIONS, 'm.col_slice()')

        v0 = v.unchecked_at(0)
        if v0 >= zero_of(v0):
            alpha = -v.norm()
        else:
            alpha = v.norm()

        v.unchecked_set(0, v0 - alpha)

        if is_zero(v.normalize()):
            continue

        qk = build_householder_reflector(rows, k, v, matrix_type)
        r = qk @ r
        q = q @ qk.transpose()
        reflections += 1

    return QRResult(Q=q, R=r, reflections=reflections)


def qr_decompose(m: M) -> tuple[M, M]:
    """
    QR decomposition using Householder reflections.

    Args:
        m: Matrix to decompose (rows >= cols)

    Returns:
        (Q, R) with Q orthogonal, R upper triangular and Q @ R ~= m
    """
    result = householder_qr(m)
    return result.Q, result.R
