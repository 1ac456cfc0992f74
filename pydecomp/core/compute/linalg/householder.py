"""
Householder reflector construction.

A Householder reflector H = I - 2 v v' reflects vectors across the
hyperplane orthogonal to the unit vector v. Embedded at an offset in a
larger identity it acts on a subspace only, which is how the QR
factorizer zeroes one sub-column at a time.
"""

from __future__ import annotations

from typing import TypeVar

from pydecomp.core.capabilities import (
    HOUSEHOLDER_MATRIX_OPERATIONS,
    HOUSEHOLDER_VECTOR_OPERATIONS,
)
from pydecomp.core.protocols import Matrix, Vector
from pydecomp.core.validation import check_capabilities, check_embedding

M = TypeVar('M', bound=Matrix)


def build_householder_reflector(
    dim: int,
    start: int,
    v: Vector,
    matrix_type: type[M] | None = None,
) -> M:
    """
    Reflection matrix for the hyperplane defined by `v`, embedded in a
    `dim`-dimensional space.

    The result is the identity outside rows/columns [start, start + len(v))
    and I - 2 v v' inside that block. `v` is expected to be normalized;
    it is not normalized here.

    Args:
        dim: Dimension of the space the resulting matrix operates in
        start: First index of the subspace the reflection acts on
        v: Unit vector defining the reflection
        matrix_type: Matrix class used to build the result. Defaults to
            DenseMatrix.

    Returns:
        dim x dim orthogonal, symmetric matrix

    Raises:
        DimensionError: If start < 0 or start + len(v) > dim
        CapabilityError: If v or matrix_type lack required operations
    """
    if matrix_type is None:
        from pydecomp.dense import DenseMatrix
        matrix_type = DenseMatrix

    check_capabilities(v, HOUSEHOLDER_VECTOR_OPERATIONS, 'v')
    check_capabilities(matrix_type, HOUSEHOLDER_MATRIX_OPERATIONS, 'matrix_type')

    subdim = v.shape
    check_embedding(dim, start, subdim, 'build_householder_reflector')

    qk = matrix_type.identity(dim)
    stop = start + subdim

    for j in range(start, stop):
        vj = v.unchecked_at(j - start)
        for i in range(start, stop):
            vv = v.unchecked_at(i - start) * vj
            qk.unchecked_set(i, j, qk.unchecked_at(i, j) - vv - vv)

    return qk
