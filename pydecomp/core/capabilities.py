"""
Capability (operation name) constants for PyDecomp.

This module is the SINGLE SOURCE OF TRUTH for the operations each kernel
requires of its inputs. Import from here, never use raw strings.

Usage:
    from pydecomp.core.capabilities import (
        QR_MATRIX_OPERATIONS,
        missing_operations,
    )

    missing = missing_operations(m, QR_MATRIX_OPERATIONS)
    if missing:
        ...
"""

from typing import Any

# Indexing
OP_SHAPE = 'shape'
OP_AT = 'at'
OP_SET = 'set'
OP_SWAP = 'swap'
OP_UNCHECKED_AT = 'unchecked_at'
OP_UNCHECKED_SET = 'unchecked_set'
OP_COPY = 'copy'

# Vector geometry
OP_NORM = 'norm'
OP_NORMALIZE = 'normalize'

# Matrix structure
OP_IDENTITY = 'identity'
OP_FROM_DIAG = 'from_diag'
OP_DIAG = 'diag'
OP_COL_SLICE = 'col_slice'
OP_TRANSPOSE = 'transpose'
OP_APPROX_EQ = 'approx_eq'

# Matrix arithmetic (operator protocol methods)
OP_MATMUL = '__matmul__'
OP_ADD = '__add__'
OP_SUB = '__sub__'

# Enough to be treated as matrix storage rather than an array-like
MATRIX_STORAGE_OPERATIONS = frozenset({
    OP_SHAPE,
    OP_UNCHECKED_AT,
})

HOUSEHOLDER_VECTOR_OPERATIONS = frozenset({
    OP_SHAPE,
    OP_UNCHECKED_AT,
})

HOUSEHOLDER_MATRIX_OPERATIONS = frozenset({
    OP_IDENTITY,
    OP_UNCHECKED_AT,
    OP_UNCHECKED_SET,
})

QR_VECTOR_OPERATIONS = frozenset({
    OP_SHAPE,
    OP_UNCHECKED_AT,
    OP_UNCHECKED_SET,
    OP_NORM,
    OP_NORMALIZE,
})

QR_MATRIX_OPERATIONS = frozenset({
    OP_SHAPE,
    OP_COPY,
    OP_IDENTITY,
    OP_COL_SLICE,
    OP_TRANSPOSE,
    OP_UNCHECKED_AT,
    OP_UNCHECKED_SET,
    OP_MATMUL,
})

EIGEN_MATRIX_OPERATIONS = QR_MATRIX_OPERATIONS | frozenset({
    OP_DIAG,
    OP_FROM_DIAG,
    OP_APPROX_EQ,
    OP_ADD,
    OP_SUB,
})


def missing_operations(obj: Any, required: frozenset[str]) -> frozenset[str]:
    """
    Names in `required` that `obj` does not expose.

    Note:
        Unknown operation names are reported as missing, never raise.
        This keeps capability checks forward compatible.
    """
    return frozenset(op for op in required if not hasattr(obj, op))


__all__ = [
    'OP_SHAPE',
    'OP_AT',
    'OP_SET',
    'OP_SWAP',
    'OP_UNCHECKED_AT',
    'OP_UNCHECKED_SET',
    'OP_COPY',
    'OP_NORM',
    'OP_NORMALIZE',
    'OP_IDENTITY',
    'OP_FROM_DIAG',
    'OP_DIAG',
    'OP_COL_SLICE',
    'OP_TRANSPOSE',
    'OP_APPROX_EQ',
    'OP_MATMUL',
    'OP_ADD',
    'OP_SUB',
    'MATRIX_STORAGE_OPERATIONS',
    'HOUSEHOLDER_VECTOR_OPERATIONS',
    'HOUSEHOLDER_MATRIX_OPERATIONS',
    'QR_VECTOR_OPERATIONS',
    'QR_MATRIX_OPERATIONS',
    'EIGEN_MATRIX_OPERATIONS',
    'missing_operations',
]
