"""
pytest configuration and shared fixtures.

Besides the numeric fixtures, this provides ListVector / ListMatrix: a
pure-Python implementation of the Vector and Matrix protocols backed by
nested lists of floats. The kernels must run on it unchanged.
"""

import math

import numpy as np
import pytest


# =====================================================================
# List-backed storage
# =====================================================================


class ListVector:
    def __init__(self, values):
        self._v = [float(x) for x in values]

    @property
    def shape(self):
        return len(self._v)

    def __len__(self):
        return len(self._v)

    def at(self, i):
        if not 0 <= i < len(self._v):
            raise IndexError(i)
        return self._v[i]

    def set(self, i, value):
        if not 0 <= i < len(self._v):
            raise IndexError(i)
        self._v[i] = value

    def swap(self, i, j):
        self._v[i], self._v[j] = self.at(j), self.at(i)

    def unchecked_at(self, i):
        return self._v[i]

    def unchecked_set(self, i, value):
        self._v[i] = value

    def norm(self):
        return math.sqrt(sum(x * x for x in self._v))

    def normalize(self):
        n = self.norm()
        if n != 0:
            self._v = [x / n for x in self._v]
        return n

    def copy(self):
        return ListVector(self._v)

    def tolist(self):
        return list(self._v)


class ListMatrix:
    def __init__(self, rows):
        self._m = [[float(x) for x in row] for row in rows]
        self._rows = len(self._m)
        self._cols = len(self._m[0]) if self._m else 0

    @classmethod
    def identity(cls, dim):
        return cls([[1.0 if i == j else 0.0 for j in range(dim)] for i in range(dim)])

    @classmethod
    def from_diag(cls, diag):
        n = diag.shape
        return cls([[diag.unchecked_at(i) if i == j else 0.0 for j in range(n)]
                    for i in range(n)])

    @property
    def shape(self):
        return self._rows, self._cols

    def _check(self, i, j):
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexError((i, j))

    def at(self, i, j):
        self._check(i, j)
        return self._m[i][j]

    def set(self, i, j, value):
        self._check(i, j)
        self._m[i][j] = value

    def swap(self, a, b):
        va, vb = self.at(*a), self.at(*b)
        self.set(*a, vb)
        self.set(*b, va)

    def unchecked_at(self, i, j):
        return self._m[i][j]

    def unchecked_set(self, i, j, value):
        self._m[i][j] = value

    def col(self, j):
        return ListVector(self._m[i][j] for i in range(self._rows))

    def col_slice(self, j, row_start, row_end):
        return ListVector(self._m[i][j] for i in range(row_start, row_end))

    def row(self, i):
        return ListVector(self._m[i])

    def row_slice(self, i, col_start, col_end):
        return ListVector(self._m[i][col_start:col_end])

    def transpose(self):
        return ListMatrix([[self._m[i][j] for i in range(self._rows)]
                           for j in range(self._cols)])

    def diag(self):
        return ListVector(self._m[i][i] for i in range(min(self._rows, self._cols)))

    def set_diag(self, diag):
        for i in range(diag.shape):
            self._m[i][i] = diag.unchecked_at(i)

    def approx_eq(self, other, eps):
        if self.shape != other.shape:
            return False
        return all(abs(self._m[i][j] - other.unchecked_at(i, j)) < eps
                   for i in range(self._rows) for j in range(self._cols))

    def copy(self):
        return ListMatrix(self._m)

    def __matmul__(self, other):
        rows, inner = self.shape
        _, cols = other.shape
        return ListMatrix([
            [sum(self._m[i][k] * other.unchecked_at(k, j) for k in range(inner))
             for j in range(cols)]
            for i in range(rows)
        ])

    def __add__(self, other):
        return ListMatrix([[self._m[i][j] + other.unchecked_at(i, j)
                            for j in range(self._cols)] for i in range(self._rows)])

    def __sub__(self, other):
        return ListMatrix([[self._m[i][j] - other.unchecked_at(i, j)
                            for j in range(self._cols)] for i in range(self._rows)])

    def tolist(self):
        return [list(row) for row in self._m]


@pytest.fixture
def list_matrix():
    """Constructor for the list-backed Matrix implementation."""
    return ListMatrix


@pytest.fixture
def list_vector():
    """Constructor for the list-backed Vector implementation."""
    return ListVector


# =====================================================================
# Numeric fixtures
# =====================================================================


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def textbook_matrix():
    """Classic Householder QR example; |diag(R)| = [14, 175, 35]."""
    return np.array([
        [12.0, -51.0, 4.0],
        [6.0, 167.0, -68.0],
        [-4.0, 24.0, -41.0],
    ])


@pytest.fixture
def symmetric_2x2():
    """Eigenvalues {1, 3}."""
    return np.array([[2.0, 1.0], [1.0, 2.0]])


@pytest.fixture
def symmetric_3x3():
    """Diagonally dominant symmetric matrix with well-separated eigenvalues."""
    return np.array([
        [6.0, 1.0, 0.5],
        [1.0, 3.0, 0.25],
        [0.5, 0.25, 1.0],
    ])


@pytest.fixture
def random_tall(rng):
    """6 x 4 standard normal matrix."""
    return rng.standard_normal((6, 4))


@pytest.fixture
def random_symmetric(rng):
    """5 x 5 symmetric matrix with eigenvalues 1..5 (well separated)."""
    Q, _ = np.linalg.qr(rng.standard_normal((5, 5)))
    return Q @ np.diag([5.0, 4.0, 3.0, 2.0, 1.0]) @ Q.T


@pytest.fixture
def without_operations():
    """Build a copy of a storage class that lacks the named attributes."""
    def build(cls, *names):
        dropped = set(names) | {'__dict__', '__weakref__'}
        namespace = {k: v for k, v in vars(cls).items() if k not in dropped}
        return type('Partial' + cls.__name__, (), namespace)
    return build
