"""
Core protocols for PyDecomp.

These define the capability contract that any matrix/vector/scalar type
must satisfy for the decomposition kernels to run on it. We use Protocol
(structural typing) rather than ABC (nominal typing): storage layouts
never need to inherit from anything in this package, they only need to
expose the operations.

Design Principles:
    - Minimal contracts: prescribe only what the kernels actually call
    - Two-tier indexing: checked accessors validate bounds, unchecked
      accessors trust the caller (used inside loops whose bounds are
      already fixed by the shape)
    - Value semantics: arithmetic returns new objects; only set/swap/
      normalize mutate in place
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from pydecomp.core.result import Result

# Type variables for generic payloads
N = TypeVar('N')  # Scalar type
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Scalar(Protocol):
    """
    An ordered field element.

    Python floats, numpy floating scalars and fractions.Fraction all
    satisfy this. The zero value and approximate equality are provided
    by pydecomp.core.scalars rather than as methods, so builtin numbers
    qualify without wrapping.
    """

    def __abs__(self): ...

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __truediv__(self, other): ...

    def __neg__(self): ...

    def __lt__(self, other) -> bool: ...

    def __le__(self, other) -> bool: ...


@runtime_checkable
class Vector(Protocol[N]):
    """
    Fixed-length ordered sequence of scalars.
    """

    @property
    def shape(self) -> int:
        """Number of components."""
        ...

    def __len__(self) -> int: ...

    def at(self, i: int) -> N:
        """Read component i. Raises IndexOutOfBoundsError if out of range."""
        ...

    def set(self, i: int, value: N) -> None:
        """Write component i. Raises IndexOutOfBoundsError if out of range."""
        ...

    def swap(self, i: int, j: int) -> None:
        """Exchange components i and j (checked)."""
        ...

    def unchecked_at(self, i: int) -> N:
        """Read component i. The caller guarantees 0 <= i < shape."""
        ...

    def unchecked_set(self, i: int, value: N) -> None:
        """Write component i. The caller guarantees 0 <= i < shape."""
        ...

    def norm(self) -> N:
        """Euclidean norm."""
        ...

    def normalize(self) -> N:
        """
        Scale to unit norm in place.

        Returns:
            The magnitude before normalization. A zero vector is left
            unchanged and zero is returned.
        """
        ...

    def copy(self) -> Vector[N]: ...


@runtime_checkable
class Matrix(Protocol[N]):
    """
    Two-dimensional indexed container of scalars with an immutable shape.
    """

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        ...

    @classmethod
    def identity(cls, dim: int) -> Matrix[N]:
        """The dim x dim identity matrix."""
        ...

    @classmethod
    def from_diag(cls, diag: Vector[N]) -> Matrix[N]:
        """Square matrix with `diag` on its diagonal and zeros elsewhere."""
        ...

    def at(self, i: int, j: int) -> N: ...

    def set(self, i: int, j: int, value: N) -> None: ...

    def swap(self, a: tuple[int, int], b: tuple[int, int]) -> None: ...

    def unchecked_at(self, i: int, j: int) -> N: ...

    def unchecked_set(self, i: int, j: int, value: N) -> None: ...

    def col(self, j: int) -> Vector[N]: ...

    def col_slice(self, j: int, row_start: int, row_end: int) -> Vector[N]:
        """Rows [row_start, row_end) of column j, as a new Vector."""
        ...

    def row(self, i: int) -> Vector[N]: ...

    def row_slice(self, i: int, col_start: int, col_end: int) -> Vector[N]: ...

    def transpose(self) -> Matrix[N]:
        """A new matrix; self is not modified."""
        ...

    def diag(self) -> Vector[N]: ...

    def set_diag(self, diag: Vector[N]) -> None: ...

    def approx_eq(self, other: Matrix[N], eps: N) -> bool:
        """True if every pair of entries differs by less than eps."""
        ...

    def copy(self) -> Matrix[N]: ...

    def __matmul__(self, other: Matrix[N]) -> Matrix[N]: ...

    def __add__(self, other: Matrix[N]) -> Matrix[N]: ...

    def __sub__(self, other: Matrix[N]) -> Matrix[N]: ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific design and produce
    a domain-specific parameter payload. Backends are stateless beyond
    the options given at construction, which makes them easy to test
    and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_householder', 'cpu_qr_iteration'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the decomposition.

        Args:
            design: Validated domain design

        Returns:
            Result envelope containing parameter payload and metadata
        """
        ...
