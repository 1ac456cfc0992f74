"""
Generic result container for all PyDecomp computations.

The Result class provides a standardized envelope that every backend
returns. This enables shared tooling for timing, diagnostics and
reproducibility while letting each decomposition define its own
parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, iterations, reflections)
    - timing is optional (don't burden unit tests)
    - provenance for reproducibility (versions)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, Any]:
    """Generate minimal provenance metadata."""
    import pydecomp
    return {
        'pydecomp_version': pydecomp.__version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for decompositions.

    Type Parameters:
        P: The decomposition-specific parameter payload type

    Attributes:
        params: Decomposition factors and per-run quantities
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used to produce the result

    Examples:
        >>> # Direct method (no convergence notion)
        >>> Result(
        ...     params=QRParams(Q=Q, R=R, reflections=2),
        ...     info={'method': 'householder', 'reflections': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_householder'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=EigenParams(...),
        ...     info={'method': 'qr_iteration', 'converged': True, 'iterations': 14},
        ...     timing={'total_seconds': 0.01, 'qr_iteration': 0.009},
        ...     backend_name='cpu_qr_iteration'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
