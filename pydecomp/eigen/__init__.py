"""
Eigendecomposition.

Public API:
    eig(M, ...) -> EigenSolution

Example:
    >>> from pydecomp.eigen import eig
    >>> solution = eig(M, eps=1e-10)
    >>> if not solution.converged:
    ...     print(solution.warnings)
"""

from pydecomp.eigen.design import EigenDesign
from pydecomp.eigen.solution import EigenSolution, EigenParams
from pydecomp.eigen.solvers import eig

__all__ = [
    "eig",
    "EigenDesign",
    "EigenSolution",
    "EigenParams",
]
