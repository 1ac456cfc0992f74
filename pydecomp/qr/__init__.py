"""
QR decomposition.

Public API:
    qr(M, ...) -> QRSolution

The qr() function is the only entry point. It handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pydecomp.qr import qr
    >>> solution = qr(M)
    >>> print(solution.summary())
"""

from pydecomp.qr.design import QRDesign
from pydecomp.qr.solution import QRSolution, QRParams
from pydecomp.qr.solvers import qr

__all__ = [
    "qr",
    "QRDesign",
    "QRSolution",
    "QRParams",
]
