"""
Eigendecomposition backends.

Available backends:
    QRIterationBackend: QR iteration (unshifted or trailing-shift)
"""

from pydecomp.eigen.backends.qr_iteration import QRIterationBackend

__all__ = [
    "QRIterationBackend",
]
