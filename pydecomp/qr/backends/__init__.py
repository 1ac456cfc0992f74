"""
QR backends.

Available backends:
    HouseholderQRBackend: Householder reflections on any Matrix type
"""

from pydecomp.qr.backends.householder import HouseholderQRBackend

__all__ = [
    "HouseholderQRBackend",
]
