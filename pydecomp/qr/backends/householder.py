"""
Householder backend for QR decomposition.

Runs the generic Householder kernel on whatever Matrix type the design
holds, so the factors come back in the caller's storage.
"""

from typing import Any

from pydecomp.core.compute.linalg.qr import householder_qr
from pydecomp.core.compute.timing import Timer
from pydecomp.core.result import Result
from pydecomp.qr.design import QRDesign
from pydecomp.qr.solution import QRParams


class HouseholderQRBackend:
    """
    CPU backend using Householder reflections.

    Implements the Backend protocol for QRDesign -> QRParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_householder'

    def solve(self, design: QRDesign) -> Result[QRParams]:
        """
        Factor M = QR.

        Args:
            design: Validated QR design

        Returns:
            Result containing QRParams
        """
        timer = Timer()
        timer.start()

        with timer.section('householder_qr'):
            qr_result = householder_qr(design.matrix)

        timer.stop()

        params = QRParams(
            Q=qr_result.Q,
            R=qr_result.R,
            reflections=qr_result.reflections,
        )

        info: dict[str, Any] = {
            'method': 'householder',
            'shape': (design.rows, design.cols),
            'reflections': qr_result.reflections,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
