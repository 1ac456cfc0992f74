"""
QR iteration backend for eigendecomposition.

Runs the generic QR-iteration kernel on whatever Matrix type the design
holds. Running out of iterations is reported in the Result (converged
flag and a warning), never raised.
"""

from typing import Any

from pydecomp.core.compute.linalg.eigen import ShiftChoice, off_diagonal_max, qr_iterate
from pydecomp.core.compute.timing import Timer
from pydecomp.core.result import Result
from pydecomp.eigen.design import EigenDesign
from pydecomp.eigen.solution import EigenParams


class QRIterationBackend:
    """
    CPU backend using (optionally shifted) QR iteration.

    Implements the Backend protocol for EigenDesign -> EigenParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_qr_iteration'

    def solve(
        self,
        design: EigenDesign,
        *,
        eps: float,
        max_iter: int = 1000,
        shift: ShiftChoice = 'none',
    ) -> Result[EigenParams]:
        """
        Diagonalize by QR iteration.

        Args:
            design: Validated eigen design
            eps: Off-diagonal magnitude threshold
            max_iter: Maximum QR steps
            shift: 'none' or 'trailing'

        Returns:
            Result containing EigenParams
        """
        timer = Timer()
        timer.start()
        warnings_list = []

        with timer.section('qr_iteration'):
            state = qr_iterate(design.matrix, eps, max_iter, shift=shift)

        with timer.section('diagnostics'):
            eigenvalues = state.schur.diag()
            residual = float(off_diagonal_max(state.schur))

        if not state.converged:
            warnings_list.append(
                f"QR iteration did not converge after {state.iterations} iterations "
                f"(largest off-diagonal: {residual:.2e}, eps: {float(eps):.2e})"
            )

        timer.stop()

        params = EigenParams(
            eigenvalues=eigenvalues,
            eigenvectors=state.eigenvectors,
            schur=state.schur,
            iterations=state.iterations,
            converged=state.converged,
            off_diagonal_max=residual,
            eps=eps,
        )

        info: dict[str, Any] = {
            'method': 'qr_iteration',
            'shift': shift,
            'converged': state.converged,
            'iterations': state.iterations,
            'max_iter': max_iter,
            'eps': eps,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
