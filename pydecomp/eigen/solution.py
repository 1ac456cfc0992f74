"""
Eigendecomposition solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any

from pydecomp.core.exceptions import ConvergenceError
from pydecomp.core.protocols import Matrix, Vector
from pydecomp.core.result import Result
from pydecomp.eigen.design import EigenDesign


@dataclass(frozen=True)
class EigenParams:
    """
    Parameter payload for eigendecomposition.

    This is the immutable data computed by backends.

    Attributes:
        eigenvalues: Diagonal of the final iterate
        eigenvectors: Accumulated orthogonal factor; column k pairs with
            eigenvalues[k]
        schur: Final iterate (quasi-diagonal when converged)
        iterations: QR steps taken
        converged: Whether all off-diagonal entries fell below eps
        off_diagonal_max: Largest remaining off-diagonal magnitude
        eps: Threshold the run was held to
    """
    eigenvalues: Vector
    eigenvectors: Matrix
    schur: Matrix
    iterations: int
    converged: bool
    off_diagonal_max: float
    eps: float


@dataclass
class EigenSolution:
    """
    User-facing eigendecomposition results.

    Non-convergence is reported, not raised: check `converged`, or call
    check_converged() to turn it into a ConvergenceError.
    """
    _result: Result[EigenParams]
    _design: EigenDesign

    @property
    def eigenvalues(self) -> Vector:
        return self._result.params.eigenvalues

    @property
    def eigenvectors(self) -> Matrix:
        return self._result.params.eigenvectors

    @property
    def schur(self) -> Matrix:
        return self._result.params.schur

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def off_diagonal_max(self) -> float:
        return self._result.params.off_diagonal_max

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def check_converged(self) -> 'EigenSolution':
        """
        Raise ConvergenceError unless the iteration converged.

        Returns:
            self, so calls can be chained: eig(M).check_converged().eigenvalues
        """
        if not self.converged:
            params = self._result.params
            raise ConvergenceError(
                f"QR iteration did not converge after {params.iterations} iterations "
                f"(largest off-diagonal: {params.off_diagonal_max:.2e}, "
                f"eps: {float(params.eps):.2e})",
                iterations=params.iterations,
                final_change=params.off_diagonal_max,
                reason='max_iterations',
                threshold=params.eps,
            )
        return self

    def summary(self) -> str:
        """Generate a plain-text summary."""
        lines = [
            "Eigendecomposition Results",
            "=" * 60,
            f"Dimension: {self._design.n}",
            f"Shift: {self.info.get('shift')}",
            f"Iterations: {self.iterations}",
            f"Converged: {self.converged}",
            f"Largest off-diagonal: {self.off_diagonal_max:.3e}",
            "",
            "Eigenvalues:",
            "-" * 60,
        ]
        for i in range(self.eigenvalues.shape):
            lines.append(f"  λ[{i}]: {float(self.eigenvalues.unchecked_at(i)):14.6f}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EigenSolution(n={self._design.n}, iterations={self.iterations}, "
            f"converged={self.converged})"
        )
