"""
QR solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any

from pydecomp.core.protocols import Matrix
from pydecomp.core.result import Result
from pydecomp.qr.design import QRDesign


@dataclass(frozen=True)
class QRParams:
    """
    Parameter payload for QR decomposition.

    This is the immutable data computed by backends.
    """
    Q: Matrix
    R: Matrix
    reflections: int


@dataclass
class QRSolution:
    """
    User-facing QR results.

    Wraps the backend Result and provides accessors for the factors
    and diagnostics.
    """
    _result: Result[QRParams]
    _design: QRDesign

    @property
    def Q(self) -> Matrix:
        return self._result.params.Q

    @property
    def R(self) -> Matrix:
        return self._result.params.R

    @property
    def reflections(self) -> int:
        """Householder reflections applied (skipped columns excluded)."""
        return self._result.params.reflections

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

    def reconstruct(self) -> Matrix:
        """Q @ R, which should approximately equal the input matrix."""
        return self.Q @ self.R

    def summary(self) -> str:
        """Generate a plain-text summary."""
        rows, cols = self._design.rows, self._design.cols
        lines = [
            "QR Decomposition Results",
            "=" * 60,
            f"Shape: {rows} x {cols}",
            f"Reflections applied: {self.reflections} of {min(rows - 1, cols)}",
            "",
            "Diagonal of R:",
            "-" * 60,
        ]
        for i in range(min(rows, cols)):
            lines.append(f"  R[{i},{i}]: {float(self.R.unchecked_at(i, i)):14.6f}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"QRSolution(rows={self._design.rows}, cols={self._design.cols}, "
            f"reflections={self.reflections})"
        )
