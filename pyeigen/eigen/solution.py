"""
Eigen-decomposition solution types.

Contains the parameter payload and the user-facing solution wrapper.
The accessors do not care which algorithm path produced the payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pyeigen.core.exceptions import ConvergenceError
from pyeigen.core.result import Result
from pyeigen.eigen._common import (
    EigenPath,
    EigenStatus,
    PATH_SYMMETRIC,
    STATUS_CONVERGED,
)

if TYPE_CHECKING:
    from pyeigen.eigen.design import EigenDesign


@dataclass(frozen=True)
class EigenParams:
    """
    Parameter payload for an eigen-decomposition.

    Attributes
    ----------
    real : ndarray, shape (n,)
        Real parts of the eigenvalues (d).
    imag : ndarray, shape (n,)
        Imaginary parts (e). Zero for real eigenvalues; a conjugate pair
        occupies adjacent indices with the positive part first.
    vectors : ndarray, shape (n, n)
        Eigenvector matrix V, column i aligned with eigenvalue i. For a
        conjugate pair (i, i+1) the columns hold real and imaginary parts
        of the eigenvector of real[i] + 1j * imag[i].
    path : str
        'symmetric' or 'general'.
    status : str
        'converged' or 'max_iterations_exceeded'.
    iterations : int
        Total QL/QR sweeps performed.
    """
    real: NDArray[np.floating[Any]]
    imag: NDArray[np.floating[Any]]
    vectors: NDArray[np.floating[Any]]
    path: EigenPath
    status: EigenStatus
    iterations: int


@dataclass
class EigenSolution:
    """
    User-facing eigen-decomposition results.

    Wraps Result[EigenParams] and provides convenient accessors. Every
    array accessor returns a fresh copy.
    """
    _result: Result[EigenParams]
    _design: 'EigenDesign'

    # --- Eigenvalues ---

    @property
    def eigenvalues(self) -> NDArray[np.complexfloating[Any, Any]]:
        """All n eigenvalues as complex numbers, d + 1j * e."""
        p = self._result.params
        return p.real + 1j * p.imag

    @property
    def real_eigenvalues(self) -> NDArray[np.floating[Any]]:
        """Eigenvalues with zero imaginary part, in solver order."""
        p = self._result.params
        return p.real[self._real_mask()].copy()

    # --- Eigenvectors ---

    @property
    def eigenvectors(self) -> NDArray[np.floating[Any]]:
        """Eigenvector matrix (n, n), columns aligned with eigenvalues."""
        return self._result.params.vectors.copy()

    @property
    def eigenvector_list(self) -> list[NDArray[np.floating[Any]]]:
        """Columns of the eigenvector matrix as separate vectors."""
        V = self._result.params.vectors
        return [V[:, i].copy() for i in range(V.shape[1])]

    @property
    def real_eigenvectors(self) -> list[NDArray[np.floating[Any]]]:
        """Eigenvectors aligned with real_eigenvalues."""
        V = self._result.params.vectors
        return [V[:, i].copy() for i in np.flatnonzero(self._real_mask())]

    @property
    def real_eigen_pairs(self) -> list[tuple[float, NDArray[np.floating[Any]]]]:
        """(eigenvalue, eigenvector) tuples for the real eigenvalues."""
        return list(zip(
            (float(v) for v in self.real_eigenvalues),
            self.real_eigenvectors,
        ))

    @property
    def complex_eigenvectors(self) -> NDArray[np.complexfloating[Any, Any]]:
        """
        Eigenvectors as a complex (n, n) matrix aligned with eigenvalues.

        Each packed conjugate pair (re, im) is unfolded into re + 1j*im and
        re - 1j*im.
        """
        p = self._result.params
        V = p.vectors.astype(np.complex128)
        n = V.shape[0]
        i = 0
        while i < n:
            if p.imag[i] > 0.0 and i + 1 < n:
                re = p.vectors[:, i]
                im = p.vectors[:, i + 1]
                V[:, i] = re + 1j * im
                V[:, i + 1] = re - 1j * im
                i += 2
            else:
                i += 1
        return V

    @property
    def diagonal_matrix(self) -> NDArray[np.floating[Any]]:
        """
        Block-diagonal eigenvalue matrix D with A @ V = V @ D.

        Real eigenvalues give 1x1 blocks; a conjugate pair a +- bi gives
        the 2x2 block [[a, b], [-b, a]].
        """
        p = self._result.params
        n = p.real.shape[0]
        D = np.diag(p.real)
        for i in range(n):
            if p.imag[i] > 0:
                D[i, i + 1] = p.imag[i]
            elif p.imag[i] < 0:
                D[i, i - 1] = p.imag[i]
        return D

    # --- Convergence ---

    @property
    def status(self) -> EigenStatus:
        return self._result.params.status

    @property
    def converged(self) -> bool:
        return self._result.params.status == STATUS_CONVERGED

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    def raise_if_not_converged(self) -> None:
        """Raise ConvergenceError when the sweep budget was exhausted."""
        if not self.converged:
            raise ConvergenceError(
                f"{self.path} eigen-decomposition did not converge "
                f"after {self.iterations} sweeps",
                iterations=self.iterations,
                reason='max_iterations',
                threshold=self._result.info.get('max_sweeps'),
                path=self.path,
            )

    # --- Metadata ---

    @property
    def path(self) -> EigenPath:
        return self._result.params.path

    @property
    def is_symmetric(self) -> bool:
        return self._result.params.path == PATH_SYMMETRIC

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def labels(self) -> tuple[str, ...] | None:
        """Variable names for the eigenvector rows, or None."""
        return self._design.labels

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

    # --- Diagnostics ---

    def residual(self) -> float:
        """max |A v - lambda v| over all eigenpairs (0.0 for n == 0)."""
        if self.n == 0:
            return 0.0
        A = self._design.matrix
        W = self.complex_eigenvectors
        R = A @ W - W * self.eigenvalues[np.newaxis, :]
        return float(np.max(np.abs(R)))

    def _real_mask(self) -> NDArray[np.bool_]:
        return self._result.params.imag == 0.0

    def summary(self) -> str:
        """Human-readable eigenvalue table."""
        lines = [
            f"Eigen-decomposition ({self.path} path, n={self.n})",
            f"Status: {self.status} after {self.iterations} sweeps",
            f"Backend: {self.backend_name}",
        ]
        if self.labels is not None:
            lines.append(f"Variables: {', '.join(self.labels)}")
        for i, lam in enumerate(self.eigenvalues):
            if lam.imag == 0.0:
                value = f"{lam.real: .6g}"
            else:
                sign = '+' if lam.imag > 0 else '-'
                value = f"{lam.real: .6g} {sign} {abs(lam.imag):.6g}i"
            lines.append(f"  lambda[{i}] = {value}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        n_real = int(np.sum(self._real_mask()))
        return (
            f"EigenSolution(n={self.n}, path={self.path!r}, "
            f"real={n_real}, complex={self.n - n_real}, status={self.status!r})"
        )
