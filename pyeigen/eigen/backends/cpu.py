"""
CPU reference backend for eigen-decomposition.

Runs the EISPACK-derived algorithms in float64:
    symmetric: tred2 -> tql2 (eigenvalues ascending, orthonormal vectors)
    general:   orthes -> hqr2 -> back-substitution

Validated against LAPACK (scipy.linalg) to rtol=1e-10 on well-conditioned
matrices.
"""

from __future__ import annotations

import numpy as np

from pyeigen.core.result import Result
from pyeigen.core.compute.timing import Timer
from pyeigen.core.compute.tolerances import DEFAULT_MAX_ITER
from pyeigen.eigen._common import (
    PATH_SYMMETRIC,
    STATUS_CONVERGED,
    check_finite_output,
)
from pyeigen.eigen._classify import classify
from pyeigen.eigen._tridiagonal import tridiagonalize
from pyeigen.eigen._tql import tql
from pyeigen.eigen._hessenberg import hessenberg
from pyeigen.eigen._schur import schur
from pyeigen.eigen._backsub import back_substitute
from pyeigen.eigen.design import EigenDesign
from pyeigen.eigen.solution import EigenParams


class CPUEigenBackend:
    """CPU reference backend for eigen-decomposition."""

    @property
    def name(self) -> str:
        return 'cpu_eigen'

    def solve(
        self,
        design: EigenDesign,
        *,
        symmetry_tol: float = 0.0,
        max_iter: int = DEFAULT_MAX_ITER,
    ) -> Result[EigenParams]:
        """
        Decompose the design matrix.

        Parameters
        ----------
        design : EigenDesign
        symmetry_tol : float
            0.0 for the exact symmetry test; a positive value accepts
            near-symmetric matrices, which are then symmetrized.
        max_iter : int
            Sweep budget per eigenvalue.
        """
        timer = Timer()
        timer.start()

        n = design.n
        warnings_list: list[str] = []

        with timer.section('classify'):
            path = classify(design.matrix, symmetry_tol)

        A = design.working_copy()
        d = np.zeros(n)
        e = np.zeros(n)

        if path == PATH_SYMMETRIC:
            if symmetry_tol > 0.0:
                A = (A + A.T) / 2.0
            V = A
            with timer.section('tridiagonalize'):
                tridiagonalize(V, d, e)
            with timer.section('tql'):
                status, sweeps = tql(d, e, V, max_iter)
            method = 'tred2+tql2'
        else:
            H = A
            V = np.empty((n, n))
            with timer.section('hessenberg'):
                low, high = hessenberg(H, V)
            with timer.section('schur'):
                status, sweeps, norm = schur(H, V, d, e, low, high, max_iter)
            with timer.section('back_substitution'):
                back_substitute(H, V, d, e, low, high, norm)
            method = 'orthes+hqr2'

        check_finite_output(path, d, e, V)

        if status != STATUS_CONVERGED:
            msg = (
                f"{path} eigen-decomposition did not converge within "
                f"{max_iter * n} sweeps; results are partial"
            )
            warnings_list.append(msg)

        timer.stop()

        for buf in (d, e, V):
            buf.flags.writeable = False

        params = EigenParams(
            real=d,
            imag=e,
            vectors=V,
            path=path,
            status=status,
            iterations=sweeps,
        )

        return Result(
            params=params,
            info={
                'method': method,
                'path': path,
                'n': n,
                'converged': status == STATUS_CONVERGED,
                'iterations': sweeps,
                'max_sweeps': max_iter * n,
                'symmetry_tol': symmetry_tol,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
