"""
Symmetric tridiagonal QL algorithm with implicit shifts.

Derived from the Algol procedure tql2 (Bowdler, Martin, Reinsch and
Wilkinson, Handbook for Auto. Comp., Vol. II - Linear Algebra) and the
corresponding EISPACK Fortran subroutine. Unlike the original, the sweep
count is bounded and exhaustion is reported as a status.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyeigen.core.compute.tolerances import (
    SYMMETRIC_DEFLATION_EPS,
    DEFAULT_MAX_ITER,
)
from pyeigen.eigen._common import (
    EigenStatus,
    STATUS_CONVERGED,
    STATUS_MAX_ITERATIONS,
)


def tql(
    d: NDArray[np.floating[Any]],
    e: NDArray[np.floating[Any]],
    V: NDArray[np.floating[Any]],
    max_iter: int = DEFAULT_MAX_ITER,
) -> tuple[EigenStatus, int]:
    """
    Diagonalize the tridiagonal matrix produced by tridiagonalize().

    On exit d holds the eigenvalues in ascending order, e is zero and the
    columns of V are the matching orthonormal eigenvectors.

    Parameters
    ----------
    d, e : ndarray, shape (n,)
        Diagonal and sub-diagonal (e[1:]) from tridiagonalize().
    V : ndarray, shape (n, n)
        Orthogonal transform from tridiagonalize(); rotations are
        accumulated into it.
    max_iter : int
        Sweep budget per eigenvalue. The whole call may perform at most
        max_iter * n sweeps.

    Returns
    -------
    status : 'converged' or 'max_iterations_exceeded'
    sweeps : total number of QL sweeps performed
    """
    n = d.shape[0]
    if n == 0:
        return STATUS_CONVERGED, 0

    e[:-1] = e[1:]
    e[n - 1] = 0.0

    eps = SYMMETRIC_DEFLATION_EPS
    budget = max_iter * n
    sweeps = 0
    status = STATUS_CONVERGED
    f = 0.0
    tst1 = 0.0

    for l in range(n):
        # Find small subdiagonal element.
        tst1 = max(tst1, abs(d[l]) + abs(e[l]))
        m = l
        while m < n - 1 and abs(e[m]) > eps * tst1:
            m += 1

        # If m == l, d[l] is already an eigenvalue.
        while m > l and abs(e[l]) > eps * tst1:
            if sweeps >= budget:
                status = STATUS_MAX_ITERATIONS
                break
            sweeps += 1

            # Compute implicit shift.
            g = d[l]
            p = (d[l + 1] - g) / (2.0 * e[l])
            r = math.hypot(p, 1.0)
            if p < 0:
                r = -r
            d[l] = e[l] / (p + r)
            d[l + 1] = e[l] * (p + r)
            dl1 = d[l + 1]
            h = g - d[l]
            d[l + 2:] -= h
            f += h

            # Implicit QL transformation.
            p = d[m]
            c = c2 = c3 = 1.0
            el1 = e[l + 1]
            s = s2 = 0.0
            for i in range(m - 1, l - 1, -1):
                c3 = c2
                c2 = c
                s2 = s
                g = c * e[i]
                h = c * p
                r = math.hypot(p, e[i])
                e[i + 1] = s * r
                s = e[i] / r
                c = p / r
                p = c * d[i] - s * g
                d[i + 1] = h + s * (c * g + s * d[i])

                # Accumulate transformation.
                col = V[:, i + 1].copy()
                V[:, i + 1] = s * V[:, i] + c * col
                V[:, i] = c * V[:, i] - s * col

            p = -s * s2 * c3 * el1 * e[l] / dl1
            e[l] = s * p
            d[l] = c * p

        d[l] += f
        e[l] = 0.0

    # Sort eigenvalues and corresponding vectors.
    order = np.argsort(d, kind='stable')
    d[:] = d[order]
    V[:] = V[:, order]

    return status, sweeps
