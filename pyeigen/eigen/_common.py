"""
Common types for the eigen-decomposition module.

Defines the algorithm path and convergence status literals, plus the
packing helper that converts complex LAPACK-style output into the
(d, e, V) conjugate-pair convention used throughout the module.
"""

from __future__ import annotations

from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray

from pyeigen.core.exceptions import NumericalError


EigenPath = Literal['symmetric', 'general']
EigenStatus = Literal['converged', 'max_iterations_exceeded']

PATH_SYMMETRIC: EigenPath = 'symmetric'
PATH_GENERAL: EigenPath = 'general'

STATUS_CONVERGED: EigenStatus = 'converged'
STATUS_MAX_ITERATIONS: EigenStatus = 'max_iterations_exceeded'


def pack_conjugate_pairs(
    values: NDArray[np.complexfloating[Any, Any]],
    vectors: NDArray[np.complexfloating[Any, Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Convert complex eigenvalues/eigenvectors into the packed real layout.

    Real eigenvalues keep their real eigenvector. Each complex-conjugate
    pair is stored at adjacent indices (i, i+1) with the positive
    imaginary part first: d[i] = d[i+1] = a, e[i] = b > 0, e[i+1] = -b,
    and columns i, i+1 of V hold the real and imaginary parts of the
    eigenvector belonging to a + bi.

    Parameters
    ----------
    values : ndarray, shape (n,)
        Complex eigenvalues of a real matrix, in any order.
    vectors : ndarray, shape (n, n)
        Matching complex eigenvectors as columns.

    Returns
    -------
    d, e, V
    """
    n = values.shape[0]
    d = np.zeros(n)
    e = np.zeros(n)
    V = np.zeros((n, n))
    used = np.zeros(n, dtype=bool)

    pos = 0
    for i in range(n):
        if used[i]:
            continue
        used[i] = True
        lam = values[i]
        if lam.imag == 0.0:
            d[pos] = lam.real
            V[:, pos] = vectors[:, i].real
            pos += 1
            continue

        # Partner: the unused eigenvalue closest to conj(lam).
        candidates = np.flatnonzero(~used)
        j = candidates[np.argmin(np.abs(values[candidates] - np.conj(lam)))]
        used[j] = True
        upper = i if lam.imag > 0.0 else j
        vec = vectors[:, upper]
        d[pos] = d[pos + 1] = values[upper].real
        e[pos] = abs(values[upper].imag)
        e[pos + 1] = -e[pos]
        V[:, pos] = vec.real
        V[:, pos + 1] = vec.imag
        pos += 2

    return d, e, V


def check_finite_output(
    path: EigenPath,
    *arrays: NDArray[np.floating[Any]],
) -> None:
    """Raise NumericalError if any output buffer holds inf or NaN."""
    for arr in arrays:
        if not np.all(np.isfinite(arr)):
            raise NumericalError(
                f"{path} eigen-decomposition overflowed to non-finite values; "
                f"rescale the matrix and retry"
            )
