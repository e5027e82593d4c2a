"""
Orthogonal reduction of a general matrix to upper Hessenberg form.

Derived from the Algol procedures orthes and ortran (Martin and
Wilkinson, Handbook for Auto. Comp., Vol. II - Linear Algebra) and the
corresponding EISPACK Fortran subroutines.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import NDArray


def hessenberg(
    H: NDArray[np.floating[Any]],
    V: NDArray[np.floating[Any]],
) -> tuple[int, int]:
    """
    Reduce H to upper Hessenberg form in place and build the transform.

    Parameters
    ----------
    H : ndarray, shape (n, n)
        On entry the general matrix A, on exit Q.T @ A @ Q with zeros
        below the first sub-diagonal.
    V : ndarray, shape (n, n)
        Overwritten with the orthogonal transform Q.

    Returns
    -------
    low, high : int
        Active index range of the reduction. No balancing is performed,
        so this is always (0, n - 1).
    """
    n = H.shape[0]
    low = 0
    high = n - 1
    ort = np.zeros(n)

    for m in range(low + 1, high):
        # Scale column.
        scale = np.abs(H[m:high + 1, m - 1]).sum()
        if scale == 0.0:
            continue

        # Compute Householder transformation.
        ort[m:high + 1] = H[m:high + 1, m - 1] / scale
        u = ort[m:high + 1]
        h = float(u @ u)
        g = math.sqrt(h)
        if ort[m] > 0:
            g = -g
        h -= ort[m] * g
        ort[m] -= g

        # H = (I - u u'/h) H (I - u u'/h)
        f = (u @ H[m:high + 1, m:]) / h
        H[m:high + 1, m:] -= np.outer(u, f)
        f = (H[:high + 1, m:high + 1] @ u) / h
        H[:high + 1, m:high + 1] -= np.outer(f, u)

        ort[m] *= scale
        H[m, m - 1] = scale * g

    # Accumulate transformations (ortran).
    V[:] = np.eye(n)
    for m in range(high - 1, low, -1):
        if H[m, m - 1] == 0.0:
            continue
        ort[m + 1:high + 1] = H[m + 1:high + 1, m - 1]
        u = ort[m:high + 1]
        # Double division avoids possible underflow.
        g = ((u @ V[m:high + 1, m:high + 1]) / ort[m]) / H[m, m - 1]
        V[m:high + 1, m:high + 1] += np.outer(u, g)

    # The entries below the sub-diagonal held the Householder vectors.
    H[np.tril_indices(n, -2)] = 0.0

    return low, high
