"""
Householder reduction of a symmetric matrix to tridiagonal form.

Derived from the Algol procedure tred2 (Bowdler, Martin, Reinsch and
Wilkinson, Handbook for Auto. Comp., Vol. II - Linear Algebra) and the
corresponding EISPACK Fortran subroutine.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import NDArray


def tridiagonalize(
    V: NDArray[np.floating[Any]],
    d: NDArray[np.floating[Any]],
    e: NDArray[np.floating[Any]],
) -> None:
    """
    Reduce a symmetric matrix to tridiagonal form in place.

    Parameters
    ----------
    V : ndarray, shape (n, n)
        On entry the symmetric matrix A (only the lower triangle is read).
        On exit the orthogonal transform Q with Q.T @ A @ Q tridiagonal.
    d : ndarray, shape (n,)
        On exit the diagonal of the tridiagonal matrix.
    e : ndarray, shape (n,)
        On exit the sub-diagonal in e[1:], with e[0] = 0.
    """
    n = V.shape[0]
    if n == 0:
        return

    d[:] = V[n - 1, :]

    for i in range(n - 1, 0, -1):
        # Scale to avoid under/overflow.
        scale = np.abs(d[:i]).sum()
        h = 0.0

        if scale == 0.0:
            e[i] = d[i - 1]
            d[:i] = V[i - 1, :i]
            V[i, :i] = 0.0
            V[:i, i] = 0.0
        else:
            # Generate Householder vector.
            d[:i] /= scale
            h = float(d[:i] @ d[:i])
            f = d[i - 1]
            g = math.sqrt(h)
            if f > 0:
                g = -g
            e[i] = scale * g
            h -= f * g
            d[i - 1] = f - g

            # Apply similarity transformation to remaining columns:
            # e <- A[:i, :i] @ d using the stored lower triangle.
            V[:i, i] = d[:i]
            lower = np.tril(V[:i, :i])
            e[:i] = lower.T @ d[:i] + np.tril(lower, -1) @ d[:i]

            e[:i] /= h
            hh = float(e[:i] @ d[:i]) / (h + h)
            e[:i] -= hh * d[:i]

            V[:i, :i] -= np.tril(np.outer(e[:i], d[:i]) + np.outer(d[:i], e[:i]))
            d[:i] = V[i - 1, :i]
            V[i, :i] = 0.0

        d[i] = h

    # Accumulate transformations.
    for i in range(n - 1):
        V[n - 1, i] = V[i, i]
        V[i, i] = 1.0
        h = d[i + 1]
        if h != 0.0:
            u = V[:i + 1, i + 1]
            d[:i + 1] = u / h
            g = u @ V[:i + 1, :i + 1]
            V[:i + 1, :i + 1] -= np.outer(d[:i + 1], g)
        V[:i + 1, i + 1] = 0.0

    d[:] = V[n - 1, :]
    V[n - 1, :] = 0.0
    V[n - 1, n - 1] = 1.0
    e[0] = 0.0
