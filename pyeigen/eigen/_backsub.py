"""
Eigenvectors of a real Schur form by back-substitution.

Second half of hqr2: solves the quasi-triangular systems for every
eigenvalue and maps the result back through the accumulated orthogonal
transform. Complex arithmetic uses Python's built-in complex type.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyeigen.core.compute.tolerances import SCHUR_EPS


def _rescale(H: NDArray[np.floating[Any]], rows: slice, cols: slice, t: float) -> None:
    # Overflow control.
    if (SCHUR_EPS * t) * t > 1:
        H[rows, cols] /= t


def back_substitute(
    H: NDArray[np.floating[Any]],
    V: NDArray[np.floating[Any]],
    d: NDArray[np.floating[Any]],
    e: NDArray[np.floating[Any]],
    low: int,
    high: int,
    norm: float,
) -> None:
    """
    Compute eigenvectors from the real Schur form in place.

    Parameters
    ----------
    H : ndarray, shape (n, n)
        Real Schur form from schur(). Its upper triangle is overwritten
        with the eigenvectors of the Schur form.
    V : ndarray, shape (n, n)
        Schur vectors; overwritten with the eigenvectors of the original
        matrix. Column i belongs to eigenvalue d[i] + 1j * e[i]; for a
        conjugate pair (i, i+1) the two columns hold the real and
        imaginary part of the eigenvector of d[i] + 1j * e[i].
    d, e : ndarray, shape (n,)
        Eigenvalues from schur().
    low, high : int
        Active index range from hessenberg().
    norm : float
        Hessenberg norm returned by schur(). A zero norm means the
        matrix is zero and V is left as is.
    """
    nn = H.shape[0]
    if norm == 0.0:
        return

    eps = SCHUR_EPS
    r = s = z = 0.0

    for n in range(nn - 1, -1, -1):
        p = d[n]
        q = e[n]

        if q == 0:
            # Real vector.
            l = n
            H[n, n] = 1.0
            for i in range(n - 1, -1, -1):
                w = H[i, i] - p
                r = H[i, l:n + 1] @ H[l:n + 1, n]
                if e[i] < 0.0:
                    z = w
                    s = r
                    continue

                l = i
                if e[i] == 0.0:
                    H[i, n] = -r / w if w != 0.0 else -r / (eps * norm)
                else:
                    # Solve real equations.
                    x = H[i, i + 1]
                    y = H[i + 1, i]
                    q = (d[i] - p) * (d[i] - p) + e[i] * e[i]
                    t = (x * s - z * r) / q
                    H[i, n] = t
                    if abs(x) > abs(z):
                        H[i + 1, n] = (-r - w * t) / x
                    else:
                        H[i + 1, n] = (-s - y * t) / z

                _rescale(H, slice(i, n + 1), n, abs(H[i, n]))

        elif q < 0:
            # Complex vector; last component imaginary so matrix is triangular.
            l = n - 1
            if abs(H[n, n - 1]) > abs(H[n - 1, n]):
                H[n - 1, n - 1] = q / H[n, n - 1]
                H[n - 1, n] = -(H[n, n] - p) / H[n, n - 1]
            else:
                c = complex(0.0, -H[n - 1, n]) / complex(H[n - 1, n - 1] - p, q)
                H[n - 1, n - 1] = c.real
                H[n - 1, n] = c.imag
            H[n, n - 1] = 0.0
            H[n, n] = 1.0

            for i in range(n - 2, -1, -1):
                ra = H[i, l:n + 1] @ H[l:n + 1, n - 1]
                sa = H[i, l:n + 1] @ H[l:n + 1, n]
                w = H[i, i] - p

                if e[i] < 0.0:
                    z = w
                    r = ra
                    s = sa
                    continue

                l = i
                if e[i] == 0.0:
                    c = complex(-ra, -sa) / complex(w, q)
                    H[i, n - 1] = c.real
                    H[i, n] = c.imag
                else:
                    # Solve complex equations.
                    x = H[i, i + 1]
                    y = H[i + 1, i]
                    vr = (d[i] - p) * (d[i] - p) + e[i] * e[i] - q * q
                    vi = (d[i] - p) * 2.0 * q
                    if vr == 0.0 and vi == 0.0:
                        vr = eps * norm * (abs(w) + abs(q) + abs(x) + abs(y) + abs(z))
                    c = complex(x * r - z * ra + q * sa, x * s - z * sa - q * ra) / complex(vr, vi)
                    H[i, n - 1] = c.real
                    H[i, n] = c.imag
                    if abs(x) > abs(z) + abs(q):
                        H[i + 1, n - 1] = (-ra - w * H[i, n - 1] + q * H[i, n]) / x
                        H[i + 1, n] = (-sa - w * H[i, n] - q * H[i, n - 1]) / x
                    else:
                        c = complex(-r - y * H[i, n - 1], -s - y * H[i, n]) / complex(z, q)
                        H[i + 1, n - 1] = c.real
                        H[i + 1, n] = c.imag

                t = max(abs(H[i, n - 1]), abs(H[i, n]))
                _rescale(H, slice(i, n + 1), slice(n - 1, n + 1), t)

    # Vectors of isolated roots.
    for i in range(nn):
        if i < low or i > high:
            V[i, i:] = H[i, i:]

    # Back transformation to get eigenvectors of the original matrix.
    for j in range(nn - 1, low - 1, -1):
        top = min(j, high) + 1
        V[low:high + 1, j] = V[low:high + 1, low:top] @ H[low:top, j]
