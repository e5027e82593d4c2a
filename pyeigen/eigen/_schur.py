"""
Francis double-shift QR iteration to real Schur form.

Derived from the Algol procedure hqr2 (Martin, Peters and Wilkinson,
Handbook for Auto. Comp., Vol. II - Linear Algebra) and the corresponding
EISPACK Fortran subroutine. This module performs the reduction; the
eigenvector back-substitution that completes hqr2 lives in _backsub.

The iteration count is bounded: after max_iter * n double-shift steps
the reduction stops and reports 'max_iterations_exceeded'.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyeigen.core.compute.tolerances import (
    SCHUR_EPS,
    DEFAULT_MAX_ITER,
    EXCEPTIONAL_SHIFT_ITERATIONS,
)
from pyeigen.eigen._common import (
    EigenStatus,
    STATUS_CONVERGED,
    STATUS_MAX_ITERATIONS,
)


def hessenberg_norm(H: NDArray[np.floating[Any]]) -> float:
    """Sum of absolute values on and above the first sub-diagonal."""
    return float(np.abs(np.triu(H, -1)).sum())


def schur(
    H: NDArray[np.floating[Any]],
    V: NDArray[np.floating[Any]],
    d: NDArray[np.floating[Any]],
    e: NDArray[np.floating[Any]],
    low: int,
    high: int,
    max_iter: int = DEFAULT_MAX_ITER,
) -> tuple[EigenStatus, int, float]:
    """
    Reduce an upper Hessenberg matrix to real Schur form in place.

    Parameters
    ----------
    H : ndarray, shape (n, n)
        Upper Hessenberg matrix from hessenberg(). On exit it is
        quasi-upper-triangular with 1x1 and 2x2 diagonal blocks.
    V : ndarray, shape (n, n)
        Transform from hessenberg(); rotations are accumulated into
        rows low..high.
    d, e : ndarray, shape (n,)
        Receive real and imaginary parts of the eigenvalues. A conjugate
        pair occupies (i, i+1) with e[i] > 0 and e[i+1] = -e[i].
    low, high : int
        Active index range returned by hessenberg().
    max_iter : int
        Iteration budget per eigenvalue; the total is max_iter * n.

    Returns
    -------
    status : 'converged' or 'max_iterations_exceeded'
    iterations : total number of double-shift QR steps
    norm : Hessenberg norm of the input, needed by back_substitute()
    """
    nn = H.shape[0]
    n = nn - 1
    eps = SCHUR_EPS
    first_shift, second_shift = EXCEPTIONAL_SHIFT_ITERATIONS
    exshift = 0.0
    p = q = r = s = z = 0.0

    # Store roots isolated by balancing and compute matrix norm.
    for i in range(nn):
        if i < low or i > high:
            d[i] = H[i, i]
            e[i] = 0.0
    norm = hessenberg_norm(H)

    budget = max_iter * nn
    total = 0
    status = STATUS_CONVERGED

    # Outer loop over eigenvalue index.
    it = 0
    while n >= low:
        # Look for single small sub-diagonal element.
        l = n
        while l > low:
            s = abs(H[l - 1, l - 1]) + abs(H[l, l])
            if s == 0.0:
                s = norm
            if abs(H[l, l - 1]) < eps * s:
                break
            l -= 1

        if l == n:
            # One root found.
            H[n, n] += exshift
            d[n] = H[n, n]
            e[n] = 0.0
            n -= 1
            it = 0

        elif l == n - 1:
            # Two roots found.
            w = H[n, n - 1] * H[n - 1, n]
            p = (H[n - 1, n - 1] - H[n, n]) / 2.0
            q = p * p + w
            z = math.sqrt(abs(q))
            H[n, n] += exshift
            H[n - 1, n - 1] += exshift
            x = H[n, n]

            if q >= 0:
                # Real pair.
                z = p + z if p >= 0 else p - z
                d[n - 1] = x + z
                d[n] = d[n - 1]
                if z != 0.0:
                    d[n] = x - w / z
                e[n - 1] = 0.0
                e[n] = 0.0
                x = H[n, n - 1]
                s = abs(x) + abs(z)
                p = x / s
                q = z / s
                r = math.hypot(p, q)
                p /= r
                q /= r

                # Row modification.
                row = H[n - 1, n - 1:].copy()
                H[n - 1, n - 1:] = q * row + p * H[n, n - 1:]
                H[n, n - 1:] = q * H[n, n - 1:] - p * row

                # Column modification.
                col = H[:n + 1, n - 1].copy()
                H[:n + 1, n - 1] = q * col + p * H[:n + 1, n]
                H[:n + 1, n] = q * H[:n + 1, n] - p * col

                # Accumulate transformations.
                col = V[low:high + 1, n - 1].copy()
                V[low:high + 1, n - 1] = q * col + p * V[low:high + 1, n]
                V[low:high + 1, n] = q * V[low:high + 1, n] - p * col
            else:
                # Complex pair.
                d[n - 1] = x + p
                d[n] = x + p
                e[n - 1] = z
                e[n] = -z

            n -= 2
            it = 0

        else:
            # No convergence yet.
            if total >= budget:
                status = STATUS_MAX_ITERATIONS
                break

            # Form shift.
            x = H[n, n]
            y = 0.0
            w = 0.0
            if l < n:
                y = H[n - 1, n - 1]
                w = H[n, n - 1] * H[n - 1, n]

            # Wilkinson's original ad hoc shift.
            if it == first_shift:
                exshift += x
                for i in range(low, n + 1):
                    H[i, i] -= x
                s = abs(H[n, n - 1]) + abs(H[n - 1, n - 2])
                x = y = 0.75 * s
                w = -0.4375 * s * s

            # MATLAB's new ad hoc shift.
            if it == second_shift:
                s = (y - x) / 2.0
                s = s * s + w
                if s > 0:
                    s = math.sqrt(s)
                    if y < x:
                        s = -s
                    s = x - w / ((y - x) / 2.0 + s)
                    for i in range(low, n + 1):
                        H[i, i] -= s
                    exshift += s
                    x = y = w = 0.964

            it += 1
            total += 1

            # Look for two consecutive small sub-diagonal elements.
            m = n - 2
            while m >= l:
                z = H[m, m]
                r = x - z
                s = y - z
                p = (r * s - w) / H[m + 1, m] + H[m, m + 1]
                q = H[m + 1, m + 1] - z - r - s
                r = H[m + 2, m + 1]
                s = abs(p) + abs(q) + abs(r)
                p /= s
                q /= s
                r /= s
                if m == l:
                    break
                if (abs(H[m, m - 1]) * (abs(q) + abs(r)) <
                        eps * (abs(p) * (abs(H[m - 1, m - 1]) + abs(z) + abs(H[m + 1, m + 1])))):
                    break
                m -= 1

            for i in range(m + 2, n + 1):
                H[i, i - 2] = 0.0
                if i > m + 2:
                    H[i, i - 3] = 0.0

            # Double QR step involving rows l:n and columns m:n.
            for k in range(m, n):
                notlast = k != n - 1
                if k != m:
                    p = H[k, k - 1]
                    q = H[k + 1, k - 1]
                    r = H[k + 2, k - 1] if notlast else 0.0
                    x = abs(p) + abs(q) + abs(r)
                    if x == 0.0:
                        continue
                    p /= x
                    q /= x
                    r /= x

                s = math.sqrt(p * p + q * q + r * r)
                if p < 0:
                    s = -s
                if s == 0:
                    continue

                if k != m:
                    H[k, k - 1] = -s * x
                elif l != m:
                    H[k, k - 1] = -H[k, k - 1]
                p += s
                x = p / s
                y = q / s
                z = r / s
                q /= p
                r /= p

                # Row modification.
                t = H[k, k:] + q * H[k + 1, k:]
                if notlast:
                    t += r * H[k + 2, k:]
                    H[k + 2, k:] -= t * z
                H[k, k:] -= t * x
                H[k + 1, k:] -= t * y

                # Column modification.
                top = min(n, k + 3) + 1
                t = x * H[:top, k] + y * H[:top, k + 1]
                if notlast:
                    t += z * H[:top, k + 2]
                    H[:top, k + 2] -= t * r
                H[:top, k] -= t
                H[:top, k + 1] -= t * q

                # Accumulate transformations.
                t = x * V[low:high + 1, k] + y * V[low:high + 1, k + 1]
                if notlast:
                    t += z * V[low:high + 1, k + 2]
                    V[low:high + 1, k + 2] -= t * r
                V[low:high + 1, k] -= t
                V[low:high + 1, k + 1] -= t * q

    if status == STATUS_MAX_ITERATIONS:
        # Unreduced rows keep their diagonal as a real approximation.
        for i in range(low, n + 1):
            H[i, i] += exshift
            d[i] = H[i, i]
            e[i] = 0.0

    return status, total, norm
