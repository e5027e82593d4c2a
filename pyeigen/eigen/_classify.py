"""
Symmetry classification: decides which algorithm path a matrix takes.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyeigen.eigen._common import EigenPath, PATH_SYMMETRIC, PATH_GENERAL


def is_symmetric(matrix: NDArray[np.floating[Any]], tol: float = 0.0) -> bool:
    """
    Entrywise symmetry check.

    With tol == 0 (the default) the test is exact: A[i, j] == A[j, i] for
    every pair. A positive tol accepts |A[i, j] - A[j, i]| <= tol.
    Non-square matrices are never symmetric.
    """
    rows, cols = matrix.shape
    if rows != cols:
        return False
    if tol == 0.0:
        return bool(np.array_equal(matrix, matrix.T))
    return bool(np.all(np.abs(matrix - matrix.T) <= tol))


def classify(matrix: NDArray[np.floating[Any]], tol: float = 0.0) -> EigenPath:
    """Return 'symmetric' for tred2/tql2, 'general' for orthes/hqr2."""
    return PATH_SYMMETRIC if is_symmetric(matrix, tol) else PATH_GENERAL
