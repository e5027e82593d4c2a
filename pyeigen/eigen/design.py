"""
EigenDesign: validated input wrapper for eigen-decomposition.

Wraps a square real matrix and owns a private, read-only copy of it.
Follows the Design pattern: validate once at construction, expose
metadata through properties, never mutate afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyeigen.core.validation import (
    check_array,
    check_2d,
    check_square,
    check_finite,
)
from pyeigen.eigen._classify import is_symmetric


@dataclass(frozen=True)
class EigenDesign:
    """
    Design for eigen-decomposition.

    Holds a square n x n float64 matrix. The caller's array is copied, and
    the copy is marked read-only so no solver can alter it.

    Construction:
        EigenDesign.from_array(A)
    """
    _matrix: NDArray[np.floating[Any]]
    _n: int
    _labels: tuple[str, ...] | None

    @classmethod
    def from_array(cls, matrix) -> EigenDesign:
        """
        Build EigenDesign from a square array-like.

        Parameters
        ----------
        matrix : array-like
            Square real matrix. Numpy arrays, nested lists and pandas
            DataFrames (via .values; column names are kept as labels)
            are accepted.

        Raises
        ------
        ValidationError
            None, non-numeric, complex or non-finite input.
        DimensionError
            Input is not 2-D or not square.
        """
        labels = None
        if hasattr(matrix, 'values') and hasattr(matrix, 'columns'):
            labels = tuple(str(c) for c in matrix.columns)
            matrix = matrix.values

        array = check_array(matrix, 'matrix')
        check_2d(array, 'matrix')
        check_square(array, 'matrix')
        check_finite(array, 'matrix')

        data = np.array(array, dtype=np.float64, copy=True)
        data.flags.writeable = False
        return cls(_matrix=data, _n=data.shape[0], _labels=labels)

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """Read-only n x n matrix."""
        return self._matrix

    @property
    def n(self) -> int:
        """Matrix order."""
        return self._n

    @property
    def labels(self) -> tuple[str, ...] | None:
        """Column labels from a DataFrame input, or None."""
        return self._labels

    def is_symmetric(self, tol: float = 0.0) -> bool:
        """Entrywise symmetry; exact unless tol > 0."""
        return is_symmetric(self._matrix, tol)

    def working_copy(self) -> NDArray[np.floating[Any]]:
        """Fresh writable copy for a solver to reduce in place."""
        return np.array(self._matrix, dtype=np.float64, copy=True)

    def __repr__(self) -> str:
        sym = ", symmetric" if self.is_symmetric() else ""
        return f"EigenDesign(n={self._n}{sym})"
