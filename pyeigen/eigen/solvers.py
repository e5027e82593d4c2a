"""
Solver dispatch for eigen-decomposition.

Provides eig() as the full entry point and eigvals() for eigenvalues only.
"""

from __future__ import annotations

from typing import Any, Literal
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyeigen.core.compute.device import select_device
from pyeigen.core.compute.tolerances import DEFAULT_MAX_ITER
from pyeigen.core.exceptions import ValidationError
from pyeigen.core.protocols import Backend
from pyeigen.core.validation import check_positive_int, check_nonnegative
from pyeigen.eigen.design import EigenDesign
from pyeigen.eigen.solution import EigenParams, EigenSolution
from pyeigen.eigen.backends.cpu import CPUEigenBackend


BackendChoice = Literal['auto', 'cpu', 'gpu']


def _ensure_design(matrix: ArrayLike | EigenDesign) -> EigenDesign:
    """Convert raw array to EigenDesign if needed."""
    if isinstance(matrix, EigenDesign):
        return matrix
    return EigenDesign.from_array(matrix)


def _get_backend(backend: BackendChoice) -> Backend[EigenDesign, EigenParams]:
    """Select backend based on preference."""
    if backend == 'cpu':
        return CPUEigenBackend()

    if backend == 'auto':
        device = select_device('auto')
        if device.is_gpu:
            try:
                from pyeigen.eigen.backends.gpu import GPUEigenBackend
                return GPUEigenBackend(device=device)
            except ImportError:
                return CPUEigenBackend()
        return CPUEigenBackend()

    if backend == 'gpu':
        device = select_device('gpu')
        from pyeigen.eigen.backends.gpu import GPUEigenBackend
        return GPUEigenBackend(device=device)

    raise ValidationError(f"Unknown backend: {backend!r}")


def _decompose(
    matrix: ArrayLike | EigenDesign,
    symmetry_tol: float,
    max_iter: int,
    backend: BackendChoice,
) -> EigenSolution:
    """Shared body of eig() and eigvals(); must be called directly by them."""
    symmetry_tol = check_nonnegative(symmetry_tol, 'symmetry_tol')
    max_iter = check_positive_int(max_iter, 'max_iter')
    design = _ensure_design(matrix)
    be = _get_backend(backend)

    result = be.solve(design, symmetry_tol=symmetry_tol, max_iter=max_iter)

    # _decompose -> eig/eigvals -> caller
    for msg in result.warnings:
        warnings.warn(msg, RuntimeWarning, stacklevel=3)

    return EigenSolution(_result=result, _design=design)


def eig(
    matrix: ArrayLike | EigenDesign,
    *,
    symmetry_tol: float = 0.0,
    max_iter: int = DEFAULT_MAX_ITER,
    backend: BackendChoice = 'cpu',
) -> EigenSolution:
    """
    Eigen-decomposition of a square real matrix.

    Symmetric matrices go through Householder tridiagonalization and
    implicit QL iteration: eigenvalues are real, returned in ascending
    order, and the eigenvectors are orthonormal. Every other matrix goes
    through Hessenberg reduction and Francis double-shift QR: eigenvalues
    may come in complex-conjugate pairs and eigenvectors are not
    normalized.

    Parameters
    ----------
    matrix : array-like or EigenDesign
        Square real matrix. It is copied and never modified.
    symmetry_tol : float
        Absolute tolerance of the symmetry test. 0.0 (default) requires
        A[i, j] == A[j, i] exactly. With a positive tolerance a
        near-symmetric matrix is replaced by (A + A.T) / 2 and takes the
        symmetric path.
    max_iter : int
        Sweep budget per eigenvalue; a solve performs at most
        max_iter * n QL/QR sweeps. Exhausting it yields a solution with
        status 'max_iterations_exceeded' and a RuntimeWarning.
    backend : str
        'cpu' (reference algorithms, default), 'gpu' (PyTorch) or 'auto'.

    Returns
    -------
    EigenSolution

    Raises
    ------
    ValidationError
        Invalid matrix or keyword arguments.
    DimensionError
        Matrix is not 2-D or not square.
    NumericalError
        The decomposition overflowed to non-finite values.
    """
    return _decompose(matrix, symmetry_tol, max_iter, backend)


def eigvals(
    matrix: ArrayLike | EigenDesign,
    *,
    symmetry_tol: float = 0.0,
    max_iter: int = DEFAULT_MAX_ITER,
    backend: BackendChoice = 'cpu',
) -> NDArray[np.complexfloating[Any, Any]]:
    """
    Eigenvalues of a square real matrix as a complex array.

    Same parameters as eig().
    """
    return _decompose(matrix, symmetry_tol, max_iter, backend).eigenvalues
