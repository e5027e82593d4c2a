"""
Eigen-decomposition module.

Dense real eigen-decomposition with two algorithm families selected by
matrix symmetry: Householder tridiagonalization + implicit QL for
symmetric matrices, Hessenberg reduction + Francis double-shift QR for
general ones.

Public API:
    eig(A)      - eigenvalues, eigenvectors and convergence status
    eigvals(A)  - eigenvalues only
"""

from pyeigen.eigen.design import EigenDesign
from pyeigen.eigen.solution import EigenParams, EigenSolution
from pyeigen.eigen.solvers import eig, eigvals

__all__ = [
    "eig",
    "eigvals",
    "EigenDesign",
    "EigenParams",
    "EigenSolution",
]
