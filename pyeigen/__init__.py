"""
PyEigen: dense real eigen-decomposition for Python.

Classical EISPACK-derived algorithms (tred2/tql2 for symmetric matrices,
orthes/hqr2 for general ones) with bounded iteration and an explicit
convergence status, plus an optional PyTorch GPU backend.

Submodules:
    eigen: eig(), eigvals() and the solution types
    core: exceptions, result envelope, validation, compute utilities
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pyeigen import eigen
from pyeigen.eigen import eig, eigvals, EigenDesign, EigenSolution

__all__ = [
    "__version__",
    "eigen",
    "eig",
    "eigvals",
    "EigenDesign",
    "EigenSolution",
]
