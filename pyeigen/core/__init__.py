"""
Core infrastructure for PyEigen.

Shared abstractions and utilities used by the eigen-decomposition
module and its backends.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Hardware detection, timing, tolerances
"""

from pyeigen.core.protocols import Backend
from pyeigen.core.result import Result
from pyeigen.core.exceptions import (
    PyEigenError,
    ValidationError,
    DimensionError,
    NumericalError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyEigenError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "ConvergenceError",
]
