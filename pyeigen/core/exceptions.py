"""
Exception hierarchy for PyEigen.

All exceptions inherit from PyEigenError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
    - Iterative solvers report non-convergence as a status on the result;
      ConvergenceError is raised only when the caller asks for it
"""


class PyEigenError(Exception):
    """Base exception for all PyEigen errors."""
    pass


class ValidationError(PyEigenError):
    """
    Input validation failed.

    Raised when user-provided inputs (matrices, keyword arguments,
    backend names) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a matrix is not 2-dimensional or not square.

    Attributes:
        shape: Shape of the offending array, if available
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(PyEigenError):
    """
    Numerical computation failed.

    Raised when a decomposition of finite input overflows to inf or NaN,
    which happens for matrices with entries near the float64 limit.
    """
    pass


class ConvergenceError(PyEigenError):
    """
    Iterative eigenvalue algorithm failed to converge.

    Raised by EigenSolution.raise_if_not_converged() when the QL or QR
    sweeps ran out of their iteration budget before every eigenvalue
    deflated.

    Attributes:
        iterations: Number of sweeps performed
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The iteration budget that was exhausted
        path: Algorithm path that was running ('symmetric' or 'general')
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        reason: str | None = None,
        threshold: int | None = None,
        path: str | None = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.reason = reason
        self.threshold = threshold
        self.path = path
