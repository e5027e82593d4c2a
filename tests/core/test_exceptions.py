"""
Tests for PyEigen exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyEigenError)
    - Diagnostic attributes on DimensionError and ConvergenceError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pyeigen.core.exceptions import (
    ConvergenceError,
    DimensionError,
    NumericalError,
    PyEigenError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyEigenError."""

    def test_validation_error_is_pyeigen_error(self):
        with pytest.raises(PyEigenError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_numerical_error_is_pyeigen_error(self):
        with pytest.raises(PyEigenError):
            raise NumericalError("computation failed")

    def test_convergence_error_is_pyeigen_error(self):
        with pytest.raises(PyEigenError):
            raise ConvergenceError("did not converge", iterations=100)

    def test_convergence_error_is_not_numerical_error(self):
        """ConvergenceError inherits from PyEigenError, not NumericalError."""
        err = ConvergenceError("did not converge", iterations=100)
        assert not isinstance(err, NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# DimensionError
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:

    def test_message(self):
        err = DimensionError("matrix: expected 2D, got 3D")
        assert "expected 2D" in str(err)

    def test_shape_attribute(self):
        err = DimensionError("not square", shape=(2, 3))
        assert err.shape == (2, 3)

    def test_shape_defaults_to_none(self):
        assert DimensionError("wrong shape").shape is None


# ═══════════════════════════════════════════════════════════════════════
# ConvergenceError
# ═══════════════════════════════════════════════════════════════════════


class TestConvergenceError:
    """ConvergenceError carries iteration diagnostics."""

    def test_all_attributes(self):
        err = ConvergenceError(
            "QR did not converge",
            iterations=90,
            reason="max_iterations",
            threshold=90,
            path="general",
        )
        assert str(err) == "QR did not converge"
        assert err.iterations == 90
        assert err.reason == "max_iterations"
        assert err.threshold == 90
        assert err.path == "general"

    def test_required_iterations(self):
        """iterations is required (positional)."""
        err = ConvergenceError("failed", 42)
        assert err.iterations == 42

    def test_defaults_are_none(self):
        err = ConvergenceError("failed", iterations=10)
        assert err.reason is None
        assert err.threshold is None
        assert err.path is None
