"""
Symmetric path tests: Householder tridiagonalization + implicit QL.

Validates:
    - Known small cases (2x2, identity, diagonal)
    - Agreement with LAPACK (scipy.linalg.eigh)
    - A V = V diag(d), orthonormal V, ascending order
    - Trace and determinant preservation, bitwise determinism
    - Overflow on entries near the float64 limit raises NumericalError
"""

import numpy as np
import pytest
from scipy import linalg

from pyeigen import eig
from pyeigen.core.compute.tolerances import CPU_FP64
from pyeigen.core.exceptions import NumericalError


class TestKnownSpectra:

    def test_two_by_two(self):
        sol = eig(np.array([[2.0, 1.0], [1.0, 2.0]]))
        assert sol.path == 'symmetric'
        np.testing.assert_allclose(sol.real_eigenvalues, [1.0, 3.0], atol=1e-12)

        v_low, v_high = sol.real_eigenvectors
        inv_sqrt2 = 1.0 / np.sqrt(2.0)
        assert abs(v_low @ np.array([1.0, -1.0])) == pytest.approx(np.sqrt(2.0), abs=1e-12)
        assert abs(v_high @ np.array([inv_sqrt2, inv_sqrt2])) == pytest.approx(1.0, abs=1e-12)

    @pytest.mark.parametrize("n", [1, 2, 5, 10])
    def test_identity(self, n):
        sol = eig(np.eye(n))
        np.testing.assert_array_equal(sol.real_eigenvalues, np.ones(n))
        V = sol.eigenvectors
        np.testing.assert_allclose(V.T @ V, np.eye(n), atol=1e-14)
        assert sol.iterations == 0

    def test_diagonal_is_sorted_with_permuted_basis(self):
        sol = eig(np.diag([3.0, 1.0, 2.0]))
        np.testing.assert_allclose(sol.real_eigenvalues, [1.0, 2.0, 3.0])
        expected = np.array([
            [0.0, 0.0, 1.0],
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
        ])
        np.testing.assert_allclose(np.abs(sol.eigenvectors), expected, atol=1e-14)

    def test_diagonal_already_symmetric(self):
        sol = eig(np.array([[2.0, 0.0], [0.0, 3.0]]))
        assert sol.path == 'symmetric'
        np.testing.assert_allclose(sol.real_eigenvalues, [2.0, 3.0])

    def test_repeated_eigenvalues(self, rng):
        Q, _ = np.linalg.qr(rng.standard_normal((4, 4)))
        A = Q @ np.diag([5.0, 1.0, 2.0, 1.0]) @ Q.T
        A = (A + A.T) / 2.0
        sol = eig(A)
        np.testing.assert_allclose(sol.real_eigenvalues, [1.0, 1.0, 2.0, 5.0], atol=1e-12)
        V = sol.eigenvectors
        np.testing.assert_allclose(V.T @ V, np.eye(4), atol=1e-12)

    def test_zero_matrix(self):
        sol = eig(np.zeros((3, 3)))
        np.testing.assert_array_equal(sol.real_eigenvalues, np.zeros(3))
        assert sol.converged


class TestAgainstLapack:

    def test_eigenvalues_match_eigh(self, symmetric_matrix):
        sol = eig(symmetric_matrix)
        expected = linalg.eigh(symmetric_matrix, eigvals_only=True)
        np.testing.assert_allclose(
            sol.real_eigenvalues, expected, rtol=CPU_FP64.rtol, atol=CPU_FP64.atol
        )

    def test_covariance_matrix(self, covariance_matrix):
        sol = eig(covariance_matrix)
        expected = linalg.eigh(covariance_matrix, eigvals_only=True)
        np.testing.assert_allclose(sol.real_eigenvalues, expected, rtol=1e-10)
        assert np.all(sol.real_eigenvalues > 0)

    def test_larger_matrix(self, rng):
        A = rng.standard_normal((40, 40))
        A = A + A.T
        sol = eig(A)
        expected = linalg.eigh(A, eigvals_only=True)
        np.testing.assert_allclose(sol.real_eigenvalues, expected, atol=1e-10)


class TestDecompositionProperties:

    def test_reconstruction(self, symmetric_matrix):
        sol = eig(symmetric_matrix)
        V = sol.eigenvectors
        D = sol.diagonal_matrix
        np.testing.assert_allclose(symmetric_matrix @ V, V @ D, atol=1e-10)
        np.testing.assert_allclose(V @ D @ V.T, symmetric_matrix, atol=1e-10)

    def test_orthonormal_vectors(self, symmetric_matrix):
        V = eig(symmetric_matrix).eigenvectors
        np.testing.assert_allclose(V.T @ V, np.eye(V.shape[0]), atol=1e-12)

    def test_ascending_order(self, symmetric_matrix):
        values = eig(symmetric_matrix).real_eigenvalues
        assert np.all(np.diff(values) >= 0)

    def test_all_eigenvalues_real(self, symmetric_matrix):
        sol = eig(symmetric_matrix)
        np.testing.assert_array_equal(sol.eigenvalues.imag, 0.0)
        assert len(sol.real_eigenvalues) == symmetric_matrix.shape[0]

    def test_trace(self, symmetric_matrix):
        sol = eig(symmetric_matrix)
        assert sol.real_eigenvalues.sum() == pytest.approx(np.trace(symmetric_matrix), abs=1e-10)

    def test_determinant(self, symmetric_matrix):
        sol = eig(symmetric_matrix)
        expected = np.linalg.det(symmetric_matrix)
        assert np.prod(sol.real_eigenvalues) == pytest.approx(expected, rel=1e-9)

    def test_deterministic(self, symmetric_matrix):
        first = eig(symmetric_matrix)
        second = eig(symmetric_matrix)
        np.testing.assert_array_equal(first.eigenvalues, second.eigenvalues)
        np.testing.assert_array_equal(first.eigenvectors, second.eigenvectors)

    def test_descending_reorder_for_pca(self, covariance_matrix):
        sol = eig(covariance_matrix)
        order = np.argsort(sol.real_eigenvalues)[::-1]
        components = sol.eigenvectors[:, order]
        explained = sol.real_eigenvalues[order]
        np.testing.assert_allclose(
            covariance_matrix @ components[:, 0], explained[0] * components[:, 0], atol=1e-10
        )


class TestOverflow:

    def test_entries_near_float_max_raise(self):
        A = np.full((2, 2), 1e308)
        with pytest.raises(NumericalError, match="non-finite"):
            eig(A)

    def test_large_but_safe_entries(self):
        A = np.array([[2.0, 1.0], [1.0, 2.0]]) * 1e150
        sol = eig(A)
        np.testing.assert_allclose(sol.real_eigenvalues, [1e150, 3e150], rtol=1e-12)
