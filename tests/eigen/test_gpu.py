"""
GPU backend tests for eigen-decomposition.

Validates GPU results against CPU reference backend.
Skipped if no GPU is available.
"""

from __future__ import annotations

import numpy as np
import pytest

try:
    import torch
    HAS_GPU = torch.cuda.is_available() or (
        hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()
    )
except ImportError:
    HAS_GPU = False

pytestmark = pytest.mark.skipif(not HAS_GPU, reason="No GPU available")

from pyeigen import eig
from pyeigen.core.compute.tolerances import select_tolerance


class TestGPUvsCPU:
    """Compare GPU results against CPU reference."""

    @pytest.fixture
    def symmetric(self):
        rng = np.random.default_rng(42)
        A = rng.standard_normal((50, 50))
        return A + A.T

    @pytest.fixture
    def general(self):
        rng = np.random.default_rng(42)
        return rng.standard_normal((30, 30))

    def test_symmetric_eigenvalues(self, symmetric):
        cpu = eig(symmetric, backend='cpu')
        gpu = eig(symmetric, backend='gpu')
        tol = select_tolerance(gpu.backend_name)
        np.testing.assert_allclose(
            gpu.real_eigenvalues, cpu.real_eigenvalues, rtol=tol.rtol, atol=tol.atol * 10
        )

    def test_symmetric_vectors_orthonormal(self, symmetric):
        gpu = eig(symmetric, backend='gpu')
        tol = select_tolerance(gpu.backend_name)
        V = gpu.eigenvectors
        np.testing.assert_allclose(V.T @ V, np.eye(50), atol=tol.atol * 10)

    def test_general_eigenvalues(self, general):
        cpu = eig(general, backend='cpu')
        gpu = eig(general, backend='gpu')
        tol = select_tolerance(gpu.backend_name)
        for lam in cpu.eigenvalues:
            assert np.min(np.abs(gpu.eigenvalues - lam)) < tol.atol * 100

    def test_general_pair_layout(self, general):
        gpu = eig(general, backend='gpu')
        lam = gpu.eigenvalues
        i = 0
        while i < len(lam):
            if lam[i].imag != 0.0:
                assert lam[i].imag > 0.0
                assert lam[i + 1] == np.conj(lam[i])
                i += 2
            else:
                i += 1

    def test_metadata(self, symmetric):
        gpu = eig(symmetric, backend='gpu')
        assert gpu.backend_name.startswith('gpu_eigen')
        assert gpu.converged
        assert gpu.path == 'symmetric'
        assert gpu.info['method'] == 'torch.linalg.eigh'


class TestAutoBackend:

    def test_auto_selects_gpu(self):
        sol = eig(np.eye(4), backend='auto')
        assert sol.backend_name.startswith('gpu_eigen')


class TestPrecision:

    def test_dtype_follows_device(self):
        from pyeigen.core.compute.device import select_device
        from pyeigen.eigen.backends.gpu import GPUEigenBackend

        device = select_device('gpu')
        backend = GPUEigenBackend(device=device)
        expected = torch.float64 if device.supports_fp64 else torch.float32
        assert backend.dtype == expected
        assert backend.name.endswith('fp64' if device.supports_fp64 else 'fp32')
