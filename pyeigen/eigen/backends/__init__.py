"""
Compute backends for eigen-decomposition.

    cpu: EISPACK-derived reference algorithms (numpy)
    gpu: PyTorch eigh/eig on CUDA or MPS (imported lazily)
"""

from pyeigen.eigen.backends.cpu import CPUEigenBackend

__all__ = ["CPUEigenBackend"]
