"""
GPU backend for eigen-decomposition using PyTorch.

Performance path for large matrices, validated against the CPU reference.
Delegates to torch.linalg.eigh (symmetric) and torch.linalg.eig (general)
and packs the output into the same (d, e, V) layout as the CPU backend.

CUDA runs in float64. MPS has no float64 and no general eigen-solver
kernel, so MPS runs eigh in float32 and moves the general path to the
host CPU through torch.
"""

from __future__ import annotations

import numpy as np

from pyeigen.core.result import Result
from pyeigen.core.compute.timing import Timer
from pyeigen.core.compute.device import DeviceInfo
from pyeigen.eigen._common import (
    PATH_SYMMETRIC,
    STATUS_CONVERGED,
    check_finite_output,
    pack_conjugate_pairs,
)
from pyeigen.eigen._classify import classify
from pyeigen.eigen.design import EigenDesign
from pyeigen.eigen.solution import EigenParams


class GPUEigenBackend:
    """
    GPU backend for eigen-decomposition using PyTorch.

    Returns float64 numpy arrays for consistency with the CPU reference
    backend. LAPACK-style solvers do not expose sweep counts, so
    iterations is reported as 0 and status as converged unless torch
    raises.
    """

    def __init__(self, device: DeviceInfo | None = None):
        """
        Initialize GPU backend.

        Parameters
        ----------
        device : DeviceInfo, optional
            Device info from select_device(). If None, auto-selects.
        """
        import torch

        if device is not None:
            if device.device_type == 'cuda':
                self.device = torch.device(f'cuda:{device.device_index or 0}')
                self.device_name = device.name
            elif device.device_type == 'mps':
                self.device = torch.device('mps')
                self.device_name = 'Apple Silicon GPU (MPS)'
            else:
                raise ValueError(f"GPUEigenBackend requires GPU device, got {device.device_type}")
            self.fp64 = device.supports_fp64
        else:
            if torch.cuda.is_available():
                self.device = torch.device('cuda')
                self.fp64 = True
                self.device_name = torch.cuda.get_device_properties(0).name
            elif hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
                self.device = torch.device('mps')
                self.fp64 = False
                self.device_name = 'Apple Silicon GPU (MPS)'
            else:
                raise RuntimeError(
                    "No GPU available. Use backend='cpu' instead."
                )

        self.dtype = torch.float64 if self.fp64 else torch.float32

    @property
    def name(self) -> str:
        precision = 'fp64' if self.fp64 else 'fp32'
        return f'gpu_eigen_{precision}'

    def solve(
        self,
        design: EigenDesign,
        *,
        symmetry_tol: float = 0.0,
        max_iter: int | None = None,
    ) -> Result[EigenParams]:
        """
        Decompose the design matrix on the GPU.

        max_iter is accepted for signature compatibility with the CPU
        backend and ignored; torch exposes no sweep budget.
        """
        import torch

        timer = Timer(sync_cuda=self.device.type == 'cuda')
        timer.start()

        n = design.n
        warnings_list: list[str] = []

        with timer.section('classify'):
            path = classify(design.matrix, symmetry_tol)

        A = design.working_copy()

        if path == PATH_SYMMETRIC:
            if symmetry_tol > 0.0:
                A = (A + A.T) / 2.0
            with timer.section('data_transfer'):
                A_gpu = torch.from_numpy(A).to(device=self.device, dtype=self.dtype)
            with timer.section('eigh'):
                w, v = torch.linalg.eigh(A_gpu)
            with timer.section('data_transfer'):
                d = w.cpu().numpy().astype(np.float64)
                V = v.cpu().numpy().astype(np.float64)
            e = np.zeros(n)
            method = 'torch.linalg.eigh'
        else:
            target = self.device
            dtype = self.dtype
            if self.device.type == 'mps':
                target = torch.device('cpu')
                dtype = torch.float64
                warnings_list.append(
                    "general eigen-decomposition is not available on MPS; "
                    "ran on host CPU through torch"
                )
            with timer.section('data_transfer'):
                A_gpu = torch.from_numpy(A).to(device=target, dtype=dtype)
            with timer.section('eig'):
                w, v = torch.linalg.eig(A_gpu)
            with timer.section('data_transfer'):
                w_np = w.cpu().numpy().astype(np.complex128)
                v_np = v.cpu().numpy().astype(np.complex128)
            with timer.section('pack'):
                d, e, V = pack_conjugate_pairs(w_np, v_np)
            method = 'torch.linalg.eig'

        check_finite_output(path, d, e, V)

        timer.stop()

        for buf in (d, e, V):
            buf.flags.writeable = False

        params = EigenParams(
            real=d,
            imag=e,
            vectors=V,
            path=path,
            status=STATUS_CONVERGED,
            iterations=0,
        )

        return Result(
            params=params,
            info={
                'method': method,
                'path': path,
                'n': n,
                'converged': True,
                'iterations': 0,
                'device': self.device_name,
                'symmetry_tol': symmetry_tol,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
