"""
Numerical constants and tolerance tiers.

Two kinds of numbers live here:

- Algorithm constants used inside the CPU reference solver (deflation
  thresholds, iteration budgets, exceptional-shift schedule).
- Tolerance tiers describing how closely each compute path is expected to
  reproduce the reference (used by the test suite and select_tolerance()).
"""

from dataclasses import dataclass

import numpy as np


# Relative deflation threshold for the symmetric QL sweep (tql2).
SYMMETRIC_DEFLATION_EPS = 1e-12

# Negligible sub-diagonal threshold for the Francis QR sweep (hqr2): 2**-52.
SCHUR_EPS = float(np.finfo(np.float64).eps)

# Sweep budget per eigenvalue; the total budget of a solve is
# DEFAULT_MAX_ITER * n, the LAPACK convention.
DEFAULT_MAX_ITER = 30

# Iteration counts (per root) at which hqr2 injects exceptional shifts:
# Wilkinson's ad hoc shift, then MATLAB's.
EXCEPTIONAL_SHIFT_ITERATIONS = (10, 30)


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# CPU reference: EISPACK-derived algorithms in float64
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-10,
    name='cpu_fp64',
    description='CPU double precision, matches LAPACK to round-off',
)

# CPU reference, ill-conditioned or defective spectra
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, clustered or defective eigenvalues',
)

# GPU with FP64 (CUDA)
GPU_FP64 = ToleranceTier(
    rtol=1e-8,
    atol=1e-8,
    name='gpu_fp64',
    description='GPU double precision, matches CPU reference',
)

# GPU with FP32 (MPS has no float64)
GPU_FP32 = ToleranceTier(
    rtol=1e-3,
    atol=1e-4,
    name='gpu_fp32',
    description='GPU single precision',
)


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given backend."""
    if 'gpu' in backend_name:
        if 'fp64' in backend_name:
            return GPU_FP64
        return GPU_FP32
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
