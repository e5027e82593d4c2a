"""
Shared compute infrastructure for PyEigen.

Hardware detection, stage timing and the numerical constants/tolerance
tiers shared by every backend. Domain algorithms live in pyeigen.eigen.

Submodules:
    device: Hardware detection and device selection
    timing: Execution timing utilities
    tolerances: Algorithm constants and tolerance tiers
"""

from pyeigen.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pyeigen.core.compute.timing import Timer, timed
from pyeigen.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
