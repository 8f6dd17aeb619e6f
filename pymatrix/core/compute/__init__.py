"""
Shared compute infrastructure for PyMatrix.

This module provides hardware detection, timing utilities and tolerance
tiers shared by the matrix backends.

IMPORTANT: This is NOT where backends live. Those go in
pymatrix/matrix/backends/.

Submodules:
    device: Hardware detection and device selection
    timing: Execution timing utilities
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    GPU_FP64,
    GPU_FP32,
)

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "GPU_FP64",
    "GPU_FP32",
]
