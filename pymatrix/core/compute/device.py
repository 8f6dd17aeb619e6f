"""
Compute device discovery.

PyTorch is optional and imported lazily; without it the CPU is the only
device there is.
"""

from dataclasses import dataclass
from typing import Literal
import platform

DeviceType = Literal['cpu', 'cuda', 'mps']


@dataclass(frozen=True)
class DeviceInfo:
    """
    A device matrix kernels can run on.

    Attributes:
        device_type: 'cpu', 'cuda' or 'mps'
        name: Human-readable device name
        device_index: CUDA ordinal (None for CPU)
    """
    device_type: DeviceType
    name: str
    device_index: int | None = None

    @property
    def is_gpu(self) -> bool:
        return self.device_type != 'cpu'

    @property
    def supports_fp64(self) -> bool:
        """MPS has no double precision."""
        return self.device_type != 'mps'

    @property
    def torch_name(self) -> str:
        """Device string accepted by torch.device()."""
        if self.device_type == 'cuda':
            return f'cuda:{self.device_index or 0}'
        return self.device_type


def detect_gpu() -> DeviceInfo | None:
    """
    The preferred GPU, CUDA before MPS, or None when PyTorch is missing
    or sees no device.
    """
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        index = torch.cuda.current_device()
        return DeviceInfo('cuda', torch.cuda.get_device_name(index), index)

    mps = getattr(torch.backends, 'mps', None)
    if mps is not None and mps.is_available():
        return DeviceInfo('mps', 'Apple Silicon GPU', 0)

    return None


def get_cpu_info() -> DeviceInfo:
    return DeviceInfo('cpu', platform.processor() or platform.machine() or 'cpu')


def select_device(prefer: Literal['cpu', 'gpu', 'auto'] = 'auto') -> DeviceInfo:
    """
    Pick the device for a backend choice.

    'cpu' always gives the CPU. 'gpu' gives the detected GPU and raises
    RuntimeError when there is none. 'auto' gives the GPU only when it
    computes in float64, otherwise the CPU.
    """
    if prefer == 'cpu':
        return get_cpu_info()

    gpu = detect_gpu()
    if prefer == 'gpu':
        if gpu is None:
            raise RuntimeError(
                "GPU requested but none is available; "
                "install PyTorch with CUDA or MPS support"
            )
        return gpu

    if gpu is not None and gpu.supports_fp64:
        return gpu
    return get_cpu_info()
