"""
GPU backend for matrix operations using PyTorch.

Supports CUDA (float64) and MPS (float32, since Apple Silicon GPUs have
no double precision). Results always come back as float64 numpy buffers
for consistency with the CPU reference backend. Device out-of-memory
errors surface as MemoryError, which the callers' allocation guard turns
into AllocationError.
"""

from __future__ import annotations

import functools
import warnings

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.device import DeviceInfo, select_device

Buffer = NDArray[np.float64]


def _device_memory(kernel):
    """Re-raise torch's out-of-memory error as MemoryError."""
    @functools.wraps(kernel)
    def wrapper(self, *args):
        import torch
        oom = getattr(torch, 'OutOfMemoryError', torch.cuda.OutOfMemoryError)
        try:
            return kernel(self, *args)
        except oom as e:
            raise MemoryError(f"{kernel.__name__}: {e}") from e
    return wrapper


class GPUMatrixBackend:
    """
    GPU backend using PyTorch.

    Every kernel copies its operands to the device, runs there and copies
    the result back, so the returned buffer never aliases an input.
    In-place kernels write back only after the device work succeeded.
    """

    def __init__(self, device: DeviceInfo | None = None):
        """
        Parameters
        ----------
        device : DeviceInfo, optional
            A GPU from select_device(). If None, one is selected.
        """
        import torch

        if device is None:
            device = select_device('gpu')
        if not device.is_gpu:
            raise ValueError(
                f"GPUMatrixBackend requires GPU device, got {device.device_type}"
            )
        self.device = torch.device(device.torch_name)

        if self.device.type == 'mps':
            self.dtype = torch.float32
            warnings.warn(
                "MPS has no float64 support; matrix kernels run in float32",
                RuntimeWarning,
                stacklevel=2,
            )
        else:
            self.dtype = torch.float64

    @property
    def name(self) -> str:
        import torch
        return 'gpu_fp64' if self.dtype == torch.float64 else 'gpu_fp32'

    def synchronize(self) -> None:
        """Wait for queued CUDA work on this backend's device."""
        import torch
        if self.device.type == 'cuda':
            torch.cuda.synchronize(self.device)

    def _to_device(self, data: Buffer):
        import torch
        # cast on the host first: MPS cannot receive float64 tensors
        return torch.from_numpy(data).to(dtype=self.dtype).to(self.device)

    def _to_host(self, tensor) -> Buffer:
        out = tensor.cpu().numpy().astype(np.float64, copy=True)
        return np.ascontiguousarray(out)

    @_device_memory
    def kronecker(self, left: Buffer, right: Buffer) -> Buffer:
        import torch
        return self._to_host(torch.kron(self._to_device(left), self._to_device(right)))

    @_device_memory
    def hadamard(self, left: Buffer, right: Buffer) -> Buffer:
        return self._to_host(self._to_device(left) * self._to_device(right))

    @_device_memory
    def horicat(self, left: Buffer, right: Buffer) -> Buffer:
        import torch
        return self._to_host(torch.cat((self._to_device(left), self._to_device(right)), dim=1))

    @_device_memory
    def mul(self, left: Buffer, right: Buffer) -> Buffer:
        return self._to_host(self._to_device(left) @ self._to_device(right))

    @_device_memory
    def add(self, left: Buffer, right: Buffer) -> Buffer:
        return self._to_host(self._to_device(left) + self._to_device(right))

    @_device_memory
    def sub(self, left: Buffer, right: Buffer) -> Buffer:
        return self._to_host(self._to_device(left) - self._to_device(right))

    @_device_memory
    def transpose(self, data: Buffer) -> Buffer:
        return self._to_host(self._to_device(data).T)

    @_device_memory
    def mul_by_scalar(self, scalar: float, data: Buffer) -> None:
        data[...] = self._to_host(self._to_device(data) * scalar)

    @_device_memory
    def invert(self, k: float, data: Buffer) -> None:
        data[...] = self._to_host(k / self._to_device(data))
