"""
CPU reference backend for matrix operations.

Kernels receive validated float64 buffers. Out-of-place kernels return a
newly allocated C-contiguous buffer that shares no memory with their
inputs; in-place kernels write into the receiver.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

Buffer = NDArray[np.float64]


class CPUMatrixBackend:
    """NumPy reference backend."""

    @property
    def name(self) -> str:
        return 'cpu_numpy'

    def synchronize(self) -> None:
        """NumPy kernels have finished by the time they return."""

    def kronecker(self, left: Buffer, right: Buffer) -> Buffer:
        # block (m, n) of the result is left[m, n] * right
        return np.kron(left, right)

    def hadamard(self, left: Buffer, right: Buffer) -> Buffer:
        return np.multiply(left, right)

    def horicat(self, left: Buffer, right: Buffer) -> Buffer:
        return np.concatenate((left, right), axis=1)

    def mul(self, left: Buffer, right: Buffer) -> Buffer:
        return np.matmul(left, right)

    def add(self, left: Buffer, right: Buffer) -> Buffer:
        return np.add(left, right)

    def sub(self, left: Buffer, right: Buffer) -> Buffer:
        return np.subtract(left, right)

    def transpose(self, data: Buffer) -> Buffer:
        # .T is a view; the result must own its storage
        return data.T.copy(order='C')

    def mul_by_scalar(self, scalar: float, data: Buffer) -> None:
        np.multiply(data, scalar, out=data)

    def invert(self, k: float, data: Buffer) -> None:
        with np.errstate(divide='ignore', invalid='ignore'):
            np.divide(k, data, out=data)
