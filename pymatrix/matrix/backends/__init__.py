"""
Compute backends for matrix operations.

    cpu: NumPy reference kernels (always available)
    gpu: PyTorch kernels (optional dependency, imported lazily)
"""

from pymatrix.matrix.backends.cpu import CPUMatrixBackend

__all__ = ["CPUMatrixBackend"]
