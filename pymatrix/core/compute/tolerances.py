"""
Tolerance tiers for approximate matrix comparison.

- CPU FP64 (reference): differences come only from summation order
- GPU FP64: same as CPU
- GPU FP32: relaxed for single-precision arithmetic (MPS)

Used by Matrix.allclose and by the GPU test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, reference kernels',
)

GPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='gpu_fp64',
    description='CUDA double precision, matches CPU up to summation order',
)

GPU_FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='gpu_fp32',
    description='MPS single precision',
)
