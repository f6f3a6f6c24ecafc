"""linfft: small dense linear algebra and an iterative FFT.

The package provides a generic :class:`Matrix` with Gauss-Jordan inversion
and determinant, a linear system solver built on the inverse, and an
in-place radix-2 Fast Fourier Transform with a reusable root cache.
"""

from .errors import DegenerateMatrixError, DimensionMismatchError, LinearAlgebraError
from .fft import Direction, FFTContext, transform
from .matrix import Matrix
from .solver import solve

__all__ = [
    "Matrix",
    "solve",
    "transform",
    "Direction",
    "FFTContext",
    "LinearAlgebraError",
    "DimensionMismatchError",
    "DegenerateMatrixError",
]
