"""cachematrix error taxonomy.

Only the solve step raises these; the holder accessors never do.
"""
from __future__ import annotations

import numpy as np


class CacheMatrixError(Exception):
    """Base class for all cachematrix errors."""


class SingularMatrixError(CacheMatrixError, np.linalg.LinAlgError):
    """The matrix has no inverse, or is singular to working precision."""

    def __init__(self, message: str, *, rcond: float | None = None) -> None:
        super().__init__(message)
        self.rcond = rcond


class DimensionMismatchError(CacheMatrixError, ValueError):
    """The matrix is not square, or a right-hand side does not fit it."""

    def __init__(self, message: str, *, shape: tuple[int, ...] | None = None) -> None:
        super().__init__(message)
        self.shape = shape


class NonFiniteMatrixError(CacheMatrixError, ValueError):
    """The matrix has NaN or infinite entries."""
