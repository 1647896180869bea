from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from .coercion import as_right_hand_side, as_square_matrix
from .config import SolverSettings, default_settings
from .errors import NonFiniteMatrixError, SingularMatrixError
from .warnings import CacheMatrixConditionWarning


def reciprocal_condition(a: np.ndarray, inv_a: np.ndarray) -> float:
    """Reciprocal condition number of ``a`` in the 1-norm."""
    with np.errstate(invalid="ignore", over="ignore"):
        norm_a = float(np.linalg.norm(a, 1))
        norm_inv = float(np.linalg.norm(inv_a, 1))
    if not (np.isfinite(norm_a) and np.isfinite(norm_inv)):
        return float("nan")
    if norm_a == 0.0 or norm_inv == 0.0:
        return 0.0
    return 1.0 / (norm_a * norm_inv)


def solve(
    a: Any,
    b: Any = None,
    *,
    tol: float | None = None,
    settings: SolverSettings | None = None,
    _stacklevel: int = 2,
) -> np.ndarray:
    """Solve ``a @ x = b`` for ``x``, or invert ``a`` when ``b`` is omitted.

    Args:
        a: Square matrix-like (ndarray, nested sequence or object exposing ``get``).
        b: Optional right-hand side, 1-D of length n or 2-D with n rows.
        tol: Singularity tolerance on the reciprocal condition number.
            Defaults to the configured solve tolerance; ``0`` disables the check.

    Returns:
        The inverse of ``a`` (n x n) or the solution with the shape of ``b``.

    Raises:
        DimensionMismatchError: ``a`` is not a non-empty square matrix, or ``b``
            does not fit it.
        SingularMatrixError: ``a`` is exactly singular, or its reciprocal
            condition number is below ``tol``, or its inverse overflows.
        NonFiniteMatrixError: ``a`` has NaN or infinite entries.
        ValueError: ``tol`` is negative.
    """
    settings = settings or default_settings()
    if tol is None:
        tol = settings.tolerance
    tol = float(tol)
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")

    matrix = as_square_matrix(a)
    n = matrix.shape[0]
    rhs = as_right_hand_side(b, n) if b is not None else None

    if not np.all(np.isfinite(matrix)):
        raise NonFiniteMatrixError("Matrix entries must be finite.")

    try:
        inv = np.linalg.inv(matrix)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError("Matrix is exactly singular.", rcond=0.0) from exc

    rcond = reciprocal_condition(matrix, inv)
    if not np.isfinite(rcond) or not np.all(np.isfinite(inv)):
        # The inverse is not representable in floating point.
        raise SingularMatrixError(
            "Matrix is computationally singular: inverse is not finite.", rcond=0.0
        )
    if tol > 0 and rcond < tol:
        raise SingularMatrixError(
            f"Matrix is computationally singular: reciprocal condition number = {rcond:g}",
            rcond=rcond,
        )
    if rcond < settings.warn_rcond:
        warnings.warn(
            f"Matrix is ill-conditioned (reciprocal condition number = {rcond:g}); "
            "the result may be inaccurate.",
            CacheMatrixConditionWarning,
            stacklevel=_stacklevel,
        )

    if rhs is None:
        return inv
    return np.linalg.solve(matrix, rhs)
