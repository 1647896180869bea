from __future__ import annotations

from typing import Any

import numpy as np

from .errors import DimensionMismatchError


def _rows_cols(candidate: Any) -> tuple[int, int] | None:
    rows_attr = getattr(candidate, "rows", None)
    cols_attr = getattr(candidate, "cols", None)
    if callable(rows_attr) and callable(cols_attr):
        return int(rows_attr()), int(cols_attr())
    size_attr = getattr(candidate, "size", None)
    if callable(size_attr):
        # Older matrix-likes expose only size() as the square dimension.
        size = int(size_attr())
        return size, size
    return None


def _from_accessor(candidate: Any, rows: int, cols: int) -> list[list[Any]]:
    get_attr = candidate.get
    return [[get_attr(i, j) for j in range(cols)] for i in range(rows)]


def to_numeric_array(candidate: Any) -> np.ndarray:
    """Coerce a matrix-like value to a float or complex ndarray.

    Accepts ndarrays, nested sequences and objects exposing ``get(i, j)``
    together with ``rows()``/``cols()`` or ``size()``.
    """
    if not isinstance(candidate, np.ndarray) and callable(getattr(candidate, "get", None)):
        shape = _rows_cols(candidate)
        if shape is not None:
            candidate = _from_accessor(candidate, *shape)

    if candidate is None:
        raise TypeError(
            "Matrix data must be provided as a nested sequence, a NumPy array "
            "or a matrix-like object."
        )

    try:
        array = np.asarray(candidate)
    except ValueError as exc:
        # Ragged nested sequences.
        raise DimensionMismatchError("Matrix data must be rectangular.") from exc

    if array.dtype == object or not (
        np.issubdtype(array.dtype, np.number) or array.dtype == np.bool_
    ):
        raise TypeError(f"Matrix entries must be numeric, got dtype {array.dtype}.")

    if np.iscomplexobj(array):
        return array.astype(np.complex128, copy=False)
    return array.astype(np.float64, copy=False)


def as_square_matrix(candidate: Any) -> np.ndarray:
    array = to_numeric_array(candidate)
    if array.ndim != 2:
        raise DimensionMismatchError(
            f"Matrix input must be 2-D, got {array.ndim}-D.", shape=array.shape
        )
    if array.shape[0] != array.shape[1]:
        raise DimensionMismatchError(
            f"Matrix input must be square (rows == columns), got shape {array.shape}.",
            shape=array.shape,
        )
    if array.shape[0] == 0:
        raise DimensionMismatchError("Matrix input must not be empty.", shape=array.shape)
    return array


def as_right_hand_side(candidate: Any, n: int) -> np.ndarray:
    array = to_numeric_array(candidate)
    if array.ndim not in (1, 2) or array.shape[0] != n:
        raise DimensionMismatchError(
            f"Right-hand side of shape {array.shape} is incompatible with a "
            f"{n}x{n} matrix.",
            shape=array.shape,
        )
    return array
