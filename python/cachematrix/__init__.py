"""Memoize the inverse of a matrix.

A :class:`CacheMatrix` holds a matrix and, once computed, its inverse.
:func:`cache_solve` returns the cached inverse when there is one and computes
and stores it otherwise::

    >>> import cachematrix
    >>> m = cachematrix.CacheMatrix([[2.0, 0.0], [0.0, 2.0]])
    >>> cachematrix.cache_solve(m)
    array([[0.5, 0. ],
           [0. , 0.5]])
"""
from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _dist_version
from typing import Any

try:
    __version__ = _dist_version("cachematrix")
except PackageNotFoundError:
    __version__ = "unknown"

from ._internal import config as _config
from ._internal import observability as _observability
from ._internal.errors import (
    CacheMatrixError,
    DimensionMismatchError,
    NonFiniteMatrixError,
    SingularMatrixError,
)
from ._internal.holder import CacheMatrix, make_cache_matrix
from ._internal.resolve import cache_solve
from ._internal.solver import solve
from ._internal.warnings import CacheMatrixConditionWarning, CacheMatrixWarning

logging.getLogger(__name__).addHandler(logging.NullHandler())

get_solve_tolerance = _config.get_solve_tolerance
set_solve_tolerance = _config.set_solve_tolerance
temporary_solve_tolerance = _config.temporary_solve_tolerance


def last_solve_trace(op: str | None = None) -> dict[str, Any] | None:
    """Return the most recent cache_solve record (a copy), or None."""
    return _observability.default_instance().last(op)


def clear_solve_traces() -> None:
    _observability.default_instance().clear()


def solve_counts() -> dict[str, int]:
    """Number of cache_solve calls per route: cached, computed, failed."""
    return _observability.default_instance().counts()


__all__ = [
    "CacheMatrix",
    "make_cache_matrix",
    "cache_solve",
    "solve",
    "CacheMatrixError",
    "SingularMatrixError",
    "DimensionMismatchError",
    "NonFiniteMatrixError",
    "CacheMatrixWarning",
    "CacheMatrixConditionWarning",
    "get_solve_tolerance",
    "set_solve_tolerance",
    "temporary_solve_tolerance",
    "last_solve_trace",
    "clear_solve_traces",
    "solve_counts",
]
