from __future__ import annotations

from typing import Any

import numpy as np

from .formatting import HolderFormatMixin


class CacheMatrix(HolderFormatMixin):
    """A matrix paired with a lazily computed, cached inverse.

    The holder neither copies nor validates what it stores. ``set`` is the only
    invalidation trigger: mutating a stored array in place is not detected, so
    every update must go through ``set``.

    ``set_inverse`` trusts its caller and stores whatever it is given; it is the
    storage primitive used by ``cache_solve``.
    """

    def __init__(self, x: Any = None) -> None:
        if x is None:
            x = np.empty((0, 0), dtype=np.float64)
        self._value = x
        self._inverse: Any | None = None

    def set(self, y: Any) -> None:
        self._value = y
        self._inverse = None

    def get(self) -> Any:
        return self._value

    def set_inverse(self, inverse: Any) -> None:
        self._inverse = inverse

    def get_inverse(self) -> Any | None:
        return self._inverse

    def has_inverse(self) -> bool:
        return self._inverse is not None


def make_cache_matrix(x: Any = None) -> CacheMatrix:
    return CacheMatrix(x)
