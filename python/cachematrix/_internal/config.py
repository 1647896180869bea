from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

import numpy as np

_DEFAULT_TOLERANCE = float(np.finfo(np.float64).eps)
_DEFAULT_WARN_RCOND = 1e-12


def _read_float_env(env_var: str, default: float) -> float:
    raw = os.environ.get(env_var)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be a float, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{env_var} must be non-negative, got {value}")
    return value


class SolverSettings:
    def __init__(
        self,
        *,
        tolerance_env_var: str = "CACHEMATRIX_SOLVE_TOL",
        warn_rcond_env_var: str = "CACHEMATRIX_WARN_RCOND",
    ) -> None:
        self._tolerance_env_var = tolerance_env_var
        self._warn_rcond_env_var = warn_rcond_env_var
        self._tolerance: float | None = None
        self._warn_rcond: float | None = None

    @property
    def tolerance(self) -> float:
        if self._tolerance is None:
            self._tolerance = _read_float_env(self._tolerance_env_var, _DEFAULT_TOLERANCE)
        return self._tolerance

    @tolerance.setter
    def tolerance(self, value: float | None) -> None:
        if value is None:
            self._tolerance = None
            return
        value = float(value)
        if value < 0:
            raise ValueError(f"solve tolerance must be non-negative, got {value}")
        self._tolerance = value

    @property
    def warn_rcond(self) -> float:
        if self._warn_rcond is None:
            self._warn_rcond = _read_float_env(self._warn_rcond_env_var, _DEFAULT_WARN_RCOND)
        return self._warn_rcond

    @warn_rcond.setter
    def warn_rcond(self, value: float | None) -> None:
        if value is None:
            self._warn_rcond = None
            return
        value = float(value)
        if value < 0:
            raise ValueError(f"condition warning threshold must be non-negative, got {value}")
        self._warn_rcond = value

    def reset(self) -> None:
        """Forget overrides; the next read consults the environment again."""
        self._tolerance = None
        self._warn_rcond = None


_default_settings = SolverSettings()


def default_settings() -> SolverSettings:
    return _default_settings


def get_solve_tolerance() -> float:
    return _default_settings.tolerance


def set_solve_tolerance(value: float | None) -> float:
    """Set the process-wide singularity tolerance.

    ``None`` restores the environment (or built-in) default.
    """
    _default_settings.tolerance = value
    return _default_settings.tolerance


@contextmanager
def temporary_solve_tolerance(value: float | None) -> Iterator[float]:
    """Temporarily override the singularity tolerance.

    The setting is process-global; this helper does not provide thread isolation.
    """
    prev = _default_settings._tolerance
    try:
        yield set_solve_tolerance(value)
    finally:
        _default_settings._tolerance = prev
