from __future__ import annotations

import logging
from typing import Any

from . import solver as _solver
from .holder import CacheMatrix
from .observability import SolveObservability, default_instance

logger = logging.getLogger(__name__)


def cache_solve(
    holder: CacheMatrix,
    *args: Any,
    observability: SolveObservability | None = None,
    **kwargs: Any,
) -> Any:
    """Return the inverse of the holder's matrix, computing it at most once.

    A cached inverse is returned as-is, without checking it against the current
    matrix. On a miss the matrix is passed to ``solve`` together with any extra
    arguments (e.g. ``b`` to solve ``A x = b`` instead), the result is stored
    with ``set_inverse`` and returned. Solver errors propagate and leave the
    cache empty.
    """
    obs = observability or default_instance()

    inverse = holder.get_inverse()
    if inverse is not None:
        obs.record("cache_solve", "cached", inverse, reason="cache hit")
        logger.info("returning cached result")
        return inverse

    data = holder.get()
    extra_args = [f"arg{i}" for i in range(len(args))] + sorted(kwargs)
    try:
        # Attribute condition warnings to the caller of cache_solve.
        inverse = _solver.solve(data, *args, _stacklevel=3, **kwargs)
    except Exception as exc:
        obs.record(
            "cache_solve", "failed", data, reason="solver raised", extra_args=extra_args, error=exc
        )
        raise

    holder.set_inverse(inverse)
    obs.record("cache_solve", "computed", data, reason="cache miss", extra_args=extra_args)
    logger.info("returning computed result")
    return inverse
