from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Tuple

ROUTES = ("cached", "computed", "failed")


@dataclass
class SolveRecord:
    op: str
    route: str
    reason: str
    trace_tag: str
    shape: Tuple[int, ...] | None
    dtype: str | None
    extra_args: List[str]
    error: str | None
    timestamp: float


def _shape(obj: Any) -> Tuple[int, ...] | None:
    shape_attr = getattr(obj, "shape", None)
    if isinstance(shape_attr, tuple):
        return tuple(int(dim) for dim in shape_attr)
    return None


def _dtype_label(obj: Any) -> str | None:
    dtype_attr = getattr(obj, "dtype", None)
    if dtype_attr is not None and not callable(dtype_attr):
        return str(dtype_attr)
    return type(obj).__name__


class SolveObservability:
    def __init__(self) -> None:
        self._counter = 0
        self._counts: dict[str, int] = dict.fromkeys(ROUTES, 0)
        self._last: dict[str, dict[str, Any]] = {}

    def clear(self) -> None:
        self._last.clear()
        self._counts = dict.fromkeys(ROUTES, 0)

    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def _record(self, record: SolveRecord) -> dict[str, Any]:
        payload = asdict(record)
        self._last["__latest__"] = payload
        self._last[record.op] = payload
        return payload

    def record(
        self,
        op: str,
        route: str,
        operand: Any,
        *,
        reason: str,
        extra_args: List[str] | None = None,
        error: BaseException | None = None,
    ) -> dict[str, Any]:
        if route not in self._counts:
            raise ValueError(f"unknown solve route {route!r}")
        self._counter += 1
        self._counts[route] += 1

        record = SolveRecord(
            op=op,
            route=route,
            reason=reason,
            trace_tag=f"{op}:{self._counter}",
            shape=_shape(operand) if operand is not None else None,
            dtype=_dtype_label(operand) if operand is not None else None,
            extra_args=list(extra_args or []),
            error=type(error).__name__ if error is not None else None,
            timestamp=time.time(),
        )
        return self._record(record)

    def last(self, op: str | None = None) -> dict[str, Any] | None:
        key = op or "__latest__"
        payload = self._last.get(key)
        if payload is None:
            return None
        return dict(payload)


# Module-level singleton helpers (optional convenience)
_default_observability = SolveObservability()


def default_instance() -> SolveObservability:
    return _default_observability
