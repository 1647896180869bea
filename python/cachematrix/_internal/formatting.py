from __future__ import annotations

from typing import Any

import numpy as np

_EDGE_ITEMS: int = 4


def _edge_indices(length: int) -> tuple[list[int], list[int], bool]:
    if length <= _EDGE_ITEMS * 2:
        return list(range(length)), [], False
    head = list(range(_EDGE_ITEMS))
    tail = list(range(length - _EDGE_ITEMS, length))
    return head, tail, True


def _format_value(value: Any) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _format_row(row: Any, col_head: list[int], col_tail: list[int], truncated: bool) -> str:
    entries = [_format_value(row[col]) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(_format_value(row[col]) for col in col_tail)
    return " ".join(entries)


def shape_of(value: Any) -> tuple[int, ...] | None:
    shape = getattr(value, "shape", None)
    if isinstance(shape, tuple):
        return shape
    return None


def holder_str(holder: Any) -> str:
    value = holder.get()
    shape = shape_of(value)
    header = f"{holder.__class__.__name__}(shape={shape}, cached={holder.has_inverse()})"

    if shape is None or len(shape) != 2:
        return f"{header}\n{value!r}"
    rows, cols = shape
    if rows == 0 or cols == 0:
        return header + "\n[]"

    row_head, row_tail, rows_truncated = _edge_indices(rows)
    col_head, col_tail, cols_truncated = _edge_indices(cols)

    lines = [header, "["]
    for row_index in row_head:
        lines.append(f" [{_format_row(value[row_index], col_head, col_tail, cols_truncated)}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        lines.append(f" [{_format_row(value[row_index], col_head, col_tail, cols_truncated)}]")
    lines.append("]")
    return "\n".join(lines)


class HolderFormatMixin:
    def __str__(self) -> str:
        return holder_str(self)

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} shape={shape_of(self.get())} "
            f"cached={self.has_inverse()}>"
        )
