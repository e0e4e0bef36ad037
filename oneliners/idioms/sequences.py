from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


def concat(sequences: Iterable[Sequence[T]]) -> list[T]:
    """Flatten `sequences` into one new list, preserving order.

    The result is sized once from the summed lengths and filled in place, so
    it never grows while elements are copied. Inputs are left untouched.

    Raises:
        TypeError: If an item has no `len()`.
        ValueError: If an item yields a different number of elements than
            its `len()` reported.

    Example:
        >>> concat([[1, 2], [3, 4, 5, 6, 7, 8]])
        [1, 2, 3, 4, 5, 6, 7, 8]
    """

    # The outer collection may be a one-shot iterator; it is walked twice.
    parts = list(sequences)
    total = sum(len(part) for part in parts)

    out: list[T] = [None] * total  # type: ignore[list-item]
    pos = 0
    for index, part in enumerate(parts):
        end = pos + len(part)
        out[pos:end] = part
        # A slice assignment of the wrong size resizes the list.
        if len(out) != total:
            raise ValueError(f"sequence #{index} yielded a different number of items than len() reported")
        pos = end
    return out
