from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def select(condition: bool, if_true: T, if_false: T) -> T:
    """Return `if_true` when `condition` holds, otherwise `if_false`.

    Both values are already evaluated by the caller; nothing is deferred.
    The chosen object is returned as-is, not copied.

    Example:
        >>> select(True, 2, 6)
        2
    """

    return if_true if condition else if_false
