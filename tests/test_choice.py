from __future__ import annotations

import pytest

from oneliners import select


def test_select_concrete_scenario() -> None:
    assert select(True, 2, 6) == 2
    assert select(False, 2, 6) == 6


@pytest.mark.parametrize(
    ("a", "b"),
    [
        (1, 2),
        ("yes", "no"),
        ([1, 2], [3]),
        (None, None),
        (1.5, -0.0),
    ],
)
def test_select_picks_branch_for_any_type(a: object, b: object) -> None:
    assert select(True, a, b) == a
    assert select(False, a, b) == b


def test_select_returns_the_same_object() -> None:
    a = {"k": 1}
    b = {"k": 2}
    assert select(True, a, b) is a
    assert select(False, a, b) is b


def test_select_uses_truthiness() -> None:
    assert select(0, "a", "b") == "b"
    assert select("", "a", "b") == "b"
    assert select([0], "a", "b") == "a"
