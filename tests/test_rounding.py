from __future__ import annotations

from patchvision.rounding import round_down, round_up


def test_round_up_to_multiple() -> None:
    assert round_up(13, 3) == 15
    assert round_up(12, 3) == 12
    assert round_up(1, 3) == 3
    assert round_up(0, 3) == 0


def test_round_down_to_multiple() -> None:
    assert round_down(13, 3) == 12
    assert round_down(12, 3) == 12
    assert round_down(2, 3) == 0
