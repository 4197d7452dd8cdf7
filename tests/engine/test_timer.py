"""
Spin & Solve - Round Timer Tests
"""

import pytest

from spin_solve.engine.timer import RoundTimer


class TestRoundTimer:
    def test_initial(self):
        timer = RoundTimer(120)
        assert timer.remaining == 120
        assert not timer.is_expired

    def test_negative_start_raises(self):
        with pytest.raises(ValueError):
            RoundTimer(-1)

    def test_tick(self):
        timer = RoundTimer(3)
        assert timer.tick() == 2
        assert timer.tick() == 1
        assert timer.tick() == 0
        assert timer.is_expired

    def test_tick_clamped(self):
        timer = RoundTimer(0)
        assert timer.tick() == 0

    def test_penalize(self):
        timer = RoundTimer(30)
        assert timer.penalize(10) == 20

    def test_penalize_clamped(self):
        timer = RoundTimer(4)
        assert timer.penalize(10) == 0
        assert timer.is_expired

    def test_reset(self):
        timer = RoundTimer(1)
        timer.reset(180)
        assert timer.remaining == 180

    @pytest.mark.parametrize("seconds, expected", [
        (180, "3:00"),
        (120, "2:00"),
        (65, "1:05"),
        (9, "0:09"),
        (0, "0:00"),
    ])
    def test_formatted(self, seconds, expected):
        assert RoundTimer(seconds).formatted() == expected
        assert str(RoundTimer(seconds)) == expected

    @pytest.mark.parametrize("seconds, low", [(12, False), (11, True), (0, True), (120, False)])
    def test_running_low(self, seconds, low):
        assert RoundTimer(seconds).is_running_low is low
