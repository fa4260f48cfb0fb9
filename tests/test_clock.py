import pytest

from gridsnake.clock import TickAccumulator


class TestTickAccumulator:
    def test_fixed_rate(self):
        ticker = TickAccumulator(ups=10)
        assert ticker.advance(50) == 0
        assert ticker.advance(50) == 1
        assert ticker.advance(250) == 2
        assert ticker.advance(50) == 1

    def test_independent_of_frame_rate(self):
        """One second at 60 fps or at 20 fps gives the same number of ticks."""
        fast = TickAccumulator(ups=10)
        slow = TickAccumulator(ups=10)
        fast_ticks = sum(fast.advance(1000 / 64) for _ in range(64))
        slow_ticks = sum(slow.advance(50) for _ in range(20))
        assert fast_ticks == slow_ticks == 10

    def test_catch_up_is_capped(self):
        ticker = TickAccumulator(ups=10, max_catch_up=3)
        assert ticker.advance(5000) == 3
        assert ticker.advance(50) == 0

    def test_negative_elapsed_is_ignored(self):
        ticker = TickAccumulator(ups=10)
        assert ticker.advance(-100) == 0
        assert ticker.advance(100) == 1

    @pytest.mark.parametrize("ups", [0, -5])
    def test_rejects_non_positive_rate(self, ups):
        with pytest.raises(ValueError):
            TickAccumulator(ups=ups)
