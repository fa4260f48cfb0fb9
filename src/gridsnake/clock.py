from __future__ import annotations

from . import config


class TickAccumulator:
    """Turns real elapsed time into a whole number of fixed-rate update ticks.

    The render loop runs as fast as its own frame cap allows; the snake
    moves ``ups`` cells per second regardless.
    """

    def __init__(self, ups: int = config.UPS, max_catch_up: int = config.MAX_CATCH_UP):
        if ups <= 0:
            raise ValueError(f"ups must be positive, got {ups}")
        if max_catch_up < 1:
            raise ValueError(f"max_catch_up must be at least 1, got {max_catch_up}")
        self.step_ms = 1000.0 / ups
        self.max_catch_up = max_catch_up
        self.pending_ms = 0.0

    def advance(self, elapsed_ms: float) -> int:
        self.pending_ms += max(0.0, elapsed_ms)
        ticks = int(self.pending_ms // self.step_ms)
        if ticks > self.max_catch_up:
            # Drop the backlog after a stall instead of replaying it.
            ticks = self.max_catch_up
            self.pending_ms = 0.0
        else:
            self.pending_ms -= ticks * self.step_ms
        return ticks
