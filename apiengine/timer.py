"""Frame timing based on a monotonic high-resolution clock."""

import time


class EngineTimer:
    """Measures the time elapsed between successive checks."""

    def __init__(self, clock=time.perf_counter):
        self._clock = clock
        self._prev = clock()
        self._delta = 0.0

    @property
    def delta_time(self):
        """Seconds between the last two checks."""
        return self._delta

    def time_start(self):
        """Restart measuring from now."""
        self._prev = self._clock()

    def time_check(self):
        current = self._clock()
        self._delta = current - self._prev
        self._prev = current

    def end(self):
        """Check the clock and return the elapsed seconds."""
        self.time_check()
        return self._delta