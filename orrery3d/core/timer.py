"""
Frame clock with an injectable time source.
"""

import time


class Clock:
    """Measures seconds between consecutive `get_delta()` calls."""
    def __init__(self, time_source=time.perf_counter):
        self._now = time_source
        self._last = None
        self.delta = 0.0
        self.elapsed = 0.0

    def get_delta(self) -> float:
        """Seconds since the previous call; 0.0 on the first call.

        A time source that steps backwards yields 0.0, never a negative delta.
        """
        now = self._now()
        if self._last is None:
            self.delta = 0.0
        else:
            self.delta = max(0.0, now - self._last)
        self._last = now
        self.elapsed += self.delta
        return self.delta
