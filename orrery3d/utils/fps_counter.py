"""
Frame-rate counter averaged over the last N frames.
"""

from collections import deque


class FPSCounter:
    """Moving-average FPS over the last `window_size` frame deltas."""
    def __init__(self, window_size: int = 30):
        self._times = deque(maxlen=window_size)
        self.fps = 0.0

    def tick(self, dt: float) -> float:
        """Record one frame that took `dt` seconds, return the current FPS.

        Frames with no measurable duration (the first clock read) are skipped.
        """
        if dt > 0:
            self._times.append(dt)
        total = sum(self._times)
        self.fps = len(self._times) / total if total > 0 else 0.0
        return self.fps
