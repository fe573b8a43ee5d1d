"""
Profiling context manager - measures how long a block takes.
"""

import time
from orrery3d.utils.logger import logger


class Profiler:
    """Times the wrapped block and logs it at DEBUG level."""
    def __init__(self, name: str, timer=time.perf_counter):
        self.name = name
        self._timer = timer
        self._start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self):
        self._start = self._timer()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (self._timer() - self._start) * 1000.0
        logger.debug(f"[Profiler] {self.name}: {self.elapsed_ms:.2f} ms")
