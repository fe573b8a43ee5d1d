# orrery3d/utils/__init__.py
"""
Utility package.

Exports:
    * logger      - the package-wide logging.Logger (level INFO)
    * Config      - JSON-backed settings
    * FPSCounter  - moving-average frame counter
    * Profiler    - timing context manager
"""

from .logger import logger
from .config import Config, DEFAULT_CONFIG
from .fps_counter import FPSCounter
from .profiler import Profiler

__all__ = ["logger", "Config", "DEFAULT_CONFIG", "FPSCounter", "Profiler"]
