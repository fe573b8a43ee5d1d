"""
Core services: frame clock and input.
"""

from orrery3d.core.timer import Clock

__all__ = ["Clock"]
