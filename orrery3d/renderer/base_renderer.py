# -*- coding: utf-8 -*-
"""
Abstract base renderer.
"""

from abc import ABC, abstractmethod


class BaseRenderer(ABC):
    @abstractmethod
    def render(self, scene, camera) -> None:
        """Draw one frame."""
        pass

    @abstractmethod
    def set_size(self, w: int, h: int) -> None:
        """Adopt a new framebuffer size in pixels."""
        pass
