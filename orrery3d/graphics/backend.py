"""
Abstract interface for graphics backends.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Tuple

from orrery3d.errors import BackendError

# Primitive modes understood by draw()/draw_indexed().
PRIMITIVE_MODES = ("triangles", "line_loop")


class GraphicsBackend(ABC):
    """Base interface for graphics backends."""

    @abstractmethod
    def init_device(self, width: int, height: int) -> None:
        pass

    @abstractmethod
    def resize(self, width: int, height: int) -> None:
        """Set the viewport to the new framebuffer size."""
        pass

    @abstractmethod
    def create_program(self, vertex_src: str, fragment_src: str) -> Any:
        pass

    @abstractmethod
    def use_program(self, program: Any) -> None:
        pass

    @abstractmethod
    def set_uniform(self, program: Any, name: str, kind: str, value: Any) -> None:
        """`kind` is one of "mat4", "vec3", "float", "int"."""
        pass

    @abstractmethod
    def create_buffer(self, data: bytes, usage: str = "vertex") -> Any:
        pass

    @abstractmethod
    def create_vertex_array(
        self,
        vertex_buffer: Any,
        index_buffer: Optional[Any],
        layout: Sequence[int],
    ) -> Any:
        """Bind interleaved float attributes; `layout` gives components per attribute."""
        pass

    @abstractmethod
    def bind_vertex_array(self, vao: Any) -> None:
        pass

    @abstractmethod
    def clear(self, color: Tuple[float, float, float, float]) -> None:
        pass

    @abstractmethod
    def enable_depth_test(self, enable: bool) -> None:
        pass

    @abstractmethod
    def draw(self, vertex_count: int, mode: str = "triangles") -> None:
        pass

    @abstractmethod
    def draw_indexed(self, index_count: int, mode: str = "triangles") -> None:
        pass

    @abstractmethod
    def release_resource(self, resource: Any) -> None:
        pass

    @abstractmethod
    def shutdown(self) -> None:
        pass

    def check_errors(self, context: str = "") -> None:
        """Report pending driver errors; backends without an error queue do nothing."""
        pass


def select_backend(name: str = "gl") -> GraphicsBackend:
    """Select graphics backend by name."""
    name = name.lower()
    if name == "gl":
        from .gl_backend import GLBackend
        return GLBackend()
    raise BackendError(f"Unknown graphics backend: {name}")
