# -*- coding: utf-8 -*-
"""
conftest.py - a recording mock backend covering the whole render path.
No window or OpenGL context is needed: the renderer and meshes talk to
MockBackend, which only logs what was asked of it.
"""

from typing import Any, Optional, Sequence, Tuple

import numpy as np
import pytest

from orrery3d.errors import BackendError
from orrery3d.graphics.backend import GraphicsBackend, PRIMITIVE_MODES
from orrery3d.renderer.pipelines.forward import ForwardRenderer
from orrery3d.solar.app import create_app


class MockBackend(GraphicsBackend):
    """
    Implements GraphicsBackend by recording every call in `self.calls`.
    Handles are plain increasing integers.
    """

    def __init__(self) -> None:
        # (method_name, args, kwargs)
        self.calls: list[Tuple[str, Tuple[Any, ...], dict]] = []
        self.uniforms: dict = {}
        self.live: set = set()
        self.fail_compile = False
        self._next_handle = 1

    def _record(self, name: str, *a, **kw) -> None:
        self.calls.append((name, a, kw))

    def _handle(self) -> int:
        h = self._next_handle
        self._next_handle += 1
        self.live.add(h)
        return h

    # -----------------------------------------------------------------
    def init_device(self, width: int, height: int) -> None:
        self._record("init_device", width, height)

    def resize(self, width: int, height: int) -> None:
        self._record("resize", width, height)

    def create_program(self, vertex_src: str, fragment_src: str) -> Any:
        self._record("create_program", vertex_src, fragment_src)
        if self.fail_compile:
            raise BackendError("mock compile failure")
        return self._handle()

    def use_program(self, program: Any) -> None:
        self._record("use_program", program)

    def set_uniform(self, program: Any, name: str, kind: str, value: Any) -> None:
        self._record("set_uniform", program, name, kind, value)
        self.uniforms[name] = (kind, value)

    def create_buffer(self, data: bytes, usage: str = "vertex") -> Any:
        self._record("create_buffer", data, usage)
        return self._handle()

    def create_vertex_array(
        self,
        vertex_buffer: Any,
        index_buffer: Optional[Any],
        layout: Sequence[int],
    ) -> Any:
        self._record("create_vertex_array", vertex_buffer, index_buffer, tuple(layout))
        return self._handle()

    def bind_vertex_array(self, vao: Any) -> None:
        self._record("bind_vertex_array", vao)

    def clear(self, color: Tuple[float, float, float, float]) -> None:
        self._record("clear", color)

    def enable_depth_test(self, enable: bool) -> None:
        self._record("enable_depth_test", enable)

    def draw(self, vertex_count: int, mode: str = "triangles") -> None:
        assert mode in PRIMITIVE_MODES
        self._record("draw", vertex_count, mode)

    def draw_indexed(self, index_count: int, mode: str = "triangles") -> None:
        assert mode in PRIMITIVE_MODES
        self._record("draw_indexed", index_count, mode)

    def release_resource(self, resource: Any) -> None:
        self._record("release_resource", resource)
        self.live.discard(resource)

    def shutdown(self) -> None:
        self._record("shutdown")
        self.live.clear()

    # -----------------------------------------------------------------
    # helpers for assertions
    # -----------------------------------------------------------------
    def called(self, name: str) -> bool:
        """True if method `name` was called at least once."""
        return any(call[0] == name for call in self.calls)

    def count(self, name: str) -> int:
        """How many times method `name` was called."""
        return sum(1 for call in self.calls if call[0] == name)

    def args_of(self, name: str) -> list:
        return [call[1] for call in self.calls if call[0] == name]

    def reset_calls(self) -> None:
        self.calls.clear()


@pytest.fixture
def mock_backend() -> MockBackend:
    return MockBackend()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def renderer(mock_backend) -> ForwardRenderer:
    return ForwardRenderer(mock_backend, 800, 600)


@pytest.fixture
def app_state(renderer, rng):
    return create_app(renderer, 800, 600, rng=rng)
