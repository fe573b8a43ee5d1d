"""
OpenGL 3.3 core backend on PyOpenGL. Needs a current context (see Window).
"""

import ctypes
from typing import Any, Optional, Sequence, Tuple

import numpy as np
from OpenGL import GL
from OpenGL.error import GLError

from orrery3d.errors import BackendError
from orrery3d.graphics.backend import GraphicsBackend
from orrery3d.utils.logger import logger

_MODES = {
    "triangles": GL.GL_TRIANGLES,
    "line_loop": GL.GL_LINE_LOOP,
}

_FLOAT_SIZE = 4


def gl_check_error(context: str = ""):
    """Log glGetError() results, if any."""
    err = GL.glGetError()
    while err != GL.GL_NO_ERROR:
        logger.error(f"OpenGL error 0x{err:04x} [{context}]")
        err = GL.glGetError()


class GLBackend(GraphicsBackend):
    """OpenGL backend."""

    def __init__(self):
        # handle -> kind, so release_resource() knows which glDelete* to call
        self._resources = {}
        self._uniform_cache = {}

    # -----------------------------------------------------------------
    def init_device(self, width: int, height: int) -> None:
        version = GL.glGetString(GL.GL_VERSION)
        logger.info(f"[GLBackend] OpenGL {version.decode() if version else '?'}")
        GL.glViewport(0, 0, width, height)
        gl_check_error("GLBackend.init_device")

    def resize(self, width: int, height: int) -> None:
        GL.glViewport(0, 0, width, height)

    # -----------------------------------------------------------------
    # Shaders
    # -----------------------------------------------------------------
    def _compile(self, stage, source: str, label: str):
        shader = GL.glCreateShader(stage)
        GL.glShaderSource(shader, source)
        GL.glCompileShader(shader)
        if not GL.glGetShaderiv(shader, GL.GL_COMPILE_STATUS):
            log = GL.glGetShaderInfoLog(shader).decode()
            GL.glDeleteShader(shader)
            raise BackendError(f"{label} shader compile error:\n{log}")
        return shader

    def create_program(self, vertex_src: str, fragment_src: str) -> Any:
        vert = self._compile(GL.GL_VERTEX_SHADER, vertex_src, "VERTEX")
        frag = self._compile(GL.GL_FRAGMENT_SHADER, fragment_src, "FRAGMENT")

        program = GL.glCreateProgram()
        GL.glAttachShader(program, vert)
        GL.glAttachShader(program, frag)
        GL.glLinkProgram(program)
        GL.glDeleteShader(vert)
        GL.glDeleteShader(frag)
        if not GL.glGetProgramiv(program, GL.GL_LINK_STATUS):
            log = GL.glGetProgramInfoLog(program).decode()
            GL.glDeleteProgram(program)
            raise BackendError(f"Program link error:\n{log}")

        self._resources[program] = "program"
        return program

    def use_program(self, program: Any) -> None:
        GL.glUseProgram(program)

    def _location(self, program, name: str) -> int:
        key = (program, name)
        if key not in self._uniform_cache:
            self._uniform_cache[key] = GL.glGetUniformLocation(program, name)
        return self._uniform_cache[key]

    def set_uniform(self, program: Any, name: str, kind: str, value: Any) -> None:
        loc = self._location(program, name)
        if loc < 0:
            return
        if kind == "mat4":
            GL.glUniformMatrix4fv(loc, 1, GL.GL_FALSE,
                                  np.asarray(value, dtype=np.float32))
        elif kind == "vec3":
            GL.glUniform3fv(loc, 1, np.asarray(value, dtype=np.float32))
        elif kind == "float":
            GL.glUniform1f(loc, float(value))
        elif kind == "int":
            GL.glUniform1i(loc, int(value))
        else:
            raise ValueError(f"Unsupported uniform kind: {kind}")

    # -----------------------------------------------------------------
    # Buffers
    # -----------------------------------------------------------------
    def create_buffer(self, data: bytes, usage: str = "vertex") -> Any:
        target = GL.GL_ELEMENT_ARRAY_BUFFER if usage == "index" else GL.GL_ARRAY_BUFFER
        buf = GL.glGenBuffers(1)
        GL.glBindBuffer(target, buf)
        GL.glBufferData(target, len(data), data, GL.GL_STATIC_DRAW)
        GL.glBindBuffer(target, 0)
        self._resources[buf] = "buffer"
        return buf

    def create_vertex_array(
        self,
        vertex_buffer: Any,
        index_buffer: Optional[Any],
        layout: Sequence[int],
    ) -> Any:
        vao = GL.glGenVertexArrays(1)
        GL.glBindVertexArray(vao)
        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, vertex_buffer)

        stride = sum(layout) * _FLOAT_SIZE
        offset = 0
        for location, components in enumerate(layout):
            GL.glEnableVertexAttribArray(location)
            GL.glVertexAttribPointer(location, components, GL.GL_FLOAT, GL.GL_FALSE,
                                     stride, ctypes.c_void_p(offset))
            offset += components * _FLOAT_SIZE

        if index_buffer is not None:
            GL.glBindBuffer(GL.GL_ELEMENT_ARRAY_BUFFER, index_buffer)

        GL.glBindVertexArray(0)
        self._resources[vao] = "vao"
        return vao

    def bind_vertex_array(self, vao: Any) -> None:
        GL.glBindVertexArray(vao)

    # -----------------------------------------------------------------
    # Frame
    # -----------------------------------------------------------------
    def clear(self, color: Tuple[float, float, float, float]) -> None:
        GL.glClearColor(*color)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT | GL.GL_DEPTH_BUFFER_BIT)

    def enable_depth_test(self, enable: bool) -> None:
        if enable:
            GL.glEnable(GL.GL_DEPTH_TEST)
            GL.glDepthFunc(GL.GL_LEQUAL)
        else:
            GL.glDisable(GL.GL_DEPTH_TEST)

    def draw(self, vertex_count: int, mode: str = "triangles") -> None:
        GL.glDrawArrays(_MODES[mode], 0, vertex_count)

    def draw_indexed(self, index_count: int, mode: str = "triangles") -> None:
        GL.glDrawElements(_MODES[mode], index_count, GL.GL_UNSIGNED_INT, None)

    def check_errors(self, context: str = "") -> None:
        gl_check_error(context)

    # -----------------------------------------------------------------
    # Release
    # -----------------------------------------------------------------
    def release_resource(self, resource: Any) -> None:
        kind = self._resources.pop(resource, None)
        if kind == "buffer":
            GL.glDeleteBuffers(1, [resource])
        elif kind == "vao":
            GL.glDeleteVertexArrays(1, [resource])
        elif kind == "program":
            GL.glDeleteProgram(resource)
            self._uniform_cache = {
                k: v for k, v in self._uniform_cache.items() if k[0] != resource
            }

    def shutdown(self) -> None:
        for resource in list(self._resources):
            try:
                self.release_resource(resource)
            except GLError as exc:
                logger.debug(f"[GLBackend] release failed: {exc}")
        logger.info("[GLBackend] Shut down")
