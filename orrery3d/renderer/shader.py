# orrery3d/renderer/shader.py
import pathlib

from orrery3d.errors import BackendError
from orrery3d.utils.logger import logger


def uniform_kind(value) -> str:
    """Map a Python value to the backend uniform kind."""
    if isinstance(value, (bool, int)):
        return "int"
    if isinstance(value, float):
        return "float"
    if len(value) == 3:
        return "vec3"
    return "mat4"


class Shader:
    """GLSL program loaded from disk, recompiled when the files change."""

    def __init__(self, backend, vertex_path: str, fragment_path: str):
        self.backend = backend
        self.vertex_path = pathlib.Path(vertex_path).resolve()
        self.fragment_path = pathlib.Path(fragment_path).resolve()
        self.program = None
        self._last_mtime = (0.0, 0.0)
        self.compile()

    def _mtimes(self):
        return (self.vertex_path.stat().st_mtime, self.fragment_path.stat().st_mtime)

    def compile(self):
        v_src = self.vertex_path.read_text(encoding="utf-8")
        f_src = self.fragment_path.read_text(encoding="utf-8")
        program = self.backend.create_program(v_src, f_src)

        if self.program is not None:
            self.backend.release_resource(self.program)
        self.program = program
        self._last_mtime = self._mtimes()

    def reload_if_needed(self) -> bool:
        """Recompile after an on-disk edit; a broken edit keeps the old program."""
        if not self.vertex_path.exists() or not self.fragment_path.exists():
            return False
        if self._mtimes() == self._last_mtime:
            return False
        logger.info("[Shader] Change detected, recompiling...")
        try:
            self.compile()
        except BackendError as exc:
            logger.error(f"[Shader] {exc}")
            self._last_mtime = self._mtimes()
            return False
        return True

    def use(self):
        self.backend.use_program(self.program)

    def set_uniform(self, name: str, value, kind: str = None):
        self.backend.set_uniform(self.program, name, kind or uniform_kind(value), value)

    def set_uniforms(self, values: dict):
        for name, value in values.items():
            self.set_uniform(name, value)

    def release(self):
        if self.program is not None:
            self.backend.release_resource(self.program)
            self.program = None
