"""
Graphics layer. The OpenGL backend is imported lazily by
`select_backend("gl")` so that importing the package needs no GL driver.
"""

from orrery3d.graphics.backend import GraphicsBackend, PRIMITIVE_MODES, select_backend

__all__ = [
    "GraphicsBackend",
    "PRIMITIVE_MODES",
    "select_backend",
]
