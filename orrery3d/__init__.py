"""
Orrery3D - an animated solar-system scene on a small Python 3D engine.

The windowed `Engine` lives in `orrery3d.engine` and is not imported here,
so the scene, math and animation modules load without GLFW or OpenGL.
"""

from orrery3d.utils import logger
from orrery3d.errors import Orrery3DError, CatalogError, BodyNotFoundError, BackendError
from orrery3d.scene import (
    Scene, PerspectiveCamera, AmbientLight, PointLight, Mesh, LineLoop, Node
)
from orrery3d.math import Vec3, Mat4
from orrery3d.controls import OrbitControls
from orrery3d.renderer import ForwardRenderer
from orrery3d.solar import (
    AnimationDriver,
    AppState,
    BodyDescriptor,
    SOLAR_DATA,
    build_solar_system,
    create_app,
    on_window_resize,
    run_loop,
)

__version__ = "1.0.0"

__all__ = [
    "logger",
    "Orrery3DError",
    "CatalogError",
    "BodyNotFoundError",
    "BackendError",
    "Scene",
    "PerspectiveCamera",
    "AmbientLight",
    "PointLight",
    "Mesh",
    "LineLoop",
    "Node",
    "Vec3",
    "Mat4",
    "OrbitControls",
    "ForwardRenderer",
    "AnimationDriver",
    "AppState",
    "BodyDescriptor",
    "SOLAR_DATA",
    "build_solar_system",
    "create_app",
    "on_window_resize",
    "run_loop",
]
