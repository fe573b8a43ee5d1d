"""
Application state: everything the frame loop and the resize handler
operate on, built once at startup.
"""

from dataclasses import dataclass

import numpy as np

from orrery3d.controls.orbit_controls import OrbitControls
from orrery3d.math.vec3 import Vec3
from orrery3d.scene.camera import PerspectiveCamera
from orrery3d.scene.scene import Scene
from orrery3d.solar.builder import Body, BodyRegistry, add_lights, build_solar_system
from orrery3d.solar.catalog import SOLAR_DATA, TRACKED_BODY
from orrery3d.utils.config import DEFAULT_CONFIG
from orrery3d.utils.logger import logger


@dataclass
class AppState:
    scene: Scene
    camera: PerspectiveCamera
    controls: OrbitControls
    renderer: object
    registry: BodyRegistry
    tracked: Body


def create_camera(width: int, height: int, camera_cfg: dict) -> PerspectiveCamera:
    camera = PerspectiveCamera(
        fov=camera_cfg["fov"],
        aspect=width / height,
        near=camera_cfg["near"],
        far=camera_cfg["far"],
    )
    camera.position = Vec3(*camera_cfg["position"])
    return camera


def create_controls(camera: PerspectiveCamera, camera_cfg: dict) -> OrbitControls:
    return OrbitControls(
        camera,
        enable_damping=True,
        damping_factor=camera_cfg["damping_factor"],
        min_distance=camera_cfg["min_distance"],
        max_distance=camera_cfg["max_distance"],
    )


def create_app(renderer, width: int, height: int,
               camera_cfg: dict = None,
               catalog=SOLAR_DATA,
               tracked_name: str = TRACKED_BODY,
               rng: np.random.Generator = None) -> AppState:
    """Build scene, camera and controls; aim the controls at the tracked body."""
    cfg = dict(DEFAULT_CONFIG["camera"])
    if camera_cfg:
        cfg.update(camera_cfg)

    scene = Scene()
    add_lights(scene)
    registry = build_solar_system(scene, catalog, tracked_name, rng=rng)
    tracked = registry.get(tracked_name)

    camera = create_camera(width, height, cfg)
    scene.add_child(camera)
    controls = create_controls(camera, cfg)
    controls.target.copy_from(tracked.mesh.get_world_position())
    camera.look_at(controls.target)

    logger.info(f"[Scene] Built {len(registry)} bodies: {', '.join(registry.names())}")
    return AppState(scene, camera, controls, renderer, registry, tracked)


def on_window_resize(state: AppState, width: int, height: int) -> None:
    """Match the projection and the viewport to the new framebuffer size."""
    if width <= 0 or height <= 0:
        logger.debug(f"[Engine] Ignoring resize to {width}x{height}")
        return
    state.camera.aspect = width / height
    state.camera.update_projection_matrix()
    state.renderer.set_size(width, height)
