"""
The solar-system scene: catalog, builder, procedural rock, animation
and application state.
"""

from orrery3d.solar.catalog import (
    BodyDescriptor,
    SOLAR_DATA,
    SOLAR_SYSTEM_SCALE,
    TRACKED_BODY,
    DECORATIVE_BODY,
    DECORATIVE_OFFSET,
    validate_catalog,
)
from orrery3d.solar.asteroid import create_asteroid_mesh
from orrery3d.solar.builder import Body, BodyRegistry, build_solar_system
from orrery3d.solar.animation import AnimationDriver, SPEED_MULTIPLIER, run_loop, stop_after
from orrery3d.solar.app import AppState, create_app, on_window_resize

__all__ = [
    "BodyDescriptor",
    "SOLAR_DATA",
    "SOLAR_SYSTEM_SCALE",
    "TRACKED_BODY",
    "DECORATIVE_BODY",
    "DECORATIVE_OFFSET",
    "validate_catalog",
    "create_asteroid_mesh",
    "Body",
    "BodyRegistry",
    "build_solar_system",
    "AnimationDriver",
    "SPEED_MULTIPLIER",
    "run_loop",
    "stop_after",
    "AppState",
    "create_app",
    "on_window_resize",
]
