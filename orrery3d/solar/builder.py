"""
Scene construction: one sphere + orbit pivot per catalog entry, a
static ring per orbiting body, and the decorative rock.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List

import numpy as np

from orrery3d.assets.material import BasicMaterial, PhongMaterial, LineMaterial
from orrery3d.errors import BodyNotFoundError, CatalogError
from orrery3d.mesh.primitives import sphere_geometry, circle_points
from orrery3d.scene.light import AmbientLight, PointLight
from orrery3d.scene.mesh import Mesh, LineLoop
from orrery3d.scene.node import Node
from orrery3d.solar.asteroid import create_asteroid_mesh
from orrery3d.solar.catalog import (
    BodyDescriptor,
    DECORATIVE_BODY,
    DECORATIVE_OFFSET,
    SOLAR_DATA,
    SOLAR_SYSTEM_SCALE,
    TRACKED_BODY,
    validate_catalog,
)
from orrery3d.utils.logger import logger

SPHERE_SEGMENTS = 32
RING_SEGMENTS = 64
RING_COLOR = 0x444444


@dataclass(eq=False)
class Body:
    descriptor: BodyDescriptor
    mesh: Mesh
    pivot: Node
    is_decorative: bool = False

    @property
    def name(self) -> str:
        return self.descriptor.name


class BodyRegistry:
    """Append-only, insertion-ordered collection of bodies."""

    def __init__(self):
        self._bodies: List[Body] = []

    def append(self, body: Body) -> Body:
        self._bodies.append(body)
        return body

    def get(self, name: str) -> Body:
        for body in self._bodies:
            if body.name == name:
                return body
        raise BodyNotFoundError(name)

    def names(self):
        return [body.name for body in self._bodies]

    def __contains__(self, name) -> bool:
        return any(body.name == name for body in self._bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self._bodies)

    def __len__(self) -> int:
        return len(self._bodies)


def create_body_mesh(desc: BodyDescriptor) -> Mesh:
    geometry = sphere_geometry(desc.radius * SOLAR_SYSTEM_SCALE,
                               SPHERE_SEGMENTS, SPHERE_SEGMENTS)
    if desc.emissive_color is not None:
        material = BasicMaterial(color=desc.base_color, emissive=desc.emissive_color)
    else:
        material = PhongMaterial(color=desc.base_color, specular=0x333333, shininess=15)
    return Mesh(geometry.vertices, normals=geometry.normals,
                indices=geometry.indices, material=material, name=desc.name)


def create_orbit_ring(distance: float, segments: int = RING_SEGMENTS,
                      name: str = "OrbitRing") -> LineLoop:
    return LineLoop(circle_points(distance, segments),
                    material=LineMaterial(RING_COLOR), name=name)


def create_body(scene: Node, desc: BodyDescriptor, rng: np.random.Generator) -> Body:
    mesh = create_body_mesh(desc)
    pivot = Node(f"{desc.name}Orbit")
    # Random start phase so bodies do not line up.
    pivot.rotation.y = rng.uniform(0.0, 2.0 * math.pi)
    mesh.position.x = desc.orbital_distance
    pivot.add_child(mesh)
    scene.add_child(pivot)
    return Body(desc, mesh, pivot)


def attach_decorative_body(tracked: Body, rng: np.random.Generator) -> Body:
    """Hang the rock on the tracked body's pivot, beyond the body itself."""
    desc = DECORATIVE_BODY
    mesh = create_asteroid_mesh(desc.base_color, desc.radius, rng=rng, name=desc.name)
    mesh.position.x = tracked.descriptor.orbital_distance + DECORATIVE_OFFSET
    tracked.pivot.add_child(mesh)
    logger.info(f"[Scene] One meteor named '{desc.name}' added orbiting with "
                f"{tracked.name}'s group.")
    return Body(desc, mesh, tracked.pivot, is_decorative=True)


def add_lights(scene: Node) -> None:
    scene.add_child(AmbientLight(0x404040, 0.8))
    scene.add_child(PointLight(0xFFFFFF, 1.5, distance=500, name="SunLight"))


def build_solar_system(scene: Node,
                       catalog: Iterable[BodyDescriptor] = SOLAR_DATA,
                       tracked_name: str = TRACKED_BODY,
                       rng: np.random.Generator = None) -> BodyRegistry:
    """Populate `scene` and return the registry of bodies.

    Raises CatalogError for an invalid catalog and BodyNotFoundError when
    `tracked_name` is not in it; nothing is added to the scene in either case.
    """
    catalog = tuple(catalog)
    validate_catalog(catalog)
    names = {desc.name for desc in catalog}
    if DECORATIVE_BODY.name in names:
        raise CatalogError(f"body name {DECORATIVE_BODY.name!r} is taken by the "
                           "decorative rock")
    if tracked_name not in names:
        raise BodyNotFoundError(tracked_name)
    if rng is None:
        rng = np.random.default_rng()

    registry = BodyRegistry()
    for desc in catalog:
        registry.append(create_body(scene, desc, rng))
        if desc.orbital_distance > 0:
            scene.add_child(create_orbit_ring(desc.orbital_distance,
                                              name=f"{desc.name}OrbitRing"))

    registry.append(attach_decorative_body(registry.get(tracked_name), rng))
    return registry
