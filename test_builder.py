import math

import numpy as np
import pytest

from orrery3d.assets.material import BasicMaterial, PhongMaterial, LineMaterial
from orrery3d.errors import BodyNotFoundError, CatalogError
from orrery3d.scene import Scene, LineLoop, AmbientLight, PointLight
from orrery3d.solar.builder import build_solar_system, BodyRegistry
from orrery3d.solar.catalog import BodyDescriptor, SOLAR_DATA, validate_catalog

SUN = SOLAR_DATA[0]
EARTH = SOLAR_DATA[1]


@pytest.fixture
def built(rng):
    scene = Scene()
    registry = build_solar_system(scene, rng=rng)
    return scene, registry


def test_one_body_per_entry_plus_decorative(built):
    _, registry = built
    assert registry.names() == ["Sun", "Earth", "Halley"]
    assert [b.is_decorative for b in registry] == [False, False, True]


def test_materials(built):
    _, registry = built
    assert isinstance(registry.get("Sun").mesh.material, BasicMaterial)
    assert isinstance(registry.get("Earth").mesh.material, PhongMaterial)
    earth_mat = registry.get("Earth").mesh.material
    assert earth_mat.shininess == 15.0
    assert earth_mat.specular == pytest.approx((0x33 / 255,) * 3)


def test_sphere_radius_is_scaled(built):
    _, registry = built
    sun = registry.get("Sun").mesh
    assert np.allclose(np.linalg.norm(sun.vertices, axis=1), 3.5 * 0.5, atol=1e-5)


def test_meshes_offset_under_own_pivots(built):
    scene, registry = built
    sun, earth = registry.get("Sun"), registry.get("Earth")
    assert sun.mesh.parent is sun.pivot
    assert earth.mesh.parent is earth.pivot
    assert sun.pivot.parent is scene and earth.pivot.parent is scene
    assert sun.pivot is not earth.pivot
    assert earth.mesh.position.x == 11.0
    assert sun.mesh.position.x == 0.0
    for body in (sun, earth):
        assert 0.0 <= body.pivot.rotation.y < 2.0 * math.pi


def test_decorative_body_shares_tracked_pivot(built):
    _, registry = built
    earth, halley = registry.get("Earth"), registry.get("Halley")
    assert halley.pivot is earth.pivot
    assert halley.mesh.parent is earth.pivot
    assert halley.mesh.position.x == pytest.approx(11.0 + 1.8)
    assert halley.descriptor.orbital_distance == 0


def test_rings_only_for_orbiting_bodies(built):
    scene, _ = built
    rings = [n for n in scene.traverse() if isinstance(n, LineLoop)]
    assert len(rings) == 1
    ring = rings[0]
    assert ring.parent is scene
    assert ring.name == "EarthOrbitRing"
    assert len(ring.vertices) == 64
    assert isinstance(ring.material, LineMaterial)
    assert np.allclose(np.linalg.norm(ring.vertices, axis=1), 11.0, atol=1e-5)
    assert np.all(ring.vertices[:, 1] == 0)


def test_seed_fixes_start_phases():
    phases = []
    for _ in range(2):
        registry = build_solar_system(Scene(), rng=np.random.default_rng(99))
        phases.append([b.pivot.rotation.y for b in registry])
    assert phases[0] == phases[1]


def test_missing_tracked_body_fails_loudly():
    scene = Scene()
    with pytest.raises(BodyNotFoundError) as info:
        build_solar_system(scene, tracked_name="Mars")
    assert info.value.name == "Mars"
    assert scene.children == []


def test_registry_lookup_miss_is_key_error():
    registry = BodyRegistry()
    assert "Earth" not in registry
    with pytest.raises(KeyError):
        registry.get("Earth")


def test_custom_catalog_builds_ring_per_orbit(rng):
    catalog = SOLAR_DATA + (
        BodyDescriptor("Mars", radius=0.5, orbital_distance=16, base_color=0xC1440E,
                       orbit_speed=0.01, spin_speed=0.02),
    )
    scene = Scene()
    registry = build_solar_system(scene, catalog, rng=rng)
    assert registry.names() == ["Sun", "Earth", "Mars", "Halley"]
    rings = [n.name for n in scene.traverse() if isinstance(n, LineLoop)]
    assert rings == ["EarthOrbitRing", "MarsOrbitRing"]


@pytest.mark.parametrize("catalog", [
    (SUN, SUN),
    (SUN, BodyDescriptor("Sun2", 1.0, 0, 0xFFFFFF)),
    (BodyDescriptor("Earth", 1.0, 11, 0xFFFFFF),),
    (SUN, BodyDescriptor("Rock", 0.0, 5, 0xFFFFFF)),
    (SUN, BodyDescriptor("Back", 1.0, -5, 0xFFFFFF)),
    (SUN, BodyDescriptor("Slow", 1.0, 5, 0xFFFFFF, orbit_speed=-1.0)),
])
def test_invalid_catalogs(catalog):
    with pytest.raises(CatalogError):
        validate_catalog(catalog)


def test_builder_rejects_invalid_catalog_before_building():
    scene = Scene()
    with pytest.raises(CatalogError):
        build_solar_system(scene, (SUN, SUN))
    assert scene.children == []


def test_catalog_cannot_reuse_decorative_name(rng):
    catalog = SOLAR_DATA + (
        BodyDescriptor("Halley", radius=0.3, orbital_distance=20, base_color=0xFFFFFF,
                       orbit_speed=0.01, spin_speed=0.01),
    )
    scene = Scene()
    with pytest.raises(CatalogError, match="Halley"):
        build_solar_system(scene, catalog, rng=rng)
    assert scene.children == []


def test_app_adds_lighting(app_state):
    lights = app_state.scene.lights()
    ambient = [n for n in lights if isinstance(n, AmbientLight)]
    points = [n for n in lights if isinstance(n, PointLight)]
    assert len(ambient) == 1 and ambient[0].intensity == pytest.approx(0.8)
    assert len(points) == 1 and points[0].distance == 500.0
    assert np.allclose(points[0].get_world_position().as_np(), 0.0)


def test_app_targets_tracked_body(app_state):
    earth = app_state.registry.get("Earth")
    assert app_state.tracked is earth
    assert app_state.controls.target == earth.mesh.get_world_position()
    assert np.allclose(app_state.camera.position.as_np(), [0.0, 30.0, 60.0])
    assert app_state.camera.aspect == pytest.approx(800 / 600)
