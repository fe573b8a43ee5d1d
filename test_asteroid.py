import numpy as np

from orrery3d.mesh.primitives import icosahedron_geometry
from orrery3d.solar.asteroid import create_asteroid_mesh

SIZE = 0.2
COLOR = 0xADD8E6


def test_same_seed_same_rock():
    a = create_asteroid_mesh(COLOR, SIZE, rng=np.random.default_rng(7))
    b = create_asteroid_mesh(COLOR, SIZE, rng=np.random.default_rng(7))
    assert np.array_equal(a.vertices, b.vertices)
    assert np.array_equal(a.normals, b.normals)


def test_different_seed_different_rock():
    a = create_asteroid_mesh(COLOR, SIZE, rng=np.random.default_rng(1))
    b = create_asteroid_mesh(COLOR, SIZE, rng=np.random.default_rng(2))
    assert not np.array_equal(a.vertices, b.vertices)


def test_displacement_bounded_per_axis():
    base = icosahedron_geometry(SIZE, 1).vertices
    rock = create_asteroid_mesh(COLOR, SIZE, rng=np.random.default_rng(3))
    offsets = rock.vertices.astype(np.float64) - base
    assert np.abs(offsets).max() <= 0.05 * SIZE + 1e-6
    mean_abs = np.abs(offsets).mean(axis=0)
    assert np.all(mean_abs >= 0) and np.all(mean_abs <= 0.05 * SIZE)
    assert np.abs(offsets).max() > 0


def test_rock_topology_and_normals():
    rock = create_asteroid_mesh(COLOR, SIZE, rng=np.random.default_rng(4))
    assert rock.vertices.shape == (42, 3)
    assert len(rock.indices) == 80 * 3
    assert np.allclose(np.linalg.norm(rock.normals, axis=1), 1.0, atol=1e-5)
    # normals come from the displaced positions, not the undeformed sphere
    radial = rock.vertices / np.linalg.norm(rock.vertices, axis=1)[:, None]
    assert not np.allclose(rock.normals, radial, atol=1e-4)


def test_rock_material_is_flat_shaded():
    rock = create_asteroid_mesh(COLOR, SIZE, rng=np.random.default_rng(5), name="Halley")
    assert rock.name == "Halley"
    assert rock.material.flat_shading is True
    assert rock.material.shininess == 5.0


def test_unseeded_rocks_vary():
    a = create_asteroid_mesh(COLOR, SIZE)
    b = create_asteroid_mesh(COLOR, SIZE)
    assert not np.array_equal(a.vertices, b.vertices)
