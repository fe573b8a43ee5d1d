"""
Irregular rock mesh: a once-subdivided icosahedron with jittered vertices.
"""

import numpy as np

from orrery3d.assets.material import PhongMaterial
from orrery3d.mesh.primitives import icosahedron_geometry, compute_vertex_normals
from orrery3d.scene.mesh import Mesh

# Per-axis jitter spans 10% of the size, centered on zero.
JITTER_AMPLITUDE = 0.1


def jitter_vertices(vertices: np.ndarray, size: float, rng: np.random.Generator) -> np.ndarray:
    offsets = (rng.random(vertices.shape) - 0.5) * JITTER_AMPLITUDE * size
    return (vertices + offsets).astype(np.float32)


def create_asteroid_mesh(color: int, size: float,
                         rng: np.random.Generator = None,
                         name: str = "Asteroid") -> Mesh:
    """Build a flat-shaded rock. Pass a seeded `rng` for a reproducible shape."""
    if rng is None:
        rng = np.random.default_rng()

    geometry = icosahedron_geometry(size, detail=1)
    vertices = jitter_vertices(geometry.vertices, size, rng)
    normals = compute_vertex_normals(vertices, geometry.indices)

    material = PhongMaterial(color=color, flat_shading=True, shininess=5)
    return Mesh(vertices, normals=normals, indices=geometry.indices,
                material=material, name=name)
