"""
Geometry generators producing numpy vertex/normal/index arrays.
"""

from orrery3d.mesh.primitives import (
    Geometry,
    sphere_geometry,
    icosahedron_geometry,
    compute_vertex_normals,
    circle_points,
)

__all__ = [
    "Geometry",
    "sphere_geometry",
    "icosahedron_geometry",
    "compute_vertex_normals",
    "circle_points",
]
