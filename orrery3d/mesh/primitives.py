# orrery3d/mesh/primitives.py
# ---------------------------------------------------------------
# Procedural primitives. Every generator returns float32 (N, 3)
# positions/normals and a flat uint32 index array (3 per triangle).
# ---------------------------------------------------------------
from typing import NamedTuple

import numpy as np


class Geometry(NamedTuple):
    vertices: np.ndarray
    normals: np.ndarray
    indices: np.ndarray


def sphere_geometry(radius: float = 1.0,
                    width_segments: int = 32,
                    height_segments: int = 32) -> Geometry:
    """UV sphere; a seam column of vertices is duplicated at u = 1."""
    if width_segments < 3 or height_segments < 2:
        raise ValueError("sphere needs at least 3 x 2 segments")

    u = np.linspace(0.0, 1.0, width_segments + 1)
    v = np.linspace(0.0, 1.0, height_segments + 1)
    uu, vv = np.meshgrid(u, v)          # rows = rings from +Y to -Y

    phi = uu * 2.0 * np.pi
    theta = vv * np.pi
    dirs = np.stack([
        -np.cos(phi) * np.sin(theta),
        np.cos(theta),
        np.sin(phi) * np.sin(theta),
    ], axis=-1).reshape((-1, 3))

    stride = width_segments + 1
    iy, ix = np.meshgrid(np.arange(height_segments),
                         np.arange(width_segments), indexing="ij")
    a = iy * stride + ix + 1
    b = iy * stride + ix
    c = (iy + 1) * stride + ix
    d = (iy + 1) * stride + ix + 1

    # The top ring collapses (a, b, d) and the bottom ring (b, c, d).
    upper = np.stack([a, b, d], axis=-1)[1:]
    lower = np.stack([b, c, d], axis=-1)[:-1]
    indices = np.concatenate([upper.reshape((-1, 3)), lower.reshape((-1, 3))])

    return Geometry(
        vertices=(dirs * radius).astype(np.float32),
        normals=dirs.astype(np.float32),
        indices=indices.astype(np.uint32).ravel(),
    )


_T = (1.0 + 5.0 ** 0.5) / 2.0

_ICO_VERTICES = np.array([
    [-1, _T, 0], [1, _T, 0], [-1, -_T, 0], [1, -_T, 0],
    [0, -1, _T], [0, 1, _T], [0, -1, -_T], [0, 1, -_T],
    [_T, 0, -1], [_T, 0, 1], [-_T, 0, -1], [-_T, 0, 1],
], dtype=np.float64)

_ICO_FACES = np.array([
    [0, 11, 5], [0, 5, 1], [0, 1, 7], [0, 7, 10], [0, 10, 11],
    [1, 5, 9], [5, 11, 4], [11, 10, 2], [10, 7, 6], [7, 1, 8],
    [3, 9, 4], [3, 4, 2], [3, 2, 6], [3, 6, 8], [3, 8, 9],
    [4, 9, 5], [2, 4, 11], [6, 2, 10], [8, 6, 7], [9, 8, 1],
], dtype=np.int64)


def _subdivide(vertices: list, faces: list) -> list:
    """Split every triangle into four, sharing edge midpoints."""
    cache = {}

    def midpoint(i, j):
        key = (min(i, j), max(i, j))
        if key not in cache:
            vertices.append((vertices[i] + vertices[j]) / 2.0)
            cache[key] = len(vertices) - 1
        return cache[key]

    out = []
    for a, b, c in faces:
        ab, bc, ca = midpoint(a, b), midpoint(b, c), midpoint(c, a)
        out.extend([(a, ab, ca), (ab, b, bc), (ca, bc, c), (ab, bc, ca)])
    return out


def icosahedron_geometry(radius: float = 1.0, detail: int = 0) -> Geometry:
    """Indexed icosphere: 20 * 4**detail faces, every vertex at `radius`."""
    if detail < 0:
        raise ValueError("detail must be >= 0")

    vertices = list(_ICO_VERTICES)
    faces = [tuple(f) for f in _ICO_FACES]
    for _ in range(detail):
        faces = _subdivide(vertices, faces)

    dirs = np.array(vertices, dtype=np.float64)
    dirs /= np.linalg.norm(dirs, axis=1)[:, None]
    indices = np.array(faces, dtype=np.uint32).ravel()

    return Geometry(
        vertices=(dirs * radius).astype(np.float32),
        normals=dirs.astype(np.float32),
        indices=indices,
    )


def compute_vertex_normals(vertices: np.ndarray, indices: np.ndarray) -> np.ndarray:
    """Area-weighted vertex normals from the current positions."""
    verts = np.asarray(vertices, dtype=np.float64).reshape((-1, 3))
    tris = np.asarray(indices, dtype=np.int64).reshape((-1, 3))

    v0, v1, v2 = verts[tris[:, 0]], verts[tris[:, 1]], verts[tris[:, 2]]
    face_normals = np.cross(v1 - v0, v2 - v0)

    normals = np.zeros_like(verts)
    for corner in range(3):
        np.add.at(normals, tris[:, corner], face_normals)

    lengths = np.linalg.norm(normals, axis=1)
    lengths[lengths == 0.0] = 1.0
    return (normals / lengths[:, None]).astype(np.float32)


def circle_points(radius: float, segments: int = 64) -> np.ndarray:
    """`segments` points on a circle in the XZ plane, without repeating the first."""
    angles = np.arange(segments) / segments * 2.0 * np.pi
    return np.stack([
        radius * np.cos(angles),
        np.zeros_like(angles),
        radius * np.sin(angles),
    ], axis=-1).astype(np.float32)
