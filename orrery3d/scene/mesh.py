"""
Drawable nodes: triangle meshes and line loops. GPU buffers are
created in the backend on the first draw().
"""

import numpy as np
from orrery3d.scene.node import Node


class Mesh(Node):
    """Indexed triangle mesh with per-vertex normals and a material."""
    mode = "triangles"

    def __init__(self,
                 vertices: np.ndarray,
                 normals: np.ndarray = None,
                 indices: np.ndarray = None,
                 material=None,
                 name="Mesh"):
        super().__init__(name)

        self.vertices = np.asarray(vertices, dtype=np.float32).reshape((-1, 3))
        self.normals = (np.asarray(normals, dtype=np.float32).reshape((-1, 3))
                        if normals is not None else None)
        self.indices = (np.asarray(indices, dtype=np.uint32).ravel()
                        if indices is not None else None)
        self.material = material

        self.vb = None
        self.ib = None
        self.vao = None

    @property
    def index_count(self) -> int:
        if self.indices is not None:
            return len(self.indices)
        return len(self.vertices)

    @property
    def layout(self) -> tuple:
        """Float components per interleaved attribute."""
        return (3, 3) if self.normals is not None else (3,)

    def _setup_gpu_buffers(self, backend):
        components = [self.vertices]
        if self.normals is not None:
            components.append(self.normals)
        interleaved = np.hstack(components).astype(np.float32).ravel()
        self.vb = backend.create_buffer(interleaved.tobytes(), usage="vertex")
        if self.indices is not None:
            self.ib = backend.create_buffer(self.indices.tobytes(), usage="index")
        self.vao = backend.create_vertex_array(self.vb, self.ib, self.layout)

    def draw(self, backend):
        """Draw the mesh, uploading buffers lazily."""
        if self.vao is None:
            self._setup_gpu_buffers(backend)

        backend.bind_vertex_array(self.vao)
        if self.ib is not None:
            backend.draw_indexed(self.index_count, mode=self.mode)
        else:
            backend.draw(self.index_count, mode=self.mode)

    def release(self, backend):
        for res in (self.vao, self.vb, self.ib):
            if res is not None:
                backend.release_resource(res)
        self.vao = self.vb = self.ib = None


class LineLoop(Mesh):
    """Closed polyline; the last point connects back to the first."""
    mode = "line_loop"

    def __init__(self, points: np.ndarray, material=None, name="LineLoop"):
        super().__init__(points, material=material, name=name)
