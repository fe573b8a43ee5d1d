"""
Perspective camera.
"""

from orrery3d.scene.node import Node
from orrery3d.math.vec3 import Vec3
from orrery3d.math.mat4 import Mat4

WORLD_UP = Vec3(0.0, 1.0, 0.0)


class PerspectiveCamera(Node):
    """Perspective camera aimed at a look-at point.

    `fov` is the vertical field of view in degrees. After changing `fov`,
    `aspect`, `near` or `far` call `update_projection_matrix()`.
    """
    def __init__(self, fov=75.0, aspect=1.0, near=0.1, far=1000.0, name="Camera"):
        super().__init__(name)
        self.fov = float(fov)
        self.aspect = float(aspect)
        self.near = float(near)
        self.far = float(far)
        self.position = Vec3(0.0, 0.0, 5.0)
        self.target = Vec3(0.0, 0.0, 0.0)
        self.projection_matrix = None
        self.update_projection_matrix()

    def update_projection_matrix(self):
        self.projection_matrix = Mat4.perspective(self.fov, self.aspect, self.near, self.far)

    def look_at(self, target: Vec3):
        self.target = Vec3(target.x, target.y, target.z)

    def get_view_matrix(self) -> Mat4:
        eye = self.get_world_position().as_np()
        return Mat4.look_at(eye, self.target.as_np(), WORLD_UP.as_np())

    def get_projection_matrix(self) -> Mat4:
        return self.projection_matrix
