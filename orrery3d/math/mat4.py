# orrery3d/math/mat4.py
# Row-major 4x4 matrices; rotation angles are in radians.
import numpy as np
from math import radians, tan, sin, cos


class Mat4:
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=np.float64)
        else:
            self.m = np.array(array, dtype=np.float64).reshape((4, 4))

    @staticmethod
    def identity():
        return Mat4()

    @staticmethod
    def translate(x: float, y: float, z: float):
        m = np.identity(4, dtype=np.float64)
        m[0:3, 3] = (x, y, z)
        return Mat4(m)

    @staticmethod
    def scale(sx: float, sy: float, sz: float):
        return Mat4(np.diag([sx, sy, sz, 1.0]))

    @staticmethod
    def rotate_x(angle: float):
        c, s = cos(angle), sin(angle)
        m = np.identity(4, dtype=np.float64)
        m[1, 1], m[1, 2] = c, -s
        m[2, 1], m[2, 2] = s, c
        return Mat4(m)

    @staticmethod
    def rotate_y(angle: float):
        c, s = cos(angle), sin(angle)
        m = np.identity(4, dtype=np.float64)
        m[0, 0], m[0, 2] = c, s
        m[2, 0], m[2, 2] = -s, c
        return Mat4(m)

    @staticmethod
    def rotate_z(angle: float):
        c, s = cos(angle), sin(angle)
        m = np.identity(4, dtype=np.float64)
        m[0, 0], m[0, 1] = c, -s
        m[1, 0], m[1, 1] = s, c
        return Mat4(m)

    @staticmethod
    def from_euler(pitch: float, yaw: float, roll: float):
        return Mat4.rotate_y(yaw) @ Mat4.rotate_x(pitch) @ Mat4.rotate_z(roll)

    @staticmethod
    def perspective(fov_deg: float, aspect: float,
                    z_near: float, z_far: float):
        """OpenGL projection; the field of view is vertical, in degrees."""
        f = 1.0 / tan(radians(fov_deg) / 2.0)
        m = np.zeros((4, 4), dtype=np.float64)
        m[0, 0] = f / aspect
        m[1, 1] = f
        m[2, 2] = (z_far + z_near) / (z_near - z_far)
        m[2, 3] = (2.0 * z_far * z_near) / (z_near - z_far)
        m[3, 2] = -1.0
        return Mat4(m)

    @staticmethod
    def look_at(eye, target, up) -> "Mat4":
        f = np.asarray(target, dtype=np.float64) - np.asarray(eye, dtype=np.float64)
        f = f / np.linalg.norm(f)

        s = np.cross(f, np.asarray(up, dtype=np.float64))
        s = s / np.linalg.norm(s)
        u = np.cross(s, f)

        m = np.identity(4, dtype=np.float64)
        m[0, :3] = s
        m[1, :3] = u
        m[2, :3] = -f
        m[0, 3] = -np.dot(s, eye)
        m[1, 3] = -np.dot(u, eye)
        m[2, 3] = np.dot(f, eye)
        return Mat4(m)

    def __matmul__(self, other: "Mat4") -> "Mat4":
        return Mat4(self.m @ other.m)

    def transform_point(self, point) -> np.ndarray:
        p = np.append(np.asarray(point, dtype=np.float64), 1.0)
        return (self.m @ p)[:3]

    def transform_points(self, points: np.ndarray) -> np.ndarray:
        """Transform an (N, 3) array of points."""
        pts = np.asarray(points, dtype=np.float64)
        return pts @ self.m[:3, :3].T + self.m[:3, 3]

    @property
    def translation(self) -> np.ndarray:
        return self.m[:3, 3].copy()

    def __repr__(self):
        return f"Mat4({self.m})"

    def to_np(self) -> np.ndarray:
        return self.m.copy()

    def to_gl(self) -> np.ndarray:
        """Column-major float32 copy for glUniformMatrix4fv."""
        return self.m.T.astype(np.float32)
