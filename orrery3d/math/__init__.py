"""
Math subpackage: Vec3, Mat4 and color helpers.
"""

from orrery3d.math.vec3 import Vec3
from orrery3d.math.mat4 import Mat4
from orrery3d.math.color import hex_to_rgb, RGB

__all__ = ["Vec3", "Mat4", "hex_to_rgb", "RGB"]
