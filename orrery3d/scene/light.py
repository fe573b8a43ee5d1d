# orrery3d/scene/light.py
# ---------------------------------------------------------------
# Light types: ambient and point. Both are Nodes, so a point light
# can be parented to a moving object.
# ---------------------------------------------------------------

from orrery3d.scene.node import Node
from orrery3d.math.color import hex_to_rgb


class Light(Node):
    """Base class for all lights."""
    def __init__(self, color: int = 0xFFFFFF, intensity: float = 1.0, name="Light"):
        super().__init__(name)
        self.color = hex_to_rgb(color)
        self.intensity = float(intensity)

    def get_uniforms(self) -> dict:
        """Values handed to the shader."""
        raise NotImplementedError


class AmbientLight(Light):
    """Uniform light from every direction."""
    def __init__(self, color: int = 0x404040, intensity: float = 1.0, name="AmbientLight"):
        super().__init__(color, intensity, name)

    def get_uniforms(self):
        return {
            "color": self.color,
            "intensity": self.intensity,
        }


class PointLight(Light):
    """Omni light; `distance` is the range where it fades to zero (0 = infinite)."""
    def __init__(self, color: int = 0xFFFFFF, intensity: float = 1.0,
                 distance: float = 0.0, name="PointLight"):
        super().__init__(color, intensity, name)
        self.distance = float(distance)

    def get_uniforms(self):
        return {
            "position": self.get_world_position().as_np(),
            "color": self.color,
            "intensity": self.intensity,
            "distance": self.distance,
        }
