"""
Scene root node.
"""

from orrery3d.scene.node import Node
from orrery3d.scene.light import Light


class Scene(Node):
    """Root of the scene graph."""
    def __init__(self, background=(0.0, 0.0, 0.0)):
        super().__init__("RootScene")
        self.background = background

    def drawables(self):
        return [node for node in self.traverse() if hasattr(node, "draw")]

    def lights(self):
        return [node for node in self.traverse() if isinstance(node, Light)]
