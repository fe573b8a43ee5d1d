"""
scene package - scene nodes, camera, lights and drawables.
"""

from orrery3d.scene.node import Node
from orrery3d.scene.camera import PerspectiveCamera
from orrery3d.scene.light import Light, AmbientLight, PointLight
from orrery3d.scene.mesh import Mesh, LineLoop
from orrery3d.scene.scene import Scene

__all__ = ["Node", "PerspectiveCamera", "Light", "AmbientLight", "PointLight",
           "Mesh", "LineLoop", "Scene"]
