# -*- coding: utf-8 -*-
"""Base scene-graph node."""
from orrery3d.math.vec3 import Vec3
from orrery3d.math.mat4 import Mat4


class Node:
    """Every scene element derives from Node.

    `rotation` holds Euler angles in radians (pitch, yaw, roll about X, Y, Z).
    """
    def __init__(self, name="Node"):
        self.name = name
        self.children = []
        self.parent = None
        self.position = Vec3()
        self.rotation = Vec3()
        self.scale = Vec3(1.0, 1.0, 1.0)

    # ----------------- transforms -----------------
    def get_local_matrix(self):
        """model = T * R * S."""
        T = Mat4.translate(self.position.x, self.position.y, self.position.z)
        R = Mat4.from_euler(self.rotation.x,
                            self.rotation.y,
                            self.rotation.z)
        S = Mat4.scale(self.scale.x, self.scale.y, self.scale.z)
        return T @ R @ S

    def get_world_matrix(self):
        """Compose local matrices up to the root."""
        if self.parent is None:
            return self.get_local_matrix()
        return self.parent.get_world_matrix() @ self.get_local_matrix()

    def get_world_position(self) -> Vec3:
        """Local origin transformed through every ancestor."""
        return Vec3.from_np(self.get_world_matrix().translation)

    # ----------------- hierarchy -----------------
    def add_child(self, node):
        if node.parent is not None:
            node.parent.remove_child(node)
        node.parent = self
        self.children.append(node)
        return node

    def remove_child(self, node):
        if node in self.children:
            node.parent = None
            self.children.remove(node)

    def traverse(self):
        """Depth-first generator, parents before children."""
        yield self
        for child in self.children:
            yield from child.traverse()

    def find(self, name):
        for node in self.traverse():
            if node.name == name:
                return node
        return None

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"
