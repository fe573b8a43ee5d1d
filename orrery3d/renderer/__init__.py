# orrery3d/renderer/__init__.py
"""
Rendering: base class, shader wrapper and the forward pipeline.
"""
from orrery3d.renderer.base_renderer import BaseRenderer
from orrery3d.renderer.shader import Shader
from orrery3d.renderer.pipelines.forward import ForwardRenderer

__all__ = ["BaseRenderer", "Shader", "ForwardRenderer"]
