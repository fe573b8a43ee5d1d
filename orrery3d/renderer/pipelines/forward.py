# orrery3d/renderer/pipelines/forward.py
# ---------------------------------------------------------------
# Forward renderer: one program, ambient + up to MAX_POINT_LIGHTS
# point lights, one draw call per drawable node.
# ---------------------------------------------------------------
from __future__ import annotations

from pathlib import Path

from orrery3d.renderer.base_renderer import BaseRenderer
from orrery3d.renderer.shader import Shader
from orrery3d.scene.light import AmbientLight, PointLight
from orrery3d.utils.logger import logger

MAX_POINT_LIGHTS = 4

SHADER_DIR = Path(__file__).resolve().parents[2] / "resources" / "shaders"

# Every material key, so a draw never inherits values from the previous node.
DEFAULT_MATERIAL_UNIFORMS = {
    "uColor": (1.0, 1.0, 1.0),
    "uEmissive": (0.0, 0.0, 0.0),
    "uSpecular": (0.0, 0.0, 0.0),
    "uShininess": 1.0,
    "uLit": 0,
    "uFlatShading": 0,
}


class ForwardRenderer(BaseRenderer):
    """Forward pipeline over a GraphicsBackend."""

    def __init__(self, backend, width: int, height: int):
        self.backend = backend
        self.width = width
        self.height = height
        self.frames_rendered = 0

        self.shader = Shader(
            backend,
            vertex_path=str(SHADER_DIR / "forward_vert.glsl"),
            fragment_path=str(SHADER_DIR / "forward_frag.glsl"),
        )
        self.backend.enable_depth_test(True)
        self.backend.check_errors("ForwardRenderer.__init__")

    # -----------------------------------------------------------------
    def set_size(self, w: int, h: int) -> None:
        self.width, self.height = w, h
        self.backend.resize(w, h)

    # -----------------------------------------------------------------
    def _upload_lights(self, scene) -> None:
        ambient = [0.0, 0.0, 0.0]
        points = []
        for light in scene.lights():
            if isinstance(light, AmbientLight):
                for i, c in enumerate(light.color):
                    ambient[i] += c * light.intensity
            elif isinstance(light, PointLight):
                points.append(light)

        if len(points) > MAX_POINT_LIGHTS:
            logger.warning(
                f"[Renderer] {len(points)} point lights, only {MAX_POINT_LIGHTS} used"
            )
            points = points[:MAX_POINT_LIGHTS]

        self.shader.set_uniform("uAmbient", tuple(ambient))
        self.shader.set_uniform("uPointLightCount", len(points))
        for i, light in enumerate(points):
            uni = light.get_uniforms()
            self.shader.set_uniform(f"uPointLights[{i}].position",
                                    tuple(uni["position"]), kind="vec3")
            self.shader.set_uniform(f"uPointLights[{i}].color",
                                    tuple(c * uni["intensity"] for c in uni["color"]))
            self.shader.set_uniform(f"uPointLights[{i}].distance", uni["distance"])

    # -----------------------------------------------------------------
    def render(self, scene, camera) -> None:
        self.shader.reload_if_needed()
        self.shader.use()

        self.shader.set_uniform("uView", camera.get_view_matrix().to_gl(), kind="mat4")
        self.shader.set_uniform("uProj", camera.get_projection_matrix().to_gl(), kind="mat4")
        self.shader.set_uniform("uCamPos", tuple(camera.get_world_position().as_np()),
                                kind="vec3")
        self._upload_lights(scene)

        self.backend.clear(tuple(scene.background) + (1.0,))

        for node in scene.drawables():
            uniforms = dict(DEFAULT_MATERIAL_UNIFORMS)
            if node.material is not None:
                uniforms.update(node.material.uniforms())
            self.shader.set_uniforms(uniforms)
            self.shader.set_uniform("uModel", node.get_world_matrix().to_gl(), kind="mat4")
            node.draw(self.backend)

        self.frames_rendered += 1

    # -----------------------------------------------------------------
    def cleanup(self, scene=None) -> None:
        if scene is not None:
            for node in scene.drawables():
                node.release(self.backend)
        self.shader.release()
