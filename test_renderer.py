import os
import shutil

import pytest

from orrery3d.graphics.backend import PRIMITIVE_MODES
from orrery3d.renderer.pipelines.forward import ForwardRenderer, SHADER_DIR
from orrery3d.renderer.shader import Shader, uniform_kind
from orrery3d.scene.light import PointLight
from orrery3d.solar.app import on_window_resize


def test_frame_draws_every_node(app_state, mock_backend):
    mock_backend.reset_calls()
    app_state.renderer.render(app_state.scene, app_state.camera)

    # Sun, Earth and the rock are triangle meshes, the Earth ring is a line loop
    indexed = mock_backend.args_of("draw_indexed")
    assert len(indexed) == 3
    assert all(mode == "triangles" for _, mode in indexed)
    assert mock_backend.args_of("draw") == [(64, "line_loop")]
    assert mock_backend.count("clear") == 1
    assert app_state.renderer.frames_rendered == 1


def test_frame_uses_every_primitive_mode(app_state, mock_backend):
    app_state.renderer.render(app_state.scene, app_state.camera)
    used = {mode for _, mode in mock_backend.args_of("draw") + mock_backend.args_of("draw_indexed")}
    assert used == set(PRIMITIVE_MODES)


def test_buffers_uploaded_only_once(app_state, mock_backend):
    app_state.renderer.render(app_state.scene, app_state.camera)
    assert mock_backend.count("create_vertex_array") == 4
    mock_backend.reset_calls()
    app_state.renderer.render(app_state.scene, app_state.camera)
    assert mock_backend.count("create_vertex_array") == 0
    assert mock_backend.count("create_buffer") == 0
    assert mock_backend.count("bind_vertex_array") == 4


def test_light_uniforms(app_state, mock_backend):
    app_state.renderer.render(app_state.scene, app_state.camera)
    u = mock_backend.uniforms
    assert u["uPointLightCount"] == ("int", 1)
    kind, ambient = u["uAmbient"]
    assert kind == "vec3"
    assert ambient == pytest.approx((0x40 / 255 * 0.8,) * 3)
    assert u["uPointLights[0].position"][1] == pytest.approx((0.0, 0.0, 0.0))
    assert u["uPointLights[0].color"][1] == pytest.approx((1.5, 1.5, 1.5))
    assert u["uPointLights[0].distance"] == ("float", 500.0)


def test_extra_point_lights_are_dropped(app_state, mock_backend):
    for i in range(5):
        app_state.scene.add_child(PointLight(0xFFFFFF, 1.0, name=f"Extra{i}"))
    app_state.renderer.render(app_state.scene, app_state.camera)
    assert mock_backend.uniforms["uPointLightCount"] == ("int", 4)


def test_material_uniforms_reset_per_draw(app_state, mock_backend):
    mock_backend.reset_calls()
    app_state.renderer.render(app_state.scene, app_state.camera)
    emissive = [args[3] for args in mock_backend.args_of("set_uniform")
                if args[1] == "uEmissive"]
    # one per drawable, only the Sun glows
    assert len(emissive) == 4
    assert sum(1 for e in emissive if any(c > 0 for c in e)) == 1


def test_uniform_kind():
    assert uniform_kind(1) == "int"
    assert uniform_kind(True) == "int"
    assert uniform_kind(0.5) == "float"
    assert uniform_kind((1.0, 2.0, 3.0)) == "vec3"


def test_resize_updates_projection_and_viewport(app_state, mock_backend):
    before = {body.name: body.mesh.get_world_position() for body in app_state.registry}

    on_window_resize(app_state, 1024, 512)

    assert app_state.camera.aspect == pytest.approx(2.0)
    assert app_state.renderer.width == 1024
    assert app_state.renderer.height == 512
    assert mock_backend.args_of("resize")[-1] == (1024, 512)
    proj = app_state.camera.get_projection_matrix().to_np()
    assert proj[1, 1] / proj[0, 0] == pytest.approx(2.0)
    for body in app_state.registry:
        assert body.mesh.get_world_position() == before[body.name]


def test_zero_size_resize_is_ignored(app_state, mock_backend):
    on_window_resize(app_state, 800, 0)
    assert app_state.camera.aspect == pytest.approx(800 / 600)
    assert not mock_backend.called("resize")


@pytest.fixture
def shader_files(tmp_path):
    vert = tmp_path / "v.glsl"
    frag = tmp_path / "f.glsl"
    shutil.copy(SHADER_DIR / "forward_vert.glsl", vert)
    shutil.copy(SHADER_DIR / "forward_frag.glsl", frag)
    return vert, frag


def _touch(path, offset=10):
    st = path.stat()
    os.utime(path, (st.st_atime + offset, st.st_mtime + offset))


def test_shader_reload_on_change(mock_backend, shader_files):
    vert, frag = shader_files
    shader = Shader(mock_backend, str(vert), str(frag))
    first = shader.program
    assert shader.reload_if_needed() is False

    _touch(frag)
    assert shader.reload_if_needed() is True
    assert shader.program != first
    assert first not in mock_backend.live


def test_broken_shader_keeps_old_program(mock_backend, shader_files):
    vert, frag = shader_files
    shader = Shader(mock_backend, str(vert), str(frag))
    first = shader.program

    mock_backend.fail_compile = True
    _touch(vert)
    assert shader.reload_if_needed() is False
    assert shader.program == first
    # not retried until the files change again
    assert shader.reload_if_needed() is False
    assert mock_backend.count("create_program") == 2


def test_cleanup_releases_everything(app_state, mock_backend):
    renderer = app_state.renderer
    renderer.render(app_state.scene, app_state.camera)
    renderer.cleanup(app_state.scene)
    assert mock_backend.live == set()
    assert renderer.shader.program is None


def test_renderer_enables_depth_test(mock_backend):
    ForwardRenderer(mock_backend, 640, 480)
    assert mock_backend.args_of("enable_depth_test") == [(True,)]
