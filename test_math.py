# -*- coding: utf-8 -*-
import math

import numpy as np
import pytest

from orrery3d.math.vec3 import Vec3
from orrery3d.math.mat4 import Mat4
from orrery3d.math.color import hex_to_rgb


def test_vec3_ops():
    a = Vec3(1, 2, 3)
    b = Vec3(4, -1, 0)
    assert (a + b).as_np().tolist() == [5, 1, 3]
    assert (a - b).as_np().tolist() == [-3, 3, 3]
    assert (a * 2).as_np().tolist() == [2, 4, 6]
    assert (2 * a) == Vec3(2, 4, 6)


def test_vec3_in_place_helpers_keep_identity():
    v = Vec3(1, 1, 1)
    same = v.copy_from(Vec3(4, 5, 6)).add_scaled(Vec3(1, 0, 0), 0.5)
    assert same is v
    assert v == Vec3(4.5, 5, 6)


def test_vec3_normalized_zero():
    assert Vec3().normalized() == Vec3()
    assert Vec3(0, 3, 4).length() == 5.0


def test_mat4_identity():
    assert np.allclose(Mat4.identity().to_np(), np.eye(4))


def test_mat4_translation():
    M = Mat4.translate(1, 2, 3)
    assert np.allclose(M.transform_point([0, 0, 0]), [1, 2, 3])
    assert np.allclose(M.translation, [1, 2, 3])


def test_rotate_y_quarter_turn():
    p = Mat4.rotate_y(math.pi / 2).transform_point([1, 0, 0])
    assert np.allclose(p, [0, 0, -1], atol=1e-12)


def test_transform_points_matches_single_point():
    m = Mat4.translate(1, 0, 0) @ Mat4.rotate_y(0.3)
    pts = np.array([[1, 0, 0], [0, 2, 0], [0, 0, 3]], dtype=np.float64)
    batch = m.transform_points(pts)
    for p, q in zip(pts, batch):
        assert np.allclose(m.transform_point(p), q)


def test_perspective_layout():
    m = Mat4.perspective(90.0, 2.0, 0.1, 100.0).to_np()
    assert m[1, 1] == pytest.approx(1.0)
    assert m[0, 0] == pytest.approx(0.5)
    assert m[3, 2] == -1.0


def test_look_at_puts_target_on_negative_z():
    view = Mat4.look_at(np.array([0, 30, 60.0]), np.zeros(3), np.array([0, 1.0, 0]))
    p = view.transform_point([0, 0, 0])
    assert np.allclose(p[:2], [0, 0], atol=1e-9)
    assert p[2] == pytest.approx(-math.hypot(30, 60))


def test_to_gl_is_transposed_float32():
    m = Mat4.translate(1, 2, 3)
    gl = m.to_gl()
    assert gl.dtype == np.float32
    assert gl[3, 0] == 1.0


def test_hex_to_rgb():
    assert hex_to_rgb(0xFF0000) == (1.0, 0.0, 0.0)
    assert hex_to_rgb(0x0077FF) == pytest.approx((0.0, 0x77 / 255, 1.0))
    with pytest.raises(ValueError):
        hex_to_rgb(0x1000000)
