"""
Orbit-style camera controller: rotate around, pan and zoom towards a
target point, with exponential damping of user input.
"""

import math

from orrery3d.math.vec3 import Vec3
from orrery3d.scene.camera import WORLD_UP

# GLFW mouse button ids (glfw.MOUSE_BUTTON_LEFT / _RIGHT).
ROTATE_BUTTON = 0
PAN_BUTTON = 1

_EPS = 1e-6


class OrbitControls:
    """Keeps `camera` on a sphere around `target`.

    Input methods (`rotate_left`, `rotate_up`, `pan`, `dolly_in`, `dolly_out`)
    only accumulate; `update()` applies them, and with damping enabled only a
    `damping_factor` share of the pending rotation/pan is applied per call.
    """
    def __init__(self, camera, target: Vec3 = None,
                 enable_damping: bool = True,
                 damping_factor: float = 0.05,
                 min_distance: float = 0.0,
                 max_distance: float = math.inf,
                 min_polar_angle: float = 0.0,
                 max_polar_angle: float = math.pi,
                 rotate_speed: float = 1.0,
                 zoom_speed: float = 1.0,
                 pan_speed: float = 1.0):
        if min_distance > max_distance:
            raise ValueError("min_distance must not exceed max_distance")
        self.camera = camera
        self.target = target if target is not None else Vec3()
        self.enable_damping = enable_damping
        self.damping_factor = float(damping_factor)
        self.min_distance = float(min_distance)
        self.max_distance = float(max_distance)
        self.min_polar_angle = float(min_polar_angle)
        self.max_polar_angle = float(max_polar_angle)
        self.rotate_speed = rotate_speed
        self.zoom_speed = zoom_speed
        self.pan_speed = pan_speed

        self._delta_theta = 0.0
        self._delta_phi = 0.0
        self._scale = 1.0
        self._pan_offset = Vec3()

    # -----------------------------------------------------------------
    # accumulated input
    # -----------------------------------------------------------------
    def rotate_left(self, angle: float):
        self._delta_theta -= angle

    def rotate_up(self, angle: float):
        self._delta_phi -= angle

    def dolly_in(self, scale: float):
        self._scale *= scale

    def dolly_out(self, scale: float):
        self._scale /= scale

    @property
    def zoom_scale(self) -> float:
        return 0.95 ** self.zoom_speed

    def pan(self, dx: float, dy: float, viewport_height: float):
        """Pan by a cursor delta in pixels, scaled to the target plane."""
        offset = self.camera.position - self.target
        target_distance = offset.length() * math.tan(math.radians(self.camera.fov) / 2.0)
        forward = (self.target - self.camera.position).normalized()
        right = forward.cross(WORLD_UP).normalized()
        up = right.cross(forward)

        scale = 2.0 * target_distance / viewport_height * self.pan_speed
        self._pan_offset = self._pan_offset - right * (dx * scale) + up * (dy * scale)

    def handle_input(self, input_manager, viewport_height: float):
        """Turn this frame's mouse motion and scroll into pending input."""
        dx, dy = input_manager.get_mouse_delta()
        if input_manager.is_button_pressed(ROTATE_BUTTON):
            self.rotate_left(2.0 * math.pi * dx / viewport_height * self.rotate_speed)
            self.rotate_up(2.0 * math.pi * dy / viewport_height * self.rotate_speed)
        elif input_manager.is_button_pressed(PAN_BUTTON):
            self.pan(dx, dy, viewport_height)

        _, scroll_y = input_manager.get_scroll_delta()
        if scroll_y > 0:
            self.dolly_in(self.zoom_scale)
        elif scroll_y < 0:
            self.dolly_out(self.zoom_scale)

    # -----------------------------------------------------------------
    def get_distance(self) -> float:
        return self.camera.position.distance_to(self.target)

    def update(self) -> bool:
        """Integrate one step. Returns True while pending input remains."""
        offset = self.camera.position - self.target
        radius = offset.length()
        if radius < _EPS:
            theta, phi = 0.0, math.pi / 2.0
        else:
            theta = math.atan2(offset.x, offset.z)
            phi = math.acos(max(-1.0, min(1.0, offset.y / radius)))

        if self.enable_damping:
            theta += self._delta_theta * self.damping_factor
            phi += self._delta_phi * self.damping_factor
        else:
            theta += self._delta_theta
            phi += self._delta_phi

        phi = max(max(self.min_polar_angle, _EPS), min(min(self.max_polar_angle, math.pi - _EPS), phi))
        radius = max(self.min_distance, min(self.max_distance, radius * self._scale))

        if self.enable_damping:
            self.target.add_scaled(self._pan_offset, self.damping_factor)
        else:
            self.target.add_scaled(self._pan_offset, 1.0)

        sin_phi = math.sin(phi)
        offset = Vec3(radius * sin_phi * math.sin(theta),
                      radius * math.cos(phi),
                      radius * sin_phi * math.cos(theta))
        self.camera.position = self.target + offset
        self.camera.look_at(self.target)

        if self.enable_damping:
            keep = 1.0 - self.damping_factor
            self._delta_theta *= keep
            self._delta_phi *= keep
            self._pan_offset = self._pan_offset * keep
        else:
            self._delta_theta = 0.0
            self._delta_phi = 0.0
            self._pan_offset = Vec3()
        self._scale = 1.0

        pending = abs(self._delta_theta) + abs(self._delta_phi) + self._pan_offset.length()
        return pending > _EPS
