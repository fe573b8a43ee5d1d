"""
Hides the GLFW callback machinery behind polled state.
"""

import glfw


class InputManager:
    """Keyboard, mouse-button, cursor and scroll state fed by GLFW callbacks."""
    def __init__(self, window):
        self.window = window
        self.keys = {}
        self.buttons = {}
        self.mouse = {"dx": 0.0, "dy": 0.0, "x": None, "y": None}
        self.scroll = {"dx": 0.0, "dy": 0.0}
        self._setup_callbacks()

    def _setup_callbacks(self):
        glfw.set_key_callback(self.window, self._key_cb)
        glfw.set_mouse_button_callback(self.window, self._button_cb)
        glfw.set_cursor_pos_callback(self.window, self._mouse_move_cb)
        glfw.set_scroll_callback(self.window, self._mouse_scroll_cb)

    def _key_cb(self, win, key, scancode, action, mods):
        self.keys[key] = action != glfw.RELEASE

    def _button_cb(self, win, button, action, mods):
        self.buttons[button] = action != glfw.RELEASE

    def _mouse_move_cb(self, win, xpos, ypos):
        # The first event only establishes the reference position.
        if self.mouse["x"] is not None:
            self.mouse["dx"] += xpos - self.mouse["x"]
            self.mouse["dy"] += ypos - self.mouse["y"]
        self.mouse["x"], self.mouse["y"] = xpos, ypos

    def _mouse_scroll_cb(self, win, xoff, yoff):
        self.scroll["dx"] += xoff
        self.scroll["dy"] += yoff

    def is_key_pressed(self, key) -> bool:
        return self.keys.get(key, False)

    def is_button_pressed(self, button) -> bool:
        return self.buttons.get(button, False)

    def get_mouse_delta(self):
        dx, dy = self.mouse["dx"], self.mouse["dy"]
        self.mouse["dx"], self.mouse["dy"] = 0.0, 0.0
        return dx, dy

    def get_scroll_delta(self):
        dx, dy = self.scroll["dx"], self.scroll["dy"]
        self.scroll["dx"], self.scroll["dy"] = 0.0, 0.0
        return dx, dy
