"""
Window subsystem - GLFW window with an OpenGL 3.3 core context.
"""

import glfw

from orrery3d.core.input import InputManager


class Window:
    """Window + OpenGL context; fans framebuffer resizes out to listeners."""
    def __init__(self, width: int = 1280, height: int = 720, title: str = "Orrery3D"):
        if not glfw.init():
            raise RuntimeError("Failed to initialize GLFW")
        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 3)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 3)
        glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
        glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, True)
        glfw.window_hint(glfw.SAMPLES, 4)

        self.handle = glfw.create_window(width, height, title, None, None)
        if not self.handle:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")

        glfw.make_context_current(self.handle)

        # Framebuffer pixels can differ from window units on HiDPI screens.
        self.width, self.height = glfw.get_framebuffer_size(self.handle)
        self.title = title
        self.input = InputManager(self.handle)
        self._resize_listeners = []

        glfw.set_framebuffer_size_callback(self.handle, self._on_resize)

    def add_resize_listener(self, callback):
        """`callback(width, height)` runs on every framebuffer resize."""
        self._resize_listeners.append(callback)

    def _on_resize(self, _win, w, h):
        self.width, self.height = w, h
        for callback in self._resize_listeners:
            callback(w, h)

    def set_vsync(self, enable: bool = True):
        glfw.swap_interval(1 if enable else 0)

    def should_close(self) -> bool:
        return bool(glfw.window_should_close(self.handle))

    def swap_buffers(self):
        glfw.swap_buffers(self.handle)

    def poll_events(self):
        glfw.poll_events()

    def destroy(self):
        if self.handle:
            glfw.destroy_window(self.handle)
            self.handle = None
        glfw.terminate()
