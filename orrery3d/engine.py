# orrery3d/engine.py
# -*- coding: utf-8 -*-
"""
Main loop.

* Creates the window, the graphics backend and the forward renderer.
* Builds the solar-system state and hands it to the animation driver.
* F9 toggles the FPS log, F10 toggles V-Sync (both persisted in config).
"""
import glfw

from orrery3d.core.timer import Clock
from orrery3d.graphics import select_backend
from orrery3d.renderer.pipelines.forward import ForwardRenderer
from orrery3d.solar.animation import AnimationDriver, run_loop
from orrery3d.solar.app import create_app, on_window_resize
from orrery3d.utils import logger, Config, FPSCounter, Profiler
from orrery3d.window import Window


class Engine:
    """
    Owns the window, backend, renderer and application state.
    """
    # -----------------------------------------------------------------
    def __init__(
        self,
        config_path: str = "config.json",
        backend_name: str = "gl",
        rng=None,
    ):
        # ---------------------------------------------------------
        # Config + window
        # ---------------------------------------------------------
        self.cfg = Config(config_path)
        win_cfg = self.cfg["window"]
        self.window = Window(win_cfg["width"], win_cfg["height"], win_cfg["title"])

        # ---------------------------------------------------------
        # Backend + renderer + scene
        # ---------------------------------------------------------
        try:
            self.backend = select_backend(backend_name)
            self.backend.init_device(self.window.width, self.window.height)

            with Profiler("Engine.build"):
                self.renderer = ForwardRenderer(self.backend, self.window.width, self.window.height)
                self.state = create_app(
                    self.renderer,
                    self.window.width,
                    self.window.height,
                    camera_cfg=self.cfg["camera"],
                    rng=rng,
                )
        except Exception as exc:
            logger.error(f"[Engine] Startup failed: {exc}")
            self.window.destroy()
            raise
        self.driver = AnimationDriver(self.state)

        self.window.add_resize_listener(
            lambda w, h: on_window_resize(self.state, w, h)
        )

        # ---------------------------------------------------------
        # V-Sync, clock, FPS
        # ---------------------------------------------------------
        self.set_vsync(bool(self.cfg.get("v_sync", True)), persist=False)
        self.clock = Clock()
        self.fps_counter = FPSCounter()
        self.show_fps = bool(self.cfg.get("show_fps", True))
        self._since_fps_log = 0.0
        self._key_state = {}

    # -----------------------------------------------------------------
    def set_vsync(self, enable: bool = True, persist: bool = True):
        """Switch V-Sync and optionally store it in the config."""
        self.window.set_vsync(enable)
        if persist:
            self.cfg["v_sync"] = enable
        logger.info(f"[Engine] V-Sync {'ON' if enable else 'OFF'}")

    # -----------------------------------------------------------------
    def _before_frame(self):
        self.window.poll_events()
        self.state.controls.handle_input(self.window.input, self.window.height)
        self._handle_toggle_key(glfw.KEY_F9, "show_fps", "FPS display")
        self._handle_toggle_key(glfw.KEY_F10, "v_sync", "V-Sync")

    def _after_frame(self, delta: float):
        self.backend.check_errors("frame")
        self.window.swap_buffers()

        self.fps_counter.tick(delta)
        self._since_fps_log += delta
        if self.show_fps and self._since_fps_log >= 1.0:
            logger.info(f"[Engine] FPS: {self.fps_counter.fps:.2f}")
            self._since_fps_log = 0.0

    # -----------------------------------------------------------------
    def run(self, should_stop=None):
        """Run frames until the window closes (or `should_stop()` is true)."""
        logger.info("[Engine] Engine started")
        if should_stop is None:
            should_stop = self.window.should_close
        try:
            return run_loop(self.driver, self.clock, should_stop,
                            before_frame=self._before_frame,
                            after_frame=self._after_frame)
        finally:
            self.shutdown()

    # -----------------------------------------------------------------
    def _handle_toggle_key(self, glfw_key, cfg_name, description):
        pressed = self.window.input.is_key_pressed(glfw_key)
        prev = self._key_state.get(glfw_key, False)

        if pressed and not prev:
            cur = bool(self.cfg.get(cfg_name, False))
            if cfg_name == "v_sync":
                self.set_vsync(not cur)
            else:
                self.cfg[cfg_name] = not cur
                self.show_fps = not cur
                logger.info(f"[Engine] {description} {'ON' if not cur else 'OFF'}")
        self._key_state[glfw_key] = pressed

    # -----------------------------------------------------------------
    def shutdown(self):
        """Release GPU resources and close the window."""
        logger.info("[Engine] Shutting down")
        self.renderer.cleanup(self.state.scene)
        self.backend.shutdown()
        self.window.destroy()
