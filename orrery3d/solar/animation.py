"""
Per-frame update of spin and revolution angles, camera tracking and
the frame loop.
"""

from orrery3d.utils.logger import logger

# Uniform visual tuning factor applied to every angular speed.
SPEED_MULTIPLIER = 5.0


class AnimationDriver:
    """Advances an AppState by elapsed time and renders it."""

    def __init__(self, state):
        self.state = state
        self.frames = 0

    def advance(self, delta: float) -> None:
        """Spin every mesh and revolve every orbiting pivot once."""
        delta = max(0.0, delta)
        advanced = set()
        for body in self.state.registry:
            desc = body.descriptor
            body.mesh.rotation.y += desc.spin_speed * delta * SPEED_MULTIPLIER
            if desc.orbital_distance > 0 and id(body.pivot) not in advanced:
                body.pivot.rotation.y += desc.orbit_speed * delta * SPEED_MULTIPLIER
                advanced.add(id(body.pivot))

    def track(self) -> None:
        """Point the controls at the tracked body's current world position."""
        state = self.state
        state.controls.target.copy_from(state.tracked.mesh.get_world_position())
        state.controls.update()

    def tick(self, delta: float) -> None:
        self.advance(delta)
        self.track()
        self.state.renderer.render(self.state.scene, self.state.camera)
        self.frames += 1


def run_loop(driver, clock, should_stop, before_frame=None, after_frame=None) -> int:
    """Drive frames until `should_stop()` is true; return the frame count.

    `before_frame()` runs ahead of the clock read (event polling),
    `after_frame(delta)` after the render (buffer swap, stats).
    """
    frames = 0
    while not should_stop():
        if before_frame is not None:
            before_frame()
        delta = clock.get_delta()
        driver.tick(delta)
        if after_frame is not None:
            after_frame(delta)
        frames += 1
    logger.info(f"[Engine] Loop finished after {frames} frames")
    return frames


def stop_after(frame_count: int):
    """Stop condition that lets exactly `frame_count` frames through."""
    remaining = [frame_count]

    def should_stop() -> bool:
        if remaining[0] <= 0:
            return True
        remaining[0] -= 1
        return False

    return should_stop
