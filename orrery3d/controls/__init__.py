from orrery3d.controls.orbit_controls import OrbitControls

__all__ = ["OrbitControls"]
