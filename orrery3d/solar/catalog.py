"""
Static table of celestial bodies and the constants of the scene.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from orrery3d.errors import CatalogError

# Sphere radii are multiplied by this; orbital distances are not.
SOLAR_SYSTEM_SCALE = 0.5

# Body the camera follows.
TRACKED_BODY = "Earth"


@dataclass(frozen=True)
class BodyDescriptor:
    """Parameters of one body. Colors are 0xRRGGBB; speeds are radians per
    second before the animation speed multiplier is applied."""
    name: str
    radius: float
    orbital_distance: float
    base_color: int
    orbit_speed: float = 0.0
    spin_speed: float = 0.0
    emissive_color: Optional[int] = None

    @property
    def is_central(self) -> bool:
        return self.orbital_distance == 0


SOLAR_DATA = (
    BodyDescriptor("Sun", radius=3.5, orbital_distance=0, base_color=0xFFD700,
                   orbit_speed=0.0, spin_speed=0.005, emissive_color=0xFFE040),
    BodyDescriptor("Earth", radius=1.0, orbital_distance=11, base_color=0x0077FF,
                   orbit_speed=0.018, spin_speed=0.03),
)

# The decorative rock riding on the tracked planet's pivot. Its own
# orbital distance stays 0 so the shared pivot is advanced only once.
DECORATIVE_BODY = BodyDescriptor("Halley", radius=0.2, orbital_distance=0,
                                 base_color=0xADD8E6, orbit_speed=0.03,
                                 spin_speed=0.08)
DECORATIVE_OFFSET = 1.8


def validate_catalog(catalog: Iterable[BodyDescriptor]) -> None:
    """Raise CatalogError unless names are unique, values are in range
    and exactly one body sits at the center."""
    seen = set()
    central = []
    for desc in catalog:
        if desc.name in seen:
            raise CatalogError(f"duplicate body name {desc.name!r}")
        seen.add(desc.name)
        if desc.radius <= 0:
            raise CatalogError(f"{desc.name}: radius must be > 0")
        if desc.orbital_distance < 0:
            raise CatalogError(f"{desc.name}: orbital distance must be >= 0")
        if desc.orbit_speed < 0 or desc.spin_speed < 0:
            raise CatalogError(f"{desc.name}: speeds must be >= 0")
        if desc.is_central:
            central.append(desc.name)
    if len(central) != 1:
        raise CatalogError(f"expected exactly one central body, got {central}")
