# -*- coding: utf-8 -*-
"""
Materials - plain parameter holders whose `uniforms()` feed the
forward shader.

* BasicMaterial  - unlit, `color + emissive`; used for the star.
* PhongMaterial  - lit Blinn-Phong, optional flat shading.
* LineMaterial   - unlit solid color for line loops.
"""

from __future__ import annotations

from orrery3d.math.color import hex_to_rgb


class Material:
    """Shared fields; `lit` selects the lighting branch in the shader."""
    lit = True

    def __init__(self, color: int = 0xFFFFFF) -> None:
        self.color = hex_to_rgb(color)

    def uniforms(self) -> dict:
        return {
            "uColor": self.color,
            "uLit": int(self.lit),
        }


class BasicMaterial(Material):
    """Self-illuminated: ignores scene lights."""
    lit = False

    def __init__(self, color: int = 0xFFFFFF, emissive: int | None = None,
                 emissive_intensity: float = 1.0) -> None:
        super().__init__(color)
        self.emissive = hex_to_rgb(emissive) if emissive is not None else (0.0, 0.0, 0.0)
        self.emissive_intensity = float(emissive_intensity)

    def uniforms(self) -> dict:
        u = super().uniforms()
        u["uEmissive"] = tuple(c * self.emissive_intensity for c in self.emissive)
        return u


class PhongMaterial(Material):
    """Diffuse + specular highlight; `flat_shading` uses per-face normals."""

    def __init__(self, color: int = 0xFFFFFF, specular: int = 0x111111,
                 shininess: float = 30.0, flat_shading: bool = False) -> None:
        super().__init__(color)
        self.specular = hex_to_rgb(specular)
        self.shininess = float(shininess)
        self.flat_shading = bool(flat_shading)

    def uniforms(self) -> dict:
        u = super().uniforms()
        u.update({
            "uEmissive": (0.0, 0.0, 0.0),
            "uSpecular": self.specular,
            "uShininess": self.shininess,
            "uFlatShading": int(self.flat_shading),
        })
        return u


class LineMaterial(Material):
    """Solid unlit line color."""
    lit = False
