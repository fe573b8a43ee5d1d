from orrery3d.assets.material import Material, BasicMaterial, PhongMaterial, LineMaterial

__all__ = ["Material", "BasicMaterial", "PhongMaterial", "LineMaterial"]
