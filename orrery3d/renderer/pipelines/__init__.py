from orrery3d.renderer.pipelines.forward import ForwardRenderer

__all__ = ["ForwardRenderer"]
