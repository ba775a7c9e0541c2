"""Procedural meshes, OBJ/MTL loading, an orbit camera and helpers for a small renderer."""

__version__ = "0.1.0"
__all__ = ["camera", "geometry", "helpers", "material", "sample"]