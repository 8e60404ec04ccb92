"""Game-engine core utilities: maths, geometry, collision, rectangle packing, platform helpers and map loading."""

__version__ = "0.1.0"
__all__ = ["geometry", "maths", "physics", "platform", "rectpack", "tiled"]