"""A small 2D game engine core: ECS, tag pool, orthographic camera, physics helpers, batched sprite rendering and text layout."""

__version__ = "0.1.0"