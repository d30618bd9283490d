"""Core of a small 2D game engine: math, shapes, collisions, rigid bodies, camera and animation."""

__version__ = "0.1.0"