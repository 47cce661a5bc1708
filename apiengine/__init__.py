"""A small 2D game engine with levels, actors, sprite animation and input, built on pygame."""

__version__ = "0.1.0"