"""A side-scrolling samurai platformer built on pygame: camera, box collision, tile-grid levels, an animated player and the game loop."""

__version__ = "0.1.0"