"""Engine-independent game logic for a tile-based action role-playing game."""

__version__ = "0.1.0"