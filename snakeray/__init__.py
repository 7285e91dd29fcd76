"""A grid-based snake arcade game: game objects, scenes and the game window."""

__version__ = "0.1.0"

__all__ = ["food", "frame", "game", "objects", "scenes", "snake"]