"""Tile-map maze game with collectibles, chasing mobs, a stdin-driven command and XPM decoding."""

__version__ = "0.1.0"

__all__ = ["board", "cli", "colors", "game", "image", "render", "visual", "xpm"]