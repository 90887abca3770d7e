"""Tile-layout geometry kernel for pool coping and paving."""

__version__ = "0.1.0"
