"""
World module for the dungeon crawler.

This module contains the tile grid and the dungeon generator.
"""

from .generator import Dungeon, DungeonGenerator, Placement, level_seed
from .grid import Grid, Position
from .tiles import make_tile, tile_glyph

__all__ = [
    "Dungeon",
    "DungeonGenerator",
    "Grid",
    "Placement",
    "Position",
    "level_seed",
    "make_tile",
    "tile_glyph",
]
