"""
Tile helpers for the dungeon grid.

A tile is a TileFlag value. This module holds the checked constructor and the
glyph table shared by the renderer and the grid's text helpers.
"""

from ..core.constants import NON_WALL_FLAGS, TileFlag

# Glyph of each single-flag tile, in display priority order.
GLYPHS: dict[TileFlag, str] = {
    TileFlag.WALL: "#",
    TileFlag.COIN: "o",
    TileFlag.STAIRS_DOWN: "<",
    TileFlag.TORCH: "f",
    TileFlag.POTION: "P",
    TileFlag.SWORD_ITEM: "S",
}

FLOOR_GLYPH = "."

# Reverse lookup, used to build grids from text.
FLAGS_BY_GLYPH: dict[str, TileFlag] = {
    FLOOR_GLYPH: TileFlag.FLOOR,
    **{glyph: flag for flag, glyph in GLYPHS.items()},
}


def make_tile(flags: TileFlag | int = TileFlag.FLOOR) -> TileFlag:
    """
    Builds a tile value, rejecting impossible flag combinations.

    Args:
        flags (TileFlag | int):
            The flags the tile should carry.

    Returns:
        TileFlag:
            The validated tile.

    Raises:
        ValueError:
            If WALL is combined with an item or the stairs.

    """
    tile = TileFlag(flags)
    if tile & TileFlag.WALL and tile & NON_WALL_FLAGS:
        raise ValueError(f"A wall tile cannot also carry {tile & NON_WALL_FLAGS!r}")
    return tile


def tile_glyph(tile: TileFlag) -> str:
    """Returns the glyph shown for a tile, the first matching flag wins."""
    if tile == TileFlag.FLOOR:
        return FLOOR_GLYPH
    for flag, glyph in GLYPHS.items():
        if tile & flag:
            return glyph
    return FLOOR_GLYPH


def tile_from_glyph(glyph: str) -> TileFlag:
    """
    Parses a single glyph into a tile.

    Raises:
        ValueError:
            If the glyph is unknown.

    """
    try:
        return FLAGS_BY_GLYPH[glyph]
    except KeyError:
        raise ValueError(f"Unknown tile glyph: {glyph!r}") from None
