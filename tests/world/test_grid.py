"""
Tests for the tile grid and the tile constructor.
"""

import pytest

from infinite_floor.core.constants import MAP_SIZE, TileFlag
from infinite_floor.world.grid import Grid
from infinite_floor.world.tiles import make_tile, tile_glyph


def test_bordered_grid_has_wall_ring_and_open_interior():
    grid = Grid.bordered()
    assert grid.size == MAP_SIZE
    for x, y in grid.positions():
        if grid.is_border(x, y):
            assert grid.is_wall(x, y)
        else:
            assert grid.is_empty_floor(x, y)


def test_make_tile_rejects_wall_with_item_or_stairs():
    for flag in (TileFlag.COIN, TileFlag.TORCH, TileFlag.POTION, TileFlag.SWORD_ITEM, TileFlag.STAIRS_DOWN):
        with pytest.raises(ValueError):
            make_tile(TileFlag.WALL | flag)
    assert make_tile(TileFlag.COIN | TileFlag.STAIRS_DOWN) == TileFlag.COIN | TileFlag.STAIRS_DOWN


def test_add_flag_on_wall_is_rejected():
    grid = Grid.bordered()
    with pytest.raises(ValueError):
        grid.add_flag(0, 0, TileFlag.COIN)


def test_out_of_bounds_access():
    grid = Grid.bordered()
    with pytest.raises(IndexError):
        grid.get(MAP_SIZE, 0)
    with pytest.raises(IndexError):
        grid.set(-1, 3, TileFlag.WALL)
    assert not grid.is_walkable(-1, 3)
    assert not grid.is_walkable(3, MAP_SIZE)


def test_grid_must_be_at_least_three_wide():
    with pytest.raises(ValueError):
        Grid(2)


def test_from_rows_parses_glyphs():
    grid = Grid.from_rows(
        [
            "#####",
            "#o<f#",
            "#.PS#",
            "#...#",
            "#####",
        ]
    )
    assert grid.get(1, 1) == TileFlag.COIN
    assert grid.get(2, 1) == TileFlag.STAIRS_DOWN
    assert grid.get(3, 1) == TileFlag.TORCH
    assert grid.get(2, 2) == TileFlag.POTION
    assert grid.get(3, 2) == TileFlag.SWORD_ITEM
    assert grid.is_empty_floor(1, 2)
    assert grid.to_rows()[1] == "#o<f#"
    assert grid.find(TileFlag.STAIRS_DOWN) == [(2, 1)]


def test_from_rows_rejects_unknown_glyph_and_non_square():
    with pytest.raises(ValueError):
        Grid.from_rows(["###", "#x#", "###"])
    with pytest.raises(ValueError):
        Grid.from_rows(["###", "#.#"])


def test_blocked_neighbours_counts_walls_and_edges():
    grid = Grid.from_rows(
        [
            "#####",
            "#.#.#",
            "#...#",
            "#####",
            "#####",
        ]
    )
    assert grid.blocked_neighbours(1, 1) == 3
    assert grid.blocked_neighbours(2, 2) == 2
    assert grid.blocked_neighbours(0, 0) == 4


def test_clear_items_keeps_stairs():
    grid = Grid.bordered()
    grid.set(3, 3, TileFlag.COIN | TileFlag.STAIRS_DOWN)
    grid.clear_items(3, 3)
    assert grid.get(3, 3) == TileFlag.STAIRS_DOWN


def test_glyph_priority_follows_display_order():
    assert tile_glyph(TileFlag.FLOOR) == "."
    assert tile_glyph(TileFlag.COIN | TileFlag.STAIRS_DOWN) == "o"
    assert tile_glyph(TileFlag.TORCH | TileFlag.POTION) == "f"


def test_validate_accepts_a_clean_grid():
    grid = Grid.bordered()
    grid.set(4, 4, TileFlag.POTION)
    grid.validate()
    assert grid.invalid_tiles() == []


def test_clear_items_is_bounds_checked():
    grid = Grid.bordered()
    with pytest.raises(IndexError):
        grid.clear_items(-1, 3)
    with pytest.raises(IndexError):
        grid.clear_items(3, grid.size)
