"""
Grid model for the dungeon.

Defines the square tile grid, with bounds-checked access, walkability queries
and the flag manipulation used by the generator and the turn engine.
"""

from collections.abc import Iterator

from ..core.constants import DIRECTIONS, ITEM_FLAGS, MAP_SIZE, NON_WALL_FLAGS, TileFlag
from .tiles import make_tile, tile_from_glyph, tile_glyph

Position = tuple[int, int]


class Grid:
    """
    A square grid of tiles indexed by (x, y), with x growing to the east and
    y growing to the south.

    Attributes:
        size (int):
            The side of the grid.

    """

    def __init__(self, size: int = MAP_SIZE, fill: TileFlag = TileFlag.FLOOR) -> None:
        if size < 3:
            raise ValueError("Grid must be at least 3x3 to keep a wall border")
        self.size = size
        self._tiles: list[list[TileFlag]] = [
            [make_tile(fill) for _ in range(size)] for _ in range(size)
        ]

    # ---- Construction ----------------------------------------------------

    @classmethod
    def bordered(cls, size: int = MAP_SIZE) -> "Grid":
        """Returns a grid with a wall border and an open floor interior."""
        grid = cls(size)
        for x, y in grid.positions():
            if grid.is_border(x, y):
                grid.set(x, y, TileFlag.WALL)
        return grid

    @classmethod
    def from_rows(cls, rows: list[str]) -> "Grid":
        """
        Builds a grid from rows of glyphs (see tiles.GLYPHS).

        Args:
            rows (list[str]):
                One string per row, all of the same length as the row count.

        Returns:
            Grid:
                The parsed grid.

        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Grid rows must form a square")
        grid = cls(size)
        for y, row in enumerate(rows):
            for x, glyph in enumerate(row):
                grid.set(x, y, tile_from_glyph(glyph))
        return grid

    # ---- Bounds ----------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def is_border(self, x: int, y: int) -> bool:
        return x in (0, self.size - 1) or y in (0, self.size - 1)

    def is_interior(self, x: int, y: int) -> bool:
        """True for tiles strictly inside the border ring."""
        return 0 < x < self.size - 1 and 0 < y < self.size - 1

    def positions(self) -> Iterator[Position]:
        """Yields every position, row by row."""
        for y in range(self.size):
            for x in range(self.size):
                yield x, y

    def interior_positions(self) -> Iterator[Position]:
        """Yields every position strictly inside the border, row by row."""
        for y in range(1, self.size - 1):
            for x in range(1, self.size - 1):
                yield x, y

    # ---- Access ----------------------------------------------------------

    def get(self, x: int, y: int) -> TileFlag:
        if not self.in_bounds(x, y):
            raise IndexError(f"Tile out of bounds: ({x},{y}) not in a {self.size}x{self.size} grid")
        return self._tiles[y][x]

    def set(self, x: int, y: int, tile: TileFlag | int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Tile out of bounds: ({x},{y}) not in a {self.size}x{self.size} grid")
        self._tiles[y][x] = make_tile(tile)

    def __getitem__(self, pos: Position) -> TileFlag:
        return self.get(*pos)

    def __setitem__(self, pos: Position, tile: TileFlag | int) -> None:
        self.set(pos[0], pos[1], tile)

    # ---- Queries ---------------------------------------------------------

    def is_wall(self, x: int, y: int) -> bool:
        return self.get(x, y).is_wall

    def is_walkable(self, x: int, y: int) -> bool:
        """Out-of-bounds tiles count as not walkable."""
        if not self.in_bounds(x, y):
            return False
        return not self._tiles[y][x].is_wall

    def is_empty_floor(self, x: int, y: int) -> bool:
        """True for a walkable tile carrying no flag at all."""
        return self.get(x, y) == TileFlag.FLOOR

    def has(self, x: int, y: int, flag: TileFlag) -> bool:
        return bool(self.get(x, y) & flag)

    def blocked_neighbours(self, x: int, y: int) -> int:
        """Counts the orthogonal neighbours that are not walkable."""
        return sum(
            1 for dx, dy in DIRECTIONS if not self.is_walkable(x + dx, y + dy)
        )

    def find(self, flag: TileFlag) -> list[Position]:
        """Returns every position carrying the given flag."""
        return [(x, y) for x, y in self.positions() if self._tiles[y][x] & flag]

    # ---- Mutation --------------------------------------------------------

    def make_floor(self, x: int, y: int) -> None:
        """Forces a tile to plain floor, dropping every flag."""
        self.set(x, y, TileFlag.FLOOR)

    def add_flag(self, x: int, y: int, flag: TileFlag) -> None:
        self.set(x, y, self.get(x, y) | flag)

    def clear_flag(self, x: int, y: int, flag: TileFlag) -> None:
        self.set(x, y, self.get(x, y) & ~flag)

    def clear_items(self, x: int, y: int) -> None:
        """Removes every item flag from a tile, keeping walls and stairs."""
        tile = self.get(x, y)
        if tile & ITEM_FLAGS:
            self.set(x, y, tile & ~ITEM_FLAGS)

    # ---- Validation / Export ---------------------------------------------

    def invalid_tiles(self) -> list[Position]:
        """Returns the positions where a wall also carries an item or stairs."""
        return [
            (x, y)
            for x, y in self.positions()
            if self._tiles[y][x].is_wall and self._tiles[y][x] & NON_WALL_FLAGS
        ]

    def validate(self) -> None:
        """
        Checks the wall/item invariant on the whole grid.

        Raises:
            ValueError:
                If any wall tile also carries an item or the stairs.

        """
        invalid = self.invalid_tiles()
        if invalid:
            raise ValueError(f"Wall tiles carrying items or stairs at {invalid}")

    def to_rows(self) -> list[str]:
        return [
            "".join(tile_glyph(self._tiles[y][x]) for x in range(self.size))
            for y in range(self.size)
        ]

    def snapshot(self) -> tuple[tuple[int, ...], ...]:
        """Hashable copy of the tiles, for equality checks."""
        return tuple(tuple(int(tile) for tile in row) for row in self._tiles)

    def __str__(self) -> str:
        return "\n".join(self.to_rows())
