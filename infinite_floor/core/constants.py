"""
Constants and enumerations for the dungeon crawler.

Defines the fixed map size, the tile flags, the player intents, the run
termination reasons and the tuning values used by the generator and the turn
engine.
"""

from enum import Enum, IntFlag

# Side of the square dungeon grid.
MAP_SIZE = 15

# Maximum number of entries kept by the message log.
MESSAGE_LOG_SIZE = 14

# Attempt caps for the bounded placement loops.
PLACEMENT_ATTEMPTS = 1000
ENEMY_PLACEMENT_ATTEMPTS = 200
DEAD_END_PASSES = 1000

# Interior wall chance is 1 in WALL_ODDS.
WALL_ODDS = 10

# Cumulative d100 thresholds for scattered items.
COIN_CHANCE = 5
TORCH_CHANCE = 8
POTION_CHANCE = 10
SWORD_CHANCE = 12

# Item and healing values.
TORCH_PICKUP_FUEL = 20
POTION_HEAL_MIN = 5
POTION_HEAL_MAX = 10
SWORD_BONUS_MIN = 1
SWORD_BONUS_MAX = 2

# Enemy behaviour.
ACTIVATION_BASE_DISTANCE = 4
ENEMY_ATTACK_CHANCE = 70

# Every KILLS_PER_MAX_HP kills the player gains one max HP.
KILLS_PER_MAX_HP = 10

# The four orthogonal directions, in the order they are probed.
DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().replace("_", " ").capitalize()


class TileFlag(IntFlag):
    """Flags a single dungeon tile can carry. No flag at all is plain floor."""

    FLOOR = 0
    WALL = 1
    COIN = 1 << 1
    STAIRS_DOWN = 1 << 2
    TORCH = 1 << 4
    POTION = 1 << 5
    SWORD_ITEM = 1 << 6

    @property
    def is_wall(self) -> bool:
        return bool(self & TileFlag.WALL)

    @property
    def items(self) -> "TileFlag":
        """Returns only the item flags carried by this tile."""
        return self & ITEM_FLAGS


# Every flag that represents something the player can pick up.
ITEM_FLAGS = TileFlag.COIN | TileFlag.TORCH | TileFlag.POTION | TileFlag.SWORD_ITEM

# Flags that must never share a tile with WALL.
NON_WALL_FLAGS = ITEM_FLAGS | TileFlag.STAIRS_DOWN


class Intent(NiceEnum):
    """A single, complete player intent handed to the turn engine."""

    NONE = "NONE"
    MOVE_NORTH = "MOVE_NORTH"
    MOVE_SOUTH = "MOVE_SOUTH"
    MOVE_EAST = "MOVE_EAST"
    MOVE_WEST = "MOVE_WEST"
    USE_POTION = "USE_POTION"
    DEFEND = "DEFEND"
    HELP = "HELP"
    QUIT = "QUIT"

    @property
    def delta(self) -> tuple[int, int] | None:
        """Returns the (dx, dy) step of a directional intent, None otherwise."""
        return {
            Intent.MOVE_NORTH: (0, -1),
            Intent.MOVE_SOUTH: (0, 1),
            Intent.MOVE_EAST: (1, 0),
            Intent.MOVE_WEST: (-1, 0),
        }.get(self)

    @property
    def is_directional(self) -> bool:
        return self.delta is not None


class ActionOutcome(NiceEnum):
    """What a resolved player intent actually did."""

    NOTHING = "NOTHING"
    ATTACKED = "ATTACKED"
    KILLED = "KILLED"
    MOVED = "MOVED"
    BLOCKED = "BLOCKED"
    PICKED_UP = "PICKED_UP"
    DESCENDED = "DESCENDED"
    DRANK_POTION = "DRANK_POTION"
    NO_POTION = "NO_POTION"
    DEFENDED = "DEFENDED"
    HELP = "HELP"
    QUIT = "QUIT"


class EnemyAction(NiceEnum):
    """What an enemy did during the enemy-turn batch."""

    IDLE = "IDLE"
    ATTACK = "ATTACK"
    DEFEND = "DEFEND"
    MOVE = "MOVE"
    WAIT = "WAIT"


class EndReason(NiceEnum):
    """The three ways a run can end, with the text shown in the summary."""

    TORCH_OUT = "Your torch ran out."
    KILLED = "You were killed."
    QUIT = "Player quit the game."


class PlacementOutcome(NiceEnum):
    """Result of a bounded placement loop."""

    PLACED = "PLACED"
    FORCED = "FORCED"
    SKIPPED = "SKIPPED"
