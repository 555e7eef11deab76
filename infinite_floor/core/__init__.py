"""
Core system module for the dungeon crawler.

This module contains the fundamental components shared by the rest of the
package: game constants, the message log, settings and display utilities.
"""

from .constants import (
    MAP_SIZE,
    ActionOutcome,
    EndReason,
    EnemyAction,
    Intent,
    PlacementOutcome,
    TileFlag,
)
from .message_log import MessageLog
from .settings import GameSettings, load_settings
from .utils import ccapture, cclear, cprint, crule, make_bar, manhattan, roll, sign

__all__ = [
    # Import from constants.py
    "MAP_SIZE",
    "ActionOutcome",
    "EndReason",
    "EnemyAction",
    "Intent",
    "PlacementOutcome",
    "TileFlag",
    # Import from message_log.py
    "MessageLog",
    # Import from settings.py
    "GameSettings",
    "load_settings",
    # Import from utils.py
    "ccapture",
    "cclear",
    "cprint",
    "crule",
    "make_bar",
    "manhattan",
    "roll",
    "sign",
]
