"""
Combat system module for the dungeon crawler.

This module handles the damage formulas, the enemy AI and the turn engine
that ties the player's actions and the enemies' responses together.
"""

from .damage import DamageRoll, roll_damage
from .npc_ai import activation_distance, choose_chase_step
from .turn_engine import ActionResult, EnemyTurnReport, TurnEngine, TurnResult

__all__ = [
    "ActionResult",
    "DamageRoll",
    "EnemyTurnReport",
    "TurnEngine",
    "TurnResult",
    "activation_distance",
    "choose_chase_step",
    "roll_damage",
]
