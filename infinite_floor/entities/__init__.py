"""
Entities module for the dungeon crawler.

Contains the player and enemy records mutated by the turn engine.
"""

from .actors import Actor, Enemy, LootDrop, Player

__all__ = [
    "Actor",
    "Enemy",
    "LootDrop",
    "Player",
]
