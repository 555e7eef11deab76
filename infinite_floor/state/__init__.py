"""
State module for the dungeon crawler.
"""

from .session import GameSession

__all__ = ["GameSession"]
