"""
User interface module for the dungeon crawler.

Provides the rich renderer and the prompt_toolkit key reader.
"""

from .cli_interface import KEY_INTENTS, PlayerInterface, intent_from_key
from .renderer import render_help, render_hud, render_log, render_map, render_screen, sight_radius

__all__ = [
    "KEY_INTENTS",
    "PlayerInterface",
    "intent_from_key",
    "render_help",
    "render_hud",
    "render_log",
    "render_map",
    "render_screen",
    "sight_radius",
]
