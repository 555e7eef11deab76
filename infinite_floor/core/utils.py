"""
Utilities module for the dungeon crawler.

Provides console printing with rich formatting and small arithmetic helpers
shared by the generator and the turn engine.
"""

from __future__ import annotations

import random
from typing import Any

from rich.console import Console
from rich.rule import Rule

# Initialize the rich console.
_console = Console(markup=True, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def cclear() -> None:
    """Clears the terminal."""
    _console.clear()


def ccapture(content: Any) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.

    Returns:
        str: The captured output as a string.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


def manhattan(ax: int, ay: int, bx: int, by: int) -> int:
    """Returns the Manhattan distance between two grid positions."""
    return abs(ax - bx) + abs(ay - by)


def sign(value: int) -> int:
    """Returns -1, 0 or 1 following the sign of value."""
    return (value > 0) - (value < 0)


def roll(rng: random.Random, low: int, high: int) -> int:
    """
    Rolls an integer uniformly in the inclusive range [low, high].

    Args:
        rng (random.Random): The random source to draw from.
        low (int): The smallest possible result.
        high (int): The largest possible result.

    Returns:
        int: The rolled value.

    """
    return rng.randint(low, high)


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (int): The current value.
        maximum (int): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    if maximum <= 0:
        return ""
    # Compute the filled part of the bar, clamped to the bar length.
    filled = max(0, min(length, int((current / maximum) * length)))
    empty = length - filled
    bar = f"[{color}]" + "▮" * filled
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar
