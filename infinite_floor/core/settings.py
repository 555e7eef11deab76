"""
Settings module for the dungeon crawler.

Defines the start-up configuration of a run and the helper that loads it from
an optional JSON file.
"""

import json
from pathlib import Path

from pydantic import BaseModel, Field


class GameSettings(BaseModel):
    """
    Start-up configuration of a run.

    Only the player's starting stats and the random seed are configurable; the
    dungeon size and the difficulty curve are fixed.
    """

    seed: int | None = Field(
        default=None,
        description="Base seed for reproducible runs. None uses wall-clock entropy.",
    )
    start_level: int = Field(
        default=1,
        ge=1,
        description="The dungeon level the run starts on.",
    )
    player_hp: int = Field(
        default=20,
        ge=1,
        description="Starting (and maximum) hit points of the player.",
    )
    sword_damage: int = Field(
        default=2,
        ge=0,
        description="Starting sword damage rating of the player.",
    )
    torch: int = Field(
        default=30,
        ge=1,
        description="Starting torch fuel; one unit burns per turn.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Name of the Python logging level (e.g., 'DEBUG').",
    )


def load_settings(path: Path | None = None) -> GameSettings:
    """
    Loads the settings from a JSON file.

    Args:
        path (Path | None):
            The JSON file to read. None, or a missing file, yields the
            defaults.

    Returns:
        GameSettings:
            The validated settings.

    Raises:
        pydantic.ValidationError:
            If the file contains invalid values.

    """
    if path is None or not path.exists():
        return GameSettings()
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    return GameSettings.model_validate(data)
