"""
Main entry point for Infinite Floor.

Parses the command line, sets up logging, then runs the host loop: read one
intent, hand it to the turn engine, redraw, until the run ends. Finishes with
the run summary.
"""

import argparse
import logging
from pathlib import Path

from rich.panel import Panel

from .combat.turn_engine import TurnEngine
from .core.constants import Intent
from .core.logging import parse_level, setup_logging
from .core.settings import GameSettings, load_settings
from .core.utils import cclear, cprint
from .report.summary import print_summary, summarize
from .state.session import GameSession
from .ui.cli_interface import PlayerInterface
from .ui.renderer import render_help, render_screen

logger = logging.getLogger(__name__)

INTRO = (
    "[bold]The Primal Sun is gone, leaving the world to the Eternal Whisper.[/]\n\n"
    "In this abyss, darkness devours the soul.\n"
    "Here, Fire is God: the Sacred Flame is all that separates your reason\n"
    "from the madness of beasts.\n\n"
    "Take up your torch, adventurer. Slay the shadows and reclaim the light.\n"
    "[italic]Keep the fire burning - or perish in the silence.[/]\n\n"
    "Use WASD to move, H for help, ESC to quit."
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="infinite-floor",
        description="A turn-based, torch-lit dungeon crawl.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run.")
    parser.add_argument("--settings", type=Path, default=None, help="JSON settings file.")
    parser.add_argument("--log-level", default=None, help="Logging level (e.g., DEBUG).")
    parser.add_argument("--no-intro", action="store_true", help="Skip the intro screen.")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> GameSettings:
    """Loads the settings file and applies the command-line overrides."""
    settings = load_settings(args.settings)
    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return settings.model_copy(update=overrides)


def redraw(session: GameSession) -> None:
    cclear()
    cprint(render_screen(session))


def run(session: GameSession, ui: PlayerInterface) -> None:
    """
    Runs the host loop until the session ends.

    Args:
        session (GameSession): The session to play.
        ui (PlayerInterface): The key reader.

    """
    engine = TurnEngine(session)
    redraw(session)
    while not session.is_over:
        intent = ui.read_intent()
        if intent == Intent.NONE:
            continue
        if intent == Intent.HELP:
            cclear()
            ui.wait_for_key(render_help())
            redraw(session)
            continue
        result = engine.play_turn(intent)
        logger.debug("Turn: %s -> %s", intent, result.action.outcome)
        redraw(session)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = build_settings(args)
    setup_logging(parse_level(settings.log_level))

    ui = PlayerInterface()
    if not args.no_intro:
        cclear()
        ui.wait_for_key(Panel(INTRO, title="INFINITE FLOOR", border_style="bright_cyan"))

    session = GameSession.new_game(settings)
    run(session, ui)

    cclear()
    print_summary(summarize(session.player, session.game_end_reason))


if __name__ == "__main__":
    main()
