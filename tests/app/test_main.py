"""
Tests for the command-line entry point and the host loop.
"""

import json

from infinite_floor.core.constants import EndReason, Intent
from infinite_floor.main import build_settings, parse_args, run

from conftest import make_session


class ScriptedInterface:
    """Feeds a fixed list of intents to the host loop."""

    def __init__(self, intents):
        self.intents = list(intents)
        self.waited = 0

    def read_intent(self):
        return self.intents.pop(0)

    def wait_for_key(self, content=None):
        self.waited += 1


def test_command_line_overrides_settings_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"seed": 1, "torch": 12}))
    settings = build_settings(parse_args(["--settings", str(path), "--seed", "99", "--log-level", "DEBUG"]))
    assert settings.seed == 99
    assert settings.torch == 12
    assert settings.log_level == "DEBUG"


def test_defaults_without_arguments():
    args = parse_args([])
    assert args.seed is None and not args.no_intro
    assert build_settings(args).seed is None


def test_run_until_quit():
    session = make_session()
    ui = ScriptedInterface([Intent.NONE, Intent.HELP, Intent.MOVE_EAST, Intent.QUIT])

    run(session, ui)

    assert session.game_end_reason == EndReason.QUIT.value
    assert ui.waited == 1
    assert session.player.position == (8, 7)
    assert ui.intents == []
