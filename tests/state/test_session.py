"""
Tests for the run session.
"""

import pytest

from infinite_floor.core.constants import EndReason
from infinite_floor.core.settings import GameSettings
from infinite_floor.state.session import GameSession

from conftest import make_enemy, make_session


def test_new_game_generates_first_level():
    session = GameSession.new_game(GameSettings(seed=5))
    assert session.level == 1
    assert session.player.position == session.dungeon.start
    assert session.log.latest == "Game started."
    assert "Entering level 1." in session.log


def test_new_game_honours_start_level():
    session = GameSession.new_game(GameSettings(seed=5, start_level=4))
    assert session.level == 4
    assert session.dungeon.level == 4


def test_settings_seed_player():
    session = GameSession(GameSettings(player_hp=12, sword_damage=5, torch=40))
    player = session.player
    assert (player.hp, player.max_hp, player.sword_damage, player.torch) == (12, 12, 5, 40)


def test_same_seed_same_first_level():
    first = GameSession.new_game(GameSettings(seed=9))
    second = GameSession.new_game(GameSettings(seed=9))
    assert first.grid.snapshot() == second.grid.snapshot()


def test_grid_requires_a_level():
    with pytest.raises(RuntimeError):
        GameSession().grid


def test_player_persists_across_levels():
    session = make_session()
    session.player.coins = 7
    player = session.player
    session.enter_level(2)
    assert session.player is player
    assert session.player.coins == 7
    assert session.level == 2


def test_enemy_queries():
    alive = make_enemy(8, 7)
    dead = make_enemy(6, 7)
    dead.alive = False
    session = make_session(enemies=[dead, alive])
    assert session.enemy_at(8, 7) is alive
    assert session.enemy_at(6, 7) is None
    assert session.alive_enemies() == [alive]
    assert session.adjacent_enemy() is alive


def test_first_end_reason_wins():
    session = make_session()
    assert not session.is_over
    session.end(EndReason.TORCH_OUT)
    session.end(EndReason.QUIT)
    assert session.is_over
    assert session.game_end_reason == "Your torch ran out."
