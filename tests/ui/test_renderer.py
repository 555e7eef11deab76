"""
Tests for the console renderer.
"""

from rich.console import Console

from infinite_floor.core.constants import TileFlag
from infinite_floor.ui.renderer import render_help, render_hud, render_map, render_screen, sight_radius

from conftest import make_enemy, make_session


def render_text(renderable) -> str:
    console = Console(width=140, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_sight_radius():
    assert sight_radius(30) == 10
    assert sight_radius(20) == 10
    assert sight_radius(7) == 3
    assert sight_radius(1) == 0


def test_map_shows_player_enemy_and_items():
    session = make_session(enemies=[make_enemy(9, 7)])
    session.grid.set(7, 8, TileFlag.COIN)
    rows = render_map(session).plain.splitlines()
    assert len(rows) == session.grid.size
    assert rows[7][7] == "@"
    assert rows[7][9] == "E"
    assert rows[8][7] == "o"
    assert rows[7][8] == "."


def test_map_hides_tiles_beyond_the_torch():
    session = make_session(torch=4)
    rows = render_map(session).plain.splitlines()
    assert rows[7][9] == "."
    assert rows[7][10] == " "
    assert rows[0][0] == " "
    assert rows[13][13] == " "


def test_hud_previews_adjacent_enemy_loot():
    enemy = make_enemy(8, 7, hp=5)
    enemy.loot.coins = 3
    session = make_session(enemies=[enemy])
    text = render_text(render_hud(session))
    assert "Level: 1" in text
    assert "HP: 5/5" in text
    assert "Coins: 3" in text


def test_hud_without_adjacent_enemy():
    session = make_session(enemies=[make_enemy(12, 12)])
    text = render_text(render_hud(session))
    assert "HP: -/-" in text


def test_screen_includes_log():
    session = make_session()
    text = render_text(render_screen(session))
    assert "Entering level 1." in text


def test_help_lists_controls():
    text = render_text(render_help())
    assert "Use potion" in text
    assert "stairs down" in text
