"""
Tests for the end-of-run summary.
"""

from infinite_floor.entities.actors import Player
from infinite_floor.report.summary import earned_achievements, print_summary, summarize


def names(player):
    return [achievement.name for achievement in earned_achievements(player)]


def test_fresh_player_earns_nothing():
    assert names(Player()) == []


def test_only_highest_tier_per_track():
    player = Player(kills=27, coins=120, potions=5, level=12)
    assert names(player) == [
        "Reckless (25 kills)",
        "Well-to-do (100 coins)",
        "Taste Tester (5 potions)",
        "Spelunker (10 levels)",
    ]


def test_level_track_starts_at_two():
    assert names(Player(level=2)) == ["First Step (more than 1 level)"]


def test_potion_track_counts_potions_held():
    assert names(Player(potions=4, potions_used=300)) == []


def test_score():
    player = Player(hp=15, sword_damage=3, kills=1, coins=10, level=2, moves=40, potions_used=2)
    summary = summarize(player, "Player quit the game.")
    # First Blood (1) + First Step (1).
    assert summary.achievement_points == 2
    assert summary.score == 100 + 20 + 1000 + 150 + 150 + 40 + 1000 - 40
    assert summary.reason == "Player quit the game."


def test_print_summary(capsys):
    print_summary(summarize(Player(kills=1), "You were killed."))
    out = capsys.readouterr().out
    assert "You were killed." in out
    assert "First Blood" in out
    assert "Final Score" in out
