"""
End-of-run summary for the dungeon crawler.

Computes the achievements earned during a run and the final score, and prints
them with rich.
"""

from pydantic import BaseModel, Field
from rich.table import Table

from ..core.utils import cprint, crule
from ..entities.actors import Player


class Achievement(BaseModel):
    """One achievement tier."""

    name: str = Field(description="Display name of the achievement.")
    threshold: int = Field(description="Minimum value needed to earn it.")
    points: int = Field(description="Achievement points it is worth.")


def _tiers(*rows: tuple[str, int, int]) -> list[Achievement]:
    return [Achievement(name=n, threshold=t, points=p) for n, t, p in rows]


# Each track awards only its highest tier reached; tiers are listed highest first.
KILL_TIERS = _tiers(
    ("Slayer (1000 kills)", 1000, 8),
    ("One-Man Army (500 kills)", 500, 7),
    ("Executioner (250 kills)", 250, 6),
    ("Butcher (100 kills)", 100, 5),
    ("Merciless (50 kills)", 50, 4),
    ("Reckless (25 kills)", 25, 3),
    ("Skirmisher (10 kills)", 10, 2),
    ("First Blood", 1, 1),
)
COIN_TIERS = _tiers(
    ("Filthy Rich (1000 coins)", 1000, 6),
    ("Tycoon (750 coins)", 750, 5),
    ("Deep Pockets (500 coins)", 500, 4),
    ("Entrepreneur (250 coins)", 250, 3),
    ("Well-to-do (100 coins)", 100, 2),
    ("Pocket Change (50 coins)", 50, 1),
)
POTION_TIERS = _tiers(
    ("The Human Flask (200 potions)", 200, 5),
    ("Apothecary's Friend (100 potions)", 100, 4),
    ("Lifeline (50 potions)", 50, 3),
    ("Stockpiler (25 potions)", 25, 2),
    ("Taste Tester (5 potions)", 5, 1),
)
LEVEL_TIERS = _tiers(
    ("Bottomless (100 levels)", 100, 7),
    ("Labyrinth Master (75 levels)", 75, 6),
    ("Abyssal Voyager (50 levels)", 50, 5),
    ("Deep Diver (25 levels)", 25, 4),
    ("Spelunker (10 levels)", 10, 3),
    ("Descender (5 levels)", 5, 2),
    ("First Step (more than 1 level)", 2, 1),
)


class RunSummary(BaseModel):
    """Final stats of a run with its achievements and score."""

    reason: str = Field(default="", description="Why the run ended.")
    level: int
    sword_damage: int
    moves: int
    coins: int
    torch: int
    potions: int
    potions_used: int
    kills: int
    hp: int
    max_hp: int
    achievements: list[Achievement] = Field(default_factory=list)

    @property
    def achievement_points(self) -> int:
        return sum(a.points for a in self.achievements)

    @property
    def score(self) -> int:
        """Weighted sum of the final stats; every move costs one point."""
        return (
            self.kills * 100
            + self.coins * 2
            + self.level * 500
            + self.sword_damage * 50
            + self.hp * 10
            + self.potions_used * 20
            + self.achievement_points * 500
            - self.moves
        )


def _best_tier(value: int, tiers: list[Achievement]) -> Achievement | None:
    return next((tier for tier in tiers if value >= tier.threshold), None)


def earned_achievements(player: Player) -> list[Achievement]:
    """
    Returns the highest tier reached on each achievement track.

    Args:
        player (Player):
            The player at the end of the run.

    Returns:
        list[Achievement]:
            The earned achievements, in track order (kills, coins, potions
            held, levels).

    """
    tracks = (
        (player.kills, KILL_TIERS),
        (player.coins, COIN_TIERS),
        (player.potions, POTION_TIERS),
        (player.level, LEVEL_TIERS),
    )
    return [tier for value, tiers in tracks if (tier := _best_tier(value, tiers))]


def summarize(player: Player, reason: str = "") -> RunSummary:
    """Builds the summary of a finished run."""
    return RunSummary(
        reason=reason,
        level=player.level,
        sword_damage=player.sword_damage,
        moves=player.moves,
        coins=player.coins,
        torch=player.torch,
        potions=player.potions,
        potions_used=player.potions_used,
        kills=player.kills,
        hp=player.hp,
        max_hp=player.max_hp,
        achievements=earned_achievements(player),
    )


def print_summary(summary: RunSummary) -> None:
    """Prints the summary, the achievements and the score."""
    crule("=== Game Summary ===", style="bold magenta")
    if summary.reason:
        cprint(f"Reason: [bold]{summary.reason}[/]\n")

    table = Table(show_header=False, pad_edge=False, box=None)
    table.add_column(style="bold")
    table.add_column(justify="right")
    table.add_row("Level reached", str(summary.level))
    table.add_row("Sword", str(summary.sword_damage))
    table.add_row("Moves", str(summary.moves))
    table.add_row("Coins", str(summary.coins))
    table.add_row("Torch", str(summary.torch))
    table.add_row("Potions (left)", f"{summary.potions}  (used: {summary.potions_used})")
    table.add_row("Kills", str(summary.kills))
    table.add_row("HP", f"{summary.hp}/{summary.max_hp}")
    cprint(table)

    cprint("\n[bold]Achievements:[/]")
    if not summary.achievements:
        cprint(" none")
    for achievement in summary.achievements:
        cprint(f" - {achievement.name}")

    cprint(f"\n[bold green]Final Score: {summary.score}[/]")
