"""
Console renderer for the dungeon crawler.

Maps the session state to rich renderables: the torch-lit map, the HUD with
the adjacent-enemy loot preview, the message log and the help screen. It only
reads the session.
"""

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.constants import MESSAGE_LOG_SIZE, TileFlag
from ..core.utils import make_bar, manhattan
from ..state.session import GameSession
from ..world.tiles import FLOOR_GLYPH, GLYPHS, tile_glyph

# Maximum sight radius, reached with 20 or more units of torch fuel.
MAX_SIGHT = 10

GLYPH_STYLES: dict[str, str] = {
    FLOOR_GLYPH: "blue",
    GLYPHS[TileFlag.WALL]: "cyan",
    GLYPHS[TileFlag.COIN]: "yellow",
    GLYPHS[TileFlag.STAIRS_DOWN]: "green",
    GLYPHS[TileFlag.TORCH]: "bright_red",
    GLYPHS[TileFlag.POTION]: "magenta",
    GLYPHS[TileFlag.SWORD_ITEM]: "bright_cyan",
}

PLAYER_GLYPH = "@"
ENEMY_GLYPH = "E"


def sight_radius(torch: int) -> int:
    """Returns how far the player sees with the given torch fuel."""
    return min(MAX_SIGHT, torch // 2)


def render_map(session: GameSession) -> Text:
    """
    Renders the grid around the player, hiding what the torch does not reach.

    Args:
        session (GameSession): The session to draw.

    Returns:
        Text: One line per grid row.

    """
    player = session.player
    radius = sight_radius(player.torch)
    grid = session.grid
    text = Text()
    for y in range(grid.size):
        for x in range(grid.size):
            if (x, y) == player.position:
                text.append(PLAYER_GLYPH, style="bold white")
            elif manhattan(x, y, player.x, player.y) > radius:
                text.append(" ")
            elif session.enemy_at(x, y) is not None:
                text.append(ENEMY_GLYPH, style="bold red")
            else:
                glyph = tile_glyph(grid.get(x, y))
                text.append(glyph, style=GLYPH_STYLES.get(glyph, "white"))
        text.append("\n")
    return text


def render_hud(session: GameSession) -> Table:
    """
    Renders the player's stats next to the adjacent enemy's stats and loot.

    Args:
        session (GameSession): The session to draw.

    Returns:
        Table: The HUD table.

    """
    player = session.player
    enemy = session.adjacent_enemy()

    table = Table(title=f"Level: {session.level}", title_style="bold magenta", pad_edge=False)
    table.add_column("me", style="bold", min_width=18)
    table.add_column("Enemies", justify="right", min_width=18)

    if enemy is not None:
        enemy_hp = f"HP: {enemy.hp}/{enemy.max_hp}"
        enemy_sword = f"Sword: {enemy.damage}"
    else:
        enemy_hp, enemy_sword = "HP: -/-", "Sword: -"

    table.add_row(
        f"[green]HP: {player.hp}/{player.max_hp}[/] {make_bar(player.hp, player.max_hp, 6, 'green')}",
        f"[green]{enemy_hp}[/]",
    )
    table.add_row(f"[bright_cyan]Sword: {player.sword_damage}[/]", f"[bright_cyan]{enemy_sword}[/]")
    table.add_row(f"[grey70]Moves: {player.moves}[/]", "[grey70]Moves: -[/]")
    table.add_row(
        f"[yellow]Coins: {player.coins}[/]",
        f"[yellow]Coins: {enemy.coins_drop if enemy else 0}[/]",
    )
    table.add_row(
        f"[bright_red]Torch: {player.torch}[/]",
        f"[bright_red]Torch: {enemy.torch_drop if enemy else 0}[/]",
    )
    table.add_row(
        f"[magenta]Potions: {player.potions}[/]",
        f"[magenta]Potions: {enemy.potions_drop if enemy else 0}[/]",
    )
    table.add_row(f"[blue]Kills: {player.kills}[/]", "")
    return table


def render_log(session: GameSession) -> Panel:
    """Renders the newest-first message log, padded to its full height."""
    lines = list(session.log)
    lines += [""] * (MESSAGE_LOG_SIZE - len(lines))
    return Panel(
        Text("\n".join(lines), style="grey70"),
        title="~~~Message Log:~~~",
        width=60,
    )


def render_screen(session: GameSession) -> Table:
    """Lays out the map and the HUD on the left and the log on the right."""
    layout = Table.grid(padding=(0, 4))
    layout.add_column()
    layout.add_column()
    layout.add_row(Group(render_map(session), render_hud(session)), render_log(session))
    return layout


def render_help() -> Panel:
    """Renders the controls and the map legend."""
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    for keys, meaning in (
        ("WASD", "Move / attack"),
        ("p", "Use potion"),
        ("e", "Defend"),
        ("h", "Help"),
        ("ESC / q", "Quit"),
    ):
        table.add_row(keys, meaning)
    table.add_row("", "")
    for glyph, meaning in (
        (FLOOR_GLYPH, "floor"),
        (GLYPHS[TileFlag.WALL], "wall"),
        (GLYPHS[TileFlag.COIN], "coin"),
        (GLYPHS[TileFlag.STAIRS_DOWN], "stairs down"),
        (GLYPHS[TileFlag.TORCH], "torch"),
        (GLYPHS[TileFlag.POTION], "potion"),
        (GLYPHS[TileFlag.SWORD_ITEM], "sword (increases attack)"),
    ):
        table.add_row(Text(f" {glyph} ", style=GLYPH_STYLES[glyph]), f"= {meaning}")
    table.add_row(Text(f" {ENEMY_GLYPH} ", style="bold red"), "= enemy")
    return Panel(table, title="HELP - Controls and Symbols", title_align="left", border_style="magenta")
