"""
Turn engine for the dungeon crawler.

Resolves one player intent, then (if the intent consumed a turn) one full
enemy-turn batch, then burns the torch and checks the run termination
triggers. Owns the damage application, the pickups, the loot grants and the
kill-based max HP upgrade.
"""

import logging
import random

from catchery import log_warning
from pydantic import BaseModel, Field

from ..core.constants import (
    POTION_HEAL_MAX,
    POTION_HEAL_MIN,
    SWORD_BONUS_MAX,
    SWORD_BONUS_MIN,
    TORCH_PICKUP_FUEL,
    ActionOutcome,
    EndReason,
    EnemyAction,
    Intent,
    TileFlag,
)
from ..core.utils import roll
from ..entities.actors import Enemy, Player
from ..state.session import GameSession
from .damage import DamageRoll, enemy_attack_damage, player_attack_damage
from .npc_ai import choose_adjacent_action, choose_chase_step, notices_player

logger = logging.getLogger(__name__)


class ActionResult(BaseModel):
    """What a single player intent did."""

    intent: Intent = Field(description="The resolved intent.")
    outcome: ActionOutcome = Field(description="What actually happened.")
    consumed_turn: bool = Field(
        default=False,
        description="Whether the enemies get to act afterwards.",
    )
    damage: DamageRoll | None = Field(
        default=None,
        description="The damage dealt by an attack.",
    )
    pickup: TileFlag | None = Field(
        default=None,
        description="The item picked up by a move, if any.",
    )


class EnemyTurnReport(BaseModel):
    """What one enemy did during an enemy-turn batch."""

    index: int = Field(description="Position of the enemy in spawn order.")
    action: EnemyAction = Field(description="The action taken.")
    activated: bool = Field(
        default=False,
        description="Whether the enemy noticed the player this turn.",
    )
    damage: DamageRoll | None = Field(
        default=None,
        description="The damage dealt to the player, if it attacked.",
    )


class TurnResult(BaseModel):
    """The outcome of one full turn."""

    action: ActionResult = Field(description="The player's part of the turn.")
    enemy_turns: list[EnemyTurnReport] = Field(
        default_factory=list,
        description="The enemies' part of the turn, in spawn order.",
    )
    game_end_reason: str = Field(
        default="",
        description="Why the run ended, empty while it goes on.",
    )

    @property
    def ended(self) -> bool:
        return bool(self.game_end_reason)


class TurnEngine:
    """
    Applies player intents and enemy behaviour to a GameSession.

    Exactly one intent is resolved, then exactly one enemy batch runs, before
    the next intent is accepted.
    """

    def __init__(self, session: GameSession) -> None:
        """
        Initialize the TurnEngine.

        Args:
            session (GameSession): The session to mutate.

        """
        self.session = session

    @property
    def player(self) -> Player:
        return self.session.player

    @property
    def rng(self) -> random.Random:
        return self.session.rng

    def say(self, message: str) -> None:
        self.session.log.push(message)

    # ============================================================================
    # FULL TURN
    # ============================================================================

    def play_turn(self, intent: Intent) -> TurnResult:
        """
        Plays one full turn.

        Args:
            intent (Intent):
                The player's intent.

        Returns:
            TurnResult:
                What the player and the enemies did, and whether the run ended.

        """
        if self.session.is_over:
            log_warning(
                "Intent ignored, the run is over",
                {"intent": str(intent), "reason": self.session.game_end_reason},
            )
            return TurnResult(
                action=ActionResult(intent=intent, outcome=ActionOutcome.NOTHING),
                game_end_reason=self.session.game_end_reason,
            )

        action = self.resolve_player_action(intent)
        enemy_turns: list[EnemyTurnReport] = []
        if action.consumed_turn:
            enemy_turns = self.resolve_enemy_turn()
            self.end_turn()
        return TurnResult(
            action=action,
            enemy_turns=enemy_turns,
            game_end_reason=self.session.game_end_reason,
        )

    def end_turn(self) -> None:
        """Burns one unit of torch fuel and checks the termination triggers."""
        self.player.torch -= 1
        if self.player.torch <= 0:
            self.session.end(EndReason.TORCH_OUT)
        elif self.player.hp <= 0:
            self.session.end(EndReason.KILLED)

    # ============================================================================
    # PLAYER ACTIONS
    # ============================================================================

    def resolve_player_action(self, intent: Intent) -> ActionResult:
        """
        Resolves one player intent without running the enemies.

        Args:
            intent (Intent):
                The player's intent.

        Returns:
            ActionResult:
                What the intent did and whether it consumed a turn.

        """
        delta = intent.delta
        if delta is not None:
            tx, ty = self.player.x + delta[0], self.player.y + delta[1]
            enemy = self.session.enemy_at(tx, ty)
            if enemy is not None:
                return self._attack(intent, enemy)
            return self._move(intent, tx, ty)
        if intent == Intent.USE_POTION:
            return self._use_potion(intent)
        if intent == Intent.DEFEND:
            self.player.defending = True
            self.say("You raise your guard.")
            return ActionResult(intent=intent, outcome=ActionOutcome.DEFENDED, consumed_turn=True)
        if intent == Intent.HELP:
            return ActionResult(intent=intent, outcome=ActionOutcome.HELP)
        if intent == Intent.QUIT:
            self.session.end(EndReason.QUIT)
            return ActionResult(intent=intent, outcome=ActionOutcome.QUIT)
        return ActionResult(intent=intent, outcome=ActionOutcome.NOTHING)

    def _attack(self, intent: Intent, enemy: Enemy) -> ActionResult:
        damage = player_attack_damage(self.rng, self.player, enemy)
        enemy.take_damage(damage.dealt)
        self.say(f"You hit the enemy for {damage.dealt} damage.")
        logger.debug("Player hits enemy at %s for %s", enemy.position, damage)
        if enemy.alive:
            return ActionResult(
                intent=intent,
                outcome=ActionOutcome.ATTACKED,
                consumed_turn=True,
                damage=damage,
            )
        self.say("Victory! You have defeated the enemy.")
        self.drop_loot(enemy)
        return ActionResult(
            intent=intent,
            outcome=ActionOutcome.KILLED,
            consumed_turn=True,
            damage=damage,
        )

    def _move(self, intent: Intent, tx: int, ty: int) -> ActionResult:
        # Bumping into a wall still counts as a move and costs a turn.
        self.player.moves += 1
        grid = self.session.grid
        if not grid.is_walkable(tx, ty):
            return ActionResult(intent=intent, outcome=ActionOutcome.BLOCKED, consumed_turn=True)

        self.player.move_to(tx, ty)
        tile = grid.get(tx, ty)
        if tile & TileFlag.COIN:
            grid.clear_flag(tx, ty, TileFlag.COIN)
            self.player.coins += 1
            self.say("You gain 1 coin.")
            pickup = TileFlag.COIN
        elif tile & TileFlag.TORCH:
            grid.clear_flag(tx, ty, TileFlag.TORCH)
            self.player.torch += TORCH_PICKUP_FUEL
            self.say(f"You found torch +{TORCH_PICKUP_FUEL}.")
            pickup = TileFlag.TORCH
        elif tile & TileFlag.POTION:
            grid.clear_flag(tx, ty, TileFlag.POTION)
            self.player.potions += 1
            self.say("You found a potion.")
            pickup = TileFlag.POTION
        elif tile & TileFlag.SWORD_ITEM:
            grid.clear_flag(tx, ty, TileFlag.SWORD_ITEM)
            bonus = roll(self.rng, SWORD_BONUS_MIN, SWORD_BONUS_MAX)
            self.player.sword_damage += bonus
            self.say(f"You found a sword (+{bonus} attack).")
            pickup = TileFlag.SWORD_ITEM
        elif tile & TileFlag.STAIRS_DOWN:
            self.session.enter_level(self.session.level + 1)
            return ActionResult(intent=intent, outcome=ActionOutcome.DESCENDED, consumed_turn=True)
        else:
            return ActionResult(intent=intent, outcome=ActionOutcome.MOVED, consumed_turn=True)
        return ActionResult(
            intent=intent,
            outcome=ActionOutcome.PICKED_UP,
            consumed_turn=True,
            pickup=pickup,
        )

    def _use_potion(self, intent: Intent) -> ActionResult:
        if self.player.potions <= 0:
            self.say("You have no potions.")
            return ActionResult(intent=intent, outcome=ActionOutcome.NO_POTION)
        heal = roll(self.rng, POTION_HEAL_MIN, POTION_HEAL_MAX)
        self.player.heal(heal)
        self.player.potions -= 1
        self.player.potions_used += 1
        self.say(f"You used a potion and recovered {heal} HP.")
        return ActionResult(intent=intent, outcome=ActionOutcome.DRANK_POTION, consumed_turn=True)

    def drop_loot(self, enemy: Enemy) -> None:
        """
        Grants a dead enemy's precomputed drops and counts the kill.

        Args:
            enemy (Enemy):
                The enemy that just died.

        """
        player = self.player
        loot = enemy.loot
        if loot.coins > 0:
            player.coins += loot.coins
            self.say(f"You gain {loot.coins} coins.")
        if loot.potions > 0:
            player.potions += loot.potions
            self.say(f"You gain {loot.potions} potion(s).")
        if loot.torch > 0:
            player.torch += loot.torch
            self.say(f"You gain {loot.torch} torch(es).")
        if loot.hp > 0:
            player.heal(loot.hp)
            self.say(f"You recovered {loot.hp} HP.")
        if player.record_kill():
            self.say(f"Max HP increased to {player.max_hp}!")

    # ============================================================================
    # ENEMY TURN
    # ============================================================================

    def resolve_enemy_turn(self) -> list[EnemyTurnReport]:
        """
        Runs every live enemy once, in spawn order, then clears the player's
        defending flag.

        Returns:
            list[EnemyTurnReport]:
                One report per live enemy.

        """
        reports: list[EnemyTurnReport] = []
        for index, enemy in enumerate(self.session.enemies):
            if not enemy.alive:
                continue
            reports.append(self._run_enemy(index, enemy))
        self.player.defending = False
        return reports

    def _run_enemy(self, index: int, enemy: Enemy) -> EnemyTurnReport:
        player = self.player
        distance = enemy.distance_to(player)

        activated = False
        if not enemy.active and notices_player(enemy, player, self.session.level):
            activated = enemy.activate()
            self.say("An enemy notices you!")
        if not enemy.active:
            return EnemyTurnReport(index=index, action=EnemyAction.IDLE)

        # The guard only lasts until the enemy's next turn.
        enemy.defending = False

        if distance == 1:
            if choose_adjacent_action(self.rng) == EnemyAction.ATTACK:
                damage = enemy_attack_damage(self.rng, enemy, player)
                player.take_damage(damage.dealt)
                if damage.reduction > 0:
                    self.say(f"Your defense reduced damage by {damage.reduction}.")
                self.say(f"Enemy hits you for {damage.dealt} damage.")
                return EnemyTurnReport(
                    index=index,
                    action=EnemyAction.ATTACK,
                    activated=activated,
                    damage=damage,
                )
            enemy.defending = True
            self.say("Enemy defends.")
            return EnemyTurnReport(index=index, action=EnemyAction.DEFEND, activated=activated)

        occupied = {
            other.position
            for other in self.session.enemies
            if other.alive and other is not enemy
        }
        step = choose_chase_step(enemy, player, self.session.grid, occupied)
        if step is None:
            return EnemyTurnReport(index=index, action=EnemyAction.WAIT, activated=activated)
        enemy.move_to(*step)
        return EnemyTurnReport(index=index, action=EnemyAction.MOVE, activated=activated)
