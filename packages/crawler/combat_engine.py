"""
Combat Engine - Turn resolution for a single encounter.

One round is one player action followed, if the enemy survived, by one enemy
action:

    AWAITING_PLAYER_ACTION -> RESOLVING_PLAYER_ACTION
        -> CLEARED                      (enemy hp <= 0, enemy never acts)
        -> AWAITING_ENEMY_ACTION -> RESOLVING_ENEMY_ACTION
            -> DEFEATED                 (player hp <= 0)
            -> AWAITING_PLAYER_ACTION

Actions come from the acting actor's inventory: all weapons (acquisition
order) then all active buffs, numbered from 1. A weapon hits the opponent, a
buff is applied to the user, and single-use items are removed after use.
Damage and healing are immediate; there is no randomness anywhere.

Usage:
    engine = CombatEngine(player, room.enemy)
    while not engine.is_combat_over():
        labels = engine.get_action_labels()
        engine.play_round(choose(labels))
    result = engine.get_result()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
import logging

from .content.items import Item, Weapon, ActiveBuff
from .state.actors import Actor, Enemy, Player


logger = logging.getLogger(__name__)


# =============================================================================
# COMBAT PHASE
# =============================================================================

class CombatPhase(Enum):
    """Current phase of an encounter."""
    AWAITING_PLAYER_ACTION = "AWAITING_PLAYER_ACTION"
    RESOLVING_PLAYER_ACTION = "RESOLVING_PLAYER_ACTION"
    AWAITING_ENEMY_ACTION = "AWAITING_ENEMY_ACTION"
    RESOLVING_ENEMY_ACTION = "RESOLVING_ENEMY_ACTION"
    CLEARED = "CLEARED"
    DEFEATED = "DEFEATED"


TERMINAL_PHASES = (CombatPhase.CLEARED, CombatPhase.DEFEATED)


# =============================================================================
# ENEMY POLICY
# =============================================================================

# Receives the enemy and its action menu, returns a 1-indexed choice.
EnemyPolicy = Callable[[Enemy, List[Item]], int]


def first_action(enemy: Enemy, menu: List[Item]) -> int:
    """Default enemy AI: always use the first item on the menu."""
    return 1


# =============================================================================
# COMBAT RESULT
# =============================================================================

@dataclass
class CombatResult:
    """Summary of an encounter so far (or of a finished one)."""
    cleared: bool
    defeated: bool
    rounds: int
    player_hp: int
    enemy_hp: int
    damage_dealt: int
    damage_taken: int
    items_used: List[str] = field(default_factory=list)


# =============================================================================
# COMBAT LOG
# =============================================================================

@dataclass
class CombatLogEntry:
    """A single combat log entry."""
    turn: int
    event_type: str
    data: Dict[str, Any]


@dataclass
class CombatLog:
    """Ordered record of everything that happened in the encounter."""
    entries: List[CombatLogEntry] = field(default_factory=list)

    def log(self, turn: int, event_type: str, **data):
        self.entries.append(CombatLogEntry(turn=turn, event_type=event_type, data=data))
        logger.debug("turn %d %s %s", turn, event_type, data)

    def get_events(self, event_type: str) -> List[CombatLogEntry]:
        return [e for e in self.entries if e.event_type == event_type]


# =============================================================================
# COMBAT ENGINE
# =============================================================================

class CombatEngine:
    """Resolves player and enemy actions for one encounter."""

    def __init__(
        self,
        player: Player,
        enemy: Enemy,
        enemy_policy: EnemyPolicy = first_action,
    ):
        self.player = player
        self.enemy = enemy
        self.enemy_policy = enemy_policy

        self.round = 0
        self.log = CombatLog()

        # Statistics
        self.damage_dealt = 0
        self.damage_taken = 0
        self.items_used: List[str] = []

        if enemy.is_defeated:
            self.phase = CombatPhase.CLEARED
        else:
            self.phase = CombatPhase.AWAITING_PLAYER_ACTION

        self.log.log(0, "combat_start",
                     player_hp=player.hp,
                     enemy=enemy.name,
                     enemy_hp=enemy.hp)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_action_menu(self, actor: Optional[Actor] = None) -> List[Item]:
        """Items the actor (default: player) can use, weapons first."""
        actor = actor or self.player
        return actor.inventory.get_action_items()

    def get_action_labels(self, actor: Optional[Actor] = None) -> List[str]:
        return [item.action_label for item in self.get_action_menu(actor)]

    def is_valid_choice(self, choice: Any, actor: Optional[Actor] = None) -> bool:
        """True if `choice` is an int in 1..len(menu)."""
        if isinstance(choice, bool) or not isinstance(choice, int):
            return False
        return 1 <= choice <= len(self.get_action_menu(actor))

    def is_cleared(self) -> bool:
        return self.phase == CombatPhase.CLEARED

    def is_defeat(self) -> bool:
        return self.phase == CombatPhase.DEFEATED

    def is_combat_over(self) -> bool:
        return self.phase in TERMINAL_PHASES

    # =========================================================================
    # Turn Resolution
    # =========================================================================

    def player_turn(self, choice: int) -> Dict[str, Any]:
        """Use the player's item at 1-indexed `choice` against the enemy."""
        if self.phase != CombatPhase.AWAITING_PLAYER_ACTION:
            return {"success": False, "error": f"Not the player's turn ({self.phase.value})"}
        if not self.is_valid_choice(choice, self.player):
            return {"success": False, "error": f"Invalid action choice: {choice!r}"}

        self.round += 1
        self.phase = CombatPhase.RESOLVING_PLAYER_ACTION
        item = self.get_action_menu(self.player)[choice - 1]
        result = self._use_item(self.player, self.enemy, item)
        self.damage_dealt += result.get("damage", 0)

        if self.enemy.is_defeated:
            self.phase = CombatPhase.CLEARED
            self.log.log(self.round, "enemy_defeated", enemy=self.enemy.name, enemy_hp=self.enemy.hp)
        else:
            self.phase = CombatPhase.AWAITING_ENEMY_ACTION

        result["phase"] = self.phase
        return result

    def enemy_turn(self) -> Dict[str, Any]:
        """Let the enemy act according to its policy."""
        if self.phase != CombatPhase.AWAITING_ENEMY_ACTION:
            return {"success": False, "error": f"Not the enemy's turn ({self.phase.value})"}

        self.phase = CombatPhase.RESOLVING_ENEMY_ACTION
        menu = self.get_action_menu(self.enemy)
        choice = self.enemy_policy(self.enemy, menu) if menu else 0

        if not self.is_valid_choice(choice, self.enemy):
            # Nothing usable; the enemy forfeits its action.
            self.log.log(self.round, "enemy_pass", enemy=self.enemy.name, choice=choice)
            self.phase = CombatPhase.AWAITING_PLAYER_ACTION
            return {"success": False, "error": f"Enemy has no valid action: {choice!r}", "phase": self.phase}

        item = menu[choice - 1]
        result = self._use_item(self.enemy, self.player, item)
        self.damage_taken += result.get("damage", 0)

        if self.player.is_defeated:
            self.phase = CombatPhase.DEFEATED
            self.log.log(self.round, "player_defeated", player_hp=self.player.hp)
        else:
            self.phase = CombatPhase.AWAITING_PLAYER_ACTION

        result["phase"] = self.phase
        return result

    def play_round(self, choice: int) -> Dict[str, Any]:
        """
        Resolve one full round: the player's action, then the enemy's if the
        enemy is still standing.
        """
        player_result = self.player_turn(choice)
        if not player_result["success"]:
            return {"success": False, "error": player_result["error"], "player": player_result}

        enemy_result = None
        if self.phase == CombatPhase.AWAITING_ENEMY_ACTION:
            enemy_result = self.enemy_turn()

        return {
            "success": True,
            "round": self.round,
            "player": player_result,
            "enemy": enemy_result,
            "cleared": self.is_cleared(),
            "defeated": self.is_defeat(),
        }

    def _use_item(self, user: Actor, opponent: Actor, item: Item) -> Dict[str, Any]:
        """Apply one item. Weapons hit the opponent, buffs apply to the user."""
        result: Dict[str, Any] = {"success": True, "actor": user.name, "item": item.name}

        if isinstance(item, Weapon):
            damage = item.apply_damage(user, opponent)
            result["target"] = opponent.name
            result["damage"] = damage
            self.log.log(self.round, "attack",
                         actor=user.name, target=opponent.name,
                         item=item.name, damage=damage, target_hp=opponent.hp)
        elif isinstance(item, ActiveBuff):
            amount = item.apply_buff(user)
            result["target"] = user.name
            result["buff"] = item.verb
            result["amount"] = amount
            self.log.log(self.round, "buff",
                         actor=user.name, item=item.name,
                         verb=item.verb, amount=amount, target_hp=user.hp)

        if user is self.player:
            self.items_used.append(item.name)

        if item.single_use:
            result["consumed"] = user.inventory.remove_item(item)

        return result

    # =========================================================================
    # Result
    # =========================================================================

    def get_result(self) -> CombatResult:
        return CombatResult(
            cleared=self.is_cleared(),
            defeated=self.is_defeat(),
            rounds=self.round,
            player_hp=self.player.hp,
            enemy_hp=self.enemy.hp,
            damage_dealt=self.damage_dealt,
            damage_taken=self.damage_taken,
            items_used=list(self.items_used),
        )

    def get_state_dict(self) -> Dict[str, Any]:
        """Plain-data snapshot for logging/debugging."""
        return {
            "phase": self.phase.value,
            "round": self.round,
            "player": {
                "name": self.player.name,
                "hp": self.player.hp,
                "actions": self.get_action_labels(self.player),
            },
            "enemy": {
                "name": self.enemy.name,
                "hp": self.enemy.hp,
                "actions": self.get_action_labels(self.enemy),
            },
        }
