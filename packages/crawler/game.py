"""
Game Runner - Main loop for a dungeon crawl.

Each step of the loop:
1. Render the current state
2. Ask for a player action and resolve one combat round
   (player action, then the enemy's if it survived)
3. If the room is cleared: render the cleared room, give the player the
   enemy's loot and ask whether to continue
4. Continue -> advance the map to a new room; quit -> game over

Status is ONGOING until the player quits or dies (GAMEOVER). VICTORY exists
as a status but no win condition sets it yet.

Usage:
    runner = create_game(action_handler=ScriptedActionHandler(continues=[True]))
    stats = runner.run()
    # OR step by step:
    while runner.status == GameStatus.ONGOING:
        runner.step()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional
import logging

from .combat_engine import CombatEngine, EnemyPolicy, first_action
from .content.enemies import ActorFactory
from .content.items import ItemFactory
from .content.rooms import EnemyRoom, RoomFactory, RoomVisitor, ENEMY_ROOM
from .generation.map import DungeonMap, NeighborChooser, first_neighbor
from .handlers.input_handler import ActionHandler, ConsoleActionHandler
from .render.console import ConsoleRenderer
from .state.actors import Player


logger = logging.getLogger(__name__)


# =============================================================================
# Game Status
# =============================================================================

class GameStatus(Enum):
    """Overall state of the run."""
    ONGOING = auto()
    VICTORY = auto()
    GAMEOVER = auto()


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class GameConfig:
    """Settings for a run."""
    player_name: str = "Player"
    starting_room: str = ENEMY_ROOM
    max_rounds: Optional[int] = None  # Stop after this many player decisions, rejected ones included


# =============================================================================
# Decision Log Entry
# =============================================================================

@dataclass
class DecisionLogEntry:
    """Record of one player decision."""
    room_number: int
    round: int
    options: List[str]
    choice: int
    accepted: bool = True
    result: Dict[str, Any] = field(default_factory=dict)


# =============================================================================
# Encounter setup
# =============================================================================

class _EncounterBuilder(RoomVisitor):
    """Builds the combat engine for whatever room the map is on."""

    def __init__(self, player: Player, enemy_policy: EnemyPolicy):
        self.player = player
        self.enemy_policy = enemy_policy

    def visit_enemy_room(self, room: EnemyRoom) -> CombatEngine:
        return CombatEngine(self.player, room.enemy, enemy_policy=self.enemy_policy)


# =============================================================================
# Game Runner
# =============================================================================

class GameRunner:
    """
    Orchestrates rendering, input and combat across rooms.

    All collaborators are passed in; see create_game() for the default wiring.
    """

    def __init__(
        self,
        player: Player,
        dungeon_map: DungeonMap,
        renderer: ConsoleRenderer,
        action_handler: ActionHandler,
        item_factory: Optional[ItemFactory] = None,
        enemy_policy: EnemyPolicy = first_action,
        config: Optional[GameConfig] = None,
    ):
        self.player = player
        self.dungeon_map = dungeon_map
        self.renderer = renderer
        self.action_handler = action_handler
        self.item_factory = item_factory or dungeon_map.room_factory.item_factory
        self.enemy_policy = enemy_policy
        self.config = config or GameConfig()

        self.status = GameStatus.ONGOING
        self.rooms_cleared = 0
        self.total_rounds = 0
        self.decisions_made = 0
        self.loot_collected: List[str] = []
        self.decision_log: List[DecisionLogEntry] = []

        self.combat = self._start_encounter()
        logger.info("Game started: %s enters %s", player.name, dungeon_map.room_name)

    def _start_encounter(self) -> CombatEngine:
        builder = _EncounterBuilder(self.player, self.enemy_policy)
        return self.dungeon_map.accept(builder)

    @property
    def game_over(self) -> bool:
        return self.status != GameStatus.ONGOING

    # =========================================================================
    # Main Game Loop
    # =========================================================================

    def run(self) -> Dict[str, Any]:
        """Play until the player quits or dies. Returns run statistics."""
        while not self.game_over:
            if self.config.max_rounds is not None and self.decisions_made >= self.config.max_rounds:
                logger.info("Decision limit %d reached", self.config.max_rounds)
                break
            self.step()

        stats = self.get_run_statistics()
        self.renderer.render_game_over(stats)
        return stats

    def step(self) -> Dict[str, Any]:
        """Run one round of the loop and return the round result."""
        if self.game_over:
            return {"success": False, "error": "Game is over"}

        self.renderer.render(self.player, self.dungeon_map)

        labels = self.combat.get_action_labels()
        if not labels:
            logger.warning("%s has nothing to fight with", self.player.name)
            self.status = GameStatus.GAMEOVER
            return {"success": False, "error": "No actions available"}

        choice = self.action_handler.choose_action(labels)
        self.decisions_made += 1
        result = self.combat.play_round(choice)
        self.decision_log.append(DecisionLogEntry(
            room_number=self.dungeon_map.rooms_visited,
            round=self.combat.round,
            options=labels,
            choice=choice,
            accepted=result["success"],
            result=result,
        ))
        if not result["success"]:
            logger.warning("Rejected action %r: %s", choice, result["error"])
            return result

        self.total_rounds += 1
        self.renderer.render_round(result)

        if self.combat.is_defeat():
            logger.info("%s was defeated in %s", self.player.name, self.dungeon_map.room_name)
            self.status = GameStatus.GAMEOVER
        elif self.dungeon_map.is_cleared():
            self._finish_room()

        return result

    def _finish_room(self) -> None:
        """Cleared-room sequence: show it, hand out loot, continue or quit."""
        self.renderer.render_cleared(self.player, self.dungeon_map, self.item_factory)
        rewards = self.dungeon_map.bestow_rewards(self.player, self.item_factory)
        self.loot_collected.extend(item.name for item in rewards)
        self.rooms_cleared += 1

        if self.action_handler.confirm_continue():
            self.dungeon_map.advance()
            self.combat = self._start_encounter()
        else:
            logger.info("Player quit after %d room(s)", self.rooms_cleared)
            self.status = GameStatus.GAMEOVER

    # =========================================================================
    # Statistics
    # =========================================================================

    def get_run_statistics(self) -> Dict[str, Any]:
        return {
            "status": self.status.name,
            "rooms_cleared": self.rooms_cleared,
            "rooms_visited": self.dungeon_map.rooms_visited,
            "rounds": self.total_rounds,
            "player_hp": self.player.hp,
            "inventory": self.player.inventory.get_item_names(),
            "loot_collected": list(self.loot_collected),
        }


# =============================================================================
# Wiring
# =============================================================================

def create_game(
    config: Optional[GameConfig] = None,
    renderer: Optional[ConsoleRenderer] = None,
    action_handler: Optional[ActionHandler] = None,
    choose_next_kind: NeighborChooser = first_neighbor,
    enemy_policy: EnemyPolicy = first_action,
) -> GameRunner:
    """Build the default factories, map and player and hand them to a GameRunner."""
    config = config or GameConfig()
    item_factory = ItemFactory()
    actor_factory = ActorFactory(item_factory)
    room_factory = RoomFactory(actor_factory)

    dungeon_map = DungeonMap(room_factory, config.starting_room, choose_next_kind)
    player = actor_factory.create_player(config.player_name)

    return GameRunner(
        player=player,
        dungeon_map=dungeon_map,
        renderer=renderer or ConsoleRenderer(),
        action_handler=action_handler or ConsoleActionHandler(),
        item_factory=item_factory,
        enemy_policy=enemy_policy,
        config=config,
    )
