"""
Encounter Rooms - Room model, visitor hook and room factory.

A room knows its kind and the kinds of the (up to) three rooms reachable from
it; the room it was entered from is never listed. Room variants:
- EnemyRoom: holds exactly one enemy; cleared once that enemy's hp <= 0

Consumers that need kind-specific behaviour (renderers, action handlers)
implement RoomVisitor and call room.accept(visitor) instead of type-checking.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
import logging

from ..state.actors import Enemy, Player
from .items import Item, ItemFactory
from .enemies import ActorFactory, GOBLIN


logger = logging.getLogger(__name__)


ENEMY_ROOM = "Enemy"
DEFAULT_ROOM = ENEMY_ROOM
NEIGHBOR_SLOTS = 3


# =============================================================================
# Visitor
# =============================================================================

class RoomVisitor:
    """Single-dispatch hook keyed on concrete room kind."""

    def visit_enemy_room(self, room: EnemyRoom) -> Any:
        raise NotImplementedError(f"{type(self).__name__} does not handle enemy rooms")


# =============================================================================
# Rooms
# =============================================================================

class Room:
    """Base class for all rooms."""

    KIND = "Unknown"

    def __init__(self, name: str, neighbors: List[str]):
        if len(neighbors) != NEIGHBOR_SLOTS:
            raise ValueError(f"Room needs exactly {NEIGHBOR_SLOTS} neighbor slots, got {len(neighbors)}")
        self.name = name
        self.neighbors = list(neighbors)

    @property
    def kind(self) -> str:
        return self.KIND

    @property
    def neighbor_count(self) -> int:
        return len(self.neighbors)

    def accept(self, visitor: RoomVisitor) -> Any:
        raise NotImplementedError("Subclass must implement accept()")

    def is_cleared(self) -> bool:
        raise NotImplementedError("Subclass must implement is_cleared()")

    def bestow_rewards(self, player: Player, item_factory: ItemFactory) -> List[Item]:
        """Give this room's rewards to the player. Returns the items created."""
        return []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, neighbors={self.neighbors!r})"


class EnemyRoom(Room):
    """A room holding a single enemy that must be defeated to progress."""

    KIND = ENEMY_ROOM

    def __init__(self, name: str, neighbors: List[str], enemy: Enemy):
        super().__init__(name, neighbors)
        self.enemy = enemy

    def accept(self, visitor: RoomVisitor) -> Any:
        return visitor.visit_enemy_room(self)

    def is_cleared(self) -> bool:
        return self.enemy.hp <= 0

    def get_reward_names(self, item_factory: Optional[ItemFactory] = None) -> List[str]:
        """Display names of the enemy's drops (unknown kinds show their tag)."""
        presets = (item_factory or ItemFactory()).presets
        return [presets.get(kind, {}).get("name", kind) for kind in self.enemy.reward_kinds]

    def bestow_rewards(self, player: Player, item_factory: ItemFactory) -> List[Item]:
        """
        Create one item per reward kind in the player's inventory.

        Clear state is not checked here; the caller only bestows once the
        room reports cleared.
        """
        created = []
        for kind in self.enemy.reward_kinds:
            item = item_factory.create_and_store_item(player.inventory, kind)
            if item is not None:
                created.append(item)
        logger.info("%s receives %s", player.name, [item.name for item in created])
        return created


# =============================================================================
# Room Presets and Factory
# =============================================================================

ROOM_PRESETS: Dict[str, dict] = {
    ENEMY_ROOM: {
        "name": "Enemy Room",
        "neighbors": [ENEMY_ROOM, ENEMY_ROOM, ENEMY_ROOM],
        "enemy": GOBLIN,
    },
}


class RoomFactory:
    """
    Builds rooms by kind, populating enemies through the ActorFactory.

    The presets double as the room-kind transition graph: every enemy room
    currently leads only to more enemy rooms.
    """

    def __init__(self, actor_factory: Optional[ActorFactory] = None):
        self.actor_factory = actor_factory or ActorFactory()

    @property
    def item_factory(self) -> ItemFactory:
        return self.actor_factory.item_factory

    def create_room(self, kind: str) -> Room:
        """Create a room of `kind`; unknown kinds fall back to an enemy room."""
        preset = ROOM_PRESETS.get(kind)
        if preset is None:
            logger.warning("Unknown room kind %r - using %s", kind, DEFAULT_ROOM)
            preset = ROOM_PRESETS[DEFAULT_ROOM]

        enemy = self.actor_factory.create_enemy(preset["enemy"])
        return EnemyRoom(preset["name"], preset["neighbors"], enemy)
