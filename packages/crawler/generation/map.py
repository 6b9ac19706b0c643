"""
Dungeon Map - Linear room progression.

The map only ever holds the current room. Advancing picks the next room kind
from the current room's neighbor list, builds a fresh room of that kind and
discards the old one; there is no history.

Next-kind selection is pluggable. The default always takes neighbor slot 0,
so a run is fully deterministic unless a different chooser is supplied:

    dungeon_map = DungeonMap(RoomFactory(), choose_next_kind=lambda room: random.choice(room.neighbors))
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional
import logging

from ..content.rooms import Room, RoomFactory, RoomVisitor, ENEMY_ROOM
from ..content.items import Item, ItemFactory
from ..state.actors import Player


logger = logging.getLogger(__name__)


NeighborChooser = Callable[[Room], str]


def first_neighbor(room: Room) -> str:
    """Default chooser: neighbor slot 0."""
    return room.neighbors[0]


class DungeonMap:
    """Holds the current room and moves the player to the next one."""

    def __init__(
        self,
        room_factory: Optional[RoomFactory] = None,
        starting_kind: str = ENEMY_ROOM,
        choose_next_kind: NeighborChooser = first_neighbor,
    ):
        self.room_factory = room_factory or RoomFactory()
        self.choose_next_kind = choose_next_kind
        self.current_room: Room = self.room_factory.create_room(starting_kind)
        self.rooms_visited = 1

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def room_name(self) -> str:
        return self.current_room.name

    @property
    def room_kind(self) -> str:
        return self.current_room.kind

    @property
    def neighbor_count(self) -> int:
        return self.current_room.neighbor_count

    def is_cleared(self) -> bool:
        return self.current_room.is_cleared()

    # =========================================================================
    # Pass-through commands
    # =========================================================================

    def accept(self, visitor: RoomVisitor) -> Any:
        return self.current_room.accept(visitor)

    def bestow_rewards(self, player: Player, item_factory: Optional[ItemFactory] = None) -> List[Item]:
        return self.current_room.bestow_rewards(player, item_factory or self.room_factory.item_factory)

    def advance(self) -> Room:
        """
        Replace the current room with a new room of the chosen neighbor kind.

        Does not check whether the current room is cleared.
        """
        next_kind = self.choose_next_kind(self.current_room)
        self.current_room = self.room_factory.create_room(next_kind)
        self.rooms_visited += 1
        logger.debug("Advanced to %s (%s), room #%d",
                     self.current_room.name, next_kind, self.rooms_visited)
        return self.current_room
