"""
Console Renderer - Plain text views of the game state.

Room-specific output goes through RoomVisitor so new room kinds only need a
new visit method here.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from ..content.items import ItemFactory
from ..content.rooms import EnemyRoom, RoomVisitor
from ..generation.map import DungeonMap
from ..state.actors import Player


def format_player(player: Player) -> str:
    return (f"{player.name}  HP: {player.hp}  STR: {player.strength}  "
            f"SPD: {player.speed}  AGI: {player.agility}")


class _RoomStatusView(RoomVisitor):
    """Lines describing a room during combat."""

    def visit_enemy_room(self, room: EnemyRoom) -> List[str]:
        enemy = room.enemy
        return [
            f"{enemy.name} blocks the way!",
            f"  {enemy.name}  HP: {enemy.hp}  STR: {enemy.strength}  "
            f"SPD: {enemy.speed}  AGI: {enemy.agility}",
        ]


class _RoomClearedView(RoomVisitor):
    """Lines describing a room once it has been cleared."""

    def __init__(self, item_factory: Optional[ItemFactory] = None):
        self.item_factory = item_factory

    def visit_enemy_room(self, room: EnemyRoom) -> List[str]:
        rewards = room.get_reward_names(self.item_factory)
        lines = [f"The {room.enemy.name} has been defeated!"]
        if rewards:
            lines.append(f"  Loot: {', '.join(rewards)}")
        return lines


class ConsoleRenderer:
    """Writes game state to the terminal (or any line sink)."""

    def __init__(self, output_fn: Callable[[str], None] = print):
        self.output_fn = output_fn

    def _emit(self, lines: List[str]) -> None:
        for line in lines:
            self.output_fn(line)

    def render(self, player: Player, dungeon_map: DungeonMap) -> None:
        lines = [
            "=" * 60,
            f"{dungeon_map.room_name} [{dungeon_map.room_kind}] "
            f"- {dungeon_map.neighbor_count} exits",
            format_player(player),
        ]
        lines.extend(dungeon_map.accept(_RoomStatusView()))
        self._emit(lines)

    def render_cleared(self, player: Player, dungeon_map: DungeonMap,
                       item_factory: Optional[ItemFactory] = None) -> None:
        lines = ["-" * 60, f"{dungeon_map.room_name} cleared."]
        lines.extend(dungeon_map.accept(_RoomClearedView(item_factory)))
        lines.append(format_player(player))
        self._emit(lines)

    def render_round(self, result: Dict[str, Any]) -> None:
        """Describe what happened in one combat round."""
        lines = []
        for key in ("player", "enemy"):
            action = result.get(key)
            if not action or not action.get("success"):
                continue
            if "damage" in action:
                lines.append(f"{action['actor']} attacks {action['target']} with "
                             f"{action['item']} for {action['damage']} damage.")
            elif "buff" in action:
                lines.append(f"{action['actor']} uses {action['item']}: "
                             f"{action['buff']} +{action['amount']}.")
        self._emit(lines)

    def render_game_over(self, stats: Dict[str, Any]) -> None:
        self._emit([
            "=" * 60,
            f"Game over - {stats['status']}",
            f"Rooms cleared: {stats['rooms_cleared']}  Rounds: {stats['rounds']}  "
            f"HP: {stats['player_hp']}",
        ])
