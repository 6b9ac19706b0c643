"""
Content module - Item, enemy and room definitions with their factories.

Submodules:
- items: Weapon / ActiveBuff classes, ITEM_PRESETS, ItemFactory
- enemies: ENEMY_PRESETS, PLAYER_PRESET, ActorFactory
- rooms: Room / EnemyRoom, RoomVisitor, ROOM_PRESETS, RoomFactory

Only `items` is imported eagerly; the state package depends on it.
"""

from .items import (
    Item, Weapon, ActiveBuff, ItemType, ItemFactory, ITEM_PRESETS,
    SWORD, HEALTH_POTION,
)

__all__ = [
    "Item",
    "Weapon",
    "ActiveBuff",
    "ItemType",
    "ItemFactory",
    "ITEM_PRESETS",
    "SWORD",
    "HEALTH_POTION",
]
