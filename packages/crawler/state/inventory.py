"""
Inventory - Exclusive item storage for a single actor.

Weapons and active buffs are kept in two ordered lists (acquisition order).
The combined action list is always weapons first, then buffs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List
import logging

from ..content.items import Item, Weapon, ActiveBuff, ItemType


logger = logging.getLogger(__name__)


@dataclass
class Inventory:
    """Items owned by one actor."""

    weapons: List[Weapon] = field(default_factory=list)
    active_buffs: List[ActiveBuff] = field(default_factory=list)

    def _collection_for(self, item: Item) -> List[Item]:
        if item.item_type == ItemType.WEAPON:
            return self.weapons
        if item.item_type == ItemType.ACTIVE_BUFF:
            return self.active_buffs
        raise TypeError(f"Unsupported item type: {type(item).__name__}")

    def add_item(self, item: Item) -> None:
        """Append an item to the matching collection."""
        self._collection_for(item).append(item)

    def remove_item(self, item: Item) -> bool:
        """
        Remove the first entry matching the item's (kind, name).

        Only the collection matching the item's type is searched. When nothing
        matches this is a no-op; the False return is the only signal.
        """
        collection = self._collection_for(item)
        for idx, entry in enumerate(collection):
            if entry.kind == item.kind and entry.name == item.name:
                del collection[idx]
                return True

        logger.debug("remove_item: no %s named %r in inventory", item.kind, item.name)
        return False

    def get_total_items(self) -> int:
        return len(self.weapons) + len(self.active_buffs)

    def get_action_items(self) -> List[Item]:
        """Weapons then buffs, each in acquisition order."""
        return [*self.weapons, *self.active_buffs]

    def get_item_names(self) -> List[str]:
        return [item.name for item in self.get_action_items()]
