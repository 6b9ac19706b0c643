"""
Item System - Weapons and active buffs usable in combat.

Items are value objects configured once by the ItemFactory:
- Weapon: deals base damage plus the user's agility and strength
- ActiveBuff: adds a fixed magnitude to a target's HP (e.g. Heal)

Every item carries a kind tag (the preset ID it was built from). The tag is
used for inventory lookup/removal, never for dispatch.

Usage:
    factory = ItemFactory()
    sword = factory.create_and_store_item(player.inventory, "Sword")
    sword.apply_damage(player, goblin)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from ..state.actors import Actor
    from ..state.inventory import Inventory


logger = logging.getLogger(__name__)


# =============================================================================
# Item Types
# =============================================================================

class ItemType(Enum):
    """Capability category of an item."""
    WEAPON = "WEAPON"
    ACTIVE_BUFF = "ACTIVE_BUFF"


# Item kind tags
SWORD = "Sword"
HEALTH_POTION = "HealthPotion"


# =============================================================================
# Item Classes
# =============================================================================

@dataclass
class Item:
    """Base class for all items."""
    name: str
    kind: str
    single_use: bool = False

    item_type = None  # Set by subclasses

    @property
    def action_label(self) -> str:
        """Label shown in the action menu."""
        return self.name


@dataclass
class Weapon(Item):
    """An item that damages its target when used."""
    base_damage: int = 0

    item_type = ItemType.WEAPON

    @property
    def action_label(self) -> str:
        return f"Attack ({self.name})"

    def expected_damage(self, user: Actor, target: Optional[Actor] = None) -> int:
        """
        Damage this weapon will deal when used by `user`.

        The target does not modify damage (no resistances); it is accepted so
        display code can ask "how much would this hit X for".
        """
        return self.base_damage + user.agility + user.strength

    def apply_damage(self, user: Actor, target: Actor) -> int:
        """Subtract expected damage from target HP. Returns damage dealt."""
        damage = self.expected_damage(user, target)
        target.hp -= damage
        logger.debug("%s hits %s with %s for %d (hp now %d)",
                     user.name, target.name, self.name, damage, target.hp)
        return damage


@dataclass
class ActiveBuff(Item):
    """An item that applies an effect to a target, usually the user."""
    magnitude: int = 0
    verb: str = "Heal"

    item_type = ItemType.ACTIVE_BUFF

    @property
    def action_label(self) -> str:
        return f"{self.verb} ({self.name})"

    def apply_buff(self, target: Actor) -> int:
        """Add magnitude to target HP (uncapped). Returns the amount applied."""
        target.hp += self.magnitude
        logger.debug("%s uses %s: %s %d (hp now %d)",
                     target.name, self.name, self.verb, self.magnitude, target.hp)
        return self.magnitude


# =============================================================================
# Item Presets
# =============================================================================

ITEM_PRESETS: Dict[str, dict] = {
    SWORD: {
        "class": Weapon,
        "name": "Sword",
        "single_use": False,
        "base_damage": 3,
    },
    HEALTH_POTION: {
        "class": ActiveBuff,
        "name": "Health Potion",
        "single_use": True,
        "magnitude": 20,
        "verb": "Heal",
    },
}


# =============================================================================
# Item Factory
# =============================================================================

class ItemFactory:
    """
    Builds items from fixed presets.

    Pure and deterministic: the same kind always yields an equivalent item.
    Randomized loot would plug in here by overriding create_item().
    """

    def __init__(self, presets: Optional[Dict[str, dict]] = None):
        self.presets = presets if presets is not None else ITEM_PRESETS

    def knows(self, kind: str) -> bool:
        return kind in self.presets

    def create_item(self, kind: str) -> Optional[Item]:
        """Create an item of the given kind, or None if the kind is unknown."""
        if not self.knows(kind):
            logger.warning("Unknown item kind %r - nothing created", kind)
            return None

        preset = self.presets[kind]
        params = {k: v for k, v in preset.items() if k != "class"}
        return preset["class"](kind=kind, **params)

    def create_and_store_item(self, inventory: Inventory, kind: str) -> Optional[Item]:
        """
        Create an item and transfer it into `inventory`.

        Unrecognized kinds are a no-op; the None return lets callers detect it.
        """
        item = self.create_item(kind)
        if item is not None:
            inventory.add_item(item)
        return item
