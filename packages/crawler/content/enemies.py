"""
Actor Presets and Factory.

Stat blocks are fixed per kind. Starter items come from the ItemFactory the
ActorFactory was built with; enemies also get a reward list of item kinds
that the room hands to the player once the enemy is defeated.

Currently there is a single enemy kind (Goblin). Any unknown kind falls back
to it rather than raising.
"""

from __future__ import annotations

from typing import Dict, List, Optional
import logging

from ..state.actors import Enemy, Player
from .items import ItemFactory, SWORD, HEALTH_POTION


logger = logging.getLogger(__name__)


GOBLIN = "Goblin"
DEFAULT_ENEMY = GOBLIN


# =============================================================================
# Presets
# =============================================================================

ENEMY_PRESETS: Dict[str, dict] = {
    GOBLIN: {
        "name": "Goblin",
        "hp": 10,
        "strength": 1,
        "speed": 1,
        "agility": 2,
        "items": [SWORD],
        "rewards": [HEALTH_POTION],
    },
}

PLAYER_PRESET: dict = {
    "hp": 100,
    "strength": 1,
    "speed": 1,
    "agility": 1,
    "items": [SWORD, HEALTH_POTION],
}


# =============================================================================
# Actor Factory
# =============================================================================

class ActorFactory:
    """
    Creates the player and enemies with their starting equipment.

    The item factory is only used while building; created actors keep no
    reference to either factory.
    """

    def __init__(self, item_factory: Optional[ItemFactory] = None,
                 enemy_presets: Optional[Dict[str, dict]] = None):
        self.item_factory = item_factory or ItemFactory()
        self.enemy_presets = enemy_presets if enemy_presets is not None else ENEMY_PRESETS

    def create_enemy(self, kind: str) -> Enemy:
        """Create an enemy of `kind`, falling back to the default enemy."""
        preset = self.enemy_presets.get(kind)
        if preset is None:
            logger.warning("Unknown enemy kind %r - using %s", kind, DEFAULT_ENEMY)
            kind = DEFAULT_ENEMY
            preset = ENEMY_PRESETS[DEFAULT_ENEMY]

        enemy = Enemy(
            name=preset["name"],
            hp=preset["hp"],
            strength=preset["strength"],
            speed=preset["speed"],
            agility=preset["agility"],
            enemy_kind=kind,
            reward_kinds=list(preset["rewards"]),
        )
        self._equip(enemy.inventory, preset["items"])
        return enemy

    def create_player(self, name: str = "Player") -> Player:
        """Create the player with the starter kit."""
        player = Player(
            name=name,
            hp=PLAYER_PRESET["hp"],
            strength=PLAYER_PRESET["strength"],
            speed=PLAYER_PRESET["speed"],
            agility=PLAYER_PRESET["agility"],
        )
        self._equip(player.inventory, PLAYER_PRESET["items"])
        return player

    def _equip(self, inventory, item_kinds: List[str]) -> None:
        for kind in item_kinds:
            self.item_factory.create_and_store_item(inventory, kind)
