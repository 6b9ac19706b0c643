"""
Actor State - Stats and inventory for anything that fights.

HP has no floor: an actor is defeated when hp <= 0, so overkill damage
leaves a negative value behind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .inventory import Inventory


@dataclass
class Actor:
    """Base state shared by the player and enemies."""

    name: str
    hp: int
    strength: int
    speed: int
    agility: int
    inventory: Inventory = field(default_factory=Inventory)

    @property
    def is_defeated(self) -> bool:
        return self.hp <= 0


@dataclass
class Player(Actor):
    """The player character."""
    pass


@dataclass
class Enemy(Actor):
    """An enemy occupying an encounter room."""

    enemy_kind: str = ""
    reward_kinds: List[str] = field(default_factory=list)  # Item kinds dropped on defeat
