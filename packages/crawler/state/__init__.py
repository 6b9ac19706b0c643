"""
State module - Mutable game state.

Contains:
- Actor state (Actor, Player, Enemy)
- Inventory storage
"""

from .inventory import Inventory
from .actors import Actor, Player, Enemy

__all__ = [
    "Inventory",
    "Actor",
    "Player",
    "Enemy",
]
