"""
Generation module - Room progression.

- map: DungeonMap holding the current room, pluggable next-room chooser
"""

from .map import DungeonMap, NeighborChooser, first_neighbor

__all__ = [
    "DungeonMap",
    "NeighborChooser",
    "first_neighbor",
]
