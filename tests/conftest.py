"""
Shared pytest fixtures for the dungeon crawl test suite.

This module provides reusable fixtures for:
- Factories (items, actors, rooms)
- Fresh player / goblin / enemy room instances
- A combat engine and a dungeon map at the starting room
"""

import pytest
import sys

# Ensure project root is in path
import os
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)

from packages.crawler.content.items import ItemFactory
from packages.crawler.content.enemies import ActorFactory, GOBLIN
from packages.crawler.content.rooms import RoomFactory, ENEMY_ROOM
from packages.crawler.generation.map import DungeonMap
from packages.crawler.combat_engine import CombatEngine


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def item_factory():
    """Item factory with the default presets."""
    return ItemFactory()


@pytest.fixture
def actor_factory(item_factory):
    """Actor factory equipping from the default item factory."""
    return ActorFactory(item_factory)


@pytest.fixture
def room_factory(actor_factory):
    """Room factory populating rooms through the default actor factory."""
    return RoomFactory(actor_factory)


# =============================================================================
# Actor Fixtures
# =============================================================================


@pytest.fixture
def player(actor_factory):
    """Fresh player: hp100/str1/spd1/agi1 with Sword + Health Potion."""
    return actor_factory.create_player()


@pytest.fixture
def goblin(actor_factory):
    """Fresh goblin: hp10/str1/spd1/agi2 with a Sword, drops a Health Potion."""
    return actor_factory.create_enemy(GOBLIN)


# =============================================================================
# Room / Map / Combat Fixtures
# =============================================================================


@pytest.fixture
def enemy_room(room_factory):
    """A freshly built enemy room."""
    return room_factory.create_room(ENEMY_ROOM)


@pytest.fixture
def dungeon_map(room_factory):
    """Map positioned at a fresh enemy room."""
    return DungeonMap(room_factory)


@pytest.fixture
def engine(player, enemy_room):
    """Combat engine for the player against the enemy room's goblin."""
    return CombatEngine(player, enemy_room.enemy)
