"""
Dungeon Crawl Engine

Turn-based, single-player encounter engine: a player moves through a linear
sequence of enemy rooms, fights with the items in their inventory, collects
loot, and keeps going until they quit or fall.

Core subsystems:
- state: Actors (player, enemies) and their inventories
- content: Items, enemy/player presets, rooms and their factories
- generation: Dungeon map holding the current room
- combat_engine: Per-encounter turn resolution
- game: Main loop tying rendering, input and combat together
- handlers / render: Console input and output collaborators

Usage:
    from packages.crawler import create_game, ScriptedActionHandler

    runner = create_game(action_handler=ScriptedActionHandler(continues=[True, True]))
    stats = runner.run()

    from packages.crawler import ActorFactory, RoomFactory, CombatEngine
    actors = ActorFactory()
    player = actors.create_player()
    room = RoomFactory(actors).create_room("Enemy")
    engine = CombatEngine(player, room.enemy)
    engine.play_round(1)
"""

__version__ = "0.1.0"

# State
from .state.inventory import Inventory
from .state.actors import Actor, Player, Enemy

# Items
from .content.items import (
    Item, Weapon, ActiveBuff, ItemType, ItemFactory, ITEM_PRESETS,
    SWORD, HEALTH_POTION,
)

# Actors
from .content.enemies import ActorFactory, ENEMY_PRESETS, PLAYER_PRESET, GOBLIN

# Rooms
from .content.rooms import (
    Room, EnemyRoom, RoomVisitor, RoomFactory, ROOM_PRESETS, ENEMY_ROOM,
)

# Map
from .generation.map import DungeonMap, first_neighbor

# Combat
from .combat_engine import (
    CombatEngine, CombatPhase, CombatResult, CombatLog, first_action,
)

# Input / Output
from .handlers.input_handler import (
    ActionHandler, ConsoleActionHandler, ScriptedActionHandler,
    parse_action_choice,
)
from .render.console import ConsoleRenderer

# Game Runner
from .game import GameRunner, GameStatus, GameConfig, DecisionLogEntry, create_game
