"""
Room Tests - Enemy rooms, visitor dispatch, rewards and the room factory.
"""

import pytest

from packages.crawler.content.enemies import GOBLIN
from packages.crawler.content.items import ItemFactory, HEALTH_POTION, SWORD
from packages.crawler.content.rooms import (
    Room, EnemyRoom, RoomVisitor, RoomFactory, ROOM_PRESETS, ENEMY_ROOM,
)


class _KindVisitor(RoomVisitor):
    def visit_enemy_room(self, room):
        return ("enemy", room.enemy.name)


# =============================================================================
# ENEMY ROOM
# =============================================================================

class TestEnemyRoom:
    """An enemy room is cleared iff its enemy's hp <= 0."""

    def test_fresh_room_not_cleared(self, enemy_room):
        assert not enemy_room.is_cleared()

    def test_cleared_at_zero(self, enemy_room):
        enemy_room.enemy.hp = 0
        assert enemy_room.is_cleared()

    def test_cleared_below_zero(self, enemy_room):
        enemy_room.enemy.hp = -7
        assert enemy_room.is_cleared()

    def test_not_cleared_at_one(self, enemy_room):
        enemy_room.enemy.hp = 1
        assert not enemy_room.is_cleared()

    def test_kind_and_name(self, enemy_room):
        assert enemy_room.kind == ENEMY_ROOM
        assert enemy_room.name == "Enemy Room"

    def test_three_neighbor_slots(self, enemy_room):
        assert enemy_room.neighbor_count == 3
        assert enemy_room.neighbors == [ENEMY_ROOM] * 3

    def test_wrong_neighbor_count_rejected(self, goblin):
        with pytest.raises(ValueError):
            EnemyRoom("Bad Room", [ENEMY_ROOM], goblin)

    def test_accept_dispatches_to_enemy_visit(self, enemy_room):
        assert enemy_room.accept(_KindVisitor()) == ("enemy", "Goblin")

    def test_base_visitor_rejects_enemy_room(self, enemy_room):
        with pytest.raises(NotImplementedError):
            enemy_room.accept(RoomVisitor())

    def test_reward_names(self, enemy_room):
        assert enemy_room.get_reward_names() == ["Health Potion"]


# =============================================================================
# REWARDS
# =============================================================================

class TestBestowRewards:
    """One item per reward kind goes into the player's inventory."""

    def test_goblin_gives_one_potion(self, enemy_room, player, item_factory):
        enemy_room.enemy.hp = 0
        before = player.inventory.get_total_items()
        created = enemy_room.bestow_rewards(player, item_factory)
        assert [item.kind for item in created] == [HEALTH_POTION]
        assert player.inventory.get_total_items() == before + 1
        assert player.inventory.active_buffs[-1] is created[0]

    def test_one_item_per_reward_entry(self, enemy_room, player, item_factory):
        enemy_room.enemy.reward_kinds = [HEALTH_POTION, SWORD, HEALTH_POTION]
        before = player.inventory.get_total_items()
        created = enemy_room.bestow_rewards(player, item_factory)
        assert len(created) == 3
        assert player.inventory.get_total_items() == before + 3

    def test_unknown_reward_kind_skipped(self, enemy_room, player, item_factory):
        enemy_room.enemy.reward_kinds = ["Mystery"]
        before = player.inventory.get_total_items()
        assert enemy_room.bestow_rewards(player, item_factory) == []
        assert player.inventory.get_total_items() == before

    def test_rewards_do_not_touch_enemy_inventory(self, enemy_room, player, item_factory):
        before = enemy_room.enemy.inventory.get_total_items()
        enemy_room.bestow_rewards(player, item_factory)
        assert enemy_room.enemy.inventory.get_total_items() == before


# =============================================================================
# ROOM FACTORY
# =============================================================================

class TestRoomFactory:
    """Every kind currently builds an enemy room with a goblin."""

    def test_enemy_room(self, room_factory):
        room = room_factory.create_room(ENEMY_ROOM)
        assert isinstance(room, EnemyRoom)
        assert room.enemy.enemy_kind == GOBLIN
        assert room.enemy.hp == 10

    def test_unknown_kind_falls_back(self, room_factory, caplog):
        with caplog.at_level("WARNING"):
            room = room_factory.create_room("Shop")
        assert isinstance(room, EnemyRoom)
        assert room.name == "Enemy Room"
        assert "Shop" in caplog.text

    def test_each_room_gets_its_own_enemy(self, room_factory):
        a = room_factory.create_room(ENEMY_ROOM)
        b = room_factory.create_room(ENEMY_ROOM)
        assert a.enemy is not b.enemy
        assert a.neighbors is not b.neighbors
        a.neighbors[0] = "Other"
        assert ROOM_PRESETS[ENEMY_ROOM]["neighbors"][0] == ENEMY_ROOM

    def test_default_wiring(self):
        room = RoomFactory().create_room(ENEMY_ROOM)
        assert room.enemy.inventory.weapons[0].kind == SWORD

    def test_item_factory_passthrough(self, room_factory, item_factory):
        assert room_factory.item_factory is item_factory
