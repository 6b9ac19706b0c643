"""
Actor Tests - Actor state and the actor factory presets.
"""

import pytest

from packages.crawler.content.enemies import ActorFactory, ENEMY_PRESETS, GOBLIN
from packages.crawler.content.items import ItemFactory, Weapon, ActiveBuff, SWORD, HEALTH_POTION
from packages.crawler.state.actors import Actor, Player, Enemy


# =============================================================================
# ACTOR STATE
# =============================================================================

class TestActorState:
    """Defeat is hp <= 0, not hp == 0."""

    def test_alive(self):
        actor = Actor(name="A", hp=1, strength=0, speed=0, agility=0)
        assert not actor.is_defeated

    def test_zero_hp_defeated(self):
        actor = Actor(name="A", hp=0, strength=0, speed=0, agility=0)
        assert actor.is_defeated

    def test_negative_hp_defeated(self):
        actor = Actor(name="A", hp=-4, strength=0, speed=0, agility=0)
        assert actor.is_defeated

    def test_each_actor_owns_its_inventory(self):
        a = Player(name="A", hp=1, strength=0, speed=0, agility=0)
        b = Player(name="B", hp=1, strength=0, speed=0, agility=0)
        assert a.inventory is not b.inventory


# =============================================================================
# PLAYER PRESET
# =============================================================================

class TestCreatePlayer:
    """Player: hp100/str1/spd1/agi1 with a Sword and a Health Potion."""

    def test_stats(self, player):
        assert isinstance(player, Player)
        assert (player.hp, player.strength, player.speed, player.agility) == (100, 1, 1, 1)

    def test_default_name(self, player):
        assert player.name == "Player"

    def test_custom_name(self, actor_factory):
        assert actor_factory.create_player("Ayla").name == "Ayla"

    def test_starter_items(self, player):
        assert [w.kind for w in player.inventory.weapons] == [SWORD]
        assert [b.kind for b in player.inventory.active_buffs] == [HEALTH_POTION]
        assert player.inventory.get_total_items() == 2


# =============================================================================
# ENEMY PRESETS
# =============================================================================

class TestCreateEnemy:
    """Goblin: hp10/str1/spd1/agi2, one Sword, drops one Health Potion."""

    def test_goblin_stats(self, goblin):
        assert isinstance(goblin, Enemy)
        assert goblin.name == "Goblin"
        assert goblin.enemy_kind == GOBLIN
        assert (goblin.hp, goblin.strength, goblin.speed, goblin.agility) == (10, 1, 1, 2)

    def test_goblin_items(self, goblin):
        assert len(goblin.inventory.weapons) == 1
        assert isinstance(goblin.inventory.weapons[0], Weapon)
        assert goblin.inventory.weapons[0].base_damage == 3
        assert goblin.inventory.active_buffs == []

    def test_goblin_rewards(self, goblin):
        assert goblin.reward_kinds == [HEALTH_POTION]

    def test_reward_list_not_shared(self, actor_factory):
        a = actor_factory.create_enemy(GOBLIN)
        b = actor_factory.create_enemy(GOBLIN)
        a.reward_kinds.append(SWORD)
        assert b.reward_kinds == [HEALTH_POTION]
        assert ENEMY_PRESETS[GOBLIN]["rewards"] == [HEALTH_POTION]

    def test_unknown_kind_falls_back_to_goblin(self, actor_factory, caplog):
        with caplog.at_level("WARNING"):
            enemy = actor_factory.create_enemy("Dragon")
        assert enemy.enemy_kind == GOBLIN
        assert enemy.hp == 10
        assert "Dragon" in caplog.text

    def test_factory_uses_supplied_item_factory(self):
        class CountingItemFactory(ItemFactory):
            def __init__(self):
                super().__init__()
                self.calls = []

            def create_item(self, kind):
                self.calls.append(kind)
                return super().create_item(kind)

        items = CountingItemFactory()
        ActorFactory(items).create_player()
        assert items.calls == [SWORD, HEALTH_POTION]

    def test_actors_do_not_keep_factory(self, goblin, player):
        for actor in (goblin, player):
            for value in vars(actor).values():
                assert not isinstance(value, (ActorFactory, ItemFactory))
