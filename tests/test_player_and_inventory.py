from __future__ import annotations

import pytest

from quest_rules.errors import CommandLimitExceededError, ObjectLimitExceededError, ResourceExhaustedError
from quest_rules.inventory import WorldInventory
from quest_rules.models import Command, GameObject
from quest_rules.player import EAT_LIMIT, TALK_LIMIT, PlayerState

APPLE = GameObject("apple", {Command.EAT: "ok", Command.TAKE: "ok"})
COIN = GameObject("coin", {Command.TAKE: "ok"})


def test_inventory_unknown_object_is_depleted() -> None:
    inventory = WorldInventory({"apple": 2})

    assert inventory.remaining("pear") == 0
    with pytest.raises(ResourceExhaustedError):
        inventory.consume_one("pear")


def test_inventory_depletion_is_monotonic_and_never_negative() -> None:
    inventory = WorldInventory({"coin": 3})

    for _ in range(3):
        inventory.consume_one("coin")
    assert inventory.remaining("coin") == 0

    with pytest.raises(ResourceExhaustedError) as info:
        inventory.consume_one("coin")
    assert info.value.obj == "coin"
    assert inventory.remaining("coin") == 0


def test_inventory_rejects_negative_counts() -> None:
    with pytest.raises(ValueError):
        WorldInventory({"coin": -1})


@pytest.mark.parametrize("count", [1.5, "2", True])
def test_inventory_rejects_non_integer_counts(count) -> None:
    with pytest.raises(ValueError):
        WorldInventory({"coin": count})


def test_inventory_copies_initial_counts() -> None:
    counts = {"coin": 1}
    inventory = WorldInventory(counts)
    inventory.consume_one("coin")

    assert counts == {"coin": 1}
    assert inventory.snapshot() == {"coin": 0}


def test_player_eats_up_to_limit() -> None:
    player = PlayerState()

    for _ in range(EAT_LIMIT):
        player.do(Command.EAT, APPLE)
    with pytest.raises(CommandLimitExceededError) as info:
        player.do(Command.EAT, APPLE)

    assert info.value.limit == EAT_LIMIT
    assert str(info.value) == "you don't want to eat anymore"
    assert player.eaten == EAT_LIMIT


def test_player_talks_once() -> None:
    bob = GameObject("bob", {Command.TALK: "hi"})
    player = PlayerState()

    player.do(Command.TALK, bob)
    with pytest.raises(CommandLimitExceededError) as info:
        player.do(Command.TALK, bob)

    assert info.value.command == Command.TALK
    assert str(info.value) == "you don't want to talk anymore"
    assert player.talked == TALK_LIMIT


def test_player_takes_each_object_once() -> None:
    player = PlayerState()

    player.do(Command.TAKE, APPLE)
    player.do(Command.TAKE, COIN)
    with pytest.raises(ObjectLimitExceededError) as info:
        player.do(Command.TAKE, APPLE)

    assert str(info.value) == "you already have a apple"
    assert player.owned == {"apple", "coin"}
