from __future__ import annotations

import pytest

from quest_rules.advice import give_advice
from quest_rules.catalogue import Catalogue
from quest_rules.errors import (
    CommandLimitExceededError,
    GameOverError,
    InvalidStepError,
    ObjectLimitExceededError,
    ResourceExhaustedError,
)
from quest_rules.game import new_game
from quest_rules.models import Command, GameObject, Step

MIRROR = GameObject("mirror", {Command.TAKE: "ok"})


@pytest.mark.parametrize(
    ("cause", "expected"),
    [
        (InvalidStepError(Step(Command.EAT, MIRROR)), "performing 'eat mirror' is never possible"),
        (ResourceExhaustedError("apple"), "be careful, apple supply is scarce"),
        (CommandLimitExceededError(Command.EAT, 2), "reduce how often you eat"),
        (CommandLimitExceededError(Command.TALK, 1), "reduce how often you talk"),
        (ObjectLimitExceededError("coin", 1), "you already hold the maximum (1) of coin"),
    ],
)
def test_advice_per_error_kind(cause, expected: str) -> None:
    assert give_advice(cause) == expected
    assert give_advice(GameOverError(cause, 3)) == expected


def test_advice_is_stable_and_names_only_the_object() -> None:
    error = GameOverError(ResourceExhaustedError("coin"), 1)

    first = give_advice(error)
    assert first == give_advice(error)
    assert "coin" in first
    assert "take" not in first


def test_advice_for_unknown_error_is_empty() -> None:
    assert give_advice(RuntimeError("boom")) == ""


def test_eat_mirror_scenario() -> None:
    catalogue = Catalogue.from_objects([MIRROR], counts={"mirror": 1})
    game = new_game(catalogue)

    with pytest.raises(GameOverError) as info:
        game.execute(Step(Command.EAT, catalogue.get("mirror")))

    assert info.value.steps == 0
    assert str(info.value) == "cannot eat mirror"
    assert give_advice(info.value) == "performing 'eat mirror' is never possible"
