"""Run a whole sequence of steps against a game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from .advice import give_advice
from .errors import GameOverError
from .game import Game
from .models import Step

StepCallback = Callable[[Step, GameOverError | None], None]


@dataclass(slots=True)
class PlayOutcome:
    won: bool
    steps: int
    error: GameOverError | None = None
    advice: str = ""


def play(game: Game, steps: Iterable[Step], *, on_step: StepCallback | None = None) -> PlayOutcome:
    """Execute ``steps`` in order, stopping at the first failure.

    The game is marked won only when every step succeeds.
    """
    for step in steps:
        try:
            game.execute(step)
        except GameOverError as exc:
            if on_step:
                on_step(step, exc)
            return PlayOutcome(won=False, steps=exc.steps, error=exc, advice=give_advice(exc))
        if on_step:
            on_step(step, None)

    game.finish()
    return PlayOutcome(won=True, steps=game.steps)
