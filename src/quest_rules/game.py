"""Game engine: applies steps against the world and the player."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping

from .catalogue import Catalogue
from .errors import GameOverError, InvalidStepError, StepError
from .inventory import WorldInventory
from .models import Step
from .player import PlayerState
from .validator import is_valid_step


class GameStatus(str, Enum):
    """Lifecycle states of a single playthrough."""

    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class Game:
    """One playthrough owning its player state and world inventory.

    Steps are executed one at a time. The first failing step raises ``GameOverError``
    and moves the game to ``LOST``; callers must not execute further steps after that.
    """

    def __init__(
        self,
        catalogue: Catalogue,
        inventory: WorldInventory,
        *,
        player: PlayerState | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._catalogue = catalogue
        self._inventory = inventory
        self._player = player or PlayerState()
        self._logger = logger or logging.getLogger("quest_rules.game")
        self._steps = 0
        self._status = GameStatus.IN_PROGRESS
        self._error: GameOverError | None = None

    @property
    def catalogue(self) -> Catalogue:
        return self._catalogue

    @property
    def inventory(self) -> WorldInventory:
        return self._inventory

    @property
    def player(self) -> PlayerState:
        return self._player

    @property
    def steps(self) -> int:
        """Number of steps executed successfully so far."""
        return self._steps

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def error(self) -> GameOverError | None:
        return self._error

    def execute(self, step: Step) -> str:
        """Execute ``step`` and return the object's outcome text for the command."""
        try:
            self._apply(step)
        except StepError as exc:
            self._status = GameStatus.LOST
            self._error = GameOverError(exc, self._steps)
            self._logger.info(
                "step_failed",
                extra={"step": str(step), "steps": self._steps, "error_kind": type(exc).__name__},
            )
            raise self._error from exc

        self._steps += 1
        self._logger.info("step_succeeded", extra={"step": str(step), "steps": self._steps})
        return step.obj.actions[step.command]

    def finish(self) -> None:
        """Mark the game as won once the caller's step sequence is exhausted."""
        if self._status is GameStatus.IN_PROGRESS:
            self._status = GameStatus.WON
            self._logger.info("game_won", extra={"steps": self._steps})

    def _apply(self, step: Step) -> None:
        if not is_valid_step(step):
            raise InvalidStepError(step)

        # World units are spent before the player limits are checked, so a step
        # rejected by the player still removes the unit from the world.
        if step.command.depletes_world:
            self._inventory.consume_one(step.obj.name)

        self._player.do(step.command, step.obj)


def new_game(
    catalogue: Catalogue,
    initial_counts: Mapping[str, int] | None = None,
    *,
    logger: logging.Logger | None = None,
) -> Game:
    """Start a game with an empty player and a private copy of the world counts."""
    counts = catalogue.counts if initial_counts is None else initial_counts
    return Game(catalogue, WorldInventory(counts), logger=logger)
