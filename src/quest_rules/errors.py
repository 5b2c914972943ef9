"""Classified failures raised while executing game steps.

Every failure is one of the four ``StepError`` subclasses below. The engine wraps the
cause exactly once in ``GameOverError`` together with the number of steps that succeeded
before it.
"""

from __future__ import annotations

from .models import Command, Step


class StepError(Exception):
    """Base class for the closed set of step failures."""


class InvalidStepError(StepError):
    """Raised when the object does not support the command."""

    def __init__(self, step: Step) -> None:
        super().__init__(f"cannot {step}")
        self.step = step


class ResourceExhaustedError(StepError):
    """Raised when no units of an object are left in the world."""

    def __init__(self, obj: str) -> None:
        super().__init__(f"there are no {obj}s left")
        self.obj = obj


class CommandLimitExceededError(StepError):
    """Raised when the player has used a command too many times."""

    def __init__(self, command: Command, limit: int) -> None:
        verb = command.value.split()[0]
        super().__init__(f"you don't want to {verb} anymore")
        self.command = command
        self.limit = limit


class ObjectLimitExceededError(StepError):
    """Raised when the player already holds the maximum of an object."""

    def __init__(self, obj: str, limit: int) -> None:
        super().__init__(f"you already have a {obj}")
        self.obj = obj
        self.limit = limit


class GameOverError(Exception):
    """Terminal failure of a game, wrapping the step error that caused it."""

    def __init__(self, cause: StepError, steps: int) -> None:
        super().__init__(str(cause))
        self._cause = cause
        self._steps = steps

    @property
    def cause(self) -> StepError:
        return self._cause

    @property
    def steps(self) -> int:
        """Number of steps that succeeded before the failure."""
        return self._steps
