"""Remediation hints for classified game failures."""

from __future__ import annotations

from .errors import (
    CommandLimitExceededError,
    GameOverError,
    InvalidStepError,
    ObjectLimitExceededError,
    ResourceExhaustedError,
)
from .models import Command


def give_advice(error: BaseException) -> str:
    """Return advice that helps the player avoid ``error`` next time."""
    cause = error.cause if isinstance(error, GameOverError) else error

    match cause:
        case InvalidStepError(step=step):
            return f"performing '{step.command.value} {step.obj.name}' is never possible"
        case ResourceExhaustedError(obj=obj):
            return f"be careful, {obj} supply is scarce"
        case CommandLimitExceededError(command=Command.EAT):
            return "reduce how often you eat"
        case CommandLimitExceededError(command=Command.TALK):
            return "reduce how often you talk"
        case ObjectLimitExceededError(obj=obj, limit=limit):
            return f"you already hold the maximum ({limit}) of {obj}"
        case _:
            return ""
