"""Structural compatibility checks for game steps."""

from .models import Step


def is_valid_step(step: Step) -> bool:
    """Return True if the step's object supports the step's command."""
    return step.obj.supports(step.command)
