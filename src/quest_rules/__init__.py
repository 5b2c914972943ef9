"""Rule-validation engine for turn-based command/object games."""

from .advice import give_advice
from .catalogue import DEFAULT_CATALOGUE, Catalogue, load_catalogue
from .errors import (
    CommandLimitExceededError,
    GameOverError,
    InvalidStepError,
    ObjectLimitExceededError,
    ResourceExhaustedError,
    StepError,
)
from .game import Game, GameStatus, new_game
from .models import Command, GameObject, Step

__all__ = [
    "Catalogue",
    "Command",
    "CommandLimitExceededError",
    "DEFAULT_CATALOGUE",
    "Game",
    "GameObject",
    "GameOverError",
    "GameStatus",
    "InvalidStepError",
    "ObjectLimitExceededError",
    "ResourceExhaustedError",
    "Step",
    "StepError",
    "give_advice",
    "load_catalogue",
    "new_game",
]
