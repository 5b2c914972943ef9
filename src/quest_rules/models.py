from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Command(str, Enum):
    """Closed set of commands a player can issue."""

    EAT = "eat"
    TAKE = "take"
    TALK = "talk to"

    @property
    def depletes_world(self) -> bool:
        return self in (Command.EAT, Command.TAKE)


@dataclass(frozen=True, slots=True)
class GameObject:
    """An object in the game world and the outcome of each command it supports."""

    name: str
    actions: Mapping[Command, str] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "actions", MappingProxyType(dict(self.actions)))

    def supports(self, command: Command) -> bool:
        return command in self.actions

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Step:
    """One attempt to apply ``command`` to ``obj``."""

    command: Command
    obj: GameObject

    def __str__(self) -> str:
        return f"{self.command.value} {self.obj.name}"
