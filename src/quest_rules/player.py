"""Player counters, held objects and per-command limits."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import CommandLimitExceededError, ObjectLimitExceededError
from .models import Command, GameObject

# Two eats are allowed, the third one fails.
EAT_LIMIT = 2
TALK_LIMIT = 1
TAKE_LIMIT_PER_OBJECT = 1


@dataclass(slots=True)
class PlayerState:
    eaten: int = 0
    talked: int = 0
    owned: set[str] = field(default_factory=set)

    def has(self, obj: GameObject) -> bool:
        return obj.name in self.owned

    def do(self, command: Command, obj: GameObject) -> None:
        """Apply ``command`` to ``obj`` on behalf of the player.

        Raises a limit error without touching any counter when the player has
        exhausted the command or already holds the object.
        """
        match command:
            case Command.EAT:
                if self.eaten >= EAT_LIMIT:
                    raise CommandLimitExceededError(command, EAT_LIMIT)
                self.eaten += 1
            case Command.TAKE:
                if self.has(obj):
                    raise ObjectLimitExceededError(obj.name, TAKE_LIMIT_PER_OBJECT)
                self.owned.add(obj.name)
            case Command.TALK:
                if self.talked >= TALK_LIMIT:
                    raise CommandLimitExceededError(command, TALK_LIMIT)
                self.talked += 1
