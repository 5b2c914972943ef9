"""Static catalogue of game objects and their default world counts."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from .models import Command, GameObject, Step


class CatalogueError(ValueError):
    """Raised when a catalogue document is malformed."""


class UnknownStepError(ValueError):
    """Raised when step text names an unknown command or object."""


@dataclass(frozen=True, slots=True, eq=False)
class Catalogue:
    """Read-only lookup of objects by name, shared between games."""

    objects: Mapping[str, GameObject]
    counts: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "objects", MappingProxyType(dict(self.objects)))
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))

    @classmethod
    def from_objects(cls, objects: list[GameObject], counts: Mapping[str, int] | None = None) -> Catalogue:
        return cls(objects={obj.name: obj for obj in objects}, counts=counts or {})

    def __contains__(self, name: object) -> bool:
        return name in self.objects

    def __iter__(self) -> Iterator[GameObject]:
        return iter(self.objects.values())

    def __len__(self) -> int:
        return len(self.objects)

    def get(self, name: str) -> GameObject:
        if name not in self.objects:
            raise KeyError(f"Unknown object: {name}")
        return self.objects[name]

    def parse_step(self, text: str) -> Step:
        """Parse ``"<command> <object>"`` text, e.g. ``"talk to bob"``.

        Both the command and the object name are matched case-insensitively.
        """
        normalized = " ".join(text.strip().split()).casefold()
        by_name = {name.casefold(): obj for name, obj in self.objects.items()}
        # "talk to" must win over any shorter command sharing its prefix.
        for command in sorted(Command, key=lambda cmd: len(cmd.value), reverse=True):
            prefix = f"{command.value} "
            if normalized.startswith(prefix):
                name = normalized[len(prefix) :]
                if name not in by_name:
                    raise UnknownStepError(f"Unknown object: {name!r}")
                return Step(command=command, obj=by_name[name])
        raise UnknownStepError(f"Unknown command in step: {text!r}")


class CatalogueEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    actions: dict[Command, str] = Field(default_factory=dict)
    count: StrictInt = Field(default=0, ge=0, description="Units initially present in the world.")


class CatalogueDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    objects: list[CatalogueEntry]

    @field_validator("objects")
    @classmethod
    def _unique_names(cls, entries: list[CatalogueEntry]) -> list[CatalogueEntry]:
        seen: set[str] = set()
        for entry in entries:
            if entry.name in seen:
                raise ValueError(f"duplicate object name: {entry.name}")
            seen.add(entry.name)
        return entries

    def to_catalogue(self) -> Catalogue:
        return Catalogue.from_objects(
            [GameObject(name=entry.name, actions=entry.actions) for entry in self.objects],
            counts={entry.name: entry.count for entry in self.objects if entry.count},
        )


def parse_catalogue(text: str) -> Catalogue:
    try:
        document = CatalogueDocument.model_validate_json(text)
    except ValidationError as exc:
        raise CatalogueError(f"Invalid catalogue: {exc}") from exc
    return document.to_catalogue()


def load_catalogue(path: str | Path) -> Catalogue:
    return parse_catalogue(Path(path).read_text(encoding="utf-8"))


APPLE = GameObject("apple", {Command.EAT: "mmm, delicious!", Command.TAKE: "you have an apple now"})
BOB = GameObject("bob", {Command.TALK: "Bob says hello"})
COIN = GameObject("coin", {Command.TAKE: "you have a coin now"})
MIRROR = GameObject("mirror", {Command.TAKE: "you have a mirror now", Command.TALK: "mirror does not answer"})
MUSHROOM = GameObject("mushroom", {Command.EAT: "tastes funny", Command.TAKE: "you have a mushroom now"})

DEFAULT_CATALOGUE = Catalogue.from_objects(
    [APPLE, BOB, COIN, MIRROR, MUSHROOM],
    counts={"apple": 2, "coin": 3, "mirror": 1, "mushroom": 1},
)
