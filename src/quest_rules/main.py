"""CLI entrypoint for quest-rules."""

from __future__ import annotations

import logging

import typer
from rich import print

from quest_rules.catalogue import DEFAULT_CATALOGUE, Catalogue, CatalogueError, UnknownStepError, load_catalogue
from quest_rules.config import settings
from quest_rules.errors import GameOverError
from quest_rules.game import new_game
from quest_rules.models import Step
from quest_rules.session import play as play_steps

app = typer.Typer(help="Validate command/object steps against the game rules")


def _build_catalogue(path: str | None) -> Catalogue:
    path = path or settings.catalogue_path
    if not path:
        return DEFAULT_CATALOGUE
    try:
        return load_catalogue(path)
    except (OSError, CatalogueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--catalogue") from exc


def _report_step(step: Step, error: GameOverError | None) -> None:
    print(f"trying to {step}... {'FAIL' if error else 'OK'}")


@app.callback()
def _configure() -> None:
    logging.basicConfig(level=settings.log_level.upper())


@app.command()
def play(
    steps: list[str] = typer.Argument(..., help='Steps such as "eat apple" or "talk to bob"'),
    catalogue_path: str = typer.Option(None, "--catalogue", help="Path to a JSON catalogue file"),
) -> None:
    """Play a sequence of steps and report the first failure."""
    catalogue = _build_catalogue(catalogue_path)
    try:
        parsed = [catalogue.parse_step(text) for text in steps]
    except UnknownStepError as exc:
        raise typer.BadParameter(str(exc), param_hint="STEPS") from exc

    outcome = play_steps(new_game(catalogue), parsed, on_step=_report_step)
    if not outcome.won:
        print(f"{outcome.error} (after {outcome.steps} steps)")
        print(f"advice: {outcome.advice}")
        raise typer.Exit(code=1)

    print("You win!")


@app.command("catalogue")
def show_catalogue(
    catalogue_path: str = typer.Option(None, "--catalogue", help="Path to a JSON catalogue file"),
) -> None:
    """List objects, the commands they support and their world counts."""
    catalogue = _build_catalogue(catalogue_path)
    for obj in catalogue:
        print(
            {
                "name": obj.name,
                "commands": [command.value for command in obj.actions],
                "count": catalogue.counts.get(obj.name, 0),
            }
        )


if __name__ == "__main__":
    app()
