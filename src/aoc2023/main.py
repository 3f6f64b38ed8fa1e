"""CLI entrypoint for the Advent of Code 2023 solutions."""

from __future__ import annotations

from pathlib import Path

import typer
from rich import print

from aoc2023.cli import SolutionLauncher
from aoc2023.config import settings
from aoc2023.errors import AdventError, InvalidDayError
from aoc2023.solution import Part, PartStatus, default_input_path
from aoc2023.telemetry import configure_logging

app = typer.Typer(help="Advent of Code 2023 solutions")


@app.command()
def run(
    day: str = typer.Option(None, help="Run the solution for a specific day, e.g. 5, 05 or day05"),
    input_path: Path = typer.Option(None, help="Path to the input file to be solved"),
    log_level: str = typer.Option(None, help="Override AOC2023_LOG_LEVEL"),
) -> None:
    """Solve both parts of one day and time them."""
    configure_logging(log_level or settings.log_level)
    launcher = SolutionLauncher()

    print("Welcome to Advent of Code 2023!")
    print("^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^\n")
    if day is None:
        day = typer.prompt("Please enter which day to run the solution for")

    try:
        solution = launcher.build(day, input_path)
    except InvalidDayError as exc:
        raise typer.BadParameter(str(exc), param_hint="--day")

    for part in Part:
        try:
            result = solution.run_part(part)
        except (AdventError, OSError) as exc:
            print({"error": f"{type(exc).__name__}: {exc}"})
            raise typer.Exit(code=1)

        if result.status is PartStatus.NOT_IMPLEMENTED:
            print(f"{part.label} has not been implemented yet")
        else:
            print(f"{part.label}: {result.answer}")
            print(f"{part.label} took {result.elapsed_seconds} seconds to run")
        if part is Part.ONE:
            print()


@app.command("list-days")
def list_days() -> None:
    """Show the implemented days and their default inputs."""
    launcher = SolutionLauncher()
    print(
        {
            number: {
                "title": launcher.resolve(number).title,
                "default_input": str(default_input_path(number)),
            }
            for number in launcher.available_days()
        }
    )


@app.command("settings")
def show_settings() -> None:
    """Show the effective runtime configuration."""
    print(settings.model_dump(mode="json"))


if __name__ == "__main__":
    app()
