from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import typer

from patchvision.config import load_input
from patchvision.errors import PatchVisionError
from patchvision.panel import Panel

app = typer.Typer(
    add_completion=False,
    help="Draw a patch panel with labelled balloons pointing at its slots.",
)


def _report(exc: PatchVisionError) -> None:
    prefix = f"slot {exc.slot:02d} " if exc.slot is not None else ""
    typer.echo(f"ERROR {exc.code}: {prefix}{exc.message}", err=True)
    typer.echo(f"HINT: {exc.hint}", err=True)


@app.command()
def render(
    input_yaml: Path = typer.Argument(
        ...,
        dir_okay=False,
        help="Panel description YAML with slots and theme.",
    ),
    theme: str | None = typer.Option(
        None,
        "--theme",
        help="Override the theme from the input: ASCII, Box or Rounded.",
    ),
    color: bool = typer.Option(
        True,
        "--color/--no-color",
        help="Color balloon text by group.",
    ),
    allow_partial: bool = typer.Option(
        False,
        "--allow-partial",
        help="Print the diagram even if some balloons could not be placed.",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Logging level: DEBUG, INFO, WARNING or ERROR.",
    ),
) -> None:
    """Render the panel diagram described by INPUT_YAML."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        panel_input = load_input(input_yaml)
        if theme is not None:
            panel_input = replace(panel_input, theme=theme)
        panel = Panel.from_input(panel_input, use_color=color)
        diagram, failures = panel.render()
    except PatchVisionError as exc:
        _report(exc)
        raise typer.Exit(code=1)
    except OSError as exc:
        typer.echo(f"ERROR E1199_UNEXPECTED: {exc}", err=True)
        typer.echo("HINT: Check the input path and permissions.", err=True)
        raise typer.Exit(code=1)

    for failure in failures:
        _report(failure)
    if failures and not allow_partial:
        raise typer.Exit(code=1)
    typer.echo(diagram)


def main() -> None:
    app(prog_name="patchvision")


if __name__ == "__main__":
    main()
