from __future__ import annotations

from pathlib import Path

import typer

from charforge.pointbuy import PointBuyError, assert_within_budget
from charforge.models import GenerationMethod
from charforge.store import PrettyError, load_character, load_request


validate_app = typer.Typer(help="Validate charforge data files")


@validate_app.command()
def character(file: Path = typer.Argument(..., exists=True)):
    """Validate a saved character json file."""
    try:
        _ = load_character(file)
        typer.secho(f"OK: {file}", fg=typer.colors.GREEN)
    except PrettyError as e:
        typer.secho(f"ERR: {file}\n{e}", fg=typer.colors.RED)
        raise typer.Exit(1)


@validate_app.command()
def request(file: Path = typer.Argument(..., exists=True)):
    """Validate a creation request (yaml or json), including the point-buy budget."""
    try:
        opts = load_request(file)
        if opts.generation_method is GenerationMethod.POINT_BUY:
            assert_within_budget(opts.ability_scores)
        typer.secho(f"OK: {file}", fg=typer.colors.GREEN)
    except (PrettyError, PointBuyError) as e:
        typer.secho(f"ERR: {file}\n{e}", fg=typer.colors.RED)
        raise typer.Exit(1)


__all__ = ["validate_app"]
