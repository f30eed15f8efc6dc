from __future__ import annotations

from typing import List

import typer
from rich.console import Console
from rich.table import Table

from charforge.abilities import ABILITY_KEYS
from charforge.catalog import GLOBAL_FEAT_OPTIONS, subclass_options
from charforge.feats import feat_by_index, feat_description
from charforge.leveling import MAX_CHARACTER_LEVEL, level_requirement, proficiency_bonus
from charforge.pointbuy import POINT_BUY_BUDGET, check_point_buy, incremental_point_cost

pointbuy_app = typer.Typer(help="Point-buy calculator")
options_app = typer.Typer(help="Level-up choices: subclasses, feats, requirements")


@pointbuy_app.command("cost")
def cost(scores: List[int] = typer.Argument(..., help="Six scores in STR DEX CON INT WIS CHA order")):
    if len(scores) != len(ABILITY_KEYS):
        raise typer.BadParameter(f"expected {len(ABILITY_KEYS)} scores, got {len(scores)}")
    result = check_point_buy(dict(zip(ABILITY_KEYS, scores)))
    if result.out_of_range:
        keys = ", ".join(k.upper() for k in result.out_of_range)
        typer.secho(f"Out of range 8..15: {keys}", fg=typer.colors.RED)
        raise typer.Exit(1)
    color = typer.colors.GREEN if result.ok else typer.colors.RED
    typer.secho(f"Cost {result.total}/{POINT_BUY_BUDGET} (remaining {result.remaining})", fg=color)
    if not result.ok:
        raise typer.Exit(1)


@pointbuy_app.command("next")
def next_cost(score: int = typer.Argument(...)):
    step = incremental_point_cost(score)
    if step == float("inf"):
        typer.secho(f"{score} cannot be raised under point buy", fg=typer.colors.YELLOW)
        raise typer.Exit(1)
    typer.echo(f"{score} -> {score + 1}: {step} point(s)")


@options_app.command("subclasses")
def subclasses(class_name: str = typer.Argument(..., metavar="CLASS")):
    opts = subclass_options(class_name)
    if not opts:
        typer.secho(f"No subclass options listed for {class_name}", fg=typer.colors.YELLOW)
        return
    for o in opts:
        typer.echo(f"{o.value}\t{o.label}")


@options_app.command("feats")
def feats():
    t = Table(show_header=True)
    t.add_column("Index")
    t.add_column("Feat")
    t.add_column("Summary")
    for o in GLOBAL_FEAT_OPTIONS:
        t.add_row(o.value, o.label, o.helper or "")
    Console().print(t)


@options_app.command("feat")
def feat(index: str = typer.Argument(...)):
    info = feat_by_index(index)
    if info is None:
        typer.secho(f"Unknown feat: {index}", fg=typer.colors.RED)
        raise typer.Exit(1)
    typer.secho(info.name, bold=True)
    typer.echo(feat_description(index))
    if info.ability_bonus:
        typer.echo(f"Ability bonus: {info.ability_bonus}")


@options_app.command("requirements")
def requirements(
    class_name: str = typer.Argument(..., metavar="CLASS"),
    level: int = typer.Argument(..., min=1, max=MAX_CHARACTER_LEVEL),
):
    req = level_requirement(class_name, level)
    typer.echo(f"{class_name} level {level} (proficiency +{proficiency_bonus(level)})")
    typer.echo(f"  subclass required: {'yes' if req.requires_subclass else 'no'}")
    typer.echo(f"  ability score increments: {req.ability_score_increments}")
    typer.echo(f"  feat allowed: {'yes' if req.allow_feat_choice else 'no'}")


__all__ = ["options_app", "pointbuy_app"]
