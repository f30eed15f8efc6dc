from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from charforge.abilities import ability_modifier
from charforge.characters import CharacterError, create_character, level_up
from charforge.config import data_dir
from charforge.forms import FormError, parse_level_up
from charforge.hit_dice import calculate_max_hp, hit_die_value
from charforge.logging_utils import NDJSONWriter
from charforge.pointbuy import PointBuyError
from charforge.sheet import render_console, save_markdown
from charforge.sheet_pdf import save_pdf
from charforge.store import PrettyError, load_character, load_request, save_character

char_app = typer.Typer(help="Character creation and levelling")


def _stem(name: str) -> str:
    return name.replace(" ", "_").lower()


def _load(file: Path):
    try:
        return load_character(file)
    except PrettyError as e:
        typer.secho(f"Validation failed for {file}:\n{e}", fg=typer.colors.RED)
        raise typer.Exit(1)


@char_app.command("create")
def create(
    request: Path = typer.Argument(..., exists=True, help="Request file (yaml or json)"),
    out: Optional[Path] = typer.Option(None, help="Output file (default: <data dir>/<name>.json)"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Reject bad ancestry/background picks (default from env)"
    ),
):
    try:
        opts = load_request(request)
        pc = create_character(opts, strict=strict)
    except (PrettyError, PointBuyError, CharacterError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)
    out = out or data_dir() / f"{_stem(pc.name)}.json"
    save_character(pc, out)
    typer.secho(
        f"Created {pc.name} ({pc.class_}, {pc.max_hp} HP) -> {out}",
        fg=typer.colors.GREEN,
    )


@char_app.command("level-up")
def level_up_cmd(
    file: Path = typer.Argument(..., exists=True),
    roll: int = typer.Option(..., "--roll", help="Hit die roll for the new level"),
    subclass: str = typer.Option(None, help="Subclass to adopt"),
    feat: str = typer.Option(None, help="Feat index, e.g. alert"),
    asi: List[str] = typer.Option([], "--asi", help="Ability to raise by 1 (repeatable, max 2)"),
    notes: str = typer.Option(None),
    journal: Path = typer.Option(None, help="Append the level-up record to this NDJSON file"),
):
    pc = _load(file)
    try:
        opts = parse_level_up(
            {
                "hit_dice_roll": roll,
                "subclass": subclass,
                "feat": feat,
                "ability_increases": asi,
                "notes": notes,
            }
        )
        pc, record = level_up(pc, opts)
    except (FormError, CharacterError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)
    if record is None:
        typer.secho(f"{pc.name} is already level {pc.level}", fg=typer.colors.YELLOW)
        return
    save_character(pc, file)
    if journal:
        with NDJSONWriter(journal) as w:
            w.write({"event": "level_up", "name": pc.name, **record.model_dump(mode="json", exclude_none=True)})
    typer.secho(
        f"Levelled {pc.name} to {pc.level} (+{record.hp_gained} HP, max {pc.max_hp})",
        fg=typer.colors.GREEN,
    )


@char_app.command("hp")
def hp(
    class_: str = typer.Option(..., "--class", help="Class, e.g. Wizard"),
    level: int = typer.Option(1, min=1, max=20),
    con: int = typer.Option(10, help="Constitution score"),
):
    """Expected max HP using average rolls."""
    hd = hit_die_value(class_)
    typer.echo(f"d{hd} L{level}: {calculate_max_hp(level, hd, ability_modifier(con))} HP")


@char_app.command("sheet")
def sheet(
    file: Path = typer.Argument(..., exists=True),
    fmt: str = typer.Option("tty", help="tty|md|pdf"),
    out: Path | None = typer.Option(None, help="Output path for md/pdf"),
    meta: list[str] = typer.Option([], help="Metadata key=value (repeatable)"),
):
    pc = _load(file)

    meta_dict: dict[str, str] = {}
    for kv in meta:
        if "=" in kv:
            k, v = kv.split("=", 1)
            meta_dict[k.strip()] = v.strip()

    stem = _stem(pc.name)
    if fmt == "tty":
        render_console(pc, meta=meta_dict)
    elif fmt == "md":
        target = out or data_dir() / "outputs" / f"{stem}_sheet.md"
        save_markdown(pc, target, meta=meta_dict)
        typer.secho(f"Wrote {target}", fg=typer.colors.GREEN)
    elif fmt == "pdf":
        target = out or data_dir() / "outputs" / f"{stem}_sheet.pdf"
        save_pdf(pc, target, meta=meta_dict)
        typer.secho(f"Wrote {target}", fg=typer.colors.GREEN)
    else:
        raise typer.BadParameter("fmt must be one of: tty, md, pdf")


__all__ = ["char_app"]
