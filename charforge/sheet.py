from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from charforge.abilities import ABILITY_KEYS, format_modifier
from charforge.feats import feat_by_index
from charforge.hit_dice import hit_dice_label
from charforge.models import Character
from charforge.proficiencies import build_skill_summaries, total_proficiencies

ABIL_NAMES = {k: k.upper() for k in ABILITY_KEYS}

PROF_ROWS = (
    ("Armor", "armor"),
    ("Weapons", "weapons"),
    ("Tools", "tools"),
    ("Skills", "skills"),
    ("Languages", "languages"),
)


def _csv(items: Iterable[str]) -> str:
    items = list(items)
    return ", ".join(items) if items else "-"


def _pkg_version() -> str:
    try:
        return pkg_version("charforge")
    except PackageNotFoundError:  # pragma: no cover - local checkout
        return "0.0"


def _title(pc: Character) -> str:
    sub = f" ({pc.subclass})" if pc.subclass else ""
    return f"{pc.name} - {pc.class_}{sub}  L{pc.level}"


def _skills(pc: Character):
    mods = {k: pc.ability_mod(k) for k in ABILITY_KEYS}
    return build_skill_summaries(pc.proficiencies, mods, pc.prof)


def feat_names(pc: Character) -> list[str]:
    out = []
    for index in pc.feats:
        info = feat_by_index(index)
        out.append(info.name if info else index)
    return out


def footer_meta(meta: dict[str, str] | None) -> dict[str, str]:
    meta = dict(meta or {})
    meta.setdefault("version", _pkg_version())
    meta.setdefault("generated", datetime.now(timezone.utc).isoformat())
    return meta


def ability_block(pc: Character) -> Table:
    t = Table(box=None, show_header=False, expand=False)
    for a in ABILITY_KEYS:
        score = getattr(pc.abilities, a)
        t.add_row(f"[bold]{ABIL_NAMES[a]}[/]", f"{score:>2} ({format_modifier(pc.ability_mod(a))})")
    return t


def vitals_block(pc: Character) -> Table:
    t = Table(box=None, show_header=False, expand=False)
    t.add_row("HP", str(pc.max_hp))
    t.add_row("Hit Dice", hit_dice_label(pc.level, pc.hit_die))
    t.add_row("Prof.", format_modifier(pc.prof))
    t.add_row("Init.", format_modifier(pc.initiative))
    return t


def prof_block(pc: Character) -> Table:
    t = Table(box=None, show_header=False, expand=False)
    for label, kind in PROF_ROWS:
        t.add_row(label, _csv(getattr(pc.proficiencies, kind)))
    t.add_row("Total", str(total_proficiencies(pc.proficiencies)))
    return t


def skills_block(pc: Character) -> Table:
    t = Table(box=None, show_header=True, expand=False)
    t.add_column("Skill")
    t.add_column("Abil.")
    t.add_column("Bonus")
    for s in _skills(pc):
        mark = "[green]*[/]" if s.proficient else ""
        t.add_row(f"{s.label}{mark}", s.ability.upper(), format_modifier(s.total))
    return t


def render_console(pc: Character, meta: dict[str, str] | None = None, console: Console | None = None) -> None:
    c = console or Console()
    c.rule(f"[bold]{_title(pc)}[/]")
    details = [x for x in (pc.ancestry, pc.background, pc.alignment) if x]
    if details:
        c.print(" / ".join(details))
    c.print(Panel(ability_block(pc), title="Abilities", border_style="cyan"))
    c.print(Panel(vitals_block(pc), title="Vitals", border_style="green"))
    c.print(Panel(skills_block(pc), title="Skills", border_style="yellow"))
    c.print(Panel(prof_block(pc), title="Proficiencies", border_style="magenta"))
    c.print(Panel(_csv(feat_names(pc)), title="Feats", border_style="blue"))
    if meta:
        meta_line = "  •  ".join(f"{k}: {v}" for k, v in meta.items())
        c.rule(f"[dim]{meta_line}[/dim]")


MD_HEADER = (
    "# {name}\n\n"
    "**Class:** {klass}{sub}  \n"
    "**Level:** {level}  \n"
    "**HP:** {hp}  \n"
    "**Hit Dice:** {hd}\n\n"
)


def to_markdown(pc: Character, meta: dict[str, str] | None = None) -> str:
    sub = f" ({pc.subclass})" if pc.subclass else ""
    out = MD_HEADER.format(
        name=pc.name,
        klass=pc.class_,
        sub=sub,
        level=pc.level,
        hp=pc.max_hp,
        hd=hit_dice_label(pc.level, pc.hit_die),
    )
    out += "## Abilities\n\n"
    for a in ABILITY_KEYS:
        score = getattr(pc.abilities, a)
        out += f"- **{ABIL_NAMES[a]}**: {score} ({format_modifier(pc.ability_mod(a))})\n"
    out += "\n## Derived\n\n"
    out += (
        f"- **Proficiency Bonus**: {format_modifier(pc.prof)}\n"
        f"- **Initiative**: {format_modifier(pc.initiative)}\n\n"
    )
    out += "## Skills\n\n"
    for s in _skills(pc):
        mark = " (proficient)" if s.proficient else ""
        out += f"- {s.label} [{s.ability.upper()}]: {format_modifier(s.total)}{mark}\n"
    out += "\n## Proficiencies\n\n"
    for label, kind in PROF_ROWS:
        out += f"- **{label}**: {_csv(getattr(pc.proficiencies, kind))}\n"
    out += f"- **Total**: {total_proficiencies(pc.proficiencies)}\n\n"
    out += "## Feats\n\n"
    names = feat_names(pc)
    if not names:
        out += "- -\n"
    else:
        for name in names:
            out += f"- {name}\n"
    footer = "  •  ".join(f"{k.upper()}: {v}" for k, v in footer_meta(meta).items())
    out += f"\n---\n\n{footer}\n"
    return out


def save_markdown(pc: Character, path: Path, meta: dict[str, str] | None = None) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_markdown(pc, meta=meta), encoding="utf-8")


__all__ = ["render_console", "save_markdown", "to_markdown"]
