from __future__ import annotations

from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    KeepInFrame,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from charforge.abilities import ABILITY_KEYS, format_modifier
from charforge.hit_dice import hit_dice_label
from charforge.models import Character
from charforge.proficiencies import total_proficiencies
from charforge.sheet import PROF_ROWS, _csv, _skills, _title, feat_names, footer_meta

SMALL = 9
NORMAL = 10

GRID = [
    ("FONT", (0, 0), (-1, -1), "Helvetica", NORMAL),
    ("GRID", (0, 0), (-1, -1), 0.25, colors.lightgrey),
]
HEADER_ROW = [
    ("FONT", (0, 0), (-1, 0), "Helvetica-Bold", NORMAL),
    ("BACKGROUND", (0, 0), (-1, 0), colors.whitesmoke),
]


def _table(rows: list[list[str]], header: bool = True) -> Table:
    t = Table(rows, hAlign="LEFT")
    t.setStyle(TableStyle(GRID + (HEADER_ROW if header else [])))
    return t


def _abilities_table(pc: Character) -> Table:
    data = [["Ability", "Score", "Mod"]]
    for a in ABILITY_KEYS:
        data.append([a.upper(), str(getattr(pc.abilities, a)), format_modifier(pc.ability_mod(a))])
    t = _table(data)
    t.setStyle(TableStyle([("ALIGN", (1, 1), (-1, -1), "CENTER")]))
    return t


def _vitals_table(pc: Character) -> Table:
    data = [
        [
            "HP",
            str(pc.max_hp),
            "Hit Dice",
            hit_dice_label(pc.level, pc.hit_die),
            "Prof.",
            format_modifier(pc.prof),
            "Init.",
            format_modifier(pc.initiative),
        ]
    ]
    return _table(data, header=False)


def _skills_table(pc: Character) -> Table:
    rows = [["Skill", "Abil.", "Bonus"]]
    for s in _skills(pc):
        rows.append([s.label + (" *" if s.proficient else ""), s.ability.upper(), format_modifier(s.total)])
    t = _table(rows)
    t.setStyle(TableStyle([("FONT", (0, 1), (-1, -1), "Helvetica", SMALL)]))
    return t


def _profs_table(pc: Character, style) -> Table:
    rows = [
        [label, Paragraph(escape(_csv(getattr(pc.proficiencies, kind))), style)]
        for label, kind in PROF_ROWS
    ]
    rows.append(["Total", str(total_proficiencies(pc.proficiencies))])
    return _table(rows, header=False)


def _feats_table(pc: Character) -> Table:
    rows = [["Feats"]] + [[name] for name in feat_names(pc) or ["-"]]
    return _table(rows)


def save_pdf(pc: Character, path: Path, meta: dict[str, str] | None = None) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    doc = SimpleDocTemplate(
        str(path),
        pagesize=letter,
        leftMargin=44,
        rightMargin=44,
        topMargin=36,
        bottomMargin=36,
    )
    styles = getSampleStyleSheet()

    title_para = Paragraph(f"<b>{escape(_title(pc))}</b>", styles["Title"])
    details = " / ".join(x for x in (pc.ancestry, pc.background, pc.alignment) if x)
    details_para = Paragraph(escape(details or "-"), styles["Normal"])

    left = [
        Paragraph("<b>Abilities</b>", styles["Heading3"]),
        _abilities_table(pc),
        Spacer(1, 0.12 * inch),
        Paragraph("<b>Proficiencies</b>", styles["Heading3"]),
        _profs_table(pc, styles["BodyText"]),
        Spacer(1, 0.12 * inch),
        _feats_table(pc),
    ]
    right = [
        Paragraph("<b>Skills</b>", styles["Heading3"]),
        _skills_table(pc),
    ]

    col_width = 3.4 * inch
    left_tbl = Table([[x] for x in left], hAlign="LEFT")
    right_tbl = Table([[x] for x in right], hAlign="LEFT")

    left_fit = KeepInFrame(col_width, 8 * inch, [left_tbl], mode="shrink")
    right_fit = KeepInFrame(col_width, 8 * inch, [right_tbl], mode="shrink")

    body = Table([[left_fit, right_fit]], colWidths=[col_width, col_width])
    body.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))

    footer_text = "  •  ".join(f"{k.upper()}: {v}" for k, v in footer_meta(meta).items())
    footer = Paragraph(f"<font size=9 color=grey>{escape(footer_text)}</font>", styles["Normal"])

    doc.build(
        [
            title_para,
            details_para,
            Spacer(1, 0.1 * inch),
            _vitals_table(pc),
            Spacer(1, 0.15 * inch),
            body,
            Spacer(1, 0.2 * inch),
            footer,
        ]
    )


__all__ = ["save_pdf"]
