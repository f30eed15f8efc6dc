from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from .models import PROFICIENCY_KINDS, Proficiencies

MAX_ENTRIES_PER_KIND = 12

# (key, label, ability)
SKILLS: Tuple[Tuple[str, str, str], ...] = (
    ("acrobatics", "Acrobatics", "dex"),
    ("animal handling", "Animal Handling", "wis"),
    ("arcana", "Arcana", "int"),
    ("athletics", "Athletics", "str"),
    ("deception", "Deception", "cha"),
    ("history", "History", "int"),
    ("insight", "Insight", "wis"),
    ("intimidation", "Intimidation", "cha"),
    ("investigation", "Investigation", "int"),
    ("medicine", "Medicine", "wis"),
    ("nature", "Nature", "int"),
    ("perception", "Perception", "wis"),
    ("performance", "Performance", "cha"),
    ("persuasion", "Persuasion", "cha"),
    ("religion", "Religion", "int"),
    ("sleight of hand", "Sleight of Hand", "dex"),
    ("stealth", "Stealth", "dex"),
    ("survival", "Survival", "wis"),
)


@dataclass(frozen=True)
class SkillSummary:
    key: str
    label: str
    ability: str
    proficient: bool
    base: int
    total: int


def _lists(profs: Proficiencies | Mapping[str, List[str]]) -> Dict[str, List[str]]:
    if isinstance(profs, Proficiencies):
        return {k: getattr(profs, k) for k in PROFICIENCY_KINDS}
    return {k: list(profs.get(k) or []) for k in PROFICIENCY_KINDS}


def total_proficiencies(profs: Proficiencies | Mapping[str, List[str]]) -> int:
    """Number of entries across all five lists, duplicates included."""
    return sum(len(v) for v in _lists(profs).values())


def normalize_proficiencies(raw: object) -> Proficiencies:
    """Read stored data, keeping only string entries of the known lists."""
    buckets: Dict[str, List[str]] = {k: [] for k in PROFICIENCY_KINDS}
    if isinstance(raw, Mapping):
        for kind in PROFICIENCY_KINDS:
            value = raw.get(kind)
            if isinstance(value, list):
                buckets[kind] = [v for v in value if isinstance(v, str)]
    return Proficiencies(**buckets)


def coerce_proficiencies(raw: object) -> Proficiencies:
    """Like :func:`normalize_proficiencies` but for user input: trims, drops blanks, caps length."""
    buckets: Dict[str, List[str]] = {k: [] for k in PROFICIENCY_KINDS}
    if isinstance(raw, Mapping):
        for kind in PROFICIENCY_KINDS:
            value = raw.get(kind)
            if not isinstance(value, list):
                continue
            cleaned = [v.strip() for v in value if isinstance(v, str) and v.strip()]
            buckets[kind] = cleaned[:MAX_ENTRIES_PER_KIND]
    return Proficiencies(**buckets)


def build_skill_summaries(
    profs: Proficiencies,
    modifiers: Mapping[str, int],
    proficiency_bonus: int,
) -> List[SkillSummary]:
    known = {s.strip().lower() for s in profs.skills}
    out: List[SkillSummary] = []
    for key, label, ability in SKILLS:
        proficient = key in known
        base = modifiers.get(ability, 0)
        out.append(
            SkillSummary(
                key=key,
                label=label,
                ability=ability,
                proficient=proficient,
                base=base,
                total=base + (proficiency_bonus if proficient else 0),
            )
        )
    return out


__all__ = [
    "SKILLS",
    "SkillSummary",
    "build_skill_summaries",
    "coerce_proficiencies",
    "normalize_proficiencies",
    "total_proficiencies",
]
