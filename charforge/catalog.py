"""Read-only option lists offered during level-up."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .abilities import ABILITY_KEYS, ABILITY_NAMES


@dataclass(frozen=True)
class SelectOption:
    value: str
    label: str
    helper: str | None = None


def _opts(*pairs: tuple[str, str] | tuple[str, str, str]) -> Tuple[SelectOption, ...]:
    return tuple(SelectOption(*p) for p in pairs)


ABILITY_SCORE_PICKLIST = tuple(SelectOption(k, ABILITY_NAMES[k]) for k in ABILITY_KEYS)

GLOBAL_FEAT_OPTIONS = _opts(
    # Origin
    ("alert", "Alert", "Initiative proficiency + swap"),
    ("magic-initiate", "Magic Initiate", "2 cantrips + 1 level 1 spell"),
    ("savage-attacker", "Savage Attacker", "Reroll weapon damage once/turn"),
    ("skilled", "Skilled", "3 skill/tool proficiencies"),
    # General
    ("ability-score-improvement", "Ability Score Improvement", "+2 to one or +1 to two scores"),
    ("grappler", "Grappler", "+1 STR/DEX, improved grappling"),
    # Fighting style
    ("archery", "Archery", "+2 to ranged attack rolls"),
    ("defense", "Defense", "+1 AC in armor"),
    ("great-weapon-fighting", "Great Weapon Fighting", "Reroll 1-2 on damage dice"),
    ("two-weapon-fighting", "Two Weapon Fighting", "Add modifier to offhand damage"),
    # Epic boons, level 19+
    ("boon-of-combat-prowess", "Boon of Combat Prowess", "+1 score, miss->hit ability"),
    ("boon-of-dimensional-travel", "Boon of Dimensional Travel", "+1 score, teleport 30ft"),
    ("boon-of-fate", "Boon of Fate", "+1 score, alter d20 tests"),
    ("boon-of-irresistible-offense", "Boon of Irresistible Offense", "+1 score, ignore resistance"),
    ("boon-of-spell-recall", "Boon of Spell Recall", "+1 score, free casting chance"),
    ("boon-of-the-night-spirit", "Boon of the Night Spirit", "+1 score, shadow abilities"),
    ("boon-of-truesight", "Boon of Truesight", "+1 score, 60ft truesight"),
)

SUBCLASS_OPTIONS: Dict[str, Tuple[SelectOption, ...]] = {
    "Barbarian": _opts(
        ("path-of-the-berserker", "Path of the Berserker"),
        ("path-of-the-ancestral-guardian", "Path of the Ancestral Guardian"),
    ),
    "Bard": _opts(
        ("college-of-lore", "College of Lore"),
        ("college-of-valor", "College of Valor"),
        ("college-of-glamour", "College of Glamour"),
    ),
    "Cleric": _opts(
        ("life-domain", "Life Domain"),
        ("light-domain", "Light Domain"),
        ("trickery-domain", "Trickery Domain"),
    ),
    "Fighter": _opts(
        ("battle-master", "Battle Master"),
        ("eldritch-knight", "Eldritch Knight"),
        ("champion", "Champion"),
    ),
    "Rogue": _opts(
        ("arcane-trickster", "Arcane Trickster"),
        ("assassin", "Assassin"),
        ("swashbuckler", "Swashbuckler"),
    ),
    "Wizard": _opts(
        ("school-of-evocation", "School of Evocation"),
        ("school-of-divination", "School of Divination"),
        ("school-of-abjuration", "School of Abjuration"),
    ),
}


def subclass_options(class_name: str | None) -> Tuple[SelectOption, ...]:
    if not class_name:
        return ()
    return SUBCLASS_OPTIONS.get(class_name, ())


def feat_option(value: str) -> SelectOption | None:
    return next((o for o in GLOBAL_FEAT_OPTIONS if o.value == value), None)


__all__ = [
    "ABILITY_SCORE_PICKLIST",
    "GLOBAL_FEAT_OPTIONS",
    "SUBCLASS_OPTIONS",
    "SelectOption",
    "feat_option",
    "subclass_options",
]
