from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet

MAX_CHARACTER_LEVEL = 20

DEFAULT_SUBCLASS_LEVEL = 3
BASE_ABILITY_SCORE_LEVELS: FrozenSet[int] = frozenset({4, 8, 12, 16, 19})
INCREMENTS_PER_IMPROVEMENT = 2

SUBCLASS_LEVELS: Dict[str, int] = {
    "Artificer": 3,
    "Barbarian": 3,
    "Bard": 3,
    "Cleric": 1,
    "Druid": 2,
    "Fighter": 3,
    "Monk": 3,
    "Paladin": 3,
    "Ranger": 3,
    "Rogue": 3,
    "Sorcerer": 1,
    "Warlock": 3,
    "Wizard": 2,
}

# Extra ability score improvement levels (which also allow a feat)
BONUS_IMPROVEMENT_LEVELS: Dict[str, FrozenSet[int]] = {
    "Fighter": frozenset({6, 14}),
    "Rogue": frozenset({10}),
}


@dataclass(frozen=True)
class LevelRequirement:
    level: int
    requires_subclass: bool
    ability_score_increments: int
    allow_feat_choice: bool


def proficiency_bonus(level: int) -> int:
    if level >= 17:
        return 6
    if level >= 13:
        return 5
    if level >= 9:
        return 4
    if level >= 5:
        return 3
    return 2


def _class_key(class_name: str | None) -> str:
    return (class_name or "").strip()


def subclass_level(class_name: str | None) -> int:
    return SUBCLASS_LEVELS.get(_class_key(class_name), DEFAULT_SUBCLASS_LEVEL)


def improvement_levels(class_name: str | None) -> FrozenSet[int]:
    return BASE_ABILITY_SCORE_LEVELS | BONUS_IMPROVEMENT_LEVELS.get(_class_key(class_name), frozenset())


def level_requirement(class_name: str | None, level: int) -> LevelRequirement:
    """What a character of ``class_name`` must or may pick on reaching ``level``."""
    improves = level in improvement_levels(class_name)
    return LevelRequirement(
        level=level,
        requires_subclass=level == subclass_level(class_name),
        ability_score_increments=INCREMENTS_PER_IMPROVEMENT if improves else 0,
        allow_feat_choice=improves,
    )


__all__ = [
    "MAX_CHARACTER_LEVEL",
    "LevelRequirement",
    "improvement_levels",
    "level_requirement",
    "proficiency_bonus",
    "subclass_level",
]
