from __future__ import annotations

import re

# Hit die by class, keys normalised to lowercase letters only
HIT_DIE = {
    "barbarian": 12,
    "fighter": 10,
    "paladin": 10,
    "ranger": 10,
    "bloodhunter": 10,
    "artificer": 8,
    "bard": 8,
    "cleric": 8,
    "druid": 8,
    "monk": 8,
    "rogue": 8,
    "warlock": 8,
    "sorcerer": 6,
    "wizard": 6,
}
DEFAULT_HIT_DIE = 8

_NON_LETTERS = re.compile(r"[^a-z]", re.IGNORECASE)


def hit_die_value(class_name: str | None) -> int:
    if not class_name:
        return DEFAULT_HIT_DIE
    key = _NON_LETTERS.sub("", class_name).lower()
    return HIT_DIE.get(key, DEFAULT_HIT_DIE)


def calculate_max_hp(level: int, hit_die: int, con_modifier: int) -> int:
    """Expected max HP using the fixed average per level after the first.

    Level 1 takes the full die; every later level adds ``die // 2 + 1``.
    The total never drops below one hit point per level.
    """
    if level <= 0:
        return 0
    first_level = hit_die + con_modifier
    extra_levels = max(0, level - 1)
    average_roll = hit_die // 2 + 1
    total = first_level + extra_levels * (average_roll + con_modifier)
    return max(level, total)


def is_valid_hit_dice_roll(value: object, hit_die: int) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        if not value.is_integer():
            return False
    elif not isinstance(value, int):
        return False
    return 1 <= value <= hit_die


def level_up_hp_gain(roll: int, con_modifier: int) -> int:
    # A real roll always grants at least 1 HP
    return max(1, roll + con_modifier)


def hit_dice_label(level: int, hit_die: int) -> str:
    return f"{max(0, level)}d{hit_die}"


__all__ = [
    "HIT_DIE",
    "DEFAULT_HIT_DIE",
    "calculate_max_hp",
    "hit_dice_label",
    "hit_die_value",
    "is_valid_hit_dice_roll",
    "level_up_hp_gain",
]
