from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping

ABILITY_KEYS = ("str", "dex", "con", "int", "wis", "cha")

ABILITY_NAMES = {
    "str": "Strength",
    "dex": "Dexterity",
    "con": "Constitution",
    "int": "Intelligence",
    "wis": "Wisdom",
    "cha": "Charisma",
}

# Point-buy bounds
MIN_ABILITY_SCORE = 8
MAX_ABILITY_SCORE = 15
# Rolled (4d6 drop lowest) bounds
RANDOM_MIN_ABILITY_SCORE = 3
RANDOM_MAX_ABILITY_SCORE = 18

DEFAULT_ABILITY_SCORES: Dict[str, int] = {k: MIN_ABILITY_SCORE for k in ABILITY_KEYS}


def is_ability_key(value: object) -> bool:
    return isinstance(value, str) and value in ABILITY_KEYS


def ability_modifier(score: int) -> int:
    """5e ability modifier from ability score."""
    return (score - 10) // 2


def format_modifier(value: int) -> str:
    return f"+{value}" if value >= 0 else str(value)


def ability_modifiers(scores: Mapping[str, int]) -> Dict[str, int]:
    return {k: ability_modifier(scores.get(k, 10)) for k in ABILITY_KEYS}


def normalize_ability_scores(raw: object) -> Dict[str, int]:
    """Coerce stored data into a full score map, 10 for anything unreadable."""
    scores = {k: 10 for k in ABILITY_KEYS}
    if isinstance(raw, Mapping):
        for key in ABILITY_KEYS:
            value = raw.get(key)
            if isinstance(value, int) and not isinstance(value, bool):
                scores[key] = value
    return scores


@dataclass(frozen=True)
class BonusResult:
    """Scores after a bonus step, or the untouched base plus a rejection reason."""

    scores: Dict[str, int] = field(default_factory=dict)
    rejected: str | None = None

    @property
    def accepted(self) -> bool:
        return self.rejected is None


@dataclass(frozen=True)
class ChoiceCheck:
    accepted: bool
    reason: str | None = None

    @classmethod
    def ok(cls) -> "ChoiceCheck":
        return cls(True)

    @classmethod
    def reject(cls, reason: str) -> "ChoiceCheck":
        return cls(False, reason)


__all__ = [
    "ABILITY_KEYS",
    "ABILITY_NAMES",
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
    "RANDOM_MIN_ABILITY_SCORE",
    "RANDOM_MAX_ABILITY_SCORE",
    "DEFAULT_ABILITY_SCORES",
    "BonusResult",
    "ChoiceCheck",
    "ability_modifier",
    "ability_modifiers",
    "format_modifier",
    "is_ability_key",
    "normalize_ability_scores",
]
