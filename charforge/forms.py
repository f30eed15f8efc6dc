"""Turn loose request payloads (JSON/YAML documents, CLI options) into typed inputs.

Parsing is forgiving the way a web form is: unknown values fall back to
defaults, strings are trimmed and truncated, scores are clamped to the
bounds of the generation method. Budget and rule checks happen later in
:mod:`charforge.characters`.
"""

from __future__ import annotations

import json
import math
from typing import Any, Dict, List, Mapping

from .abilities import (
    ABILITY_KEYS,
    DEFAULT_ABILITY_SCORES,
    MAX_ABILITY_SCORE,
    MIN_ABILITY_SCORE,
    RANDOM_MAX_ABILITY_SCORE,
    RANDOM_MIN_ABILITY_SCORE,
)
from .models import AbilityIncrease, CreateCharacterInput, GenerationMethod, LevelUpInput
from .proficiencies import coerce_proficiencies

DEFAULT_NAME = "New Adventurer"
MAX_ABILITY_INCREASES = 2


class FormError(ValueError):
    pass


class MissingHitDiceRollError(FormError):
    def __init__(self, message: str = "Roll your hit die before levelling up.") -> None:
        super().__init__(message)


def read_string(value: Any, fallback: str | None = None, max_length: int = 180) -> str | None:
    if not isinstance(value, str):
        return fallback
    trimmed = value.strip()
    if not trimmed:
        return fallback
    return trimmed[:max_length]


def _read_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _maybe_json(value: Any) -> Any:
    # Browser forms post nested objects as JSON strings
    if isinstance(value, str):
        try:
            return json.loads(value)
        except ValueError:
            return None
    return value


def bounds_for(method: GenerationMethod) -> tuple[int, int]:
    if method is GenerationMethod.RANDOM:
        return RANDOM_MIN_ABILITY_SCORE, RANDOM_MAX_ABILITY_SCORE
    return MIN_ABILITY_SCORE, MAX_ABILITY_SCORE


def parse_ability_scores(raw: Any, method: GenerationMethod = GenerationMethod.POINT_BUY) -> Dict[str, int]:
    lo, hi = bounds_for(method)
    scores = dict(DEFAULT_ABILITY_SCORES)
    data = _maybe_json(raw)
    if not isinstance(data, Mapping):
        return scores
    for key in ABILITY_KEYS:
        number = _read_number(data.get(key))
        if number is None:
            continue
        scores[key] = min(hi, max(lo, math.trunc(number)))
    return scores


def parse_method(raw: Any) -> GenerationMethod:
    if isinstance(raw, GenerationMethod):
        return raw
    if isinstance(raw, str):
        try:
            return GenerationMethod(raw.strip().upper())
        except ValueError:
            pass
    return GenerationMethod.POINT_BUY


def parse_ability_key(raw: Any) -> str | None:
    if not isinstance(raw, str):
        return None
    key = raw.strip().lower()
    return key if key in ABILITY_KEYS else None


def parse_ancestry_choices(raw: Any) -> Dict[str, int]:
    data = _maybe_json(raw)
    if isinstance(data, list):
        # ["wis", "int"] shorthand means +1 each
        data = {k: 1 for k in data if isinstance(k, str)}
    if not isinstance(data, Mapping):
        return {}
    out: Dict[str, int] = {}
    for key, value in data.items():
        ability = parse_ability_key(key)
        number = _read_number(value)
        if ability and number is not None and number.is_integer() and number > 0:
            out[ability] = int(number)
    return out


def parse_create_character(data: Mapping[str, Any]) -> CreateCharacterInput:
    method = parse_method(data.get("method") or data.get("generation_method"))
    return CreateCharacterInput(
        name=read_string(data.get("name"), DEFAULT_NAME, 120),
        generation_method=method,
        ancestry=read_string(data.get("ancestry")),
        class_=read_string(data.get("class") or data.get("class_")),
        background=read_string(data.get("background")),
        alignment=read_string(data.get("alignment")),
        ability_scores=parse_ability_scores(
            data.get("ability_scores", data.get("abilities")), method
        ),
        proficiencies=coerce_proficiencies(_maybe_json(data.get("proficiencies"))),
        ancestry_choices=parse_ancestry_choices(data.get("ancestry_choices")),
        background_choice=parse_ability_key(data.get("background_choice")),
    )


def parse_ability_increase(raw: Any) -> AbilityIncrease | None:
    ability = parse_ability_key(raw)
    if ability is None:
        return None
    return AbilityIncrease(ability=ability, amount=1)


def parse_hit_dice_roll(raw: Any) -> int:
    number = _read_number(raw)
    if number is None:
        raise MissingHitDiceRollError()
    if not number.is_integer():
        raise FormError(f"Hit dice roll must be a whole number, got {raw!r}")
    return int(number)


def parse_level_up(data: Mapping[str, Any]) -> LevelUpInput:
    raw_increases: List[Any] = list(data.get("ability_increases") or [])
    if not raw_increases:
        raw_increases = [
            data.get("ability_increase_primary"),
            data.get("ability_increase_secondary"),
        ]
    increases = [inc for inc in map(parse_ability_increase, raw_increases) if inc]
    return LevelUpInput(
        subclass=read_string(data.get("subclass")),
        feat=read_string(data.get("feat")),
        ability_increases=increases[:MAX_ABILITY_INCREASES],
        notes=read_string(data.get("notes"), None, 800),
        hit_dice_roll=parse_hit_dice_roll(data.get("hit_dice_roll")),
    )


__all__ = [
    "FormError",
    "MissingHitDiceRollError",
    "parse_ability_scores",
    "parse_ancestry_choices",
    "parse_create_character",
    "parse_hit_dice_roll",
    "parse_level_up",
    "read_string",
]
