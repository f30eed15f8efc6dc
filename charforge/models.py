from __future__ import annotations

from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, PositiveInt, field_validator

from .abilities import ABILITY_KEYS, ability_modifier

PROFICIENCY_KINDS = ("armor", "weapons", "tools", "skills", "languages")


class GenerationMethod(str, Enum):
    POINT_BUY = "POINT_BUY"
    RANDOM = "RANDOM"


class AbilityScores(BaseModel):
    str: PositiveInt
    dex: PositiveInt
    con: PositiveInt
    int: PositiveInt
    wis: PositiveInt
    cha: PositiveInt

    def modifier(self, name):
        return ability_modifier(getattr(self, name))

    def as_dict(self) -> dict:
        return {k: getattr(self, k) for k in ABILITY_KEYS}


class Proficiencies(BaseModel):
    armor: List[str] = []
    weapons: List[str] = []
    tools: List[str] = []
    skills: List[str] = []
    languages: List[str] = []


class CreateCharacterInput(BaseModel):
    name: str = Field(min_length=1)
    generation_method: GenerationMethod = GenerationMethod.POINT_BUY
    ancestry: Optional[str] = None
    class_: Optional[str] = Field(default=None, alias="class")
    background: Optional[str] = None
    alignment: Optional[str] = None
    ability_scores: Dict[str, int]
    proficiencies: Proficiencies = Field(default_factory=Proficiencies)
    ancestry_choices: Dict[str, int] = {}
    background_choice: Optional[str] = None

    class Config:
        populate_by_name = True

    @field_validator("ability_scores")
    @classmethod
    def _all_six(cls, v):
        missing = [k for k in ABILITY_KEYS if k not in v]
        if missing:
            raise ValueError(f"missing ability scores: {', '.join(missing)}")
        return {k: v[k] for k in ABILITY_KEYS}


AbilityKey = Literal["str", "dex", "con", "int", "wis", "cha"]


class AbilityIncrease(BaseModel):
    ability: AbilityKey
    amount: int = 1


class LevelUpInput(BaseModel):
    subclass: Optional[str] = None
    feat: Optional[str] = None
    ability_increases: List[AbilityIncrease] = []
    notes: Optional[str] = None
    hit_dice_roll: int


class LevelUpRecord(LevelUpInput):
    from_level: PositiveInt
    to_level: PositiveInt
    hp_gained: int
    applied_at: str


class Character(BaseModel):
    name: str = Field(min_length=1)
    class_: str = Field(alias="class", min_length=1)
    subclass: Optional[str] = None
    ancestry: Optional[str] = None
    background: Optional[str] = None
    alignment: Optional[str] = None
    generation_method: GenerationMethod = GenerationMethod.POINT_BUY
    level: PositiveInt = Field(default=1, le=20)
    base_scores: AbilityScores
    abilities: AbilityScores
    proficiencies: Proficiencies = Field(default_factory=Proficiencies)
    feats: List[str] = []
    max_hp: PositiveInt
    level_ups: List[LevelUpRecord] = []

    class Config:
        populate_by_name = True

    # --- Derived ---
    def ability_mod(self, name: str) -> int:
        return self.abilities.modifier(name.lower())

    @property
    def prof(self) -> int:
        from .leveling import proficiency_bonus

        return proficiency_bonus(self.level)

    @property
    def hit_die(self) -> int:
        from .hit_dice import hit_die_value

        return hit_die_value(self.class_)

    @property
    def initiative(self) -> int:
        return self.ability_mod("dex")


def dump_model(model: BaseModel) -> dict:
    return model.model_dump(by_alias=True, exclude_none=True, mode="json")


__all__ = [
    "AbilityIncrease",
    "AbilityScores",
    "Character",
    "CreateCharacterInput",
    "GenerationMethod",
    "LevelUpInput",
    "LevelUpRecord",
    "PROFICIENCY_KINDS",
    "Proficiencies",
    "dump_model",
]
