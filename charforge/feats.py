from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

# "choice" = +1 to any score, "str-or-dex" = Strength or Dexterity only
BONUS_CHOICE = "choice"
BONUS_STR_OR_DEX = "str-or-dex"

_BOON_INCREASE = "Increase one ability score of your choice by 1, to a maximum of 20."


@dataclass(frozen=True)
class FeatInfo:
    index: str
    name: str
    desc: Tuple[str, ...]
    ability_bonus: str | None = None


def _feat(index: str, name: str, *desc: str, bonus: str | None = BONUS_CHOICE) -> FeatInfo:
    return FeatInfo(index=index, name=name, desc=desc, ability_bonus=bonus)


FEATS: Dict[str, FeatInfo] = {
    f.index: f
    for f in (
        _feat(
            "alert",
            "Alert",
            "Always on the lookout for danger, you gain the following benefits:",
            "Initiative Proficiency: add your proficiency bonus when you roll initiative.",
            "Initiative Swap: right after rolling initiative you can swap initiative with a willing ally "
            "in the same combat, unless either of you is incapacitated.",
        ),
        _feat(
            "magic-initiate",
            "Magic Initiate",
            "You learn two cantrips and one 1st-level spell from a class spell list of your choice.",
            "You can cast the 1st-level spell once per long rest without expending a spell slot.",
            "Your spellcasting ability for these spells is Intelligence, Wisdom, or Charisma.",
        ),
        _feat(
            "savage-attacker",
            "Savage Attacker",
            "Once per turn when you hit with a weapon, you can reroll the weapon's damage dice and use either result.",
        ),
        _feat(
            "skilled",
            "Skilled",
            "You gain proficiency in any combination of three skills or tools of your choice.",
        ),
        _feat(
            "ability-score-improvement",
            "Ability Score Improvement",
            "Increase one ability score of your choice by 2, or increase two ability scores of your choice by 1.",
            "You can't increase an ability score above 20 using this feature.",
            bonus=None,
        ),
        _feat(
            "grappler",
            "Grappler",
            "Ability Score Increase: increase your Strength or Dexterity by 1, to a maximum of 20.",
            "Attack Advantage: you have advantage on attack rolls against a creature you are grappling.",
            "Fast Wrestler: you can use a Bonus Action to grapple a creature or to escape a grapple.",
            bonus=BONUS_STR_OR_DEX,
        ),
        _feat("archery", "Archery", "You gain a +2 bonus to attack rolls you make with ranged weapons."),
        _feat("defense", "Defense", "While you are wearing armor, you gain a +1 bonus to AC."),
        _feat(
            "great-weapon-fighting",
            "Great Weapon Fighting",
            "When you roll a 1 or 2 on a damage die for a two-handed melee attack, you can reroll the die.",
            "You must use the new roll, even if it is a 1 or 2.",
            "The weapon must have the two-handed or versatile property.",
        ),
        _feat(
            "two-weapon-fighting",
            "Two Weapon Fighting",
            "When you engage in two-weapon fighting, you can add your ability modifier to the damage of the second attack.",
        ),
        _feat(
            "boon-of-combat-prowess",
            "Boon of Combat Prowess",
            _BOON_INCREASE,
            "When you miss with an attack roll, you can hit instead. Once used, not again until a short or long rest.",
        ),
        _feat(
            "boon-of-dimensional-travel",
            "Boon of Dimensional Travel",
            _BOON_INCREASE,
            "As a bonus action, you can teleport up to 30 feet to an unoccupied space you can see.",
        ),
        _feat(
            "boon-of-fate",
            "Boon of Fate",
            _BOON_INCREASE,
            "When a creature you can see within 60 feet makes a d20 Test, you can use your reaction "
            "to roll a d10 and add or subtract it from the result.",
            "Once used, not again until a short or long rest.",
        ),
        _feat(
            "boon-of-irresistible-offense",
            "Boon of Irresistible Offense",
            _BOON_INCREASE,
            "You can bypass the damage resistances and immunities of creatures.",
        ),
        _feat(
            "boon-of-spell-recall",
            "Boon of Spell Recall",
            _BOON_INCREASE,
            "When you cast a spell using a spell slot, roll a d6. On a 6 the slot isn't expended.",
        ),
        _feat(
            "boon-of-the-night-spirit",
            "Boon of the Night Spirit",
            _BOON_INCREASE,
            "You have advantage on Dexterity (Stealth) checks.",
            "While entirely in dim light or darkness, you have resistance to all damage.",
        ),
        _feat(
            "boon-of-truesight",
            "Boon of Truesight",
            _BOON_INCREASE,
            "You gain truesight out to a range of 60 feet.",
        ),
    )
}


def feat_by_index(index: str) -> FeatInfo | None:
    return FEATS.get(index)


def feat_description(index: str) -> str:
    feat = feat_by_index(index)
    if not feat:
        return ""
    return "\n\n".join(feat.desc)


def feat_grants_ability_bonus(index: str) -> bool:
    feat = feat_by_index(index)
    return bool(feat and feat.ability_bonus)


__all__ = [
    "FEATS",
    "FeatInfo",
    "feat_by_index",
    "feat_description",
    "feat_grants_ability_bonus",
]
