from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Mapping

from .abilities import ABILITY_KEYS, BonusResult, ChoiceCheck


@dataclass(frozen=True)
class AncestryChoice:
    count: int
    amount: int
    exclude: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class AncestryBonuses:
    fixed: Mapping[str, int] = field(default_factory=dict)
    choice: AncestryChoice | None = None


NO_BONUSES = AncestryBonuses()

ANCESTRY_BONUSES: Dict[str, AncestryBonuses] = {
    "Human": AncestryBonuses(fixed={k: 1 for k in ABILITY_KEYS}),
    "Elf": AncestryBonuses(fixed={"dex": 2}),
    "Dwarf": AncestryBonuses(fixed={"con": 2}),
    "Halfling": AncestryBonuses(fixed={"dex": 2}),
    "Dragonborn": AncestryBonuses(fixed={"str": 2, "cha": 1}),
    "Gnome": AncestryBonuses(fixed={"int": 2}),
    "Half-Elf": AncestryBonuses(
        fixed={"cha": 2},
        choice=AncestryChoice(count=2, amount=1, exclude=frozenset({"cha"})),
    ),
    "Half-Orc": AncestryBonuses(fixed={"str": 2, "con": 1}),
    "Tiefling": AncestryBonuses(fixed={"cha": 2, "int": 1}),
}


def get_ancestry_bonuses(ancestry: str | None) -> AncestryBonuses:
    if not ancestry:
        return NO_BONUSES
    return ANCESTRY_BONUSES.get(ancestry, NO_BONUSES)


def apply_ancestry_bonuses(
    base_scores: Mapping[str, int],
    ancestry: str | None,
    choices: Mapping[str, int] | None = None,
) -> Dict[str, int]:
    """Return a copy of ``base_scores`` with ancestry bonuses added.

    Chosen bonuses are added as given whenever the ancestry has a choice
    block. Count and exclusions are not checked here, see
    :func:`check_ancestry_choices`.
    """
    bonuses = get_ancestry_bonuses(ancestry)
    result = dict(base_scores)
    for ability, bonus in bonuses.fixed.items():
        result[ability] = result.get(ability, 0) + bonus
    if bonuses.choice and choices:
        for ability, bonus in choices.items():
            result[ability] = result.get(ability, 0) + bonus
    return result


def check_ancestry_choices(
    ancestry: str | None, choices: Mapping[str, int] | None
) -> ChoiceCheck:
    bonuses = get_ancestry_bonuses(ancestry)
    picked = dict(choices or {})
    rule = bonuses.choice
    if rule is None:
        if picked:
            return ChoiceCheck.reject(f"{ancestry or 'No ancestry'} offers no ability choice")
        return ChoiceCheck.ok()
    unknown = [k for k in picked if k not in ABILITY_KEYS]
    if unknown:
        return ChoiceCheck.reject(f"Unknown abilities: {', '.join(sorted(unknown))}")
    if len(picked) != rule.count:
        return ChoiceCheck.reject(
            f"{ancestry} needs {rule.count} different abilities, got {len(picked)}"
        )
    excluded = sorted(k for k in picked if k in rule.exclude)
    if excluded:
        return ChoiceCheck.reject(
            f"{ancestry} cannot choose {', '.join(k.upper() for k in excluded)}"
        )
    wrong = sorted(k for k, v in picked.items() if v != rule.amount)
    if wrong:
        return ChoiceCheck.reject(
            f"{ancestry} choices grant +{rule.amount} each ({', '.join(k.upper() for k in wrong)})"
        )
    return ChoiceCheck.ok()


def resolve_ancestry_bonuses(
    base_scores: Mapping[str, int],
    ancestry: str | None,
    choices: Mapping[str, int] | None = None,
) -> BonusResult:
    check = check_ancestry_choices(ancestry, choices)
    if not check.accepted:
        return BonusResult(scores=dict(base_scores), rejected=check.reason)
    return BonusResult(scores=apply_ancestry_bonuses(base_scores, ancestry, choices))


__all__ = [
    "ANCESTRY_BONUSES",
    "AncestryBonuses",
    "AncestryChoice",
    "apply_ancestry_bonuses",
    "check_ancestry_choices",
    "get_ancestry_bonuses",
    "resolve_ancestry_bonuses",
]
