from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

from .abilities import BonusResult, ChoiceCheck


@dataclass(frozen=True)
class BackgroundBonuses:
    choices: Tuple[str, ...]
    amount: int = 1


BACKGROUND_BONUSES: Dict[str, BackgroundBonuses] = {
    "Acolyte": BackgroundBonuses(("int", "wis", "cha")),
    "Criminal": BackgroundBonuses(("dex", "con", "int")),
    "Sage": BackgroundBonuses(("con", "int", "wis")),
    "Soldier": BackgroundBonuses(("str", "dex", "con")),
}


def get_background_bonuses(background: str | None) -> BackgroundBonuses | None:
    if not background:
        return None
    return BACKGROUND_BONUSES.get(background)


def apply_background_bonus(
    base_scores: Mapping[str, int],
    background: str | None,
    choice: str | None,
) -> Dict[str, int]:
    """Add the background's bonus to ``choice``; anything unmatched is a no-op."""
    bonuses = get_background_bonuses(background)
    result = dict(base_scores)
    if not bonuses or not choice:
        return result
    if choice in bonuses.choices:
        result[choice] = result.get(choice, 0) + bonuses.amount
    return result


def check_background_choice(background: str | None, choice: str | None) -> ChoiceCheck:
    if not choice:
        return ChoiceCheck.ok()
    bonuses = get_background_bonuses(background)
    if bonuses is None:
        return ChoiceCheck.reject(f"{background or 'No background'} grants no ability bonus")
    if choice not in bonuses.choices:
        allowed = ", ".join(k.upper() for k in bonuses.choices)
        return ChoiceCheck.reject(f"{background} allows {allowed}, not {choice.upper()}")
    return ChoiceCheck.ok()


def resolve_background_bonus(
    base_scores: Mapping[str, int],
    background: str | None,
    choice: str | None,
) -> BonusResult:
    check = check_background_choice(background, choice)
    if not check.accepted:
        return BonusResult(scores=dict(base_scores), rejected=check.reason)
    return BonusResult(scores=apply_background_bonus(base_scores, background, choice))


__all__ = [
    "BACKGROUND_BONUSES",
    "BackgroundBonuses",
    "apply_background_bonus",
    "check_background_choice",
    "get_background_bonuses",
    "resolve_background_bonus",
]
