from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Tuple

from charforge.abilities import ability_modifier
from charforge.access import Actor, ensure_can_create_character, ensure_can_level_up
from charforge.ancestry import apply_ancestry_bonuses, check_ancestry_choices
from charforge.background import apply_background_bonus, check_background_choice
from charforge.config import strict_choices_enabled
from charforge.hit_dice import (
    calculate_max_hp,
    hit_die_value,
    is_valid_hit_dice_roll,
    level_up_hp_gain,
)
from charforge.leveling import MAX_CHARACTER_LEVEL, level_requirement, subclass_level
from charforge.logging import get_logger
from charforge.models import (
    AbilityScores,
    Character,
    CreateCharacterInput,
    GenerationMethod,
    LevelUpInput,
    LevelUpRecord,
)
from charforge.pointbuy import assert_within_budget

log = get_logger(__name__)

# Level-up increases stop here; creation bonuses are not capped
MAX_IMPROVED_SCORE = 20


class CharacterError(ValueError):
    pass


# --- Creation ---


def compose_scores(opts: CreateCharacterInput, *, strict: bool = False) -> Dict[str, int]:
    """Base scores plus ancestry then background bonuses."""
    ancestry_check = check_ancestry_choices(opts.ancestry, opts.ancestry_choices)
    background_check = check_background_choice(opts.background, opts.background_choice)
    for check in (ancestry_check, background_check):
        if check.accepted:
            continue
        if strict:
            raise CharacterError(check.reason)
        log.warning("lenient bonus choice for %s: %s", opts.name, check.reason)

    scores = apply_ancestry_bonuses(opts.ability_scores, opts.ancestry, opts.ancestry_choices)
    return apply_background_bonus(scores, opts.background, opts.background_choice)


def create_character(
    opts: CreateCharacterInput,
    *,
    strict: bool | None = None,
    actor: Actor | None = None,
    existing_count: int = 0,
) -> Character:
    if actor is not None:
        ensure_can_create_character(actor, existing_count)
    if not (opts.ancestry and opts.class_ and opts.background and opts.alignment):
        raise CharacterError("Select ancestry, class, background, and alignment to forge a hero.")
    if strict is None:
        strict = strict_choices_enabled()

    if opts.generation_method is GenerationMethod.POINT_BUY:
        assert_within_budget(opts.ability_scores)

    final = compose_scores(opts, strict=strict)
    too_low = [k.upper() for k, v in final.items() if v < 1]
    if too_low:
        raise CharacterError(f"Ability scores must stay above 0 after bonuses: {', '.join(too_low)}")
    hd = hit_die_value(opts.class_)
    max_hp = max(1, calculate_max_hp(1, hd, ability_modifier(final["con"])))
    character = Character(
        name=opts.name,
        **{"class": opts.class_},
        ancestry=opts.ancestry,
        background=opts.background,
        alignment=opts.alignment,
        generation_method=opts.generation_method,
        level=1,
        base_scores=AbilityScores(**opts.ability_scores),
        abilities=AbilityScores(**final),
        proficiencies=opts.proficiencies,
        max_hp=max_hp,
    )
    log.info("created %s: %s %s, d%d, %d HP", character.name, opts.ancestry, opts.class_, hd, max_hp)
    return character


def preview_max_hp(character: Character) -> int:
    return calculate_max_hp(character.level, character.hit_die, character.ability_mod("con"))


# --- Leveling ---


def level_up(
    character: Character, opts: LevelUpInput, *, actor: Actor | None = None
) -> Tuple[Character, LevelUpRecord | None]:
    """Advance ``character`` one level using a real hit-die roll.

    Returns the updated copy and the applied record, or the unchanged
    character and ``None`` at the level cap.
    """
    if actor is not None:
        ensure_can_level_up(actor)
    if character.level >= MAX_CHARACTER_LEVEL:
        return character, None

    hd = character.hit_die
    if not is_valid_hit_dice_roll(opts.hit_dice_roll, hd):
        raise CharacterError(f"Hit dice roll must be between 1 and {hd}, got {opts.hit_dice_roll}")

    pc = character.model_copy(deep=True)
    from_level = pc.level
    to_level = from_level + 1
    req = level_requirement(pc.class_, to_level)
    hp_gained = level_up_hp_gain(opts.hit_dice_roll, pc.ability_mod("con"))

    # Ability increases, limited to the slots this level grants
    slots = req.ability_score_increments
    scores = pc.abilities.as_dict()
    for inc in opts.ability_increases:
        amount = min(inc.amount, slots)
        if amount <= 0:
            log.warning("%s: no ability increase available at level %d", pc.name, to_level)
            break
        current = scores[inc.ability]
        raised = min(MAX_IMPROVED_SCORE, current + amount)
        if raised <= current:
            log.info("%s: %s already at %d, increase skipped", pc.name, inc.ability.upper(), current)
            continue
        scores[inc.ability] = raised
        slots -= raised - current
    pc.abilities = AbilityScores(**scores)

    if opts.feat:
        if req.allow_feat_choice:
            pc.feats.append(opts.feat)
        else:
            log.warning("%s: feat %s ignored, none allowed at level %d", pc.name, opts.feat, to_level)

    if opts.subclass and to_level >= subclass_level(pc.class_):
        pc.subclass = opts.subclass
    elif req.requires_subclass and not pc.subclass:
        log.warning("%s reached level %d without choosing a subclass", pc.name, to_level)

    pc.level = to_level
    pc.max_hp += hp_gained
    record = LevelUpRecord(
        **opts.model_dump(),
        from_level=from_level,
        to_level=to_level,
        hp_gained=hp_gained,
        applied_at=datetime.now(timezone.utc).isoformat(),
    )
    pc.level_ups.append(record)
    log.info("%s reaches level %d: +%d HP (max %d)", pc.name, to_level, hp_gained, pc.max_hp)
    return pc, record


__all__ = [
    "CharacterError",
    "compose_scores",
    "create_character",
    "level_up",
    "preview_max_hp",
]
