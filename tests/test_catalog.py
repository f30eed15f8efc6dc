from charforge.catalog import (
    ABILITY_SCORE_PICKLIST,
    GLOBAL_FEAT_OPTIONS,
    feat_option,
    subclass_options,
)
from charforge.feats import FEATS, feat_by_index, feat_description, feat_grants_ability_bonus
from charforge.leveling import (
    improvement_levels,
    level_requirement,
    proficiency_bonus,
    subclass_level,
)


def test_subclass_options():
    values = [o.value for o in subclass_options("Fighter")]
    assert values == ["battle-master", "eldritch-knight", "champion"]
    assert subclass_options("Monk") == ()
    assert subclass_options(None) == ()


def test_feat_options_match_reference():
    assert len(GLOBAL_FEAT_OPTIONS) == 17
    assert {o.value for o in GLOBAL_FEAT_OPTIONS} == set(FEATS)
    assert feat_option("alert").label == "Alert"
    assert feat_option("nope") is None
    assert [o.value for o in ABILITY_SCORE_PICKLIST][0] == "str"


def test_feat_reference():
    assert "\n\n" in feat_description("alert")
    assert feat_description("nope") == ""
    assert feat_by_index("grappler").ability_bonus == "str-or-dex"
    assert not feat_grants_ability_bonus("ability-score-improvement")
    assert feat_grants_ability_bonus("boon-of-fate")


def test_proficiency_bonus_steps():
    assert [proficiency_bonus(lv) for lv in (1, 4, 5, 9, 13, 17, 20)] == [2, 2, 3, 4, 5, 6, 6]


def test_level_requirements():
    assert level_requirement("Fighter", 6).ability_score_increments == 2
    assert level_requirement("Fighter", 6).allow_feat_choice
    assert level_requirement("Wizard", 6).ability_score_increments == 0
    assert level_requirement("Wizard", 2).requires_subclass
    assert not level_requirement("Wizard", 3).requires_subclass
    assert level_requirement("Rogue", 10).allow_feat_choice
    assert subclass_level("Cleric") == 1
    assert subclass_level("Homebrew") == 3
    assert 19 in improvement_levels("Bard")
