from charforge.models import Proficiencies
from charforge.proficiencies import (
    MAX_ENTRIES_PER_KIND,
    build_skill_summaries,
    coerce_proficiencies,
    normalize_proficiencies,
    total_proficiencies,
)


def test_total_counts_duplicates():
    profs = Proficiencies(armor=["Light"], skills=["Stealth", "Stealth"], languages=["Common"])
    assert total_proficiencies(profs) == 4
    assert total_proficiencies({"tools": ["Thieves' tools"], "other": ["x"]}) == 1


def test_normalize_keeps_strings_only():
    profs = normalize_proficiencies({"skills": ["Arcana", 3, None], "armor": "Light", "junk": ["x"]})
    assert profs.skills == ["Arcana"]
    assert profs.armor == []
    assert normalize_proficiencies(None) == Proficiencies()


def test_coerce_trims_and_caps():
    raw = {"languages": ["  Elvish ", "", "   "] + [f"L{i}" for i in range(20)]}
    profs = coerce_proficiencies(raw)
    assert profs.languages[0] == "Elvish"
    assert len(profs.languages) == MAX_ENTRIES_PER_KIND


def test_skill_summaries_add_proficiency():
    mods = {"str": 3, "dex": 2, "con": 2, "int": 0, "wis": 1, "cha": -1}
    summaries = build_skill_summaries(Proficiencies(skills=["Stealth", "athletics"]), mods, 2)
    by_key = {s.key: s for s in summaries}
    assert len(summaries) == 18
    assert by_key["stealth"].proficient and by_key["stealth"].total == 4
    assert by_key["athletics"].total == 5
    assert not by_key["persuasion"].proficient and by_key["persuasion"].total == -1
