import pytest

from charforge.models import AbilityScores, Character


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("CHARFORGE_STRICT_CHOICES", "CHARFORGE_DATA_DIR", "CHARFORGE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_character():
    def _make(class_="Fighter", level=1, max_hp=12, **scores):
        abilities = {"str": 16, "dex": 14, "con": 14, "int": 10, "wis": 12, "cha": 8}
        abilities.update(scores)
        return Character(
            name="Brynn",
            class_=class_,
            ancestry="Human",
            background="Soldier",
            alignment="Neutral Good",
            level=level,
            base_scores=AbilityScores(**abilities),
            abilities=AbilityScores(**abilities),
            max_hp=max_hp,
        )

    return _make
