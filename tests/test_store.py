import json

import pytest

from charforge.characters import create_character, level_up
from charforge.models import CreateCharacterInput, LevelUpInput
from charforge.store import PrettyError, load_character, load_request, save_character


def _hero():
    return create_character(
        CreateCharacterInput(
            name="Elora",
            ancestry="Elf",
            class_="Wizard",
            background="Sage",
            alignment="Neutral",
            ability_scores={"str": 8, "dex": 14, "con": 13, "int": 15, "wis": 12, "cha": 10},
            background_choice="int",
        )
    )


def test_save_load_roundtrip(tmp_path):
    pc, _ = level_up(_hero(), LevelUpInput(hit_dice_roll=4, subclass="school-of-evocation"))
    path = tmp_path / "chars" / "elora.json"
    save_character(pc, path)
    data = json.loads(path.read_text())
    assert data["class"] == "Wizard"
    assert "feats" in data
    loaded = load_character(path)
    assert loaded == pc


def test_schema_errors_are_pretty(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"name": "X", "class": "Bard", "level": 25, "extra": 1}))
    with pytest.raises(PrettyError) as exc:
        load_character(path)
    msg = str(exc.value)
    assert msg.startswith("JSON Schema validation failed")
    assert "/level" in msg


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{nope")
    with pytest.raises(PrettyError):
        load_character(path)


def test_load_request_yaml(tmp_path):
    path = tmp_path / "req.yaml"
    path.write_text(
        "name: Tamsin\n"
        "class: Rogue\n"
        "ancestry: Halfling\n"
        "background: Criminal\n"
        "alignment: Chaotic Neutral\n"
        "background_choice: dex\n"
        "abilities: {str: 8, dex: 15, con: 14, int: 12, wis: 10, cha: 13}\n"
    )
    opts = load_request(path)
    assert opts.class_ == "Rogue"
    assert opts.ability_scores["dex"] == 15


def test_load_request_rejects_non_mapping(tmp_path):
    path = tmp_path / "req.json"
    path.write_text("[1, 2]")
    with pytest.raises(PrettyError):
        load_request(path)
