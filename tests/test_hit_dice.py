from charforge.hit_dice import (
    calculate_max_hp,
    hit_dice_label,
    hit_die_value,
    is_valid_hit_dice_roll,
    level_up_hp_gain,
)


def test_hit_die_lookup():
    assert hit_die_value("Barbarian!") == 12
    assert hit_die_value("Blood Hunter") == 10
    assert hit_die_value("wizard") == 6
    assert hit_die_value("unknown") == 8
    assert hit_die_value(None) == 8


def test_max_hp_average_rule():
    assert calculate_max_hp(1, 10, 2) == 12
    assert calculate_max_hp(5, 8, -1) == 23
    assert calculate_max_hp(0, 8, 3) == 0
    # floored at one per level
    assert calculate_max_hp(3, 6, -5) == 3


def test_valid_rolls():
    assert not is_valid_hit_dice_roll(0, 8)
    assert is_valid_hit_dice_roll(8, 8)
    assert not is_valid_hit_dice_roll(8.5, 8)
    assert is_valid_hit_dice_roll(4.0, 8)
    assert not is_valid_hit_dice_roll(9, 8)
    assert not is_valid_hit_dice_roll(True, 8)
    assert not is_valid_hit_dice_roll("4", 8)


def test_hp_gain_and_label():
    assert level_up_hp_gain(5, 2) == 7
    assert level_up_hp_gain(1, -3) == 1
    assert hit_dice_label(3, 10) == "3d10"
