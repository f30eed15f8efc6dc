import pytest

from charforge.access import (
    AccessDenied,
    Actor,
    Party,
    Plan,
    Role,
    can_create_parties,
    can_join_parties,
    can_manage_parties,
    can_view_character_sheet,
    ensure_can_create_character,
    ensure_can_level_up,
    ensure_owner,
    party_plan_limits,
    require_party_member,
)


def test_party_permissions():
    assert can_create_parties(Role.DM, Plan.BASIC_DM)
    assert not can_create_parties(Role.PLAYER, Plan.PREMIUM_DM)
    assert not can_manage_parties(Role.DM, Plan.FREE)
    assert can_join_parties(Plan.FREE)
    assert not can_join_parties(Plan.GUEST)


def test_plan_limits():
    basic = party_plan_limits(Plan.BASIC_DM)
    assert (basic.max_parties, basic.max_players_per_party) == (1, 5)
    premium = party_plan_limits(Plan.PREMIUM_DM)
    assert premium.max_parties is None and premium.max_players_per_party is None
    assert party_plan_limits(Plan.FREE).max_parties == 0


def test_sheet_visibility():
    owner = Actor("u1")
    dm = Actor("dm", role=Role.DM, plan=Plan.BASIC_DM)
    lapsed_dm = Actor("dm2", role=Role.DM, plan=Plan.FREE)
    assert can_view_character_sheet(owner, "u1")
    assert can_view_character_sheet(dm, "u1", {"u1", "u2"})
    assert not can_view_character_sheet(dm, "u3", {"u1"})
    assert not can_view_character_sheet(lapsed_dm, "u1", {"u1"})
    assert not can_view_character_sheet(Actor("u2"), "u1", {"u1"})


def test_party_membership():
    party = Party(id="p1", owner_id="dm", member_ids=frozenset({"u1"}))
    assert require_party_member(party, "u1") is party
    assert require_party_member(party, "dm") is party
    with pytest.raises(AccessDenied):
        require_party_member(party, "u9")
    with pytest.raises(AccessDenied):
        require_party_member(None, "u1")


def test_guest_limits():
    guest = Actor("g", plan=Plan.GUEST, is_guest=True)
    ensure_can_create_character(guest, 0)
    with pytest.raises(AccessDenied, match="only one character"):
        ensure_can_create_character(guest, 1)
    ensure_can_create_character(Actor("u1"), 10)
    with pytest.raises(AccessDenied):
        ensure_can_level_up(guest)
    ensure_can_level_up(Actor("u1"))


def test_owner_check():
    ensure_owner(Actor("u1"), "u1")
    with pytest.raises(PermissionError):
        ensure_owner(Actor("u2"), "u1")
