"""Who may see, create and manage what. Pure role/plan lookups.

`create_character` and `level_up` take an optional ``actor`` checked here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Collection, FrozenSet, Optional


class Role(str, Enum):
    PLAYER = "player"
    DM = "dm"


class Plan(str, Enum):
    GUEST = "guest"
    FREE = "free"
    BASIC_DM = "basic_dm"
    PREMIUM_DM = "premium_dm"


DM_PLANS = frozenset({Plan.BASIC_DM, Plan.PREMIUM_DM})
GUEST_CHARACTER_LIMIT = 1


class AccessDenied(PermissionError):
    pass


@dataclass(frozen=True)
class Actor:
    user_id: str
    role: Role = Role.PLAYER
    plan: Plan = Plan.FREE
    is_guest: bool = False


@dataclass(frozen=True)
class PartyLimits:
    max_parties: Optional[int]
    max_players_per_party: Optional[int]


@dataclass(frozen=True)
class Party:
    id: str
    owner_id: str
    name: str = ""
    member_ids: FrozenSet[str] = field(default_factory=frozenset)


def can_join_parties(plan: Plan) -> bool:
    return plan is not Plan.GUEST


def can_create_parties(role: Role, plan: Plan) -> bool:
    return role is Role.DM and plan in DM_PLANS


def can_manage_parties(role: Role, plan: Plan) -> bool:
    return can_create_parties(role, plan)


def party_plan_limits(plan: Plan) -> PartyLimits:
    # None = unlimited
    if plan is Plan.BASIC_DM:
        return PartyLimits(max_parties=1, max_players_per_party=5)
    if plan is Plan.PREMIUM_DM:
        return PartyLimits(max_parties=None, max_players_per_party=None)
    return PartyLimits(max_parties=0, max_players_per_party=0)


def can_view_character_sheet(
    actor: Actor, owner_id: str, dm_party_member_ids: Collection[str] = ()
) -> bool:
    """Owners always; otherwise a DM on a DM plan who runs a party the owner is in.

    ``dm_party_member_ids`` holds the members of every party ``actor`` owns.
    """
    if actor.user_id == owner_id:
        return True
    if actor.role is not Role.DM or actor.plan not in DM_PLANS:
        return False
    return owner_id in dm_party_member_ids


def require_party_member(party: Party | None, user_id: str) -> Party:
    if party is None or (party.owner_id != user_id and user_id not in party.member_ids):
        raise AccessDenied("Party not found or access denied.")
    return party


def ensure_can_create_character(actor: Actor, existing_count: int) -> None:
    if actor.is_guest and existing_count >= GUEST_CHARACTER_LIMIT:
        raise AccessDenied(
            "Guest access supports only one character. Delete your current hero or sign in to add more."
        )


def ensure_can_level_up(actor: Actor) -> None:
    if actor.is_guest:
        raise AccessDenied("Guest access cannot level up characters.")


def ensure_owner(actor: Actor, owner_id: str) -> None:
    if actor.user_id != owner_id:
        raise AccessDenied("Character not found or access denied.")


__all__ = [
    "AccessDenied",
    "Actor",
    "Party",
    "PartyLimits",
    "Plan",
    "Role",
    "can_create_parties",
    "can_join_parties",
    "can_manage_parties",
    "can_view_character_sheet",
    "ensure_can_create_character",
    "ensure_can_level_up",
    "ensure_owner",
    "party_plan_limits",
    "require_party_member",
]
