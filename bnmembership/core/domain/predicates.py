"""Pure predicates over membership states.

Must not:
  - Mutate states or depend on anything beyond the states passed in.
"""

from __future__ import annotations

from .enums import MembershipStatus
from .models import MembershipState

MODIFIABLE_STATUSES = frozenset({MembershipStatus.ACTIVE, MembershipStatus.SUSPENDED})


def is_active_or_suspended(state: MembershipState) -> bool:
    return state.status in MODIFIABLE_STATUSES


def same_core_identity(a: MembershipState, b: MembershipState) -> bool:
    return a.identity.party == b.identity.party


def same_business_identity(a: MembershipState, b: MembershipState) -> bool:
    return a.business_identity == b.business_identity


def same_roles(a: MembershipState, b: MembershipState) -> bool:
    return a.roles == b.roles


def same_participants(a: MembershipState, b: MembershipState) -> bool:
    return a.participants == b.participants
