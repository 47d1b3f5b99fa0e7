"""Domain models for membership states and transition commands.

Responsibilities:
  - Define immutable data carriers for parties, membership states and commands.

Inputs/Outputs:
  - States and commands are built by the ledger collaborator and handed to the validator.

Invariants:
  - Models must be deterministic containers with no behavior.
  - Each command kind is a distinct class; the set of kinds is closed.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Optional

from .enums import CommandKind, MembershipStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Party:
    name: str


@dataclass(frozen=True)
class MembershipIdentity:
    party: Party
    business_identity: Optional[Any] = None


@dataclass(frozen=True)
class MembershipState:
    identity: MembershipIdentity
    network_id: str
    status: MembershipStatus
    issuer: Party
    participants: frozenset[Party]
    roles: frozenset[str] = frozenset()
    issued: datetime = field(default_factory=_utcnow)
    modified: Optional[datetime] = None
    linear_id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        # A freshly issued state is last modified at issuance.
        if self.modified is None:
            object.__setattr__(self, "modified", self.issued)
        object.__setattr__(self, "participants", frozenset(self.participants))
        object.__setattr__(self, "roles", frozenset(self.roles))

    @property
    def subject(self) -> Party:
        return self.identity.party

    @property
    def business_identity(self) -> Optional[Any]:
        return self.identity.business_identity


@dataclass(frozen=True)
class Command:
    kind: ClassVar[CommandKind]
    required_signers: frozenset[Party]

    def __post_init__(self) -> None:
        object.__setattr__(self, "required_signers", frozenset(self.required_signers))


@dataclass(frozen=True)
class Request(Command):
    kind: ClassVar[CommandKind] = CommandKind.REQUEST


@dataclass(frozen=True)
class Onboard(Command):
    kind: ClassVar[CommandKind] = CommandKind.ONBOARD


@dataclass(frozen=True)
class Activate(Command):
    kind: ClassVar[CommandKind] = CommandKind.ACTIVATE


@dataclass(frozen=True)
class Suspend(Command):
    kind: ClassVar[CommandKind] = CommandKind.SUSPEND


@dataclass(frozen=True)
class Revoke(Command):
    kind: ClassVar[CommandKind] = CommandKind.REVOKE


@dataclass(frozen=True)
class ModifyRoles(Command):
    kind: ClassVar[CommandKind] = CommandKind.MODIFY_ROLES
    initiator: Party


@dataclass(frozen=True)
class ModifyBusinessIdentity(Command):
    kind: ClassVar[CommandKind] = CommandKind.MODIFY_BUSINESS_IDENTITY
    initiator: Party


@dataclass(frozen=True)
class ModifyParticipants(Command):
    kind: ClassVar[CommandKind] = CommandKind.MODIFY_PARTICIPANTS
