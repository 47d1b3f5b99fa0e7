"""Proposed membership transition handed to the validator.

Responsibilities:
  - Bundle prior/new state, command and authenticated signers into one value.

Invariants:
  - Built per validation call; never persisted and never mutated.
  - Signers are assumed to be cryptographically authenticated upstream.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .models import Command, MembershipState, Party


@dataclass(frozen=True)
class TransitionRequest:
    command: Command
    signers: frozenset[Party]
    prior: Optional[MembershipState] = None
    new: Optional[MembershipState] = None
    prior_contract: Optional[str] = None
    new_contract: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "signers", frozenset(self.signers))

    @property
    def subject(self) -> Optional[Party]:
        state = self.prior if self.prior is not None else self.new
        if state is None:
            return None
        return state.subject

    @property
    def issuer(self) -> Optional[Party]:
        state = self.prior if self.prior is not None else self.new
        if state is None:
            return None
        return state.issuer

    @property
    def required_signers(self) -> frozenset[Party]:
        return self.command.required_signers
