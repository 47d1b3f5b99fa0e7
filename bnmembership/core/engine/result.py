"""Validation verdict for a single proposed membership transition.

Responsibilities:
  - Capture accept/reject outcome and the single surfaced rejection.

Inputs/Outputs:
  - Inputs: produced by MembershipTransitionValidator.validate.
  - Outputs: immutable dataclass consumed by the ledger collaborator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..domain.enums import CommandKind, reason_to_persisted
from ..policy.types import Rejection


@dataclass(frozen=True)
class ValidationResult:
    command_kind: Optional[CommandKind]
    rejection: Optional[Rejection]

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    @property
    def persisted_reason(self) -> Optional[str]:
        if self.rejection is None:
            return None
        return reason_to_persisted(self.rejection.code, self.rejection.field)
