"""Shared type definitions for membership policy rules.

Responsibilities:
  - Define Rejection dataclass used to carry a failed check and its field.
Must not:
  - Implement logic; data-only types for rule evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from bnmembership.core.domain.enums import REJECTION_METADATA, RejectionCategory, RejectionCode
from bnmembership.core.domain.transition import TransitionRequest


@dataclass(frozen=True)
class Rejection:
    code: RejectionCode
    field: Optional[str] = None

    @property
    def category(self) -> RejectionCategory:
        return REJECTION_METADATA[self.code]["category"]  # type: ignore[return-value]

    @property
    def message(self) -> str:
        message = str(REJECTION_METADATA[self.code]["message"])
        if self.field:
            return f"{message} (field: {self.field})"
        return message


Rule = Callable[[TransitionRequest], Optional[Rejection]]
