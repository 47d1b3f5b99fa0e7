"""Membership transition validation for a single proposed transition.

Responsibilities:
  - Dispatch the command to its rule list and run common + specific checks.
  - Surface exactly one rejection: the first failing check in evaluation order.
  - Produce ValidationResult; optionally raise for callers that prefer exceptions.

Inputs/Outputs:
  - Inputs: TransitionRequest with signers already authenticated upstream.
  - Outputs: ValidationResult with accepted flag and optional Rejection.

Invariants:
  - Pure and reentrant: no I/O, no shared mutable state, inputs never mutated.
  - Must remain deterministic and audit-friendly.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..domain.transition import TransitionRequest
from ..policy.policy_config import MembershipPolicyConfig
from ..policy.ruleset import RuleSet, apply_ruleset, build_ruleset_v1, command_kind
from ..policy.types import Rejection
from .result import ValidationResult

_DEBUG_FN: Callable[[str], None] | None = None


def set_validator_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


class TransitionRejectedError(ValueError):
    def __init__(self, rejection: Rejection) -> None:
        super().__init__(f"{rejection.code.value}: {rejection.message}")
        self.rejection = rejection


class MembershipTransitionValidator:
    def __init__(
        self, config: MembershipPolicyConfig, ruleset: Optional[RuleSet] = None
    ) -> None:
        self._config = config
        self._ruleset = ruleset or build_ruleset_v1(config.contract_name)

    @property
    def config(self) -> MembershipPolicyConfig:
        return self._config

    def validate(self, request: TransitionRequest) -> ValidationResult:
        kind = command_kind(request)
        rejection = apply_ruleset(request, self._ruleset)

        if _DEBUG_FN is not None and rejection is not None:
            kind_label = kind.value if kind is not None else type(request.command).__name__
            _DEBUG_FN(
                "MEMBERSHIP_REJECTED "
                f"policy={self._config.policy_id}:{self._config.policy_version} "
                f"command={kind_label} code={rejection.code.value} field={rejection.field}"
            )

        return ValidationResult(command_kind=kind, rejection=rejection)

    def require_valid(self, request: TransitionRequest) -> ValidationResult:
        result = self.validate(request)
        if result.rejection is not None:
            raise TransitionRejectedError(result.rejection)
        return result
