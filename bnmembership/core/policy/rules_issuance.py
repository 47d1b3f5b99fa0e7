"""Rules for transitions that create a membership (Request, Onboard).

Responsibilities:
  - Require an output state with no input, in the command's initial status.
  - Require empty roles and both the applicant and the issuer as signers.
Must not:
  - Re-check timestamps or signer exactness; rules_common covers those.
Key definitions:
  - build_request_rules, build_onboard_rules.
"""

from __future__ import annotations

from typing import Optional

from bnmembership.core.domain.enums import MembershipStatus, RejectionCode
from bnmembership.core.domain.transition import TransitionRequest
from .types import Rejection, Rule


def rule_no_input(request: TransitionRequest) -> Optional[Rejection]:
    if request.prior is not None:
        return Rejection(RejectionCode.UNEXPECTED_INPUT_STATE)
    return None


def rule_has_output(request: TransitionRequest) -> Optional[Rejection]:
    if request.new is None:
        return Rejection(RejectionCode.MISSING_OUTPUT_STATE)
    return None


def rule_initial_status(status: MembershipStatus) -> Rule:
    def _check(request: TransitionRequest) -> Optional[Rejection]:
        if request.new.status != status:
            return Rejection(RejectionCode.WRONG_INITIAL_STATUS, field="status")
        return None

    return _check


def rule_empty_roles(request: TransitionRequest) -> Optional[Rejection]:
    if request.new.roles:
        return Rejection(RejectionCode.NON_EMPTY_INITIAL_ROLES, field="roles")
    return None


def rule_applicant_signs(request: TransitionRequest) -> Optional[Rejection]:
    if request.subject not in request.required_signers:
        return Rejection(RejectionCode.MISSING_REQUIRED_SIGNER, field="subject")
    return None


def rule_issuer_signs(request: TransitionRequest) -> Optional[Rejection]:
    if request.issuer not in request.required_signers:
        return Rejection(RejectionCode.MISSING_REQUIRED_SIGNER, field="issuer")
    return None


def _issuance_rules(status: MembershipStatus) -> list[Rule]:
    return [
        rule_no_input,
        rule_has_output,
        rule_initial_status(status),
        rule_empty_roles,
        rule_applicant_signs,
        rule_issuer_signs,
    ]


def build_request_rules() -> list[Rule]:
    return _issuance_rules(MembershipStatus.PENDING)


def build_onboard_rules() -> list[Rule]:
    return _issuance_rules(MembershipStatus.ACTIVE)
