"""Rules for operator status changes (Activate, Suspend, Revoke).

Responsibilities:
  - Move a membership into ACTIVE or SUSPENDED without touching other fields.
  - Terminate a membership (no output state).
  - Keep the subject out of the signer set; the issuer approves unilaterally.
Must not:
  - Re-check timestamps or signer exactness; rules_common covers those.
Key definitions:
  - build_activate_rules, build_suspend_rules, build_revoke_rules.
"""

from __future__ import annotations

from typing import Optional

from bnmembership.core.domain.enums import MembershipStatus, RejectionCode
from bnmembership.core.domain.predicates import (
    same_business_identity,
    same_participants,
    same_roles,
)
from bnmembership.core.domain.transition import TransitionRequest
from .types import Rejection, Rule


def rule_has_input(request: TransitionRequest) -> Optional[Rejection]:
    if request.prior is None:
        return Rejection(RejectionCode.MISSING_INPUT_STATE)
    return None


def rule_has_output(request: TransitionRequest) -> Optional[Rejection]:
    if request.new is None:
        return Rejection(RejectionCode.MISSING_OUTPUT_STATE)
    return None


def rule_no_output(request: TransitionRequest) -> Optional[Rejection]:
    if request.new is not None:
        return Rejection(RejectionCode.UNEXPECTED_OUTPUT_STATE)
    return None


def rule_prior_not_in(status: MembershipStatus, code: RejectionCode) -> Rule:
    def _check(request: TransitionRequest) -> Optional[Rejection]:
        if request.prior.status == status:
            return Rejection(code, field="status")
        return None

    return _check


def rule_target_status(status: MembershipStatus) -> Rule:
    def _check(request: TransitionRequest) -> Optional[Rejection]:
        if request.new.status != status:
            return Rejection(RejectionCode.WRONG_TARGET_STATUS, field="status")
        return None

    return _check


def rule_roles_kept(request: TransitionRequest) -> Optional[Rejection]:
    if not same_roles(request.prior, request.new):
        return Rejection(RejectionCode.ROLES_CHANGED, field="roles")
    return None


def rule_business_identity_kept(request: TransitionRequest) -> Optional[Rejection]:
    if not same_business_identity(request.prior, request.new):
        return Rejection(RejectionCode.BUSINESS_IDENTITY_CHANGED, field="business_identity")
    return None


def rule_participants_kept(request: TransitionRequest) -> Optional[Rejection]:
    if not same_participants(request.prior, request.new):
        return Rejection(RejectionCode.PARTICIPANTS_CHANGED, field="participants")
    return None


def rule_subject_not_signer(request: TransitionRequest) -> Optional[Rejection]:
    if request.subject in request.required_signers:
        return Rejection(RejectionCode.UNEXPECTED_SUBJECT_SIGNATURE, field="subject")
    return None


def rule_issuer_signs(request: TransitionRequest) -> Optional[Rejection]:
    if request.issuer not in request.required_signers:
        return Rejection(RejectionCode.MISSING_REQUIRED_SIGNER, field="issuer")
    return None


def _status_change_rules(target: MembershipStatus, already: RejectionCode) -> list[Rule]:
    return [
        rule_has_input,
        rule_has_output,
        rule_prior_not_in(target, already),
        rule_target_status(target),
        rule_roles_kept,
        rule_business_identity_kept,
        rule_participants_kept,
        rule_subject_not_signer,
        rule_issuer_signs,
    ]


def build_activate_rules() -> list[Rule]:
    return _status_change_rules(MembershipStatus.ACTIVE, RejectionCode.ALREADY_ACTIVE)


def build_suspend_rules() -> list[Rule]:
    return _status_change_rules(MembershipStatus.SUSPENDED, RejectionCode.ALREADY_SUSPENDED)


def build_revoke_rules() -> list[Rule]:
    return [
        rule_has_input,
        rule_no_output,
        rule_subject_not_signer,
        rule_issuer_signs,
    ]
