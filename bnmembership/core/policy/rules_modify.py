"""Rules for in-place modifications of a live membership.

Responsibilities:
  - ModifyRoles, ModifyBusinessIdentity: exactly one field changes; signer policy
    depends on who initiated the change.
  - ModifyParticipants: participants may change freely; the issuer signs.
Must not:
  - Allow modification of PENDING memberships or a status change alongside it.
Key definitions:
  - build_modify_roles_rules, build_modify_business_identity_rules,
    build_modify_participants_rules.

The initiator policy is asymmetric: a subject that initiated the change must sign,
a subject that did not initiate it must not sign.
"""

from __future__ import annotations

from typing import Optional

from bnmembership.core.domain.enums import RejectionCode
from bnmembership.core.domain.predicates import (
    is_active_or_suspended,
    same_business_identity,
    same_roles,
)
from bnmembership.core.domain.transition import TransitionRequest
from .rules_status import (
    rule_business_identity_kept,
    rule_has_input,
    rule_has_output,
    rule_issuer_signs,
    rule_participants_kept,
    rule_roles_kept,
)
from .types import Rejection, Rule


def rule_status_unchanged(request: TransitionRequest) -> Optional[Rejection]:
    if request.prior.status != request.new.status:
        return Rejection(RejectionCode.STATUS_MISMATCH, field="status")
    return None


def rule_modifiable_status(request: TransitionRequest) -> Optional[Rejection]:
    if not is_active_or_suspended(request.prior):
        return Rejection(RejectionCode.INVALID_STATE_FOR_MODIFICATION, field="status")
    return None


def rule_roles_differ(request: TransitionRequest) -> Optional[Rejection]:
    if same_roles(request.prior, request.new):
        return Rejection(RejectionCode.ROLES_UNCHANGED, field="roles")
    return None


def rule_business_identity_differs(request: TransitionRequest) -> Optional[Rejection]:
    if same_business_identity(request.prior, request.new):
        return Rejection(RejectionCode.BUSINESS_IDENTITY_UNCHANGED, field="business_identity")
    return None


def rule_initiator_signature(request: TransitionRequest) -> Optional[Rejection]:
    subject = request.subject
    initiator = request.command.initiator
    signers = request.required_signers
    if initiator == subject:
        if subject not in signers:
            return Rejection(RejectionCode.MISSING_INITIATOR_SIGNATURE, field="initiator")
        return None
    if subject in signers:
        return Rejection(RejectionCode.UNEXPECTED_SUBJECT_SIGNATURE, field="subject")
    if initiator not in signers:
        return Rejection(RejectionCode.MISSING_INITIATOR_SIGNATURE, field="initiator")
    return None


_PRECONDITIONS: list[Rule] = [
    rule_has_input,
    rule_has_output,
    rule_status_unchanged,
    rule_modifiable_status,
]


def build_modify_roles_rules() -> list[Rule]:
    return _PRECONDITIONS + [
        rule_roles_differ,
        rule_business_identity_kept,
        rule_participants_kept,
        rule_initiator_signature,
    ]


def build_modify_business_identity_rules() -> list[Rule]:
    return _PRECONDITIONS + [
        rule_roles_kept,
        rule_business_identity_differs,
        rule_participants_kept,
        rule_initiator_signature,
    ]


def build_modify_participants_rules() -> list[Rule]:
    return _PRECONDITIONS + [
        rule_roles_kept,
        rule_business_identity_kept,
        rule_issuer_signs,
    ]
