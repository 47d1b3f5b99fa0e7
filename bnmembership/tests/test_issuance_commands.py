"""Tests for Request and Onboard membership issuance."""

from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timezone

from bnmembership.core.domain.enums import CommandKind, MembershipStatus, RejectionCode
from bnmembership.core.domain.models import (
    MembershipIdentity,
    MembershipState,
    Onboard,
    Party,
    Request,
)
from bnmembership.core.domain.transition import TransitionRequest
from bnmembership.app_api.factories.validator_factory import build_validator_v1

MEMBER = Party("O=Member,L=London,C=GB")
BNO = Party("O=BNO,L=London,C=GB")
T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


def mk_state(**overrides) -> MembershipState:
    state = MembershipState(
        identity=MembershipIdentity(MEMBER),
        network_id="network-id",
        status=MembershipStatus.PENDING,
        issuer=BNO,
        participants=frozenset({MEMBER, BNO}),
        issued=T0,
        modified=T0,
        linear_id=uuid.UUID(int=1),
    )
    return replace(state, **overrides)


def issue(command, new=None, prior=None) -> TransitionRequest:
    return TransitionRequest(command=command, signers=command.required_signers, prior=prior, new=new)


def test_request_with_input_state_fails():
    validator = build_validator_v1()
    output = mk_state()
    result = validator.validate(issue(Request(frozenset({BNO, MEMBER})), new=output, prior=output))
    assert result.rejection.code == RejectionCode.UNEXPECTED_INPUT_STATE


def test_request_without_output_state_fails():
    validator = build_validator_v1()
    result = validator.validate(issue(Request(frozenset({BNO, MEMBER}))))
    assert result.rejection.code == RejectionCode.MISSING_OUTPUT_STATE


def test_request_must_create_pending_membership():
    validator = build_validator_v1()
    output = mk_state(status=MembershipStatus.ACTIVE)
    result = validator.validate(issue(Request(frozenset({BNO, MEMBER})), new=output))
    assert result.rejection.code == RejectionCode.WRONG_INITIAL_STATUS


def test_request_must_issue_empty_roles():
    validator = build_validator_v1()
    output = mk_state(roles=frozenset({"BNO"}))
    result = validator.validate(issue(Request(frozenset({BNO, MEMBER})), new=output))
    assert result.rejection.code == RejectionCode.NON_EMPTY_INITIAL_ROLES


def test_request_status_checked_before_roles():
    validator = build_validator_v1()
    output = mk_state(status=MembershipStatus.ACTIVE, roles=frozenset({"BNO"}))
    result = validator.validate(issue(Request(frozenset({BNO, MEMBER})), new=output))
    assert result.rejection.code == RejectionCode.WRONG_INITIAL_STATUS


def test_request_requires_applicant_signature():
    validator = build_validator_v1()
    result = validator.validate(issue(Request(frozenset({BNO})), new=mk_state()))
    assert result.rejection.code == RejectionCode.MISSING_REQUIRED_SIGNER
    assert result.rejection.field == "subject"


def test_request_requires_issuer_signature():
    validator = build_validator_v1()
    result = validator.validate(issue(Request(frozenset({MEMBER})), new=mk_state()))
    assert result.rejection.code == RejectionCode.MISSING_REQUIRED_SIGNER
    assert result.rejection.field == "issuer"


def test_request_accepted():
    validator = build_validator_v1()
    result = validator.validate(issue(Request(frozenset({BNO, MEMBER})), new=mk_state()))
    assert result.accepted
    assert result.rejection is None
    assert result.command_kind == CommandKind.REQUEST


def test_request_accepted_with_business_identity():
    validator = build_validator_v1()
    output = mk_state(identity=MembershipIdentity(MEMBER, business_identity={"lei": "dummy-identity"}))
    assert validator.validate(issue(Request(frozenset({BNO, MEMBER})), new=output)).accepted


def test_onboard_with_input_state_fails():
    validator = build_validator_v1()
    output = mk_state(status=MembershipStatus.ACTIVE)
    result = validator.validate(issue(Onboard(frozenset({BNO, MEMBER})), new=output, prior=output))
    assert result.rejection.code == RejectionCode.UNEXPECTED_INPUT_STATE


def test_onboard_must_create_active_membership():
    validator = build_validator_v1()
    result = validator.validate(issue(Onboard(frozenset({BNO, MEMBER})), new=mk_state()))
    assert result.rejection.code == RejectionCode.WRONG_INITIAL_STATUS


def test_onboard_must_issue_empty_roles():
    validator = build_validator_v1()
    output = mk_state(status=MembershipStatus.ACTIVE, roles=frozenset({"BNO"}))
    result = validator.validate(issue(Onboard(frozenset({BNO, MEMBER})), new=output))
    assert result.rejection.code == RejectionCode.NON_EMPTY_INITIAL_ROLES


def test_onboard_requires_member_signature():
    validator = build_validator_v1()
    output = mk_state(status=MembershipStatus.ACTIVE)
    result = validator.validate(issue(Onboard(frozenset({BNO})), new=output))
    assert result.rejection.code == RejectionCode.MISSING_REQUIRED_SIGNER


def test_onboard_accepted():
    validator = build_validator_v1()
    output = mk_state(status=MembershipStatus.ACTIVE)
    result = validator.validate(issue(Onboard(frozenset({BNO, MEMBER})), new=output))
    assert result.accepted
    assert result.command_kind == CommandKind.ONBOARD
