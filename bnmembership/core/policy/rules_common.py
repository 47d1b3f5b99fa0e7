"""Checks shared by every membership command.

Responsibilities:
  - Contract ownership, timestamp sanity, immutable fields, signer exactness
    and signer participation.
Must not:
  - Look at command-specific policy; those live in the per-command rule modules.
Key definitions:
  - rule_contract, rule_prior_timestamps, rule_new_timestamps, rule_immutable_fields,
    rule_signers_match_command, rule_signers_are_participants, first_failure.
"""

from __future__ import annotations

from typing import Iterable, Optional

from bnmembership.core.domain.enums import RejectionCode
from bnmembership.core.domain.predicates import same_core_identity
from bnmembership.core.domain.transition import TransitionRequest
from .types import Rejection, Rule


def rule_contract(contract_name: str) -> Rule:
    def _check(request: TransitionRequest) -> Optional[Rejection]:
        if request.prior is not None and request.prior_contract is not None:
            if request.prior_contract != contract_name:
                return Rejection(RejectionCode.WRONG_CONTRACT, field="prior")
        if request.new is not None and request.new_contract is not None:
            if request.new_contract != contract_name:
                return Rejection(RejectionCode.WRONG_CONTRACT, field="new")
        return None

    return _check


def rule_prior_timestamps(request: TransitionRequest) -> Optional[Rejection]:
    prior = request.prior
    if prior is not None and prior.modified < prior.issued:
        return Rejection(RejectionCode.INVALID_TIMESTAMP, field="prior")
    return None


def rule_new_timestamps(request: TransitionRequest) -> Optional[Rejection]:
    new = request.new
    if new is not None and new.modified < new.issued:
        return Rejection(RejectionCode.INVALID_TIMESTAMP, field="new")
    return None


def rule_immutable_fields(request: TransitionRequest) -> Optional[Rejection]:
    prior, new = request.prior, request.new
    if prior is None or new is None:
        return None
    # Ordered: the first differing field is the one reported.
    if not same_core_identity(prior, new):
        return Rejection(RejectionCode.INCONSISTENT_TRANSITION, field="identity")
    if new.network_id != prior.network_id:
        return Rejection(RejectionCode.INCONSISTENT_TRANSITION, field="network_id")
    if new.issuer != prior.issuer:
        return Rejection(RejectionCode.INCONSISTENT_TRANSITION, field="issuer")
    if new.issued != prior.issued:
        return Rejection(RejectionCode.INCONSISTENT_TRANSITION, field="issued")
    if new.modified < prior.modified:
        return Rejection(RejectionCode.INCONSISTENT_TRANSITION, field="modified")
    if new.linear_id != prior.linear_id:
        return Rejection(RejectionCode.INCONSISTENT_TRANSITION, field="linear_id")
    return None


def rule_signers_match_command(request: TransitionRequest) -> Optional[Rejection]:
    if request.required_signers != request.signers:
        return Rejection(RejectionCode.UNAUTHORIZED_SIGNERS)
    return None


def rule_signers_are_participants(request: TransitionRequest) -> Optional[Rejection]:
    # Terminal transitions have no new state; fall back to the prior one.
    state = request.new if request.new is not None else request.prior
    if state is None:
        return None
    if not request.required_signers <= state.participants:
        return Rejection(RejectionCode.SIGNER_NOT_PARTICIPANT)
    return None


def build_common_rules(contract_name: str) -> list[Rule]:
    return [
        rule_contract(contract_name),
        rule_prior_timestamps,
        rule_new_timestamps,
        rule_immutable_fields,
        rule_signers_match_command,
        rule_signers_are_participants,
    ]


def first_failure(rules: Iterable[Rule], request: TransitionRequest) -> Optional[Rejection]:
    for rule in rules:
        rejection = rule(request)
        if rejection is not None:
            return rejection
    return None
