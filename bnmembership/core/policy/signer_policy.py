"""Exact signer sets required by each membership command.

Responsibilities:
  - Compute the set of parties a command's authorization policy requires.
  - Reject transitions whose declared signers differ from that set.
Must not:
  - Run before the per-command presence/field rules; the specific reasons
    (missing issuer, unexpected subject, missing initiator) surface first.
Key definitions:
  - applicant_and_issuer, issuer_only, initiator_only, rule_signers_match_policy.
"""

from __future__ import annotations

from typing import Callable, Optional

from bnmembership.core.domain.enums import RejectionCode
from bnmembership.core.domain.models import Party
from bnmembership.core.domain.transition import TransitionRequest
from .types import Rejection, Rule

SignerPolicy = Callable[[TransitionRequest], frozenset[Party]]


def applicant_and_issuer(request: TransitionRequest) -> frozenset[Party]:
    return frozenset({request.subject, request.issuer})


def issuer_only(request: TransitionRequest) -> frozenset[Party]:
    return frozenset({request.issuer})


def initiator_only(request: TransitionRequest) -> frozenset[Party]:
    return frozenset({request.command.initiator})


def rule_signers_match_policy(policy: SignerPolicy) -> Rule:
    def _check(request: TransitionRequest) -> Optional[Rejection]:
        if request.required_signers != policy(request):
            return Rejection(RejectionCode.UNAUTHORIZED_SIGNERS, field="required_signers")
        return None

    return _check
