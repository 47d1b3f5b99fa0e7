from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bnmembership.core.domain.enums import CommandKind, RejectionCode
from bnmembership.core.domain.transition import TransitionRequest
from .rules_common import build_common_rules, first_failure
from .rules_issuance import build_onboard_rules, build_request_rules
from .rules_modify import (
    build_modify_business_identity_rules,
    build_modify_participants_rules,
    build_modify_roles_rules,
)
from .rules_status import build_activate_rules, build_revoke_rules, build_suspend_rules
from .signer_policy import (
    SignerPolicy,
    applicant_and_issuer,
    initiator_only,
    issuer_only,
    rule_signers_match_policy,
)
from .types import Rejection, Rule


@dataclass(frozen=True)
class RuleSet:
    common_rules: List[Rule]
    per_command_rules: Dict[CommandKind, List[Rule]]
    signer_policies: Dict[CommandKind, SignerPolicy] = field(default_factory=dict)


def command_kind(request: TransitionRequest) -> Optional[CommandKind]:
    kind = getattr(type(request.command), "kind", None)
    if isinstance(kind, CommandKind):
        return kind
    return None


def apply_ruleset(request: TransitionRequest, ruleset: RuleSet) -> Optional[Rejection]:
    kind = command_kind(request)
    if kind is None or kind not in ruleset.per_command_rules:
        return Rejection(RejectionCode.UNSUPPORTED_COMMAND)

    common = first_failure(ruleset.common_rules, request)
    if common:
        return common

    specific = first_failure(ruleset.per_command_rules[kind], request)
    if specific:
        return specific

    # Exact signer set; always after the command-specific signer rules.
    policy = ruleset.signer_policies.get(kind)
    if policy is None:
        return None
    return rule_signers_match_policy(policy)(request)


def build_ruleset_v1(contract_name: str) -> RuleSet:
    per_command: Dict[CommandKind, List[Rule]] = {
        CommandKind.REQUEST: build_request_rules(),
        CommandKind.ONBOARD: build_onboard_rules(),
        CommandKind.ACTIVATE: build_activate_rules(),
        CommandKind.SUSPEND: build_suspend_rules(),
        CommandKind.REVOKE: build_revoke_rules(),
        CommandKind.MODIFY_ROLES: build_modify_roles_rules(),
        CommandKind.MODIFY_BUSINESS_IDENTITY: build_modify_business_identity_rules(),
        CommandKind.MODIFY_PARTICIPANTS: build_modify_participants_rules(),
    }
    signer_policies: Dict[CommandKind, SignerPolicy] = {
        CommandKind.REQUEST: applicant_and_issuer,
        CommandKind.ONBOARD: applicant_and_issuer,
        CommandKind.ACTIVATE: issuer_only,
        CommandKind.SUSPEND: issuer_only,
        CommandKind.REVOKE: issuer_only,
        CommandKind.MODIFY_ROLES: initiator_only,
        CommandKind.MODIFY_BUSINESS_IDENTITY: initiator_only,
        CommandKind.MODIFY_PARTICIPANTS: issuer_only,
    }
    missing = [k for k in CommandKind if k not in per_command or k not in signer_policies]
    if missing:
        raise RuntimeError(f"Missing rules for command kinds: {[m.value for m in missing]}")
    return RuleSet(
        common_rules=build_common_rules(contract_name),
        per_command_rules=per_command,
        signer_policies=signer_policies,
    )
