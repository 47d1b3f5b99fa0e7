"""Factory for creating validator instances from policy configuration."""

from __future__ import annotations

from bnmembership.core.engine.validator import MembershipTransitionValidator
from bnmembership.core.policy.policy_config import load_policy_config
from bnmembership.core.policy.policy_versions import ALLOWED_POLICY_VERSIONS, POLICY_ID, POLICY_V1


def build_validator_v1() -> MembershipTransitionValidator:
    return MembershipTransitionValidator(load_policy_config(POLICY_ID, POLICY_V1))


def build_validator(
    *,
    policy_id: str = POLICY_ID,
    policy_version: str = POLICY_V1,
) -> MembershipTransitionValidator:
    """Composition root: build a validator by policy id and version.

    Supported: "bn_membership" at "v1". Configuration is read here, never while validating.
    """
    if policy_id != POLICY_ID:
        raise ValueError(f"Unknown policy_id: {policy_id}")
    if policy_version == POLICY_V1:
        return build_validator_v1()
    allowed = ", ".join(sorted(ALLOWED_POLICY_VERSIONS))
    raise ValueError(f"Unsupported policy_version: {policy_version}. Allowed: {allowed}")
