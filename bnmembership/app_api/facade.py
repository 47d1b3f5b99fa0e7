"""Entry points for the ledger collaborator.

Responsibilities:
  - Build validators through the factory and cache them per policy version.
  - Expose validate_transition / require_valid as the public verdict surface.
Must not:
  - Persist anything; the caller decides whether to commit the transition.
"""

from __future__ import annotations

from functools import lru_cache

from bnmembership.core.domain.transition import TransitionRequest
from bnmembership.core.engine.result import ValidationResult
from bnmembership.core.engine.validator import MembershipTransitionValidator
from bnmembership.app_api.factories.validator_factory import build_validator
from bnmembership.core.policy.policy_versions import POLICY_ID, POLICY_V1


@lru_cache(maxsize=None)
def get_validator(
    policy_id: str = POLICY_ID, policy_version: str = POLICY_V1
) -> MembershipTransitionValidator:
    return build_validator(policy_id=policy_id, policy_version=policy_version)


def validate_transition(
    request: TransitionRequest,
    *,
    policy_id: str = POLICY_ID,
    policy_version: str = POLICY_V1,
) -> ValidationResult:
    return get_validator(policy_id, policy_version).validate(request)


def require_valid(
    request: TransitionRequest,
    *,
    policy_id: str = POLICY_ID,
    policy_version: str = POLICY_V1,
) -> ValidationResult:
    return get_validator(policy_id, policy_version).require_valid(request)
