from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .policy_versions import ALLOWED_POLICY_VERSIONS


class PolicyConfigError(ValueError):
    pass


@dataclass(frozen=True)
class MembershipPolicyConfig:
    policy_id: str
    policy_version: str
    description: str
    contract_name: str


def _policies_dir() -> Path:
    return Path(__file__).resolve().parent / "policies"


def _require(payload: dict[str, Any], key: str, expected_type: type) -> Any:
    if key not in payload:
        raise PolicyConfigError(f"Missing required field '{key}' in policy config")
    value = payload[key]
    if not isinstance(value, expected_type):
        raise PolicyConfigError(f"Field '{key}' must be {expected_type.__name__}")
    if expected_type is str and not value.strip():
        raise PolicyConfigError(f"Field '{key}' must be non-empty")
    return value


def parse_policy_config(payload: Any) -> MembershipPolicyConfig:
    if not isinstance(payload, dict):
        raise PolicyConfigError("Policy config must be a JSON object")

    policy_version = _require(payload, "policy_version", str)
    if policy_version not in ALLOWED_POLICY_VERSIONS:
        raise PolicyConfigError(f"Unsupported policy_version: {policy_version}")

    return MembershipPolicyConfig(
        policy_id=_require(payload, "policy_id", str),
        policy_version=policy_version,
        description=_require(payload, "description", str),
        contract_name=_require(payload, "contract_name", str),
    )


def load_policy_config(policy_id: str, policy_version: str) -> MembershipPolicyConfig:
    config_path = _policies_dir() / f"{policy_id}_{policy_version}.json"
    if not config_path.exists():
        raise PolicyConfigError(f"Unknown policy_id/version: {policy_id}:{policy_version}")

    config = parse_policy_config(json.loads(config_path.read_text(encoding="utf-8")))
    if (config.policy_id, config.policy_version) != (policy_id, policy_version):
        raise PolicyConfigError(
            f"policy mismatch: requested '{policy_id}:{policy_version}', "
            f"config has '{config.policy_id}:{config.policy_version}'"
        )
    return config
