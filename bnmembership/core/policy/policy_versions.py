"""Policy identifiers and versions used by validator configuration."""

POLICY_ID = "bn_membership"
POLICY_V1 = "v1"
ALLOWED_POLICY_VERSIONS = {POLICY_V1}
