"""Domain enums for membership lifecycle and rejection reasoning.

Responsibilities:
  - Define MembershipStatus, CommandKind and RejectionCode identifiers.
  - Provide stable rejection categories and audit metadata.

Invariants:
  - Enum values must remain stable for persistence and audits.
  - RejectionCode metadata must be complete and deterministic.
"""

from __future__ import annotations

from enum import Enum


class MembershipStatus(Enum):
    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"


class CommandKind(Enum):
    REQUEST = "REQUEST"
    ONBOARD = "ONBOARD"
    ACTIVATE = "ACTIVATE"
    SUSPEND = "SUSPEND"
    REVOKE = "REVOKE"
    MODIFY_ROLES = "MODIFY_ROLES"
    MODIFY_BUSINESS_IDENTITY = "MODIFY_BUSINESS_IDENTITY"
    MODIFY_PARTICIPANTS = "MODIFY_PARTICIPANTS"


class RejectionCategory(Enum):
    CONTRACT = "CONTRACT"
    TIMESTAMP = "TIMESTAMP"
    CONSISTENCY = "CONSISTENCY"
    AUTHORIZATION = "AUTHORIZATION"
    LIFECYCLE = "LIFECYCLE"
    FIELD_CHANGE = "FIELD_CHANGE"


# Stable identifiers for rejected transitions; value is the persisted code.
class RejectionCode(Enum):
    UNSUPPORTED_COMMAND = "UNSUPPORTED_COMMAND"
    WRONG_CONTRACT = "WRONG_CONTRACT"
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"
    INCONSISTENT_TRANSITION = "INCONSISTENT_TRANSITION"
    UNAUTHORIZED_SIGNERS = "UNAUTHORIZED_SIGNERS"
    SIGNER_NOT_PARTICIPANT = "SIGNER_NOT_PARTICIPANT"
    MISSING_INPUT_STATE = "MISSING_INPUT_STATE"
    MISSING_OUTPUT_STATE = "MISSING_OUTPUT_STATE"
    UNEXPECTED_INPUT_STATE = "UNEXPECTED_INPUT_STATE"
    UNEXPECTED_OUTPUT_STATE = "UNEXPECTED_OUTPUT_STATE"
    NON_EMPTY_INITIAL_ROLES = "NON_EMPTY_INITIAL_ROLES"
    WRONG_INITIAL_STATUS = "WRONG_INITIAL_STATUS"
    MISSING_REQUIRED_SIGNER = "MISSING_REQUIRED_SIGNER"
    ALREADY_ACTIVE = "ALREADY_ACTIVE"
    ALREADY_SUSPENDED = "ALREADY_SUSPENDED"
    WRONG_TARGET_STATUS = "WRONG_TARGET_STATUS"
    ROLES_CHANGED = "ROLES_CHANGED"
    ROLES_UNCHANGED = "ROLES_UNCHANGED"
    BUSINESS_IDENTITY_CHANGED = "BUSINESS_IDENTITY_CHANGED"
    BUSINESS_IDENTITY_UNCHANGED = "BUSINESS_IDENTITY_UNCHANGED"
    PARTICIPANTS_CHANGED = "PARTICIPANTS_CHANGED"
    UNEXPECTED_SUBJECT_SIGNATURE = "UNEXPECTED_SUBJECT_SIGNATURE"
    MISSING_INITIATOR_SIGNATURE = "MISSING_INITIATOR_SIGNATURE"
    STATUS_MISMATCH = "STATUS_MISMATCH"
    INVALID_STATE_FOR_MODIFICATION = "INVALID_STATE_FOR_MODIFICATION"


# UI/audit metadata keyed by rejection code.
REJECTION_METADATA: dict[RejectionCode, dict[str, object]] = {
    RejectionCode.UNSUPPORTED_COMMAND: {
        "category": RejectionCategory.CONTRACT,
        "message": "Command is not handled by the membership contract.",
    },
    RejectionCode.WRONG_CONTRACT: {
        "category": RejectionCategory.CONTRACT,
        "message": "State has to be validated by the membership contract.",
    },
    RejectionCode.INVALID_TIMESTAMP: {
        "category": RejectionCategory.TIMESTAMP,
        "message": "State's modified timestamp should be greater or equal to issued timestamp.",
    },
    RejectionCode.INCONSISTENT_TRANSITION: {
        "category": RejectionCategory.CONSISTENCY,
        "message": "Input and output state disagree on an immutable field.",
    },
    RejectionCode.UNAUTHORIZED_SIGNERS: {
        "category": RejectionCategory.AUTHORIZATION,
        "message": "Transition must be signed by exactly the signers specified inside the command.",
    },
    RejectionCode.SIGNER_NOT_PARTICIPANT: {
        "category": RejectionCategory.AUTHORIZATION,
        "message": "Required signers should be a subset of the state's participants.",
    },
    RejectionCode.MISSING_INPUT_STATE: {
        "category": RejectionCategory.LIFECYCLE,
        "message": "Transition requires an input membership state.",
    },
    RejectionCode.MISSING_OUTPUT_STATE: {
        "category": RejectionCategory.LIFECYCLE,
        "message": "Transition requires an output membership state.",
    },
    RejectionCode.UNEXPECTED_INPUT_STATE: {
        "category": RejectionCategory.LIFECYCLE,
        "message": "Issuing transition shouldn't contain an input membership state.",
    },
    RejectionCode.UNEXPECTED_OUTPUT_STATE: {
        "category": RejectionCategory.LIFECYCLE,
        "message": "Revocation transition shouldn't contain an output membership state.",
    },
    RejectionCode.NON_EMPTY_INITIAL_ROLES: {
        "category": RejectionCategory.LIFECYCLE,
        "message": "Issuing transition should create membership with an empty roles set.",
    },
    RejectionCode.WRONG_INITIAL_STATUS: {
        "category": RejectionCategory.LIFECYCLE,
        "message": "Issuing transition created membership in the wrong status.",
    },
    RejectionCode.MISSING_REQUIRED_SIGNER: {
        "category": RejectionCategory.AUTHORIZATION,
        "message": "A party required by the command policy is not a required signer.",
    },
    RejectionCode.ALREADY_ACTIVE: {
        "category": RejectionCategory.LIFECYCLE,
        "message": "Input state of membership activation shouldn't be already active.",
    },
    RejectionCode.ALREADY_SUSPENDED: {
        "category": RejectionCategory.LIFECYCLE,
        "message": "Input state of membership suspension shouldn't be already suspended.",
    },
    RejectionCode.WRONG_TARGET_STATUS: {
        "category": RejectionCategory.LIFECYCLE,
        "message": "Output state has the wrong status for this command.",
    },
    RejectionCode.ROLES_CHANGED: {
        "category": RejectionCategory.FIELD_CHANGE,
        "message": "Input and output state should have same roles set.",
    },
    RejectionCode.ROLES_UNCHANGED: {
        "category": RejectionCategory.FIELD_CHANGE,
        "message": "Input and output state should have different set of roles.",
    },
    RejectionCode.BUSINESS_IDENTITY_CHANGED: {
        "category": RejectionCategory.FIELD_CHANGE,
        "message": "Input and output state should have same business identity.",
    },
    RejectionCode.BUSINESS_IDENTITY_UNCHANGED: {
        "category": RejectionCategory.FIELD_CHANGE,
        "message": "Input and output state should have different business identity.",
    },
    RejectionCode.PARTICIPANTS_CHANGED: {
        "category": RejectionCategory.FIELD_CHANGE,
        "message": "Input and output state should have same participants.",
    },
    RejectionCode.UNEXPECTED_SUBJECT_SIGNATURE: {
        "category": RejectionCategory.AUTHORIZATION,
        "message": "Membership owner shouldn't be required signer of this transition.",
    },
    RejectionCode.MISSING_INITIATOR_SIGNATURE: {
        "category": RejectionCategory.AUTHORIZATION,
        "message": "Initiator of the modification should be required signer of the transition.",
    },
    RejectionCode.STATUS_MISMATCH: {
        "category": RejectionCategory.LIFECYCLE,
        "message": "Input and output state of modification should have same status.",
    },
    RejectionCode.INVALID_STATE_FOR_MODIFICATION: {
        "category": RejectionCategory.LIFECYCLE,
        "message": "Modification can only be performed on active or suspended state.",
    },
}

_PERSIST_PREFIX = "MEMBERSHIP:"


def reason_to_persisted(code: RejectionCode, field: str | None = None) -> str:
    if field:
        return f"{_PERSIST_PREFIX}{code.value}:{field}"
    return f"{_PERSIST_PREFIX}{code.value}"


def reason_from_persisted(label: str) -> tuple[RejectionCode, str | None] | None:
    if not label:
        return None
    if label.startswith(_PERSIST_PREFIX):
        label = label[len(_PERSIST_PREFIX) :]
    code_label, _, field = label.partition(":")
    try:
        code = RejectionCode(code_label)
    except ValueError:
        return None
    return code, field or None


_missing = [rc for rc in RejectionCode if rc not in REJECTION_METADATA]
if _missing:
    raise RuntimeError(f"Missing REJECTION_METADATA for: {[m.value for m in _missing]}")

_extra = [k for k in REJECTION_METADATA.keys() if k not in set(RejectionCode)]
if _extra:
    raise RuntimeError(f"Extra REJECTION_METADATA keys: {[e.value for e in _extra]}")
