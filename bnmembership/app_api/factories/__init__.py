from .validator_factory import build_validator, build_validator_v1

__all__ = [
    "build_validator",
    "build_validator_v1",
]
