"""Core membership transition validation.

Responsibilities:
  - Provide the validator and result types for deterministic rule execution.
  - Must not perform I/O while validating; consumes fully built requests.
"""
