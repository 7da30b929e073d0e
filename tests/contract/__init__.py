"""Contract tests.

Purpose
- Define the invocation-log behaviour once and run it against several test
  doubles (string, enum and dataclass invocations).

Guidelines
- Parametrize doubles via fixtures.
- Assert only the public contract (reported failures and log contents).
"""
