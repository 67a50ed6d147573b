"""Exit-code policy: maps a finished ValidationResult to a process status.

Process statuses are fixed: SUCCESS (0) when the run passed, VIOLATION (1)
when the contract was broken, ERROR (2) when the run could not be carried
out at all (bad arguments, unreadable contract, report not written).

Philosophy:
  - ERROR issues always fail the run
  - WARNING issues fail it only when the policy opts in
  - No hidden magic inside CLI glue
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from contract_validator.model.result import ValidationResult


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2


@dataclass(frozen=True, slots=True)
class ExitCodePolicy:
    """Tunable severity → exit-code mapping."""

    ok: int = ExitCode.SUCCESS
    fail: int = ExitCode.VIOLATION
    fail_on_warnings: bool = False


DEFAULT_POLICY = ExitCodePolicy()
STRICT_POLICY = ExitCodePolicy(fail_on_warnings=True)


def exit_code_for_result(
    result: ValidationResult,
    *,
    policy: ExitCodePolicy = DEFAULT_POLICY,
) -> int:
    """Compute the exit code for *result*.

    Contract:
      - ``has_errors()`` -> ``policy.fail``
      - warnings alone -> ``policy.ok`` unless ``fail_on_warnings``
    """
    if result.has_errors():
        return policy.fail
    if policy.fail_on_warnings and result.warning_count:
        return policy.fail
    return policy.ok
