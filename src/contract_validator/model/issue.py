"""ValidationIssue: one recorded discrepancy between observed and declared behaviour."""

from __future__ import annotations

from dataclasses import dataclass

from . import Severity


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Immutable issue record.

    Corresponds to ``issues[]`` in ``validation_result.schema.json``.
    """

    method: str
    path: str
    severity: Severity
    description: str
    expected: str | None = None
    actual: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "method": self.method,
            "path": self.path,
            "severity": self.severity.value,
            "description": self.description,
            "expected": self.expected,
            "actual": self.actual,
        }

    def __str__(self) -> str:
        text = f"[{self.severity.value}] {self.method} {self.path}: {self.description}"
        if self.expected is not None and self.actual is not None:
            text += f" (expected: '{self.expected}', actual: '{self.actual}')"
        return text


def error(
    method: str,
    path: str,
    description: str,
    expected: str | None = None,
    actual: str | None = None,
) -> ValidationIssue:
    return ValidationIssue(method, path, Severity.ERROR, description, expected, actual)


def warning(
    method: str,
    path: str,
    description: str,
    expected: str | None = None,
    actual: str | None = None,
) -> ValidationIssue:
    return ValidationIssue(method, path, Severity.WARNING, description, expected, actual)
