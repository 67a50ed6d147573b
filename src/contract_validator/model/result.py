"""ValidationResult: the accumulated findings of one validation run."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable

from contract_validator import __version__
from contract_validator.model import Severity
from contract_validator.model.issue import ValidationIssue


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResultFinishedError(RuntimeError):
    """Raised when a finished result is mutated."""


@dataclass(slots=True)
class ValidationResult:
    """Ordered issue accumulator for a single run.

    Created by the orchestrator at the start of a run, appended to while
    endpoints are checked, and sealed by exactly one ``finish()`` call.
    Renderers receive it only after ``finish()``.
    """

    # ── run metadata ────────────────────────────────────────────────
    base_url: str = ""
    total_endpoints: int = 0
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    tool_version: str = __version__
    started_at: datetime = field(default_factory=_utcnow)
    finished_at: datetime | None = None

    # ── findings ────────────────────────────────────────────────────
    issues: list[ValidationIssue] = field(default_factory=list)
    total_issues: int = 0

    def add_issue(self, issue: ValidationIssue) -> None:
        if self.finished_at is not None:
            raise ResultFinishedError("cannot add issues to a finished result")
        self.issues.append(issue)
        self.total_issues += 1

    def add_issues(self, issues: Iterable[ValidationIssue]) -> None:
        for issue in issues:
            self.add_issue(issue)

    def has_errors(self) -> bool:
        return any(i.severity is Severity.ERROR for i in self.issues)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.severity is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity is Severity.WARNING)

    @property
    def is_finished(self) -> bool:
        return self.finished_at is not None

    def finish(self) -> None:
        if self.finished_at is not None:
            raise ResultFinishedError("result already finished")
        self.finished_at = _utcnow()

    @property
    def duration_ms(self) -> int:
        if self.finished_at is None:
            return 0
        return int((self.finished_at - self.started_at).total_seconds() * 1000)

    @property
    def status(self) -> str:
        """Overall label used by the report layer."""
        if self.has_errors():
            return "FAILED"
        if self.total_issues:
            return "WARNINGS"
        return "PASSED"

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Produce the result JSON matching ``validation_result.schema.json``."""
        return {
            "schema_version": "validation_result_v1",
            "run": {
                "run_id": self.run_id,
                "tool_version": self.tool_version,
                "base_url": self.base_url,
                "started_at": self.started_at.isoformat(),
                "finished_at": (
                    self.finished_at.isoformat() if self.finished_at else None
                ),
                "duration_ms": self.duration_ms,
            },
            "summary": {
                "status": self.status,
                "total_endpoints": self.total_endpoints,
                "total_issues": self.total_issues,
                "by_severity": {
                    Severity.ERROR.value: self.error_count,
                    Severity.WARNING.value: self.warning_count,
                },
            },
            "issues": [i.to_dict() for i in self.issues],
        }
