"""Enums shared across the validator, orchestrator and report layers."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Issue severity.

    ERROR is a contract violation; WARNING is undocumented but
    non-breaking drift (e.g. an extra response field).
    """

    ERROR = "ERROR"
    WARNING = "WARNING"
