"""Exception hierarchy.

Only operator-facing failures are exceptions. Contract findings are
never raised; they are recorded as ``ValidationIssue`` values.
"""

from __future__ import annotations


class ContractValidatorError(Exception):
    """Base class for all errors raised by contract_validator."""


class ConfigurationError(ContractValidatorError):
    """Invalid command-line input or settings (bad base URL, missing file)."""


class ContractLoadError(ContractValidatorError):
    """The contract document could not be read or is structurally unusable."""


class TransportError(ContractValidatorError):
    """The HTTP request itself failed (connection refused, timeout, DNS)."""

    def __init__(self, message: str, *, url: str = "") -> None:
        super().__init__(message)
        self.url = url
