"""
contract_validator.api
======================

Programmatic entrypoint for using contract_validator as a library.

Goals:
  - No argparse / CLI dependencies
  - Same input checks and error taxonomy as the CLI
  - Injectable transport for tests and custom HTTP stacks

Non-goals:
  - Owning presentation: callers render results via ``reports``

Usage::

    from contract_validator.api import validate_contract

    result = validate_contract("openapi.yaml", "https://api.example.com")
    if result.has_errors():
        ...
"""

from __future__ import annotations

from pathlib import Path

from contract_validator.config import Settings
from contract_validator.core.orchestrator import EndpointOrchestrator
from contract_validator.inputs import validate_base_url, validate_spec_file
from contract_validator.model.result import ValidationResult
from contract_validator.openapi.loader import load_contract
from contract_validator.transport.client import HttpTransport, Transport


def validate_contract(
    spec_path: str | Path,
    base_url: str,
    *,
    settings: Settings | None = None,
    transport: Transport | None = None,
) -> ValidationResult:
    """Validate a live API at *base_url* against the contract at *spec_path*.

    Parameters
    ----------
    spec_path:
        OpenAPI document (YAML or JSON).
    base_url:
        Root address of the API under test (``http://`` or ``https://``).
    settings:
        Transport settings; defaults to ``Settings()`` (env-aware).
    transport:
        Override the HTTP transport. Must provide ``get(url)``.

    Returns
    -------
    The finished ``ValidationResult``.

    Raises
    ------
    ConfigurationError
        If the contract path or base URL is invalid.
    ContractLoadError
        If the contract document cannot be parsed.
    """
    spec = validate_spec_file(spec_path)
    url = validate_base_url(base_url)
    contract = load_contract(spec)

    if transport is not None:
        return EndpointOrchestrator(transport).validate(contract, url)

    with HttpTransport(settings or Settings()) as http:
        return EndpointOrchestrator(http).validate(contract, url)
