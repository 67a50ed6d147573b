"""Orchestrator: walks declared read operations, checks each live, builds one ValidationResult."""

from __future__ import annotations

import logging

from contract_validator.config import HTTP_METHOD_GET, STATUS_200_TEXT
from contract_validator.core.response_validator import ResponseValidator
from contract_validator.errors import TransportError
from contract_validator.model.issue import error
from contract_validator.model.result import ValidationResult
from contract_validator.openapi.document import ContractDocument, Operation
from contract_validator.transport.client import HttpResponse, Transport
from contract_validator.transport.urls import build_full_url, path_from_url

_logger = logging.getLogger(__name__)

_EXPECTED_STATUS = 200


class EndpointOrchestrator:
    """Validates every declared GET endpoint of a contract against a live API.

    Endpoints are processed one at a time in the contract's path order.
    A failure on one endpoint is recorded as an issue and never stops
    the run.
    """

    def __init__(
        self,
        transport: Transport,
        response_validator: ResponseValidator | None = None,
    ) -> None:
        self.transport = transport
        self.response_validator = response_validator or ResponseValidator()

    def validate(self, contract: ContractDocument, base_url: str) -> ValidationResult:
        """Run the full validation and return the finished result."""
        result = ValidationResult(base_url=base_url, total_endpoints=contract.total_paths)

        _logger.info(
            "Starting validation of %d endpoints against %s",
            contract.total_paths,
            base_url,
        )

        reads = contract.read_operations()
        if len(reads) < contract.total_paths:
            _logger.debug(
                "%d path(s) declare no GET operation; skipped",
                contract.total_paths - len(reads),
            )

        for index, (path, op) in enumerate(reads, 1):
            _logger.info("Validating endpoint %d/%d: %s", index, len(reads), path)
            self._validate_get(result, base_url, path, op)

        result.finish()
        self._log_summary(result)
        return result

    # ── per endpoint ────────────────────────────────────────────────

    def _validate_get(
        self,
        result: ValidationResult,
        base_url: str,
        path: str,
        op: Operation,
    ) -> None:
        full_url = build_full_url(base_url, path)
        _logger.debug("Sending GET request to %s", full_url)

        try:
            response = self.transport.get(full_url)
        except TransportError as exc:
            _logger.error("Request to GET %s failed: %s", path, exc)
            result.add_issue(
                error(
                    HTTP_METHOD_GET,
                    path,
                    "Endpoint unreachable or request failed",
                    "Successful response (200 OK)",
                    f"Connection error: {exc}",
                )
            )
            return

        _logger.debug(
            "Response from GET %s: status=%d, duration=%dms",
            path_from_url(full_url),
            response.status_code,
            response.elapsed_ms,
        )

        if response.status_code != _EXPECTED_STATUS:
            result.add_issue(
                error(
                    HTTP_METHOD_GET,
                    path,
                    "Unexpected HTTP status",
                    STATUS_200_TEXT,
                    str(response.status_code),
                )
            )
            return

        self._validate_body(result, path, op, response)

    def _validate_body(
        self,
        result: ValidationResult,
        path: str,
        op: Operation,
        response: HttpResponse,
    ) -> None:
        schema = op.success_schema()
        if schema is None:
            _logger.warning("No JSON schema found for 200 response at %s", path)
            return

        result.add_issues(
            self.response_validator.validate_body(response.body, schema, path, HTTP_METHOD_GET)
        )

    @staticmethod
    def _log_summary(result: ValidationResult) -> None:
        _logger.info(
            "Validation finished in %d ms. Issues found: %d (errors: %d)",
            result.duration_ms,
            result.total_issues,
            result.error_count,
        )
