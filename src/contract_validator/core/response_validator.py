"""Response body validation entry point: raw text -> JSON tree -> dispatch."""

from __future__ import annotations

import json
import logging

from contract_validator.config import HTTP_METHOD_GET
from contract_validator.model.issue import ValidationIssue, error
from contract_validator.schema.context import ValidationContext
from contract_validator.schema.nodes import SchemaNode
from contract_validator.schema.validators import dispatch

_logger = logging.getLogger(__name__)


def _reject_constant(token: str) -> float:
    # NaN / Infinity / -Infinity are not JSON
    raise ValueError(f"Non-standard token '{token}'")


def parse_json_body(body: str):
    """Strict ``json.loads``.

    Raises ``ValueError`` for malformed text or non-standard numeric
    tokens, and ``RecursionError`` for nesting deeper than the
    interpreter stack allows.
    """
    return json.loads(body, parse_constant=_reject_constant)


class ResponseValidator:
    """Parses a response body and validates it against a schema tree."""

    def validate_body(
        self,
        body: str | None,
        schema: SchemaNode,
        endpoint_path: str,
        http_method: str = HTTP_METHOD_GET,
    ) -> list[ValidationIssue]:
        if body is None or not body.strip():
            return [
                error(
                    http_method,
                    endpoint_path,
                    "Response body is empty",
                    "Valid JSON object/array",
                    "Empty response",
                )
            ]

        try:
            root = parse_json_body(body)
        except RecursionError:
            return [self._parse_error(http_method, endpoint_path, "nesting depth exceeded")]
        except ValueError as exc:
            return [self._parse_error(http_method, endpoint_path, exc)]

        return dispatch(root, schema, ValidationContext.root(endpoint_path, http_method))

    @staticmethod
    def _parse_error(http_method: str, endpoint_path: str, reason) -> ValidationIssue:
        _logger.error(
            "Failed to parse response body as JSON for endpoint %s: %s",
            endpoint_path,
            reason,
        )
        return error(
            http_method,
            endpoint_path,
            "Failed to parse response body as JSON",
            "Valid JSON",
            f"Parse error: {reason}",
        )
