"""Immutable location value threaded through recursive validation."""

from __future__ import annotations

from dataclasses import dataclass

from contract_validator.config import HTTP_METHOD_GET, JSON_PATH_ROOT


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Where the validator currently is.

    ``field_path`` is JSON-path-like and always starts at ``$``, e.g.
    ``$.users[0].name``.  Descending never mutates a context; it returns
    a new one.
    """

    field_path: str
    endpoint_path: str
    http_method: str = HTTP_METHOD_GET

    @classmethod
    def root(cls, endpoint_path: str, http_method: str = HTTP_METHOD_GET) -> "ValidationContext":
        return cls(JSON_PATH_ROOT, endpoint_path, http_method)

    def child_field(self, name: str) -> "ValidationContext":
        return ValidationContext(f"{self.field_path}.{name}", self.endpoint_path, self.http_method)

    def child_index(self, index: int) -> "ValidationContext":
        return ValidationContext(f"{self.field_path}[{index}]", self.endpoint_path, self.http_method)
