"""Shared test helpers: a scriptable transport and contract builders."""

from __future__ import annotations

from typing import Any

from contract_validator.errors import TransportError
from contract_validator.transport.client import HttpResponse


class FakeTransport:
    """Canned responses keyed by full URL; records every request."""

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes = dict(routes or {})
        self.requested: list[str] = []

    def get(self, url: str) -> HttpResponse:
        self.requested.append(url)
        outcome = self.routes.get(url)
        if outcome is None:
            raise TransportError("Connection refused", url=url)
        if isinstance(outcome, Exception):
            raise outcome
        status, body = outcome
        return HttpResponse(status_code=status, body=body, elapsed_ms=1)


USER_SCHEMA = {
    "type": "object",
    "required": ["id", "name"],
    "properties": {
        "id": {"type": "integer"},
        "name": {"type": "string"},
    },
}


def make_doc(paths: dict[str, Any], components: dict[str, Any] | None = None) -> dict:
    doc: dict[str, Any] = {
        "openapi": "3.0.3",
        "info": {"title": "Users API", "version": "1.2.0"},
        "paths": paths,
    }
    if components:
        doc["components"] = {"schemas": components}
    return doc


def get_op(schema: dict | None) -> dict:
    """GET operation whose 200 response declares *schema* as application/json."""
    response: dict[str, Any] = {"description": "ok"}
    if schema is not None:
        response["content"] = {"application/json": {"schema": schema}}
    return {"get": {"responses": {"200": response}}}
