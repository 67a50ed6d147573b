"""EndpointOrchestrator against a scripted transport."""

from __future__ import annotations

import json

from contract_validator.core.orchestrator import EndpointOrchestrator
from contract_validator.errors import TransportError
from contract_validator.model import Severity
from contract_validator.openapi.document import parse_contract

from support import USER_SCHEMA, FakeTransport, get_op, make_doc

BASE = "https://api.example.com"


def _run(contract, routes, base_url: str = BASE):
    transport = FakeTransport(routes)
    result = EndpointOrchestrator(transport).validate(contract, base_url)
    return result, transport


def test_all_endpoints_conform(users_contract) -> None:
    result, _ = _run(
        users_contract,
        {
            f"{BASE}/users/{{id}}": (200, json.dumps({"id": 1, "name": "Ann"})),
            f"{BASE}/users": (200, json.dumps([{"id": 1, "name": "Ann"}])),
        },
    )
    assert result.issues == []
    assert not result.has_errors()
    assert result.total_endpoints == 2
    assert result.is_finished
    assert result.status == "PASSED"


def test_paths_requested_in_declared_order(users_contract) -> None:
    _, transport = _run(users_contract, {})
    assert transport.requested == [f"{BASE}/users/{{id}}", f"{BASE}/users"]


def test_base_url_trailing_slash_is_joined_once(users_contract) -> None:
    _, transport = _run(users_contract, {}, base_url=f"{BASE}/")
    assert transport.requested[0] == f"{BASE}/users/{{id}}"


def test_type_mismatch_in_body(users_contract) -> None:
    result, _ = _run(
        users_contract,
        {
            f"{BASE}/users/{{id}}": (200, '{"id": "1", "name": "Ann"}'),
            f"{BASE}/users": (200, "[]"),
        },
    )
    assert len(result.issues) == 1
    issue = result.issues[0]
    assert issue.severity is Severity.ERROR
    assert issue.method == "GET"
    assert issue.path == "/users/{id}"
    assert issue.description == "Type mismatch at $.id"


def test_non_200_status_skips_body_check(users_contract) -> None:
    result, _ = _run(
        users_contract,
        {
            f"{BASE}/users/{{id}}": (404, "not json at all"),
            f"{BASE}/users": (200, "[]"),
        },
    )
    assert len(result.issues) == 1
    issue = result.issues[0]
    assert issue.description == "Unexpected HTTP status"
    assert issue.expected == "200 OK"
    assert issue.actual == "404"


def test_transport_failure_does_not_stop_the_run(users_contract) -> None:
    result, transport = _run(
        users_contract,
        {
            f"{BASE}/users/{{id}}": TransportError("timed out"),
            f"{BASE}/users": (200, '[{"id": 1}]'),
        },
    )
    assert len(transport.requested) == 2
    first, second = result.issues
    assert first.path == "/users/{id}"
    assert first.description == "Endpoint unreachable or request failed"
    assert first.expected == "Successful response (200 OK)"
    assert first.actual == "Connection error: timed out"
    assert second.path == "/users"
    assert second.description == "Missing required field: name at $[0]"


def test_unreachable_host_gives_one_error_per_endpoint(users_contract) -> None:
    result, _ = _run(users_contract, {})
    assert result.error_count == 2
    assert all(i.description == "Endpoint unreachable or request failed" for i in result.issues)


def test_path_without_get_is_counted_but_not_requested() -> None:
    contract = parse_contract(
        make_doc(
            {
                "/health": {"post": {"responses": {"204": {"description": "ok"}}}},
                "/users": get_op(USER_SCHEMA),
            }
        )
    )
    result, transport = _run(
        contract, {f"{BASE}/users": (200, '{"id": 1, "name": "a"}')}
    )
    assert result.total_endpoints == 2
    assert transport.requested == [f"{BASE}/users"]
    assert result.issues == []


def test_get_without_json_schema_records_nothing() -> None:
    contract = parse_contract(make_doc({"/ping": get_op(None)}))
    result, _ = _run(contract, {f"{BASE}/ping": (200, "pong")})
    assert result.issues == []


def test_unknown_root_schema_accepts_any_json() -> None:
    contract = parse_contract(
        make_doc({"/anything": get_op({"oneOf": [{"type": "string"}, {"type": "integer"}]})})
    )
    result, _ = _run(contract, {f"{BASE}/anything": (200, '{"free": ["form"]}')})
    assert result.issues == []


def test_unknown_root_schema_still_requires_a_json_body() -> None:
    contract = parse_contract(make_doc({"/anything": get_op({})}))
    result, _ = _run(contract, {f"{BASE}/anything": (200, "")})
    assert [i.description for i in result.issues] == ["Response body is empty"]


def test_extra_field_is_only_a_warning(users_contract) -> None:
    result, _ = _run(
        users_contract,
        {
            f"{BASE}/users/{{id}}": (200, '{"id": 1, "name": "Ann", "email": "a@b.c"}'),
            f"{BASE}/users": (200, "[]"),
        },
    )
    assert not result.has_errors()
    assert result.warning_count == 1
    assert result.status == "WARNINGS"


def test_ref_schema_resolved_through_components() -> None:
    contract = parse_contract(
        make_doc(
            {"/users/{id}": get_op({"$ref": "#/components/schemas/User"})},
            components={"User": USER_SCHEMA},
        )
    )
    result, _ = _run(contract, {f"{BASE}/users/{{id}}": (200, '{"id": 1}')})
    assert [i.description for i in result.issues] == ["Missing required field: name at $"]


def test_empty_contract_finishes_with_no_issues() -> None:
    contract = parse_contract(make_doc({}))
    result, transport = _run(contract, {})
    assert transport.requested == []
    assert result.total_endpoints == 0
    assert result.is_finished
    assert result.total_issues == 0


def test_deeply_nested_body_does_not_stop_the_run() -> None:
    contract = parse_contract(
        make_doc(
            {
                "/a": get_op({"type": "array"}),
                "/b": get_op({"type": "array"}),
            }
        )
    )
    result, transport = _run(
        contract,
        {
            f"{BASE}/a": (200, "[" * 100_000 + "]" * 100_000),
            f"{BASE}/b": (200, "[]"),
        },
    )
    assert transport.requested == [f"{BASE}/a", f"{BASE}/b"]
    assert [(i.path, i.description) for i in result.issues] == [
        ("/a", "Failed to parse response body as JSON"),
    ]
    assert result.is_finished


def test_only_get_operations_are_walked_in_path_order() -> None:
    contract = parse_contract(
        make_doc(
            {
                "/c": {**get_op(None), "delete": {"responses": {}}},
                "/write-only": {"put": {"responses": {}}},
                "/a": get_op(None),
            }
        )
    )
    result, transport = _run(contract, {f"{BASE}/c": (200, ""), f"{BASE}/a": (200, "")})
    assert transport.requested == [f"{BASE}/c", f"{BASE}/a"]
    assert result.total_endpoints == 3
    assert result.issues == []
