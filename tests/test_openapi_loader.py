"""Contract loading: file decoding, structural checks, operation listing."""

from __future__ import annotations

import json
import textwrap

import pytest

from contract_validator.errors import ContractLoadError
from contract_validator.openapi.document import parse_contract
from contract_validator.openapi.loader import load_contract
from contract_validator.schema.nodes import ArraySchema, ObjectSchema

from support import USER_SCHEMA, get_op, make_doc

YAML_CONTRACT = textwrap.dedent("""\
    openapi: 3.0.3
    info:
      title: Users API
      version: 1.2.0
    paths:
      /users/{id}:
        get:
          operationId: getUser
          responses:
            200:
              description: ok
              content:
                application/json:
                  schema:
                    $ref: '#/components/schemas/User'
            404:
              description: missing
        delete:
          responses:
            '204':
              description: deleted
      /users:
        get:
          responses:
            '200':
              description: ok
              content:
                application/json:
                  schema:
                    type: array
                    items:
                      $ref: '#/components/schemas/User'
    components:
      schemas:
        User:
          type: object
          required: [id]
          properties:
            id: {type: integer}
""")


def _write(tmp_path, name: str, text: str):
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


def test_load_yaml(tmp_path) -> None:
    contract = load_contract(_write(tmp_path, "openapi.yaml", YAML_CONTRACT))
    assert contract.title == "Users API"
    assert contract.version == "1.2.0"
    assert contract.total_paths == 2
    assert list(contract.paths) == ["/users/{id}", "/users"]


def test_integer_status_keys_are_normalised(tmp_path) -> None:
    contract = load_contract(_write(tmp_path, "openapi.yaml", YAML_CONTRACT))
    op = contract.paths["/users/{id}"]["GET"]
    assert op.operation_id == "getUser"
    assert set(op.responses) == {"200", "404"}
    assert isinstance(op.success_schema(), ObjectSchema)
    assert op.success_schema("404") is None


def test_read_operations_lists_gets_in_order(tmp_path) -> None:
    contract = load_contract(_write(tmp_path, "openapi.yaml", YAML_CONTRACT))
    ops = contract.read_operations()
    assert [p for p, _ in ops] == ["/users/{id}", "/users"]
    assert isinstance(ops[1][1].success_schema(), ArraySchema)
    assert [op.method for op in contract.operations()] == ["GET", "DELETE", "GET"]


def test_load_json(tmp_path) -> None:
    doc = make_doc({"/users": get_op(USER_SCHEMA)})
    contract = load_contract(_write(tmp_path, "openapi.json", json.dumps(doc)))
    assert contract.total_paths == 1


def test_missing_file(tmp_path) -> None:
    with pytest.raises(ContractLoadError, match="not found"):
        load_contract(tmp_path / "nope.yaml")


def test_malformed_yaml(tmp_path) -> None:
    with pytest.raises(ContractLoadError, match="parsing error"):
        load_contract(_write(tmp_path, "bad.yaml", "openapi: [3.0\npaths: {"))


def test_top_level_not_a_mapping(tmp_path) -> None:
    with pytest.raises(ContractLoadError, match="mapping"):
        load_contract(_write(tmp_path, "list.yaml", "- a\n- b\n"))


def test_missing_version_key(tmp_path) -> None:
    with pytest.raises(ContractLoadError, match="not an OpenAPI document"):
        load_contract(_write(tmp_path, "x.yaml", "paths: {}\n"))


def test_paths_must_be_mapping(tmp_path) -> None:
    with pytest.raises(ContractLoadError, match="'paths'"):
        load_contract(_write(tmp_path, "x.yaml", "openapi: 3.0.3\npaths: []\n"))


def test_swagger_key_accepted(tmp_path) -> None:
    contract = load_contract(_write(tmp_path, "x.yaml", "swagger: '2.0'\npaths: {}\n"))
    assert contract.total_paths == 0


def test_parse_skips_non_mapping_entries() -> None:
    contract = parse_contract(
        {
            "openapi": "3.1.0",
            "paths": {
                "/a": "nonsense",
                "/b": {"get": "nonsense", "parameters": []},
            },
        }
    )
    assert list(contract.paths) == ["/b"]
    assert contract.paths["/b"] == {}
    assert contract.title == ""


def test_media_type_without_schema() -> None:
    contract = parse_contract(
        make_doc(
            {"/x": {"get": {"responses": {"200": {"content": {"application/json": {}}}}}}}
        )
    )
    op = contract.paths["/x"]["GET"]
    assert op.responses == {"200": {"application/json": None}}
    assert op.success_schema() is None
