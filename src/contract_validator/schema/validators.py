"""Structural validators: compare a parsed JSON value against a schema node.

Three validators cover the three checkable node kinds.  Each exposes
``supports(schema)`` and ``validate(value, schema, context)``; ``dispatch``
matches the node kind and hands off to the right one.  ``UnknownSchema``
is an explicit case: untyped schemas are permitted by the contract
format and yield no issues.

Validation is a pure recursive descent that follows the parsed value,
so it always terminates.
"""
from __future__ import annotations

import logging
from typing import Any, Protocol

from contract_validator.model.issue import ValidationIssue, error, warning
from contract_validator.schema.context import ValidationContext
from contract_validator.schema.nodes import (
    ArraySchema,
    ObjectSchema,
    PrimitiveSchema,
    SchemaNode,
    UnknownSchema,
)

_logger = logging.getLogger(__name__)


def json_kind(value: Any) -> str:
    """Name of the JSON kind of a value produced by ``json.loads``."""
    if value is None:
        return "null"
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def _structural_error(
    context: ValidationContext,
    description: str,
    expected: str,
    actual: str,
) -> ValidationIssue:
    return error(
        context.http_method,
        context.endpoint_path,
        f"{description} at {context.field_path}",
        expected,
        actual,
    )


class SchemaValidator(Protocol):
    """Every validator handles exactly one schema node kind."""

    def supports(self, schema: SchemaNode) -> bool:
        ...

    def validate(
        self, value: Any, schema: SchemaNode, context: ValidationContext
    ) -> list[ValidationIssue]:
        ...


# ── primitive ───────────────────────────────────────────────────────

_KIND_CHECKS = {
    "string": lambda v: isinstance(v, str),
    "integer": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "number": lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
    "boolean": lambda v: isinstance(v, bool),
}


class PrimitiveValidator:
    """Validates ``string``, ``integer``, ``number`` and ``boolean`` fields."""

    def supports(self, schema: SchemaNode) -> bool:
        return isinstance(schema, PrimitiveSchema)

    def validate(
        self, value: Any, schema: PrimitiveSchema, context: ValidationContext
    ) -> list[ValidationIssue]:
        if value is None:
            if schema.nullable:
                return []
            return [
                _structural_error(
                    context,
                    "Field is null but not marked as nullable",
                    "Non-null value",
                    "null",
                )
            ]

        if _KIND_CHECKS[schema.kind](value):
            return []
        return [
            _structural_error(
                context,
                "Type mismatch",
                f"Expected type: {schema.kind}",
                f"Actual type: {json_kind(value)}",
            )
        ]


# ── object ──────────────────────────────────────────────────────────


class ObjectValidator:
    """Validates JSON objects: required names, declared fields, extra fields.

    Free-form objects and maps (``properties is None``) only get the
    required-name check.
    """

    def supports(self, schema: SchemaNode) -> bool:
        return isinstance(schema, ObjectSchema)

    def validate(
        self, value: Any, schema: ObjectSchema, context: ValidationContext
    ) -> list[ValidationIssue]:
        if value is None and schema.nullable:
            return []
        if not isinstance(value, dict):
            return [
                _structural_error(
                    context, "Expected object", "JSON object", f"Type: {json_kind(value)}"
                )
            ]

        issues: list[ValidationIssue] = []

        for name in sorted(schema.required):
            if name not in value:
                issues.append(
                    _structural_error(
                        context,
                        f"Missing required field: {name}",
                        f"Field '{name}' must be present",
                        "Field is missing",
                    )
                )

        if schema.properties is None:
            return issues

        for name, field_schema in schema.properties.items():
            if name in value:
                issues.extend(dispatch(value[name], field_schema, context.child_field(name)))

        for name in value:
            if name not in schema.properties:
                issues.append(
                    warning(
                        context.http_method,
                        context.endpoint_path,
                        f"Unexpected field in response: {context.field_path}.{name}",
                        "Only documented fields",
                        "Field not in specification",
                    )
                )

        return issues


# ── array ───────────────────────────────────────────────────────────


class ArrayValidator:
    """Validates JSON arrays and, when declared, every element."""

    def supports(self, schema: SchemaNode) -> bool:
        return isinstance(schema, ArraySchema)

    def validate(
        self, value: Any, schema: ArraySchema, context: ValidationContext
    ) -> list[ValidationIssue]:
        if value is None and schema.nullable:
            return []
        if not isinstance(value, list):
            return [
                _structural_error(
                    context, "Expected array", "JSON array", f"Type: {json_kind(value)}"
                )
            ]

        if schema.items is None:
            return []

        issues: list[ValidationIssue] = []
        for index, item in enumerate(value):
            issues.extend(dispatch(item, schema.items, context.child_index(index)))
        return issues


# ── dispatch ────────────────────────────────────────────────────────

PRIMITIVE_VALIDATOR = PrimitiveValidator()
OBJECT_VALIDATOR = ObjectValidator()
ARRAY_VALIDATOR = ArrayValidator()

VALIDATORS: tuple[SchemaValidator, ...] = (
    PRIMITIVE_VALIDATOR,
    OBJECT_VALIDATOR,
    ARRAY_VALIDATOR,
)


def dispatch(
    value: Any, schema: SchemaNode, context: ValidationContext
) -> list[ValidationIssue]:
    """Validate *value* against *schema* with the validator for its node kind.

    Raises ``TypeError`` if *schema* is not one of the four node kinds.
    """
    if isinstance(schema, UnknownSchema):
        _logger.debug(
            "Schema type not specified for %s (%s); skipped",
            context.field_path,
            schema.reason,
        )
        return []
    for validator in VALIDATORS:
        if validator.supports(schema):
            return validator.validate(value, schema, context)
    raise TypeError(f"not a schema node: {type(schema).__name__}")
