"""Schema node union consumed by the structural validators.

A declared response shape is a tree of exactly four node kinds:

    PrimitiveSchema   string | integer | number | boolean
    ObjectSchema      ordered properties (or None) + required names
    ArraySchema       optional item schema
    UnknownSchema     untyped / unsupported; never produces issues

Nodes are built by ``contract_validator.openapi.schema_tree`` and are
read-only from then on.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Union

PRIMITIVE_KINDS = frozenset({"string", "integer", "number", "boolean"})


@dataclass(frozen=True)
class PrimitiveSchema:
    kind: str
    nullable: bool = False

    def __post_init__(self) -> None:
        if self.kind not in PRIMITIVE_KINDS:
            raise ValueError(f"unsupported primitive kind: {self.kind!r}")


@dataclass(frozen=True)
class ObjectSchema:
    """``properties`` is ``None`` for a free-form object or a map.

    Only a declared property set makes undeclared response fields
    reportable; ``required`` is checked either way.
    """
    properties: Mapping[str, "SchemaNode"] | None = None
    required: frozenset[str] = frozenset()
    nullable: bool = False


@dataclass(frozen=True)
class ArraySchema:
    items: "SchemaNode | None" = None
    nullable: bool = False


@dataclass(frozen=True)
class UnknownSchema:
    """Schema without usable type information."""
    reason: str = "untyped"


SchemaNode = Union[PrimitiveSchema, ObjectSchema, ArraySchema, UnknownSchema]
