"""Raw OpenAPI / JSON Schema mapping -> SchemaNode tree.

Key responsibilities:
- $ref resolution within #/components/schemas/* (cycle-safe)
- Type normalization, including the OpenAPI 3.1 ``["string", "null"]`` form
- Reduction of everything the validators cannot check to ``UnknownSchema``
"""
from __future__ import annotations

import re
from typing import Any, Dict, Mapping

from contract_validator.schema.nodes import (
    PRIMITIVE_KINDS,
    ArraySchema,
    ObjectSchema,
    PrimitiveSchema,
    SchemaNode,
    UnknownSchema,
)

_REF_RE = re.compile(r"^#/components/schemas/(?P<name>[^/]+)$")

_COMPOSITION_KEYS = ("oneOf", "anyOf", "allOf")


def _is_ref(obj: Any) -> bool:
    return isinstance(obj, dict) and "$ref" in obj and isinstance(obj["$ref"], str)


def _ref_name(ref: str) -> str | None:
    m = _REF_RE.match(ref)
    if not m:
        return None
    return m.group("name")


def _is_map(node: Mapping[str, Any]) -> bool:
    """``additionalProperties`` given as a schema or ``true`` makes a map."""
    extra = node.get("additionalProperties")
    return extra is True or isinstance(extra, dict)


def _normalize_type(node: Mapping[str, Any]) -> tuple[str | None, bool]:
    """Return ``(type, nullable)`` for a schema mapping.

    A list-valued ``type`` is accepted when it names one concrete type,
    optionally alongside ``"null"``.
    """
    nullable = node.get("nullable") is True
    t = node.get("type")
    if isinstance(t, str):
        if t == "null":
            return None, True
        return t, nullable
    if isinstance(t, list):
        names = [x for x in t if isinstance(x, str)]
        if "null" in names:
            nullable = True
        concrete = [x for x in names if x != "null"]
        if len(concrete) == 1:
            return concrete[0], nullable
    return None, nullable


def build_schema_node(
    schema: Any,
    *,
    components_schemas: Mapping[str, Any] | None = None,
) -> SchemaNode:
    """Convert a raw schema into a ``SchemaNode``.

    - Resolves $ref within #/components/schemas/*
    - Cycle-safe: a reference already being expanded on the current
      branch becomes ``UnknownSchema("cycle:<name>")``
    - Composition keywords and missing type information yield
      ``UnknownSchema``
    """
    comps = dict(components_schemas or {})
    visiting: set[str] = set()

    def node_for(raw: Any) -> SchemaNode:
        if not isinstance(raw, dict):
            return UnknownSchema(f"non-mapping schema: {type(raw).__name__}")

        if _is_ref(raw):
            ref = raw["$ref"]
            name = _ref_name(ref)
            if name is None:
                return UnknownSchema(f"unsupported ref: {ref}")
            if name in visiting:
                return UnknownSchema(f"cycle:{name}")
            target = comps.get(name)
            if target is None:
                return UnknownSchema(f"missing component: {name}")
            visiting.add(name)
            try:
                return node_for(target)
            finally:
                visiting.remove(name)

        if any(k in raw for k in _COMPOSITION_KEYS):
            return UnknownSchema("composition")

        kind, nullable = _normalize_type(raw)
        if kind is None:
            return UnknownSchema("untyped")

        if kind in PRIMITIVE_KINDS:
            return PrimitiveSchema(kind=kind, nullable=nullable)

        if kind == "object":
            props = raw.get("properties")
            # free-form object or map: no closed field set to check against
            properties: Dict[str, SchemaNode] | None = None
            if isinstance(props, dict) and not _is_map(raw):
                properties = {str(name): node_for(prop) for name, prop in props.items()}
            req = raw.get("required")
            required = frozenset(
                x for x in (req if isinstance(req, list) else []) if isinstance(x, str)
            )
            return ObjectSchema(properties=properties, required=required, nullable=nullable)

        if kind == "array":
            items = raw.get("items")
            return ArraySchema(
                items=node_for(items) if items is not None else None,
                nullable=nullable,
            )

        return UnknownSchema(f"unsupported type: {kind}")

    return node_for(schema)
