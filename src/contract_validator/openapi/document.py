"""In-memory view of a contract document: paths, operations, response schemas."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Tuple

from contract_validator.config import CONTENT_TYPE_JSON, HTTP_METHOD_GET, STATUS_200
from contract_validator.openapi.schema_tree import build_schema_node
from contract_validator.schema.nodes import SchemaNode

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


@dataclass(frozen=True)
class Operation:
    """One declared ``METHOD path`` pair.

    ``responses`` maps status code -> media type -> schema (``None`` when a
    media type is declared without a schema).
    """
    method: str
    path: str
    operation_id: str | None = None
    responses: Mapping[str, Mapping[str, SchemaNode | None]] = field(default_factory=dict)

    def success_schema(
        self,
        status: str = STATUS_200,
        media_type: str = CONTENT_TYPE_JSON,
    ) -> SchemaNode | None:
        return self.responses.get(status, {}).get(media_type)


@dataclass(frozen=True)
class ContractDocument:
    """Parsed contract: ordered path -> method -> ``Operation``."""
    title: str
    version: str
    paths: Mapping[str, Mapping[str, Operation]]

    @property
    def total_paths(self) -> int:
        return len(self.paths)

    def operations(self, method: str | None = None) -> Iterator[Operation]:
        """Yield operations in declared path order, optionally for one method."""
        for ops in self.paths.values():
            for op in ops.values():
                if method is None or op.method == method.upper():
                    yield op

    def read_operations(self) -> List[Tuple[str, Operation]]:
        """``(path, operation)`` for every declared GET, in path order."""
        return [(op.path, op) for op in self.operations(HTTP_METHOD_GET)]


def _extract_responses(
    op_obj: Mapping[str, Any],
    *,
    components_schemas: Mapping[str, Any],
) -> Dict[str, Dict[str, SchemaNode | None]]:
    responses = op_obj.get("responses")
    out: Dict[str, Dict[str, SchemaNode | None]] = {}
    if not isinstance(responses, dict):
        return out

    for status, robj in responses.items():
        if not isinstance(robj, dict):
            continue
        contents: Dict[str, SchemaNode | None] = {}
        content = robj.get("content")
        if isinstance(content, dict):
            for ctype, cobj in content.items():
                if not isinstance(cobj, dict):
                    continue
                sch = cobj.get("schema")
                contents[str(ctype)] = (
                    build_schema_node(sch, components_schemas=components_schemas)
                    if sch is not None
                    else None
                )
        out[str(status)] = contents
    return out


def parse_contract(doc: Mapping[str, Any]) -> ContractDocument:
    """Build a ``ContractDocument`` from an already-decoded OpenAPI mapping.

    Path order follows the document; methods inside a path item follow
    ``HTTP_METHODS`` order.  Non-mapping entries are skipped.
    """
    components = doc.get("components") if isinstance(doc.get("components"), dict) else {}
    components_schemas = (
        components.get("schemas") if isinstance(components.get("schemas"), dict) else {}
    )

    info = doc.get("info") if isinstance(doc.get("info"), dict) else {}
    title = str(info.get("title", ""))
    version = str(info.get("version", ""))

    paths: Dict[str, Dict[str, Operation]] = {}
    raw_paths = doc.get("paths")
    if isinstance(raw_paths, dict):
        for source_path, path_item in raw_paths.items():
            if not isinstance(source_path, str) or not isinstance(path_item, dict):
                continue
            ops: Dict[str, Operation] = {}
            for method in HTTP_METHODS:
                op_obj = path_item.get(method)
                if not isinstance(op_obj, dict):
                    continue
                op_id = op_obj.get("operationId")
                ops[method.upper()] = Operation(
                    method=method.upper(),
                    path=source_path,
                    operation_id=op_id if isinstance(op_id, str) else None,
                    responses=_extract_responses(
                        op_obj, components_schemas=components_schemas
                    ),
                )
            paths[source_path] = ops

    return ContractDocument(title=title, version=version, paths=paths)
