"""Load a contract document (YAML or JSON) from disk.

Usage::

    from contract_validator.openapi.loader import load_contract

    contract = load_contract(Path("openapi.yaml"))
    for path, op in contract.read_operations():
        ...
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from contract_validator.errors import ContractLoadError
from contract_validator.openapi.document import ContractDocument, parse_contract

_logger = logging.getLogger(__name__)


def read_document(path: Path) -> dict[str, Any]:
    """Decode *path* into a mapping.

    YAML is a superset of JSON, so one ``yaml.safe_load`` covers both.
    """
    if not path.exists():
        raise ContractLoadError(f"Specification file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ContractLoadError(f"Cannot read specification file {path}: {exc}") from exc

    _logger.debug("File size: %d bytes", len(text.encode("utf-8")))
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ContractLoadError(f"OpenAPI parsing error in {path}:\n{exc}") from exc

    if not isinstance(doc, dict):
        raise ContractLoadError(
            f"OpenAPI parsing error in {path}: top level must be a mapping, "
            f"got {type(doc).__name__}"
        )
    return doc


def load_contract(path: Path | str) -> ContractDocument:
    """Read and parse an OpenAPI document.

    Raises ``ContractLoadError`` if the file is missing, unreadable,
    malformed, lacks an ``openapi``/``swagger`` version key, or has no
    ``paths`` mapping.
    """
    path = Path(path)
    _logger.info("Reading specification: %s", path)
    doc = read_document(path)

    if "openapi" not in doc and "swagger" not in doc:
        raise ContractLoadError(
            f"{path}: not an OpenAPI document (missing 'openapi' version key)"
        )
    if not isinstance(doc.get("paths"), dict):
        raise ContractLoadError(f"{path}: 'paths' must be a mapping")

    contract = parse_contract(doc)
    _logger.info("Specification loaded: %s v%s", contract.title, contract.version)
    _logger.info("Endpoints found: %d", contract.total_paths)
    return contract
