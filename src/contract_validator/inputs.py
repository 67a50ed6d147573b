"""Operator input checks, run before any endpoint is attempted."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from contract_validator.errors import ConfigurationError

_logger = logging.getLogger(__name__)

_SCHEMES = ("http://", "https://")


def validate_spec_file(spec_path: str | Path | None) -> Path:
    """Check that the contract file exists and is a readable file."""
    if spec_path is None or not str(spec_path).strip():
        raise ConfigurationError("Specification file path cannot be empty")

    path = Path(spec_path)
    if not path.exists():
        raise ConfigurationError(f"Specification file not found: {spec_path}")
    if not path.is_file():
        raise ConfigurationError(f"Spec path is not a file: {spec_path}")
    if not os.access(path, os.R_OK):
        raise ConfigurationError(f"Cannot read specification file: {spec_path}")

    _logger.debug("Spec file validated: %s", path)
    return path


def validate_base_url(base_url: str | None) -> str:
    """Check the base URL and return it trimmed, without trailing slashes."""
    if base_url is None or not base_url.strip():
        raise ConfigurationError("Base URL cannot be empty")

    url = base_url.strip()
    scheme = next((s for s in _SCHEMES if url.startswith(s)), None)
    if scheme is None:
        raise ConfigurationError("Base URL must start with http:// or https://")

    url = url.rstrip("/")
    if len(url) <= len(scheme):
        raise ConfigurationError(f"Base URL is too short: {url}")

    _logger.debug("Base URL validated: %s", url)
    return url
