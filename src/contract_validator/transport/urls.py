"""URL helpers."""
from __future__ import annotations

import re

_TRAILING_SLASHES = re.compile(r"/+$")
_LEADING_SLASHES = re.compile(r"^/+")


def build_full_url(base_url: str, path: str) -> str:
    """Join *base_url* and *path* with exactly one ``/``.

    Examples:
      https://api.example.com/   + /users/{id} -> https://api.example.com/users/{id}
      https://api.example.com/v1 + items       -> https://api.example.com/v1/items

    Raises ``ValueError`` for an empty base URL or path.
    """
    if not base_url or not base_url.strip():
        raise ValueError("Base URL cannot be empty")
    if not path or not path.strip():
        raise ValueError("Path cannot be empty")

    base = _TRAILING_SLASHES.sub("", base_url.strip())
    rel = _LEADING_SLASHES.sub("", path.strip())
    return f"{base}/{rel}"


def path_from_url(full_url: str) -> str:
    """Strip scheme and host, for log lines."""
    return re.sub(r"^https?://[^/]+", "", full_url)
