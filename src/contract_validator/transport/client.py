"""Blocking HTTP transport used by the orchestrator.

The orchestrator only needs ``get(url) -> HttpResponse`` and a
distinguishable ``TransportError`` for requests that never produced a
response.  ``HttpTransport`` provides that on top of ``requests``; tests
inject any object with the same ``get`` method.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Protocol

import requests

from contract_validator.config import CONTENT_TYPE_JSON, Settings
from contract_validator.errors import TransportError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: str
    elapsed_ms: int = 0


class Transport(Protocol):
    """Anything that can perform a blocking GET."""

    def get(self, url: str) -> HttpResponse:
        """Return the response for any status; raise ``TransportError`` on failure."""
        ...


class HttpTransport:
    """``requests.Session`` backed transport with connect/read timeouts.

    Non-2xx responses are returned, never raised; only connection-level
    failures become ``TransportError``.  No retries.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.session = session or requests.Session()
        self.session.headers.update(
            {"User-Agent": self.settings.USER_AGENT, "Accept": CONTENT_TYPE_JSON}
        )
        _logger.info(
            "HTTP transport configured: connect=%.1fs, read=%.1fs",
            self.settings.CONNECT_TIMEOUT,
            self.settings.READ_TIMEOUT,
        )

    def get(self, url: str) -> HttpResponse:
        start = time.perf_counter()
        try:
            resp = self.session.get(url, timeout=self.settings.timeout, allow_redirects=True)
        except requests.RequestException as exc:
            raise TransportError(str(exc) or type(exc).__name__, url=url) from exc
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        return HttpResponse(status_code=resp.status_code, body=resp.text, elapsed_ms=elapsed_ms)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
