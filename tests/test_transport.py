"""HttpTransport over a stubbed requests.Session."""

from __future__ import annotations

import pytest
import requests

from contract_validator.config import Settings
from contract_validator.errors import TransportError
from contract_validator.transport.client import HttpResponse, HttpTransport


class _Resp:
    def __init__(self, status_code: int, text: str) -> None:
        self.status_code = status_code
        self.text = text


@pytest.fixture
def settings() -> Settings:
    return Settings(CONNECT_TIMEOUT=1.0, READ_TIMEOUT=2.0)


def test_returns_any_status_without_raising(monkeypatch, settings) -> None:
    calls = []

    def fake_get(self, url, **kwargs):
        calls.append((url, kwargs))
        return _Resp(503, "down")

    monkeypatch.setattr(requests.Session, "get", fake_get)
    with HttpTransport(settings) as t:
        resp = t.get("http://h/x")

    assert isinstance(resp, HttpResponse)
    assert (resp.status_code, resp.body) == (503, "down")
    assert resp.elapsed_ms >= 0
    url, kwargs = calls[0]
    assert url == "http://h/x"
    assert kwargs["timeout"] == (1.0, 2.0)
    assert kwargs["allow_redirects"] is True


@pytest.mark.parametrize(
    "exc",
    [
        requests.ConnectionError("Connection refused"),
        requests.Timeout("read timed out"),
        requests.exceptions.InvalidURL("bad"),
    ],
)
def test_request_failures_become_transport_error(monkeypatch, settings, exc) -> None:
    def fake_get(self, url, **kwargs):
        raise exc

    monkeypatch.setattr(requests.Session, "get", fake_get)
    t = HttpTransport(settings)
    with pytest.raises(TransportError) as info:
        t.get("http://h/x")
    assert info.value.url == "http://h/x"
    assert info.value.__cause__ is exc
    t.close()


def test_default_headers(settings) -> None:
    t = HttpTransport(settings)
    assert t.session.headers["Accept"] == "application/json"
    assert t.session.headers["User-Agent"] == settings.USER_AGENT
    t.close()
