"""HTTP transport and URL helpers."""

from contract_validator.transport.client import HttpResponse, HttpTransport, Transport
from contract_validator.transport.urls import build_full_url

__all__ = ["HttpResponse", "HttpTransport", "Transport", "build_full_url"]
