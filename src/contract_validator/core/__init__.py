"""Validation core: response body validation and endpoint orchestration."""
