"""
Runtime settings and fixed validation constants.
Environment variables (``CONTRACT_VALIDATOR_<FIELD>``) override defaults.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from contract_validator import __version__
from contract_validator.errors import ConfigurationError

# HTTP
HTTP_METHOD_GET = "GET"
CONTENT_TYPE_JSON = "application/json"
STATUS_200 = "200"
STATUS_200_TEXT = "200 OK"

# JSON paths
JSON_PATH_ROOT = "$"

ENV_PREFIX = "CONTRACT_VALIDATOR_"


@dataclass
class Settings:
    """Validator configuration"""

    # Transport timeouts (seconds)
    CONNECT_TIMEOUT: float = 10.0
    READ_TIMEOUT: float = 30.0
    USER_AGENT: str = f"api-contract-validator/{__version__}"

    # Logging
    LOG_LEVEL: str = "INFO"

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(ENV_PREFIX + key)
            if env_value is None:
                continue
            field_type = self.__dataclass_fields__[key].type
            if field_type in (float, "float"):
                try:
                    setattr(self, key, float(env_value))
                except ValueError:
                    raise ConfigurationError(
                        f"{ENV_PREFIX}{key} must be a number, got {env_value!r}"
                    ) from None
            else:
                setattr(self, key, env_value)

    @property
    def timeout(self) -> tuple[float, float]:
        """``(connect, read)`` pair in the form ``requests`` expects."""
        return (self.CONNECT_TIMEOUT, self.READ_TIMEOUT)
