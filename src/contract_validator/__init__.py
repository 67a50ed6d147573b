"""contract_validator: checks a live HTTP API against its OpenAPI contract."""

__all__ = [
    "__version__",
    "validate_contract",
    "EndpointOrchestrator",
    "ResponseValidator",
    "Severity",
    "ValidationIssue",
    "ValidationResult",
]
__version__ = "1.0.0"

# Programmatic entrypoint (library use).
from contract_validator.api import validate_contract  # noqa: E402, F401
from contract_validator.core.orchestrator import EndpointOrchestrator  # noqa: E402, F401
from contract_validator.core.response_validator import ResponseValidator  # noqa: E402, F401
from contract_validator.model import Severity  # noqa: E402, F401
from contract_validator.model.issue import ValidationIssue  # noqa: E402, F401
from contract_validator.model.result import ValidationResult  # noqa: E402, F401
