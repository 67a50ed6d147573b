"""Contract document loading and OpenAPI -> schema-node conversion."""

from contract_validator.openapi.document import ContractDocument, Operation, parse_contract
from contract_validator.openapi.loader import load_contract

__all__ = ["ContractDocument", "Operation", "load_contract", "parse_contract"]
