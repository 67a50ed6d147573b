"""Schema node union, validation context and structural validators."""

from contract_validator.schema.context import ValidationContext
from contract_validator.schema.nodes import (
    ArraySchema,
    ObjectSchema,
    PrimitiveSchema,
    SchemaNode,
    UnknownSchema,
)
from contract_validator.schema.validators import dispatch

__all__ = [
    "ArraySchema",
    "ObjectSchema",
    "PrimitiveSchema",
    "SchemaNode",
    "UnknownSchema",
    "ValidationContext",
    "dispatch",
]
