from __future__ import annotations

import pytest

from contract_validator.openapi.document import parse_contract
from contract_validator.schema.context import ValidationContext

from support import USER_SCHEMA, get_op, make_doc


@pytest.fixture
def root_context() -> ValidationContext:
    return ValidationContext.root("/users")


@pytest.fixture
def users_contract():
    return parse_contract(
        make_doc(
            {
                "/users/{id}": get_op(USER_SCHEMA),
                "/users": get_op({"type": "array", "items": USER_SCHEMA}),
            }
        )
    )
