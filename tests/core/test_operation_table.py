"""Operation Table — one complete entry per operation.

Tests:
    - Every Operation has an entry, and nothing else does
    - Admin flag, integer inputs, and input names match the documented contract
"""

import pytest

from counterops.core.domain_types import Operation
from counterops.core.operation_table import OPERATIONS


def test_table_covers_every_operation():
    assert set(OPERATIONS) == set(Operation)


@pytest.mark.parametrize("operation,requires_admin", [
    (Operation.HIT, False),
    (Operation.CREATE, False),
    (Operation.GET, False),
    (Operation.INFO, False),
    (Operation.SET, True),
    (Operation.UPDATE, True),
    (Operation.RESET, True),
    (Operation.DELETE, True),
])
def test_admin_requirement(operation, requires_admin):
    assert OPERATIONS[operation].requires_admin_key is requires_admin


@pytest.mark.parametrize("operation,inputs", [
    (Operation.HIT, ("namespace", "key")),
    (Operation.CREATE, ("namespace", "key", "initializer")),
    (Operation.GET, ("namespace", "key")),
    (Operation.INFO, ("namespace", "key")),
    (Operation.SET, ("namespace", "key", "value", "admin_key")),
    (Operation.UPDATE, ("namespace", "key", "value", "admin_key")),
    (Operation.RESET, ("namespace", "key", "admin_key")),
    (Operation.DELETE, ("namespace", "key", "admin_key")),
])
def test_input_names(operation, inputs):
    assert OPERATIONS[operation].inputs == inputs


def test_only_create_has_optional_integer():
    optional = [
        op for op, spec in OPERATIONS.items()
        if spec.integer_input and spec.integer_input.default is not None
    ]
    assert optional == [Operation.CREATE]
    assert OPERATIONS[Operation.CREATE].integer_input.default == 0


def test_only_create_outputs_admin_key():
    with_key = [op for op, spec in OPERATIONS.items() if "admin_key" in spec.outputs]
    assert with_key == [Operation.CREATE]
