"""Input Validation — parses loosely-typed string inputs into a typed OperationRequest.

Invariants:
    - Pure and synchronous: never contacts the counter service
    - Check order: operation name, identity, admin key, integer field
    - Empty string is treated as missing (host environments send "" for unset inputs)
    - Inputs not used by the operation are ignored

Design Decisions:
    - Regex over bare int(): int() accepts "1_000" and unicode digits,
      the counter service only understands plain base-10
    - Request construction driven by OPERATIONS: no per-operation branching here
"""

import re
from collections.abc import Mapping

from counterops.core.domain_types import AdminKey, CounterIdentity, Operation
from counterops.core.errors import (
    ErrorContext,
    InvalidIntegerError,
    MissingAdminKeyError,
    MissingIdentityError,
    UnknownOperationError,
)
from counterops.core.operation_requests import OperationRequest
from counterops.core.operation_table import (
    ADMIN_KEY_FIELD, IDENTITY_FIELDS, IntegerInput, get_operation_spec,
)

_INTEGER = re.compile(r"^[+-]?[0-9]+$")


def parse_operation(raw: str | None) -> Operation:
    """Exact, case-sensitive match against the operation names."""
    try:
        return Operation(raw)
    except ValueError:
        raise UnknownOperationError(str(raw)) from None


def parse_integer(field: str, raw: str | None) -> int:
    """Parse a base-10 signed integer. Raises InvalidIntegerError."""
    if raw is None or not raw.strip():
        raise InvalidIntegerError(field)
    text = raw.strip()
    if not _INTEGER.match(text):
        raise InvalidIntegerError(field, raw)
    try:
        return int(text)
    except ValueError:
        # Beyond the interpreter's digit limit for str -> int conversion
        raise InvalidIntegerError(field, raw) from None


def validate_inputs(
    operation: str, raw_inputs: Mapping[str, str | None],
) -> OperationRequest:
    """Validate raw inputs for `operation` and build its request variant."""
    op = parse_operation(operation)
    spec = get_operation_spec(op)

    namespace, key = (raw_inputs.get(name) or "" for name in IDENTITY_FIELDS)
    context = ErrorContext(operation=op.value, namespace=namespace or None, counter_key=key or None)
    for name, value in zip(IDENTITY_FIELDS, (namespace, key)):
        if not value:
            raise MissingIdentityError(name, context)

    fields: dict[str, object] = {"identity": CounterIdentity(namespace, key)}

    if spec.requires_admin_key:
        admin_key = raw_inputs.get(ADMIN_KEY_FIELD) or ""
        if not admin_key:
            raise MissingAdminKeyError(op.value, context)
        fields["admin_key"] = AdminKey(admin_key)

    if spec.integer_input:
        fields[spec.integer_input.attribute] = _read_integer(
            spec.integer_input, raw_inputs, context,
        )

    return spec.request_type(**fields)


def _read_integer(
    integer_input: IntegerInput,
    raw_inputs: Mapping[str, str | None],
    context: ErrorContext,
) -> int:
    raw = raw_inputs.get(integer_input.field)
    if integer_input.default is not None and (raw is None or not raw.strip()):
        return integer_input.default
    try:
        return parse_integer(integer_input.field, raw)
    except InvalidIntegerError as e:
        e.context = context
        raise
