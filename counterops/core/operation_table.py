"""Operation Table — the single place where each operation's contract is declared.

Invariants:
    - Exactly one entry per Operation member
    - Remote path is always /{operation}/{namespace}/{key}
    - At most one integer input per operation; its raw input name is also the remote query param
    - outputs lists exactly the fields the operation's result renders, in order

Design Decisions:
    - Explicit dict over per-operation subclasses: every contract visible in one place,
      adding or auditing an operation is a one-entry change (ADR: no convention-over-config)
    - Reads (hit, get, info) use GET; create and admin operations use POST
"""

from dataclasses import dataclass

from counterops.core.domain_types import Operation
from counterops.core.operation_requests import (
    HitRequest, CreateRequest, GetRequest, InfoRequest,
    SetRequest, UpdateRequest, ResetRequest, DeleteRequest,
)

IDENTITY_FIELDS = ("namespace", "key")
ADMIN_KEY_FIELD = "admin_key"


@dataclass(frozen=True)
class IntegerInput:
    """Integer input: raw input name, request attribute, default (None = required)."""
    field: str
    attribute: str
    default: int | None = None


@dataclass(frozen=True)
class OperationSpec:
    request_type: type
    method: str
    requires_admin_key: bool
    outputs: tuple[str, ...]
    integer_input: IntegerInput | None = None

    @property
    def inputs(self) -> tuple[str, ...]:
        """Raw input names this operation reads."""
        names = list(IDENTITY_FIELDS)
        if self.integer_input:
            names.append(self.integer_input.field)
        if self.requires_admin_key:
            names.append(ADMIN_KEY_FIELD)
        return tuple(names)


_VALUE_OUTPUT = ("value",)

OPERATIONS: dict[Operation, OperationSpec] = {
    Operation.HIT: OperationSpec(HitRequest, "GET", False, _VALUE_OUTPUT),
    Operation.CREATE: OperationSpec(
        CreateRequest, "POST", False,
        ("value", "namespace", "key", "admin_key"),
        IntegerInput("initializer", "initializer", default=0),
    ),
    Operation.GET: OperationSpec(GetRequest, "GET", False, _VALUE_OUTPUT),
    Operation.INFO: OperationSpec(
        InfoRequest, "GET", False,
        ("value", "exists", "expires_in", "expires_str", "full_key", "is_genuine"),
    ),
    Operation.SET: OperationSpec(
        SetRequest, "POST", True, _VALUE_OUTPUT,
        IntegerInput("value", "value"),
    ),
    Operation.UPDATE: OperationSpec(
        UpdateRequest, "POST", True, _VALUE_OUTPUT,
        IntegerInput("value", "delta"),
    ),
    Operation.RESET: OperationSpec(ResetRequest, "POST", True, _VALUE_OUTPUT),
    Operation.DELETE: OperationSpec(
        DeleteRequest, "POST", True, ("status", "message"),
    ),
}


def get_operation_spec(operation: Operation) -> OperationSpec:
    return OPERATIONS[operation]
