"""Request Building — maps a validated OperationRequest to the exact remote call shape.

Invariants:
    - Total and deterministic: one RemoteCall per request, no optional branching
    - create always carries initializer (0 when the caller omitted it)
    - The admin key travels as a credential (Authorization header), never in path or params
"""

from dataclasses import dataclass, field
from urllib.parse import quote

from counterops.core.domain_types import AdminKey, CounterIdentity, Operation
from counterops.core.operation_requests import OperationRequest
from counterops.core.operation_table import get_operation_spec


@dataclass(frozen=True)
class RemoteCall:
    operation: Operation
    method: str
    path: str
    params: dict[str, int] = field(default_factory=dict)
    admin_key: AdminKey | None = None

    @property
    def authenticated(self) -> bool:
        return self.admin_key is not None

    def headers(self) -> dict[str, str]:
        if self.admin_key is None:
            return {}
        return {"Authorization": f"Bearer {self.admin_key.reveal()}"}


def counter_path(operation: Operation, identity: CounterIdentity) -> str:
    """/{operation}/{namespace}/{key}, both parts percent-encoded as segments."""
    return "/".join((
        "",
        operation.value,
        quote(identity.namespace, safe=""),
        quote(identity.key, safe=""),
    ))


def build_request(request: OperationRequest) -> RemoteCall:
    spec = get_operation_spec(request.operation)
    params: dict[str, int] = {}
    if spec.integer_input:
        params[spec.integer_input.field] = getattr(
            request, spec.integer_input.attribute,
        )
    return RemoteCall(
        operation=request.operation,
        method=spec.method,
        path=counter_path(request.operation, request.identity),
        params=params,
        admin_key=request.admin_key if spec.requires_admin_key else None,
    )
