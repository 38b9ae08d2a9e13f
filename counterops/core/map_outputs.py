"""Output Mapping — projects a remote response into the operation's fixed output schema.

Invariants:
    - Only documented fields are read; everything else in the response is discarded
    - info booleans keep their true/false semantics ("true"/"false", never "1"/"0")
    - CreateResult is the only result with an admin_key field, and the only
      place that unwraps an AdminKey into output
    - Rendered outputs are always strings; absent fields render as ""

Design Decisions:
    - Four result shapes cover eight operations: hit/get/set/update/reset share ValueResult
    - Rendering lives on each result (to_outputs): the secret unwrap sits in exactly one method
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from counterops.core.domain_types import AdminKey, Operation


def render_value(value: Any) -> str:
    """Canonical textual form for a JSON scalar."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class ValueResult:
    operation: Operation
    value: Any = None

    def to_outputs(self) -> dict[str, str]:
        return {"value": render_value(self.value)}


@dataclass(frozen=True)
class CreateResult:
    value: Any = None
    namespace: Any = None
    key: Any = None
    admin_key: AdminKey | None = None
    operation = Operation.CREATE

    def to_outputs(self) -> dict[str, str]:
        return {
            "value": render_value(self.value),
            "namespace": render_value(self.namespace),
            "key": render_value(self.key),
            "admin_key": self.admin_key.reveal() if self.admin_key else "",
        }


@dataclass(frozen=True)
class InfoResult:
    value: Any = None
    exists: Any = None
    expires_in: Any = None
    expires_str: Any = None
    full_key: Any = None
    is_genuine: Any = None
    operation = Operation.INFO

    def to_outputs(self) -> dict[str, str]:
        return {
            "value": render_value(self.value),
            "exists": render_value(self.exists),
            "expires_in": render_value(self.expires_in),
            "expires_str": render_value(self.expires_str),
            "full_key": render_value(self.full_key),
            "is_genuine": render_value(self.is_genuine),
        }


@dataclass(frozen=True)
class DeleteResult:
    status: Any = None
    message: Any = None
    operation = Operation.DELETE

    def to_outputs(self) -> dict[str, str]:
        return {
            "status": render_value(self.status),
            "message": render_value(self.message),
        }


OperationResult = Union[ValueResult, CreateResult, InfoResult, DeleteResult]


def map_outputs(operation: Operation, response: Mapping[str, Any]) -> OperationResult:
    """Project `response` into the result shape declared for `operation`."""
    operation = Operation(operation)
    if operation is Operation.CREATE:
        admin_key = response.get("admin_key")
        return CreateResult(
            value=response.get("value"),
            namespace=response.get("namespace"),
            key=response.get("key"),
            admin_key=AdminKey(str(admin_key)) if admin_key else None,
        )
    if operation is Operation.INFO:
        return InfoResult(
            value=response.get("value"),
            exists=response.get("exists"),
            expires_in=response.get("expires_in"),
            expires_str=response.get("expires_str"),
            full_key=response.get("full_key"),
            is_genuine=response.get("is_genuine"),
        )
    if operation is Operation.DELETE:
        return DeleteResult(
            status=response.get("status"),
            message=response.get("message"),
        )
    return ValueResult(operation=operation, value=response.get("value"))
