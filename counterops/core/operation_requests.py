"""Operation Requests — one validated, strongly-typed variant per operation.

Invariants:
    - Every variant carries a CounterIdentity
    - Admin variants always carry a non-empty AdminKey (validate_inputs guarantees it)
    - Integer fields are already parsed ints — no string survives past the input boundary

Design Decisions:
    - Union of frozen dataclasses over a class hierarchy with behaviour:
      the variants are pure data, build_request does the per-variant work
"""

from dataclasses import dataclass
from typing import Union

from counterops.core.domain_types import AdminKey, CounterIdentity, Operation


@dataclass(frozen=True)
class HitRequest:
    identity: CounterIdentity
    operation = Operation.HIT


@dataclass(frozen=True)
class CreateRequest:
    identity: CounterIdentity
    initializer: int = 0
    operation = Operation.CREATE


@dataclass(frozen=True)
class GetRequest:
    identity: CounterIdentity
    operation = Operation.GET


@dataclass(frozen=True)
class InfoRequest:
    identity: CounterIdentity
    operation = Operation.INFO


@dataclass(frozen=True)
class SetRequest:
    identity: CounterIdentity
    value: int
    admin_key: AdminKey
    operation = Operation.SET


@dataclass(frozen=True)
class UpdateRequest:
    identity: CounterIdentity
    delta: int
    admin_key: AdminKey
    operation = Operation.UPDATE


@dataclass(frozen=True)
class ResetRequest:
    identity: CounterIdentity
    admin_key: AdminKey
    operation = Operation.RESET


@dataclass(frozen=True)
class DeleteRequest:
    identity: CounterIdentity
    admin_key: AdminKey
    operation = Operation.DELETE


OperationRequest = Union[
    HitRequest, CreateRequest, GetRequest, InfoRequest,
    SetRequest, UpdateRequest, ResetRequest, DeleteRequest,
]
