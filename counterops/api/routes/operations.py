"""Operations — HTTP surface over OperationDispatcher.

Invariants:
    - Routes never contain business logic (validation and mapping live in core/)
    - Unknown operation names reach the dispatcher and fail as UNKNOWN_OPERATION (400),
      same as every other host surface
    - Responses never include an admin key except the create output

Design Decisions:
    - Dispatcher injected via Depends(get_dispatcher): tests override it with a
      dispatcher over httpx.MockTransport
    - Dispatcher built once in the lifespan and kept on app.state
"""

from fastapi import APIRouter, Depends, Request

from counterops.core.operation_table import OPERATIONS
from counterops.schemas.operation import (
    OperationDescriptor,
    OperationInvocation,
    OperationOutputs,
)
from counterops.services.operation_dispatch import OperationDispatcher

router = APIRouter(prefix="/api/v1/operations", tags=["operations"])


def get_dispatcher(request: Request) -> OperationDispatcher:
    return request.app.state.dispatcher


@router.get("", response_model=list[OperationDescriptor])
async def list_operations():
    """Describe every supported operation."""
    return [
        OperationDescriptor(
            operation=operation.value,
            method=spec.method,
            inputs=list(spec.inputs),
            requires_admin_key=spec.requires_admin_key,
            outputs=list(spec.outputs),
        )
        for operation, spec in OPERATIONS.items()
    ]


@router.post("/{operation}", response_model=OperationOutputs)
async def run_operation(
    operation: str,
    body: OperationInvocation,
    dispatcher: OperationDispatcher = Depends(get_dispatcher),
):
    """Run one counter operation."""
    outputs = await dispatcher.execute(operation, body.inputs)
    return OperationOutputs(operation=operation, outputs=outputs)
