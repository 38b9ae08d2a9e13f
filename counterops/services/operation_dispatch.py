"""Operation Dispatch — validate, build, send, map for one counter operation.

Invariants:
    - Validation errors raised before any network activity (no partial side effects)
    - Exactly one remote call per successful validation; never retried
    - Remote errors propagate unchanged (the service is the source of truth)
    - Every dispatch logged with operation, namespace and key — never the admin key
    - Stateless: no data survives between dispatch() calls

Design Decisions:
    - Pure steps (validate_inputs, build_request, map_outputs) live in core/;
      this class is the thin imperative shell around the single await
    - Errors raised, not returned as dicts: both host surfaces map CounterOpsError uniformly
"""

import logging
from collections.abc import Mapping

from counterops.core.build_request import build_request
from counterops.core.errors import (
    ErrorContext,
    OperationValidationError,
    RemoteServiceError,
)
from counterops.core.map_outputs import OperationResult, map_outputs
from counterops.core.service_protocols import CounterServiceClient
from counterops.core.validate_inputs import validate_inputs

logger = logging.getLogger(__name__)


class OperationDispatcher:
    """Routes an operation name plus raw string inputs to the counter service."""

    def __init__(self, client: CounterServiceClient):
        self._client = client

    async def dispatch(
        self, operation: str, raw_inputs: Mapping[str, str | None],
    ) -> OperationResult:
        """Run one operation end to end. Raises CounterOpsError subclasses."""
        try:
            request = validate_inputs(operation, raw_inputs)
        except OperationValidationError as e:
            logger.warning(
                f"Rejected '{operation}': {e.message}",
                extra={"operation": operation, "error_code": e.code},
            )
            raise

        identity = request.identity
        log_extra = {
            "operation": request.operation.value,
            "namespace": identity.namespace,
            "counter_key": identity.key,
        }
        context = ErrorContext(
            operation=request.operation.value,
            namespace=identity.namespace,
            counter_key=identity.key,
        )

        call = build_request(request)
        try:
            response = await self._client.send(call, context)
        except RemoteServiceError as e:
            logger.warning(
                f"Operation '{request.operation.value}' failed: {e.message}",
                extra={**log_extra, "error_code": e.code},
            )
            raise

        result = map_outputs(request.operation, response)
        logger.info(f"Operation '{request.operation.value}' completed", extra=log_extra)
        return result

    async def execute(
        self, operation: str, raw_inputs: Mapping[str, str | None],
    ) -> dict[str, str]:
        """dispatch() rendered to the string-only output schema."""
        result = await self.dispatch(operation, raw_inputs)
        return result.to_outputs()
