"""Remote Counter Client — wraps httpx.AsyncClient with timeout and error mapping.

Invariants:
    - Exactly one network round-trip per send(); no retry loop
    - Non-2xx responses: RemoteFailureError with the remote's own status and message
    - Connection failures, timeouts, non-object JSON bodies: TransportError
    - Response values returned untouched; interpretation belongs to map_outputs
    - Never logs headers or params of a call; admin calls log authenticated=true only

Design Decisions:
    - Wrapper over raw client: isolates error mapping from the dispatcher (ADR: single responsibility)
    - No retries, unlike typical API wrappers: hit and update are not idempotent,
      a blind retry could count twice
    - transport injectable: tests plug in httpx.MockTransport, no network needed
"""

import logging
from typing import Any

import httpx

from counterops.config import Settings, get_settings
from counterops.core.build_request import RemoteCall
from counterops.core.errors import (
    ErrorContext,
    RemoteFailureError,
    TransportError,
)

logger = logging.getLogger(__name__)


class RemoteCounterClient:
    """Sends one RemoteCall to the counter service and returns its JSON object."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        user_agent: str = "counterops/1.0",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout_seconds),
            headers={"User-Agent": user_agent, "Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "RemoteCounterClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def send(
        self, call: RemoteCall, context: ErrorContext | None = None,
    ) -> dict[str, Any]:
        """Perform the call. Raises TransportError or RemoteFailureError."""
        log_extra = {
            "operation": call.operation.value,
            "method": call.method,
            "path": call.path,
            "authenticated": call.authenticated,
        }
        try:
            response = await self.client.request(
                call.method, call.path,
                params=call.params or None,
                headers=call.headers(),
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Counter service timeout: {call.method} {call.path}", extra=log_extra)
            raise TransportError(
                str(e) or "request timed out", "timeout", context=context,
            ) from e
        except httpx.TransportError as e:
            logger.warning(
                f"Counter service unreachable: {call.method} {call.path}: {e}",
                extra=log_extra,
            )
            raise TransportError(
                str(e) or type(e).__name__, "connection_error", context=context,
            ) from e

        logger.info(
            f"{call.method} {call.path} -> {response.status_code}",
            extra={**log_extra, "status_code": response.status_code},
        )

        if not response.is_success:
            raise RemoteFailureError(
                response.status_code, _remote_message(response), context=context,
            )
        return _parse_body(response, context)


def _parse_body(response: httpx.Response, context: ErrorContext | None) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError as e:
        raise TransportError(
            "response body is not valid JSON", "malformed_response", context=context,
        ) from e
    if not isinstance(body, dict):
        raise TransportError(
            f"expected a JSON object, got {type(body).__name__}",
            "malformed_response", context=context,
        )
    return body


def _remote_message(response: httpx.Response) -> str:
    """The remote's own error text: JSON error/message field, else raw body."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for field in ("error", "message"):
            if body.get(field):
                return str(body[field])
    return response.text.strip() or response.reason_phrase


def build_counter_client(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RemoteCounterClient:
    """Create a RemoteCounterClient from settings."""
    settings = settings or get_settings()
    return RemoteCounterClient(
        base_url=settings.counter_api_base_url,
        timeout_seconds=settings.counter_api_timeout_seconds,
        user_agent=settings.user_agent,
        transport=transport,
    )
