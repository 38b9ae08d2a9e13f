"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The counter service is reached only through CounterServiceClient

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any object with send()
"""

from typing import Any, Protocol

from counterops.core.build_request import RemoteCall
from counterops.core.errors import ErrorContext


class CounterServiceClient(Protocol):
    """Contract for the remote counter service — implemented by infrastructure."""
    async def send(
        self, call: RemoteCall, context: ErrorContext | None = None,
    ) -> dict[str, Any]: ...
