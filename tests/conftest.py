"""Root conftest — shared test configuration and a fake counter service.

Invariants:
    - Settings point at an unroutable test host: no test can reach the real service
    - FakeCounterService records every request it receives (call-count assertions)
    - Responses configured per operation verb (first path segment)

Design Decisions:
    - httpx.MockTransport over patching RemoteCounterClient: the real client code
      (error mapping, headers, params) runs in every test
"""

import os

os.environ["COUNTER_API_BASE_URL"] = "http://counter.test"
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.pop("GITHUB_OUTPUT", None)

import httpx
import pytest

from counterops.infrastructure.counter_client import RemoteCounterClient
from counterops.services.operation_dispatch import OperationDispatcher


class FakeCounterService:
    """In-process stand-in for the remote counter service."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: dict = {}

    def respond(self, verb: str, body=None, status_code: int = 200, raw: str | None = None):
        """Configure the response for /{verb}/... calls."""
        if raw is not None:
            self.responses[verb] = lambda: httpx.Response(status_code, text=raw)
        else:
            self.responses[verb] = lambda: httpx.Response(status_code, json=body)

    def fail_with(self, verb: str, exc: Exception):
        """Make /{verb}/... calls raise a transport-level exception."""
        self.responses[verb] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        verb = request.url.path.split("/")[1]
        configured = self.responses.get(verb)
        if configured is None:
            return httpx.Response(200, json={"value": 1})
        if isinstance(configured, Exception):
            raise configured
        return configured()

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_service():
    return FakeCounterService()


@pytest.fixture
async def counter_client(fake_service):
    client = RemoteCounterClient(
        base_url="http://counter.test", transport=fake_service.transport,
    )
    yield client
    await client.aclose()


@pytest.fixture
def dispatcher(counter_client):
    return OperationDispatcher(counter_client)
