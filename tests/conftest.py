"""Shared pytest fixtures for AAS API client tests."""

import json
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

import httpx
import pytest

from aas_api_client.config import ClientConfig, ObservabilityConfig
from aas_api_client.http import create_http_client
from aas_api_client.interfaces.base import BaseInterface

BASE_URL = "http://aas.example.com/api/v3.0"

InterfaceT = TypeVar("InterfaceT", bound=BaseInterface)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers.

    Note: Markers are also defined in pyproject.toml [tool.pytest.ini_options].
    This function ensures they're registered even when running pytest directly.
    """
    config.addinivalue_line("markers", "integration: integration tests requiring a running AAS server")


class MockServer:
    """Canned responses for ``httpx.MockTransport`` that records every request.

    Responses are returned in the order they were queued; once the queue is
    empty every further request is answered with 204.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[dict[str, Any]] = []

    def respond(
        self,
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Queue the next response."""
        self._responses.append(
            {"status_code": status_code, "json": json, "content": content, "headers": headers}
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(204)
        canned = self._responses.pop(0)
        if canned["json"] is not None:
            return httpx.Response(
                canned["status_code"], json=canned["json"], headers=canned["headers"]
            )
        return httpx.Response(
            canned["status_code"], content=canned["content"] or b"", headers=canned["headers"]
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        """Decoded JSON body of the most recent request."""
        return json.loads(self.last.content)

    def last_target(self) -> str:
        """Raw path and query of the most recent request, below the API root."""
        raw = self.last.url.raw_path.decode("ascii")
        prefix = httpx.URL(BASE_URL).raw_path.decode("ascii")
        return raw[len(prefix):] if raw.startswith(prefix) else raw


@pytest.fixture
def client_config() -> ClientConfig:
    """Client configuration pointing at the mock server, metrics disabled."""
    return ClientConfig(
        base_url=BASE_URL,
        observability=ObservabilityConfig(metrics_enabled=False),
    )


@pytest.fixture
def server() -> MockServer:
    return MockServer()


@pytest.fixture
def http_client(server: MockServer, client_config: ClientConfig) -> Iterator[httpx.Client]:
    """httpx client whose requests are answered by the mock server."""
    client = create_http_client(client_config, transport=httpx.MockTransport(server.handler))
    yield client
    client.close()


@pytest.fixture
def make_interface(
    http_client: httpx.Client, client_config: ClientConfig
) -> Callable[[type[InterfaceT]], InterfaceT]:
    """Factory creating an interface bound to the mock server."""

    def factory(cls: type[InterfaceT]) -> InterfaceT:
        return cls(client=http_client, config=client_config)

    return factory
