"""HTTP transport helpers built on httpx."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Generator, Mapping
from typing import Any

import httpx

from aas_api_client.config import ClientConfig
from aas_api_client.exceptions import ConnectivityError
from aas_api_client.observability.metrics import ClientMetrics

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class BearerTokenAuth(httpx.Auth):
    """Adds an ``Authorization`` header obtained from a supplier per request.

    The supplier is called for every request so short-lived tokens can be
    refreshed by the caller. It may return a bare token or a complete header
    value (``Bearer ...``); returning None sends the request unauthenticated.
    """

    def __init__(self, token_supplier: Callable[[], str | None]):
        self._token_supplier = token_supplier

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self._token_supplier()
        if token:
            if " " not in token:
                token = f"Bearer {token}"
            request.headers["Authorization"] = token
        yield request


def auth_from_config(config: ClientConfig) -> httpx.Auth | None:
    """Build the httpx auth handler for the configured credentials."""
    if config.auth_token is not None:
        secret = config.auth_token
        return BearerTokenAuth(secret.get_secret_value)
    if config.username is not None and config.password is not None:
        return httpx.BasicAuth(config.username, config.password.get_secret_value())
    return None


def create_http_client(
    config: ClientConfig,
    auth: httpx.Auth | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create the httpx client shared by an interface and its children.

    Args:
        config: Connection settings.
        auth: Explicit auth handler; defaults to the configured credentials.
        transport: Custom transport (e.g. ``httpx.MockTransport`` in tests).
    """
    headers: dict[str, str] = {"Accept": JSON_CONTENT_TYPE}
    headers.update(config.headers)

    verify: bool | str = config.verify_tls
    if config.verify_tls and config.ca_cert is not None:
        verify = str(config.ca_cert)
    if not config.verify_tls:
        logger.warning("TLS certificate verification is disabled")

    return httpx.Client(
        headers=headers,
        timeout=config.timeout_seconds,
        verify=verify,
        auth=auth if auth is not None else auth_from_config(config),
        transport=transport,
    )


def send(
    client: httpx.Client,
    method: str,
    url: str,
    *,
    content: str | bytes | None = None,
    headers: Mapping[str, str] | None = None,
    files: Mapping[str, Any] | None = None,
    data: Mapping[str, Any] | None = None,
    metrics: ClientMetrics | None = None,
) -> httpx.Response:
    """Send a single request without any retry.

    Raises:
        ConnectivityError: If no HTTP response was received.
    """
    request = client.build_request(
        method, url, content=content, headers=headers, files=files, data=data
    )
    # Multipart bodies are streams; buffer them so error reports can include the body.
    request.read()
    logger.debug("%s %s", method, request.url)
    start = time.perf_counter()
    try:
        response = client.send(request)
    except httpx.TransportError as e:
        if metrics is not None:
            metrics.record_error(e)
        raise ConnectivityError(f"{method} {request.url} failed: {e}") from e
    if metrics is not None:
        metrics.record_response(method, response.status_code, time.perf_counter() - start)
    if response.is_error:
        logger.warning("%s %s returned HTTP %d", method, request.url, response.status_code)
    return response
