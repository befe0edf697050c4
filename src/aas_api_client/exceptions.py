"""Error taxonomy for AAS API client calls.

Every failure surfaces to the caller as a subclass of ClientError:

- ConnectivityError: the request never produced an HTTP response.
- InvalidPayloadError: a request or response body could not be (de)serialized.
- StatusCodeError: the server answered with an unexpected status code.
"""

from __future__ import annotations

import httpx


class ClientError(Exception):
    """Base class for all AAS API client errors."""


class ConnectivityError(ClientError):
    """Raised when the server cannot be reached (DNS, connect, timeout, ...)."""


class InvalidPayloadError(ClientError):
    """Raised when a body cannot be serialized or a response cannot be parsed."""


class StatusCodeError(ClientError):
    """Raised when the server responds with a status code other than expected."""

    status: int | None = None

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int,
        response_body: str | None = None,
        request_body: str | None = None,
    ):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.response_body = response_body
        self.request_body = request_body
        super().__init__(
            f"{method} {url} returned HTTP {status_code} "
            f"(response body: {response_body or 'not available'})"
        )

    @classmethod
    def from_response(cls, response: httpx.Response) -> StatusCodeError:
        """Build the error from an httpx response and its originating request."""
        request = response.request
        request_body: str | None = None
        try:
            body = request.content
        except httpx.RequestNotRead:
            body = b""
        if body:
            request_body = body.decode("utf-8", errors="replace")
        return cls(
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            response_body=response.text or None,
            request_body=request_body,
        )


class BadRequestError(StatusCodeError):
    """HTTP 400."""

    status = 400


class UnauthorizedError(StatusCodeError):
    """HTTP 401."""

    status = 401


class ForbiddenError(StatusCodeError):
    """HTTP 403."""

    status = 403


class NotFoundError(StatusCodeError):
    """HTTP 404."""

    status = 404


class MethodNotAllowedError(StatusCodeError):
    """HTTP 405. Only mapped for POST requests."""

    status = 405


class ConflictError(StatusCodeError):
    """HTTP 409. Only mapped for POST requests."""

    status = 409


class InternalServerError(StatusCodeError):
    """HTTP 500."""

    status = 500


class UnsupportedStatusCodeError(StatusCodeError):
    """Raised for status codes outside the table of the called operation."""


_COMMON_ERRORS: dict[int, type[StatusCodeError]] = {
    cls.status: cls  # type: ignore[misc]
    for cls in (
        BadRequestError,
        UnauthorizedError,
        ForbiddenError,
        NotFoundError,
        InternalServerError,
    )
}

_POST_ERRORS: dict[int, type[StatusCodeError]] = {
    **_COMMON_ERRORS,
    MethodNotAllowedError.status: MethodNotAllowedError,  # type: ignore[dict-item]
    ConflictError.status: ConflictError,  # type: ignore[dict-item]
}


def error_for_response(response: httpx.Response) -> StatusCodeError:
    """Map an error response to its exception type.

    405 and 409 are part of the POST table only; for any other method
    they are reported as UnsupportedStatusCodeError.
    """
    table = _POST_ERRORS if response.request.method == "POST" else _COMMON_ERRORS
    error_cls = table.get(response.status_code, UnsupportedStatusCodeError)
    return error_cls.from_response(response)


def raise_for_status(response: httpx.Response, *expected: int) -> None:
    """Raise the mapped StatusCodeError unless the status is one of `expected`.

    Args:
        response: The received response (its request must be attached).
        expected: Accepted status codes.

    Raises:
        StatusCodeError: The subclass matching the status code.
    """
    if response.status_code in expected:
        return
    raise error_for_response(response)
