"""Shared request/response plumbing for all AAS API interfaces."""

from __future__ import annotations

import logging
from email.message import Message
from typing import Any, ClassVar, TypeVar
from urllib.parse import quote

import httpx

from aas_api_client import codec
from aas_api_client.codec import Converter
from aas_api_client.config import ClientConfig
from aas_api_client.encoding import base64url_encode
from aas_api_client.exceptions import InvalidPayloadError, StatusCodeError, raise_for_status
from aas_api_client.http import JSON_CONTENT_TYPE, create_http_client, send
from aas_api_client.model.files import DEFAULT_CONTENT_TYPE, InMemoryFile
from aas_api_client.model.paging import Page
from aas_api_client.observability.metrics import METRICS, ClientMetrics
from aas_api_client.query import (
    Content,
    PagingInfo,
    QueryModifier,
    SearchCriteria,
    build_path,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
InterfaceT = TypeVar("InterfaceT", bound="BaseInterface")

_JSON_HEADERS = {"Content-Type": JSON_CONTENT_TYPE}


def id_path(identifier: str) -> str:
    """Path segment for an identifiable: ``/`` + base64url(identifier)."""
    return "/" + base64url_encode(identifier)


def id_short_path(path: str) -> str:
    """Path segment for an idShort path such as ``Nameplate.Markings[0]``."""
    return "/" + quote(path, safe="")


class BaseInterface:
    """Base class for one REST resource group of the AAS API.

    The resource root (``API_PATH``) is appended to the given endpoint.
    Interfaces created from another interface (e.g. a submodel interface
    obtained from a repository) share its httpx client; only the interface
    that created the client closes it.
    """

    API_PATH: ClassVar[str] = ""

    def __init__(
        self,
        endpoint: str | None = None,
        *,
        client: httpx.Client | None = None,
        config: ClientConfig | None = None,
        auth: httpx.Auth | None = None,
    ):
        """Initialize the interface.

        Args:
            endpoint: Service endpoint, e.g. ``https://host/api/v3.0``.
                Defaults to ``config.base_url``.
            client: Existing httpx client to reuse.
            config: Connection settings; used when creating a client.
            auth: Auth handler overriding the configured credentials.
        """
        self._config = config if config is not None else ClientConfig()
        base = endpoint if endpoint is not None else self._config.base_url
        self.endpoint = base.rstrip("/") + self.API_PATH
        self._owns_client = client is None
        self._client = client if client is not None else create_http_client(self._config, auth)
        self._metrics: ClientMetrics | None = (
            METRICS if self._config.observability.metrics_enabled else None
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.endpoint!r})"

    def close(self) -> None:
        """Close the HTTP client if this interface created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self: InterfaceT) -> InterfaceT:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _child(self, cls: type[InterfaceT], path: str) -> InterfaceT:
        """Create an interface below this one sharing the HTTP client."""
        return cls(self.resolve(path), client=self._client, config=self._config)

    def resolve(self, path: str | None = None) -> str:
        """Absolute URL of a path relative to this interface's endpoint."""
        if not path:
            return self.endpoint
        if not path.startswith(("/", "?")):
            path = "/" + path
        return self.endpoint + path

    # --- request execution ------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        expected: tuple[int, ...],
        *,
        content: str | bytes | None = None,
        headers: dict[str, str] | None = None,
        files: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> httpx.Response:
        response = send(
            self._client,
            method,
            self.resolve(path),
            content=content,
            headers=headers,
            files=files,
            data=data,
            metrics=self._metrics,
        )
        try:
            raise_for_status(response, *expected)
        except StatusCodeError as e:
            if self._metrics is not None:
                self._metrics.record_error(e)
            raise
        return response

    def _decoded(self, action: Any, *args: Any) -> Any:
        try:
            return action(*args)
        except InvalidPayloadError as e:
            if self._metrics is not None:
                self._metrics.record_error(e)
            raise

    # --- GET --------------------------------------------------------------

    def _get(
        self,
        path: str | None,
        converter: Converter[T],
        content: Content = Content.DEFAULT,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        criteria: SearchCriteria = SearchCriteria.DEFAULT,
    ) -> T:
        response = self._request(
            "GET", build_path(path, content, modifier, criteria=criteria), (200,)
        )
        result: T = self._decoded(codec.decode, response.text, converter)
        return result

    def _get_list(
        self,
        path: str | None,
        converter: Converter[T],
        modifier: QueryModifier = QueryModifier.DEFAULT,
    ) -> list[T]:
        """GET an endpoint that answers with a plain (unpaged) JSON array."""
        response = self._request("GET", build_path(path, modifier=modifier), (200,))
        result: list[T] = self._decoded(codec.decode_list, response.text, converter)
        return result

    def _get_page(
        self,
        path: str | None,
        converter: Converter[T],
        content: Content = Content.DEFAULT,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        paging: PagingInfo = PagingInfo.ALL,
        criteria: SearchCriteria = SearchCriteria.DEFAULT,
    ) -> Page[T]:
        response = self._request(
            "GET", build_path(path, content, modifier, paging, criteria), (200,)
        )
        page: Page[T] = self._decoded(codec.decode_page, response.text, converter)
        return page

    def _get_all(
        self,
        path: str | None,
        converter: Converter[T],
        content: Content = Content.DEFAULT,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        criteria: SearchCriteria = SearchCriteria.DEFAULT,
    ) -> list[T]:
        """Collect all results of a paged endpoint, following cursors."""
        results: list[T] = []
        paging = PagingInfo.ALL
        seen: set[str] = set()
        while True:
            page = self._get_page(path, converter, content, modifier, paging, criteria)
            results.extend(page.result)
            if page.cursor is None:
                return results
            if page.cursor in seen:
                raise InvalidPayloadError(f"Server repeated paging cursor {page.cursor!r}")
            seen.add(page.cursor)
            logger.debug("Following cursor %s for %s", page.cursor, self.resolve(path))
            paging = PagingInfo(cursor=page.cursor)

    # --- write operations -------------------------------------------------

    def _post(
        self,
        path: str | None,
        entity: Any,
        converter: Converter[T],
        content: Content = Content.DEFAULT,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        expected: tuple[int, ...] = (201,),
    ) -> T:
        body = codec.encode(entity, content, modifier)
        response = self._request(
            "POST", build_path(path, content), expected, content=body, headers=_JSON_HEADERS
        )
        result: T = self._decoded(codec.decode, response.text, converter)
        return result

    def _put(
        self,
        path: str | None,
        entity: Any,
        content: Content = Content.DEFAULT,
        modifier: QueryModifier = QueryModifier.DEFAULT,
    ) -> None:
        body = codec.encode(entity, content, modifier)
        self._request(
            "PUT", build_path(path, content, modifier), (204,), content=body, headers=_JSON_HEADERS
        )

    def _patch(
        self,
        path: str | None,
        entity: Any,
        content: Content = Content.DEFAULT,
        modifier: QueryModifier = QueryModifier.DEFAULT,
    ) -> None:
        body = codec.encode(entity, content, modifier)
        self._request(
            "PATCH",
            build_path(path, content, modifier),
            (204,),
            content=body,
            headers=_JSON_HEADERS,
        )

    def _patch_value(
        self,
        path: str | None,
        value: Any,
        modifier: QueryModifier = QueryModifier.DEFAULT,
    ) -> None:
        """PATCH a value-only representation (``/$value``)."""
        self._patch(path, value, Content.VALUE, modifier)

    def _delete(self, path: str | None, expected: tuple[int, ...] = (204,)) -> None:
        self._request("DELETE", build_path(path), expected)

    # --- files ------------------------------------------------------------

    def _get_file(self, path: str | None, accept: str | None = None) -> InMemoryFile:
        headers = {"Accept": accept} if accept else None
        response = self._request("GET", path or "", (200,), headers=headers)
        return InMemoryFile(
            content=response.content,
            path=_filename(response),
            content_type=response.headers.get("Content-Type", DEFAULT_CONTENT_TYPE),
        )

    def _put_file(self, path: str | None, file: InMemoryFile) -> None:
        """Upload a file as multipart form data (``file`` + ``fileName``)."""
        filename = file.path or "unknown"
        self._request(
            "PUT",
            path or "",
            (204,),
            files={"file": (filename, file.content, file.content_type)},
            data={"fileName": filename},
        )


def _filename(response: httpx.Response) -> str | None:
    disposition = response.headers.get("Content-Disposition")
    if not disposition:
        return None
    # Message handles quoted parameters and the RFC 5987 filename* form.
    header = Message()
    header["Content-Disposition"] = disposition
    return header.get_filename()
