"""JSON encoding and decoding between API payloads and typed objects.

Metamodel objects go through the BaSyx JSON adapter
(AASToJsonEncoder / StrictAASFromJsonDecoder); registry descriptors
through pydantic. Every failure is reported as InvalidPayloadError.
"""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from basyx.aas import model
from basyx.aas.adapter.json import (
    AASToJsonEncoder,
    StrictAASFromJsonDecoder,
    read_aas_json_file,
)
from pydantic import BaseModel

from aas_api_client.exceptions import InvalidPayloadError
from aas_api_client.model.descriptors import (
    AssetAdministrationShellDescriptor,
    SubmodelDescriptor,
)
from aas_api_client.model.operation import (
    ExecutionState,
    OperationRequest,
    OperationResult,
    format_duration,
)
from aas_api_client.model.paging import Page, PagingMetadata
from aas_api_client.query.modifiers import Content, Level, QueryModifier

logger = logging.getLogger(__name__)

T = TypeVar("T")
Converter = Callable[[Any], T]

# Keys holding child structures, dropped for $metadata and below level=core.
_CHILD_KEYS = ("submodelElements", "statements", "annotations")

_DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError, model.AASConstraintViolation)


# --- decoding -------------------------------------------------------------


def parse_json(text: str) -> Any:
    """Parse a response body, raising InvalidPayloadError on malformed JSON."""
    try:
        return json.loads(text)
    except ValueError as e:
        raise InvalidPayloadError(f"Response is not valid JSON: {e}") from e


def _strict(data: Any) -> Any:
    return json.loads(json.dumps(data), cls=StrictAASFromJsonDecoder)


def metamodel(expected: type[T]) -> Converter[T]:
    """Converter for objects carrying a ``modelType`` (shells, submodels, elements, CDs)."""

    def convert(data: Any) -> T:
        obj = _strict(data)
        if not isinstance(obj, expected):
            raise InvalidPayloadError(
                f"Expected {expected.__name__}, got {type(obj).__name__}"
            )
        return obj

    return convert


def to_reference(data: Any) -> model.Reference:
    return StrictAASFromJsonDecoder._construct_reference(data)


def to_asset_information(data: Any) -> model.AssetInformation:
    return StrictAASFromJsonDecoder._construct_asset_information(data)


def to_resource(data: Any) -> model.Resource:
    return StrictAASFromJsonDecoder._construct_resource(data)


def to_specific_asset_id(data: Any) -> model.SpecificAssetId:
    return StrictAASFromJsonDecoder._construct_specific_asset_id(data)


def to_string(data: Any) -> str:
    if not isinstance(data, str):
        raise InvalidPayloadError(f"Expected a string, got {type(data).__name__}")
    return data


def to_json(data: Any) -> Any:
    return data


def to_shell_descriptor(data: Any) -> AssetAdministrationShellDescriptor:
    return AssetAdministrationShellDescriptor.model_validate(data)


def to_submodel_descriptor(data: Any) -> SubmodelDescriptor:
    return SubmodelDescriptor.model_validate(data)


def _operation_arguments(items: Iterable[Any] | None) -> tuple[model.SubmodelElement, ...]:
    convert = metamodel(model.SubmodelElement)
    return tuple(convert(item["value"]) for item in items or ())


def to_operation_result(data: Any) -> OperationResult:
    state = data.get("executionState")
    return OperationResult(
        execution_state=ExecutionState(state) if state is not None else None,
        success=data.get("success"),
        messages=tuple(data.get("messages") or ()),
        output_arguments=_operation_arguments(data.get("outputArguments")),
        inoutput_arguments=_operation_arguments(data.get("inoutputArguments")),
    )


def convert(data: Any, converter: Converter[T]) -> T:
    """Apply a converter, normalizing its failures to InvalidPayloadError."""
    try:
        return converter(data)
    except InvalidPayloadError:
        raise
    except _DECODE_ERRORS as e:
        raise InvalidPayloadError(f"Failed to decode payload: {e}") from e


def decode(text: str, converter: Converter[T]) -> T:
    return convert(parse_json(text), converter)


def decode_list(text: str, converter: Converter[T]) -> list[T]:
    data = parse_json(text)
    if not isinstance(data, list):
        raise InvalidPayloadError(f"Expected a JSON array, got {type(data).__name__}")
    return [convert(item, converter) for item in data]


def decode_page(text: str, converter: Converter[T]) -> Page[T]:
    """Decode a ``{"result": [...], "paging_metadata": {...}}`` envelope.

    Unknown keys in ``paging_metadata`` are ignored; a missing metadata
    object means there is no further page.
    """
    data = parse_json(text)
    if not isinstance(data, dict) or not isinstance(data.get("result"), list):
        raise InvalidPayloadError("Paged response has no 'result' array")
    metadata = data.get("paging_metadata") or {}
    if not isinstance(metadata, dict):
        raise InvalidPayloadError("'paging_metadata' must be an object")
    cursor = metadata.get("cursor")
    return Page(
        result=tuple(convert(item, converter) for item in data["result"]),
        metadata=PagingMetadata(cursor=str(cursor) if cursor is not None else None),
    )


def decode_environment(content: bytes | str) -> model.DictObjectStore[model.Identifiable]:
    """Decode a UTF-8 Environment document into an object store."""
    try:
        text = content.decode("utf-8") if isinstance(content, bytes) else content
        return read_aas_json_file(io.StringIO(text), failsafe=False)
    except _DECODE_ERRORS as e:
        raise InvalidPayloadError(f"Failed to decode environment: {e}") from e


# --- encoding -------------------------------------------------------------


def _to_plain(entity: Any) -> Any:
    if isinstance(entity, BaseModel):
        return entity.model_dump(by_alias=True, exclude_none=True, mode="json")
    if isinstance(entity, OperationRequest):
        return operation_request_to_json(entity)
    if isinstance(entity, (list, tuple)):
        return [_to_plain(item) for item in entity]
    if isinstance(entity, (dict, str, int, float, bool)) or entity is None:
        return entity
    return json.loads(json.dumps(entity, cls=AASToJsonEncoder))


def _strip_children(data: dict[str, Any]) -> None:
    for key in _CHILD_KEYS:
        data.pop(key, None)
    if isinstance(data.get("value"), list):
        data.pop("value")


def _apply_metadata(data: Any) -> Any:
    if isinstance(data, dict):
        _strip_children(data)
        data.pop("value", None)
    return data


def _apply_core(data: Any) -> Any:
    if not isinstance(data, dict):
        return data
    children: Sequence[Any] = data.get("submodelElements") or (
        data["value"] if isinstance(data.get("value"), list) else ()
    )
    for child in children:
        if isinstance(child, dict):
            _strip_children(child)
    return data


def to_payload(
    entity: Any,
    content: Content = Content.DEFAULT,
    modifier: QueryModifier = QueryModifier.DEFAULT,
) -> Any:
    """Convert an entity into the JSON structure sent for the given modifiers."""
    if content is Content.VALUE:
        return entity
    try:
        data = _to_plain(entity)
    except (TypeError, ValueError) as e:
        raise InvalidPayloadError(f"Serialization failed: {e}") from e
    if content is Content.METADATA:
        data = _apply_metadata(data)
    if modifier.level is Level.CORE:
        data = _apply_core(data)
    return data


def encode(
    entity: Any,
    content: Content = Content.DEFAULT,
    modifier: QueryModifier = QueryModifier.DEFAULT,
) -> str:
    """Serialize a request body to a JSON string."""
    payload = to_payload(entity, content, modifier)
    try:
        return json.dumps(payload)
    except (TypeError, ValueError) as e:
        raise InvalidPayloadError(f"Serialization failed: {e}") from e


def operation_request_to_json(request: OperationRequest) -> dict[str, Any]:
    return {
        "inputArguments": [{"value": _to_plain(arg)} for arg in request.input_arguments],
        "inoutputArguments": [{"value": _to_plain(arg)} for arg in request.inoutput_arguments],
        "clientTimeoutDuration": format_duration(request.client_timeout),
    }
