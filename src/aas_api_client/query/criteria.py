"""Per-resource search criteria serialized into query parameters.

Each criteria class is an immutable value object. ``to_query_params()``
returns the ordered ``(name, value)`` pairs to append to a request, or an
empty list when nothing is set.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar

from basyx.aas import model
from basyx.aas.adapter.json import AASToJsonEncoder

from aas_api_client.encoding import base64url_encode, reference_value

GLOBAL_ASSET_ID_KEY = "globalAssetId"

_ASSET_KIND_NAMES = {
    model.AssetKind.TYPE: "Type",
    model.AssetKind.INSTANCE: "Instance",
    model.AssetKind.NOT_APPLICABLE: "NotApplicable",
}


def specific_asset_id_to_json(asset_id: model.SpecificAssetId) -> dict[str, Any]:
    """Serialize a SpecificAssetId to its API JSON object."""
    result: dict[str, Any] = json.loads(json.dumps(asset_id, cls=AASToJsonEncoder))
    return result


def _asset_link_objects(
    asset_ids: Iterable[model.SpecificAssetId],
    global_asset_ids: Iterable[str],
) -> list[dict[str, Any]]:
    objects = [{"name": GLOBAL_ASSET_ID_KEY, "value": value} for value in global_asset_ids]
    objects.extend(specific_asset_id_to_json(asset_id) for asset_id in asset_ids)
    return objects


def _compact_json(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"))


@dataclass(frozen=True)
class SearchCriteria:
    """Criteria without any parameters. Base for all resource-specific criteria."""

    DEFAULT: ClassVar[SearchCriteria]

    def to_query_params(self) -> list[tuple[str, str]]:
        return []


SearchCriteria.DEFAULT = SearchCriteria()


@dataclass(frozen=True)
class AASSearchCriteria(SearchCriteria):
    """Filter for ``GET /shells``."""

    asset_ids: tuple[model.SpecificAssetId, ...] = ()
    global_asset_ids: tuple[str, ...] = ()
    id_short: str | None = None

    def to_query_params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        links = _asset_link_objects(self.asset_ids, self.global_asset_ids)
        if links:
            encoded = ",".join(base64url_encode(_compact_json(link)) for link in links)
            params.append(("assetIds", encoded))
        if self.id_short is not None:
            params.append(("idShort", self.id_short))
        return params


@dataclass(frozen=True)
class SubmodelSearchCriteria(SearchCriteria):
    """Filter for ``GET /submodels``."""

    semantic_id: str | model.Reference | None = None
    id_short: str | None = None

    def to_query_params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        if self.semantic_id is not None:
            params.append(("semanticId", base64url_encode(reference_value(self.semantic_id))))
        if self.id_short is not None:
            params.append(("idShort", self.id_short))
        return params


@dataclass(frozen=True)
class ConceptDescriptionSearchCriteria(SearchCriteria):
    """Filter for ``GET /concept-descriptions``."""

    id_short: str | None = None
    is_case_of: str | model.Reference | None = None
    data_specification_ref: str | model.Reference | None = None

    def to_query_params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        if self.id_short is not None:
            params.append(("idShort", self.id_short))
        if self.is_case_of is not None:
            params.append(("isCaseOf", base64url_encode(reference_value(self.is_case_of))))
        if self.data_specification_ref is not None:
            params.append(
                (
                    "dataSpecificationRef",
                    base64url_encode(reference_value(self.data_specification_ref)),
                )
            )
        return params


@dataclass(frozen=True)
class AASDescriptorSearchCriteria(SearchCriteria):
    """Filter for ``GET /shell-descriptors``."""

    asset_kind: model.AssetKind | str | None = None
    asset_type: str | None = None

    def to_query_params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        if self.asset_kind is not None:
            kind = self.asset_kind
            if isinstance(kind, model.AssetKind):
                kind = _ASSET_KIND_NAMES[kind]
            params.append(("assetKind", kind))
        if self.asset_type is not None:
            params.append(("assetType", base64url_encode(self.asset_type)))
        return params


@dataclass(frozen=True)
class SerializationSearchCriteria(SearchCriteria):
    """Selection of shells and submodels for ``GET /serialization``."""

    aas_ids: tuple[str, ...] = ()
    submodel_ids: tuple[str, ...] = ()
    include_concept_descriptions: bool = True

    def to_query_params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        if self.aas_ids:
            params.append(("aasIds", ",".join(base64url_encode(i) for i in self.aas_ids)))
        if self.submodel_ids:
            params.append(
                ("submodelIds", ",".join(base64url_encode(i) for i in self.submodel_ids))
            )
        if not self.include_concept_descriptions:
            params.append(("includeConceptDescriptions", "false"))
        return params


@dataclass(frozen=True)
class AssetLinkSearchCriteria(SearchCriteria):
    """Asset links for ``GET /lookup/shells``.

    The primary encoding sends the whole list as one base64url encoded JSON
    array. ``as_per_item()`` gives the alternative comma-joined encoding
    some servers expect.
    """

    asset_ids: tuple[model.SpecificAssetId, ...] = ()
    global_asset_ids: tuple[str, ...] = ()

    def to_query_params(self) -> list[tuple[str, str]]:
        links = _asset_link_objects(self.asset_ids, self.global_asset_ids)
        if not links:
            return []
        return [("assetIds", base64url_encode(_compact_json(links)))]

    def as_per_item(self) -> AASSearchCriteria:
        return AASSearchCriteria(asset_ids=self.asset_ids, global_asset_ids=self.global_asset_ids)
