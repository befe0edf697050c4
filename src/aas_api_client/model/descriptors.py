"""Registry descriptor models (AAS Registry / Submodel Registry).

Descriptors are not part of the AAS metamodel, so they are modelled here
with pydantic. Embedded metamodel parts (semanticId, description,
administration, specificAssetIds, ...) are kept as plain JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _DescriptorModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_json(self) -> dict[str, Any]:
        """Serialize to the API's camelCase JSON, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ProtocolInformation(_DescriptorModel):
    """Protocol-specific information for reaching an endpoint."""

    href: str
    endpoint_protocol: str | None = Field(default=None, alias="endpointProtocol")
    endpoint_protocol_version: list[str] | None = Field(
        default=None, alias="endpointProtocolVersion"
    )
    subprotocol: str | None = None
    subprotocol_body: str | None = Field(default=None, alias="subprotocolBody")
    subprotocol_body_encoding: str | None = Field(default=None, alias="subprotocolBodyEncoding")
    security_attributes: list[dict[str, Any]] | None = Field(
        default=None, alias="securityAttributes"
    )


class Endpoint(_DescriptorModel):
    """An interface endpoint of an AAS or submodel (e.g. ``SUBMODEL-3.0``)."""

    interface: str
    protocol_information: ProtocolInformation = Field(alias="protocolInformation")


class SubmodelDescriptor(_DescriptorModel):
    """Registry entry describing where a submodel can be reached."""

    id: str
    id_short: str | None = Field(default=None, alias="idShort")
    description: list[dict[str, Any]] | None = None
    display_name: list[dict[str, Any]] | None = Field(default=None, alias="displayName")
    administration: dict[str, Any] | None = None
    semantic_id: dict[str, Any] | None = Field(default=None, alias="semanticId")
    supplemental_semantic_id: list[dict[str, Any]] | None = Field(
        default=None, alias="supplementalSemanticId"
    )
    extensions: list[dict[str, Any]] | None = None
    endpoints: list[Endpoint] = Field(default_factory=list)


class AssetAdministrationShellDescriptor(_DescriptorModel):
    """Registry entry describing an AAS, its asset and its submodels."""

    id: str
    id_short: str | None = Field(default=None, alias="idShort")
    description: list[dict[str, Any]] | None = None
    display_name: list[dict[str, Any]] | None = Field(default=None, alias="displayName")
    administration: dict[str, Any] | None = None
    asset_kind: str | None = Field(default=None, alias="assetKind")
    asset_type: str | None = Field(default=None, alias="assetType")
    global_asset_id: str | None = Field(default=None, alias="globalAssetId")
    specific_asset_ids: list[dict[str, Any]] | None = Field(
        default=None, alias="specificAssetIds"
    )
    extensions: list[dict[str, Any]] | None = None
    endpoints: list[Endpoint] | None = None
    submodel_descriptors: list[SubmodelDescriptor] | None = Field(
        default=None, alias="submodelDescriptors"
    )
