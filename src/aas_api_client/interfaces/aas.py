"""Asset Administration Shell interface (``/shells/{aasIdentifier}``)."""

from __future__ import annotations

from basyx.aas import model

from aas_api_client import codec
from aas_api_client.interfaces.base import BaseInterface, id_path
from aas_api_client.interfaces.submodel import SubmodelInterface
from aas_api_client.model.files import InMemoryFile
from aas_api_client.model.paging import Page
from aas_api_client.query import Content, PagingInfo, QueryModifier

_ASSET_INFORMATION = "/asset-information"
_THUMBNAIL = _ASSET_INFORMATION + "/thumbnail"
_SUBMODEL_REFS = "/submodel-refs"
_SUBMODELS = "/submodels"

_to_shell = codec.metamodel(model.AssetAdministrationShell)


class AASInterface(BaseInterface):
    """Access to a single shell: asset information, thumbnail and submodel references."""

    def get(self) -> model.AssetAdministrationShell:
        return self._get(None, _to_shell)

    def put(self, aas: model.AssetAdministrationShell) -> None:
        self._put(None, aas)

    def get_as_reference(self) -> model.Reference:
        return self._get(None, codec.to_reference, Content.REFERENCE)

    def get_asset_information(self) -> model.AssetInformation:
        return self._get(_ASSET_INFORMATION, codec.to_asset_information)

    def put_asset_information(self, asset_information: model.AssetInformation) -> None:
        self._put(_ASSET_INFORMATION, asset_information)

    def get_thumbnail(self) -> InMemoryFile:
        return self._get_file(_THUMBNAIL, accept="*/*")

    def put_thumbnail(self, thumbnail: InMemoryFile) -> None:
        self._put_file(_THUMBNAIL, thumbnail)

    def delete_thumbnail(self) -> None:
        self._delete(_THUMBNAIL, expected=(200, 204))

    def get_all_submodel_references(self) -> list[model.Reference]:
        return self._get_all(_SUBMODEL_REFS, codec.to_reference)

    def get_submodel_references(
        self, paging: PagingInfo, modifier: QueryModifier = QueryModifier.DEFAULT
    ) -> Page[model.Reference]:
        return self._get_page(_SUBMODEL_REFS, codec.to_reference, modifier=modifier, paging=paging)

    def post_submodel_reference(self, reference: model.Reference) -> model.Reference:
        return self._post(_SUBMODEL_REFS, reference, codec.to_reference)

    def delete_submodel_reference(self, submodel_id: str) -> None:
        self._delete(_SUBMODEL_REFS + id_path(submodel_id))

    def delete_submodel(self, submodel_id: str) -> None:
        """Delete the submodel and its reference from the shell."""
        self._delete(_SUBMODELS + id_path(submodel_id))

    def submodel_interface(self, submodel_id: str) -> SubmodelInterface:
        """Interface for a submodel addressed through this shell."""
        return self._child(SubmodelInterface, _SUBMODELS + id_path(submodel_id))
