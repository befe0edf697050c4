"""AAS Registry interface (``/shell-descriptors``)."""

from __future__ import annotations

from aas_api_client import codec
from aas_api_client.interfaces.base import BaseInterface, id_path
from aas_api_client.interfaces.submodel_registry import SubmodelRegistryInterface
from aas_api_client.model.descriptors import AssetAdministrationShellDescriptor
from aas_api_client.model.paging import Page
from aas_api_client.query import AASDescriptorSearchCriteria, PagingInfo


class AASRegistryInterface(BaseInterface):
    """Register, look up and remove shell descriptors."""

    API_PATH = "/shell-descriptors"

    def get_all(
        self, criteria: AASDescriptorSearchCriteria | None = None
    ) -> list[AssetAdministrationShellDescriptor]:
        return self._get_all(
            None, codec.to_shell_descriptor, criteria=criteria or AASDescriptorSearchCriteria()
        )

    def get_page(
        self, paging: PagingInfo, criteria: AASDescriptorSearchCriteria | None = None
    ) -> Page[AssetAdministrationShellDescriptor]:
        return self._get_page(
            None,
            codec.to_shell_descriptor,
            paging=paging,
            criteria=criteria or AASDescriptorSearchCriteria(),
        )

    def post(
        self, descriptor: AssetAdministrationShellDescriptor
    ) -> AssetAdministrationShellDescriptor:
        return self._post(None, descriptor, codec.to_shell_descriptor)

    def get(self, aas_id: str) -> AssetAdministrationShellDescriptor:
        return self._get(id_path(aas_id), codec.to_shell_descriptor)

    def put(self, aas_id: str, descriptor: AssetAdministrationShellDescriptor) -> None:
        self._put(id_path(aas_id), descriptor)

    def delete(self, aas_id: str) -> None:
        self._delete(id_path(aas_id))

    def submodel_registry_interface(self, aas_id: str) -> SubmodelRegistryInterface:
        """Interface for the submodel descriptors registered under one shell."""
        return self._child(SubmodelRegistryInterface, id_path(aas_id))
