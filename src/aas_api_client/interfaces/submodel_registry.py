"""Submodel Registry interface (``/submodel-descriptors``).

Also used for the submodel descriptors nested in a shell descriptor
(``/shell-descriptors/{aasIdentifier}/submodel-descriptors``).
"""

from __future__ import annotations

from aas_api_client import codec
from aas_api_client.interfaces.base import BaseInterface, id_path
from aas_api_client.model.descriptors import SubmodelDescriptor
from aas_api_client.model.paging import Page
from aas_api_client.query import PagingInfo


class SubmodelRegistryInterface(BaseInterface):
    API_PATH = "/submodel-descriptors"

    def get_all(self) -> list[SubmodelDescriptor]:
        return self._get_all(None, codec.to_submodel_descriptor)

    def get_page(self, paging: PagingInfo) -> Page[SubmodelDescriptor]:
        return self._get_page(None, codec.to_submodel_descriptor, paging=paging)

    def post(self, descriptor: SubmodelDescriptor) -> SubmodelDescriptor:
        return self._post(None, descriptor, codec.to_submodel_descriptor)

    def get(self, submodel_id: str) -> SubmodelDescriptor:
        return self._get(id_path(submodel_id), codec.to_submodel_descriptor)

    def put(self, submodel_id: str, descriptor: SubmodelDescriptor) -> None:
        self._put(id_path(submodel_id), descriptor)

    def delete(self, submodel_id: str) -> None:
        self._delete(id_path(submodel_id))
