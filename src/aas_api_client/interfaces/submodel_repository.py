"""Submodel Repository interface (``/submodels``)."""

from __future__ import annotations

from typing import Any

from basyx.aas import model

from aas_api_client import codec
from aas_api_client.interfaces.base import BaseInterface, id_path
from aas_api_client.interfaces.submodel import SubmodelInterface
from aas_api_client.model.paging import Page
from aas_api_client.query import Content, PagingInfo, QueryModifier, SubmodelSearchCriteria

_to_submodel = codec.metamodel(model.Submodel)


def _criteria(criteria: SubmodelSearchCriteria | None) -> SubmodelSearchCriteria:
    return criteria if criteria is not None else SubmodelSearchCriteria()


class SubmodelRepositoryInterface(BaseInterface):
    """List, create, replace and delete submodels of a repository.

    Each listing is available in the normal, ``$metadata``, ``$value``,
    ``$reference`` and ``$path`` serializations, both as a complete list
    (``get_all_*``) and page by page (``get_page_*``).
    """

    API_PATH = "/submodels"

    def get_all(
        self,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        criteria: SubmodelSearchCriteria | None = None,
    ) -> list[model.Submodel]:
        return self._get_all(None, _to_submodel, modifier=modifier, criteria=_criteria(criteria))

    def get_page(
        self,
        paging: PagingInfo,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        criteria: SubmodelSearchCriteria | None = None,
    ) -> Page[model.Submodel]:
        return self._get_page(
            None, _to_submodel, modifier=modifier, paging=paging, criteria=_criteria(criteria)
        )

    def get_all_metadata(
        self,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        criteria: SubmodelSearchCriteria | None = None,
    ) -> list[model.Submodel]:
        return self._get_all(None, _to_submodel, Content.METADATA, modifier, _criteria(criteria))

    def get_page_metadata(
        self,
        paging: PagingInfo,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        criteria: SubmodelSearchCriteria | None = None,
    ) -> Page[model.Submodel]:
        return self._get_page(
            None, _to_submodel, Content.METADATA, modifier, paging, _criteria(criteria)
        )

    def get_all_values(
        self,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        criteria: SubmodelSearchCriteria | None = None,
    ) -> list[Any]:
        return self._get_all(None, codec.to_json, Content.VALUE, modifier, _criteria(criteria))

    def get_page_values(
        self,
        paging: PagingInfo,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        criteria: SubmodelSearchCriteria | None = None,
    ) -> Page[Any]:
        return self._get_page(
            None, codec.to_json, Content.VALUE, modifier, paging, _criteria(criteria)
        )

    def get_all_references(
        self, criteria: SubmodelSearchCriteria | None = None
    ) -> list[model.Reference]:
        return self._get_all(
            None, codec.to_reference, Content.REFERENCE, QueryModifier.MINIMAL, _criteria(criteria)
        )

    def get_page_references(
        self, paging: PagingInfo, criteria: SubmodelSearchCriteria | None = None
    ) -> Page[model.Reference]:
        return self._get_page(
            None,
            codec.to_reference,
            Content.REFERENCE,
            QueryModifier.MINIMAL,
            paging,
            _criteria(criteria),
        )

    def get_all_paths(
        self,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        criteria: SubmodelSearchCriteria | None = None,
    ) -> list[Any]:
        return self._get_all(None, codec.to_json, Content.PATH, modifier, _criteria(criteria))

    def get_page_paths(
        self,
        paging: PagingInfo,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        criteria: SubmodelSearchCriteria | None = None,
    ) -> Page[Any]:
        return self._get_page(
            None, codec.to_json, Content.PATH, modifier, paging, _criteria(criteria)
        )

    def post(self, submodel: model.Submodel) -> model.Submodel:
        return self._post(None, submodel, _to_submodel)

    def put(self, submodel_id: str, submodel: model.Submodel) -> None:
        self._put(id_path(submodel_id), submodel)

    def delete(self, submodel_id: str) -> None:
        self._delete(id_path(submodel_id))

    def submodel_interface(self, submodel_id: str) -> SubmodelInterface:
        return self._child(SubmodelInterface, id_path(submodel_id))
