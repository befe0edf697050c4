"""Concept Description Repository interface (``/concept-descriptions``)."""

from __future__ import annotations

from basyx.aas import model

from aas_api_client import codec
from aas_api_client.interfaces.base import BaseInterface, id_path
from aas_api_client.model.paging import Page
from aas_api_client.query import ConceptDescriptionSearchCriteria, PagingInfo

_to_concept_description = codec.metamodel(model.ConceptDescription)


class ConceptDescriptionRepositoryInterface(BaseInterface):
    API_PATH = "/concept-descriptions"

    def get_all(
        self, criteria: ConceptDescriptionSearchCriteria | None = None
    ) -> list[model.ConceptDescription]:
        return self._get_all(
            None,
            _to_concept_description,
            criteria=criteria or ConceptDescriptionSearchCriteria(),
        )

    def get_page(
        self, paging: PagingInfo, criteria: ConceptDescriptionSearchCriteria | None = None
    ) -> Page[model.ConceptDescription]:
        return self._get_page(
            None,
            _to_concept_description,
            paging=paging,
            criteria=criteria or ConceptDescriptionSearchCriteria(),
        )

    def post(self, concept_description: model.ConceptDescription) -> model.ConceptDescription:
        return self._post(None, concept_description, _to_concept_description)

    def get(self, cd_id: str) -> model.ConceptDescription:
        return self._get(id_path(cd_id), _to_concept_description)

    def put(self, cd_id: str, concept_description: model.ConceptDescription) -> None:
        self._put(id_path(cd_id), concept_description)

    def delete(self, cd_id: str) -> None:
        self._delete(id_path(cd_id))
