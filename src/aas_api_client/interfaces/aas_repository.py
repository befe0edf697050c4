"""AAS Repository interface (``/shells``)."""

from __future__ import annotations

from basyx.aas import model

from aas_api_client import codec
from aas_api_client.interfaces.aas import AASInterface
from aas_api_client.interfaces.base import BaseInterface, id_path
from aas_api_client.model.paging import Page
from aas_api_client.query import AASSearchCriteria, Content, PagingInfo, QueryModifier

_to_shell = codec.metamodel(model.AssetAdministrationShell)


class AASRepositoryInterface(BaseInterface):
    """List, create and delete shells; open a single shell via ``aas_interface``."""

    API_PATH = "/shells"

    def get_all(
        self,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        criteria: AASSearchCriteria | None = None,
    ) -> list[model.AssetAdministrationShell]:
        return self._get_all(
            None, _to_shell, modifier=modifier, criteria=criteria or AASSearchCriteria()
        )

    def get_page(
        self,
        paging: PagingInfo,
        modifier: QueryModifier = QueryModifier.DEFAULT,
        criteria: AASSearchCriteria | None = None,
    ) -> Page[model.AssetAdministrationShell]:
        return self._get_page(
            None,
            _to_shell,
            modifier=modifier,
            paging=paging,
            criteria=criteria or AASSearchCriteria(),
        )

    def get_all_as_reference(
        self, criteria: AASSearchCriteria | None = None
    ) -> list[model.Reference]:
        return self._get_all(
            None, codec.to_reference, Content.REFERENCE, criteria=criteria or AASSearchCriteria()
        )

    def get_page_as_reference(
        self, paging: PagingInfo, criteria: AASSearchCriteria | None = None
    ) -> Page[model.Reference]:
        return self._get_page(
            None,
            codec.to_reference,
            Content.REFERENCE,
            paging=paging,
            criteria=criteria or AASSearchCriteria(),
        )

    def post(self, aas: model.AssetAdministrationShell) -> model.AssetAdministrationShell:
        return self._post(None, aas, _to_shell)

    def delete(self, aas_id: str) -> None:
        self._delete(id_path(aas_id))

    def aas_interface(self, aas_id: str) -> AASInterface:
        return self._child(AASInterface, id_path(aas_id))
