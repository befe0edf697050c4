"""AAS Basic Discovery interface (``/lookup/shells``)."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from basyx.aas import model

from aas_api_client import codec
from aas_api_client.exceptions import InvalidPayloadError
from aas_api_client.interfaces.base import BaseInterface, id_path
from aas_api_client.model.paging import Page
from aas_api_client.query import AssetLinkSearchCriteria, PagingInfo

logger = logging.getLogger(__name__)


class AASBasicDiscoveryInterface(BaseInterface):
    """Resolve asset links to shell identifiers and manage the links of a shell."""

    API_PATH = "/lookup/shells"

    def lookup_by_asset_link(
        self,
        asset_links: Iterable[model.SpecificAssetId] = (),
        paging: PagingInfo = PagingInfo.ALL,
        global_asset_ids: Iterable[str] = (),
    ) -> Page[str]:
        """Find the identifiers of all shells linked to the given assets.

        Servers disagree on how ``assetIds`` is encoded. The whole list is
        sent as one base64url JSON array first; if the answer cannot be
        decoded the request is repeated once with one encoded object per
        asset link.

        Args:
            asset_links: Specific asset ids to match.
            paging: Limit and cursor of the requested page.
            global_asset_ids: Global asset ids, sent with name ``globalAssetId``.

        Returns:
            A page of shell identifiers.
        """
        criteria = AssetLinkSearchCriteria(
            asset_ids=tuple(asset_links), global_asset_ids=tuple(global_asset_ids)
        )
        try:
            return self._get_page(None, codec.to_string, paging=paging, criteria=criteria)
        except InvalidPayloadError as e:
            logger.info("Asset link lookup failed (%s), retrying with per-item encoding", e)
        return self._get_page(
            None, codec.to_string, paging=paging, criteria=criteria.as_per_item()
        )

    def lookup_by_aas_id(self, aas_id: str) -> list[model.SpecificAssetId]:
        return self._get_list(id_path(aas_id), codec.to_specific_asset_id)

    def create_asset_links(
        self, asset_links: Iterable[model.SpecificAssetId], aas_id: str
    ) -> list[model.SpecificAssetId]:
        """Link the shell to the given assets, returning the stored links."""
        return self._post(
            id_path(aas_id),
            list(asset_links),
            _to_specific_asset_ids,
            expected=(201, 200),
        )

    def delete_asset_links(self, aas_id: str) -> None:
        self._delete(id_path(aas_id))


def _to_specific_asset_ids(data: Any) -> list[model.SpecificAssetId]:
    if not isinstance(data, list):
        raise InvalidPayloadError(f"Expected a JSON array, got {type(data).__name__}")
    return [codec.to_specific_asset_id(item) for item in data]
