"""Integration tests against a running AAS server.

Set ``AAS_CLIENT_INTEGRATION_URL`` (e.g. ``http://localhost:8080/api/v3.0``)
to run them; the server must allow creating and deleting shells and submodels.
"""

import os
import uuid
from collections.abc import Iterator

import pytest
from basyx.aas import model

from aas_api_client.config import ClientConfig, ObservabilityConfig
from aas_api_client.exceptions import NotFoundError
from aas_api_client.interfaces import AASRepositoryInterface, SubmodelRepositoryInterface
from aas_api_client.query import PagingInfo, SubmodelSearchCriteria

INTEGRATION_URL = os.environ.get("AAS_CLIENT_INTEGRATION_URL")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not INTEGRATION_URL, reason="AAS_CLIENT_INTEGRATION_URL not set"),
]


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        base_url=INTEGRATION_URL or "http://localhost",
        observability=ObservabilityConfig(metrics_enabled=False),
    )


@pytest.fixture
def submodel() -> model.Submodel:
    """Create a throwaway submodel with one property."""
    return model.Submodel(
        id_=f"urn:test:sm:{uuid.uuid4()}",
        id_short="IntegrationTest",
        semantic_id=model.ExternalReference(
            (model.Key(model.KeyTypes.GLOBAL_REFERENCE, "urn:test:semantic:integration"),)
        ),
        submodel_element=[model.Property(id_short="Speed", value_type=int, value=10)],
    )


@pytest.fixture
def submodels(config: ClientConfig) -> Iterator[SubmodelRepositoryInterface]:
    with SubmodelRepositoryInterface(config=config) as api:
        yield api


class TestSubmodelLifecycle:
    """Create, read, update and delete a submodel on a live server."""

    def test_roundtrip(
        self, submodels: SubmodelRepositoryInterface, submodel: model.Submodel
    ) -> None:
        created = submodels.post(submodel)
        assert created.id == submodel.id
        try:
            sm_api = submodels.submodel_interface(submodel.id)
            assert sm_api.get_element_value("Speed") == 10

            sm_api.patch_element_value("Speed", 42)
            assert sm_api.get_element_value("Speed") == 42

            found = submodels.get_all(
                criteria=SubmodelSearchCriteria(semantic_id="urn:test:semantic:integration")
            )
            assert submodel.id in [sm.id for sm in found]
        finally:
            submodels.delete(submodel.id)

        with pytest.raises(NotFoundError):
            submodels.submodel_interface(submodel.id).get()


class TestShellPaging:
    """Paging through shells on a live server."""

    def test_pages_cover_all_shells(self, config: ClientConfig) -> None:
        with AASRepositoryInterface(config=config) as api:
            everything = {shell.id for shell in api.get_all()}
            paged: set[str] = set()
            paging: PagingInfo | None = PagingInfo(limit=1)
            while paging is not None:
                page = api.get_page(paging)
                paged.update(shell.id for shell in page)
                paging = page.next_paging(limit=1)
        assert paged == everything
