"""Unit tests for the concept description, description and serialization interfaces."""

import json
from collections.abc import Callable

import pytest
from basyx.aas import model

from aas_api_client.encoding import base64url_encode
from aas_api_client.exceptions import InvalidPayloadError
from aas_api_client.interfaces import (
    ConceptDescriptionRepositoryInterface,
    DescriptionInterface,
    SerializationInterface,
)
from aas_api_client.interfaces.serialization import AASX_CONTENT_TYPE
from aas_api_client.query import ConceptDescriptionSearchCriteria, PagingInfo
from tests.conftest import MockServer

CD_ID = "https://example.com/cd/max-speed"

CD_JSON = {"modelType": "ConceptDescription", "id": CD_ID, "idShort": "MaxSpeed"}

ENVIRONMENT_JSON = {
    "assetAdministrationShells": [
        {
            "modelType": "AssetAdministrationShell",
            "id": "urn:aas:1",
            "idShort": "Robot",
            "assetInformation": {"assetKind": "Instance", "globalAssetId": "urn:asset:1"},
        }
    ],
    "submodels": [{"modelType": "Submodel", "id": "urn:sm:1", "idShort": "Nameplate"}],
    "conceptDescriptions": [CD_JSON],
}


class TestConceptDescriptionRepositoryInterface:
    """Tests for /concept-descriptions."""

    @pytest.fixture
    def repo(self, make_interface: Callable) -> ConceptDescriptionRepositoryInterface:
        return make_interface(ConceptDescriptionRepositoryInterface)

    def test_get_all(self, repo: ConceptDescriptionRepositoryInterface, server: MockServer) -> None:
        server.respond(json={"result": [CD_JSON]})
        cds = repo.get_all(ConceptDescriptionSearchCriteria(id_short="MaxSpeed"))
        assert isinstance(cds[0], model.ConceptDescription)
        assert server.last_target() == "/concept-descriptions?idShort=MaxSpeed"

    def test_get_page(self, repo: ConceptDescriptionRepositoryInterface, server: MockServer) -> None:
        server.respond(json={"result": [CD_JSON]})
        page = repo.get_page(PagingInfo(limit=1, cursor="abc"))
        assert page.result[0].id == CD_ID
        assert server.last_target() == (
            f"/concept-descriptions?limit=1&cursor={base64url_encode('abc')}"
        )

    def test_crud(self, repo: ConceptDescriptionRepositoryInterface, server: MockServer) -> None:
        cd = model.ConceptDescription(id_=CD_ID, id_short="MaxSpeed")
        path = "/concept-descriptions/" + base64url_encode(CD_ID)

        server.respond(201, json=CD_JSON)
        repo.post(cd)
        assert server.last_json()["modelType"] == "ConceptDescription"

        server.respond(json=CD_JSON)
        assert repo.get(CD_ID).id_short == "MaxSpeed"
        assert server.last_target() == path

        server.respond(204)
        repo.put(CD_ID, cd)
        server.respond(204)
        repo.delete(CD_ID)
        assert [r.method for r in server.requests] == ["POST", "GET", "PUT", "DELETE"]


class TestDescriptionInterface:
    """Tests for /description."""

    def test_profiles(self, make_interface: Callable, server: MockServer) -> None:
        profiles = [
            "https://admin-shell.io/aas/API/3/0/"
            "AssetAdministrationShellRepositoryServiceSpecification/SSP-001"
        ]
        server.respond(json={"profiles": profiles})
        assert make_interface(DescriptionInterface).get() == profiles
        assert server.last_target() == "/description"

    def test_bare_list(self, make_interface: Callable, server: MockServer) -> None:
        server.respond(json=["a", "b"])
        assert make_interface(DescriptionInterface).get() == ["a", "b"]

    def test_invalid_profiles(self, make_interface: Callable, server: MockServer) -> None:
        server.respond(json={"profiles": "a"})
        with pytest.raises(InvalidPayloadError):
            make_interface(DescriptionInterface).get()


class TestSerializationInterface:
    """Tests for /serialization."""

    def test_aasx_package(self, make_interface: Callable, server: MockServer) -> None:
        server.respond(content=b"PK\x03\x04", headers={"Content-Type": AASX_CONTENT_TYPE})
        package = make_interface(SerializationInterface).get_aasx_package(["urn:aas:1"], ["urn:sm:1"])
        assert package.content == b"PK\x03\x04"
        assert package.content_type == AASX_CONTENT_TYPE
        assert server.last.headers["Accept"] == AASX_CONTENT_TYPE
        assert server.last_target() == (
            f"/serialization?aasIds={base64url_encode('urn:aas:1')}"
            f"&submodelIds={base64url_encode('urn:sm:1')}"
        )

    def test_environment(self, make_interface: Callable, server: MockServer) -> None:
        server.respond(content=json.dumps(ENVIRONMENT_JSON).encode("utf-8"))
        store = make_interface(SerializationInterface).get_environment(
            include_concept_descriptions=False
        )
        assert len(store) == 3
        assert isinstance(store.get("urn:sm:1"), model.Submodel)
        assert server.last_target() == "/serialization?includeConceptDescriptions=false"

    def test_invalid_environment(self, make_interface: Callable, server: MockServer) -> None:
        server.respond(json={"assetAdministrationShells": [{"modelType": "AssetAdministrationShell"}]})
        with pytest.raises(InvalidPayloadError):
            make_interface(SerializationInterface).get_environment()

    def test_environment_not_utf8(self, make_interface: Callable, server: MockServer) -> None:
        server.respond(content=b"\xff\xfe{")
        with pytest.raises(InvalidPayloadError):
            make_interface(SerializationInterface).get_environment()
