"""Unit tests for the AAS basic discovery interface."""

import json
from collections.abc import Callable

import pytest
from basyx.aas import model

from aas_api_client.encoding import base64url_decode, base64url_encode
from aas_api_client.exceptions import InvalidPayloadError, NotFoundError
from aas_api_client.interfaces import AASBasicDiscoveryInterface
from aas_api_client.query import PagingInfo
from tests.conftest import MockServer

AAS_ID = "https://example.com/aas/robot-001"
LINK = model.SpecificAssetId(name="serialNumber", value="12345")


@pytest.fixture
def discovery(make_interface: Callable) -> AASBasicDiscoveryInterface:
    return make_interface(AASBasicDiscoveryInterface)


class TestLookupByAssetLink:
    """Tests for GET /lookup/shells."""

    def test_lookup(self, discovery: AASBasicDiscoveryInterface, server: MockServer) -> None:
        server.respond(json={"result": [AAS_ID]})
        page = discovery.lookup_by_asset_link([LINK], PagingInfo(limit=1))
        assert list(page) == [AAS_ID]
        assert len(server.requests) == 1
        params = server.last.url.params
        assert params["limit"] == "1"
        assert json.loads(base64url_decode(params["assetIds"])) == [
            {"name": "serialNumber", "value": "12345"}
        ]

    def test_global_asset_id(self, discovery: AASBasicDiscoveryInterface, server: MockServer) -> None:
        server.respond(json={"result": []})
        discovery.lookup_by_asset_link(global_asset_ids=["urn:asset:1"])
        links = json.loads(base64url_decode(server.last.url.params["assetIds"]))
        assert links == [{"name": "globalAssetId", "value": "urn:asset:1"}]

    def test_fallback_to_per_item_encoding(
        self, discovery: AASBasicDiscoveryInterface, server: MockServer
    ) -> None:
        """Test that an undecodable answer triggers one retry with per-item encoding."""
        server.respond(json={"unexpected": True})
        server.respond(json={"result": [AAS_ID]})
        page = discovery.lookup_by_asset_link([LINK, model.SpecificAssetId(name="b", value="2")])
        assert list(page) == [AAS_ID]
        assert len(server.requests) == 2
        retried = server.requests[1].url.params["assetIds"].split(",")
        assert [json.loads(base64url_decode(item))["name"] for item in retried] == [
            "serialNumber",
            "b",
        ]

    def test_fallback_fails_too(self, discovery: AASBasicDiscoveryInterface, server: MockServer) -> None:
        server.respond(json={"unexpected": True})
        server.respond(json={"unexpected": True})
        with pytest.raises(InvalidPayloadError):
            discovery.lookup_by_asset_link([LINK])
        assert len(server.requests) == 2

    def test_status_error_not_retried(
        self, discovery: AASBasicDiscoveryInterface, server: MockServer
    ) -> None:
        server.respond(404)
        with pytest.raises(NotFoundError):
            discovery.lookup_by_asset_link([LINK])
        assert len(server.requests) == 1


class TestAssetLinks:
    """Tests for /lookup/shells/{aasIdentifier}."""

    def test_lookup_by_aas_id(self, discovery: AASBasicDiscoveryInterface, server: MockServer) -> None:
        server.respond(json=[{"name": "serialNumber", "value": "12345"}])
        links = discovery.lookup_by_aas_id(AAS_ID)
        assert [(link.name, link.value) for link in links] == [("serialNumber", "12345")]
        assert server.last_target() == "/lookup/shells/" + base64url_encode(AAS_ID)

    @pytest.mark.parametrize("status_code", [200, 201])
    def test_create_asset_links(
        self, discovery: AASBasicDiscoveryInterface, server: MockServer, status_code: int
    ) -> None:
        server.respond(status_code, json=[{"name": "serialNumber", "value": "12345"}])
        created = discovery.create_asset_links([LINK], AAS_ID)
        assert created[0].value == "12345"
        assert server.last.method == "POST"
        assert server.last_json() == [{"name": "serialNumber", "value": "12345"}]

    def test_create_asset_links_invalid_answer(
        self, discovery: AASBasicDiscoveryInterface, server: MockServer
    ) -> None:
        server.respond(201, json={"name": "serialNumber"})
        with pytest.raises(InvalidPayloadError):
            discovery.create_asset_links([LINK], AAS_ID)

    def test_delete_asset_links(self, discovery: AASBasicDiscoveryInterface, server: MockServer) -> None:
        server.respond(204)
        discovery.delete_asset_links(AAS_ID)
        assert server.last.method == "DELETE"
        assert server.last_target() == "/lookup/shells/" + base64url_encode(AAS_ID)
