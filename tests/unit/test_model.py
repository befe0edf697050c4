"""Unit tests for paging, operation and descriptor models."""

from datetime import timedelta

import pytest

from aas_api_client.model import (
    AssetAdministrationShellDescriptor,
    Endpoint,
    Page,
    PagingMetadata,
    ProtocolInformation,
    SubmodelDescriptor,
)
from aas_api_client.model.operation import format_duration
from aas_api_client.query import PagingInfo


class TestPage:
    """Tests for Page and next_paging."""

    def test_next_paging_carries_cursor(self) -> None:
        page = Page(result=("a",), metadata=PagingMetadata(cursor="abc"))
        assert page.next_paging(limit=5) == PagingInfo(limit=5, cursor="abc")

    def test_last_page(self) -> None:
        page: Page[str] = Page(result=("a", "b"))
        assert page.next_paging() is None
        assert not page.has_more
        assert len(page) == 2

    def test_immutable(self) -> None:
        page: Page[str] = Page()
        with pytest.raises(AttributeError):
            page.result = ("x",)  # type: ignore[misc]


class TestFormatDuration:
    """Tests for ISO 8601 durations sent with operation requests."""

    @pytest.mark.parametrize(
        ("duration", "expected"),
        [
            (timedelta(seconds=60), "PT1M"),
            (timedelta(seconds=5), "PT5S"),
            (timedelta(hours=2, seconds=1), "PT2H1S"),
            (timedelta(0), "PT0S"),
            (timedelta(milliseconds=1500), "PT1.5S"),
        ],
    )
    def test_format(self, duration: timedelta, expected: str) -> None:
        assert format_duration(duration) == expected

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            format_duration(timedelta(seconds=-1))


class TestDescriptors:
    """Tests for registry descriptor serialization."""

    def test_shell_descriptor_json(self) -> None:
        """Test that nested descriptors are dumped with camelCase keys."""
        descriptor = AssetAdministrationShellDescriptor(
            id="urn:aas:1",
            global_asset_id="urn:asset:1",
            submodel_descriptors=[
                SubmodelDescriptor(
                    id="urn:sm:1",
                    endpoints=[
                        Endpoint(
                            interface="SUBMODEL-3.0",
                            protocol_information=ProtocolInformation(
                                href="http://host/submodels/x", endpoint_protocol="HTTP"
                            ),
                        )
                    ],
                )
            ],
        )
        assert descriptor.to_json() == {
            "id": "urn:aas:1",
            "globalAssetId": "urn:asset:1",
            "submodelDescriptors": [
                {
                    "id": "urn:sm:1",
                    "endpoints": [
                        {
                            "interface": "SUBMODEL-3.0",
                            "protocolInformation": {
                                "href": "http://host/submodels/x",
                                "endpointProtocol": "HTTP",
                            },
                        }
                    ],
                }
            ],
        }

    def test_submodel_descriptor_from_api_json(self) -> None:
        descriptor = SubmodelDescriptor.model_validate(
            {
                "id": "urn:sm:1",
                "semanticId": {"type": "ExternalReference", "keys": []},
                "endpoints": [],
            }
        )
        assert descriptor.semantic_id == {"type": "ExternalReference", "keys": []}
        assert descriptor.endpoints == []
