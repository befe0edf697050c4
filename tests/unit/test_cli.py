"""Unit tests for the aas-client command line."""

import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner, Result

from aas_api_client import __version__
from aas_api_client.cli import app
from aas_api_client.config import ClientConfig
from aas_api_client.encoding import base64url_decode
from aas_api_client.http import create_http_client
from tests.conftest import BASE_URL, MockServer

runner = CliRunner()

SHELL_JSON = {
    "modelType": "AssetAdministrationShell",
    "id": "urn:aas:robot-001",
    "idShort": "Robot",
    "assetInformation": {"assetKind": "Instance", "globalAssetId": "urn:asset:robot-001"},
}


@pytest.fixture
def cli_server(
    server: MockServer, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> MockServer:
    """Route every client the CLI creates to the mock server."""

    def mock_client(config: ClientConfig, auth: httpx.Auth | None = None) -> httpx.Client:
        return create_http_client(config, auth, transport=httpx.MockTransport(server.handler))

    monkeypatch.setattr("aas_api_client.interfaces.base.create_http_client", mock_client)
    monkeypatch.setenv("AAS_CLIENT_CONFIG_FILE", str(tmp_path / "absent.yaml"))
    monkeypatch.delenv("AAS_CLIENT_BASE_URL", raising=False)
    monkeypatch.delenv("AAS_CLIENT_AUTH_TOKEN", raising=False)
    return server


def invoke(*args: str) -> Result:
    return runner.invoke(app, ["--url", BASE_URL, *args])


class TestCommands:
    """Tests for the read commands."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"aas-client {__version__}" in result.output

    def test_description(self, cli_server: MockServer) -> None:
        cli_server.respond(json={"profiles": ["profile-a", "profile-b"]})
        result = invoke("description")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["profile-a", "profile-b"]

    def test_shells(self, cli_server: MockServer) -> None:
        cli_server.respond(json={"result": [SHELL_JSON]})
        result = invoke("shells", "--id-short", "Robot")
        assert result.exit_code == 0
        assert "urn:aas:robot-001\tRobot" in result.output
        assert cli_server.last.url.params["idShort"] == "Robot"

    def test_shells_limit(self, cli_server: MockServer) -> None:
        cli_server.respond(json={"result": [SHELL_JSON], "paging_metadata": {"cursor": "next"}})
        result = invoke("shells", "--limit", "1")
        assert result.exit_code == 0
        assert len(cli_server.requests) == 1
        assert cli_server.last.url.params["limit"] == "1"

    def test_shell_as_json(self, cli_server: MockServer) -> None:
        cli_server.respond(json=SHELL_JSON)
        result = invoke("shell", "urn:aas:robot-001")
        assert result.exit_code == 0
        assert json.loads(result.output)["idShort"] == "Robot"

    def test_submodel_value(self, cli_server: MockServer) -> None:
        cli_server.respond(json={"MaxSpeed": 5000})
        result = invoke("submodel", "urn:sm:1", "--value")
        assert result.exit_code == 0
        assert json.loads(result.output) == {"MaxSpeed": 5000}
        assert cli_server.last.url.path.endswith("/$value")

    def test_lookup(self, cli_server: MockServer) -> None:
        cli_server.respond(json={"result": ["urn:aas:robot-001"]})
        result = invoke("lookup", "-a", "serialNumber=12345")
        assert result.exit_code == 0
        assert result.output.strip() == "urn:aas:robot-001"
        links = json.loads(base64url_decode(cli_server.last.url.params["assetIds"]))
        assert links == [{"name": "serialNumber", "value": "12345"}]


class TestErrors:
    """Tests for error exits."""

    def test_server_error_exits_1(self, cli_server: MockServer) -> None:
        cli_server.respond(404, json={"messages": [{"text": "not found"}]})
        result = invoke("shell", "urn:aas:missing")
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_lookup_requires_asset(self, cli_server: MockServer) -> None:
        result = invoke("lookup")
        assert result.exit_code == 1
        assert cli_server.requests == []

    def test_lookup_rejects_malformed_asset_id(self, cli_server: MockServer) -> None:
        result = invoke("lookup", "-a", "serialNumber")
        assert result.exit_code == 2

    def test_invalid_config_file(self, cli_server: MockServer, tmp_path: Path) -> None:
        path = tmp_path / "client.yaml"
        path.write_text("timeout_seconds: soon\n")
        result = runner.invoke(app, ["--config", str(path), "shells"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output
