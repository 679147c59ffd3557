"""Tests for the command line interface."""

import httpx
import pytest
from click.testing import CliRunner

from conftest import RecordingHandler
from starlikers.api.client import AstronomyApiClient
from starlikers.api.proxy import ProxyApiClient
from starlikers.cli.context import CliContext
from starlikers.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def invoke(runner, tmp_path):
    """Run the CLI against a temporary config directory."""
    def run(*args: str):
        return runner.invoke(cli, ["--config-dir", str(tmp_path), *args])
    return run


@pytest.fixture
def api(monkeypatch):
    """Route the CLI's API client through a recording handler."""
    holder: dict[str, RecordingHandler] = {}

    def use(*replies):
        handler = RecordingHandler(*replies)
        holder["handler"] = handler

        def make_transport(self):
            return AstronomyApiClient(
                self.config.credentials,
                base_url=self.config.base_url,
                client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
            )

        monkeypatch.setattr(CliContext, "make_transport", make_transport)
        return handler

    return use


@pytest.fixture
def network(monkeypatch):
    """Back every client the CLI creates itself with a recording handler."""
    real_client = httpx.AsyncClient

    def use(*replies):
        handler = RecordingHandler(*replies)

        def factory(**kwargs):
            return real_client(transport=httpx.MockTransport(handler), **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", factory)
        return handler

    return use


class TestConfigCommands:

    def test_credentials_and_show(self, invoke):
        result = invoke("config", "credentials", "my-id", "my-secret")
        assert result.exit_code == 0
        assert "saved" in result.output

        result = invoke("config", "show")
        assert result.exit_code == 0
        assert "my-id" in result.output
        assert "my-secret" not in result.output

    def test_theme(self, invoke):
        assert invoke("config", "theme", "light").exit_code == 0
        assert "Theme: light" in invoke("config", "show").output

    def test_invalid_theme(self, invoke):
        assert invoke("config", "theme", "sepia").exit_code != 0

    def test_set_invalid_value(self, invoke):
        result = invoke("config", "set", "transport", "pigeon")
        assert result.exit_code == 1


class TestCatalogCommands:

    def test_constellations_filter(self, invoke):
        result = invoke("catalog", "constellations", "ursa")
        assert result.exit_code == 0
        assert "Ursa Major" in result.output
        assert "Orion" not in result.output

    def test_presets(self, invoke):
        result = invoke("catalog", "presets")
        assert result.exit_code == 0
        assert "scientific" in result.output


class TestChartCommand:

    def test_success(self, invoke, api):
        invoke("config", "credentials", "id", "secret")
        handler = api(httpx.Response(200, json={"data": {"imageUrl": "https://img.test/o.png"}}))

        result = invoke(
            "chart", "ori", "--location", "33.775867,-84.39733", "--date", "2024-06-01", "--share"
        )

        assert result.exit_code == 0, result.output
        assert "https://img.test/o.png" in result.output
        assert "Star Chart - Orion" in result.output
        assert handler.json_body()["view"]["parameters"]["constellation"] == "ori"

    def test_lat_lon_options(self, invoke, api):
        invoke("config", "credentials", "id", "secret")
        handler = api(httpx.Response(200, json={"data": {"imageUrl": "https://img.test/o.png"}}))

        result = invoke("chart", "uma", "--lat", "-23.5", "--lon", "-46.6", "--date", "2024-06-01")

        assert result.exit_code == 0, result.output
        observer = handler.json_body()["observer"]
        assert observer == {"latitude": -23.5, "longitude": -46.6, "date": "2024-06-01"}

    def test_invalid_location_not_sent(self, invoke, api):
        invoke("config", "credentials", "id", "secret")
        handler = api(httpx.Response(200, json={}))

        result = invoke("chart", "ori", "--location", "95,10", "--date", "2024-06-01")

        assert result.exit_code == 1
        assert "latitude" in result.output
        assert handler.calls == 0

    def test_unauthorized(self, invoke, api):
        invoke("config", "credentials", "id", "wrong")
        api(httpx.Response(401, json={"message": "Unauthorized"}))

        result = invoke("chart", "ori", "--location", "1,2", "--date", "2024-06-01")

        assert result.exit_code == 1
        assert "Invalid API credentials" in result.output

    def test_missing_credentials(self, invoke, api):
        handler = api(httpx.Response(200, json={}))

        result = invoke("chart", "ori", "--location", "1,2", "--date", "2024-06-01")

        assert result.exit_code == 1
        assert "credentials" in result.output
        assert handler.calls == 0

    def test_download(self, invoke, api, tmp_path, monkeypatch):
        invoke("config", "credentials", "id", "secret")
        api(httpx.Response(200, json={"data": {"imageUrl": "https://img.test/o.png"}}))
        saved = []

        async def fake_download(url, destination, client=None):
            saved.append((url, destination))
            return destination

        monkeypatch.setattr("starlikers.cli.context.download_image", fake_download)
        target = tmp_path / "chart.png"

        result = invoke(
            "chart", "ori", "--location", "1,2", "--date", "2024-06-01", "--download", str(target)
        )

        assert result.exit_code == 0, result.output
        assert saved == [("https://img.test/o.png", target)]


class TestMoonCommand:

    def test_preset(self, invoke, api):
        invoke("config", "credentials", "id", "secret")
        handler = api(httpx.Response(200, json={"data": {"imageUrl": "https://img.test/m.png"}}))

        result = invoke(
            "moon", "--lat", "10", "--lon", "20", "--date", "2024-06-01", "--preset", "modern"
        )

        assert result.exit_code == 0, result.output
        assert "https://img.test/m.png" in result.output
        body = handler.json_body()
        assert body["style"]["moonStyle"] == "shaded"
        assert body["view"]["type"] == "landscape-simple"
        assert handler.requests[0].url.path.endswith("/studio/moon-phase")

    def test_unknown_preset(self, invoke, api):
        invoke("config", "credentials", "id", "secret")
        handler = api(httpx.Response(200, json={}))

        result = invoke("moon", "--lat", "10", "--lon", "20", "--preset", "baroque")

        assert result.exit_code == 1
        assert handler.calls == 0


class TestTransportSelection:

    def test_default_is_direct_client(self, invoke, tmp_path):
        invoke("config", "credentials", "my-id", "my-secret")
        invoke("config", "set", "base_url", "https://gw.test/v2/")

        transport = CliContext.create(config_dir=tmp_path).make_transport()

        assert isinstance(transport, AstronomyApiClient)
        assert transport.credentials.app_id == "my-id"
        assert transport.credentials.app_secret == "my-secret"
        assert transport.base_url == "https://gw.test/v2"

    def test_proxy_transport(self, invoke, tmp_path):
        assert invoke("config", "set", "transport", "proxy").exit_code == 0
        assert invoke("config", "set", "proxy_url", "https://proxy.test/buscar.php").exit_code == 0

        transport = CliContext.create(config_dir=tmp_path).make_transport()

        assert isinstance(transport, ProxyApiClient)
        assert transport.proxy_url == "https://proxy.test/buscar.php"

    def test_proxy_without_url(self, invoke, network):
        invoke("config", "set", "transport", "proxy")
        handler = network(httpx.Response(200, json={}))

        result = invoke("chart", "ori", "--location", "1,2", "--date", "2024-06-01")

        assert result.exit_code == 1
        assert "proxy_url" in result.output
        assert handler.calls == 0

    def test_chart_through_proxy(self, invoke, network):
        invoke("config", "set", "transport", "proxy")
        invoke("config", "set", "proxy_url", "https://proxy.test/buscar.php")
        handler = network(httpx.Response(
            200, json={"constellation": "ori", "style": "default", "image": "https://img.test/o.png"}
        ))

        result = invoke("chart", "ori", "--location", "1,2", "--date", "2024-06-01")

        assert result.exit_code == 0, result.output
        assert "https://img.test/o.png" in result.output
        assert "not applied" in result.output
        assert "2024-06-01" not in result.output
        assert handler.requests[0].url.params["constellation"] == "ori"

    def test_chart_direct(self, invoke, network):
        invoke("config", "credentials", "id", "secret")
        handler = network(httpx.Response(200, json={"data": {"imageUrl": "https://img.test/o.png"}}))

        result = invoke("chart", "ori", "--location", "1,2", "--date", "2024-06-01")

        assert result.exit_code == 0, result.output
        assert "2024-06-01" in result.output
        request = handler.requests[0]
        assert str(request.url) == "https://api.astronomyapi.com/api/v2/studio/star-chart"
        assert request.headers["Authorization"].startswith("Basic ")
