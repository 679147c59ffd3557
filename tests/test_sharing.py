"""Tests for share text and image download."""

import asyncio
from datetime import datetime, timezone

import httpx
import pytest

from conftest import RecordingHandler
from starlikers.api.models import ChartResult
from starlikers.core.exceptions import ApiError
from starlikers.services.sharing import default_filename, download_image, share_text


@pytest.fixture
def star_result() -> ChartResult:
    return ChartResult(
        endpoint="star-chart",
        image_url="https://img.test/charts/ori.png",
        payload={"style": "default", "observer": {"date": "2024-06-01"}},
        subject="ori",
        style="default",
    )


@pytest.fixture
def moon_result() -> ChartResult:
    return ChartResult(
        endpoint="moon-phase",
        image_url="https://img.test/moon/abc",
        payload={"format": "svg", "observer": {"date": "2024-06-01"}},
    )


class TestShareText:

    def test_star_chart(self, star_result, catalog):
        assert share_text(star_result, catalog) == (
            "Star Chart - Orion\n"
            "Check out this star chart of the Orion constellation!\n"
            "https://img.test/charts/ori.png"
        )

    def test_star_chart_without_catalog(self, star_result):
        assert share_text(star_result).startswith("Star Chart - ori\n")

    def test_moon(self, moon_result):
        lines = share_text(moon_result).splitlines()
        assert lines[0] == "Moon Phase"
        assert "2024-06-01" in lines[1]
        assert lines[2] == "https://img.test/moon/abc"


class TestFilenames:

    def test_star_chart_filename(self, star_result):
        now = datetime(2024, 6, 1, tzinfo=timezone.utc)
        assert default_filename(star_result, now) == "star-chart-ori-1717200000000.png"

    def test_moon_filename_uses_format(self, moon_result):
        """Without an extension in the URL, the requested format is used."""
        now = datetime(2024, 6, 1, tzinfo=timezone.utc)
        assert default_filename(moon_result, now) == "moon-phases-2024-06-01-1717200000000.svg"

    def test_moon_filename_without_date(self):
        result = ChartResult(endpoint="moon", image_url="https://img.test/m.png", payload={})
        now = datetime(2024, 6, 1, tzinfo=timezone.utc)
        assert default_filename(result, now) == "moon-phases-1717200000000.png"


class TestDownload:

    def test_download_to_file(self, tmp_path, make_http_client):
        handler = RecordingHandler(httpx.Response(200, content=b"\x89PNG data"))
        target = tmp_path / "out" / "chart.png"

        saved = asyncio.run(
            download_image("https://img.test/ori.png", target, client=make_http_client(handler))
        )

        assert saved == target
        assert target.read_bytes() == b"\x89PNG data"

    def test_download_to_directory(self, tmp_path, make_http_client):
        handler = RecordingHandler(httpx.Response(200, content=b"img"))

        saved = asyncio.run(
            download_image(
                "https://img.test/charts/ori.png?sig=1", tmp_path, client=make_http_client(handler)
            )
        )

        assert saved == tmp_path / "ori.png"
        assert saved.read_bytes() == b"img"

    def test_download_http_error(self, tmp_path, make_http_client):
        handler = RecordingHandler(httpx.Response(404))

        with pytest.raises(ApiError) as exc_info:
            asyncio.run(
                download_image(
                    "https://img.test/gone.png", tmp_path / "x.png", client=make_http_client(handler)
                )
            )
        assert exc_info.value.status_code == 404
        assert not (tmp_path / "x.png").exists()

    def test_download_network_error(self, tmp_path, make_http_client):
        handler = RecordingHandler(httpx.ConnectError("refused"))

        with pytest.raises(ApiError) as exc_info:
            asyncio.run(
                download_image(
                    "https://img.test/a.png", tmp_path / "a.png", client=make_http_client(handler)
                )
            )
        assert exc_info.value.status_code == 0
