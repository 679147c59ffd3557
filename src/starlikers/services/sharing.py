"""Share text and image download for generated charts."""

import logging
from datetime import datetime
from pathlib import Path

import httpx

from starlikers.api.models import ChartResult
from starlikers.catalog.catalog import ConstellationCatalog
from starlikers.core.exceptions import ApiError
from starlikers.core.utils import epoch_millis, utc_now

logger = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT = 60.0


def share_text(result: ChartResult, catalog: ConstellationCatalog | None = None) -> str:
    """Title, text and URL block for sharing a chart.

    Args:
        result: Generated chart
        catalog: Catalog for constellation names

    Returns:
        Three-line share text
    """
    if result.subject:
        name = catalog.name(result.subject) if catalog else result.subject
        title = f"Star Chart - {name}"
        text = f"Check out this star chart of the {name} constellation!"
    else:
        date = result.payload.get("observer", {}).get("date", "")
        title = "Moon Phase"
        text = f"Check out the moon on {date}!" if date else "Check out this moon phase!"
    return f"{title}\n{text}\n{result.image_url}"


def default_filename(result: ChartResult, now: datetime | None = None) -> str:
    """File name for a downloaded chart, e.g. star-chart-ori-1717200000000.png."""
    stamp = epoch_millis(now or utc_now())
    if result.subject:
        stem = f"star-chart-{result.subject}-{stamp}"
    else:
        date = result.payload.get("observer", {}).get("date", "")
        stem = f"moon-phases-{date}-{stamp}" if date else f"moon-phases-{stamp}"
    return f"{stem}.{result.image_extension}"


async def download_image(
    url: str,
    destination: Path,
    client: httpx.AsyncClient | None = None,
) -> Path:
    """Download an image to a file.

    Args:
        url: Image URL
        destination: Target file, or a directory to place it in
            (the URL's last path segment is used as the file name)
        client: Optional httpx client (for testing/reuse)

    Returns:
        Path of the written file

    Raises:
        ApiError: On transport failure or a non-2xx status
    """
    if destination.is_dir():
        name = url.split("?", 1)[0].rstrip("/").rsplit("/", 1)[-1] or "chart.png"
        destination = destination / name

    owns_client = client is None
    http = client or httpx.AsyncClient(timeout=DOWNLOAD_TIMEOUT, follow_redirects=True)
    try:
        try:
            response = await http.get(url)
        except httpx.RequestError as e:
            raise ApiError(
                "Network error while downloading image",
                status_code=0,
                status_text="Network Error",
                body={"originalError": str(e)},
            ) from e

        if not response.is_success:
            raise ApiError(
                f"Download failed: {response.status_code} - {response.reason_phrase}",
                status_code=response.status_code,
                status_text=response.reason_phrase,
            )
    finally:
        if owns_client:
            await http.aclose()

    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(response.content)
    logger.debug(f"Saved {len(response.content)} bytes to {destination}")
    return destination
