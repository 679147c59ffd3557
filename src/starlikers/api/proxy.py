"""Client for the server-side CORS proxy.

The proxy answers ``GET ?constellation=<code>&style=<style>`` with
``{"constellation", "style", "image"}`` or ``{"error"}``. It performs the star
chart call itself, with its own credentials and a fixed observer.
"""

import logging
from typing import Any

import httpx

from starlikers.api.client import BaseHttpClient
from starlikers.api.endpoints import STAR_CHART
from starlikers.core.exceptions import ConfigError, InvalidResponseError

logger = logging.getLogger(__name__)


class ProxyApiClient(BaseHttpClient):
    """Star chart transport through the proxy endpoint."""

    def __init__(self, proxy_url: str, client: httpx.AsyncClient | None = None):
        """Initialize the client.

        Args:
            proxy_url: Full URL of the proxy script
            client: Optional httpx client (for testing/reuse)
        """
        if not proxy_url:
            raise ConfigError("Proxy transport selected but no proxy_url configured")
        super().__init__(client)
        self.proxy_url = proxy_url

    async def send(
        self,
        endpoint_path: str,
        method: str = "GET",
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Request a star chart through the proxy.

        The reply is reshaped to ``{"data": {"imageUrl": ...}}`` so callers
        validate it exactly like a direct API response. ``proxied`` marks
        that the observer and date in the request were not applied.

        Raises:
            ConfigError: For endpoints the proxy does not serve
            ApiError: On transport failure or a non-2xx status
            InvalidResponseError: If the proxy reports an error
        """
        if endpoint_path != STAR_CHART.path:
            raise ConfigError(
                f"The proxy only serves star charts, not {endpoint_path}"
            )
        body = body or {}
        try:
            subject = body["view"]["parameters"]["constellation"]
        except (KeyError, TypeError):
            raise ConfigError("Star chart body has no constellation") from None
        style = body.get("style", "default")

        if body.get("observer"):
            logger.debug("Proxy uses its own observer; ignoring request observer")

        reply = await self._request(
            "GET",
            self.proxy_url,
            params={"constellation": subject, "style": style},
            headers={"Accept": "application/json"},
        )

        if not isinstance(reply, dict):
            raise InvalidResponseError("Invalid proxy response", body=reply)
        if reply.get("error"):
            raise InvalidResponseError(f"Proxy error: {reply['error']}", body=reply)

        return {
            "data": {"imageUrl": reply.get("image")},
            "subject": reply.get("constellation", subject),
            "style": reply.get("style", style),
            "proxied": True,
        }
