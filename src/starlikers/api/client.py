"""Astronomy API HTTP client."""

import logging
from typing import Any

import httpx

from starlikers.api.models import Credentials
from starlikers.core.exceptions import ApiError, ConfigError, InvalidResponseError

logger = logging.getLogger(__name__)


class BaseHttpClient:
    """Shared request handling: one call, no retries, normalized errors.

    Every failure surfaces as ApiError. Non-2xx responses keep their
    status code and decoded error body; failures with no response at all
    get status code 0.
    """

    TIMEOUT = 30.0

    def __init__(self, client: httpx.AsyncClient | None = None):
        """Initialize the client.

        Args:
            client: Optional httpx client (for testing/reuse)
        """
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.TIMEOUT)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "BaseHttpClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        """Issue one request and decode the JSON reply.

        Raises:
            ApiError: On transport failure or a non-2xx status
            InvalidResponseError: If a 2xx body is not JSON
        """
        client = await self._get_client()
        logger.debug(f"{method} {url}")

        try:
            response = await client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.warning(f"Network error calling {url}: {e}")
            raise ApiError(
                "Network error or API unavailable",
                status_code=0,
                status_text="Network Error",
                body={"originalError": str(e)},
            ) from e

        logger.debug(f"Response status: {response.status_code}")

        if not response.is_success:
            try:
                error_body = response.json()
            except ValueError:
                error_body = {}
            logger.warning(
                f"API error {response.status_code} from {url}: {error_body}"
            )
            raise ApiError(
                f"API Error: {response.status_code} - {response.reason_phrase}",
                status_code=response.status_code,
                status_text=response.reason_phrase,
                body=error_body,
            )

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(
                "Invalid API response: body is not JSON",
                body={"text": response.text[:500]},
            ) from e


class AstronomyApiClient(BaseHttpClient):
    """Client for the Astronomy API (https://astronomyapi.com)."""

    DEFAULT_BASE_URL = "https://api.astronomyapi.com/api/v2"

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = DEFAULT_BASE_URL,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            credentials: Application ID/secret used for Basic auth
            base_url: API root, without trailing slash
            client: Optional httpx client (for testing/reuse)
        """
        super().__init__(client)
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        if not self.credentials.is_complete:
            raise ConfigError(
                "API credentials not set. "
                "Use 'starlikers config credentials APP_ID APP_SECRET' first."
            )
        return {
            "Authorization": self.credentials.authorization_header(),
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def send(
        self,
        endpoint_path: str,
        method: str = "GET",
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request to an API endpoint.

        Args:
            endpoint_path: Path below the base URL, e.g. "/studio/star-chart"
            method: HTTP method
            body: JSON body, or None for no body

        Returns:
            Decoded JSON response

        Raises:
            ConfigError: If credentials are missing
            ApiError: On transport failure or a non-2xx status
        """
        headers = self._headers()
        url = f"{self.base_url}{endpoint_path}"
        kwargs: dict[str, Any] = {"headers": headers}
        if body is not None:
            kwargs["json"] = body
        return await self._request(method.upper(), url, **kwargs)
