"""Chart service - orchestrates request building, caching, transport and validation."""

import json
import logging
from typing import Any

from starlikers.api.builder import (
    build_moon_parameters,
    build_star_chart_parameters,
    moon_payload,
    star_chart_payload,
)
from starlikers.api.cache import ResponseCache
from starlikers.api.endpoints import MOON_ENDPOINTS, STAR_CHART, Endpoint, get_endpoint
from starlikers.api.models import ChartResult
from starlikers.api.protocols import ChartTransport
from starlikers.api.validator import extract_image_url
from starlikers.catalog.catalog import ConstellationCatalog
from starlikers.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class ChartService:
    """Generates star charts and moon images.

    Input is validated before anything is sent. Successful responses are
    cached (when a cache is given) only after the image URL has been
    found in them. Failed calls are never retried.
    """

    def __init__(
        self,
        transport: ChartTransport,
        cache: ResponseCache | None = None,
        catalog: ConstellationCatalog | None = None,
    ):
        """Initialize the chart service.

        Args:
            transport: Direct API client or proxy client
            cache: Optional response cache
            catalog: Catalog used to resolve moon presets
        """
        self.transport = transport
        self.cache = cache
        self.catalog = catalog or ConstellationCatalog()

    async def close(self) -> None:
        """Close the transport."""
        await self.transport.close()

    async def star_chart(
        self,
        subject: str | None,
        style: str | None,
        location: str | None,
        date: str | None,
    ) -> ChartResult:
        """Generate a constellation star chart.

        Args:
            subject: Constellation code (e.g. "ori")
            style: Chart style code
            location: Observer position as "lat,lng"
            date: Observation date as YYYY-MM-DD

        Returns:
            ChartResult with the image URL

        Raises:
            ValidationError: Bad input (nothing was sent)
            ApiError: Request failed or the response had no image
        """
        params = build_star_chart_parameters(subject, style, location, date)
        payload = star_chart_payload(params)

        response, from_cache = await self._fetch(STAR_CHART, payload)

        return ChartResult(
            endpoint=STAR_CHART.name,
            image_url=extract_image_url(response, STAR_CHART.image_field),
            payload=payload,
            response=response,
            from_cache=from_cache,
            subject=params.subject_code,
            style=params.style_code,
        )

    async def moon_phase(
        self,
        latitude: str | float | None,
        longitude: str | float | None,
        date: str | None,
        format: str | None = None,
        preset: str | None = None,
        endpoint: str = "moon-phase",
        **style_fields: str | None,
    ) -> ChartResult:
        """Generate a moon phase image.

        Args:
            latitude: Observer latitude
            longitude: Observer longitude
            date: Observation date as YYYY-MM-DD
            format: Image format; defaults to the preset's, else "png"
            preset: Moon preset key (see the catalog)
            endpoint: "moon-phase" or "moon"
            **style_fields: Explicit style values overriding the preset

        Returns:
            ChartResult with the image URL

        Raises:
            ValidationError: Bad input (nothing was sent)
            CatalogNotFoundError: Unknown preset
            ApiError: Request failed or the response had no image
        """
        if endpoint not in MOON_ENDPOINTS:
            raise ValidationError(
                "endpoint",
                f"Moon endpoint must be one of: {', '.join(MOON_ENDPOINTS)}",
            )
        target = get_endpoint(endpoint)

        preset_fields = None
        default_format = "png"
        if preset:
            moon_preset = self.catalog.moon_preset(preset)
            preset_fields = moon_preset.style_fields()
            default_format = moon_preset.format

        params = build_moon_parameters(
            latitude,
            longitude,
            date,
            format=format if format is not None else default_format,
            preset=preset_fields,
            **style_fields,
        )
        payload = moon_payload(params)

        response, from_cache = await self._fetch(target, payload)

        return ChartResult(
            endpoint=target.name,
            image_url=extract_image_url(response, target.image_field),
            payload=payload,
            response=response,
            from_cache=from_cache,
            style=params.moon_style,
        )

    async def _fetch(
        self, endpoint: Endpoint, payload: dict[str, Any]
    ) -> tuple[dict[str, Any], bool]:
        """Get a validated response, from the cache when possible.

        Returns:
            Tuple of (decoded response, whether it came from the cache)
        """
        key = None
        if self.cache is not None:
            self.cache.clear_expired()
            key = self.cache.generate_key(endpoint.path, payload)
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug(f"Cache hit for {endpoint.name}")
                return cached, True

        logger.debug(f"API request to {endpoint.path}: {json.dumps(payload)}")
        response = await self.transport.send(endpoint.path, endpoint.method, payload)
        logger.debug(f"API response: {response}")

        # Raises InvalidResponseError before anything is cached
        extract_image_url(response, endpoint.image_field)

        if self.cache is not None and key is not None:
            self.cache.set(key, response)
        return response, False
