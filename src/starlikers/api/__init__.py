"""Astronomy API client, request builders and response cache."""

from starlikers.api.cache import ResponseCache
from starlikers.api.client import AstronomyApiClient
from starlikers.api.models import (
    ChartResult,
    Credentials,
    MoonParameters,
    RequestParameters,
)
from starlikers.api.proxy import ProxyApiClient

__all__ = [
    "AstronomyApiClient",
    "ProxyApiClient",
    "ResponseCache",
    "ChartResult",
    "Credentials",
    "MoonParameters",
    "RequestParameters",
]
