"""Core utilities and exceptions."""

from starlikers.core.exceptions import (
    ApiError,
    CatalogNotFoundError,
    ConfigError,
    InvalidResponseError,
    StarlikersError,
    ValidationError,
)

__all__ = [
    "StarlikersError",
    "ConfigError",
    "ValidationError",
    "ApiError",
    "InvalidResponseError",
    "CatalogNotFoundError",
]
