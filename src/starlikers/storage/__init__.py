"""Local persisted configuration."""

from starlikers.storage.config import ConfigManager

__all__ = ["ConfigManager"]
