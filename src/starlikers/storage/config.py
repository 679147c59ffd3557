"""Configuration management using TOML."""

import logging
import os
import sys
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

from starlikers.api.client import AstronomyApiClient
from starlikers.api.models import Credentials
from starlikers.core.exceptions import ConfigError
from starlikers.core.messages import SUPPORTED_LOCALES

logger = logging.getLogger(__name__)

APP_ID_ENV = "ASTRONOMY_API_APP_ID"
APP_SECRET_ENV = "ASTRONOMY_API_APP_SECRET"

THEMES = ("light", "dark")
TRANSPORTS = ("direct", "proxy")

DEFAULT_SETTINGS: dict[str, Any] = {
    "base_url": AstronomyApiClient.DEFAULT_BASE_URL,
    "cache_max_age_seconds": 300,
    "transport": "direct",
    "proxy_url": "",
    "language": "en",
    "theme": "dark",
}


class ConfigManager:
    """Manages user configuration stored in ~/.starlikers/.

    Nothing is read or written implicitly: call load() to read the file and
    save() (or one of the setters, which save) to persist changes.
    """

    DEFAULT_DIR = Path.home() / ".starlikers"
    CONFIG_FILENAME = "config.toml"

    def __init__(self, config_dir: Path | None = None):
        """Initialize config manager.

        Args:
            config_dir: Custom config directory (default: ~/.starlikers/)
        """
        self.config_dir = config_dir or self.DEFAULT_DIR
        self.config_file = self.config_dir / self.CONFIG_FILENAME
        self._config: dict[str, Any] = self._default_config()

    @staticmethod
    def _default_config() -> dict[str, Any]:
        return {
            "settings": dict(DEFAULT_SETTINGS),
            "credentials": {"app_id": "", "app_secret": ""},
        }

    def load(self) -> "ConfigManager":
        """Load configuration from file; a missing file means defaults."""
        if not self.config_file.exists():
            logger.debug(f"No config at {self.config_file}, using defaults")
            self._config = self._default_config()
            return self
        try:
            with open(self.config_file, "rb") as f:
                data = tomllib.load(f)
        except Exception as e:
            raise ConfigError(f"Failed to load config: {e}") from e

        config = self._default_config()
        config["settings"].update(data.get("settings", {}))
        config["credentials"].update(data.get("credentials", {}))
        self._config = config
        return self

    def save(self) -> None:
        """Write current configuration to file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "wb") as f:
                tomli_w.dump(self._config, f)
        except Exception as e:
            raise ConfigError(f"Failed to write config: {e}") from e

    # Settings
    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting value."""
        return self._config.get("settings", {}).get(key, default)

    def set_setting(self, key: str, value: Any) -> None:
        """Set a setting value and save.

        Raises:
            ConfigError: For unknown keys or invalid values
        """
        if key not in DEFAULT_SETTINGS:
            raise ConfigError(
                f"Unknown setting '{key}'. Available: {', '.join(DEFAULT_SETTINGS)}"
            )
        value = self._coerce(key, value)
        self._config.setdefault("settings", {})[key] = value
        self.save()

    def _coerce(self, key: str, value: Any) -> Any:
        if key == "cache_max_age_seconds":
            try:
                seconds = int(value)
            except (TypeError, ValueError):
                raise ConfigError(f"{key} must be an integer, got {value!r}") from None
            if seconds < 0:
                raise ConfigError(f"{key} must be >= 0")
            return seconds
        value = str(value).strip()
        if key == "theme" and value not in THEMES:
            raise ConfigError(f"Theme must be one of: {', '.join(THEMES)}")
        if key == "transport" and value not in TRANSPORTS:
            raise ConfigError(f"Transport must be one of: {', '.join(TRANSPORTS)}")
        if key == "language" and value not in SUPPORTED_LOCALES:
            raise ConfigError(
                f"Language must be one of: {', '.join(SUPPORTED_LOCALES)}"
            )
        if key == "base_url":
            value = value.rstrip("/")
        return value

    @property
    def base_url(self) -> str:
        return self.get_setting("base_url", DEFAULT_SETTINGS["base_url"])

    @property
    def cache_max_age_seconds(self) -> int:
        """Get cache max age in seconds."""
        return self.get_setting("cache_max_age_seconds", 300)

    @property
    def transport(self) -> str:
        return self.get_setting("transport", "direct")

    @property
    def proxy_url(self) -> str:
        return self.get_setting("proxy_url", "")

    @property
    def language(self) -> str:
        return self.get_setting("language", "en")

    # Theme
    @property
    def theme(self) -> str:
        return self.get_setting("theme", "dark")

    def set_theme(self, theme: str) -> None:
        """Set the display theme ("light" or "dark")."""
        self.set_setting("theme", theme)

    # Credentials
    @property
    def credentials(self) -> Credentials:
        """API credentials; environment variables win over the file."""
        stored = self._config.get("credentials", {})
        return Credentials(
            app_id=os.environ.get(APP_ID_ENV) or stored.get("app_id", ""),
            app_secret=os.environ.get(APP_SECRET_ENV) or stored.get("app_secret", ""),
        )

    def save_credentials(self, app_id: str, app_secret: str) -> Credentials:
        """Store API credentials.

        Raises:
            ConfigError: If either value is blank
        """
        app_id = (app_id or "").strip()
        app_secret = (app_secret or "").strip()
        if not app_id or not app_secret:
            raise ConfigError("Both Application ID and Application Secret are required")
        self._config["credentials"] = {"app_id": app_id, "app_secret": app_secret}
        self.save()
        return Credentials(app_id=app_id, app_secret=app_secret)

    def clear_credentials(self) -> None:
        """Forget stored credentials."""
        self._config["credentials"] = {"app_id": "", "app_secret": ""}
        self.save()
