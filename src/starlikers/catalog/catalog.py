"""Constellation, chart style and moon preset catalog."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field

from starlikers.core.exceptions import CatalogNotFoundError

logger = logging.getLogger(__name__)


class Constellation(BaseModel):
    """A constellation accepted by the star chart endpoint."""

    code: str = Field(description="IAU abbreviation in lower case, e.g. 'ori'")
    name: str = Field(description="Display name")
    description: str | None = None

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"


class ChartStyle(BaseModel):
    """A star chart rendering preset."""

    code: str
    name: str


class MoonPreset(BaseModel):
    """Named set of moon image style values."""

    key: str
    name: str
    format: str = "png"
    moon_style: str
    background_style: str
    background_color: str
    heading_color: str
    text_color: str
    orientation: str
    view_type: str

    def style_fields(self) -> dict[str, str]:
        """Values in the shape build_moon_parameters() expects as a preset."""
        return self.model_dump(exclude={"key", "name", "format"})


class ConstellationCatalog:
    """Catalog of constellations, chart styles and moon presets."""

    def __init__(self, catalog_path: Path | None = None):
        """Initialize the catalog.

        Args:
            catalog_path: Path to custom catalog JSON (default: built-in catalog)
        """
        self._constellations: dict[str, Constellation] = {}
        self._styles: dict[str, ChartStyle] = {}
        self._presets: dict[str, MoonPreset] = {}
        self._load_catalog(catalog_path)

    def _load_catalog(self, catalog_path: Path | None = None) -> None:
        """Load entries from catalog file."""
        path = catalog_path or Path(__file__).parent / "data" / "catalog.json"
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load catalog {path}: {e}")
            data = {}

        for item in data.get("constellations", []):
            try:
                entry = Constellation(**item)
                self._constellations[entry.code] = entry
            except Exception as e:
                logger.warning(f"Failed to load constellation {item.get('code')}: {e}")

        for item in data.get("styles", []):
            style = ChartStyle(**item)
            self._styles[style.code] = style

        for key, values in data.get("moon_presets", {}).items():
            self._presets[key] = MoonPreset(key=key, **values)

    def get(self, code: str) -> Constellation:
        """Get a constellation by code.

        Raises:
            CatalogNotFoundError: If the code is unknown
        """
        entry = self._constellations.get(code.lower().strip())
        if entry is None:
            raise CatalogNotFoundError(code)
        return entry

    def __contains__(self, code: str) -> bool:
        return code.lower().strip() in self._constellations

    def name(self, code: str) -> str:
        """Display name for a code, or the code itself if unknown."""
        entry = self._constellations.get(code.lower().strip())
        return entry.name if entry else code

    def description(self, code: str) -> str:
        entry = self._constellations.get(code.lower().strip())
        if entry and entry.description:
            return entry.description
        return "A fascinating constellation of the night sky with its own history."

    def search(self, query: str) -> list[Constellation]:
        """Find constellations by code or name.

        An exact code or name match is returned alone; otherwise all entries
        whose name contains the query.
        """
        query_lower = query.lower().strip()
        if not query_lower:
            return self.all()

        for entry in self._constellations.values():
            if entry.code == query_lower or entry.name.lower() == query_lower:
                return [entry]

        return [
            entry for entry in self._constellations.values()
            if query_lower in entry.name.lower()
        ]

    def all(self) -> list[Constellation]:
        return list(self._constellations.values())

    @property
    def styles(self) -> list[ChartStyle]:
        return list(self._styles.values())

    def style_name(self, code: str) -> str:
        style = self._styles.get(code)
        return style.name if style else code

    @property
    def moon_presets(self) -> list[MoonPreset]:
        return list(self._presets.values())

    def moon_preset(self, key: str) -> MoonPreset:
        """Get a moon preset by key.

        Raises:
            CatalogNotFoundError: If the preset is unknown
        """
        preset = self._presets.get(key.lower().strip())
        if preset is None:
            raise CatalogNotFoundError(key)
        return preset

    def __len__(self) -> int:
        return len(self._constellations)
