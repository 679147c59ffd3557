"""Built-in constellation catalog."""

from starlikers.catalog.catalog import (
    ChartStyle,
    Constellation,
    ConstellationCatalog,
    MoonPreset,
)

__all__ = ["ChartStyle", "Constellation", "ConstellationCatalog", "MoonPreset"]
