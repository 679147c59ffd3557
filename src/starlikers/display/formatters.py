"""Formatting utilities for display."""

import json
from typing import Any

THEME_COLORS = {
    "dark": {"accent": "bright_cyan", "border": "blue", "muted": "grey62"},
    "light": {"accent": "dark_blue", "border": "black", "muted": "grey35"},
}


def get_theme_colors(theme: str) -> dict[str, str]:
    """Get Rich colors for a theme, falling back to dark."""
    return THEME_COLORS.get(theme, THEME_COLORS["dark"])


def format_coordinates(lat: float, lon: float) -> str:
    """Format coordinates for display.

    Args:
        lat: Latitude
        lon: Longitude

    Returns:
        Formatted string like "33.78°N, 84.40°W"
    """
    lat_dir = "N" if lat >= 0 else "S"
    lon_dir = "E" if lon >= 0 else "W"
    return f"{abs(lat):.2f}°{lat_dir}, {abs(lon):.2f}°{lon_dir}"


def format_error_details(status_code: int, status_text: str, body: Any) -> str:
    """Format an API error body for display.

    Validation errors returned by the API (``{"errors": [{"property",
    "message"}]}``) are listed one per line; other bodies are dumped as JSON.
    """
    formatted = f"Status: {status_code} - {status_text}"

    if isinstance(body, dict) and isinstance(body.get("errors"), list):
        lines = ["", "Validation details:"]
        for err in body["errors"]:
            if isinstance(err, dict):
                lines.append(f"- {err.get('property', '?')}: {err.get('message', '')}")
            else:
                lines.append(f"- {err}")
        formatted += "\n".join(lines)
    elif body:
        formatted += f"\nDetails: {json.dumps(body, indent=2, ensure_ascii=False)}"

    return formatted
