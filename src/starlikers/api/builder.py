"""Request builders: raw user input to validated parameters and JSON payloads.

Validation stops at the first problem found and raises ValidationError
naming the offending field. Nothing here touches the network.
"""

from typing import Any

from starlikers.api.endpoints import STAR_CHART
from starlikers.api.models import MoonParameters, RequestParameters
from starlikers.core.exceptions import ValidationError
from starlikers.core.utils import (
    is_blank,
    is_valid_date,
    parse_coordinates,
    parse_float,
)

IMAGE_FORMATS = ("png", "svg")

# MoonParameters fields that may come from a preset or from the user
MOON_STYLE_FIELDS = (
    "moon_style",
    "background_style",
    "background_color",
    "heading_color",
    "text_color",
    "orientation",
    "view_type",
)


def _check_date(date: str | None) -> str:
    if is_blank(date):
        raise ValidationError("date", "Date is required")
    date = date.strip()
    if not is_valid_date(date):
        raise ValidationError("date", "Invalid date format. Use YYYY-MM-DD")
    return date


def _check_range(latitude: float, longitude: float) -> None:
    if not -90 <= latitude <= 90:
        raise ValidationError("latitude", "Latitude must be between -90 and 90 degrees")
    if not -180 <= longitude <= 180:
        raise ValidationError(
            "longitude", "Longitude must be between -180 and 180 degrees"
        )


def build_star_chart_parameters(
    subject: str | None,
    style: str | None,
    location: str | None,
    date: str | None,
) -> RequestParameters:
    """Validate raw star chart input.

    Checks run in a fixed order: subject, style, location, date presence,
    date format, coordinate parsing, coordinate range.

    Args:
        subject: Constellation code (e.g. "ori")
        style: Chart style code (e.g. "default")
        location: Observer position as "lat,lng"
        date: Observation date as YYYY-MM-DD

    Returns:
        Validated RequestParameters

    Raises:
        ValidationError: On the first missing or invalid field
    """
    if is_blank(subject):
        raise ValidationError("subject", "Constellation is required")
    if is_blank(style):
        raise ValidationError("style", "Style is required")
    if is_blank(location):
        raise ValidationError("location", "Location is required")
    date = _check_date(date)

    try:
        latitude, longitude = parse_coordinates(location)
    except ValueError:
        raise ValidationError(
            "location", "Invalid location coordinates. Use 'lat,lng'"
        ) from None
    _check_range(latitude, longitude)

    return RequestParameters(
        subject_code=subject.strip(),
        style_code=style.strip(),
        latitude=latitude,
        longitude=longitude,
        date=date,
    )


def star_chart_payload(params: RequestParameters) -> dict[str, Any]:
    """Build the JSON body for the star chart endpoint."""
    return {
        "style": params.style_code,
        "observer": {
            "latitude": params.latitude,
            "longitude": params.longitude,
            "date": params.date,
        },
        "view": {
            "type": STAR_CHART.view_type,
            "parameters": {
                "constellation": params.subject_code,
            },
        },
    }


def build_moon_parameters(
    latitude: str | float | None,
    longitude: str | float | None,
    date: str | None,
    format: str | None = "png",
    preset: dict[str, str] | None = None,
    **style_fields: str | None,
) -> MoonParameters:
    """Validate raw moon phase input.

    Checks run in a fixed order: latitude, longitude, date presence, date
    format, image format, latitude range, longitude range.

    Args:
        latitude: Observer latitude
        longitude: Observer longitude
        date: Observation date as YYYY-MM-DD
        format: Image format ("png" or "svg")
        preset: Style values to start from (see the catalog's moon presets)
        **style_fields: Explicit style values; None means "not given"

    Returns:
        Validated MoonParameters

    Raises:
        ValidationError: On the first missing or invalid field
    """
    unknown = set(style_fields) - set(MOON_STYLE_FIELDS)
    if unknown:
        raise TypeError(f"Unknown moon style fields: {', '.join(sorted(unknown))}")

    try:
        lat = parse_float(latitude)
    except ValueError:
        raise ValidationError("latitude", "Please enter a valid latitude") from None
    try:
        lon = parse_float(longitude)
    except ValueError:
        raise ValidationError("longitude", "Please enter a valid longitude") from None

    date = _check_date(date)

    if is_blank(format):
        raise ValidationError("format", "Image format is required")
    format = format.strip().lower()
    if format not in IMAGE_FORMATS:
        raise ValidationError(
            "format", f"Image format must be one of: {', '.join(IMAGE_FORMATS)}"
        )

    _check_range(lat, lon)

    values: dict[str, str] = {}
    for field in MOON_STYLE_FIELDS:
        if preset and preset.get(field):
            values[field] = preset[field]
    for field, value in style_fields.items():
        if not is_blank(value):
            values[field] = value.strip()

    return MoonParameters(
        latitude=lat,
        longitude=lon,
        date=date,
        format=format,
        **values,
    )


def moon_payload(params: MoonParameters) -> dict[str, Any]:
    """Build the JSON body for the moon endpoints."""
    return {
        "format": params.format,
        "observer": {
            "latitude": params.latitude,
            "longitude": params.longitude,
            "date": params.date,
        },
        "style": {
            "moonStyle": params.moon_style,
            "backgroundStyle": params.background_style,
            "backgroundColor": params.background_color,
            "headingColor": params.heading_color,
            "textColor": params.text_color,
        },
        "view": {
            "orientation": params.orientation,
            "type": params.view_type,
        },
    }
