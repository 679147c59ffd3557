"""Common utilities."""

import math
import re
from datetime import date, datetime, timezone

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
# Plain decimal numbers only: no exponents, digit separators, inf or nan
DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")


def parse_float(value: str | float | None) -> float:
    """Parse a coordinate value as a plain decimal number.

    Raises:
        ValueError: If the value is blank, not a decimal or not finite
    """
    if value is None:
        raise ValueError("missing value")
    if isinstance(value, str):
        value = value.strip()
        if not DECIMAL_PATTERN.match(value):
            raise ValueError(f"not a decimal number: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError("not a finite number")
    return number


def parse_coordinates(location: str) -> tuple[float, float]:
    """Parse a "lat,lng" string.

    Only the format is checked here; ranges are checked by the
    request builders.

    Raises:
        ValueError: If the string is not two comma-separated numbers
    """
    parts = location.split(",")
    if len(parts) != 2:
        raise ValueError(f"Expected 'lat,lng', got {location!r}")
    return (parse_float(parts[0]), parse_float(parts[1]))


def is_valid_date(value: str) -> bool:
    """Check for a real calendar date in YYYY-MM-DD format."""
    if not DATE_PATTERN.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_blank(value: str | None) -> bool:
    """True for None or whitespace-only strings."""
    return value is None or not str(value).strip()


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def today_iso() -> str:
    """Today's date as YYYY-MM-DD."""
    return utc_now().date().isoformat()


def epoch_millis(dt: datetime) -> int:
    """Milliseconds since the Unix epoch (for file names)."""
    return int(dt.timestamp() * 1000)

