"""Response validation."""

from typing import Any

from starlikers.core.exceptions import InvalidResponseError


def extract_image_url(body: Any, field_path: str) -> str:
    """Return the image URL found at a dotted path in a decoded response.

    The API can answer 200 with a body that has no image (quota or
    generation failures), so a missing or empty field is an error.

    Args:
        body: Decoded JSON response
        field_path: Dotted path such as "data.imageUrl"

    Returns:
        The image URL

    Raises:
        InvalidResponseError: If the field is missing, empty or not a string
    """
    value = body
    for part in field_path.split("."):
        if not isinstance(value, dict) or part not in value:
            raise InvalidResponseError(
                f"Invalid API response: missing {field_path}",
                body=body,
                field_path=field_path,
            )
        value = value[part]

    if not isinstance(value, str) or not value.strip():
        raise InvalidResponseError(
            f"Invalid API response: empty {field_path}",
            body=body,
            field_path=field_path,
        )
    return value
