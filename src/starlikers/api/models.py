"""Request, response and credential models."""

import base64
from typing import Any

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Astronomy API application ID/secret pair."""

    app_id: str = Field(default="", description="Application ID")
    app_secret: str = Field(default="", repr=False, description="Application secret")

    @property
    def is_complete(self) -> bool:
        return bool(self.app_id and self.app_secret)

    def authorization_header(self) -> str:
        """Basic scheme header value over app_id:app_secret."""
        token = base64.b64encode(f"{self.app_id}:{self.app_secret}".encode()).decode()
        return f"Basic {token}"


class RequestParameters(BaseModel):
    """Validated star chart request."""

    subject_code: str = Field(description="Constellation abbreviation, e.g. 'ori'")
    style_code: str = Field(description="Chart rendering preset")
    latitude: float = Field(ge=-90, le=90, description="Observer latitude in degrees")
    longitude: float = Field(ge=-180, le=180, description="Observer longitude in degrees")
    date: str = Field(description="Observation date (YYYY-MM-DD)")


class MoonParameters(BaseModel):
    """Validated moon phase request."""

    latitude: float = Field(ge=-90, le=90, description="Observer latitude in degrees")
    longitude: float = Field(ge=-180, le=180, description="Observer longitude in degrees")
    date: str = Field(description="Observation date (YYYY-MM-DD)")
    format: str = Field(default="png", description="Image format (png or svg)")
    moon_style: str = "default"
    background_style: str = "stars"
    background_color: str = "red"
    heading_color: str = "white"
    text_color: str = "red"
    orientation: str = "south-up"
    view_type: str = "portrait-simple"


class ChartResult(BaseModel):
    """A successfully generated image."""

    endpoint: str = Field(description="Endpoint name, e.g. 'star-chart'")
    image_url: str = Field(description="URL of the generated image")
    payload: dict[str, Any] = Field(description="Request body that was sent")
    response: dict[str, Any] = Field(default_factory=dict, description="Decoded response")
    from_cache: bool = False
    subject: str | None = Field(default=None, description="Constellation code, if any")
    style: str | None = None

    @property
    def observer_applied(self) -> bool:
        """False when a proxy substituted its own observer and date."""
        return not self.response.get("proxied", False)

    @property
    def image_extension(self) -> str:
        """File extension guessed from the image URL."""
        path = self.image_url.split("?", 1)[0]
        if "." in path.rsplit("/", 1)[-1]:
            return path.rsplit(".", 1)[-1].lower()
        return str(self.payload.get("format", "png"))
