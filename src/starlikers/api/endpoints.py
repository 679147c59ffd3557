"""Endpoint descriptors for the Astronomy API."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Endpoint:
    """Where a request goes and where its image URL comes back."""

    name: str
    path: str
    image_field: str
    method: str = "POST"
    # Star charts only; moon view types come from MoonParameters
    view_type: str | None = None


STAR_CHART = Endpoint(
    name="star-chart",
    path="/studio/star-chart",
    image_field="data.imageUrl",
    view_type="constellation",
)

MOON_PHASE = Endpoint(
    name="moon-phase",
    path="/studio/moon-phase",
    image_field="data.imageUrl",
)

# Custom gateway variant that answers with a top-level imageUrl
MOON = Endpoint(
    name="moon",
    path="/moon",
    image_field="imageUrl",
)

ENDPOINTS: dict[str, Endpoint] = {
    endpoint.name: endpoint for endpoint in (STAR_CHART, MOON_PHASE, MOON)
}

MOON_ENDPOINTS = (MOON_PHASE.name, MOON.name)


def get_endpoint(name: str) -> Endpoint:
    """Look up an endpoint by name.

    Raises:
        KeyError: If the name is unknown
    """
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise KeyError(
            f"Unknown endpoint '{name}'. Available: {', '.join(ENDPOINTS)}"
        ) from None
