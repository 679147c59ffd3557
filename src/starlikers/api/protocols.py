"""Transport protocols (interfaces)."""

from typing import Any, Protocol


class ChartTransport(Protocol):
    """Anything that can deliver a chart request and return decoded JSON."""

    async def send(
        self,
        endpoint_path: str,
        method: str = "GET",
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request.

        Args:
            endpoint_path: Endpoint path, e.g. "/studio/star-chart"
            method: HTTP method
            body: JSON body, or None

        Returns:
            Decoded JSON response
        """
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...
