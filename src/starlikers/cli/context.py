"""CLI context management."""

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from starlikers.api.cache import ResponseCache
from starlikers.api.client import AstronomyApiClient
from starlikers.api.models import ChartResult
from starlikers.api.protocols import ChartTransport
from starlikers.api.proxy import ProxyApiClient
from starlikers.catalog.catalog import ConstellationCatalog
from starlikers.display.renderer import DisplayRenderer
from starlikers.services.charts import ChartService
from starlikers.services.sharing import default_filename, download_image, share_text
from starlikers.storage.config import ConfigManager


@dataclass
class CliContext:
    """Context object passed to all CLI commands."""

    config: ConfigManager
    console: Console
    renderer: DisplayRenderer
    verbose: bool = False
    catalog: ConstellationCatalog = field(default_factory=ConstellationCatalog)

    # Lazily initialized services
    _chart_service: ChartService | None = None

    @classmethod
    def create(
        cls,
        config_dir: Path | None = None,
        verbose: bool = False,
    ) -> "CliContext":
        """Create a new CLI context.

        Args:
            config_dir: Custom config directory
            verbose: Enable verbose output

        Returns:
            Initialized CliContext
        """
        config = ConfigManager(config_dir).load()
        console = Console()
        renderer = DisplayRenderer(
            console, theme=config.theme, language=config.language
        )

        return cls(
            config=config,
            console=console,
            renderer=renderer,
            verbose=verbose,
        )

    def make_transport(self) -> ChartTransport:
        """Build the configured transport (direct API or proxy)."""
        if self.config.transport == "proxy":
            return ProxyApiClient(self.config.proxy_url)
        return AstronomyApiClient(
            self.config.credentials,
            base_url=self.config.base_url,
        )

    def get_chart_service(self) -> ChartService:
        """Get or create chart service."""
        if self._chart_service is None:
            self._chart_service = ChartService(
                transport=self.make_transport(),
                cache=ResponseCache(max_age=self.config.cache_max_age_seconds),
                catalog=self.catalog,
            )
        return self._chart_service

    async def cleanup(self) -> None:
        """Clean up resources."""
        if self._chart_service:
            await self._chart_service.close()
            self._chart_service = None

    async def deliver(
        self,
        result: ChartResult,
        download: Path | None = None,
        share: bool = False,
    ) -> None:
        """Download and/or print share text for a generated image."""
        if download is not None:
            target = download / default_filename(result) if download.is_dir() else download
            with self.console.status("Downloading image..."):
                saved = await download_image(result.image_url, target)
            self.renderer.print_success(f"Image saved to {saved}")
        if share:
            self.renderer.render_share(share_text(result, self.catalog))
