"""Rich-based display renderer."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from starlikers.api.models import ChartResult
from starlikers.catalog.catalog import ConstellationCatalog, MoonPreset
from starlikers.core.exceptions import ApiError, ValidationError
from starlikers.display.formatters import (
    format_coordinates,
    format_error_details,
    get_theme_colors,
)
from starlikers.storage.config import ConfigManager


class DisplayRenderer:
    """Renders chart results to the terminal using Rich."""

    def __init__(
        self,
        console: Console | None = None,
        theme: str = "dark",
        language: str = "en",
    ):
        """Initialize renderer.

        Args:
            console: Rich console (creates one if not provided)
            theme: "light" or "dark"
            language: Locale for API error messages
        """
        self.console = console or Console()
        self.colors = get_theme_colors(theme)
        self.language = language

    def render_chart(
        self,
        result: ChartResult,
        catalog: ConstellationCatalog | None = None,
    ) -> None:
        """Render a generated star chart or moon image.

        Args:
            result: Generated chart
            catalog: Catalog for constellation names and descriptions
        """
        observer = result.payload.get("observer", {})
        lines = []

        if result.subject:
            name = catalog.name(result.subject) if catalog else result.subject
            style = catalog.style_name(result.style) if catalog and result.style else result.style
            title = f"STAR CHART - {name.upper()}"
            lines.append(f"[bold]Style:[/bold] {style}")
        else:
            title = "MOON PHASE"
            lines.append(f"[bold]Style:[/bold] {result.style}")

        if not result.observer_applied:
            lines.append(
                f"[bold]Observer:[/bold] [{self.colors['muted']}]"
                f"set by proxy (location and date not applied)[/{self.colors['muted']}]"
            )
        elif "latitude" in observer and "longitude" in observer:
            lines.append(
                f"[bold]Observer:[/bold] "
                f"{format_coordinates(observer['latitude'], observer['longitude'])}"
            )
        if result.observer_applied and observer.get("date"):
            lines.append(f"[bold]Date:[/bold] {observer['date']}")
        if result.from_cache:
            lines.append(f"[{self.colors['muted']}](cached)[/{self.colors['muted']}]")

        self.console.print(
            Panel(
                "\n".join(lines),
                title=f"[bold]{title}[/bold]",
                border_style=self.colors["border"],
            )
        )

        if result.subject and catalog:
            self.console.print(f"[italic]{catalog.description(result.subject)}[/italic]")

        accent = self.colors["accent"]
        self.console.print(f"\n🖼  [{accent}]{result.image_url}[/{accent}]")

    def render_share(self, text: str) -> None:
        """Render share text in a panel."""
        self.console.print(Panel(text, title="Share", border_style=self.colors["border"]))

    def render_api_error(self, error: ApiError, verbose: bool = False) -> None:
        """Render an API error with its user-facing message."""
        self.print_error(error.get_user_message(self.language))
        if verbose:
            self.console.print(
                format_error_details(error.status_code, error.status_text, error.body),
                style=self.colors["muted"],
                markup=False,
            )

    def render_validation_error(self, error: ValidationError) -> None:
        """Render an input validation error."""
        self.print_error(f"Invalid {error.field}: {error.message}")

    def render_constellations(self, catalog: ConstellationCatalog, query: str = "") -> None:
        """Render constellation codes and names."""
        entries = catalog.search(query)
        if not entries:
            self.print_warning(f"No constellation matches '{query}'")
            return

        table = Table(title="Constellations")
        table.add_column("Code", style="cyan")
        table.add_column("Name")
        for entry in entries:
            table.add_row(entry.code, entry.name)

        self.console.print(table)

    def render_styles(self, catalog: ConstellationCatalog) -> None:
        """Render star chart styles."""
        table = Table(title="Star Chart Styles")
        table.add_column("Code", style="cyan")
        table.add_column("Name")
        for style in catalog.styles:
            table.add_row(style.code, style.name)
        self.console.print(table)

    def render_presets(self, presets: list[MoonPreset]) -> None:
        """Render moon presets."""
        table = Table(title="Moon Presets")
        table.add_column("Preset", style="cyan")
        table.add_column("Name")
        table.add_column("Format")
        table.add_column("Moon")
        table.add_column("Background")
        table.add_column("View")
        for preset in presets:
            table.add_row(
                preset.key,
                preset.name,
                preset.format,
                preset.moon_style,
                f"{preset.background_style} / {preset.background_color}",
                f"{preset.view_type} ({preset.orientation})",
            )
        self.console.print(table)

    def render_config(self, config: ConfigManager) -> None:
        """Render current configuration; the secret is masked."""
        creds = config.credentials
        secret = "*" * 8 if creds.app_secret else "[yellow]not set[/yellow]"
        app_id = creds.app_id or "[yellow]not set[/yellow]"

        self.console.print(f"[bold]Configuration File:[/bold] {config.config_file}")
        self.console.print()
        self.console.print(f"[bold]Application ID:[/bold] {app_id}")
        self.console.print(f"[bold]Application Secret:[/bold] {secret}")
        self.console.print()
        self.console.print("[bold]Settings:[/bold]")
        self.console.print(f"  API URL: {config.base_url}")
        self.console.print(f"  Transport: {config.transport}")
        if config.transport == "proxy":
            self.console.print(f"  Proxy URL: {config.proxy_url or '[yellow]not set[/yellow]'}")
        self.console.print(f"  Cache max age: {config.cache_max_age_seconds} seconds")
        self.console.print(f"  Language: {config.language}")
        self.console.print(f"  Theme: {config.theme}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    def print_error(self, message: str) -> None:
        """Print error message."""
        self.console.print(f"[red]✗[/red] {message}")
