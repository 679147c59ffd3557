"""Main CLI entry point."""

import logging
from pathlib import Path

import click
from rich.console import Console

from starlikers import __version__
from starlikers.cli.context import CliContext
from starlikers.core.exceptions import StarlikersError


@click.group()
@click.option(
    "--config-dir",
    type=click.Path(path_type=Path),
    help="Custom configuration directory",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(version=__version__, prog_name="starlikers")
@click.pass_context
def cli(ctx: click.Context, config_dir: Path | None, verbose: bool) -> None:
    """Starlikers - star charts and moon phases from the Astronomy API.

    Pick a constellation or a moon configuration and get back a chart image
    you can open, download or share.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = CliContext.create(config_dir=config_dir, verbose=verbose)


# Import and register commands
from starlikers.cli.commands import catalog, chart, config, moon

cli.add_command(config.config)
cli.add_command(chart.chart)
cli.add_command(moon.moon)
cli.add_command(catalog.catalog)


def main() -> None:
    """Main entry point."""
    try:
        cli()
    except StarlikersError as e:
        console = Console()
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)
    except KeyboardInterrupt:
        raise SystemExit(0)


if __name__ == "__main__":
    main()
