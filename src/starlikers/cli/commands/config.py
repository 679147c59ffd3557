"""Configuration command."""

import click

from starlikers.cli.context import CliContext
from starlikers.core.exceptions import ConfigError
from starlikers.storage.config import DEFAULT_SETTINGS, THEMES


pass_context = click.make_pass_decorator(CliContext)


@click.group()
def config() -> None:
    """Manage credentials and settings."""
    pass


@config.command("credentials")
@click.argument("app_id")
@click.argument("app_secret")
@pass_context
def set_credentials(ctx: CliContext, app_id: str, app_secret: str) -> None:
    """Save Astronomy API credentials.

    Example: starlikers config credentials my-app-id my-app-secret
    """
    try:
        ctx.config.save_credentials(app_id, app_secret)
        ctx.renderer.print_success("API credentials saved")
    except ConfigError as e:
        ctx.renderer.print_error(str(e))
        raise SystemExit(1)


@config.command("clear-credentials")
@pass_context
def clear_credentials(ctx: CliContext) -> None:
    """Forget stored API credentials."""
    ctx.config.clear_credentials()
    ctx.renderer.print_success("API credentials removed")


@config.command("theme")
@click.argument("theme", type=click.Choice(THEMES))
@pass_context
def set_theme(ctx: CliContext, theme: str) -> None:
    """Set the display theme."""
    ctx.config.set_theme(theme)
    ctx.renderer.print_success(f"Theme set to '{theme}'")


@config.command("set")
@click.argument("key", type=click.Choice(list(DEFAULT_SETTINGS)))
@click.argument("value")
@pass_context
def set_value(ctx: CliContext, key: str, value: str) -> None:
    """Change a setting.

    Examples:
        starlikers config set transport proxy
        starlikers config set proxy_url https://example.com/buscar.php
        starlikers config set cache_max_age_seconds 600
    """
    try:
        ctx.config.set_setting(key, value)
        ctx.renderer.print_success(f"{key} = {ctx.config.get_setting(key)}")
    except ConfigError as e:
        ctx.renderer.print_error(str(e))
        raise SystemExit(1)


@config.command("show")
@pass_context
def show_config(ctx: CliContext) -> None:
    """Show current configuration."""
    ctx.renderer.render_config(ctx.config)
