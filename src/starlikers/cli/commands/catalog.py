"""Catalog listing command."""

import click

from starlikers.cli.context import CliContext


pass_context = click.make_pass_decorator(CliContext)


@click.group()
def catalog() -> None:
    """List constellations, chart styles and moon presets."""
    pass


@catalog.command("constellations")
@click.argument("query", required=False, default="")
@pass_context
def constellations(ctx: CliContext, query: str) -> None:
    """List constellations, optionally filtered by code or name."""
    ctx.renderer.render_constellations(ctx.catalog, query)


@catalog.command("styles")
@pass_context
def styles(ctx: CliContext) -> None:
    """List star chart styles."""
    ctx.renderer.render_styles(ctx.catalog)


@catalog.command("presets")
@pass_context
def presets(ctx: CliContext) -> None:
    """List moon presets."""
    ctx.renderer.render_presets(ctx.catalog.moon_presets)
