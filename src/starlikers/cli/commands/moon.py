"""Moon phase command."""

import asyncio
from pathlib import Path

import click

from starlikers.api.builder import IMAGE_FORMATS
from starlikers.api.endpoints import MOON_ENDPOINTS
from starlikers.cli.context import CliContext
from starlikers.core.exceptions import ApiError, StarlikersError, ValidationError
from starlikers.core.utils import today_iso


pass_context = click.make_pass_decorator(CliContext)


@click.command()
@click.option("--lat", type=str, required=True, help="Observer latitude in degrees")
@click.option("--lon", type=str, required=True, help="Observer longitude in degrees")
@click.option("--date", "-d", type=str, help="Observation date YYYY-MM-DD (default: today)")
@click.option("--format", "image_format", type=click.Choice(IMAGE_FORMATS), help="Image format")
@click.option("--preset", "-p", type=str, help="Moon preset (see 'starlikers catalog presets')")
@click.option("--moon-style", type=str, help="Moon style: default, sketch, shaded")
@click.option("--background-style", type=str, help="Background: stars, solid, transparent")
@click.option("--background-color", type=str, help="Background color")
@click.option("--heading-color", type=str, help="Heading color")
@click.option("--text-color", type=str, help="Text color")
@click.option("--orientation", type=click.Choice(["south-up", "north-up"]), help="Orientation")
@click.option("--view", "view_type", type=str, help="View type, e.g. portrait-simple")
@click.option(
    "--endpoint",
    type=click.Choice(MOON_ENDPOINTS),
    default="moon-phase",
    show_default=True,
    help="API endpoint to call",
)
@click.option(
    "--download",
    type=click.Path(path_type=Path),
    help="Save the image to this file or directory",
)
@click.option("--share", is_flag=True, help="Print text for sharing the image")
@pass_context
def moon(
    ctx: CliContext,
    lat: str,
    lon: str,
    date: str | None,
    image_format: str | None,
    preset: str | None,
    moon_style: str | None,
    background_style: str | None,
    background_color: str | None,
    heading_color: str | None,
    text_color: str | None,
    orientation: str | None,
    view_type: str | None,
    endpoint: str,
    download: Path | None,
    share: bool,
) -> None:
    """Generate a moon phase image.

    Examples:
        starlikers moon --lat -23.55 --lon -46.63
        starlikers moon --lat 33.77 --lon -84.39 --preset vintage --date 2024-06-01
    """
    style_fields = {
        "moon_style": moon_style,
        "background_style": background_style,
        "background_color": background_color,
        "heading_color": heading_color,
        "text_color": text_color,
        "orientation": orientation,
        "view_type": view_type,
    }
    asyncio.run(
        _moon_async(
            ctx, lat, lon, date or today_iso(), image_format, preset,
            style_fields, endpoint, download, share,
        )
    )


async def _moon_async(
    ctx: CliContext,
    lat: str,
    lon: str,
    date: str,
    image_format: str | None,
    preset: str | None,
    style_fields: dict[str, str | None],
    endpoint: str,
    download: Path | None,
    share: bool,
) -> None:
    """Async implementation of moon command."""
    try:
        service = ctx.get_chart_service()

        with ctx.console.status("Generating moon image..."):
            result = await service.moon_phase(
                lat,
                lon,
                date,
                format=image_format,
                preset=preset,
                endpoint=endpoint,
                **style_fields,
            )

        ctx.renderer.render_chart(result, ctx.catalog)
        await ctx.deliver(result, download, share)

    except ValidationError as e:
        ctx.renderer.render_validation_error(e)
        raise SystemExit(1)
    except ApiError as e:
        ctx.renderer.render_api_error(e, verbose=ctx.verbose)
        raise SystemExit(1)
    except StarlikersError as e:
        ctx.renderer.print_error(str(e))
        raise SystemExit(1)
    finally:
        await ctx.cleanup()
