"""Star chart command."""

import asyncio
from pathlib import Path

import click

from starlikers.cli.context import CliContext
from starlikers.core.exceptions import ApiError, StarlikersError, ValidationError
from starlikers.core.utils import today_iso


pass_context = click.make_pass_decorator(CliContext)


@click.command()
@click.argument("subject")
@click.option("--style", "-s", default="default", show_default=True, help="Chart style code")
@click.option("--location", "-l", type=str, help="Observer position as 'lat,lng'")
@click.option("--lat", type=str, help="Observer latitude (with --lon, instead of --location)")
@click.option("--lon", type=str, help="Observer longitude (with --lat, instead of --location)")
@click.option("--date", "-d", type=str, help="Observation date YYYY-MM-DD (default: today)")
@click.option(
    "--download",
    type=click.Path(path_type=Path),
    help="Save the image to this file or directory",
)
@click.option("--share", is_flag=True, help="Print text for sharing the chart")
@pass_context
def chart(
    ctx: CliContext,
    subject: str,
    style: str,
    location: str | None,
    lat: str | None,
    lon: str | None,
    date: str | None,
    download: Path | None,
    share: bool,
) -> None:
    """Generate a constellation star chart.

    SUBJECT is a constellation code such as 'ori' (see 'starlikers catalog
    constellations').

    Examples:
        starlikers chart ori --location "33.775867,-84.39733" --date 2024-06-01
        starlikers chart uma --lat -23.55 --lon -46.63 --style navy --download .
    """
    if location is None and (lat is not None or lon is not None):
        location = f"{lat or ''},{lon or ''}"

    if subject not in ctx.catalog:
        ctx.renderer.print_warning(
            f"'{subject}' is not in the built-in catalog; sending it anyway"
        )

    asyncio.run(
        _chart_async(ctx, subject, style, location, date or today_iso(), download, share)
    )


async def _chart_async(
    ctx: CliContext,
    subject: str,
    style: str,
    location: str | None,
    date: str,
    download: Path | None,
    share: bool,
) -> None:
    """Async implementation of chart command."""
    try:
        service = ctx.get_chart_service()

        with ctx.console.status("Generating star chart..."):
            result = await service.star_chart(subject, style, location, date)

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

