import asyncio

import click
from dotenv import load_dotenv

from weatherboard import (
    HtmlPageSurface,
    Slot,
    WeatherRenderer,
    WeatherService,
    WeatherSettings,
)
from weatherboard.shared import configure_logging


def display_summary(surface: HtmlPageSurface) -> None:
    """Echo the rendered weather to the terminal."""
    if surface.is_visible(Slot.ERROR):
        click.echo(click.style("Não foi possível obter a meteorologia.", fg="red"))
        return

    click.echo(click.style(surface.text(Slot.LOCATION) or "", fg="bright_cyan", bold=True))
    click.echo(
        f"{surface.text(Slot.ICON) or ''} {surface.text(Slot.DESCRIPTION) or ''}  "
        f"{surface.text(Slot.TEMPERATURE) or '-'}°C "
        f"(sensação {surface.text(Slot.FEELS_LIKE) or '-'}°C, "
        f"humidade {surface.text(Slot.HUMIDITY) or '-'}%, "
        f"vento {surface.text(Slot.WIND_SPEED) or '-'} km/h)"
    )
    for card in surface.forecast():
        line = f"  {card.date_label:<16} {card.icon} {card.temp_max} / {card.temp_min}"
        if card.precipitation:
            line += f"  {card.precipitation}"
        click.echo(line)


async def serve(service: WeatherService, once: bool) -> None:
    if once:
        await service.run(iterations=1)
        return

    service.start()
    try:
        while service.is_running:
            await asyncio.sleep(1)
    finally:
        await service.stop()


@click.command()
@click.option("--once", is_flag=True, help="Load the weather once and exit")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default="weather.html",
    show_default=True,
    help="HTML page to write",
)
@click.option("--api-key", default=None, help="OpenWeatherMap API key (overrides env)")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (defaults to WEATHERBOARD_LOG_LEVEL)",
)
def main(once, output, api_key, log_level):
    """Weather for Marvão, Portalegre, refreshed every 30 minutes."""
    load_dotenv()

    if log_level:
        configure_logging(log_level)

    overrides = {"openweather_api_key": api_key} if api_key is not None else {}
    settings = WeatherSettings.from_env(**overrides)

    surface = HtmlPageSurface(output)
    service = WeatherService(settings, WeatherRenderer(surface))

    try:
        asyncio.run(serve(service, once))
    except KeyboardInterrupt:
        pass

    display_summary(surface)
    click.echo(click.style(f"Page written to {output}", dim=True))


if __name__ == "__main__":
    main()
