import asyncio

from weatherboard import (
    HtmlPageSurface,
    WeatherRenderer,
    WeatherService,
    WeatherSettings,
)


async def main():
    try:
        settings = WeatherSettings.from_env()
        service = WeatherService(settings, WeatherRenderer(HtmlPageSurface("weather.html")))

        await service.run()

    except KeyboardInterrupt:
        pass
    except Exception:
        print("Critical application error")
        raise


if __name__ == "__main__":
    asyncio.run(main())
