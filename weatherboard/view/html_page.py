from __future__ import annotations

import asyncio
from html import escape
from pathlib import Path
from textwrap import dedent, indent
from typing import Iterable

from weatherboard.shared import LoggingMixin
from weatherboard.view.surface import ForecastCard, MemoryViewSurface, Slot


class HtmlPageSurface(MemoryViewSurface, LoggingMixin):
    """
    Memory surface that writes its state out as a static HTML page on flush.

    The page is rendered on the event loop and written from a worker thread.
    Writes happen in flush order.
    """

    def __init__(self, path: str | Path, slots: Iterable[Slot] | None = None):
        super().__init__(slots)
        self.path = Path(path)
        self._write_lock = asyncio.Lock()

        # The page starts out showing the loading state
        if self.has_slot(Slot.LOADING):
            self.visible[Slot.LOADING] = True

    async def flush(self) -> None:
        page = self.render_html()
        async with self._write_lock:
            await asyncio.to_thread(self._write, page)
        self.logger.debug("Wrote weather page to %s", self.path)

    def _write(self, page: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(page, encoding="utf-8")

    def render_html(self) -> str:
        body = "\n".join(
            section
            for section in (
                self._container(Slot.LOADING, "<p>A carregar...</p>"),
                self._container(Slot.CONTENT, self._content_html()),
                self._container(
                    Slot.ERROR, "<p>Não foi possível obter a meteorologia.</p>"
                ),
            )
            if section
        )
        return dedent(
            """\
            <!DOCTYPE html>
            <html lang="pt">
            <head>
              <meta charset="utf-8">
              <title>Meteorologia</title>
            </head>
            <body>
            {body}
            </body>
            </html>
            """
        ).format(body=body)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _container(self, slot: Slot, inner: str) -> str:
        if not self.has_slot(slot):
            return ""
        style = "" if self.is_visible(slot) else ' style="display: none"'
        return f'<div id="{slot.value}"{style}>\n{indent(inner, "  ")}\n</div>'

    def _text_span(self, slot: Slot, suffix: str = "") -> str:
        if not self.has_slot(slot):
            return ""
        text = escape(self.text(slot) or "")
        return f'<span id="{slot.value}">{text}</span>{escape(suffix)}'

    def _content_html(self) -> str:
        lines = [
            f"<h2>{self._text_span(Slot.LOCATION)}</h2>",
            f"<div>{self._text_span(Slot.ICON)} {self._text_span(Slot.DESCRIPTION)}</div>",
            f"<div>{self._text_span(Slot.TEMPERATURE, '°C')}</div>",
            f"<div>Sensação: {self._text_span(Slot.FEELS_LIKE, '°C')}</div>",
            f"<div>Humidade: {self._text_span(Slot.HUMIDITY, '%')}</div>",
            f"<div>Vento: {self._text_span(Slot.WIND_SPEED, ' km/h')}</div>",
        ]
        if self.has_slot(Slot.FORECAST):
            cards = "\n".join(self._card_html(card) for card in self.forecast())
            lines.append(
                f'<div id="{Slot.FORECAST.value}">\n{indent(cards, "  ")}\n</div>'
            )
        return "\n".join(lines)

    @staticmethod
    def _card_html(card: ForecastCard) -> str:
        lines = [
            '<div class="forecast-day">',
            f'  <div class="forecast-date">{escape(card.date_label)}</div>',
            f'  <div class="forecast-icon">{escape(card.icon)}</div>',
            '  <div class="forecast-temps">',
            f'    <span class="temp-max">{escape(card.temp_max)}</span>',
            f'    <span class="temp-min">{escape(card.temp_min)}</span>',
            "  </div>",
            f'  <div class="forecast-desc">{escape(card.description)}</div>',
        ]
        if card.precipitation is not None:
            lines.append(
                f'  <div class="forecast-precip">{escape(card.precipitation)}</div>'
            )
        lines.append("</div>")
        return "\n".join(lines)
