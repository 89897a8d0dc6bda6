"""Rich console handler with structured parsing-event rendering.

Where: platform/logging/handlers.py
What: Render ``parsing_event`` log records as compact, coloured one-liners.
Why: Keep normalizer tracing readable without formatting logic at call sites.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ParsingRichHandler(RichHandler):
    """Custom Rich handler that renders parsing events with icons."""

    _PARSING_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "parsing.title.match": ("🎯", "green"),
        "parsing.title.fallback": ("↪️", "yellow"),
        "parsing.description.match": ("📝", "green"),
        "parsing.description.skip": ("ℹ️", "yellow"),
        "parsing.media_session.match": ("🎧", "cyan"),
        "parsing.connector.scrape": ("📦", "magenta"),
    }
    _LABELS: ClassVar[dict[str, str]] = {
        "parsing.title.match": "Title matched",
        "parsing.title.fallback": "Title used as track",
        "parsing.description.match": "Description matched",
        "parsing.description.skip": "Description not recognised",
        "parsing.media_session.match": "Media session read",
        "parsing.connector.scrape": "Scrape parsed",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _render_parsing_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured parsing events with dedicated styling."""

        event = getattr(record, "parsing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._PARSING_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._LABELS.get(event, event))

        rule = getattr(record, "rule", None)
        if isinstance(rule, str) and rule:
            _ = body.append(f" [{rule}]")

        artist = getattr(record, "artist", None)
        track = getattr(record, "track", None)
        label = " — ".join(part for part in (artist, track) if isinstance(part, str) and part)
        if label:
            _ = body.append(": ")
            _ = body.append(label, style=Style(color="white"))

        source = getattr(record, "source_text", None)
        if isinstance(source, str) and source:
            _ = body.append(f" ({self._shorten(source)})", style=Style(color="bright_black"))

        _ = text.append_text(body)
        return text

    @staticmethod
    def _shorten(value: str, limit: int = 60) -> str:
        flattened = " ".join(value.split())
        if len(flattened) <= limit:
            return flattened
        return flattened[: limit - 1] + "…"

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for parsing events."""

        parsing_text = self._render_parsing_message(record)
        if parsing_text is not None:
            return parsing_text

        return super().render_message(record, message)


__all__ = ["ParsingRichHandler"]
