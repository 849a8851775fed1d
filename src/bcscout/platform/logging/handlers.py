"""Where: src/bcscout/platform/logging/handlers.py
What: Rich console handler that renders structured scouting events.
Why: Keep search/artist progress readable without cluttering call sites.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ScoutRichHandler(RichHandler):
    """Custom Rich handler with icons for ``scout_event`` log records."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "search.start": ("🔎", "cyan"),
        "search.complete": ("✅", "green"),
        "artist.fetch": ("🎸", "blue"),
        "artist.complete": ("✅", "green"),
        "artist.error": ("⛔", "red"),
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

    def _render_event_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured events with dedicated styling."""

        event = getattr(record, "scout_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        details: list[str] = []
        if event == "search.complete":
            kept = getattr(record, "kept", None)
            total = getattr(record, "total", None)
            if isinstance(kept, int) and isinstance(total, int):
                details.append(f"kept={kept}/{total}")
        url = getattr(record, "url", None)
        if url:
            details.append(str(url))
        if details:
            _ = text.append(" [" + ", ".join(details) + "]", style=Style(color="white"))
        return text

    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for scouting events."""

        event_text = self._render_event_message(record, message)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["ScoutRichHandler"]
