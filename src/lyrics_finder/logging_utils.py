"""Logging helpers."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .models import EventKind, SearchEvent

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

_DEBUG_EVENTS = frozenset(
    {
        EventKind.FETCH_NOT_FOUND,
        EventKind.FETCH_TRANSIENT,
        EventKind.EXTRACTION_ABSENT,
        EventKind.VALIDATION_REJECTED,
        EventKind.CANDIDATE_TRIED,
    }
)


def configure_logging(verbose: bool = False) -> None:
    """Configure application logging once for CLI usage."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def get_logger() -> logging.Logger:
    """Return the module logger used across the package."""
    return logging.getLogger("lyrics_finder")


def format_event(event: SearchEvent) -> str:
    """Render an event as a single log line."""
    parts = [event.kind.value]
    for label, value in (
        ("strategy", event.strategy),
        ("site", event.site_id),
        ("url", event.url),
        ("selector", event.selector),
        ("detail", event.detail),
    ):
        if value:
            parts.append(f"{label}={value}")
    return " ".join(parts)


def logging_observer(logger: logging.Logger) -> Callable[[SearchEvent], None]:
    """Build an observer that writes each search event to ``logger``."""

    def observe(event: SearchEvent) -> None:
        if event.kind in _DEBUG_EVENTS:
            logger.debug("%s", format_event(event))
        elif event.kind in {EventKind.STRATEGY_FAILED, EventKind.ALL_STRATEGIES_FAILED}:
            logger.warning("%s", format_event(event))
        else:
            logger.info("%s", format_event(event))

    return observe
