"""Protocols and lightweight model types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, Union


@dataclass(frozen=True)
class SearchQuery:
    """A song to look up."""

    title: str
    artist: str


@dataclass(frozen=True)
class SiteURLTemplate:
    """A known lyrics site and how to build a page path from slugs."""

    site_id: str
    base_url: str
    path_pattern: Callable[[str, str], str]

    def build_url(self, title_slug: str, artist_slug: str) -> str:
        return self.base_url.rstrip("/") + self.path_pattern(title_slug, artist_slug)


@dataclass(frozen=True)
class Candidate:
    """One URL hypothesized to host the lyrics."""

    url: str
    site_id: str


@dataclass(frozen=True)
class FetchOk:
    html: str


@dataclass(frozen=True)
class FetchNotFound:
    pass


@dataclass(frozen=True)
class FetchTransientError:
    cause: str


FetchOutcome = Union[FetchOk, FetchNotFound, FetchTransientError]


@dataclass(frozen=True)
class ExtractionResult:
    """Text accepted by the validator and the selector that produced it."""

    raw_text: str
    selector: str


@dataclass(frozen=True)
class SearchResult:
    """The output contract of a lyrics search."""

    success: bool
    lyrics: str | None = None
    source: str | None = None
    error: str | None = None

    @classmethod
    def found(cls, lyrics: str, source: str) -> SearchResult:
        return cls(success=True, lyrics=lyrics, source=source)

    @classmethod
    def failed(cls, error: str) -> SearchResult:
        return cls(success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": self.success}
        if self.success:
            payload["lyrics"] = self.lyrics
            payload["source"] = self.source
        else:
            payload["error"] = self.error
        return payload


class EventKind(str, Enum):
    STRATEGY_STARTED = "strategy_started"
    STRATEGY_SUCCEEDED = "strategy_succeeded"
    STRATEGY_EMPTY = "strategy_empty"
    STRATEGY_FAILED = "strategy_failed"
    ALL_STRATEGIES_FAILED = "all_strategies_failed"
    SLUG_EMPTY = "slug_empty"
    CANDIDATE_TRIED = "candidate_tried"
    FETCH_NOT_FOUND = "fetch_not_found"
    FETCH_TRANSIENT = "fetch_transient"
    SELECTOR_MATCHED = "selector_matched"
    EXTRACTION_ABSENT = "extraction_absent"
    VALIDATION_REJECTED = "validation_rejected"


@dataclass(frozen=True)
class SearchEvent:
    """A structured progress event emitted while searching."""

    kind: EventKind
    strategy: str | None = None
    url: str | None = None
    site_id: str | None = None
    selector: str | None = None
    detail: str | None = None


Observer = Callable[[SearchEvent], None]


def ignore_event(_event: SearchEvent) -> None:
    """Observer that discards every event."""
    return None


class Fetcher(Protocol):
    """Contract for page fetchers."""

    def fetch(self, url: str) -> FetchOutcome:
        """Return the outcome of one GET request."""


class SearchBackend(Protocol):
    """Contract for external search providers."""

    def search(self, query: str, num: int) -> list[str]:
        """Return candidate URLs for a query."""


class Strategy(Protocol):
    """One self-contained method of obtaining lyrics."""

    name: str

    def __call__(self, query: SearchQuery) -> SearchResult | None:
        """Return a result, or None when the strategy found nothing."""
