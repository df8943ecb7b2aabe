"""Runtime configuration model."""

from __future__ import annotations

from dataclasses import dataclass

from .validation import MIN_LYRICS_LENGTH, validate_runtime_constraints

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
DEFAULT_ACCEPT_LANGUAGE = "fr-FR,fr;q=0.8,en-US;q=0.5,en;q=0.3"
DEFAULT_REFERER = "https://www.google.com/"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_MAX_REDIRECTS = 3
DEFAULT_WORKERS = 1
DEFAULT_MAX_SEARCH_RESULTS = 10


@dataclass(frozen=True)
class FinderConfig:
    """Validated configuration used by the lyrics search pipeline."""

    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = DEFAULT_ACCEPT_LANGUAGE
    referer: str = DEFAULT_REFERER
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    min_lyrics_length: int = MIN_LYRICS_LENGTH
    workers: int = DEFAULT_WORKERS
    max_search_results: int = DEFAULT_MAX_SEARCH_RESULTS
    enable_fallback: bool = True

    def __post_init__(self) -> None:
        validate_runtime_constraints(
            request_timeout=self.request_timeout,
            max_redirects=self.max_redirects,
            min_lyrics_length=self.min_lyrics_length,
            workers=self.workers,
            max_search_results=self.max_search_results,
        )

    def request_headers(self) -> dict[str, str]:
        """Browser-like header set sent with every page request."""
        return {
            "User-Agent": self.user_agent,
            "Accept": DEFAULT_ACCEPT,
            "Accept-Language": self.accept_language,
            "Referer": self.referer,
        }
