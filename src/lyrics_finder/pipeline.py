"""Core orchestration pipeline."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .config import FinderConfig
from .fetchers import RequestsFetcher, make_session
from .logging_utils import get_logger, logging_observer
from .models import (
    EventKind,
    Fetcher,
    Observer,
    SearchBackend,
    SearchEvent,
    SearchQuery,
    SearchResult,
    Strategy,
)
from .search_backends import NullSearchBackend
from .strategies import DirectSiteStrategy, ExternalSearchStrategy, SyntheticFallbackStrategy

ALL_STRATEGIES_FAILED = "All search strategies failed"


def run_strategies(
    query: SearchQuery,
    strategies: Sequence[Strategy],
    *,
    observer: Observer,
    logger: logging.Logger,
) -> SearchResult:
    """Try each strategy in order and return the first successful result."""
    for strategy in strategies:
        observer(SearchEvent(kind=EventKind.STRATEGY_STARTED, strategy=strategy.name))
        try:
            result = strategy(query)
        except Exception as exc:
            logger.debug("Strategy %s raised", strategy.name, exc_info=True)
            observer(
                SearchEvent(kind=EventKind.STRATEGY_FAILED, strategy=strategy.name, detail=str(exc))
            )
            continue
        if result is not None and result.success:
            observer(
                SearchEvent(
                    kind=EventKind.STRATEGY_SUCCEEDED,
                    strategy=strategy.name,
                    site_id=result.source,
                )
            )
            return result
        observer(SearchEvent(kind=EventKind.STRATEGY_EMPTY, strategy=strategy.name))

    observer(SearchEvent(kind=EventKind.ALL_STRATEGIES_FAILED))
    return SearchResult.failed(ALL_STRATEGIES_FAILED)


def build_strategies(
    config: FinderConfig,
    *,
    fetcher: Fetcher,
    search_backend: SearchBackend,
    observer: Observer,
) -> list[Strategy]:
    """Build the ordered strategy chain for a configuration."""
    strategies: list[Strategy] = [
        DirectSiteStrategy(
            fetcher=fetcher,
            min_length=config.min_lyrics_length,
            workers=config.workers,
            observer=observer,
        ),
        ExternalSearchStrategy(
            search_backend=search_backend,
            fetcher=fetcher,
            max_results=config.max_search_results,
            min_length=config.min_lyrics_length,
            workers=config.workers,
            observer=observer,
        ),
    ]
    if config.enable_fallback:
        strategies.append(SyntheticFallbackStrategy())
    return strategies


def search_lyrics(
    title: str,
    artist: str,
    *,
    config: FinderConfig | None = None,
    fetcher: Fetcher | None = None,
    search_backend: SearchBackend | None = None,
    observer: Observer | None = None,
    logger: logging.Logger | None = None,
) -> SearchResult:
    """Search lyrics for one song, building concrete dependencies when not injected."""
    config = config or FinderConfig()
    logger = logger or get_logger()
    observer = observer or logging_observer(logger)
    backend = search_backend or NullSearchBackend()
    query = SearchQuery(title=title, artist=artist)
    logger.info("Searching lyrics for %r by %r", title, artist)

    if fetcher is not None:
        strategies = build_strategies(
            config, fetcher=fetcher, search_backend=backend, observer=observer
        )
        return run_strategies(query, strategies, observer=observer, logger=logger)

    with make_session(config.request_headers(), max_redirects=config.max_redirects) as session:
        requests_fetcher = RequestsFetcher(
            session=session,
            timeout=config.request_timeout,
            logger=logger,
        )
        strategies = build_strategies(
            config, fetcher=requests_fetcher, search_backend=backend, observer=observer
        )
        return run_strategies(query, strategies, observer=observer, logger=logger)
