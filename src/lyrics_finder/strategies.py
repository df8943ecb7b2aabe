"""Search strategies: direct site lookup, external search and synthetic fallback."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor

from .candidates import SITE_TEMPLATES, generate_candidates
from .extraction import domain_from_url, extract_lyrics
from .models import (
    Candidate,
    EventKind,
    Fetcher,
    FetchNotFound,
    FetchOk,
    FetchOutcome,
    Observer,
    SearchBackend,
    SearchEvent,
    SearchQuery,
    SearchResult,
    SiteURLTemplate,
    ignore_event,
)
from .normalization import normalize_lyrics
from .search_backends import build_queries
from .validation import MIN_LYRICS_LENGTH, looks_like_lyrics, normalize_urls

DEMO_SOURCE = "Demo lyrics (development mode)"

DEMO_LYRICS_TEMPLATE = """[Couplet 1]
Dans les rues de Paris
Je pense à notre histoire
{title}, tu es partie
Mais je garde l'espoir

[Refrain]
{title}, {title}
Reviens-moi ce soir
{title}, {title}
Dans mon cœur tu peux voir

[Couplet 2]
{artist} me chantait
Cette chanson d'amour
Maintenant je sais
Que l'amour dure toujours

[Refrain]
{title}, {title}
Reviens-moi ce soir
{title}, {title}
Dans mon cœur tu peux voir

[Pont]
Les souvenirs dansent
Dans la lumière du matin
Notre amour recommence
Comme un nouveau refrain

[Note: Ces paroles sont générées pour démonstration]"""


class CandidateRunner:
    """Fetch, extract and normalize candidates until one yields lyrics.

    With ``workers > 1`` pages are fetched concurrently, but outcomes are still
    judged in candidate order so the earliest accepted candidate wins.
    """

    def __init__(
        self,
        *,
        fetcher: Fetcher,
        strategy: str,
        min_length: int = MIN_LYRICS_LENGTH,
        workers: int = 1,
        observer: Observer = ignore_event,
    ) -> None:
        self._fetcher = fetcher
        self._strategy = strategy
        self._min_length = min_length
        self._workers = workers
        self._observer = observer

    def run(self, candidates: Sequence[Candidate]) -> SearchResult | None:
        if not candidates:
            return None
        if self._workers == 1 or len(candidates) == 1:
            for candidate in candidates:
                lyrics = self._lyrics_from(candidate, self._fetch(candidate))
                if lyrics:
                    return SearchResult.found(lyrics, source=candidate.site_id)
            return None
        return self._run_concurrently(candidates)

    def _run_concurrently(self, candidates: Sequence[Candidate]) -> SearchResult | None:
        with ThreadPoolExecutor(max_workers=min(self._workers, len(candidates))) as executor:
            futures: list[Future[FetchOutcome]] = [
                executor.submit(self._fetch, candidate) for candidate in candidates
            ]
            for index, (candidate, future) in enumerate(zip(candidates, futures)):
                lyrics = self._lyrics_from(candidate, future.result())
                if lyrics:
                    # fetches already running are joined when the pool exits
                    for pending in futures[index + 1 :]:
                        pending.cancel()
                    return SearchResult.found(lyrics, source=candidate.site_id)
            return None

    def _emit(self, kind: EventKind, candidate: Candidate, detail: str | None = None) -> None:
        self._observer(
            SearchEvent(
                kind=kind,
                strategy=self._strategy,
                url=candidate.url,
                site_id=candidate.site_id,
                detail=detail,
            )
        )

    def _fetch(self, candidate: Candidate) -> FetchOutcome:
        self._emit(EventKind.CANDIDATE_TRIED, candidate)
        return self._fetcher.fetch(candidate.url)

    def _lyrics_from(self, candidate: Candidate, outcome: FetchOutcome) -> str | None:
        if isinstance(outcome, FetchNotFound):
            self._emit(EventKind.FETCH_NOT_FOUND, candidate)
            return None
        if not isinstance(outcome, FetchOk):
            self._emit(EventKind.FETCH_TRANSIENT, candidate, outcome.cause)
            return None

        extracted = extract_lyrics(
            outcome.html,
            candidate.site_id,
            validator=lambda text: looks_like_lyrics(text, self._min_length),
            observer=self._observer,
        )
        if extracted is None:
            return None
        lyrics = normalize_lyrics(extracted.raw_text)
        if len(lyrics) <= self._min_length:
            self._emit(EventKind.VALIDATION_REJECTED, candidate, f"{len(lyrics)} characters")
            return None
        return lyrics


class DirectSiteStrategy:
    """Try the known lyrics sites' URL layouts directly."""

    name = "direct-site"

    def __init__(
        self,
        *,
        fetcher: Fetcher,
        templates: Sequence[SiteURLTemplate] = SITE_TEMPLATES,
        min_length: int = MIN_LYRICS_LENGTH,
        workers: int = 1,
        observer: Observer = ignore_event,
    ) -> None:
        self._templates = templates
        self._observer = observer
        self._runner = CandidateRunner(
            fetcher=fetcher,
            strategy=self.name,
            min_length=min_length,
            workers=workers,
            observer=observer,
        )

    def __call__(self, query: SearchQuery) -> SearchResult | None:
        candidates = generate_candidates(query, self._templates, observer=self._observer)
        return self._runner.run(candidates)


class ExternalSearchStrategy:
    """Ask a search backend for pages, then run them like direct candidates."""

    name = "external-search"

    def __init__(
        self,
        *,
        search_backend: SearchBackend,
        fetcher: Fetcher,
        max_results: int = 10,
        min_length: int = MIN_LYRICS_LENGTH,
        workers: int = 1,
        observer: Observer = ignore_event,
    ) -> None:
        self._search_backend = search_backend
        self._max_results = max_results
        self._runner = CandidateRunner(
            fetcher=fetcher,
            strategy=self.name,
            min_length=min_length,
            workers=workers,
            observer=observer,
        )

    def __call__(self, query: SearchQuery) -> SearchResult | None:
        urls: list[str] = []
        for phrase in build_queries(query):
            urls.extend(self._search_backend.search(phrase, self._max_results))
        candidates = [
            Candidate(url=url, site_id=domain_from_url(url)) for url in normalize_urls(urls)
        ]
        return self._runner.run(candidates)


class SyntheticFallbackStrategy:
    """Return clearly labelled demo lyrics so callers always get something."""

    name = "synthetic-fallback"

    def __call__(self, query: SearchQuery) -> SearchResult:
        lyrics = DEMO_LYRICS_TEMPLATE.format(title=query.title, artist=query.artist)
        return SearchResult.found(normalize_lyrics(lyrics), source=DEMO_SOURCE)
