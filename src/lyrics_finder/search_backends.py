"""External search backends and query builder."""

from __future__ import annotations

from .models import SearchQuery


def build_queries(query: SearchQuery) -> list[str]:
    """Build search phrases likely to surface a lyrics page."""
    return [
        f'"{query.title}" "{query.artist}" paroles lyrics',
        f"{query.title} {query.artist} paroles francais",
        f"{query.artist} {query.title} lyrics french",
    ]


class NullSearchBackend:
    """Search backend used until a real search index is wired in.

    Any object with a ``search(query, num)`` method returning URLs can take
    its place in :class:`~lyrics_finder.strategies.ExternalSearchStrategy`.
    """

    def search(self, query: str, num: int) -> list[str]:
        return []
