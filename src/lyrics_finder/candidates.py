"""Known lyrics sites and candidate URL generation."""

from __future__ import annotations

from collections.abc import Sequence

from .models import (
    Candidate,
    EventKind,
    Observer,
    SearchEvent,
    SearchQuery,
    SiteURLTemplate,
    ignore_event,
)
from .slugs import slugify

SITE_TEMPLATES: tuple[SiteURLTemplate, ...] = (
    SiteURLTemplate(
        site_id="paroles.net",
        base_url="https://www.paroles.net",
        path_pattern=lambda title, artist: f"/{artist}/paroles-{title}",
    ),
    SiteURLTemplate(
        site_id="paroles.net",
        base_url="https://www.paroles.net",
        path_pattern=lambda title, artist: f"/{artist}/{title}",
    ),
    SiteURLTemplate(
        site_id="genius.com",
        base_url="https://genius.com",
        path_pattern=lambda title, artist: f"/{artist}-{title}-lyrics",
    ),
)


def generate_candidates(
    query: SearchQuery,
    templates: Sequence[SiteURLTemplate] = SITE_TEMPLATES,
    *,
    observer: Observer = ignore_event,
) -> list[Candidate]:
    """Apply every template to the query, keeping template order."""
    title_slug = slugify(query.title)
    artist_slug = slugify(query.artist)
    if not title_slug or not artist_slug:
        observer(
            SearchEvent(
                kind=EventKind.SLUG_EMPTY,
                detail=f"title={title_slug!r} artist={artist_slug!r}",
            )
        )
        return []
    return [
        Candidate(url=template.build_url(title_slug, artist_slug), site_id=template.site_id)
        for template in templates
    ]
