"""Lyrics extraction from arbitrary HTML and URL helpers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from .models import EventKind, ExtractionResult, Observer, SearchEvent, ignore_event
from .validation import looks_like_lyrics


@dataclass(frozen=True)
class SelectorRule:
    """A CSS selector and the family of pages it targets."""

    css: str
    scope: str


SELECTOR_CASCADE: tuple[SelectorRule, ...] = (
    SelectorRule(".song-text", "paroles.net"),
    SelectorRule(".lyrics", "paroles.net"),
    SelectorRule(".paroles", "paroles.net"),
    SelectorRule('[class*="lyrics"]', "paroles.net"),
    SelectorRule('[class*="paroles"]', "paroles.net"),
    SelectorRule('[data-lyrics-container="true"]', "genius.com"),
    SelectorRule(".Lyrics__Container-sc-1ynbvzw-6", "genius.com"),
    SelectorRule(".song-lyrics", "generic"),
    SelectorRule("#lyrics", "generic"),
    SelectorRule(".lyric-text", "generic"),
    SelectorRule('[id*="lyrics"]', "generic"),
    SelectorRule('div[class*="song"] div[class*="text"]', "generic"),
    SelectorRule(".content .lyrics", "generic"),
    SelectorRule('div:-soup-contains("couplet", "Couplet")', "keyword"),
    SelectorRule('div:-soup-contains("refrain", "Refrain")', "keyword"),
    SelectorRule('div:-soup-contains("verse", "Verse")', "keyword"),
    SelectorRule('div:-soup-contains("chorus", "Chorus")', "keyword"),
)

Validator = Callable[[str], bool]


def domain_from_url(url: str) -> str:
    """Extract lowercase hostname from URL."""
    return urlparse(url).netloc.lower()


def parse_page(html: str) -> BeautifulSoup:
    """Parse HTML and render line-break tags as newlines."""
    soup = BeautifulSoup(html or "", "html.parser")
    for br in soup.find_all("br"):
        br.replace_with("\n")
    return soup


def extract_lyrics(
    html: str,
    site_id: str,
    *,
    cascade: tuple[SelectorRule, ...] = SELECTOR_CASCADE,
    validator: Validator = looks_like_lyrics,
    observer: Observer = ignore_event,
) -> ExtractionResult | None:
    """Return the first selector's text that the validator accepts.

    Selectors are tried in cascade order and only the first element matched
    by each selector is considered. ``None`` means the page has no block that
    looks like lyrics.
    """
    soup = parse_page(html)
    for rule in cascade:
        element = soup.select_one(rule.css)
        if element is None:
            continue
        text = element.get_text().strip()
        if validator(text):
            observer(
                SearchEvent(kind=EventKind.SELECTOR_MATCHED, site_id=site_id, selector=rule.css)
            )
            return ExtractionResult(raw_text=text, selector=rule.css)
    observer(SearchEvent(kind=EventKind.EXTRACTION_ABSENT, site_id=site_id))
    return None
