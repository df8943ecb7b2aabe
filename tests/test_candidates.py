from lyrics_finder.candidates import SITE_TEMPLATES, generate_candidates
from lyrics_finder.models import Candidate, EventKind, SearchEvent, SearchQuery, SiteURLTemplate


def test_generate_candidates_follows_template_order() -> None:
    candidates = generate_candidates(SearchQuery(title="Hier Encore", artist="Charles Aznavour"))
    assert candidates == [
        Candidate(
            url="https://www.paroles.net/charles-aznavour/paroles-hier-encore",
            site_id="paroles.net",
        ),
        Candidate(
            url="https://www.paroles.net/charles-aznavour/hier-encore",
            site_id="paroles.net",
        ),
        Candidate(
            url="https://genius.com/charles-aznavour-hier-encore-lyrics",
            site_id="genius.com",
        ),
    ]
    assert len(candidates) == len(SITE_TEMPLATES)


def test_generate_candidates_with_custom_templates() -> None:
    templates = [
        SiteURLTemplate("b.example", "https://b.example/", lambda t, a: f"/{t}/{a}"),
        SiteURLTemplate("a.example", "https://a.example", lambda t, a: f"/songs/{a}_{t}"),
    ]
    candidates = generate_candidates(SearchQuery(title="Ça ira", artist="Édith"), templates)
    assert [c.url for c in candidates] == [
        "https://b.example/ca-ira/edith",
        "https://a.example/songs/edith_ca-ira",
    ]
    assert [c.site_id for c in candidates] == ["b.example", "a.example"]


def test_generate_candidates_skips_everything_when_a_slug_is_empty() -> None:
    events: list[SearchEvent] = []
    assert generate_candidates(SearchQuery(title="", artist="X"), observer=events.append) == []
    assert generate_candidates(SearchQuery(title="Hier", artist="???"), observer=events.append) == []
    assert generate_candidates(SearchQuery(title="🎵", artist="🎶")) == []
    assert [event.kind for event in events] == [EventKind.SLUG_EMPTY, EventKind.SLUG_EMPTY]
