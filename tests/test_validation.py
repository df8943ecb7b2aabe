from pathlib import Path

import pytest

from lyrics_finder.errors import ConfigError
from lyrics_finder.validation import (
    is_supported_url,
    load_lines_from_file,
    looks_like_lyrics,
    normalize_urls,
    validate_runtime_constraints,
)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "short",
        "a\nb\nc\nd\ne\nf",
        "[Refrain] " + "x" * 30,
        "verse\n\nchorus\n\nrefrain\n\n" + "y" * 20,
        "z" * 49,
    ],
)
def test_rejects_text_shorter_than_fifty_characters(text: str) -> None:
    assert len(text) < 50
    assert looks_like_lyrics(text) is False


def test_rejects_long_single_line_without_structure() -> None:
    footer = "Accueil Contact Mentions légales Politique de confidentialité"
    assert looks_like_lyrics(footer) is False


def test_accepts_multiple_line_breaks() -> None:
    text = "Hier encore\nJ'avais vingt ans\nJe caressais le temps et jouais"
    assert looks_like_lyrics(text) is True


def test_accepts_song_structure_keyword_case_insensitively() -> None:
    assert looks_like_lyrics("CHORUS: " + "la " * 20) is True
    assert looks_like_lyrics("Couplet premier " + "la " * 20) is True


def test_accepts_two_substantial_lines() -> None:
    text = "Je caressais le temps et jouais\r" + "de la vie comme on joue de l'amour"
    assert looks_like_lyrics(text) is True


def test_accepts_blank_line_separated_stanza() -> None:
    assert looks_like_lyrics("la la la la la la la la la la la la\n\nla la la la la la la") is True


def test_is_supported_url_and_normalize() -> None:
    urls = [
        "https://genius.com/a-lyrics",
        "ftp://example.com/file",
        "https://genius.com/a-lyrics/",
        " https://www.paroles.net/b ",
    ]
    assert is_supported_url(urls[0]) is True
    assert is_supported_url(urls[1]) is False
    assert normalize_urls(urls) == ["https://genius.com/a-lyrics", "https://www.paroles.net/b"]


def _valid_constraints(**overrides: object) -> dict[str, object]:
    values: dict[str, object] = {
        "request_timeout": 10.0,
        "max_redirects": 3,
        "min_lyrics_length": 50,
        "workers": 1,
        "max_search_results": 10,
    }
    values.update(overrides)
    return values


def test_validate_runtime_constraints_accepts_defaults() -> None:
    validate_runtime_constraints(**_valid_constraints())  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "overrides",
    [
        {"request_timeout": 0},
        {"max_redirects": -1},
        {"min_lyrics_length": 0},
        {"workers": 0},
        {"max_search_results": 0},
    ],
)
def test_validate_runtime_constraints_rejects_invalid_values(overrides: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        validate_runtime_constraints(**_valid_constraints(**overrides))  # type: ignore[arg-type]


def test_load_lines_from_file(tmp_path: Path) -> None:
    sample = tmp_path / "sample.txt"
    sample.write_text("one\n\n two \n", encoding="utf-8")
    assert load_lines_from_file(str(sample)) == ["one", "two"]
