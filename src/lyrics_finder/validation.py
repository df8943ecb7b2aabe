"""Validation and runtime guardrails."""

from __future__ import annotations

import re
from pathlib import Path
from urllib.parse import urlparse

from .errors import ConfigError

MIN_LYRICS_LENGTH = 50

LYRICS_INDICATORS = [
    # at least two line breaks
    re.compile(r"\n.*\n"),
    re.compile(r"couplet|refrain|verse|chorus", re.IGNORECASE),
    # blank line between stanzas
    re.compile(r"\n\s*\n"),
    re.compile(r".{10,}[\n\r].{10,}"),
]


def looks_like_lyrics(text: str | None, min_length: int = MIN_LYRICS_LENGTH) -> bool:
    """Return True when text is long enough and has any lyric-like structure."""
    if not text or len(text) < min_length:
        return False
    return any(pattern.search(text) for pattern in LYRICS_INDICATORS)


def is_supported_url(url: str) -> bool:
    """Allow only absolute HTTP(S) URLs with a hostname."""
    parsed = urlparse(url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def normalize_urls(urls: list[str]) -> list[str]:
    """Normalize and dedupe candidate URL list."""
    output: list[str] = []
    seen: set[str] = set()
    for raw in urls:
        value = raw.strip()
        if not is_supported_url(value):
            continue
        key = value.split("#", maxsplit=1)[0].rstrip("/")
        if key in seen:
            continue
        seen.add(key)
        output.append(value)
    return output


def load_lines_from_file(path: str) -> list[str]:
    """Load non-empty lines from a UTF-8 text file."""
    content = Path(path).read_text(encoding="utf-8")
    return [line.strip() for line in content.splitlines() if line.strip()]


def validate_runtime_constraints(
    *,
    request_timeout: float,
    max_redirects: int,
    min_lyrics_length: int,
    workers: int,
    max_search_results: int,
) -> None:
    """Validate CLI/runtime configuration and raise ConfigError on invalid values."""
    if request_timeout <= 0:
        raise ConfigError("--timeout must be > 0.")
    if max_redirects < 0:
        raise ConfigError("--max-redirects must be >= 0.")
    if min_lyrics_length < 1:
        raise ConfigError("min_lyrics_length must be >= 1.")
    if workers < 1:
        raise ConfigError("--workers must be >= 1.")
    if max_search_results < 1:
        raise ConfigError("max_search_results must be >= 1.")
