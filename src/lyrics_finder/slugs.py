"""URL slug helpers."""

from __future__ import annotations

import re

_FOLDS = {
    "a": "àáâäæãåā",
    "e": "èéêëēėę",
    "i": "îïíīįì",
    "o": "ôöòóøōõ",
    "u": "ûüùúū",
    "y": "ÿỳý",
    "n": "ñń",
    "c": "çć",
}
DIACRITIC_TABLE = str.maketrans(
    {accented: base for base, group in _FOLDS.items() for accented in group}
)
_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_SEPARATORS = re.compile(r"[\s-]+")


def slugify(text: str) -> str:
    """Return a lowercase, ASCII, hyphen-separated token for a URL path.

    Hyphens already present are kept as separators so that slugifying a slug
    returns it unchanged. Input made only of symbols yields an empty string.
    """
    value = (text or "").lower().translate(DIACRITIC_TABLE)
    value = _DISALLOWED.sub("", value)
    value = _SEPARATORS.sub("-", value)
    return value.strip("-")
