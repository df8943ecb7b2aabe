"""Whitespace normalization for extracted lyrics."""

from __future__ import annotations

import re

_BLANK_LINE_RUN = re.compile(r"\n\s*\n\s*\n+")
_NEWLINE_RUN = re.compile(r"\n{3,}")


def normalize_lyrics(text: str) -> str:
    """Return lyrics with unified line endings and no padded or empty lines."""
    value = (text or "").replace("\r\n", "\n").replace("\r", "\n")
    value = _BLANK_LINE_RUN.sub("\n\n", value).strip()
    lines = (line.strip() for line in value.split("\n"))
    value = "\n".join(line for line in lines if line)
    return _NEWLINE_RUN.sub("\n\n", value)
