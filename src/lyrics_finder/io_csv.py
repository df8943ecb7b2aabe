"""CSV serialization helpers."""

from __future__ import annotations

import csv
from pathlib import Path

from .models import SearchQuery, SearchResult

CSV_FIELDS = [
    "title",
    "artist",
    "success",
    "source",
    "error",
    "lyrics",
]


def result_to_row(query: SearchQuery, result: SearchResult) -> dict[str, str]:
    """Flatten one search into a CSV row."""
    return {
        "title": query.title,
        "artist": query.artist,
        "success": "yes" if result.success else "no",
        "source": result.source or "",
        "error": result.error or "",
        "lyrics": result.lyrics or "",
    }


def write_rows(path: str, rows: list[dict[str, str]]) -> None:
    """Write search rows to CSV with stable schema."""
    output_path = Path(path)
    with output_path.open("w", newline="", encoding="utf-8") as file_obj:
        writer = csv.DictWriter(file_obj, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
