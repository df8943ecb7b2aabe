"""CLI entrypoint for lyrics-finder."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from tqdm import tqdm

from .config import (
    DEFAULT_ACCEPT_LANGUAGE,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_WORKERS,
    FinderConfig,
)
from .errors import ConfigError
from .io_csv import result_to_row, write_rows
from .logging_utils import configure_logging, get_logger
from .models import SearchQuery
from .pipeline import search_lyrics
from .validation import load_lines_from_file

QUERY_SEPARATOR = "|"


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        description="Lyrics Finder - find, extract and clean song lyrics from known sites."
    )
    parser.add_argument("--title", help="Song title.")
    parser.add_argument("--artist", help="Song artist.")
    parser.add_argument(
        "--queries-file",
        help=f"Batch file, one 'title {QUERY_SEPARATOR} artist' per line (writes CSV).",
    )
    parser.add_argument("--output", default="lyrics_output.csv", help="Output CSV path.")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_REQUEST_TIMEOUT,
        help="Per-page request timeout in seconds.",
    )
    parser.add_argument(
        "--max-redirects",
        type=int,
        default=DEFAULT_MAX_REDIRECTS,
        help="Maximum redirects followed per page.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help="Concurrent page fetches per strategy.",
    )
    parser.add_argument(
        "--accept-language",
        default=DEFAULT_ACCEPT_LANGUAGE,
        help="Accept-Language header sent to lyrics sites.",
    )
    parser.add_argument(
        "--no-fallback",
        action="store_true",
        help="Disable demo lyrics when no real source is found.",
    )
    parser.add_argument("--no-progress", action="store_true", help="Disable tqdm progress bars.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse and pre-validate CLI input."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.queries_file:
        if args.title or args.artist:
            parser.error("--queries-file cannot be combined with --title/--artist.")
    elif not (args.title and args.title.strip() and args.artist and args.artist.strip()):
        parser.error("Provide --title and --artist, or --queries-file.")
    return args


def parse_query_line(line: str) -> SearchQuery | None:
    """Parse one 'title | artist' batch line."""
    title, sep, artist = line.partition(QUERY_SEPARATOR)
    if not sep or not title.strip() or not artist.strip():
        return None
    return SearchQuery(title=title.strip(), artist=artist.strip())


def namespace_to_config(args: argparse.Namespace) -> FinderConfig:
    """Convert CLI args to validated FinderConfig."""
    return FinderConfig(
        accept_language=args.accept_language,
        request_timeout=args.timeout,
        max_redirects=args.max_redirects,
        workers=args.workers,
        enable_fallback=not args.no_fallback,
    )


def _run_single(args: argparse.Namespace, config: FinderConfig, logger: logging.Logger) -> int:
    result = search_lyrics(args.title.strip(), args.artist.strip(), config=config, logger=logger)
    if not result.success:
        logger.error("No lyrics found: %s", result.error)
        return 1
    logger.info("Lyrics source: %s", result.source)
    print(result.lyrics)
    return 0


def _run_batch(args: argparse.Namespace, config: FinderConfig, logger: logging.Logger) -> int:
    queries: list[SearchQuery] = []
    for line in load_lines_from_file(args.queries_file):
        query = parse_query_line(line)
        if query is None:
            logger.warning("Skipping malformed line: %s", line)
            continue
        queries.append(query)

    iterator = queries
    if not args.no_progress:
        iterator = tqdm(queries, desc="searching lyrics")
    rows: list[dict[str, str]] = []
    found = 0
    for query in iterator:
        result = search_lyrics(query.title, query.artist, config=config, logger=logger)
        found += int(result.success)
        rows.append(result_to_row(query, result))

    write_rows(args.output, rows)
    logger.info("Found lyrics for %d of %d songs", found, len(queries))
    logger.info("Wrote results to %s", args.output)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    args = parse_args(argv)
    configure_logging(args.verbose)
    logger = get_logger()
    try:
        config = namespace_to_config(args)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    if args.queries_file:
        return _run_batch(args, config, logger)
    return _run_single(args, config, logger)


if __name__ == "__main__":
    raise SystemExit(main())
