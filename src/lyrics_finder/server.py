"""HTTP endpoint exposing lyrics search as JSON."""

from __future__ import annotations

import os
from collections.abc import Callable

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from flask_cors import CORS

from .config import FinderConfig
from .logging_utils import configure_logging, get_logger
from .models import SearchResult
from .pipeline import search_lyrics

DEFAULT_PORT = 3001

SearchFn = Callable[..., SearchResult]


def create_app(
    config: FinderConfig | None = None,
    *,
    search_fn: SearchFn = search_lyrics,
    cors_origins: str | list[str] = "*",
) -> Flask:
    """Build the Flask application."""
    app = Flask(__name__)
    CORS(app, origins=cors_origins)
    logger = get_logger()
    finder_config = config or FinderConfig()

    @app.get("/")
    def index():
        return jsonify({"message": "Lyrics Finder API is running!"})

    @app.post("/api/search-lyrics")
    def search():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({"error": "Title and artist are required"}), 400
        title = payload.get("title")
        artist = payload.get("artist")
        if not isinstance(title, str) or not isinstance(artist, str):
            return jsonify({"error": "Title and artist are required"}), 400
        title, artist = title.strip(), artist.strip()
        if not title or not artist:
            return jsonify({"error": "Title and artist are required"}), 400

        logger.info("Processing request: %r by %r", title, artist)
        try:
            result = search_fn(title, artist, config=finder_config, logger=logger)
        except Exception:
            logger.exception("Search failed for %r by %r", title, artist)
            return jsonify({"error": "Internal server error"}), 500

        if not result.success:
            return (
                jsonify({"error": "Could not find lyrics for this song", "details": result.error}),
                404,
            )
        return jsonify({"title": title, "artist": artist, **result.to_dict()})

    return app


def _cors_origins_from_env() -> str | list[str]:
    raw = os.getenv("CORS_ORIGINS", "").strip()
    if not raw or raw == "*":
        return "*"
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def main() -> None:
    """Serve the API using settings from the environment or a .env file."""
    load_dotenv()
    configure_logging(os.getenv("LOG_LEVEL", "").upper() == "DEBUG")
    app = create_app(cors_origins=_cors_origins_from_env())
    port = int(os.getenv("PORT", DEFAULT_PORT))
    host = os.getenv("HOST", "127.0.0.1")
    get_logger().info("Server running on http://%s:%d", host, port)
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
