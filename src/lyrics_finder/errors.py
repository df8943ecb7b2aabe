"""Custom exceptions for the lyrics finder."""


class LyricsFinderError(Exception):
    """Base exception for this project."""


class ConfigError(LyricsFinderError):
    """Raised when runtime configuration is invalid."""
