"""Configuration and CLI handling."""

from tvrenamer.config.settings import (
    DEFAULT_TEMPLATE,
    DEFAULT_EPISODE_START,
    DEFAULT_SEASON_NUMBER,
    DEFAULT_PAD_LENGTH,
    DEFAULT_LANGUAGE,
    TVDB_API_KEY_ENV,
    CHANGE_LOG_DIR,
)

__all__ = [
    "DEFAULT_TEMPLATE",
    "DEFAULT_EPISODE_START",
    "DEFAULT_SEASON_NUMBER",
    "DEFAULT_PAD_LENGTH",
    "DEFAULT_LANGUAGE",
    "TVDB_API_KEY_ENV",
    "CHANGE_LOG_DIR",
]
