"""Filesystem operations for episode renaming."""

from tvrenamer.filesystem.discovery import (
    list_seasons,
    list_episodes,
    derive_season_number,
)
from tvrenamer.filesystem.file_ops import rename_file
from tvrenamer.filesystem.paths import shorten_path

__all__ = [
    "list_seasons",
    "list_episodes",
    "derive_season_number",
    "rename_file",
    "shorten_path",
]
