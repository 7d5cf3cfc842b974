"""Configuration settings and constants for the tvrenamer package."""

from pathlib import Path
from typing import Set

# Template used when none is given on the command line
DEFAULT_TEMPLATE: str = "${Series} ${Season}x${Episode} ${Title}"

# Numbering defaults
DEFAULT_EPISODE_START: int = 1
DEFAULT_SEASON_NUMBER: int = 1
DEFAULT_PAD_LENGTH: int = 2
EPISODE_PAD_CHAR: str = "0"

# TVDB
DEFAULT_LANGUAGE: str = "en"
TVDB_API_KEY_ENV: str = "TVDB_API_KEY"

# Directory names that always mean season 0
SPECIAL_SEASON_NAMES: Set[str] = {"season0", "season 0", "specials"}

# Change log written with --log-changes
CHANGE_LOG_DIR: Path = Path.home() / ".local" / "share" / "tv-renamer"
CHANGE_LOG_FILE: str = "changes.log"
CHANGE_LOG_ROTATION: str = "10 MB"
CHANGE_LOG_RETENTION: str = "30 days"
