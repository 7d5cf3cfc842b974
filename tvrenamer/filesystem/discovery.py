"""Season and episode discovery within a series directory."""

import os
import stat
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from tvrenamer.config.settings import SPECIAL_SEASON_NAMES
from tvrenamer.exceptions import ScanError, ScanFailure


def _list_entries(directory: Union[str, Path], want_directories: bool) -> List[Path]:
    """
    List the immediate subdirectories or regular files of a directory.

    Entries are sorted by their full path string. Symlinks are not followed,
    so links (dangling or not) are neither directories nor regular files.

    Raises:
        ScanError: With the step that failed (directory, entry or metadata).
    """
    directory = Path(directory)
    try:
        iterator = os.scandir(directory)
    except OSError as e:
        raise ScanError(directory, ScanFailure.READ_DIRECTORY) from e

    entries: List[Path] = []
    with iterator:
        while True:
            try:
                entry = next(iterator)
            except StopIteration:
                break
            except OSError as e:
                raise ScanError(directory, ScanFailure.READ_ENTRY) from e

            try:
                mode = entry.stat(follow_symlinks=False).st_mode
            except OSError as e:
                raise ScanError(Path(entry.path), ScanFailure.READ_METADATA) from e

            if want_directories and stat.S_ISDIR(mode):
                entries.append(Path(entry.path))
            elif not want_directories and stat.S_ISREG(mode):
                entries.append(Path(entry.path))

    entries.sort(key=str)
    return entries


def list_seasons(directory: Union[str, Path]) -> List[Path]:
    """
    Collect the season directories of a series.

    Args:
        directory: Series directory.

    Returns:
        Immediate subdirectories, sorted by full path.

    Raises:
        ScanError: If the directory or one of its entries cannot be read.
    """
    seasons = _list_entries(directory, want_directories=True)
    logger.debug(f"{len(seasons)} directories found in {directory}")
    return seasons


def list_episodes(directory: Union[str, Path]) -> List[Path]:
    """
    Collect the episode files of a season.

    Args:
        directory: Season directory.

    Returns:
        Immediate regular files, sorted by full path.

    Raises:
        ScanError: If the directory or one of its entries cannot be read.
    """
    episodes = _list_entries(directory, want_directories=False)
    logger.debug(f"{len(episodes)} files found in {directory}")
    return episodes


def derive_season_number(season: Union[str, Path]) -> Optional[int]:
    """
    Derive a season number from a directory name.

    "Specials", "Season 0" and "season0" are season 0. Otherwise "season"
    and spaces are removed and what remains must be a plain number, so
    "SEASON 12" gives 12 but "Season 1 (Extended)" gives None.

    Args:
        season: Season directory path; only its last component is used.

    Returns:
        Season number, or None if the name is not a season name.
    """
    name = Path(season).name.lower()
    if name in SPECIAL_SEASON_NAMES:
        return 0

    remainder = name.replace("season", "").replace(" ", "")
    # int() would accept signs, underscores and surrounding whitespace
    if not remainder.isascii() or not remainder.isdigit():
        return None
    return int(remainder)
