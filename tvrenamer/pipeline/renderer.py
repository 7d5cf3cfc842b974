"""Destination path rendering for a single episode."""

from pathlib import Path
from typing import List, Union

from tvrenamer.config.settings import EPISODE_PAD_CHAR
from tvrenamer.models.config import RenameConfig
from tvrenamer.template import LiteralToken, Placeholder, pad, sanitize


def render_filename(config: RenameConfig, episode_index: int, episode_title: str) -> str:
    """
    Render the template into a sanitized filename body, without extension.

    Args:
        config: Run configuration holding the template and series info.
        episode_index: Episode number to render.
        episode_title: Title for the title placeholder ("" when unused).

    Returns:
        Filename body with surrounding whitespace removed and "/" replaced.
    """
    parts: List[str] = []
    for token in config.template:
        if isinstance(token, LiteralToken):
            parts.append(token.character)
        elif token is Placeholder.SERIES:
            parts.append(config.series_name)
        elif token is Placeholder.SEASON:
            parts.append(str(config.season_number))
        elif token is Placeholder.EPISODE:
            parts.append(pad(episode_index, EPISODE_PAD_CHAR, config.pad_length))
        elif token is Placeholder.TITLE:
            parts.append(episode_title)
    return sanitize("".join(parts))


def render_destination(
    config: RenameConfig,
    directory: Union[str, Path],
    source_file: Path,
    episode_index: int,
    episode_title: str = "",
) -> Path:
    """
    Build the target path of an episode.

    Pure: the filesystem is never touched. The source extension is kept
    as is, so an empty template yields just ".ext". With no extension either,
    the result is ``directory`` itself; callers must not rename to it.

    Args:
        config: Run configuration.
        directory: Directory the renamed file lives in.
        source_file: Current path of the episode.
        episode_index: Episode number.
        episode_title: Episode title, "" if titles are not requested.

    Returns:
        Target path inside ``directory``.
    """
    filename = render_filename(config, episode_index, episode_title)
    if source_file.suffix:
        filename += source_file.suffix
    return Path(directory) / filename
