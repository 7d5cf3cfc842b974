"""Batch resolution of episode target paths."""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from loguru import logger

from tvrenamer.api.exceptions import APIError
from tvrenamer.api.metadata import MetadataService
from tvrenamer.exceptions import EpisodeLookupError, SeriesLookupError
from tvrenamer.models.config import RenameConfig
from tvrenamer.pipeline.renderer import render_destination


def resolve_targets(
    config: RenameConfig,
    directory: Union[str, Path],
    episodes: Sequence[Path],
    episode_start: int,
    metadata: Optional[MetadataService] = None,
) -> List[Path]:
    """
    Compute the target path of every episode of a season.

    Episodes are numbered from ``episode_start`` in the given order, so
    targets[i] belongs to episodes[i]. When the template needs titles the
    series is searched once, then each episode is looked up; any lookup
    failure aborts the whole batch.

    Args:
        config: Run configuration for this season.
        directory: Directory the renamed files live in.
        episodes: Episode files, already ordered.
        episode_start: Number given to the first episode.
        metadata: Title provider, required when the template uses titles.

    Returns:
        Target paths, one per episode.

    Raises:
        SeriesLookupError: If the series search fails.
        EpisodeLookupError: If an episode lookup fails; names the file.
    """
    series = None
    if config.wants_titles:
        if metadata is None:
            raise SeriesLookupError(config.series_name)
        try:
            series = metadata.search_series(config.series_name, config.language)
        except APIError as e:
            logger.error(f"Series lookup failed for '{config.series_name}': {e}")
            raise SeriesLookupError(config.series_name) from e

    targets: List[Path] = []
    episode_index = episode_start
    for file in episodes:
        title = ""
        if series is not None:
            try:
                title = metadata.get_episode(series, config.season_number, episode_index).title
            except APIError as e:
                logger.error(f"Episode lookup failed for {file}: {e}")
                raise EpisodeLookupError(file, config.season_number, episode_index) from e

        targets.append(render_destination(config, directory, file, episode_index, title))
        episode_index += 1

    return targets
