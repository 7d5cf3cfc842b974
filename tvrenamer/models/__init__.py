"""Data models for episode renaming."""

from tvrenamer.models.config import RenameConfig
from tvrenamer.models.media import SeasonDirectory, SeriesMetadata, EpisodeMetadata

__all__ = ["RenameConfig", "SeasonDirectory", "SeriesMetadata", "EpisodeMetadata"]
