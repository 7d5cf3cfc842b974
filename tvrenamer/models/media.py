"""Records describing seasons and metadata returned by TVDB."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from tvrenamer.filesystem.discovery import derive_season_number


@dataclass(frozen=True)
class SeasonDirectory:
    """A season subdirectory and the season number its name implies."""

    path: Path
    season_number: Optional[int]

    @classmethod
    def from_path(cls, path: Path) -> "SeasonDirectory":
        """Build from a directory path, deriving the season number."""
        return cls(path=path, season_number=derive_season_number(path))

    @property
    def is_recognized(self) -> bool:
        """Check if the directory name looks like a season."""
        return self.season_number is not None


@dataclass(frozen=True)
class SeriesMetadata:
    """Series returned by a metadata service search."""

    series_id: int
    name: str


@dataclass(frozen=True)
class EpisodeMetadata:
    """Episode returned by a metadata service lookup."""

    title: str
    season: int
    episode: int
