"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from tvrenamer.api.exceptions import EpisodeNotFoundError, SeriesNotFoundError
from tvrenamer.models.config import RenameConfig
from tvrenamer.models.media import EpisodeMetadata, SeriesMetadata
from tvrenamer.template import parse_template


class FakeMetadataService:
    """In-memory MetadataService returning canned titles."""

    def __init__(self, titles=None, fail_series=False):
        self.titles = titles or {}
        self.fail_series = fail_series
        self.series_calls = []
        self.episode_calls = []

    def search_series(self, name, language):
        self.series_calls.append((name, language))
        if self.fail_series:
            raise SeriesNotFoundError(name)
        return SeriesMetadata(series_id=81189, name=name)

    def get_episode(self, series, season_number, episode_index):
        self.episode_calls.append((season_number, episode_index))
        key = (season_number, episode_index)
        if key not in self.titles:
            raise EpisodeNotFoundError(series.name, season_number, episode_index)
        return EpisodeMetadata(
            title=self.titles[key], season=season_number, episode=episode_index
        )


@pytest.fixture
def make_config():
    """Factory building a RenameConfig from a template string."""
    def _make(template="${Series} ${Season}x${Episode} ${Title}", **kwargs):
        kwargs.setdefault("series_name", "Show")
        return RenameConfig(template=parse_template(template), **kwargs)
    return _make


@pytest.fixture
def fake_metadata():
    """Metadata service knowing two episodes of season 1 and one special."""
    return FakeMetadataService(titles={
        (1, 1): "Pilot",
        (1, 2): "The Return",
        (0, 1): "Making Of",
    })


@pytest.fixture
def series_tree(tmp_path):
    """
    Create a series directory:

        Show/
            cover.jpg
            Extras/bonus.mkv
            Season 1/b.mkv, a.mkv
            Season 2/x.avi
            Specials/s.mkv
    """
    root = tmp_path / "Show"
    for name in ("Season 1", "Season 2", "Specials", "Extras"):
        (root / name).mkdir(parents=True)
    (root / "cover.jpg").touch()
    (root / "Season 1" / "b.mkv").write_text("second")
    (root / "Season 1" / "a.mkv").write_text("first")
    (root / "Season 2" / "x.avi").write_text("x")
    (root / "Specials" / "s.mkv").write_text("special")
    (root / "Extras" / "bonus.mkv").write_text("bonus")
    return root
