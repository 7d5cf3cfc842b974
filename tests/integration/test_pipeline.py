"""Integration tests for the renaming pipeline."""

import pytest
from pathlib import Path
from unittest.mock import patch

from rich.console import Console

from tvrenamer.pipeline import RenamePipeline
from tvrenamer.ui.console import ConsoleUI


@pytest.fixture
def console():
    """Quiet console recording its output."""
    return ConsoleUI(Console(record=True, width=200))


def names(directory: Path):
    return sorted(p.name for p in directory.iterdir())


class TestAutomaticMode:
    """Tests for a whole series directory."""

    def test_renames_recognized_seasons(self, series_tree, make_config, fake_metadata, console):
        """Season 1 and Specials are renamed, Season 2 fails, Extras is ignored."""
        config = make_config(automatic=True, directory=series_tree)

        summary = RenamePipeline(config, fake_metadata, console).run()

        assert names(series_tree / "Season 1") == ["Show 1x01 Pilot.mkv", "Show 1x02 The Return.mkv"]
        assert (series_tree / "Season 1" / "Show 1x01 Pilot.mkv").read_text() == "first"
        assert names(series_tree / "Specials") == ["Show 0x01 Making Of.mkv"]
        assert names(series_tree / "Season 2") == ["x.avi"]
        assert names(series_tree / "Extras") == ["bonus.mkv"]
        assert (series_tree / "cover.jpg").exists()

        assert summary.renamed == 3
        assert summary.failed_seasons == [series_tree / "Season 2"]
        assert summary.success is False

    def test_series_searched_per_season(self, series_tree, make_config, fake_metadata, console):
        """Each processed season looks up its own episodes."""
        config = make_config(automatic=True, directory=series_tree)

        RenamePipeline(config, fake_metadata, console).run()

        assert (1, 1) in fake_metadata.episode_calls
        assert (0, 1) in fake_metadata.episode_calls
        assert (2, 1) in fake_metadata.episode_calls
        assert all(call == ("Show", "en") for call in fake_metadata.series_calls)

    def test_without_titles(self, series_tree, make_config, console):
        """No metadata needed when the template has no title."""
        config = make_config("${Season}-${Episode}", automatic=True, directory=series_tree)

        summary = RenamePipeline(config, console=console).run()

        assert names(series_tree / "Season 2") == ["2-01.avi"]
        assert summary.renamed == 4
        assert summary.success is True

    def test_stale_link_in_series(self, series_tree, make_config, console):
        """A dangling link at the series root does not stop the run."""
        (series_tree / "old").symlink_to(series_tree / "gone")
        config = make_config("${Season}-${Episode}", automatic=True, directory=series_tree)

        summary = RenamePipeline(config, console=console).run()

        assert names(series_tree / "Season 1") == ["1-01.mkv", "1-02.mkv"]
        assert summary.failed_seasons == []

    def test_skipped_directories_logged_at_debug(self, series_tree, make_config, console):
        """Non-season directories are only mentioned in debug logs."""
        config = make_config("${Episode}", automatic=True, directory=series_tree)

        with patch("tvrenamer.pipeline.renamer.logger") as mock_logger:
            RenamePipeline(config, console=console).run()

        mock_logger.debug.assert_any_call("Skipping Extras: not a season directory")
        assert not any("Extras" in str(call) for call in mock_logger.info.call_args_list)

    def test_missing_series_directory(self, tmp_path, make_config, console):
        """Unreadable series directory is reported."""
        config = make_config("${Episode}", automatic=True, directory=tmp_path / "missing")

        summary = RenamePipeline(config, console=console).run()

        assert summary.failed_seasons == [tmp_path / "missing"]


class TestManualMode:
    """Tests for a single season directory."""

    def test_dry_run(self, series_tree, make_config, fake_metadata, console):
        """Simulation lists renames and leaves files alone."""
        season = series_tree / "Season 1"
        config = make_config(dry_run=True, directory=season, season_number=1)

        summary = RenamePipeline(config, fake_metadata, console).run()

        assert names(season) == ["a.mkv", "b.mkv"]
        assert summary.renamed == 2
        assert "Show 1x01 Pilot.mkv" in console.console.export_text()

    def test_episode_start(self, series_tree, make_config, console):
        """Numbering starts at the given episode."""
        season = series_tree / "Season 1"
        config = make_config("E${Episode}", directory=season, episode_start=9, pad_length=3)

        RenamePipeline(config, console=console).run()

        assert names(season) == ["E009.mkv", "E010.mkv"]

    def test_already_named_is_skipped(self, tmp_path, make_config, console):
        """A file already carrying its target name is skipped."""
        (tmp_path / "01.mkv").touch()
        config = make_config("${Episode}", directory=tmp_path)

        summary = RenamePipeline(config, console=console).run()

        assert summary.skipped == 1
        assert summary.renamed == 0
        assert summary.success is True

    def test_existing_destination_is_skipped(self, tmp_path, make_config, console):
        """Files are never overwritten."""
        (tmp_path / "a.mkv").write_text("a")
        (tmp_path / "b.mkv").write_text("b")
        (tmp_path / "02.mkv").mkdir()
        config = make_config("${Episode}", directory=tmp_path)

        summary = RenamePipeline(config, console=console).run()

        assert summary.renamed == 1
        assert summary.skipped == 1
        assert (tmp_path / "01.mkv").read_text() == "a"
        assert (tmp_path / "b.mkv").exists()

    def test_series_not_found(self, series_tree, make_config, fake_metadata, console):
        """Season is left untouched when the series is unknown."""
        season = series_tree / "Season 1"
        config = make_config(directory=season)
        fake_metadata.fail_series = True

        summary = RenamePipeline(config, fake_metadata, console).run()

        assert names(season) == ["a.mkv", "b.mkv"]
        assert summary.failed_seasons == [season]

    def test_empty_target_name_fails_season(self, tmp_path, make_config, console):
        """A file that would lose its whole name leaves the season untouched."""
        (tmp_path / "a.mkv").touch()
        (tmp_path / "notes").touch()
        config = make_config("", directory=tmp_path)

        summary = RenamePipeline(config, console=console).run()

        assert names(tmp_path) == ["a.mkv", "notes"]
        assert summary.failed_seasons == [tmp_path]
        assert summary.renamed == 0
        assert "empty name" in console.console.export_text()

    def test_rename_error_counted(self, series_tree, make_config, console):
        """OS errors fail the file, not the run."""
        season = series_tree / "Season 1"
        config = make_config("${Episode}", directory=season)

        with patch("tvrenamer.pipeline.renamer.rename_file", side_effect=OSError("busy")):
            summary = RenamePipeline(config, console=console).run()

        assert summary.failed_files == 2
        assert summary.success is False

    def test_log_changes(self, series_tree, make_config, console):
        """Performed renames are recorded."""
        season = series_tree / "Season 2"
        config = make_config("${Episode}", directory=season, season_number=2, log_changes=True)

        with patch("tvrenamer.pipeline.renamer.record_change") as record:
            RenamePipeline(config, console=console).run()

        record.assert_called_once_with(season / "x.avi", season / "01.avi")
