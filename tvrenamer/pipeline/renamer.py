"""Orchestration of a renaming run."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from loguru import logger
from rich.markup import escape
from tqdm import tqdm

from tvrenamer.api.metadata import MetadataService
from tvrenamer.exceptions import EmptyTargetNameError, ResolveError, ScanError
from tvrenamer.filesystem import list_episodes, list_seasons, rename_file
from tvrenamer.models.config import RenameConfig
from tvrenamer.models.media import SeasonDirectory
from tvrenamer.pipeline.resolver import resolve_targets
from tvrenamer.ui.console import ConsoleUI
from tvrenamer.ui.display import display_renames
from tvrenamer.utils.changelog import record_change


def check_target_names(directory: Path, pairs: Sequence[Tuple[Path, Path]]) -> None:
    """Raise EmptyTargetNameError for the first episode rendered to the directory itself."""
    for source, target in pairs:
        if target == Path(directory):
            raise EmptyTargetNameError(source)


@dataclass
class RenameSummary:
    """Statistiques d'une exécution."""

    renamed: int = 0
    skipped: int = 0
    failed_files: int = 0
    failed_seasons: List[Path] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when every season and every file went through."""
        return not self.failed_seasons and self.failed_files == 0


class RenamePipeline:
    """
    Runs the scan, resolve and rename steps for one invocation.

    In automatic mode every recognized season directory below
    ``config.directory`` is processed with its own season number and the
    directory name as series name. Otherwise ``config.directory`` is a
    single season. A season whose scan or resolve fails is left untouched.
    """

    def __init__(
        self,
        config: RenameConfig,
        metadata: Optional[MetadataService] = None,
        console: Optional[ConsoleUI] = None,
    ) -> None:
        """
        Initialise le pipeline.

        Arguments :
            config: Configuration de l'exécution.
            metadata: Service de titres (requis si le modèle utilise ${Title}).
            console: Console pour l'affichage.
        """
        self.config = config
        self.metadata = metadata
        self.console = console or ConsoleUI()

    def run(self) -> RenameSummary:
        """
        Process the configured directory.

        Returns:
            RenameSummary with counts and failed directories.
        """
        summary = RenameSummary()

        if not self.config.automatic:
            self.process_season(self.config, self.config.directory, summary)
            return summary

        try:
            season_paths = list_seasons(self.config.directory)
        except ScanError as e:
            logger.error(f"Unable to list seasons: {e}")
            self.console.season_failed(self.config.directory, e)
            summary.failed_seasons.append(self.config.directory)
            return summary

        for season in map(SeasonDirectory.from_path, season_paths):
            if not season.is_recognized:
                logger.debug(f"Skipping {season.path.name}: not a season directory")
                continue
            self.process_season(
                self.config.for_season(season.season_number), season.path, summary
            )

        return summary

    def process_season(self, config: RenameConfig, directory: Path, summary: RenameSummary) -> None:
        """
        Rename the episodes of one season directory.

        Args:
            config: Configuration carrying this season's number.
            directory: Season directory.
            summary: Summary updated in place.
        """
        logger.info(f"Processing {config.series_name} season {config.season_number}: {directory}")

        try:
            episodes = list_episodes(directory)
            targets = resolve_targets(
                config, directory, episodes, config.episode_start, self.metadata
            )
            pairs = list(zip(episodes, targets))
            check_target_names(directory, pairs)
        except (ScanError, ResolveError) as e:
            logger.error(f"Season skipped, {directory}: {e}")
            self.console.season_failed(directory, e)
            summary.failed_seasons.append(directory)
            return

        if config.dry_run:
            display_renames(pairs, self.console)

        progress = tqdm(
            pairs,
            desc=f"Season {config.season_number}",
            unit="file",
            disable=config.dry_run or config.verbose,
        )
        for source, target in progress:
            if config.verbose:
                self.console.rename(source, target, config.dry_run)

            try:
                renamed = rename_file(source, target, config.dry_run)
            except OSError as e:
                logger.error(f"Error renaming {source}: {e}")
                self.console.error(f"Unable to rename {escape(source.name)}: {escape(str(e))}")
                summary.failed_files += 1
                continue

            if not renamed:
                summary.skipped += 1
                continue

            summary.renamed += 1
            if config.log_changes and not config.dry_run:
                record_change(source, target)
