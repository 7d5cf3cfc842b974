"""Immutable configuration for one renaming run."""

from dataclasses import dataclass, replace
from pathlib import Path

from tvrenamer.config.settings import (
    DEFAULT_EPISODE_START,
    DEFAULT_LANGUAGE,
    DEFAULT_PAD_LENGTH,
    DEFAULT_SEASON_NUMBER,
)
from tvrenamer.template import Template, template_requires_titles


@dataclass(frozen=True)
class RenameConfig:
    """
    Settings for one invocation, built once from user input.

    Attributes:
        automatic: Infer series name and season numbers from the tree.
        dry_run: Print the renames without performing them.
        log_changes: Record performed renames in the change log.
        verbose: Print every rename attempted.
        directory: Series directory (automatic) or season directory.
        series_name: Series name used in filenames and TVDB lookups.
        season_number: Season number used in filenames and TVDB lookups.
        episode_start: Index given to the first episode of a season.
        pad_length: Minimum width of rendered episode numbers.
        template: Parsed filename template.
        language: Language of the TVDB titles.
    """

    automatic: bool = False
    dry_run: bool = False
    log_changes: bool = False
    verbose: bool = False
    directory: Path = Path(".")
    series_name: str = ""
    season_number: int = DEFAULT_SEASON_NUMBER
    episode_start: int = DEFAULT_EPISODE_START
    pad_length: int = DEFAULT_PAD_LENGTH
    template: Template = ()
    language: str = DEFAULT_LANGUAGE

    def __post_init__(self) -> None:
        for name in ("season_number", "episode_start", "pad_length"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    @property
    def wants_titles(self) -> bool:
        """True when the template contains the episode title placeholder."""
        return template_requires_titles(self.template)

    def for_season(self, season_number: int) -> "RenameConfig":
        """Return a copy targeting another season of the same series."""
        return replace(self, season_number=season_number)
