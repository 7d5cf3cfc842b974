"""Exceptions raised by the renaming core."""

from enum import Enum
from pathlib import Path


class RenamerError(Exception):
    """Base class for all renaming errors."""

    pass


class TemplateParseError(RenamerError):
    """Raised when a template string violates the template grammar."""

    def __init__(self, message: str, source: str = "", position: int = 0) -> None:
        self.source = source
        self.position = position
        super().__init__(message)

    def format_error(self) -> str:
        """Format error with caret pointing at the problem position."""
        msg = str(self)
        if not self.source:
            return msg
        caret = " " * self.position + "^"
        return f"{msg}\n  {self.source}\n  {caret}"


class ScanFailure(Enum):
    """Step of a directory scan that failed."""

    READ_DIRECTORY = "unable to read directory"
    READ_ENTRY = "unable to get directory entry"
    READ_METADATA = "unable to get metadata"


class ScanError(RenamerError):
    """Raised when a directory cannot be listed."""

    def __init__(self, path: Path, reason: ScanFailure) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason.value}: {path}")


class ResolveError(RenamerError):
    """Base class for failures while resolving target paths."""

    pass


class SeriesLookupError(ResolveError):
    """Raised when the series could not be found on the metadata service."""

    def __init__(self, series_name: str) -> None:
        self.series_name = series_name
        super().__init__(f"unable to get series information for '{series_name}'")


class EpisodeLookupError(ResolveError):
    """Raised when the title of an episode could not be fetched."""

    def __init__(self, file: Path, season: int, episode: int) -> None:
        self.file = file
        self.season = season
        self.episode = episode
        super().__init__(
            f"episode '{file}' does not exist (season {season}, episode {episode})"
        )


class EmptyTargetNameError(ResolveError):
    """Raised when the template renders an empty name for an extensionless file."""

    def __init__(self, file: Path) -> None:
        self.file = file
        super().__init__(f"template renders an empty name for '{file}'")
