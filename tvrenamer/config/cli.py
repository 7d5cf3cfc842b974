"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

from tvrenamer.config.settings import (
    DEFAULT_EPISODE_START,
    DEFAULT_LANGUAGE,
    DEFAULT_PAD_LENGTH,
    DEFAULT_SEASON_NUMBER,
    DEFAULT_TEMPLATE,
)
from tvrenamer.filesystem.discovery import derive_season_number
from tvrenamer.models.config import RenameConfig
from tvrenamer.template import parse_template


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        directory: Series directory (automatic) or season directory.
        automatic: Infer series name and seasons from the directory tree.
        dry_run: If True, simulate without making changes.
        log_changes: If True, record performed renames.
        verbose: If True, print every rename and debug logs.
        series_name: Series name, empty to infer it.
        season_number: Season number, None to infer it.
        episode_start: Number of the first episode.
        pad_length: Minimum width of episode numbers.
        template: Template string, not yet parsed.
        language: TVDB language code.
    """

    directory: Path = field(default_factory=lambda: Path("."))
    automatic: bool = False
    dry_run: bool = False
    log_changes: bool = False
    verbose: bool = False
    series_name: str = ""
    season_number: Optional[int] = None
    episode_start: int = DEFAULT_EPISODE_START
    pad_length: int = DEFAULT_PAD_LENGTH
    template: str = DEFAULT_TEMPLATE
    language: str = DEFAULT_LANGUAGE


def non_negative_int(value: str) -> int:
    """argparse type accepting integers >= 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='tv-renamer',
        description="""
        Renames the episodes of a TV series directory using a template,
        optionally with episode titles from TVDB.
        """,
        epilog=f"template placeholders: ${{Series}} ${{Season}} ${{Episode}} "
               f"${{Title}}, '$$' for a literal '$' (default: {DEFAULT_TEMPLATE})",
    )

    parser.add_argument(
        'directory',
        nargs='?',
        default='.',
        help="series or season directory (default: current directory)"
    )

    # Mode flags
    parser.add_argument(
        '-a', '--automatic',
        action='store_true',
        help="infer series name and season numbers from the directory structure"
    )

    parser.add_argument(
        '-d', '--dry-run',
        action='store_true',
        help="print the changes that would be made without making them"
    )

    parser.add_argument(
        '-l', '--log-changes',
        action='store_true',
        help="log the changes made to the disk"
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help="print every change attempted"
    )

    # Naming
    parser.add_argument(
        '-n', '--series-name',
        default='',
        help="name of the series (required unless --automatic)"
    )

    parser.add_argument(
        '-s', '--season-number',
        type=non_negative_int,
        default=None,
        help="season number (default: derived from the directory name)"
    )

    parser.add_argument(
        '-e', '--episode-start',
        type=non_negative_int,
        default=DEFAULT_EPISODE_START,
        help=f"number of the first episode (default: {DEFAULT_EPISODE_START})"
    )

    parser.add_argument(
        '-p', '--pad-length',
        type=non_negative_int,
        default=DEFAULT_PAD_LENGTH,
        help=f"minimum width of episode numbers (default: {DEFAULT_PAD_LENGTH})"
    )

    parser.add_argument(
        '-t', '--template',
        default=DEFAULT_TEMPLATE,
        help="naming template"
    )

    parser.add_argument(
        '--language',
        default=DEFAULT_LANGUAGE,
        help=f"language of TVDB episode titles (default: {DEFAULT_LANGUAGE})"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        directory=Path(namespace.directory),
        automatic=namespace.automatic,
        dry_run=namespace.dry_run,
        log_changes=namespace.log_changes,
        verbose=namespace.verbose,
        series_name=namespace.series_name.strip(),
        season_number=namespace.season_number,
        episode_start=namespace.episode_start,
        pad_length=namespace.pad_length,
        template=namespace.template,
        language=namespace.language,
    )


def validate_directory(directory: Path) -> bool:
    """
    Check that the directory to rename exists.

    Args:
        directory: Directory given on the command line.

    Returns:
        True if validation passed, False otherwise.
    """
    if not directory.is_dir():
        logger.error(f"Directory {directory} does not exist")
        return False
    return True


def build_config(cli_args: CLIArgs) -> RenameConfig:
    """
    Build the run configuration from the parsed arguments.

    In automatic mode the series name defaults to the directory name. In
    manual mode the series name is required and the season number
    defaults to the one the directory name implies, then to 1.

    Args:
        cli_args: Parsed arguments.

    Returns:
        Immutable RenameConfig.

    Raises:
        TemplateParseError: If the template is invalid.
        ValueError: If the series name is missing in manual mode.
    """
    template = parse_template(cli_args.template)
    directory = cli_args.directory.resolve()

    series_name = cli_args.series_name
    if not series_name:
        if not cli_args.automatic:
            raise ValueError("a series name is required unless --automatic is used")
        series_name = directory.name

    season_number = cli_args.season_number
    if season_number is None:
        derived = derive_season_number(directory)
        season_number = derived if derived is not None else DEFAULT_SEASON_NUMBER

    return RenameConfig(
        automatic=cli_args.automatic,
        dry_run=cli_args.dry_run,
        log_changes=cli_args.log_changes,
        verbose=cli_args.verbose,
        directory=directory,
        series_name=series_name,
        season_number=season_number,
        episode_start=cli_args.episode_start,
        pad_length=cli_args.pad_length,
        template=template,
        language=cli_args.language,
    )
