"""Entry point for the tvrenamer package.

This module provides the command-line entry point for the renaming tool.
Run with: python -m tvrenamer
"""

import sys
from typing import List, Optional

from loguru import logger
from rich.markup import escape

from tvrenamer.api import MetadataService, TvdbClient, require_tvdb_api_key
from tvrenamer.api.exceptions import APIConfigurationError
from tvrenamer.config.cli import (
    args_to_cli_args,
    build_config,
    parse_arguments,
    validate_directory,
)
from tvrenamer.config.settings import TVDB_API_KEY_ENV
from tvrenamer.exceptions import TemplateParseError
from tvrenamer.models.config import RenameConfig
from tvrenamer.pipeline import RenamePipeline
from tvrenamer.ui import ConsoleUI, display_configuration, display_summary
from tvrenamer.utils.changelog import enable_change_log, is_change_record


def setup_logging(verbose: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        verbose: If True, enable debug-level logging.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
        filter=lambda record: not is_change_record(record),
    )


def create_metadata_service(config: RenameConfig) -> Optional[MetadataService]:
    """
    Create the TVDB client when the template needs episode titles.

    Raises:
        APIConfigurationError: If titles are needed but no API key is set.
    """
    if not config.wants_titles:
        return None
    return TvdbClient(api_key=require_tvdb_api_key(), language=config.language)


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the renaming tool.

    Args:
        args: Command-line arguments (None for sys.argv).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    namespace = parse_arguments(args)
    cli_args = args_to_cli_args(namespace)

    setup_logging(cli_args.verbose)
    console = ConsoleUI()

    if not validate_directory(cli_args.directory):
        console.error(f"Directory {escape(str(cli_args.directory))} does not exist")
        return 1

    try:
        config = build_config(cli_args)
    except TemplateParseError as e:
        console.error(escape(e.format_error()))
        return 1
    except ValueError as e:
        console.error(escape(str(e)))
        return 1

    try:
        metadata = create_metadata_service(config)
    except APIConfigurationError as e:
        console.error(escape(str(e)))
        console.info(
            f"Set {TVDB_API_KEY_ENV} or use a template without ${{Title}}"
        )
        return 1

    if config.dry_run:
        console.simulation_banner()

    display_configuration(config, console)

    change_log = None
    if config.log_changes and not config.dry_run:
        try:
            change_log = enable_change_log()
        except OSError as e:
            console.error(f"Unable to open the change log: {escape(str(e))}")
            return 1

    try:
        summary = RenamePipeline(config, metadata, console).run()
    finally:
        if change_log is not None:
            logger.remove(change_log)

    display_summary(summary, console, dry_run=config.dry_run)
    return 0 if summary.success else 1


if __name__ == "__main__":
    sys.exit(main())
