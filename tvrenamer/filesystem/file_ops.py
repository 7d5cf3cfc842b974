"""File operations for renaming episodes."""

from pathlib import Path

from loguru import logger


def rename_file(source: Path, destination: Path, dry_run: bool = False) -> bool:
    """
    Rename an episode file in place.

    Args:
        source: Current file path.
        destination: Target file path.
        dry_run: If True, only simulate the operation.

    Returns:
        True if the file was renamed (or would be), False if skipped.
    """
    if source == destination:
        logger.debug(f'Already named: {source}')
        return False

    if dry_run:
        logger.info(f'SIMULATION - Rename: {source.name} -> {destination.name}')
        return True

    if destination.exists():
        logger.warning(f'Destination file exists, skipping: {destination}')
        return False

    source.rename(destination)
    logger.debug(f'File renamed: {source} -> {destination}')
    return True
