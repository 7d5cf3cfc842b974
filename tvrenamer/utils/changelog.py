"""Change log of performed renames, written through a dedicated loguru sink."""

from pathlib import Path

from loguru import logger

from tvrenamer.config.settings import (
    CHANGE_LOG_DIR,
    CHANGE_LOG_FILE,
    CHANGE_LOG_RETENTION,
    CHANGE_LOG_ROTATION,
)

CHANGE_KEY = "change"


def is_change_record(record: dict) -> bool:
    """Filter accepting only records emitted by record_change."""
    return record["extra"].get(CHANGE_KEY, False)


def enable_change_log(log_dir: Path = CHANGE_LOG_DIR) -> int:
    """
    Add the change log sink.

    Args:
        log_dir: Directory holding the change log. Created if needed.

    Returns:
        loguru handler id, to pass to logger.remove().
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    return logger.add(
        log_dir / CHANGE_LOG_FILE,
        rotation=CHANGE_LOG_ROTATION,
        retention=CHANGE_LOG_RETENTION,
        level="INFO",
        format="{time:YYYY-MM-DD HH:mm:ss} | {message}",
        filter=is_change_record,
    )


def record_change(source: Path, target: Path) -> None:
    """Write one performed rename to the change log."""
    logger.bind(**{CHANGE_KEY: True}).info(f"{source} -> {target}")
