"""Display functions for renaming output."""

from pathlib import Path
from typing import TYPE_CHECKING, List, Tuple

from rich.markup import escape

from tvrenamer.filesystem.paths import shorten_path
from tvrenamer.template import LiteralToken, Template
from tvrenamer.ui.console import ConsoleUI

if TYPE_CHECKING:
    from tvrenamer.models.config import RenameConfig
    from tvrenamer.pipeline.renamer import RenameSummary


def describe_template(template: Template) -> str:
    """
    Render a parsed template back to its source form for display.

    Literal "$" is shown escaped as "$$".
    """
    parts = []
    for token in template:
        if isinstance(token, LiteralToken):
            parts.append("$$" if token.character == "$" else token.character)
        else:
            parts.append("${" + token.value + "}")
    return "".join(parts)


def display_configuration(config: "RenameConfig", console: ConsoleUI) -> None:
    """
    Display the current configuration to the user.

    Args:
        config: Run configuration.
        console: Console UI instance.
    """
    mode_parts = []
    if config.automatic:
        mode_parts.append("[cyan]AUTOMATIC[/cyan]")
    if config.dry_run:
        mode_parts.append("[yellow]SIMULATION[/yellow]")
    if not mode_parts:
        mode_parts.append("[green]Normal[/green]")

    series = escape(config.series_name) if config.series_name else "(from directory name)"
    season = "(from directory names)" if config.automatic else str(config.season_number)

    console.settings_panel("TV Renamer", [
        ("Directory", f"[cyan]{escape(shorten_path(config.directory))}[/cyan]"),
        ("Series", f"[cyan]{series}[/cyan]"),
        ("Season", season),
        ("First episode", f"{config.episode_start} (padding {config.pad_length})"),
        ("Template", f"[cyan]{escape(describe_template(config.template))}[/cyan]"),
        ("Mode", " ".join(mode_parts)),
    ])


def display_renames(pairs: List[Tuple[Path, Path]], console: ConsoleUI) -> None:
    """
    Display planned renames as a table.

    Args:
        pairs: (source, target) pairs in episode order.
        console: Console UI instance.
    """
    if not pairs:
        console.info("No episodes found")
        return

    console.rename_table(f"Renames in {shorten_path(pairs[0][0].parent)}", pairs)


def display_summary(summary: "RenameSummary", console: ConsoleUI, dry_run: bool = False) -> None:
    """
    Display the outcome of a run.

    Args:
        summary: Counts collected by the pipeline.
        console: Console UI instance.
        dry_run: If True, word the summary as a simulation.
    """
    verb = "would be renamed" if dry_run else "renamed"
    console.success(f"{summary.renamed} episode(s) {verb}, {summary.skipped} skipped")
    if summary.failed_files:
        console.warning(f"{summary.failed_files} episode(s) could not be renamed")
    for directory in summary.failed_seasons:
        console.error(f"Failed: {escape(shorten_path(directory))}")
