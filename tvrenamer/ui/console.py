"""Rich console shared by the entry point, the pipeline and the display helpers."""

from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from tvrenamer.filesystem.paths import shorten_path

# kind -> (style, icon)
MESSAGE_STYLES = {
    "info": ("blue", "ℹ️ "),
    "warning": ("yellow", "⚠️ "),
    "error": ("red", "❌"),
    "success": ("green", "✓"),
}


class ConsoleUI:
    """
    Styled output of a renaming run.

    Messages are rich markup. Paths and names read from the disk are
    escaped by the rename-specific helpers; callers passing free text to
    ``message`` escape it themselves.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def print(self, *args, **kwargs) -> None:
        """Print to console (delegates to Rich Console)."""
        self.console.print(*args, **kwargs)

    def message(self, kind: str, text: str) -> None:
        """
        Print a one-line message.

        Args:
            kind: One of MESSAGE_STYLES (info, warning, error, success).
            text: Markup text.
        """
        style, icon = MESSAGE_STYLES[kind]
        self.console.print(f"[{style}]{icon} {text}[/{style}]")

    def info(self, text: str) -> None:
        self.message("info", text)

    def warning(self, text: str) -> None:
        self.message("warning", text)

    def error(self, text: str) -> None:
        self.message("error", text)

    def success(self, text: str) -> None:
        self.message("success", text)

    def rename(self, source: Path, target: Path, dry_run: bool = False) -> None:
        """Print one rename attempt, as shown in verbose mode."""
        prefix = "[dim]SIMULATION[/dim] " if dry_run else ""
        self.console.print(
            f"{prefix}{escape(shorten_path(source))} [dim]->[/dim] {escape(shorten_path(target))}"
        )

    def season_failed(self, directory: Path, error: Exception) -> None:
        """Report a season left untouched."""
        self.error(f"{escape(shorten_path(directory))}: {escape(str(error))}")

    def simulation_banner(self) -> None:
        """Warn that nothing will be written to the disk."""
        self.console.print(Panel(
            "[yellow]SIMULATION MODE[/yellow]\n\n"
            "• No file will be renamed\n"
            "• Planned renames are listed per season",
            border_style="yellow",
        ))

    def settings_panel(self, title: str, rows: Sequence[Tuple[str, str]]) -> None:
        """
        Print "label: value" rows in a panel.

        Args:
            title: Panel title.
            rows: (label, markup value) pairs, in display order.
        """
        body = "\n".join(f"{label}: {value}" for label, value in rows)
        self.console.print(Panel(body, title=title, border_style="blue"))

    def rename_table(self, title: str, pairs: Iterable[Tuple[Path, Path]]) -> None:
        """
        Print planned renames, one row per episode.

        Rows whose name does not change are dimmed.
        """
        table = Table(title=escape(title), show_header=True, header_style="bold magenta")
        table.add_column("Source")
        table.add_column("Target")
        for source, target in pairs:
            table.add_row(
                escape(source.name),
                escape(target.name),
                style="dim" if source == target else None,
            )
        self.console.print(table)
