"""User interface components."""

from tvrenamer.ui.console import ConsoleUI
from tvrenamer.ui.display import (
    describe_template,
    display_configuration,
    display_renames,
    display_summary,
)

__all__ = [
    "ConsoleUI",
    "describe_template",
    "display_configuration",
    "display_renames",
    "display_summary",
]
