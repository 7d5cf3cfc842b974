"""Target resolution and renaming pipeline."""

from tvrenamer.pipeline.renderer import render_destination, render_filename
from tvrenamer.pipeline.resolver import resolve_targets
from tvrenamer.pipeline.renamer import RenamePipeline, RenameSummary

__all__ = [
    "render_destination",
    "render_filename",
    "resolve_targets",
    "RenamePipeline",
    "RenameSummary",
]
