"""
TV Renamer - Episode renaming tool for TV series libraries.

Renames the episodes of a series directory by:
- Discovering season directories and episode files in a stable order
- Rendering each target filename from a user template
- Optionally fetching episode titles from TVDB
"""

__version__ = "0.3.0"
