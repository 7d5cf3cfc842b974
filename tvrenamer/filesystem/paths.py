"""Path helpers for display."""

from pathlib import Path


def shorten_path(path: Path) -> str:
    """
    Shorten a path for readability.

    Paths under the working directory become "./...", paths under the
    home directory become "~/...", anything else is returned unchanged.

    Args:
        path: Path to shorten.

    Returns:
        Shortened path as a display string.
    """
    for prefix, base in ((".", Path.cwd()), ("~", Path.home())):
        try:
            relative = path.relative_to(base)
        except ValueError:
            continue
        return prefix if relative == Path(".") else f"{prefix}/{relative}"
    return str(path)
