"""Number padding and filename cleanup used when rendering templates."""

PATH_SEPARATOR = "/"
SEPARATOR_REPLACEMENT = "-"


def pad(number: int, pad_char: str, width: int) -> str:
    """
    Render a non-negative integer left-padded to a minimum width.

    Numbers wider than ``width`` are rendered in full, never truncated.

    Args:
        number: Value to render.
        pad_char: Single character used for padding.
        width: Minimum number of characters.

    Returns:
        Padded decimal string, e.g. pad(5, '0', 2) -> "05".
    """
    if number < 0:
        raise ValueError(f"Cannot pad negative number: {number}")
    return str(number).rjust(width, pad_char)


def sanitize(raw_filename: str) -> str:
    """
    Make a rendered filename safe to join to a directory.

    Strips surrounding whitespace, then replaces path separators with
    hyphens so the name cannot introduce subdirectories.
    """
    return raw_filename.strip().replace(PATH_SEPARATOR, SEPARATOR_REPLACEMENT)
