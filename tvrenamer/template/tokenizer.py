"""Tokenizer for filename templates.

Grammar:

    ${Series}   series name
    ${Season}   season number
    ${Episode}  episode number, zero padded
    ${Title}    episode title from TVDB (``${TVDB_Title}`` also accepted)
    $$          a literal ``$``

Every other character is kept as a literal. A ``$`` must always start
either an escape or a placeholder.
"""

from typing import List

from tvrenamer.exceptions import TemplateParseError
from tvrenamer.template.tokens import (
    PLACEHOLDER_NAMES,
    LiteralToken,
    Placeholder,
    Template,
    TemplateToken,
)

SIGIL = "$"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"


def parse_template(source: str) -> Template:
    """
    Parse a template string into an ordered sequence of tokens.

    Args:
        source: Template string, e.g. "${Series} ${Season}x${Episode}".

    Returns:
        Tuple of tokens in output order.

    Raises:
        TemplateParseError: On a dangling ``$``, an unterminated ``${``
            or an unknown placeholder name.
    """
    tokens: List[TemplateToken] = []
    pos = 0
    length = len(source)

    while pos < length:
        ch = source[pos]

        if ch != SIGIL:
            tokens.append(LiteralToken(ch))
            pos += 1
            continue

        following = source[pos + 1] if pos + 1 < length else ""

        if following == SIGIL:
            tokens.append(LiteralToken(SIGIL))
            pos += 2
            continue

        if following != OPEN_BRACE:
            raise TemplateParseError(
                "Incomplete marker: '$' must be followed by '{' or '$'",
                source=source,
                position=pos,
            )

        end = source.find(CLOSE_BRACE, pos + 2)
        if end == -1:
            raise TemplateParseError(
                "Unterminated placeholder: missing '}'",
                source=source,
                position=pos,
            )

        name = source[pos + 2:end]
        placeholder = PLACEHOLDER_NAMES.get(name)
        if placeholder is None:
            raise TemplateParseError(
                f"Unknown placeholder: '{name}'"
                f" (expected one of: {', '.join(sorted(PLACEHOLDER_NAMES))})",
                source=source,
                position=pos,
            )

        tokens.append(placeholder)
        pos = end + 1

    return tuple(tokens)


def template_requires_titles(template: Template) -> bool:
    """Check whether rendering the template needs episode titles."""
    return Placeholder.TITLE in template
