"""Token types produced by the template tokenizer."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union


class Placeholder(Enum):
    """Placeholders that are substituted when a filename is rendered."""

    SERIES = "Series"
    SEASON = "Season"
    EPISODE = "Episode"
    TITLE = "Title"


@dataclass(frozen=True)
class LiteralToken:
    """A single character copied verbatim into the filename."""

    character: str


TemplateToken = Union[LiteralToken, Placeholder]
Template = Tuple[TemplateToken, ...]

# Names accepted inside ${...}
PLACEHOLDER_NAMES: Dict[str, Placeholder] = {
    "Series": Placeholder.SERIES,
    "Season": Placeholder.SEASON,
    "Episode": Placeholder.EPISODE,
    "Title": Placeholder.TITLE,
    "TVDB_Title": Placeholder.TITLE,
}
