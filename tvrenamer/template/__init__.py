"""Filename template parsing and formatting."""

from tvrenamer.template.tokens import (
    LiteralToken,
    Placeholder,
    Template,
    TemplateToken,
)
from tvrenamer.template.tokenizer import parse_template, template_requires_titles
from tvrenamer.template.formatting import pad, sanitize

__all__ = [
    "LiteralToken",
    "Placeholder",
    "Template",
    "TemplateToken",
    "parse_template",
    "template_requires_titles",
    "pad",
    "sanitize",
]
