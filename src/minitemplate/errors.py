"""
Template errors.

All errors subclass Django's `TemplateSyntaxError`, so code that already
guards Django template rendering catches these as well.
"""

from __future__ import annotations

from django.template.exceptions import TemplateSyntaxError

from .types import Tag
from .types import format_tag


class TemplateError(TemplateSyntaxError):
    """Base class for tokenization and rendering failures."""


class UnterminatedTagError(TemplateError):
    """An open marker has no close marker before the end of the template."""

    def __init__(self, source: str, line: int) -> None:
        self.source = source
        self.line = line
        super().__init__(f"Missing closing tag for '{source}' (line {line})")


class UnterminatedBlockError(TemplateError):
    """A block opener has no matching terminator."""

    def __init__(self, tag: Tag) -> None:
        self.tag = tag
        self.source = format_tag(tag)
        super().__init__(
            f"Missing closing block for: {self.source} (line {tag.line})"
        )


class UnexpectedCloserError(TemplateError):
    """A block terminator appeared with no open block (strict mode only)."""

    def __init__(self, tag: Tag) -> None:
        self.tag = tag
        self.source = format_tag(tag)
        super().__init__(
            f"Unexpected '{self.source}' outside any block (line {tag.line})"
        )


class MismatchedBlockError(TemplateError):
    """A block was closed by a terminator naming a different path."""

    def __init__(self, opener: Tag, closer: Tag) -> None:
        self.opener = opener
        self.closer = closer
        super().__init__(
            f"Mismatched '{format_tag(closer)}' (line {closer.line}) closing "
            f"'{format_tag(opener)}' (line {opener.line})"
        )


class NestingTooDeepError(TemplateError):
    """Block nesting exceeded `RenderOptions.max_depth`."""

    def __init__(self, tag: Tag, limit: int) -> None:
        self.tag = tag
        self.limit = limit
        super().__init__(
            f"Block nesting deeper than {limit} at '{format_tag(tag)}' "
            f"(line {tag.line})"
        )


class ConfigError(ValueError):
    """Invalid render configuration."""
