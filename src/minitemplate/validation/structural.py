"""
Structural (block-aware) validation.

Checks block nesting without data and without rendering. Rendering itself is
more lenient: it pairs closers with openers by depth alone and ignores
stray closers, so a template that renders may still produce errors here.
"""

from __future__ import annotations

from ..errors import UnterminatedTagError
from ..template_syntax.tokenization import tokenize
from ..types import DEFAULT_DELIMITERS
from ..types import Delimiters
from ..types import Tag
from ..types import ValidationError
from ..types import format_tag


def _error(tag: Tag, message: str) -> ValidationError:
    return ValidationError(tag=tag, message=message, line=tag.line)


def validate_block_structure(tags: list[Tag]) -> list[ValidationError]:
    """
    Validate opener/closer pairing for a sequence of tags.

    Enforces stack discipline: every closer must close the innermost open
    block and name the same path, and every opener must be closed.
    """
    errors: list[ValidationError] = []
    stack: list[Tag] = []

    for tag in tags:
        if tag.opens_block:
            stack.append(tag)
            continue

        if not tag.closes_block:
            continue

        if not stack:
            errors.append(
                _error(tag, f"Unexpected '{format_tag(tag)}' outside any block")
            )
            continue

        # Recover by closing the current block to avoid cascades.
        start = stack.pop()
        if tag.path != start.path:
            errors.append(
                _error(
                    tag,
                    f"Mismatched '{format_tag(tag)}' inside '{format_tag(start)}' block",
                )
            )

    for start in reversed(stack):
        errors.append(_error(start, f"Unclosed '{format_tag(start)}' block"))

    return errors


def validate_template(
    template: str,
    delimiters: Delimiters = DEFAULT_DELIMITERS,
) -> list[ValidationError]:
    """
    Validate a template's tags and block structure.

    Returns a list of errors; an empty list means the template is well formed.
    """
    try:
        tokens = tokenize(template, delimiters)
    except UnterminatedTagError as e:
        return [ValidationError(tag=None, message=str(e), line=e.line)]

    tags = [tok for tok in tokens if isinstance(tok, Tag)]
    return validate_block_structure(tags)
