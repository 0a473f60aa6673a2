"""
Token stream rendering.

Rendering walks an index range of the immutable token tuple. Block bodies
are rendered by recursing over their sub-range with a derived scope chain;
the caller's cursor resumes after the block terminator. Nothing is mutated,
so a token tuple can be rendered any number of times.
"""

from __future__ import annotations

import logging
from typing import Any

from ..errors import NestingTooDeepError
from ..errors import UnexpectedCloserError
from ..template_syntax.keypath import finalize
from ..template_syntax.keypath import find
from ..types import CURRENT
from ..types import DEFAULT_OPTIONS
from ..types import MISSING
from ..types import BlockKind
from ..types import RenderOptions
from ..types import Tag
from ..types import Text
from ..types import Token
from ..types import format_tag
from .blocks import Scopes
from .blocks import block_scopes
from .blocks import find_block_end

logger = logging.getLogger(__name__)


def lookup(scopes: Scopes, path: str, fallback: Any = MISSING) -> Any:
    """
    Resolve `path` against a scope chain, innermost scope first.

    The first scope holding an entry for `path` wins, even when that entry
    is `None`; outer scopes are only consulted for absent entries. `.` only
    ever refers to the innermost scope.
    """
    if path == CURRENT:
        return finalize(find(scopes[-1], path), fallback)
    for scope in reversed(scopes):
        value = find(scope, path)
        if value is not MISSING:
            return finalize(value, fallback)
    return fallback


def render_tokens(
    tokens: tuple[Token, ...],
    context: Any,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> str:
    """Render a token tuple against `context`."""
    return _render_range(tokens, 0, len(tokens), (context,), options, 0)


def _interpolate(tag: Tag, scopes: Scopes, options: RenderOptions) -> str:
    value = lookup(scopes, tag.path)
    if value is MISSING:
        return format_tag(tag)
    text = value if isinstance(value, str) else str(value)
    if options.escape is not None:
        text = options.escape(text)
    return text


def _render_range(
    tokens: tuple[Token, ...],
    start: int,
    end: int,
    scopes: Scopes,
    options: RenderOptions,
    depth: int,
) -> str:
    out: list[str] = []
    index = start

    while index < end:
        token = tokens[index]
        index += 1

        if isinstance(token, Text):
            out.append(token.text)
            continue

        if token.prefix is None:
            out.append(_interpolate(token, scopes, options))
            continue

        # A closer with no open block renders nothing unless names are strict.
        if token.prefix is BlockKind.END:
            if options.strict_block_names:
                raise UnexpectedCloserError(token)
            continue

        if depth >= options.max_depth:
            raise NestingTooDeepError(token, options.max_depth)

        close = find_block_end(
            tokens, index, end, token, strict=options.strict_block_names
        )
        value = lookup(scopes, token.path)
        chains = block_scopes(token.prefix, value, scopes)
        logger.debug(
            "Block %s (line %d) renders %d time(s)",
            format_tag(token),
            token.line,
            len(chains),
        )
        for chain in chains:
            out.append(
                _render_range(tokens, index, close, chain, options, depth + 1)
            )
        index = close + 1

    return "".join(out)
