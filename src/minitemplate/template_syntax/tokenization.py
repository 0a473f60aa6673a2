"""
Template tokenization.

Splits a template into the flat token stream consumed by the renderer and
the validator. No tree is built: block structure is recovered later from
token order alone.
"""

from __future__ import annotations

import logging

from ..errors import UnterminatedTagError
from ..types import DEFAULT_DELIMITERS
from ..types import PREFIXES
from ..types import Delimiters
from ..types import Tag
from ..types import Text
from ..types import Token

logger = logging.getLogger(__name__)


def tokenize(
    template: str,
    delimiters: Delimiters = DEFAULT_DELIMITERS,
) -> tuple[Token, ...]:
    """
    Tokenize a template into `Text` and `Tag` tokens.

    - Empty literal fragments (e.g. between adjacent tags) are not emitted.
    - Tag paths are taken literally; surrounding whitespace is kept.
    - Raises `UnterminatedTagError` when an open marker has no close marker.
    """
    open_, close = delimiters.open, delimiters.close
    out: list[Token] = []
    pos = 0
    line = 1

    while True:
        start = template.find(open_, pos)
        if start == -1:
            if pos < len(template):
                out.append(Text(template[pos:]))
            break

        if start > pos:
            out.append(Text(template[pos:start]))
        line += template.count("\n", pos, start)

        cursor = start + len(open_)
        prefix = PREFIXES.get(template[cursor : cursor + 1])
        if prefix is not None:
            cursor += 1

        end = template.find(close, cursor)
        if end == -1:
            raise UnterminatedTagError(template[start:].split("\n", 1)[0], line)

        out.append(
            Tag(
                path=template[cursor:end],
                prefix=prefix,
                open=open_,
                close=close,
                line=line,
            )
        )
        pos = end + len(close)
        line += template.count("\n", start, pos)

    logger.debug("Tokenized %d chars into %d tokens", len(template), len(out))
    return tuple(out)
