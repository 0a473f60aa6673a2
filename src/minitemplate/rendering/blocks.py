"""
Block structure and block semantics.

Blocks are recovered from the flat token stream by nesting depth:

- `find_block_end()` locates the terminator of an opener
- `block_scopes()` decides how many times a body renders, and with which
  scope chain each time
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..errors import MismatchedBlockError
from ..errors import UnterminatedBlockError
from ..template_syntax.keypath import is_indexable
from ..template_syntax.keypath import is_sequence
from ..types import CURRENT
from ..types import MISSING
from ..types import BlockKind
from ..types import Tag
from ..types import Token

Scopes = tuple[Any, ...]


def find_block_end(
    tokens: tuple[Token, ...],
    start: int,
    end: int,
    opener: Tag,
    *,
    strict: bool = False,
) -> int:
    """
    Return the index of the terminator for `opener`.

    `start` is the index just after the opener; the search never goes past
    `end`. Any `#`/`^` opener deepens nesting and any `/` closer either
    closes a nested block or, at depth 0, terminates this one. Closer paths
    are only compared with the opener's when `strict` is set.
    """
    depth = 0
    for index in range(start, end):
        token = tokens[index]
        if not isinstance(token, Tag) or token.prefix is None:
            continue
        if token.opens_block:
            depth += 1
            continue
        if depth:
            depth -= 1
            continue
        if strict and token.path != opener.path:
            raise MismatchedBlockError(opener, token)
        return index
    raise UnterminatedBlockError(opener)


def is_truthy(value: Any) -> bool:
    """
    Block truthiness.

    Empty sequences and mappings are falsy, as are `None`, missing values,
    empty strings, zero and NaN. Booleans are taken as-is.
    """
    if value is MISSING or value is None:
        return False
    if isinstance(value, bool):
        return value
    if is_indexable(value):
        return len(value) > 0
    # NaN is the only value not equal to itself (float and Decimal alike).
    if value != value:
        return False
    return bool(value)


def _item_scope(item: Any) -> Any:
    if is_indexable(item):
        return item
    return {CURRENT: item}


def block_scopes(kind: BlockKind, value: Any, scopes: Scopes) -> list[Scopes]:
    """
    Return one scope chain per body rendering (empty: render nothing).

    - `^` renders once, unchanged, exactly when `#` would render nothing
    - `#` over a sequence renders once per item, the item pushed as scope
    - `#` over a non-empty mapping renders once with the mapping pushed
    - `#` over any other truthy value renders once, unchanged
    """
    if kind is BlockKind.INVERTED:
        return [] if is_truthy(value) else [scopes]
    if not is_truthy(value):
        return []
    if is_sequence(value):
        return [scopes + (_item_scope(item),) for item in value]
    if isinstance(value, Mapping):
        return [scopes + (value,)]
    return [scopes]
