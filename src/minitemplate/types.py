"""
Shared types for tokenization, rendering and validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import Callable
from typing import Literal
from typing import Union


class BlockKind(str, Enum):
    """Block prefixes recognised immediately after the open marker."""

    POSITIVE = "#"  # {{#path}} conditional / iteration
    INVERTED = "^"  # {{^path}} rendered when #path would render nothing
    END = "/"  # {{/path}} closes the innermost open block

    @property
    def opens_block(self) -> bool:
        return self is not BlockKind.END


PREFIXES: dict[str, BlockKind] = {kind.value: kind for kind in BlockKind}

# Key of the synthetic scope built for a primitive iteration item, and the
# path that refers to the current scope itself.
CURRENT = "."


class _Missing:
    """Sentinel for a keypath that did not resolve."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True, slots=True)
class Delimiters:
    """The open/close marker pair, e.g. `{{` and `}}`."""

    open: str = "{{"
    close: str = "}}"

    def __post_init__(self) -> None:
        if not self.open or not self.close:
            raise ValueError("Delimiters must be non-empty strings")
        if self.open in self.close or self.close in self.open:
            raise ValueError(
                f"Delimiters must not overlap (open={self.open!r}, close={self.close!r})"
            )


DEFAULT_DELIMITERS = Delimiters()


@dataclass(frozen=True, slots=True)
class Text:
    """A literal template fragment, copied verbatim to the output."""

    text: str
    kind: Literal["text"] = field(default="text", init=False)


@dataclass(frozen=True, slots=True)
class Tag:
    """
    A placeholder tag.

    Stores the raw parts of `{{#path}}` so the source text can be rebuilt
    by `format_tag()` when a lookup misses or an error needs to name the tag.
    """

    path: str
    prefix: BlockKind | None
    open: str
    close: str
    line: int
    kind: Literal["tag"] = field(default="tag", init=False)

    @property
    def opens_block(self) -> bool:
        return self.prefix is not None and self.prefix.opens_block

    @property
    def closes_block(self) -> bool:
        return self.prefix is BlockKind.END


Token = Union[Text, Tag]


def format_tag(tag: Tag) -> str:
    """Rebuild the literal source text of a tag."""
    prefix = tag.prefix.value if tag.prefix is not None else ""
    return f"{tag.open}{prefix}{tag.path}{tag.close}"


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """
    Render configuration.

    - `escape` is applied to interpolated values only (never to literal text
      or to the source text echoed for unresolved tags).
    - `strict_block_names` makes a closer with a different path than its
      opener an error instead of silently closing the block.
    - `max_depth` caps block nesting.
    """

    delimiters: Delimiters = DEFAULT_DELIMITERS
    escape: Callable[[str], str] | None = None
    strict_block_names: bool = False
    max_depth: int = 100

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")


DEFAULT_OPTIONS = RenderOptions()


@dataclass
class ValidationError:
    """A structural problem found in a template without rendering it."""

    tag: Tag | None
    message: str
    line: int = 0

    def __str__(self) -> str:
        loc = f"line {self.line}" if self.line else "unknown location"
        name = format_tag(self.tag) if self.tag is not None else "template"
        return f"{name} ({loc}): {self.message}"
