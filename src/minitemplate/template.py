"""
Public template API.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from .rendering.renderer import render_tokens
from .template_syntax.tokenization import tokenize
from .types import DEFAULT_OPTIONS
from .types import Delimiters
from .types import RenderOptions
from .types import Token


class Template:
    """
    A tokenized template that can be rendered many times.

    Tokenization happens eagerly, so malformed tags fail at construction:

        >>> t = Template("{{person.name}} is {{person.age}}")
        >>> t.render({"person": {"name": "Aron", "age": 25}})
        'Aron is 25'
        >>> Template("<%name%>", options=RenderOptions(
        ...     delimiters=Delimiters("<%", "%>"))).render({"name": "Tim"})
        'Tim'
    """

    __slots__ = ("_source", "_tokens", "_data", "_options")

    def __init__(
        self,
        template: str,
        data: Any = None,
        options: RenderOptions | None = None,
    ) -> None:
        self._source = template
        self._options = options or DEFAULT_OPTIONS
        self._data = data
        self._tokens = tokenize(template, self._options.delimiters)

    @property
    def source(self) -> str:
        return self._source

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    @property
    def options(self) -> RenderOptions:
        return self._options

    def render(self, data: Any = None) -> str:
        """
        Render with `data`, falling back to the data given at construction
        and then to an empty mapping.
        """
        if data is None:
            data = self._data if self._data is not None else {}
        return render_tokens(self._tokens, data, self._options)

    def __repr__(self) -> str:
        return f"<Template {self._source[:40]!r} ({len(self._tokens)} tokens)>"


def render(
    template: str,
    data: Any = None,
    options: RenderOptions | None = None,
    *,
    delimiters: Delimiters | None = None,
) -> str:
    """Tokenize and render `template` in one step."""
    options = options or DEFAULT_OPTIONS
    if delimiters is not None:
        options = dataclasses.replace(options, delimiters=delimiters)
    return Template(template, options=options).render(data)
