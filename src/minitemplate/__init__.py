"""
minitemplate - a small logic-enabled string templating engine.

Templates contain `{{path}}` placeholders resolved by dotted keypath, plus
`{{#path}}...{{/path}}` blocks (conditional or iterated) and
`{{^path}}...{{/path}}` inverted blocks.
"""

from __future__ import annotations

from .errors import ConfigError
from .errors import MismatchedBlockError
from .errors import NestingTooDeepError
from .errors import TemplateError
from .errors import UnexpectedCloserError
from .errors import UnterminatedBlockError
from .errors import UnterminatedTagError
from .template import Template
from .template import render
from .template_syntax.keypath import resolve
from .template_syntax.tokenization import tokenize
from .types import DEFAULT_DELIMITERS
from .types import DEFAULT_OPTIONS
from .types import MISSING
from .types import BlockKind
from .types import Delimiters
from .types import RenderOptions
from .types import Tag
from .types import Text
from .types import ValidationError
from .types import format_tag
from .validation.structural import validate_template

__all__ = [
    "BlockKind",
    "ConfigError",
    "DEFAULT_DELIMITERS",
    "DEFAULT_OPTIONS",
    "Delimiters",
    "MISSING",
    "MismatchedBlockError",
    "NestingTooDeepError",
    "RenderOptions",
    "Tag",
    "Template",
    "TemplateError",
    "Text",
    "UnexpectedCloserError",
    "UnterminatedBlockError",
    "UnterminatedTagError",
    "ValidationError",
    "format_tag",
    "render",
    "resolve",
    "tokenize",
    "validate_template",
]
