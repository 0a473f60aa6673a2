"""
Escape functions for interpolated values.
"""

from __future__ import annotations

from typing import Callable

from django.utils.html import conditional_escape


def html_escape(text: str) -> str:
    """
    Escape `& < > " '` for HTML.

    Strings marked safe with `django.utils.safestring.mark_safe` pass through
    unchanged.
    """
    return str(conditional_escape(text))


ESCAPES: dict[str, Callable[[str], str] | None] = {
    "html": html_escape,
    "none": None,
}
