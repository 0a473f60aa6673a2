from __future__ import annotations

import pytest

from minitemplate.escaping import html_escape
from minitemplate.types import Delimiters
from minitemplate.types import RenderOptions


@pytest.fixture
def html_options() -> RenderOptions:
    return RenderOptions(escape=html_escape)


@pytest.fixture
def strict_options() -> RenderOptions:
    return RenderOptions(strict_block_names=True)


@pytest.fixture
def erb_options() -> RenderOptions:
    return RenderOptions(delimiters=Delimiters("<%", "%>"))


@pytest.fixture
def tracks() -> dict:
    return {
        "tracks": [
            {
                "name": "Michelle",
                "album": {"name": "Rubber Soul", "tracks": 12},
                "artist": {"name": "The Beatles"},
            },
            {
                "name": "Taxman",
                "album": {"name": "Revolver", "tracks": 14},
                "artist": {"name": "The Beatles"},
            },
        ]
    }
