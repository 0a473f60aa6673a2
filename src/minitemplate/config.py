"""
Loading `RenderOptions` from TOML.

    [delimiters]
    open = "<%"
    close = "%>"

    [render]
    escape = "html"
    strict_block_names = true
    max_depth = 50
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .escaping import ESCAPES
from .types import DEFAULT_OPTIONS
from .types import Delimiters
from .types import RenderOptions

_TABLES = {"delimiters", "render"}
_DELIMITER_KEYS = {"open", "close"}
_RENDER_KEYS = {"escape", "strict_block_names", "max_depth"}


def _check_keys(section: str, data: Any, allowed: set[str]) -> None:
    if not isinstance(data, dict):
        raise ConfigError(f"[{section}] must be a table")
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ConfigError(f"Unknown key(s) in [{section}]: {', '.join(unknown)}")


def options_from_mapping(
    data: dict[str, Any],
    base: RenderOptions = DEFAULT_OPTIONS,
) -> RenderOptions:
    """
    Build `RenderOptions` from parsed config data, starting from `base`.
    """
    _check_keys("top level", data, _TABLES)
    delims = data.get("delimiters", {})
    render = data.get("render", {})
    _check_keys("delimiters", delims, _DELIMITER_KEYS)
    _check_keys("render", render, _RENDER_KEYS)

    try:
        delimiters = Delimiters(
            open=delims.get("open", base.delimiters.open),
            close=delims.get("close", base.delimiters.close),
        )
    except ValueError as e:
        raise ConfigError(str(e)) from e

    escape = base.escape
    if "escape" in render:
        name = render["escape"]
        if name not in ESCAPES:
            raise ConfigError(
                f"Unknown escape {name!r} (expected one of: {', '.join(sorted(ESCAPES))})"
            )
        escape = ESCAPES[name]

    max_depth = render.get("max_depth", base.max_depth)
    if not isinstance(max_depth, int) or isinstance(max_depth, bool) or max_depth < 1:
        raise ConfigError(f"max_depth must be a positive integer, got {max_depth!r}")

    strict = render.get("strict_block_names", base.strict_block_names)
    if not isinstance(strict, bool):
        raise ConfigError(f"strict_block_names must be a boolean, got {strict!r}")

    return RenderOptions(
        delimiters=delimiters,
        escape=escape,
        strict_block_names=strict,
        max_depth=max_depth,
    )


def load_options(path: Path | str, base: RenderOptions = DEFAULT_OPTIONS) -> RenderOptions:
    """Read `RenderOptions` from a TOML file."""
    path = Path(path)
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e
    return options_from_mapping(data, base)
