"""
Command-line wrapper: render a template file against a JSON or TOML data file.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
import tomllib
from pathlib import Path
from typing import Any

from .config import load_options
from .errors import ConfigError
from .errors import TemplateError
from .escaping import ESCAPES
from .logging import LogConfig
from .logging import configure_logging
from .template import Template
from .types import DEFAULT_OPTIONS
from .types import Delimiters
from .types import RenderOptions
from .validation.structural import validate_template

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minitemplate",
        description="Render a template with data from a JSON or TOML file",
    )
    parser.add_argument("template", help="Template file, or '-' for stdin")
    parser.add_argument(
        "data", nargs="?", help="Data file (.json or .toml); defaults to {}"
    )
    parser.add_argument("--config", help="TOML file with render options")
    parser.add_argument("--open", help="Open delimiter (default '{{')")
    parser.add_argument("--close", help="Close delimiter (default '}}')")
    parser.add_argument(
        "--escape", choices=sorted(ESCAPES), help="Escape interpolated values"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Require block closers to name their opener's path",
    )
    parser.add_argument("-o", "--output", help="Write output here instead of stdout")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the template's block structure instead of rendering",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    return parser


def load_data(path: Path) -> Any:
    """Load render data from a `.json` or `.toml` file."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".toml":
        return tomllib.loads(text)
    return json.loads(text)


def _options_from_args(args: argparse.Namespace) -> RenderOptions:
    options = load_options(args.config) if args.config else DEFAULT_OPTIONS
    changes: dict[str, Any] = {}
    if args.open is not None or args.close is not None:
        try:
            changes["delimiters"] = Delimiters(
                open=options.delimiters.open if args.open is None else args.open,
                close=options.delimiters.close if args.close is None else args.close,
            )
        except ValueError as e:
            raise ConfigError(str(e)) from e
    if args.escape:
        changes["escape"] = ESCAPES[args.escape]
    if args.strict:
        changes["strict_block_names"] = True
    return dataclasses.replace(options, **changes) if changes else options


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(
        LogConfig(
            log_level=logging.DEBUG if args.verbose else logging.WARNING,
            console_level=logging.DEBUG if args.verbose else logging.WARNING,
        )
    )

    try:
        options = _options_from_args(args)
        if args.template == "-":
            source = sys.stdin.read()
        else:
            source = Path(args.template).read_text(encoding="utf-8")

        if args.check:
            errors = validate_template(source, options.delimiters)
            for error in errors:
                print(f"{args.template}: {error}", file=sys.stderr)
            return 1 if errors else 0

        data = load_data(Path(args.data)) if args.data else {}
        logger.debug("Rendering %s with %s", args.template, type(data).__name__)
        output = Template(source, options=options).render(data)

        if args.output:
            Path(args.output).write_text(output, encoding="utf-8")
        else:
            sys.stdout.write(output)
    # ConfigError and JSON/TOML decode errors are ValueErrors.
    except (TemplateError, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
