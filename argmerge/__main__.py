"""
Argmerge

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from argparse import ArgumentParser
from pathlib import Path
from typing import Any, Sequence

from rich.markup import escape

from argmerge.config import load_schema
from argmerge.console import console, error_console
from argmerge.exceptions import ArgmergeError, SchemaLoadError
from argmerge.parser import ParsedArguments
from argmerge.utils import setup_logging
from argmerge.version import __version__


def find_schema() -> Path | None:
    candidates = [
        Path.cwd() / "argmerge.yaml",
        Path.cwd() / "argmerge.toml",
        Path.cwd() / ".argmerge.yaml",
        Path.cwd() / ".argmerge.toml",
    ]
    if os.environ.get("ARGMERGE_SCHEMA"):
        candidates.append(Path(os.environ["ARGMERGE_SCHEMA"]))
    return next((p for p in candidates if p.is_file()), None)


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="argmerge",
        description="Parse command-line tokens against a schema of defaults.",
        epilog="Pass the tokens to parse after '--', e.g. argmerge -- --dry-run data.yml",
    )
    parser.add_argument(
        "-s",
        "--schema",
        type=Path,
        help="YAML or TOML schema file. Discovered from the working directory "
        "or $ARGMERGE_SCHEMA when omitted.",
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        help="Console logging format.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging."
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("tokens", nargs="*", help="Tokens to parse.")
    return parser


def render_result(result: ParsedArguments) -> dict[str, Any]:
    return {
        "flags": dict(result.flags),
        "arguments": list(result),
        "length": result.length,
    }


def main(argv: Sequence[str] | None = None) -> int:
    args = get_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    schema_path = args.schema or find_schema()
    if schema_path is None:
        error_console.print(
            "[argmerge.error]No schema file found.[/] "
            "[argmerge.hint]Pass --schema or create argmerge.yaml.[/]"
        )
        return 1

    try:
        schema = load_schema(schema_path)
    except SchemaLoadError as error:
        error_console.print(f"[argmerge.error]Schema error:[/] {escape(str(error))}")
        return 1

    try:
        result = schema.parse(args.tokens)
    except ArgmergeError as error:
        error_console.print(f"[argmerge.error]Argument error:[/] {escape(str(error))}")
        return 2

    console.print_json(data=render_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
