# Argmerge — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `parse_arguments`, which turns a list of raw command-line
tokens into named values merged over caller-supplied defaults plus the remaining
positional tokens.

The kind of each default decides how its options behave:
- `bool`: `--dry-run`, `--dry-run=no`, `--no-dry-run`, `-d`, bundled `-vd`
- `int` / `float`: `--count=3`, `--no-count` resets to the default
- `str`: `--input=data.json`, `--no-input` clears it
- `list[str]`: `--tag=a --tag=b` accumulates, `--no-tag=a` removes one

Example Usage:
    args = parse_arguments(
        ["data.yml", "--dry-run", "data.json", "--debug"],
        {"dryRun": False, "debug": False},
    )

    # args.to_dict() == {
    #     "dryRun": True, "debug": True, "0": "data.yml", "1": "data.json", "length": 2
    # }

Parsing is all-or-nothing: any rule violation raises an `ArgumentParseError`
subclass naming the offending token, and no partial result is returned.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from argmerge.exceptions import ExclusiveArgumentsError
from argmerge.logger import logger
from argmerge.parser.coercion import merge_input
from argmerge.parser.field_kind import FieldKind
from argmerge.parser.names import NamedInput, build_name_table, is_dash_only
from argmerge.parser.options import ParseOptions
from argmerge.parser.result import ParsedArguments


def check_exclusives(
    records: Iterable[NamedInput], exclusives: Iterable[Iterable[str]]
) -> None:
    """
    Raise if more than one field of an exclusive group was supplied.

    The error names the raw spelling of each conflicting field's first occurrence.
    """
    first_spellings: dict[str, str] = {}
    for record in records:
        first_spellings.setdefault(record.field, record.raw)

    for group in exclusives:
        present = [field for field in group if field in first_spellings]
        if len(present) > 1:
            conflicting = (first_spellings[field] for field in present)
            raise ExclusiveArgumentsError(*conflicting)


def parse_arguments(
    inputs: Iterable[str],
    defaults: Mapping[str, Any],
    options: ParseOptions | Mapping[str, Any] | None = None,
) -> ParsedArguments:
    """
    Parse raw command-line tokens against a mapping of defaults.

    Args:
        inputs (Iterable[str]): Raw tokens, excluding the program name.
        defaults (Mapping[str, Any]): Field name to default value. Each value must be
            a `bool`, a number, a `str`, or a list of `str`; its kind decides how the
            field's options are coerced.
        options (ParseOptions | Mapping | None): Optional `aliases` and `exclusives`.

    Returns:
        ParsedArguments: The merged named fields and the positional tokens.

    Raises:
        ParserConfigError: If the defaults or options are invalid. Raised before any
            input token is scanned.
        ArgumentParseError: If an input token breaks a parsing rule.
    """
    options = ParseOptions.coerce(options)
    kinds = {field: FieldKind.of(value, field) for field, value in defaults.items()}
    table = build_name_table(kinds, options.aliases, options.exclusives)

    flags = {
        field: kinds[field].copy_default(value) for field, value in defaults.items()
    }
    arguments: list[str] = []
    records: list[NamedInput] = []

    for token in inputs:
        if is_dash_only(token):
            continue
        if not token.startswith("-"):
            arguments.append(token)
            continue
        for record in table.resolve(token):
            merge_input(record, kinds[record.field], flags, defaults)
            logger.debug(
                "Merged '%s' into '%s' -> %r",
                record.raw,
                record.field,
                flags[record.field],
            )
            records.append(record)

    if options.exclusives:
        check_exclusives(records, options.exclusives)

    logger.debug("Parsed %d named inputs, %d positional", len(records), len(arguments))
    return ParsedArguments(flags, arguments)
