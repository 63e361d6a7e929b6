# Argmerge — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Per-kind value coercion for Argmerge.

Each coercer takes a resolved `NamedInput`, the value accumulated so far for its
field, and the field's original default, and returns the new accumulated value.
`COERCERS` maps every `FieldKind` to its coercer; `merge_input` looks the coercer
up by the kind recorded when the name table was built.

| Kind    | `--name[=value]`                      | `--no-name[=value]`                     |
|---------|---------------------------------------|-----------------------------------------|
| BOOLEAN | `True`, or the parsed literal         | the inverse of the above                |
| NUMBER  | the parsed decimal, NaN if unparsable | the original default; empty value only  |
| TEXT    | the value, which is required          | `""` if absent or equal to the current  |
| LIST    | appended, moved to the end if present | `[]` if absent, else the item removed   |
"""
from __future__ import annotations

import math
import re
from typing import Any, Callable, Mapping

from argmerge.exceptions import ValueNotPermittedError, ValueRequiredError
from argmerge.parser.boolean import parse_boolean
from argmerge.parser.field_kind import FieldKind
from argmerge.parser.names import NamedInput

DECIMAL_PATTERN = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

Coercer = Callable[[NamedInput, Any, Any], Any]


def parse_decimal(text: str) -> float:
    """
    Parse the leading decimal number in `text`, ignoring surrounding whitespace.

    Trailing characters after the number are ignored (`"12px"` → `12.0`). Text
    that does not start with a number yields NaN. Only the exact spelling `Infinity`
    is read as infinite; `inf` and `nan` are not numbers here.
    """
    match = DECIMAL_PATTERN.match(text.strip())
    if not match:
        return math.nan
    return float(match.group())


def coerce_boolean(record: NamedInput, current: Any, default: Any) -> bool:
    value = parse_boolean(record.value, True)
    return not value if record.negated else value


def coerce_number(record: NamedInput, current: Any, default: Any) -> float:
    if record.negated:
        if record.value:
            raise ValueNotPermittedError(record.raw)
        return default
    if record.value is None:
        return math.nan
    return parse_decimal(record.value)


def coerce_text(record: NamedInput, current: Any, default: Any) -> str:
    if record.negated:
        if record.value is None or record.value == current:
            return ""
        return current
    if record.value is None:
        raise ValueRequiredError(record.raw)
    return record.value


def coerce_list(record: NamedInput, current: Any, default: Any) -> list[str]:
    if record.negated:
        if record.value is None:
            return []
        return [item for item in current if item != record.value]
    if record.value is None:
        raise ValueRequiredError(record.raw)
    return [item for item in current if item != record.value] + [record.value]


COERCERS: dict[FieldKind, Coercer] = {
    FieldKind.BOOLEAN: coerce_boolean,
    FieldKind.NUMBER: coerce_number,
    FieldKind.TEXT: coerce_text,
    FieldKind.LIST: coerce_list,
}


def merge_input(
    record: NamedInput,
    kind: FieldKind,
    flags: dict[str, Any],
    defaults: Mapping[str, Any],
) -> None:
    """Apply one named input to the accumulated flags in place."""
    coercer = COERCERS[kind]
    flags[record.field] = coercer(record, flags[record.field], defaults[record.field])
