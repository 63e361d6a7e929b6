# Argmerge — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Boolean-literal parsing shared by the argument merger and exposed as a standalone
helper.

Falsy literals are `false`, `0`, `n`, `no` and `off`, matched case-insensitively
after trimming. The empty string, `None` when no default applies, and NaN are also
falsy. Every other value is truthy, so `--flag=xxx` turns a flag on.
"""
from __future__ import annotations

import math
from typing import Any

FALSY_LITERALS = frozenset({"false", "0", "n", "no", "off"})


def parse_boolean(value: Any, default: bool = False) -> bool:
    """
    Convert a raw value to a boolean.

    Args:
        value (Any): The value to convert. `None` means "no value given".
        default (bool): Returned when `value` is `None`.

    Returns:
        bool: Parsed boolean result.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if value == "":
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    if str(value).strip().lower() in FALSY_LITERALS:
        return False
    return True
