# Argmerge — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FieldKind`, the tagged variant that decides how every named input for a
field is coerced.

A field's kind is read once from its default value when the parser is built and
never changes during a parse. The merger dispatches on the kind instead of
inspecting values while tokens are being consumed.

Example:
    FieldKind.of(False)      → FieldKind.BOOLEAN
    FieldKind.of(0)          → FieldKind.NUMBER
    FieldKind.of("n/a")      → FieldKind.TEXT
    FieldKind.of(["dream"])  → FieldKind.LIST
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from argmerge.exceptions import UnsupportedDefaultError


class FieldKind(Enum):
    """
    Kind of a default value.

    Members:
        BOOLEAN: `bool` defaults; toggled by flags, negated by `--no-`.
        NUMBER: `int` and `float` defaults; parsed as decimals, reset by `--no-`.
        TEXT: `str` defaults; require a value, cleared by `--no-`.
        LIST: list or tuple of `str`; accumulate unique values, pruned by `--no-`.
    """

    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"
    LIST = "list"

    @classmethod
    def of(cls, value: Any, field: str = "") -> FieldKind:
        """Return the kind of a default value, or raise for unsupported values."""
        # bool is a subclass of int, so it must be checked first.
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.TEXT
        if isinstance(value, (list, tuple)) and all(
            isinstance(item, str) for item in value
        ):
            return cls.LIST
        raise UnsupportedDefaultError(field, value)

    def copy_default(self, value: Any) -> Any:
        """Return a copy of a default that the merger may replace freely."""
        if self is FieldKind.LIST:
            return list(value)
        return value

    def __str__(self) -> str:
        return self.value
