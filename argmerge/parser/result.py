# Argmerge — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParsedArguments`, the read-only result of `parse_arguments`.

The result is two things at once:
- a sequence of the positional tokens, in the order they were given
  (`result[0]`, `len(result)`, `list(result)`, `result.length`);
- a record of the named fields merged over the defaults
  (`result["dryRun"]`, `result.dryRun`, `result.flags`).

String keys that look like in-range indexes (`"0"`, `"1"`, ASCII digits only) and
the key `"length"` address the positional view, so `to_dict()` produces a flat
mapping such as
`{"dryRun": True, "0": "data.yml", "length": 1}`.
"""
from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType
from typing import Any, Iterator, Mapping, overload

LENGTH_KEY = "length"


class ParsedArguments(Sequence[str]):
    """Merged named fields plus the positional tokens of one parse."""

    __slots__ = ("_flags", "_arguments")

    def __init__(self, flags: Mapping[str, Any], arguments: Sequence[str]) -> None:
        self._flags: Mapping[str, Any] = MappingProxyType(dict(flags))
        self._arguments: tuple[str, ...] = tuple(arguments)

    @property
    def flags(self) -> Mapping[str, Any]:
        """Read-only view of the merged named fields."""
        return self._flags

    @property
    def arguments(self) -> tuple[str, ...]:
        """Positional tokens in the order they were given."""
        return self._arguments

    @property
    def length(self) -> int:
        return len(self._arguments)

    @overload
    def __getitem__(self, key: int) -> str: ...

    @overload
    def __getitem__(self, key: slice) -> tuple[str, ...]: ...

    @overload
    def __getitem__(self, key: str) -> Any: ...

    def __getitem__(self, key: int | slice | str) -> Any:
        if isinstance(key, (int, slice)):
            return self._arguments[key]
        if key == LENGTH_KEY:
            return self.length
        index = self._positional_index(key)
        if index is not None:
            return self._arguments[index]
        return self._flags[key]

    def _positional_index(self, key: str) -> int | None:
        if key.isascii() and key.isdigit() and int(key) < self.length:
            return int(key)
        return None

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._flags[name]
        except KeyError:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            ) from None

    def __len__(self) -> int:
        return len(self._arguments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._arguments)

    def __contains__(self, value: object) -> bool:
        return value in self._arguments

    def keys(self) -> list[str]:
        """
        Named fields, then positional indexes, then `length`.

        Fields named `length` or like an in-range positional index are shadowed by the
        positional view and are only reachable through `flags`.
        """
        keys = [
            key
            for key in self._flags
            if key != LENGTH_KEY and self._positional_index(key) is None
        ]
        keys.extend(str(index) for index in range(self.length))
        keys.append(LENGTH_KEY)
        return keys

    def to_dict(self) -> dict[str, Any]:
        """Return a flat, mutable mapping of named fields, positional indexes, and length."""
        return {key: self[key] for key in self.keys()}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParsedArguments):
            return self.to_dict() == other.to_dict()
        if isinstance(other, Mapping):
            return self.to_dict() == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"ParsedArguments(flags={len(self._flags)}, "
            f"arguments={self.length})"
        )

    def __repr__(self) -> str:
        return (
            f"ParsedArguments(flags={dict(self._flags)!r}, "
            f"arguments={list(self._arguments)!r})"
        )
