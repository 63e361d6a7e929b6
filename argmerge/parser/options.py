# Argmerge — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseOptions`, the optional configuration passed to `parse_arguments`.

- `aliases`: alternate spellings mapped to a field name. A target prefixed with
  `!` makes the alias negate its field (`{"q": "!verbose"}` turns `-q` into
  `--no-verbose`). Aliases may be given as a mapping or as a list of
  `(alias, target)` pairs; with pairs, the first pair for an alias wins.
- `exclusives`: groups of field names of which at most one may be supplied.

The model only checks shape. Whether targets and group members exist among the
defaults is checked when the name table is built for a parse.
"""
from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from argmerge.exceptions import ParserConfigError

NEGATION_MARKER = "!"


class ParseOptions(BaseModel):
    """Aliases and exclusive groups for a single parse call."""

    model_config = ConfigDict(frozen=True)

    aliases: dict[str, str] = Field(default_factory=dict)
    exclusives: list[list[str]] = Field(default_factory=list)

    @field_validator("aliases", mode="before")
    @classmethod
    def normalize_aliases(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, (list, tuple)):
            aliases: dict[str, Any] = {}
            for pair in value:
                if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                    raise ValueError(
                        f"Alias pairs must be (alias, target) tuples, got {pair!r}"
                    )
                aliases.setdefault(pair[0], pair[1])
            return aliases
        return value

    @field_validator("aliases")
    @classmethod
    def validate_aliases(cls, value: dict[str, str]) -> dict[str, str]:
        for alias, target in value.items():
            if not alias.strip("-"):
                raise ValueError(f"Alias '{alias}' must not be empty")
            if not target.lstrip(NEGATION_MARKER):
                raise ValueError(f"Alias '{alias}' must refer to an option")
        return value

    @field_validator("exclusives", mode="before")
    @classmethod
    def normalize_exclusives(cls, value: Any) -> Any:
        if value is None:
            return []
        return value

    @field_validator("exclusives")
    @classmethod
    def validate_exclusives(cls, value: list[list[str]]) -> list[list[str]]:
        groups = []
        for group in value:
            if not group:
                raise ValueError("Exclusive groups must not be empty")
            groups.append(list(dict.fromkeys(group)))
        return groups

    @classmethod
    def coerce(cls, options: ParseOptions | Mapping[str, Any] | None) -> ParseOptions:
        """Return `options` as a `ParseOptions`, validating plain mappings."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        try:
            return cls.model_validate(dict(options))
        except ValidationError as error:
            raise ParserConfigError(f"Invalid parse options: {error}") from error
