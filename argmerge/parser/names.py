# Argmerge — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Name resolution for Argmerge.

Every field in the defaults can be addressed by several raw spellings. For a field
`dryRun` the table holds `--dry-run` (affirmative) and `--no-dry-run` (negated);
for `noCache` it holds `--no-cache` (affirmative) and `--cache` (negated); a
single-character field `v` additionally gets the short-hand `-v`. Aliases add
more spellings for an existing field, and an alias whose target starts with `!`
flips the affirmative/negated pair.

The table is built in two phases by `NameTableBuilder`: spellings derived from the
defaults first, then spellings derived from the aliases. A spelling is never
re-registered, so defaults always win over aliases, and within a phase affirmative
spellings win over `no-` complements. The finished `NameTable` is read-only and is
built fresh for every parse.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from argmerge.exceptions import (
    AliasTargetError,
    NonBooleanShortHandError,
    UnknownArgumentError,
    UnknownExclusiveFieldError,
)
from argmerge.logger import logger
from argmerge.parser.field_kind import FieldKind
from argmerge.parser.options import NEGATION_MARKER

WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")
NEGATION_PREFIX = "no-"


def kebab_case(text: str) -> str:
    """
    Convert a camelCase, snake_case, or loosely-dashed name to kebab-case.

    Example:
        kebab_case("dryRun")     → "dry-run"
        kebab_case("HTTPServer") → "http-server"
        kebab_case("no_cache")   → "no-cache"
    """
    return "-".join(word.lower() for word in WORD_PATTERN.findall(text))


def is_dash_only(token: str) -> bool:
    """Return True for `-`, `--`, `---`, and so on."""
    return bool(token) and not token.strip("-")


def spellings(name: str) -> list[tuple[str, bool]]:
    """
    Return the `(spelling, negated)` pairs that address `name`.

    The affirmative spellings come first, followed by the `no-` complement.
    """
    pairs: list[tuple[str, bool]] = []
    if len(name) == 1:
        pairs.append((f"-{name}", False))
    kebab = kebab_case(name)
    if kebab:
        pairs.append((f"--{kebab}", False))
        if kebab.startswith(NEGATION_PREFIX):
            pairs.append((f"--{kebab[len(NEGATION_PREFIX):]}", True))
        else:
            pairs.append((f"--{NEGATION_PREFIX}{kebab}", True))
    return pairs


@dataclass(frozen=True)
class ResolvedName:
    """Canonical field addressed by a spelling, and whether the spelling negates it."""

    field: str
    negated: bool = False


@dataclass(frozen=True)
class NamedInput:
    """One resolved named input, in the order it appeared on the command line."""

    raw: str
    field: str
    negated: bool
    value: str | None = None


class NameTableBuilder:
    """
    Builds a `NameTable` from the defaults and the aliases.

    Usage:
        builder = NameTableBuilder(kinds)
        builder.add_defaults()
        builder.add_aliases({"d": "dryRun", "q": "!verbose"})
        table = builder.build()
    """

    def __init__(self, kinds: Mapping[str, FieldKind]) -> None:
        self.kinds: Mapping[str, FieldKind] = kinds
        self._entries: dict[str, ResolvedName] = {}

    def _register(self, spelling: str, resolved: ResolvedName) -> None:
        if spelling in self._entries:
            logger.debug(
                "Spelling '%s' already refers to '%s', ignoring '%s'",
                spelling,
                self._entries[spelling].field,
                resolved.field,
            )
            return
        self._entries[spelling] = resolved

    def _register_all(self, sources: Iterable[tuple[str, str, bool]]) -> None:
        sources = list(sources)
        for negated_pass in (False, True):
            for name, field, flipped in sources:
                for spelling, negated in spellings(name):
                    if negated != negated_pass:
                        continue
                    self._register(spelling, ResolvedName(field, negated != flipped))

    def add_defaults(self) -> NameTableBuilder:
        self._register_all((field, field, False) for field in self.kinds)
        return self

    def add_aliases(self, aliases: Mapping[str, str]) -> NameTableBuilder:
        sources = []
        for alias, target in aliases.items():
            flipped = target.startswith(NEGATION_MARKER)
            field = target[len(NEGATION_MARKER) :] if flipped else target
            if field not in self.kinds:
                raise AliasTargetError(alias, target)
            sources.append((alias.lstrip("-"), field, flipped))
        self._register_all(sources)
        return self

    def check_exclusives(self, exclusives: Iterable[Iterable[str]]) -> NameTableBuilder:
        for group in exclusives:
            for field in group:
                if field not in self.kinds:
                    raise UnknownExclusiveFieldError(field)
        return self

    def build(self) -> NameTable:
        logger.debug("Built name table with %d spellings", len(self._entries))
        return NameTable(
            entries=MappingProxyType(dict(self._entries)),
            kinds=MappingProxyType(dict(self.kinds)),
        )


@dataclass(frozen=True)
class NameTable:
    """Read-only lookup from raw spellings to canonical fields."""

    entries: Mapping[str, ResolvedName]
    kinds: Mapping[str, FieldKind]

    def __contains__(self, spelling: object) -> bool:
        return spelling in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, spelling: str) -> ResolvedName | None:
        return self.entries.get(spelling)

    def resolve(self, token: str) -> list[NamedInput]:
        """
        Resolve a named token into one or more `NamedInput` records.

        Args:
            token (str): A raw token starting with `-` that is not only dashes.

        Returns:
            list[NamedInput]: One record, or one per letter for bundled short-hands.

        Raises:
            UnknownArgumentError: If the token does not match a known spelling.
            NonBooleanShortHandError: If a bundled short-hand targets a non-boolean field.
        """
        if token.startswith("--"):
            name, delimiter, value = token.partition("=")
            resolved = self.get(f"--{kebab_case(name[2:])}")
            if resolved is None:
                raise UnknownArgumentError(token)
            raw_value = value if delimiter else None
            return [NamedInput(token, resolved.field, resolved.negated, raw_value)]

        delimiter_index = token.find("=")
        if delimiter_index == -1:
            return self._resolve_bundle(token)
        if delimiter_index != 2:
            raise UnknownArgumentError(token)
        resolved = self.get(token[:2])
        if resolved is None:
            raise UnknownArgumentError(token)
        return [NamedInput(token, resolved.field, resolved.negated, token[3:])]

    def _resolve_bundle(self, token: str) -> list[NamedInput]:
        """Expand `-abc` into `-a`, `-b`, `-c`, each a boolean toggle."""
        records = []
        for letter in token[1:]:
            flag = f"-{letter}"
            resolved = self.get(flag)
            if resolved is None:
                raise UnknownArgumentError(token)
            if self.kinds[resolved.field] is not FieldKind.BOOLEAN:
                raise NonBooleanShortHandError(token, flag)
            records.append(NamedInput(flag, resolved.field, resolved.negated))
        return records


def build_name_table(
    kinds: Mapping[str, FieldKind],
    aliases: Mapping[str, str] | None = None,
    exclusives: Iterable[Iterable[str]] | None = None,
) -> NameTable:
    """Build the name table for one parse call."""
    builder = NameTableBuilder(kinds).add_defaults()
    if aliases:
        builder.add_aliases(aliases)
    if exclusives:
        builder.check_exclusives(exclusives)
    return builder.build()
