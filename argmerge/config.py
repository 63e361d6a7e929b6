# Argmerge — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Schema loader for Argmerge parsers.

A schema file declares the shape of a parser: its fields and their defaults, the
aliases, and the exclusive groups. Option values still come only from the command
line; the file never supplies them.

Example (YAML):
    defaults:
      dryRun: false
      count: 0
      input: "n/a"
      tag: []
    aliases:
      d: dryRun
      q: "!verbose"
    exclusives:
      - [dryRun, force]
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from argmerge.exceptions import SchemaLoadError, UnsupportedDefaultError
from argmerge.logger import logger
from argmerge.parser import ParsedArguments, ParseOptions, parse_arguments
from argmerge.parser.field_kind import FieldKind


class RawSchema(BaseModel):
    """Raw schema model for an Argmerge parser declaration file."""

    defaults: dict[str, Any] = Field(default_factory=dict)
    aliases: dict[str, str] | list[tuple[str, str]] = Field(default_factory=dict)
    exclusives: list[list[str]] = Field(default_factory=list)

    @field_validator("defaults")
    @classmethod
    def validate_defaults(cls, value: dict[str, Any]) -> dict[str, Any]:
        for name, default in value.items():
            try:
                FieldKind.of(default, name)
            except UnsupportedDefaultError as error:
                raise ValueError(str(error)) from error
        return value


@dataclass(frozen=True)
class ArgumentSchema:
    """Defaults and options loaded from a schema file, ready to parse tokens."""

    defaults: dict[str, Any]
    options: ParseOptions = field(default_factory=ParseOptions)
    source: Path | None = None

    def parse(self, inputs: Iterable[str]) -> ParsedArguments:
        return parse_arguments(inputs, self.defaults, self.options)


def read_schema_file(path: Path) -> Any:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as schema_file:
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(schema_file)
        if suffix == ".toml":
            return toml.load(schema_file)
    raise SchemaLoadError(f"Unsupported schema format: {suffix}")


def load_schema(file_path: Path | str) -> ArgumentSchema:
    """
    Load an Argmerge parser declaration from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the schema file.

    Returns:
        ArgumentSchema: The validated defaults and options.

    Raises:
        SchemaLoadError: If the file is missing, has an unsupported format, cannot be
            parsed, or does not describe a valid parser.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)

    if not path.is_file():
        raise SchemaLoadError(f"No such schema file: {file_path}")

    try:
        raw_schema = read_schema_file(path)
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise SchemaLoadError(f"Could not parse schema file {path}: {error}") from error

    if raw_schema is None:
        raw_schema = {}
    if not isinstance(raw_schema, dict):
        raise SchemaLoadError(
            "Schema file must contain a mapping.\n"
            "Example:\n"
            "defaults:\n"
            "  dryRun: false\n"
            "aliases:\n"
            "  d: dryRun"
        )

    try:
        schema = RawSchema.model_validate(raw_schema)
        options = ParseOptions(aliases=schema.aliases, exclusives=schema.exclusives)
    except ValidationError as error:
        raise SchemaLoadError(f"Invalid schema file {path}:\n{error}") from error

    logger.debug("Loaded schema '%s' with %d fields", path, len(schema.defaults))
    return ArgumentSchema(defaults=schema.defaults, options=options, source=path)
