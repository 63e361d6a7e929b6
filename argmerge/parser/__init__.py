"""
Argmerge

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arguments import parse_arguments
from .boolean import parse_boolean
from .field_kind import FieldKind
from .names import NamedInput, NameTable, NameTableBuilder, kebab_case
from .options import ParseOptions
from .result import ParsedArguments

__all__ = [
    "parse_arguments",
    "parse_boolean",
    "FieldKind",
    "NamedInput",
    "NameTable",
    "NameTableBuilder",
    "kebab_case",
    "ParseOptions",
    "ParsedArguments",
]
