"""
Argmerge

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import ArgmergeError, ArgumentParseError, ParserConfigError
from .parser import ParsedArguments, ParseOptions, parse_arguments, parse_boolean
from .version import __version__

logger = logging.getLogger("argmerge")


__all__ = [
    "parse_arguments",
    "parse_boolean",
    "ParseOptions",
    "ParsedArguments",
    "ArgmergeError",
    "ArgumentParseError",
    "ParserConfigError",
    "__version__",
]
