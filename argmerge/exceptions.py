# Argmerge — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by Argmerge.

Input-time failures (`ArgumentParseError` and its subclasses) carry the raw
tokens that caused them, exactly as the user typed them, so callers can report
precise diagnostics. Setup-time failures (`ParserConfigError` and its
subclasses) are raised before any input token is scanned.

Exception Hierarchy:
- ArgmergeError
    ├── ArgumentParseError
    │   ├── UnknownArgumentError
    │   ├── NonBooleanShortHandError
    │   ├── ValueNotPermittedError
    │   ├── ValueRequiredError
    │   └── ExclusiveArgumentsError
    ├── ParserConfigError
    │   ├── AliasTargetError
    │   ├── UnsupportedDefaultError
    │   └── UnknownExclusiveFieldError
    └── SchemaLoadError
"""
from __future__ import annotations


class ArgmergeError(Exception):
    """Base exception for Argmerge."""


class ArgumentParseError(ArgmergeError):
    """Exception raised when an input token violates a parsing rule."""

    def __init__(self, message: str, *tokens: str) -> None:
        super().__init__(message)
        self.message = message
        self.tokens: tuple[str, ...] = tokens


class UnknownArgumentError(ArgumentParseError):
    """Exception raised when a named token does not match any known spelling."""

    def __init__(self, token: str) -> None:
        super().__init__(f'Expected only known options but got "{token}"', token)


class NonBooleanShortHandError(ArgumentParseError):
    """Exception raised when a bundled short-hand targets a non-boolean field."""

    def __init__(self, token: str, flag: str) -> None:
        super().__init__(
            f'Expected only Boolean short-hand flags but got "{flag}" in "{token}"',
            token,
        )
        self.flag = flag


class ValueNotPermittedError(ArgumentParseError):
    """Exception raised when a negated numeric option is given a value."""

    def __init__(self, token: str) -> None:
        super().__init__(f'Expected "{token}" to have no values.', token)


class ValueRequiredError(ArgumentParseError):
    """Exception raised when a text or list option is given without a value."""

    def __init__(self, token: str) -> None:
        super().__init__(f'Expected "{token}" to have a value.', token)


class ExclusiveArgumentsError(ArgumentParseError):
    """Exception raised when more than one option of an exclusive group is given."""

    def __init__(self, *tokens: str) -> None:
        quoted = ", ".join(f'"{token}"' for token in tokens)
        super().__init__(
            f"Expected at most one of the mutually exclusive options but got {quoted}",
            *tokens,
        )


class ParserConfigError(ArgmergeError):
    """Exception raised when the defaults or options cannot build a parser."""


class AliasTargetError(ParserConfigError):
    """Exception raised when an alias refers to a field missing from the defaults."""

    def __init__(self, alias: str, target: str) -> None:
        super().__init__(
            f'Expected alias "{alias}" to refer to a known option but got "{target}"'
        )
        self.alias = alias
        self.target = target


class UnsupportedDefaultError(ParserConfigError):
    """Exception raised when a default value is not a bool, number, str, or list of str."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(
            f"Default for '{field}' must be a bool, number, str or list of str, "
            f"got {type(value).__name__}"
        )
        self.field = field


class UnknownExclusiveFieldError(ParserConfigError):
    """Exception raised when an exclusive group names a field missing from the defaults."""

    def __init__(self, field: str) -> None:
        super().__init__(
            f'Expected exclusive groups to list known options but got "{field}"'
        )
        self.field = field


class SchemaLoadError(ArgmergeError):
    """Exception raised when a schema file cannot be found, read, or validated."""
