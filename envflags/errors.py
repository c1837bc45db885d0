"""
Error Types

Every failure raised by envflags derives from EnvFlagsError.

Errors raised while walking nested configuration values collect the names
of the fields they passed through, outermost first, so the message reads
like a path:

    field addr: field street: ADDR_STREET: invalid integer 'abc'

Hierarchy:
    EnvFlagsError
        InvalidArgumentError  - root value is not a configuration instance
        AddressingError       - a field cannot be written
        UnsupportedTypeError  - a field type has no registration path
        ParseError            - an environment value does not parse
        DuplicateFlagError    - a flag name is registered twice
        FlagParseError        - the argument vector is malformed
"""

from __future__ import annotations


class EnvFlagsError(Exception):
    """Base class for envflags errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.fields: list[str] = []

    def add_context(self, field_name: str) -> None:
        """Record that the error surfaced through ``field_name``."""
        self.fields.insert(0, field_name)

    def __str__(self) -> str:
        trail = "".join(f"field {name}: " for name in self.fields)
        return f"{trail}{self.message}"


class InvalidArgumentError(EnvFlagsError):
    """Root value is None, a class, or not a dataclass / pydantic model."""


class AddressingError(EnvFlagsError):
    """Field cannot be referenced for mutation (frozen container)."""


class UnsupportedTypeError(EnvFlagsError):
    """Field type is not one of the supported scalar kinds."""


class ParseError(EnvFlagsError):
    """An environment string does not match the grammar of its kind."""


class DuplicateFlagError(EnvFlagsError):
    """A flag name is already registered on the flag set."""


class FlagParseError(EnvFlagsError):
    """The argument vector could not be parsed."""
