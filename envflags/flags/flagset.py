"""
FlagSet - Flag Registration and Parsing

Registers named, typed, defaulted options and binds each one to a field
of a configuration value. Parsing is delegated to argparse.

Example:
    >>> flags = FlagSet("server")
    >>> flags.register_int(FieldRef(cfg, "port"), "port", 8080, "listen port")
    >>> flags.parse(["-port", "9090"])
    >>> cfg.port
    9090

Command-line syntax:
    -name value, -name=value, --name value, --name=value
    -flag, -flag=false              (boolean flags)
    --                              ends flag parsing

A non-boolean flag always takes the next argument as its value, even one
starting with "-" ("-offset -1h").

Registering a flag writes its default to the bound field immediately.
Parsing writes only the flags that appear in the argument vector.
"""

from __future__ import annotations

import argparse
import logging
import os
import re
import sys
from collections.abc import Callable, Sequence
from datetime import timedelta
from functools import partial
from typing import Any, NoReturn

from envflags.errors import (
    AddressingError,
    DuplicateFlagError,
    FlagParseError,
    InvalidArgumentError,
    ParseError,
)
from envflags.flags.base import FlagRegistrar
from envflags.types.flags import FieldRef, Flag
from envflags.types.kinds import INT64_MAX, INT64_MIN, ScalarKind
from envflags.utils.durations import parse_duration
from envflags.utils.scalars import parse_flag_bool, parse_float, parse_int

__all__ = ["FlagSet"]

logger = logging.getLogger(__name__)

_NEGATIVE_NUMBER = re.compile(r"-\d+$|-\d*\.\d+$")

_PARSERS: dict[ScalarKind, Callable[[str], Any]] = {
    ScalarKind.INT: parse_int,
    ScalarKind.INT64: partial(parse_int, lower=INT64_MIN, upper=INT64_MAX),
    ScalarKind.FLOAT: parse_float,
    ScalarKind.STRING: str,
    ScalarKind.BOOL: parse_flag_bool,
    ScalarKind.DURATION: parse_duration,
}


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise FlagParseError(message)


def _converter(kind: ScalarKind) -> Callable[[str], Any]:
    parse = _PARSERS[kind]

    def convert(text: str) -> Any:
        try:
            return parse(text)
        except ParseError as e:
            raise argparse.ArgumentTypeError(e.message) from e

    convert.__name__ = kind.value
    return convert


class FlagSet(FlagRegistrar):
    """
    A set of flags bound to configuration fields.

    Attributes:
        name: Program name used in help output
        args: Positional arguments left after parsing
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name or os.path.basename(sys.argv[0]) or "app"
        self.args: list[str] = []
        self._flags: dict[str, Flag] = {}
        self._actual: set[str] = set()
        self._parsed = False
        self._parser = _ArgumentParser(
            prog=self.name,
            add_help=False,
            allow_abbrev=False,
        )

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register_int(
        self,
        ref: FieldRef,
        name: str,
        default: int,
        usage: str = "",
        *,
        env_name: str | None = None,
        env_applied: bool = False,
    ) -> Flag:
        """Register an int flag bound to ``ref``."""
        return self._register(
            ScalarKind.INT, ref, name, default, usage, env_name=env_name, env_applied=env_applied
        )

    def register_int64(
        self,
        ref: FieldRef,
        name: str,
        default: int,
        usage: str = "",
        *,
        env_name: str | None = None,
        env_applied: bool = False,
    ) -> Flag:
        """Register a 64-bit int flag bound to ``ref``."""
        return self._register(
            ScalarKind.INT64, ref, name, default, usage, env_name=env_name, env_applied=env_applied
        )

    def register_float(
        self,
        ref: FieldRef,
        name: str,
        default: float,
        usage: str = "",
        *,
        env_name: str | None = None,
        env_applied: bool = False,
    ) -> Flag:
        """Register a float flag bound to ``ref``."""
        return self._register(
            ScalarKind.FLOAT, ref, name, default, usage, env_name=env_name, env_applied=env_applied
        )

    def register_string(
        self,
        ref: FieldRef,
        name: str,
        default: str,
        usage: str = "",
        *,
        env_name: str | None = None,
        env_applied: bool = False,
    ) -> Flag:
        """Register a string flag bound to ``ref``."""
        return self._register(
            ScalarKind.STRING, ref, name, default, usage, env_name=env_name, env_applied=env_applied
        )

    def register_bool(
        self,
        ref: FieldRef,
        name: str,
        default: bool,
        usage: str = "",
        *,
        env_name: str | None = None,
        env_applied: bool = False,
    ) -> Flag:
        """Register a bool flag bound to ``ref``."""
        return self._register(
            ScalarKind.BOOL, ref, name, default, usage, env_name=env_name, env_applied=env_applied
        )

    def register_duration(
        self,
        ref: FieldRef,
        name: str,
        default: timedelta,
        usage: str = "",
        *,
        env_name: str | None = None,
        env_applied: bool = False,
    ) -> Flag:
        """Register a duration flag bound to ``ref``."""
        return self._register(
            ScalarKind.DURATION, ref, name, default, usage, env_name=env_name, env_applied=env_applied
        )

    def _register(
        self,
        kind: ScalarKind,
        ref: FieldRef,
        name: str,
        default: Any,
        usage: str,
        *,
        env_name: str | None = None,
        env_applied: bool = False,
    ) -> Flag:
        if name in self._flags:
            raise DuplicateFlagError(f"{self.name} flag redefined: {name}")
        if not name or name.startswith("-") or "=" in name:
            raise InvalidArgumentError(f"invalid flag name {name!r}")

        try:
            ref.set(default)
        except (AttributeError, TypeError, ValueError) as e:
            raise AddressingError(f"unable to address field {ref.path}: {e}") from e

        flag = Flag(
            name=name,
            kind=kind,
            default=default,
            usage=usage,
            env_name=env_name,
            env_applied=env_applied,
            ref=ref,
        )

        options: dict[str, Any] = {
            "dest": name,
            "default": argparse.SUPPRESS,
            "type": _converter(kind),
            "metavar": kind.value,
            "help": _help_text(flag),
        }
        if kind is ScalarKind.BOOL:
            options.update(nargs="?", const=True)
        self._parser.add_argument(f"-{name}", f"--{name}", **options)

        self._flags[name] = flag
        logger.debug(f"Registered flag -{name} ({kind.value}) for {ref.path}")
        return flag

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    def parse(self, argv: Sequence[str] | None = None) -> None:
        """
        Parse an argument vector and write supplied flags to their fields.

        Args:
            argv: Arguments without the program name (defaults to sys.argv[1:])

        Raises:
            FlagParseError: On an undefined flag or an invalid value
        """
        argv = list(sys.argv[1:] if argv is None else argv)
        tail: list[str] = []
        if "--" in argv:
            split = argv.index("--")
            argv, tail = argv[:split], argv[split + 1:]

        namespace, extras = self._parser.parse_known_args(self._attach_values(argv))

        for extra in extras:
            if extra.startswith("-") and extra != "-" and not _NEGATIVE_NUMBER.match(extra):
                raise FlagParseError(f"flag provided but not defined: {extra}")

        for name, value in vars(namespace).items():
            self._flags[name].ref.set(value)
            self._actual.add(name)

        self.args = extras + tail
        self._parsed = True
        logger.debug(f"Parsed {len(self._actual)} flags, {len(self.args)} positional arguments")

    def _attach_values(self, argv: list[str]) -> list[str]:
        """
        Rewrite flag tokens into "-name=value" form before argparse sees them.

        A bare boolean flag becomes "-name=true" and never consumes the
        following argument. Any other flag takes the next argument as its
        value, even when that argument starts with "-". A value glued to a
        flag name ("-v5") is not a flag and is rejected.
        """
        rewritten: list[str] = []
        index = 0
        while index < len(argv):
            arg = argv[index]
            index += 1
            name = arg[2:] if arg.startswith("--") else arg[1:] if arg.startswith("-") else ""
            flag = self._flags.get(name) if name else None

            if flag is None:
                if name and "=" not in name and not _NEGATIVE_NUMBER.match(arg):
                    # argparse would split "-v5" into "-v" and "5"
                    raise FlagParseError(f"flag provided but not defined: {arg}")
                rewritten.append(arg)
            elif flag.kind is ScalarKind.BOOL:
                rewritten.append(f"{arg}=true")
            elif index < len(argv):
                rewritten.append(f"{arg}={argv[index]}")
                index += 1
            else:
                rewritten.append(arg)
        return rewritten

    @property
    def parsed(self) -> bool:
        return self._parsed

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def lookup(self, name: str) -> Flag | None:
        return self._flags.get(name)

    def flags(self) -> list[Flag]:
        """All registered flags sorted by name."""
        return [self._flags[name] for name in sorted(self._flags)]

    def set_flags(self) -> list[Flag]:
        """Flags supplied on the command line, sorted by name."""
        return [self._flags[name] for name in sorted(self._actual)]

    def source(self, name: str) -> str:
        """Where a flag's current value came from: "flag", "env" or "default"."""
        if name in self._actual:
            return "flag"
        if self._flags[name].env_applied:
            return "env"
        return "default"

    def format_help(self) -> str:
        return self._parser.format_help()

    def __contains__(self, name: object) -> bool:
        return name in self._flags

    def __len__(self) -> int:
        return len(self._flags)

    def __repr__(self) -> str:
        return f"FlagSet({self.name!r}, flags={len(self._flags)})"


def _help_text(flag: Flag) -> str:
    parts = [flag.usage] if flag.usage else []
    if flag.env_name:
        parts.append(f"[env {flag.env_name}]")
    if flag.default is not None:
        parts.append(f"(default {flag.default_text})")
    # argparse %-formats help strings
    return " ".join(parts).replace("%", "%%")
