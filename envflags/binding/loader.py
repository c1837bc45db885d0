"""
Configuration Loading

Entry points that bind a configuration value to flags and environment
variables.

Precedence (highest to lowest):
    1. Command-line flag (if supplied)
    2. Environment variable (process environment, then the .env file)
    3. Field value before the call

Example:
    >>> @dataclass
    ... class Config:
    ...     first_name: str = setting("", flag="first_name", usage="first name of user")
    ...     age: int = setting(0, usage="age in dog years")
    ...     debug: bool = setting(False, env="-")
    >>> cfg = Config()
    >>> load(cfg, ["-age", "7"])
    >>> cfg.age
    7
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from envflags.binding.walker import is_config_instance, walk
from envflags.errors import InvalidArgumentError
from envflags.flags.base import FlagRegistrar
from envflags.flags.flagset import FlagSet
from envflags.types.kinds import type_name

logger = logging.getLogger(__name__)


def layered_environ(
    environ: Mapping[str, str] | None = None,
    dotenv_path: str | Path | None = None,
) -> Mapping[str, str]:
    """
    Combine a .env file with the process environment.

    Variables already present in ``environ`` win over the file. Keys
    declared in the file without a value are ignored.

    Args:
        environ: Base environment (defaults to os.environ)
        dotenv_path: Optional .env file

    Returns:
        The mapping to resolve environment names against
    """
    environ = os.environ if environ is None else environ
    if dotenv_path is None:
        return environ

    path = Path(dotenv_path)
    if not path.exists():
        raise FileNotFoundError(f"Env file not found: {path}")

    file_values = {key: value for key, value in dotenv_values(path).items() if value is not None}
    logger.debug(f"Loaded {len(file_values)} variables from {path}")
    return {**file_values, **environ}


def _check_root(config: Any) -> None:
    if config is None:
        raise InvalidArgumentError("argument is None, expected a configuration instance")
    if not is_config_instance(config):
        raise InvalidArgumentError(
            f"argument of type {type_name(type(config))} is not a dataclass or pydantic model instance"
        )


def bind(
    config: Any,
    flagset: FlagRegistrar,
    *,
    environ: Mapping[str, str] | None = None,
    dotenv_path: str | Path | None = None,
) -> FlagRegistrar:
    """
    Register every field of ``config`` on ``flagset`` without parsing.

    Fields receive their resolved defaults (environment over field value)
    immediately. Call ``flagset.parse()`` afterwards to apply command-line
    values.

    Args:
        config: Dataclass or pydantic model instance
        flagset: Registrar to bind to
        environ: Environment mapping (defaults to os.environ)
        dotenv_path: Optional .env file layered beneath ``environ``

    Returns:
        ``flagset``

    Raises:
        InvalidArgumentError: If ``config`` is not a configuration instance
        EnvFlagsError: Any failure raised while walking the fields
    """
    _check_root(config)
    walk(config, "", flagset, environ=layered_environ(environ, dotenv_path))
    return flagset


def load(
    config: Any,
    argv: Sequence[str] | None = None,
    *,
    flagset: FlagRegistrar | None = None,
    environ: Mapping[str, str] | None = None,
    dotenv_path: str | Path | None = None,
) -> FlagRegistrar:
    """
    Bind ``config`` to flags and environment variables, then parse ``argv``.

    Args:
        config: Dataclass or pydantic model instance (mutated in place)
        argv: Arguments without the program name (defaults to sys.argv[1:])
        flagset: Registrar to use; a new FlagSet is created when omitted
        environ: Environment mapping (defaults to os.environ)
        dotenv_path: Optional .env file layered beneath ``environ``

    Returns:
        The registrar, for introspection of the bound flags

    Raises:
        InvalidArgumentError: If ``config`` is not a configuration instance
        EnvFlagsError: The first failure while walking or parsing
    """
    _check_root(config)
    if flagset is None:
        flagset = FlagSet()

    bind(config, flagset, environ=environ, dotenv_path=dotenv_path)
    flagset.parse(argv)

    logger.debug(f"Loaded {type_name(type(config))} with {len(flagset.flags())} flags")
    return flagset
