"""
Environment Resolver

Looks up an environment variable and converts it to the kind of the
field it will default.

    >>> resolve_env("AGE", 0, ScalarKind.INT, environ={"AGE": "7"})
    (7, True)
    >>> resolve_env("AGE", 0, ScalarKind.INT, environ={})
    (0, False)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from envflags.errors import ParseError, UnsupportedTypeError
from envflags.types.kinds import INT64_MAX, INT64_MIN, ScalarKind
from envflags.utils.durations import parse_duration
from envflags.utils.scalars import parse_env_bool, parse_float, parse_int

logger = logging.getLogger(__name__)


def parse_env_value(raw: str, kind: ScalarKind) -> Any:
    """
    Convert a raw environment string to a value of ``kind``.

    Raises:
        ParseError: If the string does not match the kind's grammar
        UnsupportedTypeError: If ``kind`` is not a ScalarKind
    """
    if kind is ScalarKind.INT:
        return parse_int(raw)
    if kind is ScalarKind.INT64:
        return parse_int(raw, lower=INT64_MIN, upper=INT64_MAX)
    if kind is ScalarKind.FLOAT:
        return parse_float(raw)
    if kind is ScalarKind.BOOL:
        return parse_env_bool(raw)
    if kind is ScalarKind.STRING:
        return raw
    if kind is ScalarKind.DURATION:
        return parse_duration(raw)
    raise UnsupportedTypeError(f"unsupported type {kind!r}")


def resolve_env(
    env_name: str,
    default: Any,
    kind: ScalarKind,
    environ: Mapping[str, str] | None = None,
) -> tuple[Any, bool]:
    """
    Resolve a field default from the environment.

    Args:
        env_name: Environment variable name
        default: Value returned when the variable is absent
        kind: Scalar kind used to parse the variable
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        (value, applied) where applied is True when the variable was present

    Raises:
        ParseError: If the variable is set but malformed
        UnsupportedTypeError: If ``kind`` has no parser
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(env_name)
    if raw is None:
        return default, False

    try:
        value = parse_env_value(raw, kind)
    except ParseError as e:
        raise ParseError(f"environment {env_name}: {e.message}") from e
    except UnsupportedTypeError as e:
        raise UnsupportedTypeError(f"environment {env_name}: {e.message}") from e

    logger.debug(f"Environment {env_name} supplies the default ({kind.value})")
    return value, True
