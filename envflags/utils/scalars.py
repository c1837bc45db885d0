"""
Scalar Parsing

String-to-value conversions shared by the environment resolver and
the flag parser.
"""

from __future__ import annotations

import re

from envflags.errors import ParseError

_INTEGER = re.compile(r"[+-]?[0-9]+")

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_int(text: str, *, lower: int | None = None, upper: int | None = None) -> int:
    """
    Parse a base-10 integer with an optional sign.

    Raises:
        ParseError: If the text is not an integer or falls outside [lower, upper]
    """
    if not _INTEGER.fullmatch(text):
        raise ParseError(f"invalid integer {text!r}")
    value = int(text)
    if (lower is not None and value < lower) or (upper is not None and value > upper):
        raise ParseError(f"integer {text!r} out of range")
    return value


def parse_float(text: str) -> float:
    """
    Parse a floating point literal ("3.14", "1e-3", "inf", "nan").

    Raises:
        ParseError: On malformed input, surrounding whitespace or "_" separators
    """
    if text != text.strip() or "_" in text:
        raise ParseError(f"invalid float {text!r}")
    try:
        return float(text)
    except ValueError as e:
        raise ParseError(f"invalid float {text!r}") from e


def parse_flag_bool(text: str) -> bool:
    """
    Parse a boolean flag value.

    Accepts 1, t, T, TRUE, true, True, 0, f, F, FALSE, false, False.

    Raises:
        ParseError: For any other spelling
    """
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ParseError(f"invalid boolean {text!r}")


def parse_env_bool(text: str) -> bool:
    """Environment booleans: "true" (any case) or "1" is True, anything else False."""
    return text.upper() in ("TRUE", "1")
