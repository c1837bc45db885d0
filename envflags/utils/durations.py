"""
Duration Literals

Parse and format signed duration literals such as "300ms", "1.5h",
"2h45m" or "-30s" as datetime.timedelta.

Grammar:
    duration  := [sign] ( "0" | component+ )
    component := decimal unit
    decimal   := digits [ "." [digits] ] | "." digits
    unit      := "ns" | "us" | "µs" | "μs" | "ms" | "s" | "m" | "h"

Values are computed in whole nanoseconds and must fit in a signed 64-bit
integer. The resulting timedelta truncates to microsecond resolution.
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal

from envflags.errors import ParseError

_NANOS_PER_UNIT: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # Greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_MAX_NANOS = 2**63 - 1

_COMPONENT = re.compile(r"(\d*(?:\.\d*)?)([^.\d]*)")


def parse_duration(text: str) -> timedelta:
    """
    Parse a duration literal.

    Args:
        text: e.g. "1h", "1h30m", "-1.5s", "0"

    Returns:
        Equivalent timedelta

    Raises:
        ParseError: If the literal is malformed, has an unknown unit or
            overflows the 64-bit nanosecond range
    """
    body = text
    negative = False
    if body[:1] in ("-", "+"):
        negative = body[0] == "-"
        body = body[1:]

    if body == "0":
        return timedelta(0)
    if not body:
        raise ParseError(f"invalid duration {text!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(body):
        match = _COMPONENT.match(body, pos)
        number, unit = match.group(1), match.group(2)
        if not number.strip("."):
            raise ParseError(f"invalid duration {text!r}")
        if not unit:
            raise ParseError(f"missing unit in duration {text!r}")
        if unit not in _NANOS_PER_UNIT:
            raise ParseError(f"unknown unit {unit!r} in duration {text!r}")
        total += Decimal(number) * _NANOS_PER_UNIT[unit]
        pos = match.end()

    nanos = int(total)
    if nanos > _MAX_NANOS + (1 if negative else 0):
        raise ParseError(f"invalid duration {text!r}")

    value = timedelta(microseconds=nanos // 1_000)
    return -value if negative else value


def to_nanoseconds(value: timedelta) -> int:
    """Whole nanoseconds represented by a timedelta."""
    return ((value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds) * 1_000


def format_duration(value: timedelta) -> str:
    """
    Format a timedelta as a duration literal.

    The output parses back to the same value: "1h0m0s", "1m30s", "1.5s",
    "250ms", "0s".
    """
    nanos = to_nanoseconds(value)
    if nanos == 0:
        return "0s"

    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)

    if nanos < 1_000:
        return f"{sign}{nanos}ns"
    if nanos < 1_000_000:
        return f"{sign}{_with_fraction(nanos, 1_000)}µs"
    if nanos < 1_000_000_000:
        return f"{sign}{_with_fraction(nanos, 1_000_000)}ms"

    hours, rest = divmod(nanos, _NANOS_PER_UNIT["h"])
    minutes, rest = divmod(rest, _NANOS_PER_UNIT["m"])
    text = f"{_with_fraction(rest, 1_000_000_000)}s"
    if hours or minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return f"{sign}{text}"


def _with_fraction(value: int, unit: int) -> str:
    whole, fraction = divmod(value, unit)
    if not fraction:
        return str(whole)
    width = len(str(unit)) - 1
    digits = str(fraction).rjust(width, "0").rstrip("0")
    return f"{whole}.{digits}"
