"""
Naming Utilities

Case conversions used to derive flag and environment variable names
from field identifiers.

    >>> to_flag_style("FieldAPIKey")
    'field-api-key'
    >>> to_env_style("FieldAPIKey")
    'FIELD_API_KEY'

Acronym runs ("API", "URL", "HTTP") form a single word; digits form their
own word ("Addr2" -> "addr-2"). Letters outside ASCII are kept, and
caseless scripts count as lowercase.
"""

from __future__ import annotations

import re

# Explicit word delimiters
_DELIMITERS = re.compile(r"[\s_.\-]+")

# Matched against a per-character class string, U=upper L=lower or caseless D=digit
# Uppercase run not followed by lowercase | capitalised or lowercase word | digits
_WORD = re.compile(r"U+(?!L)|U?L+|D+")


def _char_class(char: str) -> str:
    if char.isdigit():
        return "D"
    if char.isupper():
        return "U"
    if char.isalnum():
        return "L"
    return "X"


def split_words(identifier: str) -> list[str]:
    """
    Split an identifier into words.

    Args:
        identifier: e.g. "FieldURLAddr", "first_name", "Hyphen-Case"

    Returns:
        Words in original case, e.g. ["Field", "URL", "Addr"]
    """
    words: list[str] = []
    for chunk in _DELIMITERS.split(identifier):
        classes = "".join(_char_class(char) for char in chunk)
        words.extend(chunk[m.start():m.end()] for m in _WORD.finditer(classes))
    return words


def to_flag_style(identifier: str) -> str:
    """Convert an identifier to kebab-case: "FieldAPIKey" -> "field-api-key"."""
    return "-".join(word.lower() for word in split_words(identifier))


def to_env_style(identifier: str) -> str:
    """Convert an identifier to SCREAMING_SNAKE_CASE: "FieldAPIKey" -> "FIELD_API_KEY"."""
    return "_".join(word.upper() for word in split_words(identifier))


def prefix_style(prefix: str) -> str:
    """
    Convert a nesting prefix to flag style, keeping the trailing separator.

    An empty prefix stays empty, so top-level and flattened fields get
    no prefix at all.

        >>> prefix_style("my_addr-")
        'my-addr-'
    """
    styled = to_flag_style(prefix)
    return f"{styled}-" if styled else ""
