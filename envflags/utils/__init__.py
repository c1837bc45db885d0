"""
Utility Functions

Pure helpers used by the binding layer.

Modules:
    naming: Identifier case conversion (kebab-case, SCREAMING_SNAKE_CASE)
    durations: Duration literal parsing and formatting
    scalars: Integer, float and boolean parsing
"""

from envflags.utils.durations import format_duration, parse_duration
from envflags.utils.naming import prefix_style, split_words, to_env_style, to_flag_style
from envflags.utils.scalars import parse_env_bool, parse_flag_bool, parse_float, parse_int

__all__ = [
    "split_words",
    "to_flag_style",
    "to_env_style",
    "prefix_style",
    "parse_duration",
    "format_duration",
    "parse_int",
    "parse_float",
    "parse_flag_bool",
    "parse_env_bool",
]
