"""
Type Definitions

Scalar kinds, per-field options and flag records.

    - ScalarKind, Int64 - The closed set of bindable field types
    - FieldOptions, setting, IGNORE - Per-field flag/env/usage overrides
    - Flag, FieldRef - Registered flags and their storage cells
"""

from envflags.types.flags import FieldRef, Flag
from envflags.types.kinds import INT64_MAX, INT64_MIN, Int64, ScalarKind, type_name
from envflags.types.options import IGNORE, METADATA_KEY, FieldOptions, setting

__all__ = [
    "ScalarKind",
    "Int64",
    "INT64_MIN",
    "INT64_MAX",
    "type_name",
    "FieldOptions",
    "setting",
    "IGNORE",
    "METADATA_KEY",
    "Flag",
    "FieldRef",
]
