"""
Scalar Kinds

The closed set of field types that can be bound to a flag.

    Annotation          Kind
    ----------          ----
    int                 INT
    Int64               INT64 (range-checked to signed 64 bits)
    float               FLOAT
    str                 STRING
    bool                BOOL
    datetime.timedelta  DURATION

Any other annotation has no kind and cannot be registered.
"""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Any, NewType

from envflags.utils.durations import format_duration

# Integer field restricted to the signed 64-bit range
Int64 = NewType("Int64", int)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ScalarKind(str, Enum):
    """Supported scalar field kinds."""

    INT = "int"
    INT64 = "int64"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"
    DURATION = "duration"

    @classmethod
    def from_annotation(cls, annotation: Any) -> ScalarKind | None:
        """Return the kind for a resolved type annotation, or None."""
        try:
            return _ANNOTATION_KINDS.get(annotation)
        except TypeError:
            # unhashable annotation objects
            return None

    def render(self, value: Any) -> str:
        """Render a value of this kind the way it is written on the command line."""
        if value is None:
            return ""
        if self is ScalarKind.BOOL:
            return "true" if value else "false"
        if self is ScalarKind.DURATION:
            return format_duration(value)
        if self is ScalarKind.FLOAT:
            return repr(float(value))
        return str(value)


_ANNOTATION_KINDS: dict[Any, ScalarKind] = {
    int: ScalarKind.INT,
    Int64: ScalarKind.INT64,
    float: ScalarKind.FLOAT,
    str: ScalarKind.STRING,
    bool: ScalarKind.BOOL,
    timedelta: ScalarKind.DURATION,
}


def type_name(annotation: Any) -> str:
    """Readable name for an annotation, used in error messages."""
    module = getattr(annotation, "__module__", None)
    qualname = getattr(annotation, "__qualname__", None)
    if qualname is None:
        return repr(annotation)
    if module in (None, "builtins"):
        return qualname
    return f"{module}.{qualname}"
