"""
Flag Types

Records describing registered flags and the storage they are bound to.

    - FieldRef: writable reference to one attribute of a configuration value
    - Flag: a registered flag (name, kind, default, usage, environment info)
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from envflags.types.kinds import ScalarKind


class FieldRef:
    """
    Writable reference to ``owner.attribute``.

    Attributes:
        owner: Configuration instance holding the field
        attribute: Attribute name on the owner
        path: Dotted path from the root configuration value, e.g. "addr.street"
    """

    __slots__ = ("owner", "attribute", "path")

    def __init__(self, owner: Any, attribute: str, path: str | None = None) -> None:
        self.owner = owner
        self.attribute = attribute
        self.path = path or attribute

    def get(self) -> Any:
        return getattr(self.owner, self.attribute)

    def set(self, value: Any) -> None:
        setattr(self.owner, self.attribute, value)

    def __repr__(self) -> str:
        return f"FieldRef({type(self.owner).__name__}.{self.attribute}, path={self.path!r})"


class Flag(BaseModel):
    """
    A flag registered on a FlagSet.

    Attributes:
        name: Flag name without leading dashes
        kind: Scalar kind of the bound field
        default: Resolved default (field value or environment override)
        usage: Help text
        env_name: Environment variable consulted, None when disabled
        env_applied: Whether the environment supplied the default
        ref: Storage cell the flag writes to
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    kind: ScalarKind
    default: Any = None
    usage: str = ""
    env_name: str | None = None
    env_applied: bool = False
    ref: FieldRef = Field(exclude=True, repr=False)

    @property
    def path(self) -> str:
        return self.ref.path

    @property
    def value(self) -> Any:
        """Current value of the bound field."""
        return self.ref.get()

    @property
    def default_text(self) -> str:
        return self.kind.render(self.default)
