"""
Field Options

Per-field overrides for flag name, environment name and usage text.

Dataclass fields declare them with setting():

    @dataclass
    class ServerConfig:
        addr: str = setting(":8080", usage="listen address")
        api_key: str = setting("", flag="key", env="SERVICE_API_KEY")
        debug: bool = setting(False, env="-")        # flag only
        client: object = setting(None, flag="-")     # not bound at all

Plain ``dataclasses.field(metadata={"flag": ...})`` and pydantic
``Field(json_schema_extra={"flag": ...})`` are read the same way.

Option values:
    flag=None   derive the name from the field identifier
    flag="-"    skip the field for both flags and environment
    flag=""     on a nested field: descendants get no prefix
    env=None    derive the name from the flag name
    env="-"     skip the environment lookup, keep the flag
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

METADATA_KEY = "envflags"

IGNORE = "-"
"""Sentinel option value that disables binding for a concern."""


class FieldOptions(BaseModel):
    """
    Binding options for one configuration field.

    Attributes:
        flag: Flag name suffix override, IGNORE, or "" to flatten a nested field
        env: Environment variable name override, or IGNORE
        usage: Help text shown with the flag
    """

    model_config = ConfigDict(frozen=True)

    flag: str | None = None
    env: str | None = None
    usage: str = ""

    @property
    def ignored(self) -> bool:
        """Field is excluded from flags and environment."""
        return self.flag == IGNORE

    @property
    def env_disabled(self) -> bool:
        """Field keeps its flag but skips the environment lookup."""
        return self.env == IGNORE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> FieldOptions:
        """Read options from dataclass metadata or pydantic json_schema_extra."""
        if not data:
            return cls()
        options = data.get(METADATA_KEY)
        if isinstance(options, FieldOptions):
            return options
        return cls(
            flag=data.get("flag"),
            env=data.get("env"),
            usage=data.get("usage") or "",
        )


def setting(
    default: Any = dataclasses.MISSING,
    *,
    default_factory: Any = dataclasses.MISSING,
    flag: str | None = None,
    env: str | None = None,
    usage: str = "",
) -> Any:
    """
    Declare a dataclass field with binding options.

    Args:
        default: Field default
        default_factory: Zero-argument factory, for nested configuration fields
        flag: Flag name override (see module docstring)
        env: Environment variable override
        usage: Help text

    Returns:
        A dataclasses.field carrying the options in its metadata
    """
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={METADATA_KEY: FieldOptions(flag=flag, env=env, usage=usage)},
    )
