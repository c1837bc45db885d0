"""
Struct Walker

Walks a configuration value field by field and registers one flag per
scalar leaf.

Configuration values are dataclass instances or pydantic models. For
each public field, in declaration order:

    1. flag name = prefix + kebab-case field name (or the flag option)
    2. nested configuration field -> recurse with prefix "<flag name>-"
       (or no prefix when the flag option is explicitly "")
    3. scalar field -> environment lookup, then register on the registrar

Example:
    @dataclass
    class Address:
        street: str = ""
        zip: str = setting("", flag="postcode")

    @dataclass
    class Config:
        name: str = ""
        addr: Address = field(default_factory=Address)

    # flags: -name, -addr-street, -addr-postcode
    # env:   NAME,  ADDR_STREET,  ADDR_POSTCODE
"""

from __future__ import annotations

import dataclasses
import logging
import types
import typing
from collections.abc import Mapping
from typing import Any, NamedTuple, Union

from pydantic import BaseModel

from envflags.binding.environment import resolve_env
from envflags.errors import AddressingError, EnvFlagsError, UnsupportedTypeError
from envflags.flags.base import FlagRegistrar
from envflags.types.flags import FieldRef
from envflags.types.kinds import ScalarKind, type_name
from envflags.types.options import FieldOptions
from envflags.utils.naming import prefix_style, to_env_style, to_flag_style

logger = logging.getLogger(__name__)

_REGISTER_METHODS: dict[ScalarKind, str] = {
    ScalarKind.INT: "register_int",
    ScalarKind.INT64: "register_int64",
    ScalarKind.FLOAT: "register_float",
    ScalarKind.STRING: "register_string",
    ScalarKind.BOOL: "register_bool",
    ScalarKind.DURATION: "register_duration",
}


class FieldDescriptor(NamedTuple):
    """One field of a configuration class."""

    name: str
    annotation: Any
    options: FieldOptions


def is_config_type(annotation: Any) -> bool:
    """True for dataclass and pydantic model classes."""
    return isinstance(annotation, type) and (
        dataclasses.is_dataclass(annotation) or issubclass(annotation, BaseModel)
    )


def is_config_instance(value: Any) -> bool:
    """True for dataclass and pydantic model instances (not classes)."""
    return not isinstance(value, type) and (
        dataclasses.is_dataclass(value) or isinstance(value, BaseModel)
    )


def describe_fields(target: Any) -> list[FieldDescriptor]:
    """
    List the fields of a configuration instance in declaration order.

    Raises:
        UnsupportedTypeError: If dataclass annotations cannot be resolved
    """
    cls = type(target)

    if isinstance(target, BaseModel):
        return [
            FieldDescriptor(
                name,
                info.annotation,
                FieldOptions.from_mapping(
                    info.json_schema_extra if isinstance(info.json_schema_extra, dict) else None
                ),
            )
            for name, info in cls.model_fields.items()
        ]

    try:
        hints = typing.get_type_hints(cls)
    except NameError as e:
        raise UnsupportedTypeError(f"cannot resolve annotations of {type_name(cls)}: {e}") from e

    return [
        FieldDescriptor(f.name, hints.get(f.name, f.type), FieldOptions.from_mapping(f.metadata))
        for f in dataclasses.fields(target)
    ]


def is_writable(target: Any) -> bool:
    """False for frozen dataclasses and frozen pydantic models."""
    if isinstance(target, BaseModel):
        return not type(target).model_config.get("frozen", False)
    params = getattr(type(target), "__dataclass_params__", None)
    return not (params is not None and params.frozen)


def _unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """Optional[X] / X | None -> (X, True); anything else -> (annotation, False)."""
    if typing.get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0], True
    return annotation, False


def walk(
    target: Any,
    prefix: str,
    registrar: FlagRegistrar,
    *,
    environ: Mapping[str, str] | None = None,
    path: str = "",
) -> None:
    """
    Register every scalar leaf of ``target`` on ``registrar``.

    Args:
        target: Configuration instance to bind (mutated in place)
        prefix: Flag name prefix for this level, "" at the root
        registrar: Registrar receiving one register_* call per leaf
        environ: Environment mapping (defaults to os.environ)
        path: Dotted path of ``target`` from the root, for diagnostics

    Raises:
        UnsupportedTypeError: A field has no supported scalar kind
        AddressingError: A field cannot be written
        ParseError: An environment variable does not parse
        DuplicateFlagError: Two fields map to the same flag name

    Errors are re-raised with the name of every field they passed through.
    Flags registered before the failure stay registered.
    """
    for descriptor in describe_fields(target):
        name, options = descriptor.name, descriptor.options

        if name.startswith("_"):
            continue
        if options.ignored:
            logger.debug(f"Skipping ignored field {path or '<root>'}.{name}")
            continue

        try:
            _walk_field(target, descriptor, prefix, registrar, environ, path)
        except EnvFlagsError as e:
            e.add_context(name)
            raise


def _walk_field(
    target: Any,
    descriptor: FieldDescriptor,
    prefix: str,
    registrar: FlagRegistrar,
    environ: Mapping[str, str] | None,
    path: str,
) -> None:
    name, options = descriptor.name, descriptor.options
    flag_name = prefix_style(prefix) + (options.flag or to_flag_style(name))
    field_path = f"{path}.{name}" if path else name
    annotation, optional = _unwrap_optional(descriptor.annotation)
    value = getattr(target, name)

    if is_config_type(annotation) or is_config_instance(value):
        if value is None:
            logger.debug(f"Skipping unset nested field {field_path}")
            return
        # explicit empty flag option flattens the nested namespace
        child_prefix = "" if options.flag == "" else f"{flag_name}-"
        walk(value, child_prefix, registrar, environ=environ, path=field_path)
        return

    if optional:
        logger.debug(f"Skipping optional non-configuration field {field_path}")
        return

    kind = ScalarKind.from_annotation(annotation)
    if kind is None:
        raise UnsupportedTypeError(f"unsupported field type {type_name(annotation)}")

    if not is_writable(target):
        raise AddressingError(f"unable to address field {name}")

    env_name: str | None = None
    default, env_applied = value, False
    if not options.env_disabled:
        env_name = options.env if options.env is not None else to_env_style(flag_name)
        default, env_applied = resolve_env(env_name, value, kind, environ)

    register = getattr(registrar, _REGISTER_METHODS[kind])
    register(
        FieldRef(target, name, field_path),
        flag_name,
        default,
        options.usage,
        env_name=env_name,
        env_applied=env_applied,
    )
