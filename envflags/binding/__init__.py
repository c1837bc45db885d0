"""
Binding Layer

Resolves configuration fields against the environment and registers
them as flags.

Modules:
    environment: Environment variable lookup and coercion
    walker: Recursive field traversal and flag registration
    loader: bind() and load() entry points
"""

from envflags.binding.environment import parse_env_value, resolve_env
from envflags.binding.loader import bind, layered_environ, load
from envflags.binding.walker import describe_fields, is_config_instance, is_config_type, walk

__all__ = [
    "resolve_env",
    "parse_env_value",
    "walk",
    "describe_fields",
    "is_config_type",
    "is_config_instance",
    "bind",
    "load",
    "layered_environ",
]
