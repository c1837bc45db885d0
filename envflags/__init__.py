"""
envflags - Configuration from Flags and Environment Variables

Binds the fields of a dataclass or pydantic model to command-line flags
and environment variables.

Precedence (highest to lowest):
    1. Command-line flag
    2. Environment variable
    3. Field value before loading

Example:
    >>> from dataclasses import dataclass
    >>> from envflags import load, setting
    >>> @dataclass
    ... class Config:
    ...     web_server_addr: str = setting(":8080", usage="where the webserver listens")
    ...     debug: bool = setting(False, usage="turn on debug logging")
    >>> cfg = Config()
    >>> load(cfg)   # -web-server-addr / WEB_SERVER_ADDR, -debug / DEBUG

Main API:
    load: Bind and parse sys.argv
    bind: Bind to a caller-supplied FlagSet without parsing
    setting: Declare per-field flag/env/usage options
    FlagSet: Flag registrar and parser
"""

__version__ = "0.1.0"


# Public API - lazy imports to keep `import envflags` cheap
def __getattr__(name: str):
    """Lazy import public API components."""

    if name in ("load", "bind"):
        from envflags.binding import loader
        return getattr(loader, name)

    if name in ("FlagSet", "FlagRegistrar"):
        from envflags import flags
        return getattr(flags, name)

    if name in ("setting", "FieldOptions", "IGNORE", "Int64", "ScalarKind", "Flag", "FieldRef"):
        from envflags import types
        return getattr(types, name)

    if name in ("to_flag_style", "to_env_style"):
        from envflags.utils import naming
        return getattr(naming, name)

    if name in (
        "EnvFlagsError",
        "InvalidArgumentError",
        "AddressingError",
        "UnsupportedTypeError",
        "ParseError",
        "DuplicateFlagError",
        "FlagParseError",
    ):
        from envflags import errors
        return getattr(errors, name)

    raise AttributeError(f"module 'envflags' has no attribute {name!r}")


__all__ = [
    # Entry points
    "load",
    "bind",

    # Flags
    "FlagSet",
    "FlagRegistrar",
    "Flag",
    "FieldRef",

    # Field options and kinds
    "setting",
    "FieldOptions",
    "IGNORE",
    "Int64",
    "ScalarKind",

    # Naming
    "to_flag_style",
    "to_env_style",

    # Errors
    "EnvFlagsError",
    "InvalidArgumentError",
    "AddressingError",
    "UnsupportedTypeError",
    "ParseError",
    "DuplicateFlagError",
    "FlagParseError",

    # Version
    "__version__",
]
