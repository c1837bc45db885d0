"""
Abstract Flag Registrar Interface

The contract the struct walker registers fields against.
FlagSet is the argparse-backed implementation.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import timedelta

from envflags.types.flags import FieldRef, Flag


class FlagRegistrar(ABC):
    """
    Abstract interface for flag registrars.

    Every register_* method binds ``ref`` to the flag ``name``, writes
    ``default`` into ``ref`` and raises DuplicateFlagError when ``name``
    is already registered.
    """

    @abstractmethod
    def register_int(
        self,
        ref: FieldRef,
        name: str,
        default: int,
        usage: str = "",
        *,
        env_name: str | None = None,
        env_applied: bool = False,
    ) -> Flag:
        ...

    @abstractmethod
    def register_int64(
        self,
        ref: FieldRef,
        name: str,
        default: int,
        usage: str = "",
        *,
        env_name: str | None = None,
        env_applied: bool = False,
    ) -> Flag:
        ...

    @abstractmethod
    def register_float(
        self,
        ref: FieldRef,
        name: str,
        default: float,
        usage: str = "",
        *,
        env_name: str | None = None,
        env_applied: bool = False,
    ) -> Flag:
        ...

    @abstractmethod
    def register_string(
        self,
        ref: FieldRef,
        name: str,
        default: str,
        usage: str = "",
        *,
        env_name: str | None = None,
        env_applied: bool = False,
    ) -> Flag:
        ...

    @abstractmethod
    def register_bool(
        self,
        ref: FieldRef,
        name: str,
        default: bool,
        usage: str = "",
        *,
        env_name: str | None = None,
        env_applied: bool = False,
    ) -> Flag:
        ...

    @abstractmethod
    def register_duration(
        self,
        ref: FieldRef,
        name: str,
        default: timedelta,
        usage: str = "",
        *,
        env_name: str | None = None,
        env_applied: bool = False,
    ) -> Flag:
        ...

    @abstractmethod
    def parse(self, argv: Sequence[str] | None = None) -> None:
        """Parse an argument vector, writing supplied flags to their fields."""
        ...

    @abstractmethod
    def flags(self) -> list[Flag]:
        """All registered flags sorted by name."""
        ...
