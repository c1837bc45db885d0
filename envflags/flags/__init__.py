"""
Flag Registration

The FlagSet registers typed flags bound to configuration fields and
parses argument vectors.

Modules:
    base: FlagRegistrar abstract interface
    flagset: FlagSet, the argparse-backed registrar
"""

from envflags.flags.base import FlagRegistrar
from envflags.flags.flagset import FlagSet

__all__ = ["FlagRegistrar", "FlagSet"]
