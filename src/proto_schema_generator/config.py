"""Configuration of a schema generation session."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

from proto_schema_generator.proto_types import PROTO3_SCALAR_TYPES, ScalarTypeMap

GENERATOR_NAME = "PyToProto Generator"
GENERATOR_VERSION = "v0.2"


def _now() -> str:
    """The current local time, formatted like `Mon Oct 19 16:37:00 CEST 2026`."""
    return datetime.now().astimezone().strftime("%a %b %d %H:%M:%S %Z %Y")


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable settings for one or more generation sessions.

    Attributes:
        name: The generator name written to the header comment.
        version: The generator version written to the header comment.
        syntax: The value of the `syntax` declaration.
        indent: The string that makes up one level of indentation.
        package_suffix: Appended to the root type names in the `option` and `package` lines.
        scalar_types: Python types that are emitted as scalar keywords. The registry of
            every session is seeded from this mapping.
        clock: Produces the timestamp of the header comment.
    """

    name: str = GENERATOR_NAME
    version: str = GENERATOR_VERSION
    syntax: str = "proto3"
    indent: str = "\t"
    package_suffix: str = "Proto"
    scalar_types: ScalarTypeMap = field(default_factory=lambda: PROTO3_SCALAR_TYPES)
    clock: Callable[[], str] = field(default=_now, compare=False)

    def __post_init__(self):
        """Freeze a caller-provided scalar mapping."""
        if not isinstance(self.scalar_types, MappingProxyType):
            object.__setattr__(self, "scalar_types", MappingProxyType(dict(self.scalar_types)))
