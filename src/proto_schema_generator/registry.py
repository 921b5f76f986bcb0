"""Registry of types that already have a name in the schema document."""

from __future__ import annotations

import logging
from typing import override

from proto_schema_generator.proto_types import ScalarTypeMap

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Maps types to the qualified path they are referenced by in the schema.

    The registry is seeded with the scalar types, which map to their scalar keyword and
    are never emitted as blocks. Names of user-defined types are reserved *before* their
    fields are processed, so that self-referencing and mutually referencing types resolve
    to a stable name.

    Apart from the names, the registry tracks which types have been emitted as a block.
    """

    def __init__(self, scalar_types: ScalarTypeMap):
        """Initialize the registry with the scalar types.

        Args:
            scalar_types (ScalarTypeMap): Types that map onto scalar keywords.
        """
        self._scalar_types = scalar_types
        self._paths: dict[type, str] = dict(scalar_types)
        self._emitted: set[type] = set()

    def lookup(self, type_: type) -> str | None:
        """Look up the reserved name of a type.

        Args:
            type_ (type): The type to look up.

        Returns:
            str | None: The qualified path or scalar keyword, None if the type is unknown.
        """
        return self._paths.get(type_)

    def is_known(self, type_: type) -> bool:
        """Whether a name was reserved for the type."""
        return type_ in self._paths

    def is_scalar(self, type_: type) -> bool:
        """Whether the type maps onto a scalar keyword."""
        return type_ in self._scalar_types

    def reserve(self, type_: type, path: str):
        """Reserve a qualified path for a type, overwriting a previous reservation.

        Args:
            type_ (type): The type to reserve the name for.
            path (str): The qualified path of the type.
        """
        if self.is_scalar(type_):
            raise ValueError(f"The scalar type '{type_.__name__}' cannot be renamed.")

        self._paths[type_] = path

    def replace(self, type_: type, path: str):
        """Remove a reservation and reserve a corrected path.

        This is used for types that are discovered as the key or value of a map, whose
        path depends on the synthetic entry message that encloses them.
        """
        previous = self._paths.pop(type_, None)

        if previous is not None:
            logger.debug(f"Correcting the path of '{type_.__name__}' from '{previous}' to '{path}'.")

        self.reserve(type_, path)

    def mark_emitted(self, type_: type):
        """Record that a block was emitted for the type."""
        self._emitted.add(type_)

    def is_emitted(self, type_: type) -> bool:
        """Whether a block was emitted for the type."""
        return type_ in self._emitted

    @property
    def emitted_count(self) -> int:
        """The number of types that were emitted as a block."""
        return len(self._emitted)

    @override
    def __repr__(self) -> str:
        """Return a readable representation for debugging."""
        return f"TypeRegistry(known={len(self._paths)}, emitted={len(self._emitted)})"
