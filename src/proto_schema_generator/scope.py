"""Stack of enclosing types, which determines the qualified path of nested types."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from proto_schema_generator import helper


class NoScopeError(Exception):
    """Raised when the current scope is requested from an empty scope stack."""


class ScopeStack:
    """An ordered stack (outer to inner) of the types that are currently being emitted.

    Every push must be matched by a pop. Prefer the `enter` context manager, which keeps
    pushes and pops balanced even if emission fails.
    """

    def __init__(self):
        """Initialize an empty stack."""
        self._types: list[type] = []

    def push(self, type_: type):
        """Enter the scope of a type."""
        self._types.append(type_)

    def pop(self) -> type:
        """Leave the innermost scope.

        Raises:
            NoScopeError: If there is no scope to leave.

        Returns:
            type: The type whose scope was left.
        """
        if not self._types:
            raise NoScopeError("Cannot return from the root scope.")

        return self._types.pop()

    @contextmanager
    def enter(self, type_: type) -> Iterator[str]:
        """Enter the scope of a type for the duration of a `with` block.

        Yields:
            str: The qualified path of the entered type.
        """
        self.push(type_)
        try:
            yield self.current_path

        finally:
            self.pop()

    @property
    def current(self) -> type:
        """The innermost type."""
        if not self._types:
            raise NoScopeError("The scope stack is empty.")

        return self._types[-1]

    @property
    def current_path(self) -> str:
        """The qualified path of the innermost type, e.g. `Outer.Inner`.

        Reading the path does not modify the stack.
        """
        return helper.join_path(*(helper.get_simple_name(t) for t in self._types))

    @property
    def depth(self) -> int:
        """The number of entered scopes."""
        return len(self._types)

    def __len__(self) -> int:
        return len(self._types)
