from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, override


class Modifier:
    """Modifiers of a declared field that exclude it from the schema."""

    ABSTRACT = "abstract"
    TRANSIENT = "transient"


SKIPPED_MODIFIERS = frozenset({Modifier.ABSTRACT, Modifier.TRANSIENT})


@dataclass(frozen=True)
class FieldDescriptor:
    """A field as declared on a class.

    Attributes:
        name: The field name.
        declared_type: The class of the field. For parameterized annotations like
            `dict[str, int]`, this is the origin (`dict`).
        generic_arguments: The type arguments of a parameterized annotation, e.g.
            `(str, int)`. Empty for plain classes.
        modifiers: Modifiers like `transient`, see `Modifier`.
        annotation: The resolved annotation the descriptor was built from.
    """

    name: str
    declared_type: Any
    generic_arguments: tuple[Any, ...] = ()
    modifiers: frozenset[str] = frozenset()
    annotation: Any = None

    @property
    def is_skipped(self) -> bool:
        """Whether the field is excluded from the schema by one of its modifiers."""
        return bool(self.modifiers & SKIPPED_MODIFIERS)


@dataclass(frozen=True)
class ParameterDescriptor:
    """A parameter of a declared operation.

    Attributes:
        name: The parameter name.
        declared_type: The class of the parameter, see `FieldDescriptor.declared_type`.
        generic_arguments: The type arguments of a parameterized annotation.
        annotation: The resolved annotation the descriptor was built from.
    """

    name: str
    declared_type: Any
    generic_arguments: tuple[Any, ...] = ()
    annotation: Any = None


@dataclass(frozen=True)
class OperationDescriptor:
    """A method declared on a class, with the parameters callers pass to it."""

    name: str
    parameters: tuple[ParameterDescriptor, ...] = field(default_factory=tuple)

    @override
    def __repr__(self) -> str:
        """Return a readable representation for debugging."""
        parameter_names = ", ".join(p.name for p in self.parameters)
        return f"OperationDescriptor({self.name}({parameter_names}))"
