"""Decide how a declared field is represented in the schema."""

from __future__ import annotations

from typing import Any, get_origin

from proto_schema_generator import introspection
from proto_schema_generator.errors import MalformedGenericError, UnsupportedTypeError
from proto_schema_generator.proto_types import FieldKind
from proto_schema_generator.registry import TypeRegistry
from proto_schema_generator.writer_dto import FieldDescriptor

EXPECTED_ARGUMENT_COUNTS = {
    FieldKind.MAP: 2,
    FieldKind.LIST: 1,
    FieldKind.COLLECTION: 1,
}


def classify_field(field: FieldDescriptor, registry: TypeRegistry) -> str:
    """Classify a field into one of the `FieldKind` strategies.

    The checks are made in a fixed order, the first match wins:
    skipped, known (scalar or previously named), enum, map, array, list, other collection,
    and finally nested message.

    Args:
        field (FieldDescriptor): The field to classify.
        registry (TypeRegistry): The registry of named types.

    Raises:
        MalformedGenericError: If a container field lacks its type arguments.
        UnsupportedTypeError: If the field type has no schema representation.

    Returns:
        str: The field kind, see `FieldKind`.
    """
    declared_type = field.declared_type

    if field.is_skipped:
        return FieldKind.SKIP

    if not field.generic_arguments and registry.is_known(declared_type):
        return FieldKind.SCALAR

    if introspection.is_enum(declared_type):
        return FieldKind.ENUM

    if introspection.is_mapping(declared_type):
        return _validated(field, FieldKind.MAP)

    if introspection.is_array(declared_type, field.generic_arguments):
        _check_element_types(field, field.generic_arguments[:1])
        return FieldKind.ARRAY

    if declared_type is tuple:
        raise UnsupportedTypeError(
            f"Field '{field.name}': only variable-length tuples like 'tuple[int, ...]' are supported, "
            f"got '{field.annotation}'."
        )

    if introspection.is_list(declared_type):
        return _validated(field, FieldKind.LIST)

    if introspection.is_collection(declared_type):
        return _validated(field, FieldKind.COLLECTION)

    if declared_type is Any or not isinstance(declared_type, type) or field.generic_arguments:
        raise UnsupportedTypeError(f"Field '{field.name}' has the unsupported type '{field.annotation}'.")

    return FieldKind.MESSAGE


def element_types(field: FieldDescriptor, kind: str) -> tuple[Any, ...]:
    """The element types of a container field: key and value for maps, the element otherwise."""
    if kind == FieldKind.MAP:
        return field.generic_arguments[:2]

    return field.generic_arguments[:1]


def _validated(field: FieldDescriptor, kind: str) -> str:
    expected = EXPECTED_ARGUMENT_COUNTS[kind]

    if len(field.generic_arguments) != expected:
        raise MalformedGenericError(
            f"Field '{field.name}' of {kind} type '{field.annotation}' needs {expected} type argument(s), "
            f"found {len(field.generic_arguments)}."
        )

    _check_element_types(field, field.generic_arguments)
    return kind


def _check_element_types(field: FieldDescriptor, arguments: tuple[Any, ...]):
    for argument in arguments:
        if get_origin(argument) is not None:
            raise UnsupportedTypeError(
                f"Field '{field.name}': nested parameterized types like '{field.annotation}' are not supported."
            )

        if argument is Any or not isinstance(argument, type):
            raise MalformedGenericError(f"Field '{field.name}' has the unresolved type argument '{argument}'.")

        if introspection.is_container(argument):
            raise MalformedGenericError(
                f"Field '{field.name}' has the container '{argument.__name__}' without type arguments "
                f"as element of '{field.annotation}'."
            )
