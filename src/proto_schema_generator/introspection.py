"""Describe Python classes in terms of fields, operations and enum constants.

This module is the only place that talks to the runtime typing machinery. Everything
else in the generator works on the descriptors from `writer_dto`.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import enum
import inspect
import logging
import types
import typing
from collections.abc import Callable
from typing import Any, ClassVar, get_args, get_origin, get_type_hints

from proto_schema_generator.errors import UnsupportedTypeError
from proto_schema_generator.writer_dto import FieldDescriptor, Modifier, OperationDescriptor, ParameterDescriptor

logger = logging.getLogger(__name__)

UNION_ORIGINS = (typing.Union, types.UnionType)
TEXT_TYPES = (str, bytes, bytearray)
NAMED_TUPLE_METHODS = frozenset({"_make", "_replace", "_asdict"})


def is_dunder(name: str) -> bool:
    """Whether a name is a special name like `__init__`."""
    return name.startswith("__") and name.endswith("__")


def is_sunder(name: str) -> bool:
    """Whether a name is reserved like `_missing_`, e.g. by `enum`."""
    return (
        len(name) > 2
        and name.startswith("_")
        and name.endswith("_")
        and not name.startswith("__")
        and not name.endswith("__")
    )


def is_named_tuple(type_: Any) -> bool:
    """Whether the type was created by `typing.NamedTuple` or `collections.namedtuple`."""
    return isinstance(type_, type) and issubclass(type_, tuple) and hasattr(type_, "_fields")


def is_enum(type_: Any) -> bool:
    """Whether the type is an `enum.Enum` subclass."""
    return isinstance(type_, type) and issubclass(type_, enum.Enum)


def is_mapping(type_: Any) -> bool:
    """Whether the type is a key/value container, e.g. `dict` or `Mapping`."""
    return isinstance(type_, type) and issubclass(type_, collections.abc.Mapping)


def is_array(type_: Any, generic_arguments: tuple[Any, ...]) -> bool:
    """Whether the type describes a homogeneous, variable-length tuple like `tuple[int, ...]`."""
    return type_ is tuple and len(generic_arguments) == 2 and generic_arguments[1] is Ellipsis


def is_list(type_: Any) -> bool:
    """Whether the type is exactly `list`."""
    return type_ is list


def is_collection(type_: Any) -> bool:
    """Whether the type is any other multi-element container, e.g. `set` or `Sequence`."""
    return (
        isinstance(type_, type)
        and issubclass(type_, collections.abc.Collection)
        and not issubclass(type_, TEXT_TYPES)
        and not is_mapping(type_)
    )


def is_container(type_: Any) -> bool:
    """Whether the type is a map, array, list or other collection."""
    return is_mapping(type_) or type_ is tuple or is_list(type_) or is_collection(type_)


def unwrap_optional(annotation: Any) -> Any:
    """Unwrap `X | None` to `X`.

    Args:
        annotation (Any): The annotation to unwrap.

    Raises:
        UnsupportedTypeError: If the annotation is a union of several types besides `None`.

    Returns:
        Any: The unwrapped annotation, or the annotation itself if it is not a union.
    """
    if get_origin(annotation) not in UNION_ORIGINS:
        return annotation

    members = [member for member in get_args(annotation) if member is not types.NoneType]
    if len(members) != 1:
        raise UnsupportedTypeError(f"Unions like '{annotation}' are not supported, only 'X | None' is.")

    return members[0]


def describe_annotation(annotation: Any) -> tuple[Any, tuple[Any, ...]]:
    """Split an annotation into its declared type and its generic arguments.

    Examples:
        >>> describe_annotation(dict[str, int])
        (<class 'dict'>, (<class 'str'>, <class 'int'>))
        >>> describe_annotation(int | None)
        (<class 'int'>, ())
    """
    annotation = unwrap_optional(annotation)
    origin = get_origin(annotation)

    if origin is None:
        return annotation, ()

    return origin, get_args(annotation)


def _strip_qualifier(annotation: Any) -> Any:
    """Strip `ClassVar[...]` and `InitVar[...]` from an annotation."""
    if get_origin(annotation) is ClassVar:
        return get_args(annotation)[0]

    if isinstance(annotation, dataclasses.InitVar):
        return annotation.type

    if annotation is ClassVar or annotation is dataclasses.InitVar:
        return Any

    return annotation


def _get_modifiers(cls: type, name: str, annotation: Any) -> frozenset[str]:
    modifiers: set[str] = set()

    if (
        annotation is ClassVar
        or get_origin(annotation) is ClassVar
        or annotation is dataclasses.InitVar
        or isinstance(annotation, dataclasses.InitVar)
    ):
        modifiers.add(Modifier.TRANSIENT)

    dataclass_field = getattr(cls, "__dataclass_fields__", {}).get(name)
    if dataclass_field is not None and dataclass_field.metadata.get("transient"):
        modifiers.add(Modifier.TRANSIENT)

    if getattr(cls.__dict__.get(name), "__isabstractmethod__", False):
        modifiers.add(Modifier.ABSTRACT)

    return frozenset(modifiers)


def get_fields(cls: type) -> list[FieldDescriptor]:
    """Get the fields declared on a class, in declaration order.

    Only annotations of the class itself are considered, inherited annotations are not.

    Args:
        cls (type): The class to inspect.

    Returns:
        list[FieldDescriptor]: The field descriptors.
    """
    names = list(inspect.get_annotations(cls))
    if not names:
        return []

    hints = get_type_hints(cls)
    descriptors: list[FieldDescriptor] = []

    for name in names:
        annotation = hints[name]
        modifiers = _get_modifiers(cls, name, annotation)

        if modifiers:
            descriptors.append(FieldDescriptor(name, _strip_qualifier(annotation), (), modifiers, annotation))
            continue

        declared_type, generic_arguments = describe_annotation(annotation)
        descriptors.append(FieldDescriptor(name, declared_type, generic_arguments, modifiers, annotation))

    return descriptors


def get_enum_constants(enum_type: type[enum.Enum]) -> list[str]:
    """Get the names of the members of an enum, in definition order. Aliases are skipped."""
    return [member.name for member in enum_type]


def _unwrap_function(member: Any) -> tuple[Callable[..., Any] | None, bool]:
    """Get the function behind a class attribute, and whether its first parameter is bound."""
    if isinstance(member, staticmethod):
        return member.__func__, False

    if isinstance(member, classmethod):
        return member.__func__, True

    if inspect.isfunction(member):
        return member, True

    return None, False


def _get_parameters(function: Callable[..., Any], bound: bool) -> tuple[ParameterDescriptor, ...]:
    parameters = list(inspect.signature(function).parameters.values())
    if bound and parameters:
        parameters = parameters[1:]

    hints = get_type_hints(function)
    descriptors: list[ParameterDescriptor] = []

    for parameter in parameters:
        if parameter.kind is inspect.Parameter.VAR_KEYWORD:
            continue

        annotation = hints.get(parameter.name)
        if annotation is None:
            logger.warning(f"Parameter '{parameter.name}' of '{function.__qualname__}' is not annotated.")
            annotation = Any

        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            annotation = tuple[annotation, ...]

        declared_type, generic_arguments = describe_annotation(annotation)
        descriptors.append(ParameterDescriptor(parameter.name, declared_type, generic_arguments, annotation))

    return tuple(descriptors)


def get_operations(cls: type) -> list[OperationDescriptor]:
    """Get the methods declared on a class, in definition order.

    Special methods like `__init__` are not operations, and neither are the methods that
    `enum` and `NamedTuple` add to a class, e.g. `_generate_next_value_` or `_make`. The
    first parameter of instance and class methods (`self`, `cls`) is not part of the
    operation's parameters.

    Args:
        cls (type): The class to inspect.

    Returns:
        list[OperationDescriptor]: The operation descriptors.
    """
    operations: list[OperationDescriptor] = []
    generated_names = NAMED_TUPLE_METHODS if is_named_tuple(cls) else frozenset()

    for name, member in cls.__dict__.items():
        if is_dunder(name) or is_sunder(name) or name in generated_names:
            continue

        function, bound = _unwrap_function(member)
        if function is None:
            continue

        operations.append(OperationDescriptor(name, _get_parameters(function, bound)))

    return operations
