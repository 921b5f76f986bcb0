"""Helper functionality that is used in other modules of this package."""

from __future__ import annotations

from typing import Any

from proto_schema_generator.proto_types import ProtoKeyword

PATH_SEPARATOR = "."
MAP_ENTRY_PREFIX = "Map_"


def get_simple_name(type_: Any) -> str:
    """Get the simple name of a type, i.e. without module or enclosing classes.

    Args:
        type_ (Any): The type to name.

    Returns:
        str: The simple name, e.g. `Inner` for `pkg.module.Outer.Inner`.
    """
    return getattr(type_, "__name__", None) or repr(type_)


def get_qualified_name(type_: Any) -> str:
    """Get the fully qualified name of a type.

    Builtin types are not prefixed with `builtins.`. Anything that is not a plain class,
    for example a parameterized alias like `dict[str, int]`, is named by its `repr`.

    Args:
        type_ (Any): The type to name.

    Returns:
        str: The fully qualified name.

    Examples:
        >>> get_qualified_name(int)
        'int'
        >>> get_qualified_name(dict[str, int])
        'dict[str, int]'
    """
    if not isinstance(type_, type):
        return repr(type_)

    if type_.__module__ == "builtins":
        return type_.__qualname__

    return f"{type_.__module__}.{type_.__qualname__}"


def join_path(*segments: str) -> str:
    """Join name segments to a qualified path, e.g. `Outer.Inner`."""
    return PATH_SEPARATOR.join(segment for segment in segments if segment)


def last_segment(path: str) -> str:
    """Get the last segment of a qualified path.

    For example, `Outer.Map_scores.Score` becomes `Score`.
    """
    return path.rsplit(PATH_SEPARATOR, 1)[-1].strip()


def map_entry_name(field_name: str) -> str:
    """Name of the synthetic message that holds the key/value pairs of a map field."""
    return f"{MAP_ENTRY_PREFIX}{field_name}"


def new_field(type_name: str, name: str, index: int, repeated: bool = False) -> list[str]:
    """Create the tokens of a field statement.

    For example, `string name = 1` or `repeated sint32 counts = 2`.

    Args:
        type_name (str): The schema type of the field.
        name (str): The field name.
        index (int): The field number.
        repeated (bool, optional): Whether the field holds a sequence. Defaults to False.

    Returns:
        list[str]: The tokens, without the terminating semicolon.
    """
    tokens = [type_name, name, "=", str(index)]

    if repeated:
        tokens.insert(0, ProtoKeyword.REPEATED)

    return tokens


def new_option(name: str, value: str, quoted: bool = True) -> str:
    """Create an `option` line, e.g. `option java_multiple_files=true;`."""
    if quoted:
        value = f'"{value}"'

    return f"{ProtoKeyword.OPTION} {name}={value};"
