"""Types definitions that are common in proto3 schemas."""

from __future__ import annotations

import ctypes
from collections.abc import Mapping
from types import MappingProxyType

PROTO3_SCALAR_TYPES: Mapping[type, str] = MappingProxyType(
    {
        bool: "bool",
        ctypes.c_bool: "bool",
        int: "sint32",
        ctypes.c_int32: "sint32",
        ctypes.c_int64: "sint64",
        float: "double",
        ctypes.c_double: "double",
        ctypes.c_float: "float",
        bytes: "bytes",
        bytearray: "bytes",
        ctypes.c_byte: "bytes",
        str: "string",
    }
)
"""Python types that map onto proto3 scalar keywords."""


class ProtoKeyword:
    """Keywords of the proto3 schema language."""

    MESSAGE = "message"
    ENUM = "enum"
    REPEATED = "repeated"
    SYNTAX = "syntax"
    PACKAGE = "package"
    OPTION = "option"


class JavaOption:
    """Names of the `option` lines that steer Java code generation."""

    PACKAGE = "java_package"
    OUTER_CLASSNAME = "java_outer_classname"
    MULTIPLE_FILES = "java_multiple_files"


class FieldKind:
    """Emission strategies a declared field can be classified into."""

    SKIP = "skip"
    SCALAR = "scalar"
    ENUM = "enum"
    MAP = "map"
    ARRAY = "array"
    LIST = "list"
    COLLECTION = "collection"
    MESSAGE = "message"


ScalarTypeMap = Mapping[type, str]
