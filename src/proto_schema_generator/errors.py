"""Exceptions raised while generating a schema document."""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for all errors raised by the schema generator."""


class ConfigurationError(GenerationError):
    """Raised when a generation session cannot be set up, e.g. without a root type."""


class MalformedGenericError(GenerationError):
    """Raised when a container field carries no usable generic type arguments.

    For example, `values: dict` or `items: list` cannot be described, because the
    key, value or element type is unknown.
    """


class UnsupportedTypeError(GenerationError):
    """Raised for annotations that have no proto3 counterpart in this generator.

    This covers unions other than `X | None`, fixed-shape tuples, nested parameterized
    types such as `list[dict[str, int]]`, and non-class annotations like `Any`.
    """
