"""Generate a proto3 schema document for a Python class.

The writer walks the type graph that is rooted at one class. Every user-defined type that
is reachable through field types, container element types or map keys and values is
emitted exactly once, either as a `message` or as an `enum` block.
"""

from __future__ import annotations

import logging
from typing import Any, override

from proto_schema_generator import helper, introspection
from proto_schema_generator.classifier import classify_field, element_types
from proto_schema_generator.config import GeneratorConfig
from proto_schema_generator.emitter import Emitter
from proto_schema_generator.errors import ConfigurationError
from proto_schema_generator.proto_types import FieldKind, JavaOption, ProtoKeyword
from proto_schema_generator.registry import TypeRegistry
from proto_schema_generator.scope import ScopeStack
from proto_schema_generator.writer_dto import FieldDescriptor, ParameterDescriptor

logger = logging.getLogger(__name__)

REPEATED_KINDS = (FieldKind.ARRAY, FieldKind.LIST, FieldKind.COLLECTION)


class Writer:
    """A generation session that writes the schema document for one root class.

    A session is not reentrant and must not be shared between threads. Independent
    sessions share no state.
    """

    def __init__(self, root_type: type | None, config: GeneratorConfig | None = None):
        """Initialize the session.

        Args:
            root_type (type | None): The class to generate the schema for.
            config (GeneratorConfig | None, optional): The generator settings. Defaults to None,
                in which case the default settings are used.

        Raises:
            ConfigurationError: If the root type is missing, not a class, or a scalar.
        """
        if root_type is None:
            raise ConfigurationError("A root class is required to generate a schema, got None.")

        if not isinstance(root_type, type):
            raise ConfigurationError(f"The root type must be a class, got '{root_type!r}'.")

        self._root = root_type
        self._config = config or GeneratorConfig()

        if root_type in self._config.scalar_types:
            raise ConfigurationError(f"The root type '{root_type.__name__}' is a scalar and has no message.")

        self._document: str | None = None
        self._reset_state()

    def _reset_state(self):
        """Set up the traversal state for a fresh run."""
        self.registry = TypeRegistry(self._config.scalar_types)
        self.scope = ScopeStack()
        self._emitter = Emitter(self._config.indent)
        self._pending: list[type] = []
        self._pending_types: set[type] = set()

    # ===== Document header =====

    def _add_header(self):
        self._emitter.raw(f"// Generated by {self._config.name} {self._config.version} on {self._config.clock()}")

    def _add_syntax(self):
        self._emitter.raw(f'{ProtoKeyword.SYNTAX}="{self._config.syntax}";')
        self._emitter.raw()

    def _add_package(self):
        suffix = self._config.package_suffix
        simple_name = helper.get_simple_name(self._root)

        self._emitter.raw(helper.new_option(JavaOption.PACKAGE, f"{helper.get_qualified_name(self._root)}{suffix}"))
        self._emitter.raw(helper.new_option(JavaOption.OUTER_CLASSNAME, f"{simple_name}{suffix}"))
        self._emitter.raw(helper.new_option(JavaOption.MULTIPLE_FILES, "true", quoted=False))
        self._emitter.raw()
        self._emitter.raw(f"{ProtoKeyword.PACKAGE} {simple_name}{suffix};")
        self._emitter.raw()

    # ===== Worklist =====

    def enqueue(self, type_: type):
        """Queue a type for emission, unless it was already emitted or queued.

        A queued type that has no name yet is reserved under its simple name, which is
        where it will be emitted.

        Args:
            type_ (type): The type to queue.
        """
        if self.registry.is_emitted(type_) or type_ in self._pending_types:
            return

        if not self.registry.is_known(type_):
            self.registry.reserve(type_, helper.get_simple_name(type_))

        self._pending.append(type_)
        self._pending_types.add(type_)
        logger.debug(f"Queued '{helper.get_qualified_name(type_)}' for emission.")

    def drain(self):
        """Emit queued types until the worklist is empty.

        Emitting a type may queue further types, which are emitted in the same pass.
        """
        while self._pending:
            type_ = self._pending.pop()
            self._pending_types.discard(type_)

            if self.registry.is_emitted(type_):
                continue

            self.gen_type(type_)

    def traverse(self, root_type: type):
        """Emit a type and every type it transitively references."""
        self.gen_type(root_type)
        self.drain()

    def reference(self, type_: type) -> str:
        """Get the name a field uses to refer to a type, queuing the type if it is unknown."""
        if not self.registry.is_known(type_):
            self.enqueue(type_)

        return self.registry.lookup(type_)

    # ===== Blocks =====

    def gen_type(self, type_: type):
        """Emit the block of a type at the current depth."""
        if introspection.is_enum(type_):
            self.gen_enum(type_)

        else:
            self.gen_message(type_)

    def gen_message(self, type_: type):
        """Emit a `message` block with one statement per declared field.

        The name of the message is reserved before its fields are processed, so fields
        that refer back to the message resolve to that name.

        Args:
            type_ (type): The class to emit.
        """
        name = helper.get_simple_name(type_)

        with self.scope.enter(type_) as path:
            self.registry.reserve(type_, path)
            self.registry.mark_emitted(type_)

            self._emitter.open_block(ProtoKeyword.MESSAGE, name)
            for index, field in enumerate(introspection.get_fields(type_), start=1):
                self.gen_field(field, index)
            self._emitter.close_block()

        logger.debug(f"Emitted message '{path}'.")

    def gen_enum(self, enum_type: type):
        """Emit an `enum` block, numbering the members in definition order starting at 0.

        The enum is named after its position in the scope stack, so an enum that is
        emitted inside a message is referred to as `Message.Enum`.

        Args:
            enum_type (type): The enum class to emit.
        """
        with self.scope.enter(enum_type) as path:
            self.registry.reserve(enum_type, path)
            self.registry.mark_emitted(enum_type)

        self._emitter.open_block(ProtoKeyword.ENUM, helper.get_simple_name(enum_type))
        for ordinal, constant in enumerate(introspection.get_enum_constants(enum_type)):
            self._emitter.statement(constant, "=", str(ordinal))
        self._emitter.close_block()

        logger.debug(f"Emitted enum '{path}'.")

    def gen_map_entry(self, field: FieldDescriptor) -> str:
        """Emit the synthetic message that holds the key/value pairs of a map field.

        Key and value types that are unknown are queued. Their path is reserved below the
        entry message, e.g. `Outer.Map_scores.Score`.

        Args:
            field (FieldDescriptor): The map field.

        Returns:
            str: The name of the entry message.
        """
        name = helper.map_entry_name(field.name)
        path = helper.join_path(self.scope.current_path, name)
        key_type, value_type = element_types(field, FieldKind.MAP)

        if not self.registry.is_scalar(key_type):
            logger.warning(
                f"Map field '{field.name}' has the non-scalar key type '{helper.get_simple_name(key_type)}', "
                "which proto3 does not allow as a map key."
            )

        self._emitter.open_block(ProtoKeyword.MESSAGE, name)
        for index, (entry_field, type_) in enumerate((("key", key_type), ("value", value_type)), start=1):
            if not self.registry.is_known(type_):
                self.registry.replace(type_, helper.join_path(path, helper.get_simple_name(type_)))
                self.enqueue(type_)

            type_name = helper.last_segment(self.registry.lookup(type_))
            self._emitter.statement(*helper.new_field(type_name, entry_field, index))
        self._emitter.close_block()

        return name

    # ===== Fields =====

    def gen_field(self, field: FieldDescriptor, index: int):
        """Emit the statement of one declared field.

        Skipped fields emit nothing, but still consume their index.

        Args:
            field (FieldDescriptor): The field to emit.
            index (int): The 1-based position of the field among all declared fields.
        """
        kind = classify_field(field, self.registry)
        logger.debug(f"Field '{field.name}' is classified as {kind}.")

        if kind == FieldKind.SKIP:
            return

        if kind == FieldKind.SCALAR:
            type_name = self.registry.lookup(field.declared_type)

        elif kind == FieldKind.ENUM:
            self.gen_enum(field.declared_type)
            type_name = self.registry.lookup(field.declared_type)

        elif kind == FieldKind.MAP:
            entry_name = self.gen_map_entry(field)
            self._emitter.statement(*helper.new_field(entry_name, field.name, index, repeated=True))
            return

        elif kind in REPEATED_KINDS:
            (element_type,) = element_types(field, kind)
            type_name = self.reference(element_type)
            self._emitter.statement(*helper.new_field(type_name, field.name, index, repeated=True))
            return

        else:
            self.enqueue(field.declared_type)
            type_name = helper.get_simple_name(field.declared_type)

        self._emitter.statement(*helper.new_field(type_name, field.name, index))

    # ===== Operations =====

    def gen_operations(self):
        """Emit one message per operation of the root class that takes parameters."""
        self._emitter.raw()

        for operation in introspection.get_operations(self._root):
            if not operation.parameters:
                continue

            self._emitter.open_block(ProtoKeyword.MESSAGE, operation.name)
            for index, parameter in enumerate(operation.parameters, start=1):
                self.gen_parameter(parameter, index)
            self._emitter.close_block()

            logger.debug(f"Emitted operation message '{operation.name}'.")

    def gen_parameter(self, parameter: ParameterDescriptor, index: int):
        """Emit the statement of one operation parameter.

        Only known types and arrays are resolved. Any other type is written under its
        fully qualified name, without emitting a message for it.

        Args:
            parameter (ParameterDescriptor): The parameter to emit.
            index (int): The 1-based position of the parameter.
        """
        known_name = None if parameter.generic_arguments else self.registry.lookup(parameter.declared_type)

        if known_name is not None:
            self._emitter.statement(*helper.new_field(known_name, parameter.name, index))

        elif introspection.is_array(parameter.declared_type, parameter.generic_arguments):
            component: Any = parameter.generic_arguments[0]
            type_name = self.registry.lookup(component) or helper.get_qualified_name(component)
            self._emitter.statement(*helper.new_field(type_name, parameter.name, index, repeated=True))

        else:
            type_name = helper.get_qualified_name(parameter.declared_type)
            self._emitter.statement(*helper.new_field(type_name, parameter.name, index))

    # ===== Output =====

    def _generate(self) -> str:
        self._reset_state()

        self._add_header()
        self._add_syntax()
        self._add_package()

        self.traverse(self._root)
        self.gen_operations()

        logger.info(
            f"Generated the schema of '{helper.get_qualified_name(self._root)}' "
            f"with {self.registry.emitted_count} message and enum block(s)."
        )
        return self._emitter.getvalue()

    def dumps(self) -> str:
        """Generates the schema document, or returns it if it was generated before.

        Returns:
            str: The schema document.
        """
        if self._document is None:
            self._document = self._generate()

        return self._document

    @override
    def __str__(self) -> str:
        """The schema document, see `dumps`."""
        return self.dumps()


def generate(root_type: type | None, config: GeneratorConfig | None = None) -> str:
    """Generate the schema document for a class in a fresh session.

    Args:
        root_type (type | None): The class to generate the schema for.
        config (GeneratorConfig | None, optional): The generator settings. Defaults to None.

    Returns:
        str: The schema document.
    """
    return Writer(root_type, config).dumps()
