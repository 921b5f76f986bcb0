"""Unit tests for the type registry, the scope stack, the emitter and the helpers."""

from __future__ import annotations

import pytest
import sample_models

from proto_schema_generator import helper
from proto_schema_generator.config import GeneratorConfig
from proto_schema_generator.emitter import Emitter
from proto_schema_generator.proto_types import PROTO3_SCALAR_TYPES
from proto_schema_generator.registry import TypeRegistry
from proto_schema_generator.scope import NoScopeError, ScopeStack


class TestTypeRegistry:
    """Tests for `TypeRegistry`."""

    def test_seeded_with_scalars(self):
        """A new registry knows every scalar type, but has emitted nothing."""
        registry = TypeRegistry(PROTO3_SCALAR_TYPES)

        assert registry.lookup(int) == "sint32"
        assert registry.lookup(str) == "string"
        assert registry.is_scalar(bool)
        assert not registry.is_emitted(int)

    def test_reserve_and_lookup(self):
        """A reserved name is found by lookup, an unknown type is not."""
        registry = TypeRegistry(PROTO3_SCALAR_TYPES)

        assert registry.lookup(sample_models.Tag) is None
        registry.reserve(sample_models.Tag, "Tag")
        assert registry.lookup(sample_models.Tag) == "Tag"

    def test_reserve_overwrites(self):
        """Reserving a name again replaces the previous one."""
        registry = TypeRegistry(PROTO3_SCALAR_TYPES)
        registry.reserve(sample_models.Score, "Person.Map_scores.Score")
        registry.reserve(sample_models.Score, "Score")

        assert registry.lookup(sample_models.Score) == "Score"

    def test_replace(self):
        """Replacing a name removes the old one and reserves the new one."""
        registry = TypeRegistry(PROTO3_SCALAR_TYPES)
        registry.reserve(sample_models.Score, "Score")
        registry.replace(sample_models.Score, "Person.Map_scores.Score")

        assert registry.lookup(sample_models.Score) == "Person.Map_scores.Score"

    def test_scalars_cannot_be_renamed(self):
        """The keyword of a scalar type is fixed."""
        registry = TypeRegistry(PROTO3_SCALAR_TYPES)

        with pytest.raises(ValueError):
            registry.reserve(int, "Integer")

    def test_emitted_types(self):
        """Emitted types are tracked and counted."""
        registry = TypeRegistry(PROTO3_SCALAR_TYPES)
        registry.mark_emitted(sample_models.Tag)

        assert registry.is_emitted(sample_models.Tag)
        assert registry.emitted_count == 1

    def test_sessions_do_not_share_state(self):
        """Names reserved in one registry are unknown to another."""
        first = TypeRegistry(PROTO3_SCALAR_TYPES)
        second = TypeRegistry(PROTO3_SCALAR_TYPES)
        first.reserve(sample_models.Tag, "Tag")

        assert not second.is_known(sample_models.Tag)


class TestScopeStack:
    """Tests for `ScopeStack`."""

    def test_path(self):
        """The path joins the simple names of all open scopes and does not change the stack."""
        scope = ScopeStack()
        scope.push(sample_models.Person)
        scope.push(sample_models.Color)

        assert scope.current_path == "Person.Color"
        assert scope.current_path == "Person.Color"
        assert scope.depth == 2

    def test_enter_is_balanced(self):
        """Entering a scope yields its path and leaves it on exit."""
        scope = ScopeStack()

        with scope.enter(sample_models.Person) as path:
            assert path == "Person"
            assert scope.current is sample_models.Person

        assert len(scope) == 0

    def test_enter_pops_on_error(self):
        """A scope is left even if the emission inside it fails."""
        scope = ScopeStack()

        with pytest.raises(RuntimeError), scope.enter(sample_models.Person):
            raise RuntimeError("emission failed")

        assert len(scope) == 0

    def test_pop_empty(self):
        """Leaving a scope that was never entered is an error."""
        with pytest.raises(NoScopeError):
            ScopeStack().pop()

    def test_empty_path(self):
        """Outside of any scope the path is empty."""
        assert ScopeStack().current_path == ""


class TestEmitter:
    """Tests for `Emitter`."""

    def test_blocks_and_statements(self):
        """Statements are indented by the depth of the open block."""
        emitter = Emitter()
        emitter.open_block("message", "Tag")
        emitter.statement("string", "label", "=", "1")
        emitter.close_block()

        assert emitter.getvalue() == "message Tag{\n\tstring label = 1;\n}\n"
        assert emitter.depth == 0

    def test_custom_indent(self):
        """The indentation unit can be configured."""
        emitter = Emitter(indent="  ")
        emitter.open_block("enum", "Color")
        emitter.statement("RED", "=", "0")
        emitter.close_block()

        assert emitter.getvalue() == "enum Color{\n  RED = 0;\n}\n"

    def test_close_without_open(self):
        """Closing a block that was never opened is an error."""
        with pytest.raises(RuntimeError):
            Emitter().close_block()


class TestHelper:
    """Tests for the naming and formatting helpers."""

    def test_qualified_names(self):
        """Qualified names include the module, except for builtins."""
        assert helper.get_qualified_name(int) == "int"
        assert helper.get_qualified_name(sample_models.Person) == "sample_models.Person"
        assert helper.get_qualified_name(sample_models.Outer.Inner) == "sample_models.Outer.Inner"

    def test_simple_name(self):
        """Simple names omit the module and enclosing classes."""
        assert helper.get_simple_name(sample_models.Outer.Inner) == "Inner"

    def test_last_segment(self):
        """The last segment of a path is its final name."""
        assert helper.last_segment("Person.Map_scores.Score") == "Score"
        assert helper.last_segment("string") == "string"

    def test_new_field(self):
        """Field statements are split into tokens, with an optional `repeated` prefix."""
        assert helper.new_field("string", "name", 1) == ["string", "name", "=", "1"]
        assert helper.new_field("Tag", "tags", 2, repeated=True) == ["repeated", "Tag", "tags", "=", "2"]

    def test_new_option(self):
        """Option values are quoted unless told otherwise."""
        assert helper.new_option("java_outer_classname", "PersonProto") == 'option java_outer_classname="PersonProto";'
        assert helper.new_option("java_multiple_files", "true", quoted=False) == "option java_multiple_files=true;"


class TestGeneratorConfig:
    """Tests for `GeneratorConfig`."""

    def test_scalar_table_is_read_only(self):
        """The scalar table of a configuration cannot be changed after creation."""
        config = GeneratorConfig(scalar_types={int: "int64"})

        with pytest.raises(TypeError):
            config.scalar_types[str] = "string"  # type: ignore[index]

    def test_default_table(self):
        """The default configuration uses the proto3 scalar table."""
        assert GeneratorConfig().scalar_types[int] == "sint32"
