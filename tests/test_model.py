"""Tests for the type model and builder API."""

from __future__ import annotations

import pytest

from beangen.codegen.core.naming import InvalidNameError
from beangen.codegen.java import (
    ABSTRACT,
    FINAL,
    PUBLIC,
    STATIC,
    IllegalModifierError,
    ImportEntry,
    JavaClass,
    JavaInterface,
    TypeRef,
    TypeVariable,
    java_class,
    java_interface,
)
from beangen.codegen.java.types import INT, OBJECT, OVERRIDE, STRING, VOID, java_lang

OBSERVABLE = TypeRef("ObservableValue", "com.example.beans.value")


class TestFactories:
    """Tests for the top-level factories."""

    def test_java_class(self) -> None:
        cls = java_class("IntProperty", "com.example.beans", modifiers=PUBLIC | ABSTRACT)

        assert isinstance(cls, JavaClass)
        assert cls.modifier_text == "public abstract"
        assert cls.qualified_name == "com.example.beans.IntProperty"
        assert cls.is_abstract

    def test_java_interface(self) -> None:
        iface = java_interface("Listener", "com.example.beans")

        assert isinstance(iface, JavaInterface)
        assert iface.modifier_text == ""

    def test_default_package(self) -> None:
        cls = java_class("Main", "")
        assert cls.qualified_name == "Main"

    @pytest.mark.parametrize("name", ["class", "1Value", "my-type", "", "null"])
    def test_invalid_type_name(self, name: str) -> None:
        with pytest.raises(InvalidNameError):
            java_class(name, "com.example")

    def test_invalid_package(self) -> None:
        with pytest.raises(InvalidNameError):
            java_class("Value", "com.example.int")

    def test_illegal_type_modifier(self) -> None:
        with pytest.raises(IllegalModifierError):
            java_class("Value", "com.example", modifiers=STATIC)

    def test_superclass_registers_import(self) -> None:
        base = TypeRef("AbstractProperty", "com.example.beans.property")
        cls = java_class("SimpleIntProperty", "com.example.beans", superclass=base)

        assert ImportEntry("com.example.beans.property", "AbstractProperty") in cls.imports


class TestTypeDeclarations:
    """Tests for type level builder methods."""

    def test_interfaces_deduplicated(self) -> None:
        cls = java_class("Value", "com.example")
        cls.add_interfaces(OBSERVABLE, OBSERVABLE.with_arguments(STRING))
        cls.add_interfaces(OBSERVABLE)

        assert cls.interfaces == [OBSERVABLE, OBSERVABLE.with_arguments(STRING)]
        assert cls.imports.resolve(5) == [ImportEntry("com.example.beans.value", "ObservableValue")]

    def test_type_parameter_returns_variable(self) -> None:
        cls = java_class("Box", "com.example")
        variable = cls.type_parameter("T", "the boxed type", java_lang("Number"))

        assert variable == TypeVariable("T")
        assert str(cls.type_parameters[0]) == "T extends Number"

    def test_add_import_entry(self) -> None:
        cls = java_class("Value", "com.example")
        cls.add_import(ImportEntry("java.util", "Objects"))
        cls.add_import(TypeRef("List", "java.util"))

        assert len(cls.imports) == 2

    def test_static_import(self) -> None:
        cls = java_class("Value", "com.example")
        cls.add_static_import(TypeRef("Objects", "java.util"), "requireNonNull")

        entry = next(iter(cls.imports))
        assert entry.render() == "import static java.util.Objects.requireNonNull;"

    def test_wildcard_import(self) -> None:
        cls = java_class("Value", "com.example")
        cls.add_wildcard_import("java.util.function")

        assert ImportEntry.for_package("java.util.function") in cls.imports


class TestMembers:
    """Tests for member builder methods."""

    def test_field_returns_descriptor(self) -> None:
        cls = java_class("Value", "com.example")
        field = cls.field(INT, "value", "The value.", value="0", modifiers=PUBLIC | STATIC | FINAL)

        assert field.modifier_text == "public static final"
        assert field.value == "0"
        assert cls.members == [field]

    def test_member_types_are_imported(self) -> None:
        cls = java_class("Value", "com.example")
        listener = TypeRef("InvalidationListener", "com.example.beans")
        cls.method(VOID, "addListener", "", listener.param("listener"), body="")
        cls.method(TypeRef("Optional", "java.util", (STRING,)), "describe", body="return null;")

        rendered = [entry.render() for entry in cls.imports.resolve(5)]
        assert rendered == [
            "import com.example.beans.InvalidationListener;",
            "import java.util.Optional;",
        ]

    def test_invalid_member_names(self) -> None:
        cls = java_class("Value", "com.example")
        with pytest.raises(InvalidNameError):
            cls.field(INT, "final")
        with pytest.raises(InvalidNameError):
            cls.method(INT, "get value")
        with pytest.raises(InvalidNameError):
            INT.param("int")

    def test_constructor_in_interface_rejected(self) -> None:
        iface = java_interface("Listener", "com.example")
        with pytest.raises(IllegalModifierError):
            iface.constructor()

    def test_abstract_method_requires_abstract_class(self) -> None:
        cls = java_class("Value", "com.example")
        with pytest.raises(IllegalModifierError):
            cls.method(INT, "get", modifiers=ABSTRACT)

        abstract = java_class("AbstractValue", "com.example", modifiers=ABSTRACT)
        method = abstract.method(INT, "get", modifiers=PUBLIC | ABSTRACT)
        assert method.body is None

    def test_warnings_collected_on_type(self) -> None:
        iface = java_interface("Listener", "com.example")
        iface.method(VOID, "changed", "", OBJECT.param("value"), modifiers=PUBLIC)

        assert iface.warnings == ['Redundant modifier "public" on method "changed" in interface']


class TestNestedTypes:
    """Tests for nested type declarations."""

    def test_nested_shares_imports_and_warnings(self) -> None:
        outer = java_class("Outer", "com.example")
        inner = outer.nested_interface("Inner", modifiers=PUBLIC | STATIC)
        inner.field(TypeRef("List", "java.util"), "ITEMS", modifiers=PUBLIC)

        assert inner.imports is outer.imports
        assert ImportEntry("java.util", "List") in outer.imports
        assert len(outer.warnings) == 2

    def test_nested_names(self) -> None:
        outer = java_class("Outer", "com.example")
        inner = outer.nested_class("Inner", modifiers=PUBLIC | STATIC | FINAL)

        assert inner.modifier_text == "public static final"
        assert inner.nested_name == "Outer.Inner"
        assert inner.qualified_name == "com.example.Outer.Inner"
        assert str(inner.ref()) == "Outer.Inner"
        assert inner.enclosing is outer

    def test_nested_type_refs_need_no_import(self) -> None:
        outer = java_class("Outer", "com.example")
        inner = outer.nested_class("Inner")
        outer.field(inner.ref(), "inner")

        assert len(outer.imports) == 0

    def test_override_annotation_is_java_lang(self) -> None:
        cls = java_class("Value", "com.example")
        cls.method(STRING, "toString", body="return \"\";", annotations=[OVERRIDE])

        assert cls.imports.resolve(5) == []
