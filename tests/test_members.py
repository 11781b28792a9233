"""Tests for member descriptors and canonical ordering."""

from __future__ import annotations

import logging

import pytest

from beangen.codegen.java import (
    PUBLIC,
    VOLATILE,
    IllegalModifierError,
    ImportEntry,
    TypeRef,
    java_class,
    java_interface,
)
from beangen.codegen.java.members import (
    Category,
    CategoryError,
    Constructor,
    DuplicateMemberError,
    Field,
    MemberOptions,
    Method,
)
from beangen.codegen.java.types import INT, LONG, STRING, VOID


def _names(java_type) -> list[str]:
    return [member.name for member in java_type.members]


class TestCategory:
    """Tests for category tag parsing."""

    def test_parse(self) -> None:
        category = Category.parse("2_Accessors")
        assert category.priority == 2
        assert category.title == "Accessors"

    def test_parse_untitled(self) -> None:
        category = Category.parse("0_")
        assert category.priority == 0
        assert category.title == ""

    def test_parse_default(self) -> None:
        assert Category.parse("") == Category("", None, "")

    @pytest.mark.parametrize(
        "tag", ["Accessors", "_Accessors", "x_Accessors", "1", "1_a\nb", "\u0661_Arabic"]
    )
    def test_parse_malformed(self, tag: str) -> None:
        with pytest.raises(CategoryError):
            Category.parse(tag)

    def test_options_validate_category(self) -> None:
        """Test that a malformed category is rejected at declaration time."""
        with pytest.raises(CategoryError):
            MemberOptions(category="Accessors")

    def test_builder_validates_category(self) -> None:
        cls = java_class("Value", "com.example")
        with pytest.raises(CategoryError):
            cls.field(INT, "value", category="value")

    def test_builder_rejects_multiline_title(self) -> None:
        cls = java_class("Value", "com.example")
        with pytest.raises(CategoryError):
            cls.field(INT, "value", category="1_a\nb")

        assert cls.members == []


class TestMemberOptions:
    """Tests for MemberOptions."""

    def test_sequences_become_tuples(self) -> None:
        options = MemberOptions(see=["Other"], throws=["IllegalStateException if bound"])
        assert options.see == ("Other",)
        assert options.throws == ("IllegalStateException if bound",)

    def test_keywords_override_options(self) -> None:
        cls = java_class("Value", "com.example")
        field = cls.field(
            INT, "value", options=MemberOptions(category="1_State", since="1.0"), since="2.0"
        )

        assert field.options.category == "1_State"
        assert field.options.since == "2.0"


class TestOrdering:
    """Tests for the member sort key."""

    def test_weight_orders_kinds(self) -> None:
        """Test that fields precede constructors, methods and nested types."""
        cls = java_class("Value", "com.example")
        cls.nested_class("Alpha")
        cls.method(VOID, "aaa", body="")
        cls.constructor()
        cls.field(INT, "zzz")

        members = cls.members
        assert isinstance(members[0], Field)
        assert isinstance(members[1], Constructor)
        assert isinstance(members[2], Method)
        assert members[3].name == "Alpha"

    def test_category_before_weight(self) -> None:
        cls = java_class("Value", "com.example")
        cls.method(VOID, "first", body="")
        cls.field(INT, "second", category="1_State")
        cls.field(INT, "third", category="0_")

        assert _names(cls) == ["first", "third", "second"]

    def test_names_sorted_within_bucket(self) -> None:
        cls = java_class("Value", "com.example")
        for name in ("gamma", "alpha", "beta"):
            cls.field(INT, name)

        assert _names(cls) == ["alpha", "beta", "gamma"]

    def test_nested_types_last_in_category(self) -> None:
        cls = java_class("Value", "com.example")
        cls.nested_interface("Listener", category="1_Events")
        cls.method(VOID, "addListener", body="", category="1_Events")

        assert _names(cls) == ["addListener", "Listener"]

    def test_overloads_preserve_declaration_order(self) -> None:
        cls = java_class("Value", "com.example")
        cls.method(VOID, "set", "", LONG.param("value"), body="")
        cls.method(VOID, "set", "", INT.param("value"), body="")

        assert [m.parameters[0].type for m in cls.members] == [LONG, INT]

    def test_overloads_sorted_by_parameter_types(self) -> None:
        """Test the parameter type tie-break, shorter prefix lists first."""
        cls = java_class("Value", "com.example")
        cls.method(VOID, "of", "", LONG.param("value"), body="", preserve_order=False)
        cls.method(VOID, "of", "", INT.param("value"), STRING.param("name"), body="", preserve_order=False)
        cls.method(VOID, "of", "", INT.param("value"), body="", preserve_order=False)
        cls.method(VOID, "of", body="", preserve_order=False)

        assert [m.parameter_types() for m in cls.members] == [
            (),
            ("int",),
            ("int", "String"),
            ("long",),
        ]


class TestDuplicates:
    """Tests for colliding member declarations."""

    def test_duplicate_field(self) -> None:
        cls = java_class("Value", "com.example")
        cls.field(INT, "value")
        with pytest.raises(DuplicateMemberError, match="value"):
            cls.field(LONG, "value", category="1_Other")

    def test_duplicate_method_signature(self) -> None:
        cls = java_class("Value", "com.example")
        cls.method(INT, "get", body="return 0;")
        with pytest.raises(DuplicateMemberError):
            cls.method(LONG, "get", body="return 0L;")

    def test_overloads_allowed(self) -> None:
        cls = java_class("Value", "com.example")
        cls.method(VOID, "set", "", INT.param("value"), body="")
        cls.method(VOID, "set", "", LONG.param("value"), body="")

        assert len(cls.members) == 2

    def test_duplicate_constructor(self) -> None:
        cls = java_class("Value", "com.example")
        cls.constructor("", INT.param("a"), modifiers=PUBLIC)
        with pytest.raises(DuplicateMemberError):
            cls.constructor("", INT.param("b"))

    def test_duplicate_nested_type(self) -> None:
        cls = java_class("Value", "com.example")
        cls.nested_class("Inner")
        with pytest.raises(DuplicateMemberError):
            cls.nested_interface("Inner")

    def test_rejected_nested_type_leaves_imports_untouched(self) -> None:
        """Test that a colliding nested type registers nothing on the outer type."""
        outer = java_class("Outer", "com.example")
        outer.nested_class("Inner")
        with pytest.raises(DuplicateMemberError):
            outer.nested_class("Inner", superclass=TypeRef("Base", "com.other"))

        assert ImportEntry("com.other", "Base") not in outer.imports
        assert len(outer.imports) == 0

    def test_rejected_field_leaves_warnings_untouched(self) -> None:
        """Test that a colliding field reports no redundant modifier."""
        iface = java_interface("Constants", "com.example")
        iface.field(INT, "X", value="1")
        with pytest.raises(DuplicateMemberError):
            iface.field(INT, "X", value="2", modifiers=PUBLIC)

        assert iface.warnings == []
        assert len(iface.members) == 1

    def test_rejected_method_leaves_imports_untouched(self) -> None:
        cls = java_class("Value", "com.example")
        cls.method(INT, "get", body="return 0;")
        with pytest.raises(DuplicateMemberError):
            cls.method(TypeRef("Optional", "java.util"), "get", body="return null;")

        assert cls.imports.resolve(5) == []


class TestIllegalModifierSideEffects:
    """Tests that a rejected modifier combination reports nothing."""

    def test_redundant_before_illegal_not_reported(self, caplog) -> None:
        iface = java_interface("Constants", "com.example")
        with caplog.at_level(logging.WARNING, logger="beangen"):
            with pytest.raises(IllegalModifierError):
                iface.field(INT, "X", value="1", modifiers=PUBLIC | VOLATILE)

        assert iface.warnings == []
        assert "Redundant" not in caplog.text
        assert iface.members == []
