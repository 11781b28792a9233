"""
Java code generator module.

Builder-style model of Java classes and interfaces, modifier validation,
import resolution and the renderer producing the final source text.
"""

from .generator import JavaGenerator, create_java_generator
from .imports import ImportEntry, ImportSet
from .javadoc import INHERIT_DOC, to_javadoc
from .members import (
    Category,
    CategoryError,
    Constructor,
    DuplicateMemberError,
    Field,
    MemberOptions,
    Method,
)
from .model import JavaClass, JavaInterface, JavaType, java_class, java_interface
from .modifiers import (
    ABSTRACT,
    FINAL,
    NATIVE,
    PRIVATE,
    PROTECTED,
    PUBLIC,
    STATIC,
    STRICT,
    SYNCHRONIZED,
    TRANSIENT,
    VOLATILE,
    Enclosing,
    IllegalModifierError,
    MemberKind,
    Modifier,
    validate_modifiers,
)
from .types import (
    BOOLEAN,
    BYTE,
    CHAR,
    DEPRECATED,
    DOUBLE,
    FLOAT,
    FUNCTIONAL_INTERFACE,
    INT,
    LONG,
    OBJECT,
    OVERRIDE,
    SHORT,
    STRING,
    VOID,
    Annotation,
    ArrayType,
    Parameter,
    TypeParameter,
    TypeRef,
    TypeVariable,
    WildcardType,
    java_lang,
)

__all__ = [
    # Generator
    "JavaGenerator",
    "create_java_generator",
    # Model
    "JavaType",
    "JavaClass",
    "JavaInterface",
    "java_class",
    "java_interface",
    "Field",
    "Constructor",
    "Method",
    "MemberOptions",
    "Category",
    # Imports and documentation
    "ImportEntry",
    "ImportSet",
    "INHERIT_DOC",
    "to_javadoc",
    # Modifiers
    "Modifier",
    "MemberKind",
    "Enclosing",
    "validate_modifiers",
    "PUBLIC",
    "PROTECTED",
    "PRIVATE",
    "ABSTRACT",
    "STATIC",
    "FINAL",
    "TRANSIENT",
    "VOLATILE",
    "SYNCHRONIZED",
    "NATIVE",
    "STRICT",
    # Types
    "TypeRef",
    "TypeVariable",
    "WildcardType",
    "ArrayType",
    "Annotation",
    "Parameter",
    "TypeParameter",
    "java_lang",
    "BOOLEAN",
    "BYTE",
    "CHAR",
    "SHORT",
    "INT",
    "LONG",
    "FLOAT",
    "DOUBLE",
    "VOID",
    "OBJECT",
    "STRING",
    "OVERRIDE",
    "DEPRECATED",
    "FUNCTIONAL_INTERFACE",
    # Errors
    "IllegalModifierError",
    "CategoryError",
    "DuplicateMemberError",
]
