"""
Java type references used by the source model.

Every type mentioned by a generated member is one of the immutable values
defined here. They know how to print themselves and which importable
types they reference.
"""

from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

from ..core.naming import validate_identifier, validate_package_name


class _TypeOps:
    """Operations shared by all type references."""

    def param(
        self, name: str, documentation: str = "", annotations=()
    ) -> "Parameter":
        """Build a method/constructor parameter of this type."""
        return Parameter(self, name, documentation, tuple(annotations))

    def array(self, dimensions: int = 1) -> "ArrayType":
        """Return an array type with this type as component."""
        return ArrayType(self, dimensions)


@dataclass(frozen=True)
class TypeRef(_TypeOps):
    """
    Reference to a named (class, interface or primitive) type.

    ``name`` may be dotted for member types (``Map.Entry``); the import is
    registered for the outermost type only.
    """

    name: str
    package: str = ""
    type_arguments: Tuple["TypeLike", ...] = field(default=())
    is_primitive: bool = False

    def __post_init__(self):
        if not self.is_primitive:
            for part in self.name.split("."):
                validate_identifier(part, "type name")
            validate_package_name(self.package)
        object.__setattr__(self, "type_arguments", tuple(self.type_arguments))

    def __str__(self) -> str:
        if not self.type_arguments:
            return self.name
        return f"{self.name}<{', '.join(str(a) for a in self.type_arguments)}>"

    @property
    def simple_name(self) -> str:
        """Type name without type arguments."""
        return self.name

    @property
    def qualified_name(self) -> str:
        """Fully qualified name without type arguments."""
        return f"{self.package}.{self.name}" if self.package else self.name

    @property
    def import_name(self) -> str:
        """Name of the top-level type that has to be imported."""
        return self.name.split(".")[0]

    def with_arguments(self, *type_arguments: "TypeLike") -> "TypeRef":
        """Return a parameterized copy of this type."""
        return TypeRef(self.name, self.package, tuple(type_arguments), self.is_primitive)

    def referenced_types(self) -> Iterator["TypeRef"]:
        """Yield every importable type this reference mentions."""
        if not self.is_primitive and self.package:
            yield self
        for argument in self.type_arguments:
            yield from argument.referenced_types()


@dataclass(frozen=True)
class TypeVariable(_TypeOps):
    """A generic type variable such as ``T``. Never imported."""

    name: str

    def __post_init__(self):
        validate_identifier(self.name, "type variable")

    def __str__(self) -> str:
        return self.name

    @property
    def simple_name(self) -> str:
        return self.name

    def referenced_types(self) -> Iterator[TypeRef]:
        return iter(())


@dataclass(frozen=True)
class WildcardType(_TypeOps):
    """``?``, ``? extends Bound`` or ``? super Bound``."""

    bound: "TypeLike" = None
    upper: bool = True

    def __str__(self) -> str:
        if self.bound is None:
            return "?"
        return f"? {'extends' if self.upper else 'super'} {self.bound}"

    @property
    def simple_name(self) -> str:
        return str(self)

    def referenced_types(self) -> Iterator[TypeRef]:
        if self.bound is not None:
            yield from self.bound.referenced_types()


@dataclass(frozen=True)
class ArrayType(_TypeOps):
    """Array of a component type."""

    component: "TypeLike"
    dimensions: int = 1

    def __post_init__(self):
        if self.dimensions < 1:
            raise ValueError(f"Array dimensions must be positive: {self.dimensions}")

    def __str__(self) -> str:
        return f"{self.component}{'[]' * self.dimensions}"

    @property
    def simple_name(self) -> str:
        return f"{self.component.simple_name}{'[]' * self.dimensions}"

    def referenced_types(self) -> Iterator[TypeRef]:
        yield from self.component.referenced_types()


TypeLike = Union[TypeRef, TypeVariable, WildcardType, ArrayType]


@dataclass(frozen=True)
class Annotation:
    """An annotation usage, e.g. ``@Override`` or ``@SuppressWarnings("x")``."""

    type: TypeRef
    parameters: str = ""

    def __str__(self) -> str:
        if self.parameters:
            return f"@{self.type}({self.parameters})"
        return f"@{self.type}"

    def referenced_types(self) -> Iterator[TypeRef]:
        yield from self.type.referenced_types()


@dataclass(frozen=True)
class Parameter:
    """A method or constructor parameter."""

    type: TypeLike
    name: str
    documentation: str = ""
    annotations: Tuple[Annotation, ...] = ()

    def __post_init__(self):
        validate_identifier(self.name, "parameter name")
        object.__setattr__(self, "annotations", tuple(self.annotations))

    def __str__(self) -> str:
        return " ".join([*(str(a) for a in self.annotations), str(self.type), self.name])

    def referenced_types(self) -> Iterator[TypeRef]:
        yield from self.type.referenced_types()
        for annotation in self.annotations:
            yield from annotation.referenced_types()


@dataclass(frozen=True)
class TypeParameter:
    """A declared type parameter, e.g. ``<T extends Number>``."""

    name: str
    documentation: str = ""
    bounds: Tuple[TypeLike, ...] = ()

    def __post_init__(self):
        validate_identifier(self.name, "type parameter")
        object.__setattr__(self, "bounds", tuple(self.bounds))

    def __str__(self) -> str:
        if not self.bounds:
            return self.name
        return f"{self.name} extends {' & '.join(str(b) for b in self.bounds)}"

    @property
    def variable(self) -> TypeVariable:
        """The type variable introduced by this parameter."""
        return TypeVariable(self.name)

    def referenced_types(self) -> Iterator[TypeRef]:
        for bound in self.bounds:
            yield from bound.referenced_types()


def primitive(name: str) -> TypeRef:
    """Reference to a primitive type (or ``void``)."""
    return TypeRef(name, is_primitive=True)


def java_lang(name: str, *type_arguments: TypeLike) -> TypeRef:
    """Reference to a type from the implicitly imported ``java.lang``."""
    return TypeRef(name, "java.lang", type_arguments)


BOOLEAN = primitive("boolean")
BYTE = primitive("byte")
CHAR = primitive("char")
SHORT = primitive("short")
INT = primitive("int")
LONG = primitive("long")
FLOAT = primitive("float")
DOUBLE = primitive("double")
VOID = primitive("void")

OBJECT = java_lang("Object")
STRING = java_lang("String")

OVERRIDE = Annotation(java_lang("Override"))
DEPRECATED = Annotation(java_lang("Deprecated"))
FUNCTIONAL_INTERFACE = Annotation(java_lang("FunctionalInterface"))
