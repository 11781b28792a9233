"""
Type model and builder API for generated Java classes and interfaces.

A top-level type is created with :func:`java_class` or :func:`java_interface`
and populated through its builder methods. Every builder call validates its
modifiers immediately, registers the imports its types need and returns the
created descriptor. Nested types share the import set and warning list of
the outermost type, since they end up in the same compilation unit.
"""

from typing import List, Optional, Sequence, Union

from ...logging_config import get_logger
from ..core.naming import validate_identifier, validate_package_name
from .imports import ImportEntry, ImportSet
from .members import (
    WEIGHT_SUBTYPE,
    Category,
    Constructor,
    DuplicateMemberError,
    Field,
    Method,
    MemberOptions,
    member_sort_key,
    resolve_options,
    signature,
)
from .modifiers import ABSTRACT, Enclosing, MemberKind, Modifier, validate_modifiers
from .types import Annotation, TypeLike, TypeParameter, TypeRef, TypeVariable

logger = get_logger(__name__)

Member = Union[Field, Constructor, Method, "JavaType"]


class JavaType:
    """Common state of a generated class or interface."""

    kind: MemberKind
    enclosing_kind: Enclosing
    weight = WEIGHT_SUBTYPE

    def __init__(
        self,
        name: str,
        package: str,
        *,
        modifiers: int = 0,
        interfaces: Sequence[TypeLike] = (),
        documentation: str = "",
        since: str = "",
        authors: Sequence[str] = (),
        see: Sequence[str] = (),
        annotations: Sequence[Annotation] = (),
        category: str = "",
        enclosing: Optional["JavaType"] = None,
    ):
        self.name = validate_identifier(name, f"{self.kind.value} name")
        self.package = validate_package_name(package)
        self.category = Category.parse(category).tag
        self.enclosing = enclosing

        self.documentation = documentation
        self.since = since
        self.authors = tuple(authors)
        self.see = tuple(see)

        if enclosing is None:
            self.imports = ImportSet(package)
            self.warnings: List[str] = []
        else:
            self.imports = enclosing.imports
            self.warnings = enclosing.warnings

        self.modifiers = Modifier(modifiers)
        self.modifier_text = validate_modifiers(
            modifiers,
            self.kind,
            enclosing.enclosing_kind if enclosing else Enclosing.NONE,
            name=name,
            warnings=self.warnings,
        )

        self.annotations: List[Annotation] = []
        self.interfaces: List[TypeLike] = []
        self.type_parameters: List[TypeParameter] = []
        self._members: List[Member] = []
        self._identities = set()

        self.add_annotations(*annotations)
        self.add_interfaces(*interfaces)

        logger.debug("Declared %s %s", self.kind.value, self.qualified_name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.qualified_name!r})"

    # Identity and ordering

    @property
    def nested_name(self) -> str:
        """Name relative to the package, e.g. ``Outer.Inner``."""
        if self.enclosing is None:
            return self.name
        return f"{self.enclosing.nested_name}.{self.name}"

    @property
    def qualified_name(self) -> str:
        if not self.package:
            return self.nested_name
        return f"{self.package}.{self.nested_name}"

    @property
    def is_abstract(self) -> bool:
        return bool(self.modifiers & ABSTRACT)

    def ref(self, *type_arguments: TypeLike) -> TypeRef:
        """A reference to this type, optionally parameterized."""
        return TypeRef(self.nested_name, self.package, tuple(type_arguments))

    def identity(self) -> tuple:
        return ("type", self.name)

    def overload_key(self) -> tuple:
        return ()

    @property
    def members(self) -> List[Member]:
        """Members in canonical order."""
        return sorted(self._members, key=member_sort_key)

    # Type level declarations

    def add_annotations(self, *annotations: Annotation) -> "JavaType":
        for annotation in annotations:
            self.imports.register(annotation.type)
            self.annotations.append(annotation)
        return self

    def add_interfaces(self, *interfaces: TypeLike) -> "JavaType":
        """Add implemented (or, for interfaces, extended) types. Duplicates are ignored."""
        for interface in interfaces:
            self.imports.register(interface)
            if interface not in self.interfaces:
                self.interfaces.append(interface)
        return self

    def type_parameter(self, name: str, documentation: str = "", *bounds: TypeLike) -> TypeVariable:
        """Declare a type parameter and return its type variable."""
        parameter = TypeParameter(name, documentation, bounds)
        for bound in bounds:
            self.imports.register(bound)
        self.type_parameters.append(parameter)
        return parameter.variable

    def add_import(self, type_ref: Union[TypeLike, ImportEntry]) -> "JavaType":
        """Explicitly import a type (and its type arguments) or a prepared entry."""
        if isinstance(type_ref, ImportEntry):
            self.imports.add(type_ref)
        else:
            self.imports.register(type_ref)
        return self

    def add_static_import(self, type_ref: TypeRef, member: str = "*") -> "JavaType":
        """Statically import ``member`` (or everything) from ``type_ref``."""
        self.imports.add(
            ImportEntry(type_ref.package, f"{type_ref.name}.{member}", is_static=True)
        )
        return self

    def add_wildcard_import(self, package: str) -> "JavaType":
        """Import a whole package."""
        self.imports.add(ImportEntry.for_package(validate_package_name(package)))
        return self

    # Members

    def _check_unique(self, identity: tuple, name: str):
        """Reject a declaration colliding with an existing member, before any side effect."""
        if identity in self._identities:
            raise DuplicateMemberError(f"Duplicate {identity[0]} {name!r} in {self.qualified_name}")

    def _add_member(self, member: Member) -> Member:
        identity = member.identity()
        self._check_unique(identity, member.name)

        if not isinstance(member, JavaType):
            for ref in member.referenced_types():
                self.imports.register(ref)

        self._identities.add(identity)
        self._members.append(member)
        return member

    def _modifier_text(self, kind: MemberKind, options: MemberOptions, name: str, has_body: bool = False) -> str:
        return validate_modifiers(
            options.modifiers,
            kind,
            self.enclosing_kind,
            name=name,
            has_body=has_body,
            enclosing_abstract=self.is_abstract,
            warnings=self.warnings,
        )

    def field(
        self,
        type: TypeLike,
        name: str,
        documentation: str = "",
        *,
        value: str = "",
        options: Optional[MemberOptions] = None,
        **kwargs,
    ) -> Field:
        """Declare a field, optionally initialized with ``value``."""
        validate_identifier(name, "field name")
        options = resolve_options(options, kwargs)
        self._check_unique(("field", name), name)

        return self._add_member(
            Field(
                type=type,
                name=name,
                documentation=documentation,
                modifier_text=self._modifier_text(MemberKind.FIELD, options, name),
                value=value,
                options=options,
            )
        )

    def method(
        self,
        return_type: TypeLike,
        name: str,
        documentation: str = "",
        *parameters,
        body: Optional[str] = None,
        return_doc: str = "",
        options: Optional[MemberOptions] = None,
        **kwargs,
    ) -> Method:
        """Declare a method. Without ``body`` it is declared without implementation."""
        validate_identifier(name, "method name")
        options = resolve_options(options, kwargs)
        self._check_unique(("method", name, signature(parameters)), name)

        return self._add_member(
            Method(
                name=name,
                documentation=documentation,
                parameters=tuple(parameters),
                modifier_text=self._modifier_text(
                    MemberKind.METHOD, options, name, has_body=body is not None
                ),
                body=body,
                options=options,
                return_type=return_type,
                return_doc=return_doc,
            )
        )

    def constructor(
        self,
        documentation: str = "",
        *parameters,
        body: str = "",
        options: Optional[MemberOptions] = None,
        **kwargs,
    ) -> Constructor:
        """Declare a constructor."""
        options = resolve_options(options, kwargs)
        self._check_unique(("constructor", signature(parameters)), self.name)

        return self._add_member(
            Constructor(
                name=self.name,
                documentation=documentation,
                parameters=tuple(parameters),
                modifier_text=self._modifier_text(MemberKind.CONSTRUCTOR, options, self.name),
                body=body,
                options=options,
            )
        )

    def nested_class(self, name: str, **kwargs) -> "JavaClass":
        """Declare a member class and return it for population."""
        self._check_unique(("type", name), name)
        return self._add_member(JavaClass(name, self.package, enclosing=self, **kwargs))

    def nested_interface(self, name: str, **kwargs) -> "JavaInterface":
        """Declare a member interface and return it for population."""
        self._check_unique(("type", name), name)
        return self._add_member(JavaInterface(name, self.package, enclosing=self, **kwargs))


class JavaClass(JavaType):
    """A generated class."""

    kind = MemberKind.CLASS
    enclosing_kind = Enclosing.CLASS

    def __init__(self, name: str, package: str, *, superclass: Optional[TypeLike] = None, **kwargs):
        self.superclass = superclass
        super().__init__(name, package, **kwargs)

        if superclass is not None:
            self.imports.register(superclass)


class JavaInterface(JavaType):
    """A generated interface. Constructors cannot be declared."""

    kind = MemberKind.INTERFACE
    enclosing_kind = Enclosing.INTERFACE


def java_class(name: str, package: str, **kwargs) -> JavaClass:
    """Create a top-level class."""
    return JavaClass(name, package, **kwargs)


def java_interface(name: str, package: str, **kwargs) -> JavaInterface:
    """Create a top-level interface."""
    return JavaInterface(name, package, **kwargs)
