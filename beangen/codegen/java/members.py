"""
Member descriptors: fields, constructors and methods.

Members are plain data. Ordering inside a type is defined by
:func:`member_sort_key`: category tag, then kind weight, then name, then
(optionally) parameter types for overloads.
"""

import re
import sys
from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Dict, Iterator, Optional, Tuple

from .types import Annotation, Parameter, TypeLike, TypeParameter, TypeRef

WEIGHT_FIELD = 0
WEIGHT_CONSTRUCTOR = 1
WEIGHT_METHOD = 2
WEIGHT_SUBTYPE = sys.maxsize

_CATEGORY = re.compile(r"([0-9]+)_(.*)")


class CategoryError(ValueError):
    """Raised for a category tag not of the form ``<digits>_<title>``."""

    pass


class DuplicateMemberError(ValueError):
    """Raised when a member collides with one already declared."""

    pass


@dataclass(frozen=True)
class Category:
    """Parsed category tag. The empty tag is the untitled default category."""

    tag: str
    priority: Optional[int]
    title: str

    @classmethod
    def parse(cls, tag: str) -> "Category":
        if tag == "":
            return cls("", None, "")

        match = _CATEGORY.fullmatch(tag)
        if match is None:
            raise CategoryError(
                f"Category {tag!r} does not match the pattern '<digits>_<title>'"
            )
        return cls(tag, int(match.group(1)), match.group(2))


@dataclass(frozen=True)
class MemberOptions:
    """
    Per-declaration options shared by every builder call.

    Attributes:
        modifiers: Requested ``Modifier`` bits
        category: Section tag, ``"<digits>_<title>"`` or empty
        since: Version for the ``@since`` tag
        throws: ``@throws`` documentation entries, e.g. ``"IllegalStateException if bound"``
        see: ``@see`` references
        type_parameters: Generic parameters of a method or constructor
        annotations: Annotations placed before the declaration
        preserve_order: Keep overloads in declaration order; when False
            overloads are ordered by their parameter type names
    """

    modifiers: int = 0
    category: str = ""
    since: str = ""
    throws: Tuple[str, ...] = ()
    see: Tuple[str, ...] = ()
    type_parameters: Tuple[TypeParameter, ...] = ()
    annotations: Tuple[Annotation, ...] = ()
    preserve_order: bool = True

    def __post_init__(self):
        Category.parse(self.category)
        for name in ("throws", "see", "type_parameters", "annotations"):
            object.__setattr__(self, name, tuple(getattr(self, name)))


def signature(parameters) -> Tuple[str, ...]:
    """Parameter types as written, identifying an overload."""
    return tuple(str(p.type) for p in parameters)


def resolve_options(options: Optional[MemberOptions], overrides: Dict[str, Any]) -> MemberOptions:
    """Merge keyword overrides into an options object."""
    return replace(options or MemberOptions(), **overrides)


@dataclass
class Field:
    """A field declaration."""

    weight: ClassVar[int] = WEIGHT_FIELD

    type: TypeLike
    name: str
    documentation: str
    modifier_text: str
    value: str = ""
    options: MemberOptions = field(default_factory=MemberOptions)

    @property
    def category(self) -> str:
        return self.options.category

    def identity(self) -> tuple:
        return ("field", self.name)

    def overload_key(self) -> tuple:
        return ()

    def referenced_types(self) -> Iterator[TypeRef]:
        yield from self.type.referenced_types()
        for annotation in self.options.annotations:
            yield from annotation.referenced_types()


@dataclass
class _Executable:
    """Shared shape of constructors and methods."""

    name: str
    documentation: str
    parameters: Tuple[Parameter, ...]
    modifier_text: str
    body: Optional[str]
    options: MemberOptions

    @property
    def category(self) -> str:
        return self.options.category

    def parameter_types(self) -> Tuple[str, ...]:
        return signature(self.parameters)

    def overload_key(self) -> tuple:
        """
        Tie-break between members of equal name.

        Overloads that do not preserve declaration order sort by parameter
        type names (a shorter list that is a prefix of a longer one first),
        ahead of the ones that do.
        """
        if self.options.preserve_order:
            return (1,)
        return (0, tuple(p.type.simple_name for p in self.parameters))

    def referenced_types(self) -> Iterator[TypeRef]:
        for parameter in self.parameters:
            yield from parameter.referenced_types()
        for type_parameter in self.options.type_parameters:
            yield from type_parameter.referenced_types()
        for annotation in self.options.annotations:
            yield from annotation.referenced_types()


@dataclass
class Constructor(_Executable):
    """A constructor; ``name`` is the name of the declaring class."""

    weight: ClassVar[int] = WEIGHT_CONSTRUCTOR

    def identity(self) -> tuple:
        return ("constructor", self.parameter_types())


@dataclass
class Method(_Executable):
    """A method; a ``None`` body declares it without implementation."""

    weight: ClassVar[int] = WEIGHT_METHOD

    return_type: TypeLike = None
    return_doc: str = ""

    def identity(self) -> tuple:
        return ("method", self.name, self.parameter_types())

    def referenced_types(self) -> Iterator[TypeRef]:
        yield from self.return_type.referenced_types()
        yield from super().referenced_types()


def member_sort_key(member) -> tuple:
    """Canonical ordering: category, kind weight, name, overload tie-break."""
    return (member.category, member.weight, member.name, member.overload_key())
