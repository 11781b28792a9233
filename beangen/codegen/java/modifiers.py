"""
Modifier validation for generated Java declarations.

Which modifiers a declaration may carry depends on what is declared and
where. The rules are a fixed table keyed by ``(MemberKind, Enclosing)``;
every modifier missing from a table entry is illegal there.
"""

from enum import Enum, IntFlag
from typing import Callable, Dict, List, Optional, Tuple, Union

from ...logging_config import get_logger

logger = get_logger(__name__)


class IllegalModifierError(ValueError):
    """Raised for a modifier (or combination) that is not legal in context."""

    pass


class Modifier(IntFlag):
    """Modifier bits, numerically identical to ``java.lang.reflect.Modifier``."""

    NONE = 0
    PUBLIC = 0x001
    PRIVATE = 0x002
    PROTECTED = 0x004
    STATIC = 0x008
    FINAL = 0x010
    SYNCHRONIZED = 0x020
    VOLATILE = 0x040
    TRANSIENT = 0x080
    NATIVE = 0x100
    INTERFACE = 0x200
    ABSTRACT = 0x400
    STRICT = 0x800


PUBLIC = Modifier.PUBLIC
PRIVATE = Modifier.PRIVATE
PROTECTED = Modifier.PROTECTED
STATIC = Modifier.STATIC
FINAL = Modifier.FINAL
SYNCHRONIZED = Modifier.SYNCHRONIZED
VOLATILE = Modifier.VOLATILE
TRANSIENT = Modifier.TRANSIENT
NATIVE = Modifier.NATIVE
INTERFACE = Modifier.INTERFACE
ABSTRACT = Modifier.ABSTRACT
STRICT = Modifier.STRICT

ACCESS_MODIFIERS = PUBLIC | PROTECTED | PRIVATE


class MemberKind(Enum):
    """What is being declared."""

    FIELD = "field"
    CONSTRUCTOR = "constructor"
    METHOD = "method"
    CLASS = "class"
    INTERFACE = "interface"


class Enclosing(Enum):
    """Where it is declared."""

    NONE = "top-level"
    CLASS = "class"
    INTERFACE = "interface"


class Verdict(Enum):
    """Outcome of checking one requested modifier."""

    EMIT = "emit"
    REDUNDANT = "redundant"
    ILLEGAL = "illegal"


# Canonical output order. "default" is synthesized, never requested.
_CANONICAL_ORDER: Tuple[Tuple[Optional[Modifier], str], ...] = (
    (PUBLIC, "public"),
    (PROTECTED, "protected"),
    (PRIVATE, "private"),
    (ABSTRACT, "abstract"),
    (STATIC, "static"),
    (FINAL, "final"),
    (TRANSIENT, "transient"),
    (VOLATILE, "volatile"),
    (None, "default"),
    (SYNCHRONIZED, "synchronized"),
    (NATIVE, "native"),
    (STRICT, "strictfp"),
    (INTERFACE, "interface"),
)

Rule = Union[Verdict, Callable[[Modifier], Verdict]]

EMIT = Verdict.EMIT
REDUNDANT = Verdict.REDUNDANT
ILLEGAL = Verdict.ILLEGAL


def _unless(conflict: Modifier, otherwise: Verdict = EMIT) -> Rule:
    """Illegal when combined with ``conflict``, ``otherwise`` on its own."""
    return lambda requested: ILLEGAL if requested & conflict else otherwise


def _only_with(required: Modifier, verdict: Verdict = EMIT) -> Rule:
    """``verdict`` when combined with ``required``, illegal on its own."""
    return lambda requested: verdict if requested & required else ILLEGAL


_TYPE_IN_CLASS: Dict[Modifier, Rule] = {
    PUBLIC: EMIT,
    PROTECTED: EMIT,
    PRIVATE: EMIT,
    ABSTRACT: EMIT,
    STATIC: EMIT,
    FINAL: _unless(ABSTRACT),
}

_INTERFACE_NESTED: Dict[Modifier, Rule] = {
    ABSTRACT: REDUNDANT,
    STATIC: REDUNDANT,
    INTERFACE: REDUNDANT,
}

RULES: Dict[Tuple[MemberKind, Enclosing], Dict[Modifier, Rule]] = {
    # Types
    (MemberKind.CLASS, Enclosing.NONE): {
        PUBLIC: EMIT,
        ABSTRACT: EMIT,
        FINAL: _unless(ABSTRACT),
    },
    (MemberKind.CLASS, Enclosing.CLASS): _TYPE_IN_CLASS,
    (MemberKind.CLASS, Enclosing.INTERFACE): {
        PUBLIC: REDUNDANT,
        ABSTRACT: EMIT,
        STATIC: REDUNDANT,
        FINAL: _unless(ABSTRACT),
    },
    (MemberKind.INTERFACE, Enclosing.NONE): {
        PUBLIC: EMIT,
        ABSTRACT: REDUNDANT,
        INTERFACE: REDUNDANT,
    },
    (MemberKind.INTERFACE, Enclosing.CLASS): {
        PUBLIC: EMIT,
        PROTECTED: EMIT,
        PRIVATE: EMIT,
        **_INTERFACE_NESTED,
    },
    (MemberKind.INTERFACE, Enclosing.INTERFACE): {
        PUBLIC: REDUNDANT,
        **_INTERFACE_NESTED,
    },
    # Fields
    (MemberKind.FIELD, Enclosing.CLASS): {
        PUBLIC: EMIT,
        PROTECTED: EMIT,
        PRIVATE: EMIT,
        STATIC: EMIT,
        FINAL: EMIT,
        VOLATILE: _unless(FINAL),
    },
    (MemberKind.FIELD, Enclosing.INTERFACE): {
        PUBLIC: REDUNDANT,
        STATIC: REDUNDANT,
        FINAL: REDUNDANT,
    },
    # Constructors
    (MemberKind.CONSTRUCTOR, Enclosing.CLASS): {
        PUBLIC: EMIT,
        PROTECTED: EMIT,
        PRIVATE: EMIT,
    },
    # Methods
    (MemberKind.METHOD, Enclosing.CLASS): {
        PUBLIC: EMIT,
        PROTECTED: EMIT,
        PRIVATE: _unless(ABSTRACT),
        ABSTRACT: EMIT,  # body and enclosing type are checked separately
        STATIC: _unless(ABSTRACT),
        FINAL: _unless(ABSTRACT),
        SYNCHRONIZED: _unless(ABSTRACT),
        NATIVE: _unless(ABSTRACT),
        STRICT: _unless(ABSTRACT),
    },
    (MemberKind.METHOD, Enclosing.INTERFACE): {
        PUBLIC: REDUNDANT,
        PRIVATE: _only_with(STATIC),
        ABSTRACT: _unless(STATIC, REDUNDANT),
        STATIC: EMIT,
        FINAL: _only_with(STATIC, REDUNDANT),
        STRICT: _only_with(STATIC),
    },
}


def _describe(kind: MemberKind, enclosing: Enclosing, name: str) -> str:
    subject = f'{kind.value} "{name}"' if name else kind.value
    if enclosing is Enclosing.NONE:
        return f"top-level {subject}"
    return f"{subject} in {enclosing.value}"


def validate_modifiers(
    modifiers: int,
    kind: MemberKind,
    enclosing: Enclosing,
    *,
    name: str = "",
    has_body: bool = False,
    enclosing_abstract: bool = False,
    warnings: Optional[List[str]] = None,
) -> str:
    """
    Check requested modifiers and return them as canonical source text.

    Args:
        modifiers: Requested ``Modifier`` bits
        kind: Kind of the declaration
        enclosing: Kind of the enclosing declaration
        name: Declared name, used in messages
        has_body: Whether a method declaration carries a body
        enclosing_abstract: Whether the enclosing class is abstract
        warnings: Optional sink collecting redundant-modifier messages

    Returns:
        Space separated modifiers in canonical order (may be empty)

    Raises:
        IllegalModifierError: For any illegal modifier or combination
    """
    requested = Modifier(modifiers)
    where = _describe(kind, enclosing, name)

    table = RULES.get((kind, enclosing))
    if table is None:
        raise IllegalModifierError(f"A {kind.value} cannot be declared in {enclosing.value}")

    if bin(requested & ACCESS_MODIFIERS).count("1") > 1:
        raise IllegalModifierError(f"Conflicting access modifiers on {where}")

    if kind is MemberKind.METHOD and requested & ABSTRACT:
        if has_body:
            raise IllegalModifierError(f'"abstract" modifier combined with method body on {where}')
        if enclosing is Enclosing.CLASS and not enclosing_abstract:
            raise IllegalModifierError(f'Illegal modifier "abstract" on {where}: enclosing class is not abstract')

    keywords = []
    redundant = []
    for flag, keyword in _CANONICAL_ORDER:
        if flag is None:
            if (
                kind is MemberKind.METHOD
                and enclosing is Enclosing.INTERFACE
                and has_body
                and not requested & STATIC
            ):
                keywords.append(keyword)
            continue

        if not requested & flag:
            continue

        rule = table.get(flag, ILLEGAL)
        verdict = rule(requested) if callable(rule) else rule

        if verdict is ILLEGAL:
            raise IllegalModifierError(f'Illegal modifier "{keyword}" on {where}')

        if verdict is REDUNDANT:
            redundant.append(f'Redundant modifier "{keyword}" on {where}')
            continue

        keywords.append(keyword)

    # Reported only once the whole declaration is accepted
    for message in redundant:
        logger.warning(message)
    if warnings is not None:
        warnings.extend(redundant)

    return " ".join(keywords)
