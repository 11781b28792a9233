"""
Value type registry.

Templates generate one type per registered value type (``IntProperty``,
``LongProperty``, ...). The registry is the fixed table they iterate over.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence

from ..logging_config import get_logger
from .java.types import TypeRef, java_lang, primitive

logger = get_logger(__name__)


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


@dataclass(frozen=True)
class ValueType:
    """
    One value type a template family is generated for.

    Attributes:
        name: Primitive type name, e.g. ``int``
        abbreviated_name: Name fragment used in generated type names, e.g. ``Int``
        boxed_type_name: Simple name of the wrapper class, e.g. ``Integer``
        null_value: Source literal of the default value, e.g. ``0``
    """

    name: str
    abbreviated_name: str
    boxed_type_name: str
    null_value: str

    def __str__(self) -> str:
        return self.name

    @property
    def type_ref(self) -> TypeRef:
        return primitive(self.name)

    @property
    def boxed_type(self) -> TypeRef:
        return java_lang(self.boxed_type_name)


class ValueTypeRegistry:
    """Registry of value types, kept in registration order."""

    def __init__(self):
        """Initialize empty registry."""
        self._types: Dict[str, ValueType] = {}
        self._aliases: Dict[str, str] = {}

    def __iter__(self) -> Iterator[ValueType]:
        return iter(list(self._types.values()))

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: str) -> bool:
        key = name.lower()
        return key in self._types or key in self._aliases

    def register(
        self,
        value_type: ValueType,
        aliases: Optional[Sequence[str]] = None,
        replace: bool = False,
    ):
        """
        Register a value type.

        Args:
            value_type: Value type to register
            aliases: Alternative lookup names
            replace: Replace an existing registration instead of failing

        Raises:
            RegistryError: If the name or an alias is already taken
        """
        key = value_type.name.lower()

        if not replace:
            if key in self._types:
                raise RegistryError(f"Value type already registered: {value_type.name}")
            if key in self._aliases:
                raise RegistryError(
                    f"Value type '{value_type.name}' conflicts with an alias of "
                    f"'{self._aliases[key]}'"
                )

        aliases = [alias for alias in aliases or () if alias.lower() != key]

        if not replace:
            for alias in aliases:
                alias_key = alias.lower()
                if alias_key in self._types:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with an existing value type"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

        self._types[key] = value_type
        for alias in aliases:
            self._aliases[alias.lower()] = key

        logger.debug("Registered value type %s", value_type.name)

    def unregister(self, name: str):
        """Remove a value type and its aliases."""
        key = name.lower()
        self._types.pop(key, None)

        for alias in [a for a, target in self._aliases.items() if target == key]:
            del self._aliases[alias]

    def get(self, name: str) -> ValueType:
        """
        Look up a value type by name or alias.

        Raises:
            RegistryError: If no such value type is registered
        """
        key = name.lower()

        if key in self._types:
            return self._types[key]
        if key in self._aliases:
            return self._types[self._aliases[key]]

        raise RegistryError(
            f"No value type registered for: {name}. "
            f"Available: {', '.join(self.list_names())}"
        )

    def list_names(self) -> List[str]:
        """Registered value type names, in registration order."""
        return [value_type.name for value_type in self._types.values()]

    def get_aliases(self, name: str) -> List[str]:
        """All aliases of a value type."""
        key = name.lower()
        return sorted(alias for alias, target in self._aliases.items() if target == key)


PRIMITIVE_VALUE_TYPES = (
    (ValueType("boolean", "Bool", "Boolean", "false"), ["bool"]),
    (ValueType("byte", "Byte", "Byte", "0"), []),
    (ValueType("char", "Char", "Character", "'\\u0000'"), ["character"]),
    (ValueType("double", "Double", "Double", "0.0D"), []),
    (ValueType("float", "Float", "Float", "0.0F"), []),
    (ValueType("int", "Int", "Integer", "0"), ["integer"]),
    (ValueType("long", "Long", "Long", "0L"), []),
    (ValueType("short", "Short", "Short", "0"), []),
)


def create_primitive_registry() -> ValueTypeRegistry:
    """Create a registry holding the eight Java primitive types."""
    registry = ValueTypeRegistry()
    for value_type, aliases in PRIMITIVE_VALUE_TYPES:
        registry.register(value_type, aliases=aliases)
    return registry


# Global registry instance - created once
_global_registry: Optional[ValueTypeRegistry] = None


def get_registry() -> ValueTypeRegistry:
    """Get the global value type registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = create_primitive_registry()
    return _global_registry


def get_value_type(name: str) -> ValueType:
    """Look up a value type in the global registry."""
    return get_registry().get(name)
