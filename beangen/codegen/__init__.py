"""
beangen code generation module.

Generates Java sources from builder-style type descriptions.
"""

from .registry import (
    RegistryError,
    ValueType,
    ValueTypeRegistry,
    get_registry,
    get_value_type,
)
from .core.generator import CodeGenerator, GenerationResult, generate_code, generate_all
from .core.config import GeneratorConfig, ConfigManager, load_config
from .java import JavaGenerator, create_java_generator


def render_type(java_type, config=None) -> str:
    """
    Render a top-level type to source text.

    Raises on any invalid descriptor instead of returning a failed result.
    """
    generator = JavaGenerator(config)
    return generator.format_code(generator.generate(java_type))


def generate_source(java_type, config=None):
    """Generate one type, returning a failed result instead of raising."""
    return generate_code(JavaGenerator(config), java_type)


def generate_sources(java_types, config=None):
    """
    Generate every type independently.

    Returns:
        One GenerationResult per type, in the given order
    """
    return generate_all(JavaGenerator(config), java_types)


__all__ = [
    "CodeGenerator",
    "GenerationResult",
    "GeneratorConfig",
    "ConfigManager",
    "JavaGenerator",
    "RegistryError",
    "ValueType",
    "ValueTypeRegistry",
    "create_java_generator",
    "generate_code",
    "generate_all",
    "generate_source",
    "generate_sources",
    "get_registry",
    "get_value_type",
    "load_config",
    "render_type",
]
