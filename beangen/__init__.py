"""
beangen - Java source generator for observable property types.

Describe classes and interfaces with a builder API and render them into
deterministically ordered and formatted Java source files.
"""

from .codegen import (
    GenerationResult,
    GeneratorConfig,
    ValueType,
    generate_source,
    generate_sources,
    get_registry,
    load_config,
    render_type,
)
from .codegen.java import *  # noqa: F401,F403
from .codegen.java import __all__ as _java_all
from .logging_config import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "ValueType",
    "configure_logging",
    "generate_source",
    "generate_sources",
    "get_logger",
    "get_registry",
    "load_config",
    "render_type",
    *_java_all,
]
