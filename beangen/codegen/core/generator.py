"""
Base generator interface for all code generation targets.

Defines the contract that language generators implement, and the
error-isolating entry points that turn descriptors into source text.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        template_engine: Optional[TemplateEngine] = None,
    ):
        """Initialize generator with optional configuration."""
        self.config = config or load_config()
        self._template_engine = template_engine

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Taken from the ``template_dir`` custom setting; ``None`` selects the
        built-in in-memory templates.
        """
        template_dir = self.config.custom.get("template_dir")
        return Path(template_dir) if template_dir else None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(
                self.get_template_directory()
            )
        return self._template_engine

    @abstractmethod
    def generate(self, target) -> str:
        """
        Generate the complete source text of one target.

        Raises:
            ValueError: (or a subclass) for invalid descriptors
            TemplateError: If a template fails to render
        """
        pass

    def collect_warnings(self, target) -> List[str]:
        """Return non-fatal problems noticed while building ``target``."""
        return []

    def output_path(self, target) -> Path:
        """Relative output path of a target, derived from its package and name."""
        package = getattr(target, "package", "")
        parts = package.split(".") if package else []
        return Path(*parts, f"{target.name}{self.file_extension}")

    def format_code(self, code: str) -> str:
        """
        Normalize whitespace of generated code.

        Strips trailing whitespace and applies the configured line ending.
        """
        lines = [line.rstrip() for line in code.split("\n")]
        return self.config.line_ending.join(lines)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[BaseException] = None

    @classmethod
    def error(
        cls,
        message: str,
        exception: Optional[BaseException] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="", metadata=metadata)
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    def raise_for_error(self) -> "GenerationResult":
        """Raise ``GeneratorError`` if generation failed, else return self."""
        if not self.success:
            raise GeneratorError(self.error_message) from self.exception
        return self


def generate_code(generator: CodeGenerator, target) -> GenerationResult:
    """
    Generate code for one target with error handling.

    A failure aborts this target only: the result carries no code, the
    error message and the original exception.

    Args:
        generator: Code generator instance
        target: Descriptor to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "name": target.name,
        "output_path": generator.output_path(target).as_posix(),
    }

    try:
        code = generator.format_code(generator.generate(target))
    except (ValueError, TemplateError) as e:
        logger.error("Generation of %s failed: %s", target.name, e)
        return GenerationResult.error(
            f"Code generation failed for {target.name}: {e}",
            exception=e,
            metadata=metadata,
        )

    logger.info("Generated %s", metadata["output_path"])
    return GenerationResult(code, generator.collect_warnings(target), metadata)


def generate_all(generator: CodeGenerator, targets: Iterable) -> List[GenerationResult]:
    """Generate every target independently, in the given order."""
    return [generate_code(generator, target) for target in targets]
